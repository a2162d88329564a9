import io

import pytest

from notacao.cli import MENU, main, run
from notacao.expressao import evaluate_postfix, infix_to_postfix, postfix_to_infix


def _session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_quit_immediately():
    out = _session("4\n")
    assert out.count("--- MENU ---") == 1
    assert out.endswith("Saindo...\n")


def test_end_of_input_stops_without_quitting():
    out = _session("")
    assert out == MENU
    assert "Saindo..." not in out


def test_convert_infix_shows_postfix_and_result():
    out = _session("1\n(1+2)*3\n4\n")
    postfix = infix_to_postfix("(1+2)*3")
    assert f"Expressao pos-fixada: {postfix}\n" in out
    assert f"Resultado: {evaluate_postfix(postfix):.6f}\n" in out


def test_convert_infix_error():
    out = _session("1\n(1+2\n4\n")
    assert "Erro na conversao.\n" in out
    assert "Resultado:" not in out


def test_convert_postfix_shows_infix_and_result():
    out = _session("2\n3 4 +\n4\n")
    assert f"Expressao infixada: {postfix_to_infix('3 4 +')}\n" in out
    assert f"Resultado: {evaluate_postfix('3 4 +'):.6f}\n" in out


def test_convert_postfix_invalid():
    out = _session("2\n+\n4\n")
    assert "Expressao pos-fixada invalida.\n" in out


def test_evaluation_error_reports_zero():
    out = _session("3\n1 0 /\n4\n")
    assert "Erro na avaliacao da expressao\n" in out
    assert "Resultado: 0.000000\n" in out


def test_invalid_input_shows_menu_again():
    out = _session("abc\n4\n")
    assert "Entrada invalida.\n" in out
    assert out.count("--- MENU ---") == 2


@pytest.mark.parametrize("option", ["0", "9", "-1"])
def test_unknown_option(option):
    out = _session(f"{option}\n4\n")
    assert "Opcao invalida.\n" in out
    assert out.count("--- MENU ---") == 2


def test_missing_expression_line():
    out = _session("1\n")
    assert "Erro na leitura\n" in out


def test_several_requests_in_one_session():
    out = _session("3\n2 3 +\n3\n16 R\n4\n")
    assert out.count("Resultado:") == 2
    assert f"Resultado: {evaluate_postfix('16 R'):.6f}\n" in out
    assert out.count("--- MENU ---") == 3


def test_blank_lines_before_option_are_skipped():
    out = _session("\n\n4\n")
    assert out.count("--- MENU ---") == 1
    assert "Saindo...\n" in out


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2 3 *\n4\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert f"Resultado: {evaluate_postfix('2 3 *'):.6f}\n" in captured
    assert "Saindo...\n" in captured