"""Interactive menu for converting and evaluating expressions."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, TextIO

from notacao.expressao import (
    ConversionError,
    EvaluationError,
    evaluate_postfix,
    infix_to_postfix,
    postfix_to_infix,
)

_MAX_LINE = 255
_OPTION = re.compile(r"[+-]?\d+")

MENU = (
    "\n--- MENU ---\n"
    "1. Converter infixa para pos-fixada - OBS: Le seno e cosseno\n"
    "2. Converter pos-fixada para infixa - OBS: Não suporta seno ou cosseno\n"
    "3. Avaliar expressao pos-fixada\n"
    "4. Sair\n"
    "Escolha uma opcao: "
)


class _Console:
    """Reads menu options and expression lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._pending += line
        return True

    def read_option(self) -> Optional[int]:
        """Return the next integer option, or None if the input is not a number.

        Raises EOFError when the input is exhausted.
        """
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                break
            if not self._fill():
                raise EOFError

        match = _OPTION.match(self._pending)
        if match:
            self._pending = self._pending[match.end():]
            if not self._pending:
                self._fill()
            self._pending = self._pending[1:]
            return int(match.group())

        while "\n" not in self._pending:
            if not self._fill():
                raise EOFError
        self._pending = self._pending.split("\n", 1)[1]
        return None

    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        if not self._pending and not self._fill():
            return None
        newline = self._pending.find("\n")
        cut = len(self._pending) if newline < 0 else newline + 1
        cut = min(cut, _MAX_LINE)
        chunk, self._pending = self._pending[:cut], self._pending[cut:]
        return chunk.split("\n", 1)[0]


def _report_evaluation(postfix: str, stdout: TextIO) -> None:
    try:
        result = evaluate_postfix(postfix)
    except EvaluationError:
        stdout.write("Erro na avaliacao da expressao\n")
        result = 0.0
    stdout.write(f"Resultado: {result:.6f}\n")


def _convert_infix(console: _Console, stdout: TextIO) -> None:
    stdout.write("Digite a expressao infixada:\n")
    stdout.write("Para seno ou cosseno, use s(NUM) ou c(NUM)\n")
    line = console.read_line()
    if line is None:
        stdout.write("Erro na leitura\n")
        return
    try:
        postfix = infix_to_postfix(line)
    except ConversionError:
        stdout.write("Erro na conversao.\n")
        return
    stdout.write(f"Expressao pos-fixada: {postfix}\n")
    _report_evaluation(postfix, stdout)


def _convert_postfix(console: _Console, stdout: TextIO) -> None:
    stdout.write("Digite a expressao pos-fixada:\n")
    stdout.write("Obs: Não suporta seno/cosseno aqui, informe valores ja calculados.\n")
    line = console.read_line()
    if line is None:
        stdout.write("Erro na leitura\n")
        return
    try:
        infix = postfix_to_infix(line)
    except ConversionError:
        stdout.write("Expressao pos-fixada invalida.\n")
        return
    stdout.write(f"Expressao infixada: {infix}\n")
    _report_evaluation(line, stdout)


def _evaluate(console: _Console, stdout: TextIO) -> None:
    stdout.write("Digite a expressao pos-fixada para avaliar: ")
    line = console.read_line()
    if line is None:
        stdout.write("Erro na leitura\n")
        return
    _report_evaluation(line, stdout)


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Show the menu and serve requests until the user quits or input ends."""
    console = _Console(stdin)
    actions = {1: _convert_infix, 2: _convert_postfix, 3: _evaluate}
    while True:
        stdout.write(MENU)
        try:
            option = console.read_option()
        except EOFError:
            return
        if option is None:
            stdout.write("Entrada invalida.\n")
            continue
        if option == 4:
            stdout.write("Saindo...\n")
            return
        action = actions.get(option)
        if action is None:
            stdout.write("Opcao invalida.\n")
        else:
            action(console, stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point of the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="notacao",
        description="Convert and evaluate infix and postfix expressions.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())