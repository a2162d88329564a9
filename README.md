# notacao

Converts arithmetic expressions between infix and postfix (reverse Polish)
notation and evaluates them.

## Supported syntax

- Numbers: digits with an optional decimal point (`3`, `2.5`, `.75`).
- Binary operators: `+`, `-`, `*`, `/`, `^` (power).
- `R`: square root. In infix it is written before its operand (`R9`). When a
  postfix expression is evaluated it takes the single value before it
  (`9 R` gives `3`).
- In infix only, `s(NUM)` and `c(NUM)` give the sine and cosine of an angle in
  degrees. They are worked out during conversion and written to the postfix
  output as six-decimal numbers.
- Parentheses group subexpressions in infix. Whitespace in infix is ignored;
  postfix tokens are separated by spaces.

Precedence, from lowest to highest: `+ -`, then `* /`, then `^ R`. Operators
with equal precedence are left-associative, `^` included.

## Library use

```python
from notacao.expressao import (
    infix_to_postfix,
    postfix_to_infix,
    evaluate_postfix,
    evaluate_infix,
    ExpressionError,
    ConversionError,
    EvaluationError,
)

infix_to_postfix("(1 + 2) * 3")    # "1 2 + 3 *"
evaluate_postfix("1 2 + 3 *")       # 9.0
evaluate_infix("2 ^ 3 - s(90)")     # 7.0
postfix_to_infix("1 2 + 3 *")       # "((1 + 2) * 3)"
```

`evaluate_infix` converts to postfix and evaluates the result.

`postfix_to_infix` builds a fully parenthesised expression. It treats every
operator, `R` included, as taking two operands. When several values are left
at the end, it returns the last one built.

### Errors

Both error classes are subclasses of `ExpressionError`, itself a
`ValueError`.

- `ConversionError`: unbalanced parentheses in `infix_to_postfix`; an
  operator without two operands, or an empty expression, in
  `postfix_to_infix`.
- `EvaluationError`: from `evaluate_postfix` (and so `evaluate_infix`) on a
  missing operand, operands left over, an empty expression, division by zero
  or the square root of a negative number.

`precedence(op)` returns the binding strength used by the converter: 1 for
`+ -`, 2 for `* /`, 3 for `^ R`, 4 for `s c`, and 0 for anything else.

## Interactive menu

```
notacao
```

This opens a menu on standard input and output with four options:

1. Convert an infix expression to postfix and evaluate it.
2. Convert a postfix expression to infix and evaluate it. Sine and cosine
   are not accepted here.
3. Evaluate a postfix expression.
4. Quit.

Results are printed with six decimal places. When an expression cannot be
evaluated, an error message is printed and the result is shown as
`0.000000`. The menu also ends when input runs out.

`notacao.cli.run(stdin, stdout)` runs the same menu on any pair of text
streams.