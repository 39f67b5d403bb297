# numinterp

`numinterp` checks whether a piece of text is a well-formed number. It is a
small grammar interpreter. Each rule of the grammar is an expression object.
The expression consumes tokens from a shared context and moves the cursor back
when a match fails.

## Accepted forms

Before matching, ASCII letters are folded to lower case, so matching ignores
case. A string is accepted only when the **whole** string is one of the
following:

- a constant: an optional sign followed by `inf` or `nan`
  (`inf`, `-NaN`, `+Inf`);
- a float: a signed integer part, then an optional fraction, then an optional
  exponent:
  - signed integer: an optional `+` or `-`, then either a lone `0` or one or
    more digits;
  - fraction: `.` followed by one or more digits;
  - exponent: `e` followed by a signed integer.

A lone `0` is tried before a run of digits. Because of this, a number that
starts with `0` and has more digits after it, such as `007` or `01`, is
rejected. The same holds inside an exponent, so `1e05` is rejected.

These strings are accepted: `42`, `-7`, `0`, `3.14`, `+1e10`, `2.5E-3`, `nan`.

These strings are rejected:

- `.5`, because there is no integer part;
- `1.`, because the fraction has no digits;
- `1e`, because the exponent has no value;
- `007`;
- `infinity`;
- `abc`;
- the empty string.

## Library use

```python
from numinterp.interpreter import Interpreter

interpreter = Interpreter()
interpreter.interpret("-12.5e3")   # True
interpreter.interpret(".5")        # False
```

`numinterp.interpreter.tokenize(text)` turns a string into a list of `Token`
objects, one per character, with ASCII letters folded to lower case.

### The grammar rules

The grammar rules live in `numinterp.expressions`. Each one has
`interpret(context)`, which returns whether it matched at the cursor:

- `SignExpression`
- `DigitExpression` and `DigitsExpression`
- `SignedIntegerExpression`
- `ExponentExpression`
- `FractionExpression`
- `FloatExpression`
- `ConstantExpression`

`AndExpression(left, right)` and `OrExpression(left, right)` combine two
expressions.

### The context

A `numinterp.context.Context` holds the tokens and a cursor. It provides:

- `is_finished()`
- `remaining()`
- `advance(length)`
- `get_tokens(length)`
- `dump()` and `restore(image)`, which save the cursor position and return to
  it.

For example, a single rule can be run on its own context:

```python
from numinterp.context import Context
from numinterp.expressions import ExponentExpression
from numinterp.interpreter import tokenize

context = Context(tokenize("e+12"))
ExponentExpression().interpret(context)   # True
context.is_finished()                     # True
```

## Command line

The `numinterp` command reads standard input and takes the first
whitespace-delimited word. It prints `1` if that word is a valid number and
`0` otherwise. If standard input is empty, it prints `0`.

```console
$ echo 1.5e-3 | numinterp
1
$ echo .5 | numinterp
0
```

## What it does not do

`numinterp` only recognises numbers:

- It does not convert text to a numeric value.
- It does not report where a match failed.
- It does not accept hexadecimal, digit separators or surrounding whitespace.

## Running the tests

```console
pip install -e ".[test]"
pytest
```