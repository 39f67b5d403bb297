"""Top-level recogniser that decides whether a string spells a number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from numinterp.context import Context, Token, make_token
from numinterp.expressions import ConstantExpression, FloatExpression

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into one token per character, folding ASCII letters to lower case."""
    return [make_token(char) for char in text.translate(_UPPER_TO_LOWER)]


class Interpreter:
    """Recognises integers, decimals with exponents, and signed ``inf``/``nan``."""

    def __init__(self) -> None:
        self.const_exp = ConstantExpression()
        self.float_exp = FloatExpression()

    def interpret(self, text: str) -> bool:
        """Return whether the whole of ``text`` is a number or a special constant."""
        context = Context(tokenize(text))
        if self.const_exp.interpret(context):
            return context.is_finished()
        return self.float_exp.interpret(context) and context.is_finished()


def main(argv: Sequence[str] | None = None) -> int:
    """Read one word from standard input and print 1 if it is a number, else 0."""
    parser = argparse.ArgumentParser(
        prog="numinterp",
        description="Read a word from standard input and report whether it is a number.",
    )
    parser.parse_args(argv)

    words = sys.stdin.read().split()
    word = words[0] if words else ""
    print(int(Interpreter().interpret(word)))
    return 0