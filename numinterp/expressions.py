"""Grammar expressions that recognise the parts of a number in a context."""

from __future__ import annotations

from abc import ABC, abstractmethod

from numinterp.context import Context, Token, TokenSequence, make_token, token_size


class Expression(ABC):
    """Something that can try to consume tokens from a context."""

    @abstractmethod
    def interpret(self, context: Context) -> bool:
        """Try to match at the cursor; return whether it matched."""


class NonTerminalExpression(Expression):
    """An expression built from other expressions."""


class TerminalExpression(Expression):
    """An expression that matches tokens directly."""


def _consume_token(context: Context, expected: Token) -> bool:
    if context.is_finished():
        return False
    if context.get_tokens(token_size(expected)) == expected:
        context.advance(token_size(expected))
        return True
    return False


def _consume_sequence(context: Context, expected: TokenSequence) -> bool:
    if context.is_finished() or context.remaining() < len(expected):
        return False
    if context.get_tokens(len(expected)) == expected:
        context.advance(len(expected))
        return True
    return False


class AndExpression(NonTerminalExpression):
    """Matches both expressions in order, or consumes nothing."""

    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> bool:
        image = context.dump()
        if self.left.interpret(context) and self.right.interpret(context):
            return True
        context.restore(image)
        return False


class OrExpression(NonTerminalExpression):
    """Matches the first expression, or else the second."""

    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> bool:
        return self.left.interpret(context) or self.right.interpret(context)


class PlusExpression(TerminalExpression):
    """Matches ``+``."""

    symbol = make_token("+")

    def interpret(self, context: Context) -> bool:
        return _consume_token(context, self.symbol)


class MinusExpression(TerminalExpression):
    """Matches ``-``."""

    symbol = make_token("-")

    def interpret(self, context: Context) -> bool:
        return _consume_token(context, self.symbol)


class SignExpression(NonTerminalExpression):
    """Matches ``-`` or ``+``."""

    def __init__(self) -> None:
        self.minus = MinusExpression()
        self.plus = PlusExpression()
        self._either = OrExpression(self.minus, self.plus)

    def interpret(self, context: Context) -> bool:
        return self._either.interpret(context)


class DigitExpression(NonTerminalExpression):
    """Matches one decimal digit."""

    symbols = tuple(make_token(char) for char in "0123456789")

    def interpret(self, context: Context) -> bool:
        return any(_consume_token(context, symbol) for symbol in self.symbols)


class DigitsExpression(NonTerminalExpression):
    """Matches one or more decimal digits, as many as are present."""

    def __init__(self) -> None:
        self.digit = DigitExpression()

    def interpret(self, context: Context) -> bool:
        if not self.digit.interpret(context):
            return False
        while self.digit.interpret(context):
            pass
        return True


class ZeroExpression(TerminalExpression):
    """Matches ``0``."""

    symbol = make_token("0")

    def interpret(self, context: Context) -> bool:
        return _consume_token(context, self.symbol)


class SignedIntegerExpression(NonTerminalExpression):
    """Matches an optional sign followed by a lone zero or a run of digits."""

    def __init__(self) -> None:
        self.sign = SignExpression()
        self.zero = ZeroExpression()
        self.digits = DigitsExpression()
        self._value = OrExpression(self.zero, self.digits)

    def interpret(self, context: Context) -> bool:
        image = context.dump()
        self.sign.interpret(context)
        if not self._value.interpret(context):
            context.restore(image)
            return False
        return True


class ExpExpression(TerminalExpression):
    """Matches the exponent marker ``e``."""

    symbol = make_token("e")

    def interpret(self, context: Context) -> bool:
        return _consume_token(context, self.symbol)


class ExponentExpression(NonTerminalExpression):
    """Matches ``e`` followed by a signed integer."""

    def __init__(self) -> None:
        self.exp = ExpExpression()
        self.signed_int = SignedIntegerExpression()

    def interpret(self, context: Context) -> bool:
        image = context.dump()
        if not self.exp.interpret(context):
            return False
        if not self.signed_int.interpret(context):
            context.restore(image)
            return False
        return True


class DotExpression(TerminalExpression):
    """Matches ``.``."""

    symbol = make_token(".")

    def interpret(self, context: Context) -> bool:
        return _consume_token(context, self.symbol)


class FractionExpression(NonTerminalExpression):
    """Matches ``.`` followed by digits."""

    def __init__(self) -> None:
        self.dot = DotExpression()
        self.digits = DigitsExpression()

    def interpret(self, context: Context) -> bool:
        image = context.dump()
        if not self.dot.interpret(context):
            return False
        if not self.digits.interpret(context):
            context.restore(image)
            return False
        return True


class FloatExpression(NonTerminalExpression):
    """Matches a signed integer with an optional fraction and exponent."""

    def __init__(self) -> None:
        self.signed_int = SignedIntegerExpression()
        self.fraction = FractionExpression()
        self.exponent = ExponentExpression()

    def interpret(self, context: Context) -> bool:
        if not self.signed_int.interpret(context):
            return False
        self.fraction.interpret(context)
        self.exponent.interpret(context)
        return True


class InfExpression(TerminalExpression):
    """Matches ``inf``."""

    sequence = TokenSequence(make_token(char) for char in "inf")

    def interpret(self, context: Context) -> bool:
        return _consume_sequence(context, self.sequence)


class NanExpression(TerminalExpression):
    """Matches ``nan``."""

    sequence = TokenSequence(make_token(char) for char in "nan")

    def interpret(self, context: Context) -> bool:
        return _consume_sequence(context, self.sequence)


class ConstantExpression(NonTerminalExpression):
    """Matches an optional sign followed by ``inf`` or ``nan``."""

    def __init__(self) -> None:
        self.sign = SignExpression()
        self.inf = InfExpression()
        self.nan = NanExpression()
        self._value = OrExpression(self.inf, self.nan)

    def interpret(self, context: Context) -> bool:
        image = context.dump()
        self.sign.interpret(context)
        if not self._value.interpret(context):
            context.restore(image)
            return False
        return True