"""Tokens, token sequences and the cursor that expressions read them through."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DEFAULT_LENGTH = 0


@dataclass(frozen=True)
class Token:
    """A single input character."""

    value: str


def make_token(char: str) -> Token:
    """Build a token from one character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"a token holds exactly one character, got {char!r}")
    return Token(char)


def token_size(token: Token) -> int:
    """Number of input positions a token spans."""
    return len(token.value)


def is_equal(left: Token, right: Token) -> bool:
    """Whether two tokens carry the same character."""
    return left.value == right.value


class TokenSequence:
    """An immutable run of tokens, comparable with other runs or a single token."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = tuple(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> Token:
        if not 0 <= index < len(self._tokens):
            raise IndexError("token index out of range")
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return len(self) == token_size(other) and is_equal(self._tokens[0], other)
        if isinstance(other, TokenSequence):
            return len(self) == len(other) and all(
                is_equal(mine, theirs) for mine, theirs in zip(self, other)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        text = "".join(token.value for token in self._tokens)
        return f"TokenSequence({text!r})"

    def view(self, start: int, length: int) -> TokenSequence:
        """Return the ``length`` tokens starting at ``start``."""
        if start < 0 or length < 0 or start + length > len(self._tokens):
            raise IndexError("subview out of range")
        return TokenSequence(self._tokens[start : start + length])


@dataclass(frozen=True)
class ContextImage:
    """A saved cursor position of a :class:`Context`."""

    index: int


class Context:
    """A token stream with a movable cursor that can be saved and restored."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = TokenSequence(tokens)
        self._index = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def remaining(self) -> int:
        """Number of tokens not yet consumed."""
        return len(self) - min(self._index, len(self))

    def dump(self) -> ContextImage:
        """Save the current cursor position."""
        return ContextImage(self._index)

    def restore(self, image: ContextImage) -> None:
        """Move the cursor back to a saved position."""
        self._index = image.index

    def is_finished(self) -> bool:
        """Whether every token has been consumed."""
        return self._index >= len(self)

    def advance(self, length: int) -> None:
        """Consume ``length`` tokens."""
        self._index += length

    def get_tokens(self, length: int = DEFAULT_LENGTH) -> TokenSequence:
        """Return the next ``length`` tokens without consuming them.

        With the default length, every remaining token but the last is returned.
        """
        if length == DEFAULT_LENGTH:
            length = len(self) - (self._index + 1)
        return self._tokens.view(self._index, length)