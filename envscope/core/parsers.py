"""Per-kind value parsers.

Each parser turns the raw string read from the source into the typed value
for one declaration kind. Parsers know nothing about scopes or validators;
they only receive the effective lookup key so errors can name it.
"""

from __future__ import annotations

import math
import re
from abc import abstractmethod
from typing import Protocol

from envscope.core.declarations import Kind
from envscope.core.errors import InvalidBooleanError, InvalidNumberError
from envscope.utils.constant import FALSE_LITERALS, TRUE_LITERALS

# Decimal or scientific notation: "42", "-1.5", ".5", "5.", "1e-3"
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
# Prefixed integer literals: "0x1F", "0o17", "0b101"
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


class ValueParser(Protocol):
    """Protocol for converting a raw source string into a typed value."""

    @property
    @abstractmethod
    def kind(self) -> Kind:
        """Return the declaration kind handled by this parser."""
        ...

    @abstractmethod
    def parse(self, raw: str, key: str) -> str | int | float | bool:
        """Convert a raw string.

        Args:
            raw: Value read from the source.
            key: Effective lookup key, used in error messages.

        Returns:
            The parsed value.
        """
        ...


class StringParser:
    """Pass-through parser; every string is a valid string value."""

    @property
    def kind(self) -> Kind:
        return Kind.STRING

    def parse(self, raw: str, key: str) -> str:  # noqa: ARG002
        return str(raw)


class NumberParser:
    """Parser for numeric literals.

    Surrounding whitespace is ignored. Integer literals (including ``0x``,
    ``0o`` and ``0b`` forms) become ``int``; fractional or exponent forms
    become ``float``. Blank strings, trailing garbage, NaN, infinities and
    values that overflow a float are rejected.
    """

    @property
    def kind(self) -> Kind:
        return Kind.NUMBER

    def parse(self, raw: str, key: str) -> int | float:
        """Parse a numeric literal.

        Args:
            raw: Value read from the source.
            key: Effective lookup key, used in error messages.

        Returns:
            The parsed number.

        Raises:
            InvalidNumberError: If the string is not a finite numeric literal.
        """
        text = str(raw).strip()

        if _INTEGER_RE.fullmatch(text) or _PREFIXED_RE.fullmatch(text):
            try:
                value = int(text, 0) if _PREFIXED_RE.fullmatch(text) else int(text)
                # Integers must still fit a finite double
                float(value)
            except (ValueError, OverflowError):
                raise InvalidNumberError(key) from None
            return value
        if _DECIMAL_RE.fullmatch(text):
            value = float(text)
            if math.isfinite(value):
                return value

        raise InvalidNumberError(key)


class BooleanParser:
    """Parser accepting exactly ``"true"``, ``"false"``, ``"1"`` and ``"0"``."""

    @property
    def kind(self) -> Kind:
        return Kind.BOOLEAN

    def parse(self, raw: str, key: str) -> bool:
        """Parse a boolean literal.

        Args:
            raw: Value read from the source.
            key: Effective lookup key, used in error messages.

        Returns:
            True for "true"/"1", False for "false"/"0".

        Raises:
            InvalidBooleanError: For any other string, including other casings.
        """
        if raw in TRUE_LITERALS:
            return True
        if raw in FALSE_LITERALS:
            return False
        raise InvalidBooleanError(key)


PARSERS: dict[Kind, ValueParser] = {
    parser.kind: parser for parser in (StringParser(), NumberParser(), BooleanParser())
}


def get_parser(kind: Kind) -> ValueParser:
    """Return the parser registered for a kind.

    Args:
        kind: Declaration kind.

    Returns:
        The matching parser.
    """
    return PARSERS[kind]
