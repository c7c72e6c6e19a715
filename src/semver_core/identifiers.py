# SPDX-License-Identifier: MIT
"""Pre-release and build identifiers.

A pre-release identifier is either numeric (compared as an integer) or
alphanumeric (compared by ASCII code point). The kind is decided once, when
the identifier is created, so comparison never has to re-detect numbers.

Build identifiers never take part in precedence and are kept as plain strings.
"""

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from .errors import InvalidVersionError

# Characters allowed in any identifier: [0-9A-Za-z-]
IDENTIFIER_CHARS = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-")

# Largest value of a numeric identifier or core version field (unsigned 64-bit)
MAX_NUMBER = 2**64 - 1
_MAX_DIGITS = len(str(MAX_NUMBER))


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, e.g. the ``1`` in ``alpha.1``."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidVersionError(
                str(self.value), "Numeric identifier must be an integer", segment="pre-release"
            )
        if not 0 <= self.value <= MAX_NUMBER:
            raise InvalidVersionError(
                describe_number(self.value),
                f"Numeric identifier must be between 0 and {MAX_NUMBER}",
                segment="pre-release",
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A pre-release identifier containing at least one letter or hyphen."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_alphanumeric_identifier(self.value):
            raise InvalidVersionError(
                str(self.value),
                f"Invalid alphanumeric identifier: {self.value!r}",
                segment="pre-release",
            )

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def _is_identifier_text(text: str) -> bool:
    return bool(text) and all(c in IDENTIFIER_CHARS for c in text)


def is_numeric_identifier(text: str) -> bool:
    """Return True for "0" or a digit sequence without a leading zero."""
    if not text or not text.isascii() or not text.isdigit():
        return False
    return text == "0" or text[0] != "0"


def fits_number(digits: str) -> bool:
    """Return True if a digit string does not exceed MAX_NUMBER.

    Checks the length first, so arbitrarily long input is never converted.
    """
    if len(digits) != _MAX_DIGITS:
        return len(digits) < _MAX_DIGITS
    return int(digits) <= MAX_NUMBER


def describe_number(value: int) -> str:
    """Return value as text, or a short description when it is out of range."""
    if -MAX_NUMBER <= value <= MAX_NUMBER:
        return str(value)
    return f"<{value.bit_length()}-bit integer>"


def is_alphanumeric_identifier(text: str) -> bool:
    """Return True for [0-9A-Za-z-]+ text that is not purely numeric."""
    return _is_identifier_text(text) and not text.isdigit()


def is_build_identifier(text: str) -> bool:
    """Return True for [0-9A-Za-z-]+ text; leading zeros are allowed."""
    return isinstance(text, str) and _is_identifier_text(text)


def parse_identifier(text: str) -> Identifier:
    """Parse a single pre-release identifier.

    Raises:
        InvalidVersionError: If the text is empty, contains characters
            outside [0-9A-Za-z-], or is numeric with a leading zero or
            larger than MAX_NUMBER
    """
    if not text:
        raise InvalidVersionError(text, "Empty pre-release identifier", segment="pre-release")
    if text.isascii() and text.isdigit():
        if not is_numeric_identifier(text):
            raise InvalidVersionError(
                text,
                f"Numeric pre-release identifier has a leading zero: {text!r}",
                segment="pre-release",
            )
        if not fits_number(text):
            raise InvalidVersionError(
                f"<{len(text)}-digit number>",
                f"Numeric pre-release identifier exceeds {MAX_NUMBER}",
                segment="pre-release",
            )
        return NumericIdentifier(int(text))
    return AlphanumericIdentifier(text)


def to_identifier(value: Union[Identifier, int, str]) -> Identifier:
    """Convert an int, str or existing identifier to an Identifier."""
    if isinstance(value, (NumericIdentifier, AlphanumericIdentifier)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return NumericIdentifier(value)
    if isinstance(value, str):
        return parse_identifier(value)
    raise InvalidVersionError(
        str(value),
        f"Pre-release identifier must be int or str, got {type(value).__name__}",
        segment="pre-release",
    )


def _check_sequence(value: object, segment: str) -> None:
    if isinstance(value, (bytes, bytearray)) or not isinstance(value, abc.Iterable):
        raise InvalidVersionError(
            repr(value),
            f"Expected a dotted string or an iterable of identifiers, got {type(value).__name__}",
            segment=segment,
        )


def to_prerelease(value: Union[str, Iterable[Union[Identifier, int, str]], None]) -> tuple[Identifier, ...]:
    """Normalize a dotted string or an iterable of identifiers to a tuple.

    An empty string or None means no pre-release.
    """
    if value is None or value == "":
        return ()
    _check_sequence(value, "pre-release")
    if isinstance(value, str):
        return tuple(parse_identifier(part) for part in value.split("."))
    return tuple(to_identifier(part) for part in value)


def to_build(value: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """Normalize a dotted string or an iterable of strings to build identifiers."""
    if value is None or value == "":
        return ()
    _check_sequence(value, "build")
    parts = value.split(".") if isinstance(value, str) else list(value)
    for part in parts:
        if not isinstance(part, str):
            raise InvalidVersionError(
                type(part).__name__,
                f"Build identifier must be str, got {type(part).__name__}",
                segment="build",
            )
        if not is_build_identifier(part):
            raise InvalidVersionError(
                str(part), f"Invalid build identifier: {part!r}", segment="build"
            )
    return tuple(parts)


def compare_identifiers(id1: Identifier, id2: Identifier) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1, 0 or 1

    Numeric identifiers compare as integers and always have lower precedence
    than alphanumeric ones. Alphanumeric identifiers compare by ASCII code point.
    """
    num1 = isinstance(id1, NumericIdentifier)
    num2 = isinstance(id2, NumericIdentifier)

    if num1 and not num2:
        return -1
    if num2 and not num1:
        return 1
    if id1.value == id2.value:
        return 0
    return -1 if id1.value < id2.value else 1


def compare_prerelease(pre1: Sequence[Identifier], pre2: Sequence[Identifier]) -> int:
    """Compare two pre-release sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty sequence (a normal release) has higher precedence than any
    non-empty one. Otherwise identifiers are compared pairwise and, if one
    sequence is a prefix of the other, the longer one wins.
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for id1, id2 in zip(pre1, pre2):
        result = compare_identifiers(id1, id2)
        if result != 0:
            return result

    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def identifier_key(identifier: Identifier) -> tuple:
    """Return a sort key for a single pre-release identifier."""
    if isinstance(identifier, NumericIdentifier):
        return (0, identifier.value, "")
    return (1, 0, identifier.value)
