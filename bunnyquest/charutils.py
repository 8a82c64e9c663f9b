"""Character classification, integer/text conversion and small output helpers."""

from __future__ import annotations

import sys
from typing import TextIO, Union

CharLike = Union[str, int]

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(char: CharLike) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError("expected a character or an integer code point")


def _same_kind(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def _wrap_int(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range, as a C ``int`` would."""
    value %= _INT_RANGE
    return value - _INT_RANGE if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    The result wraps to the signed 32-bit range.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            break
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    return str(int(number))


def is_alpha(char: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(char: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(char) or is_alpha(char)


def is_ascii(char: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(char) <= ord("~")


def to_lower(char: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(char, code + 32)
    return char


def to_upper(char: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return _same_kind(char, code - 32)
    return char


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    (stream or sys.stdout).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; ``None`` writes nothing."""
    if text:
        (stream or sys.stdout).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes just the newline."""
    out = stream or sys.stdout
    put_str(text, out)
    out.write("\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``number`` to ``stream``."""
    put_str(itoa(number), stream or sys.stdout)