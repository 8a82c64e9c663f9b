"""String helpers: searching, joining, bounded copies, trimming and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def strlen(text: str | None) -> int:
    """Length of ``text``; ``None`` counts as empty."""
    return len(text) if text else 0


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def join_strings(first: str | None, second: str | None) -> str:
    """Concatenate two strings, treating ``None`` as empty."""
    return (first or "") + (second or "")


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src`` in place of ``dest``.

    Returns the new destination and the full length of ``src``. A ``size``
    of zero leaves ``dest`` untouched.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` so the result fits in ``size - 1`` characters.

    Returns the new destination and the length the full concatenation
    would have had. When ``size`` is no larger than ``dest`` nothing is
    appended and the returned length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strncmp(first: str, second: str, count: int) -> int:
    """Compare up to ``count`` characters; the sign gives the ordering.

    A non-zero result is the code-point difference of the first pair of
    characters that differ, a missing character counting as zero.
    """
    for index in range(max(count, 0)):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly within the first ``length`` characters.

    An empty ``needle`` is found at index 0; no match gives ``None``.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return index if index >= 0 else None


def substr(text: str | None, start: int, length: int) -> str | None:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives the empty string; ``None`` gives ``None``.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters in ``charset`` from both ends of ``text``.

    A ``charset`` of ``None`` returns ``text`` unchanged.
    """
    if charset is None:
        return text
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strmapi(text: str | None, func: Callable[[int, str], str]) -> str | None:
    """Build a string by applying ``func(index, char)`` to each character.

    ``func`` is called from the last character to the first.
    """
    if text is None:
        return None
    mapped = [func(index, char) for index, char in reversed(list(enumerate(text)))]
    return "".join(reversed(mapped))


def striteri(chars: MutableSequence[str] | None, func: Callable[[int, str], str]) -> None:
    """Replace each character in ``chars`` with ``func(index, char)``, in place."""
    if chars is None:
        return
    for index, char in enumerate(chars):
        chars[index] = func(index, char)