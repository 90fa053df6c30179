"""String helpers with C-library semantics: parsing, splitting, bounded copies."""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "strcmp",
    "strlcpy",
    "strlcat",
]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps like a 32-bit ``int``.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` into the words separated by runs of ``separator``.

    Empty words are never produced, so leading, trailing and repeated
    separators are ignored.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def strtrim(text: str, chars: str | None) -> str:
    """Remove any of ``chars`` from both ends of ``text``.

    With ``chars`` set to None the text is returned unchanged.
    """
    if chars is None:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns 0 when they are equal, otherwise the difference between the
    code points of the first pair that differs (the end of a string counts
    as code point 0).
    """
    if count < 0:
        raise ValueError("count must not be negative")
    return _compare(first[:count], second[:count])


def strcmp(first: str, second: str) -> int:
    """Compare two whole strings; the result's sign orders them."""
    return _compare(first, second)


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied (possibly truncated) text and the full length of
    ``source``, which tells the caller whether truncation happened.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = source[:size - 1] if size > 0 else ""
    return copied, len(source)


def strlcat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``destination`` already fills the buffer nothing is
    appended and the reported length is ``size + len(source)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(destination) >= size:
        return destination, size + len(source)
    room = size - len(destination) - 1
    return destination + source[:room], len(destination) + len(source)