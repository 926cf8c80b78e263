"""String building and conversion: numbers to and from text, splitting, slicing, trimming, mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from minishell.libft.chars import is_digit
from minishell.libft.strings import strdup

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse the leading integer of text.

    Leading whitespace is skipped, one optional sign is read, and digits are
    taken until the first non-digit. Text with no digits gives 0.
    """
    s = strdup(text).lstrip(_WHITESPACE)
    sign = 1
    if s[:1] in ("+", "-"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    number = 0
    for ch in s:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(int(n))


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in strdup(s).split(sep) if part]


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Copy of s with every character found in charset removed from both ends."""
    return strdup(s).strip(strdup(charset))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of f(index, char) for each character of s."""
    return strdup("".join(f(index, ch) for index, ch in enumerate(strdup(s))))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, char) for each character in place; a returned character replaces it."""
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement