"""NUL-terminated string routines expressed over Python strings.

A ``"\\0"`` inside a string ends it, as it would in a C buffer. Positions are
returned as indices into the string, or ``None`` where nothing was found.
"""

from __future__ import annotations

BUFFER_SIZE = 1024


def _terminated(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: int | str) -> str:
    """Turn an int (taken as an unsigned byte) or a one-character string into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c; searching for NUL gives the string's length."""
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c; searching for NUL gives the string's length."""
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: int | None) -> int:
    a = _terminated(s1)
    b = _terminated(s2)
    i = 0
    while limit is None or i < limit:
        x = _code_at(a, i)
        y = _code_at(b, i)
        if x != y or x == 0:
            return x - y
        i += 1
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 when equal."""
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp, but compares at most n characters."""
    if n < 0:
        raise ValueError("count must not be negative")
    if n == 0:
        return 0
    return _compare(s1, s2, n)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within big's first length characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _terminated(big)
    needle = _terminated(little)
    if not needle:
        return 0
    if length == 0 or len(needle) > length:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy of src that fits a buffer of size (NUL included), and the full length of src.

    With a size of 0 nothing is copied and the copy is empty.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size; return the result and the length tried for.

    When dest already fills the buffer it comes back unchanged and the length
    reported is size plus the length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(dest)
    tail = _terminated(src)
    if size == 0 or len(head) >= size:
        return head, size + len(tail)
    room = min(size - len(head) - 1, len(tail))
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """A copy of the string up to its terminating NUL."""
    return _terminated(s)


def strndup(s: str, n: int) -> str:
    """A copy of at most n characters of the string."""
    if n < 0:
        raise ValueError("count must not be negative")
    return _terminated(s)[:n]