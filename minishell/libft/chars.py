"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) < 127


def _shift(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Uppercase an ASCII letter; anything else comes back unchanged, in the type given."""
    return _shift(c, "a", "z", -32)


def to_lower(c: int | str) -> int | str:
    """Lowercase an ASCII letter; anything else comes back unchanged, in the type given."""
    return _shift(c, "A", "Z", 32)