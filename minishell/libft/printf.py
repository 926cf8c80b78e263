"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

from collections.abc import Iterator

from minishell.libft.output import putstr_fd

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: object, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value.split("\0", 1)[0]
    number = _as_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    if spec == "u":
        return str(number & _UINT_MASK)
    if spec == "x":
        return format(number & _UINT_MASK, "x")
    if spec == "X":
        return format(number & _UINT_MASK, "X")
    address = number & _ULONG_MASK
    return "(nil)" if address == 0 else "0x" + format(address, "x")


def render(fmt: str, *args: object) -> str:
    """Format args according to fmt and return the text.

    Unknown conversions produce nothing and take no argument; a lone '%' at
    the end of fmt is kept as is.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    pieces: list[str] = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            pieces.append(_convert(fmt[i + 1], values))
            i += 2
        else:
            pieces.append(fmt[i])
            i += 1
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    putstr_fd(text, 1)
    return len(text)