"""Byte-buffer helpers: fill, copy, move, search, compare and zeroed allocation."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken as an unsigned byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from the start of src to the start of dest."""
    _check_count(n, dest, src)
    if n and dest is not src:
        dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest; the regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value within the first n bytes, or None."""
    _check_count(n, buf)
    index = buf.find(value & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate nmemb * size zeroed bytes; raise MemoryError when the size would overflow."""
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb and size > SIZE_MAX // nmemb:
        raise MemoryError("requested size overflows")
    return bytearray(nmemb * size)