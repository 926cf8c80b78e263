"""Writing characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str | int, fd: int) -> None:
    """Write one character to fd; an int is written as a single byte."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: str, fd: int) -> None:
    """Write a string to fd."""
    _write_all(fd, s.encode())


def putendl_fd(s: str, fd: int) -> None:
    """Write a string followed by a newline to fd."""
    _write_all(fd, s.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of an integer to fd."""
    _write_all(fd, str(int(n)).encode())