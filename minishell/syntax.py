"""Pipe placement checks on a token list, and the fatal-error exit."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NoReturn

from minishell.tokens import Token, TokenType

PIPE_ERROR = "minishell: syntax error near unexpected token `|'"


class ShellSyntaxError(Exception):
    """A pipeline whose pipes are misplaced."""

    def __init__(self, message: str = PIPE_ERROR) -> None:
        super().__init__(message)


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return tokens unchanged, or raise ShellSyntaxError.

    The line may not start with a pipe, and the first pipe may not be
    followed directly by another.
    """
    if not tokens:
        return tokens
    if tokens[0].type is TokenType.PIPE:
        raise ShellSyntaxError()
    first_pipe = next(
        (i for i, token in enumerate(tokens) if token.type is TokenType.PIPE), None
    )
    if first_pipe is None:
        return tokens
    if first_pipe + 1 < len(tokens) and tokens[first_pipe + 1].type is TokenType.PIPE:
        raise ShellSyntaxError()
    return tokens


def fatal_error(msg: str) -> NoReturn:
    """Write msg to standard output and exit with status 1."""
    sys.stdout.write(msg)
    sys.stdout.flush()
    raise SystemExit(1)