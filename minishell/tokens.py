"""Splitting a command line into word and operator tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_QUOTES = ("'", '"')
_SINGLE_OPERATORS = {"|": "PIPE", "<": "REDIR_IN", ">": "REDIR_OUT"}
_DOUBLE_OPERATORS = {"<": "REDIR_DELIMITER", ">": "REDIR_APPEND"}


class TokenType(enum.Enum):
    """Kind of token produced by the tokenizer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    REDIR_DELIMITER = enum.auto()
    REDIR_APPEND = enum.auto()


@dataclass
class Token:
    """A word or operator of a command line.

    ``expand_flags`` holds one entry per ``$`` in the word, True where that
    ``$`` is to be expanded (it was not inside single quotes). ``value`` is
    None for a word that is empty once its quotes are removed.
    """

    type: TokenType = TokenType.WORD
    value: str | None = None
    expand_flags: list[bool] = field(default_factory=list)

    @property
    def env_var_count(self) -> int:
        """Number of ``$`` signs recorded for the word."""
        return len(self.expand_flags)


class TokenizeError(ValueError):
    """A command line that cannot be split into tokens."""


class UnclosedQuoteError(TokenizeError):
    """A quote is opened and never closed."""

    def __init__(self) -> None:
        super().__init__("Quote still open!")


class OperatorSyntaxError(TokenizeError):
    """An operator is misplaced or malformed."""

    def __init__(self) -> None:
        super().__init__("Syntax error near redirection operator!")


def _at(text: str, i: int) -> str:
    """The character at i, or an empty string past the end."""
    return text[i] if 0 <= i < len(text) else ""


def is_wspace(c: str) -> bool:
    """True for a space or a tab."""
    return c in (" ", "\t")


def is_operator(c: str) -> bool:
    """True for the operator characters ``|``, ``<`` and ``>``."""
    return c in ("|", "<", ">")


def verify_closed_quotes(text: str) -> None:
    """Raise UnclosedQuoteError if a single or double quote is left open."""
    open_quote = ""
    for ch in text:
        if not open_quote:
            if ch in _QUOTES:
                open_quote = ch
        elif ch == open_quote:
            open_quote = ""
    if open_quote:
        raise UnclosedQuoteError()


def _operator_error(text: str, i: int, op: str) -> bool:
    cur = _at(text, i)
    after = _at(text, i + 1)
    return (
        not cur
        or (is_operator(cur) and cur != op)
        or (cur == op and (not after or is_operator(after)))
        or (cur == "|" and op == "|")
    )


def verify_operators(text: str) -> None:
    """Raise OperatorSyntaxError for a malformed operator outside quotes.

    An operator may not end the line, be followed by a different operator,
    be tripled, or be a doubled pipe.
    """
    quote = ""
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES and not quote:
            quote = ch
        elif ch == quote:
            quote = ""
        if is_operator(ch) and not quote:
            if _operator_error(text, i + 1, ch):
                raise OperatorSyntaxError()
            if is_operator(_at(text, i + 1)):
                i += 1
        i += 1


def env_var_flags(text: str) -> list[bool]:
    """One flag per ``$`` in text: False where it lies inside single quotes."""
    flags: list[bool] = []
    quote = ""
    for ch in text:
        if ch in _QUOTES and not quote:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        if ch == "$":
            flags.append(quote != "'")
    return flags


def strip_quotes(text: str) -> str | None:
    """Text with its quoting removed, or None if nothing is left."""
    kept: list[str] = []
    quote = ""
    for ch in text:
        if ch in _QUOTES and not quote:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        else:
            kept.append(ch)
    return "".join(kept) or None


def read_operator(text: str, pos: int) -> tuple[Token, int]:
    """Read the operator starting at pos; return its token and the position after it.

    A doubled pipe is read as a two-character word. An operator followed by a
    different operator gives an empty word and does not advance.
    """
    ch = _at(text, pos)
    nxt = _at(text, pos + 1)
    if not is_operator(nxt):
        kind = TokenType[_SINGLE_OPERATORS.get(ch, "WORD")]
        return Token(kind, ch), pos + 1
    if nxt == ch and not is_operator(_at(text, pos + 2)):
        kind = TokenType[_DOUBLE_OPERATORS.get(ch, "WORD")]
        return Token(kind, ch * 2), pos + 2
    return Token(TokenType.WORD, ""), pos


def read_word(text: str, pos: int) -> tuple[Token, int]:
    """Read a word starting at pos; return its token and the position after it.

    The word ends at whitespace or an operator outside quotes; its quotes are
    removed and its ``$`` signs recorded.
    """
    quote = ""
    i = pos
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES and not quote:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        elif not quote and (is_wspace(ch) or is_operator(ch)):
            break
        i += 1
    raw = text[pos:i]
    return Token(TokenType.WORD, strip_quotes(raw), env_var_flags(raw)), i


def tokenize(line: str) -> list[Token]:
    """Split a command line into tokens.

    Raises UnclosedQuoteError or OperatorSyntaxError for lines that fail the
    quote or operator checks. An empty line gives no tokens.
    """
    verify_closed_quotes(line)
    verify_operators(line)
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        while is_wspace(_at(line, pos)):
            pos += 1
        if is_operator(_at(line, pos)):
            token, new_pos = read_operator(line, pos)
        else:
            token, new_pos = read_word(line, pos)
        if new_pos == pos and pos < len(line):
            raise OperatorSyntaxError()
        tokens.append(token)
        pos = new_pos
    return tokens