import pytest

from minishell.syntax import ShellSyntaxError, check_syntax, fatal_error
from minishell.tokens import Token, TokenType, tokenize


def test_leading_pipe_is_rejected():
    with pytest.raises(ShellSyntaxError, match="syntax error near unexpected token `\\|'"):
        check_syntax(tokenize("| echo"))


def test_double_pipe_sequence_is_rejected():
    with pytest.raises(ShellSyntaxError):
        check_syntax(tokenize("a | | b"))


def test_valid_pipeline_is_returned():
    tokens = tokenize("ls | grep .c | wc -l")
    assert check_syntax(tokens) is tokens


def test_no_tokens():
    assert check_syntax([]) == []


def test_only_first_pipe_is_checked():
    tokens = [
        Token(TokenType.WORD, "a"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.WORD, "b"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.PIPE, "|"),
    ]
    assert check_syntax(tokens) is tokens


def test_error_message_default():
    err = ShellSyntaxError()
    assert str(err) == "minishell: syntax error near unexpected token `|'"


def test_fatal_error_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        fatal_error("Error at pipe\n")
    assert info.value.code == 1
    assert capsys.readouterr().out == "Error at pipe\n"