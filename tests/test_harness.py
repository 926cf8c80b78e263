import sys

import pytest

from minishell.harness import (
    ShellHarness,
    arguments,
    extract_output_line,
    get_from_bash,
)

UPPER_SHELL = """#!{python}
import sys
for line in sys.stdin:
    line = line.rstrip("\\n")
    print("Minishell~> " + line)
    print(line.upper())
print("Minishell~> ")
"""

BASH_SHELL = """#!{python}
import subprocess, sys
for line in sys.stdin:
    line = line.rstrip("\\n")
    print("Minishell~> " + line, flush=True)
    subprocess.run(["bash", "-c", line], stdin=subprocess.DEVNULL)
print("Minishell~> ", flush=True)
"""


def _script(tmp_path, name, body):
    path = tmp_path / name
    path.write_text(body.format(python=sys.executable))
    path.chmod(0o755)
    return str(path)


@pytest.fixture
def upper_shell(tmp_path):
    return ShellHarness(_script(tmp_path, "upper_shell", UPPER_SHELL))


@pytest.fixture
def bash_shell(tmp_path):
    return ShellHarness(_script(tmp_path, "bash_shell", BASH_SHELL))


def test_extract_output_line_basic():
    assert extract_output_line("Minishell~> echo hi\nhi\nMinishell~> ", "echo hi") == "hi\n"


def test_extract_output_line_drops_blank_and_prompt_lines():
    buffer = "noise\nMinishell~> cmd\na\n\nb\nMinishell~> \n"
    assert extract_output_line(buffer, "cmd") == "a\nb\n"


def test_extract_output_line_missing_command():
    assert extract_output_line("one\ntwo\n", "three") is None


def test_extract_output_line_exit_lines():
    buffer = "cmd\nMade up Exit Minishell\n...Exit Minishell...\n"
    assert extract_output_line(buffer, "cmd") == "...Exit Minishell...\n"


def test_get_from_bash_output():
    assert get_from_bash("echo hi") == "hi\n"


def test_get_from_bash_no_output():
    assert get_from_bash("true") is None


def test_run_passes(upper_shell, capsys):
    assert upper_shell.run("hello", "HELLO") is True
    assert capsys.readouterr().out == "1.✅ | "
    assert upper_shell.test_nbr == 2


def test_run_fails(upper_shell, capsys):
    assert upper_shell.run("hello", "nope") is False
    assert "Command fail - hello" in capsys.readouterr().out


def test_run_compares_with_bash(bash_shell):
    assert bash_shell.run("echo Hello World") is True


def test_run_missing_executable(tmp_path):
    harness = ShellHarness(str(tmp_path / "missing"))
    assert harness.run("echo hi", "hi") is False


def test_check_executable(upper_shell, capsys):
    assert upper_shell.check_executable() is True
    assert "Executable: ✅ OK" in capsys.readouterr().out


def test_check_executable_missing(tmp_path, capsys):
    assert ShellHarness(str(tmp_path / "missing")).check_executable() is False
    assert "Executable: ❌ Not found" in capsys.readouterr().out


def test_check_memory_leaks_missing(tmp_path, capsys):
    harness = ShellHarness(str(tmp_path / "missing"))
    assert harness.check_memory_leaks("echo hi") is False
    assert "❌ the program has a memory leak." in capsys.readouterr().out


def test_arguments_category(bash_shell):
    bash_shell.test_nbr = 7
    assert arguments(bash_shell) == [True]
    assert bash_shell.test_nbr == 2