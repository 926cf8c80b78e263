"""End-to-end checks of a shell binary: feed it commands and compare with bash."""

from __future__ import annotations

import argparse
import os
import subprocess
from collections.abc import Sequence

MINISHELL_EXEC = "../minishell"
RESET = "\033[0m"
GREEN_B = "\033[1;32m"
RED_B = "\033[1;31m"
OUTPUT_LIMIT = 2047
QUOTE_ERROR = f"{RED_B}Error{RESET} ~> Quote still open!"


def extract_output_line(buffer: str, command: str) -> str | None:
    """The shell's output after the line echoing command.

    Empty lines, prompt lines and the shell's own exit line are dropped; each
    kept line ends in a newline. None when nothing follows the command.
    """
    found = False
    kept: list[str] = []
    for line in filter(None, buffer.split("\n")):
        if not found:
            found = command in line
            continue
        if "Minishell~>" in line or ("Exit Minishell" in line and line.startswith("M")):
            continue
        kept.append(line + "\n")
    return "".join(kept) or None


def get_from_bash(command: str) -> str | None:
    """What bash prints on standard output for command, or None if nothing."""
    try:
        result = subprocess.run(["bash", "-c", command], stdout=subprocess.PIPE, check=False)
    except OSError:
        return None
    return result.stdout.decode(errors="replace") or None


class ShellHarness:
    """Runs commands through a shell executable and reports pass or fail."""

    def __init__(self, executable: str = MINISHELL_EXEC) -> None:
        self.executable = executable
        self.test_nbr = 1

    def check_executable(self) -> bool:
        """Report whether the shell executable exists and may be run."""
        ok = os.access(self.executable, os.X_OK)
        print("Executable: ✅ OK\n" if ok else "Executable: ❌ Not found\n")
        return ok

    def check_memory_leaks(self, command: str) -> bool:
        """Run command under valgrind and report whether it leaked."""
        argv = [
            "valgrind", "--leak-check=full", "--error-exitcode=1",
            self.executable, "-c", command,
        ]
        try:
            result = subprocess.run(
                argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
            )
            clean = result.returncode == 0
        except OSError:
            clean = False
        print("✅ Without leaks" if clean else "❌ the program has a memory leak.")
        return clean

    def _capture(self, command: str) -> str:
        try:
            proc = subprocess.Popen(
                [self.executable],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as exc:
            return f"execl: {exc.strerror or exc}\n"
        out, _ = proc.communicate((command + "\n").encode())
        return out[:OUTPUT_LIMIT].decode(errors="replace")

    def run(self, command: str, expected: str | None = None) -> bool:
        """Send command to the shell and check its output holds expected.

        Without expected, what bash prints for the command is used.
        """
        if expected is None:
            expected = get_from_bash(command) or ""
        result = extract_output_line(self._capture(command), command)
        passed = result is not None and expected in result
        if passed:
            print(f"{self.test_nbr}.✅ | ", end="", flush=True)
        else:
            received = "(null)" if result is None else result
            print(
                f"{self.test_nbr}. ❌ | \nCommand fail - {command}\n"
                f"~> Expected: {expected}\n~> Received: {received}",
                flush=True,
            )
        self.test_nbr += 1
        return passed


def _run_all(harness: ShellHarness, cases: Sequence[tuple[str, str | None]]) -> list[bool]:
    harness.test_nbr = 1
    return [harness.run(command, expected) for command, expected in cases]


def simple_commands(harness: ShellHarness) -> list[bool]:
    """Plain commands, blank input and a missing binary."""
    return _run_all(harness, [
        ("/bin/echo Hello", None),
        ("       ", "Command not found or not executable"),
        ("  /bin/echo Hello  ", None),
        ("/bin/bla", "Command not found or not executable: No such file or directory\n"
                     "Error execve: No such file or directory"),
    ])


def arguments(harness: ShellHarness) -> list[bool]:
    """A command with several arguments."""
    return _run_all(harness, [("/bin/echo Hello World", None)])


def echo(harness: ShellHarness) -> list[bool]:
    """The echo command with various arguments."""
    return _run_all(harness, [
        ("echo", None),
        ("echo Hello World", None),
        ("echo Tests for 42 =D", None),
        ("echo Tring with q'u'o't'e's'", None),
    ])


def quotes(harness: ShellHarness) -> list[bool]:
    """Single and double quoting, closed and unclosed."""
    results = _run_all(harness, [
        ("echo Hello", None),
        ("e'c'h''o Hello", None),
        ("e'c'h''o H'ell'o", None),
        ("e'c'h''o H\"ell\"o", "Hello"),
        ("e'cho Hello", QUOTE_ERROR),
        ("e\"cho Hello", QUOTE_ERROR),
        ("echo Hello World", None),
    ])
    print()
    for command, expected in [
        ("echo \"Hello World\"", "Hello World"),
        ("echo \"cat lol.c | cat > lol.c\"", "cat lol.c | cat > lol.c"),
        ("echo '      '", None),
        ("echo '|'", "|"),
        ("echo '>>'", ">>"),
        ("echo '$USER'", "$USER"),
    ]:
        results.append(harness.run(command, expected))
    return results


def env_vars(harness: ShellHarness) -> list[bool]:
    """Variable expansion, quoted and unquoted."""
    return _run_all(harness, [
        ("echo $USER", None),
        ("echo '$USER'", "$USER"),
        ("echo The '$USER' is $USER", None),
    ])


def pipes(harness: ShellHarness) -> list[bool]:
    """Pipelines of two and three commands."""
    return _run_all(harness, [
        ("ls | wc -l", None),
        ("ls|wc -l", None),
        ("/bin/ls | wc -l", None),
        ("echo strawberry | tr 'a-z' 'A-Z'", None),
        ("ls | grep .c | wc -l", None),
        ("cat /etc/passwd | head -n 3 | wc -l", None),
    ])


def main(argv: Sequence[str] | None = None) -> int:
    """Run the test categories against the shell executable."""
    parser = argparse.ArgumentParser(description="Check a shell binary against bash.")
    parser.add_argument("executable", nargs="?", default=MINISHELL_EXEC)
    args = parser.parse_args(argv)
    harness = ShellHarness(args.executable)

    print("---------------------------")
    print(f"|   {GREEN_B}Minishell Tester{RESET}   |")
    print("---------------------------\n")
    print("--- Compilation Test ---")
    harness.check_executable()
    for title, category in [
        ("Test with Simple Commands", simple_commands),
        ("Test with a few Args", arguments),
        ("Test with Echo", echo),
        ("Test with Quotes (single and double)", quotes),
        ("Test with Pipe", pipes),
    ]:
        print(f"--- {title} ---")
        category(harness)
        print("\n")
    return 0