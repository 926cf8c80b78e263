# minishell

Building blocks for a small shell: a tokenizer that splits a command line
into words and operators while honouring single and double quotes, a check
on where pipes may appear, a small string, memory and list toolkit in
`minishell.libft`, and a tester that feeds command lines to a shell
executable and compares what comes back with the output of `bash`.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tokenizing

```python
from minishell.tokens import tokenize

for token in tokenize("echo 'Hello World' | tr a-z A-Z"):
    print(token.type, token.value)
```

Each `Token` has a `type` (a `TokenType`: `WORD`, `PIPE`, `REDIR_IN`,
`REDIR_OUT`, `REDIR_DELIMITER` or `REDIR_APPEND`), a `value` with its
quotes removed (`None` for a word that is empty once unquoted), and
`expand_flags`, one entry per `$` in the word, `False` where that `$` lay
inside single quotes. `env_var_count` gives the number of those entries.

`tokenize` raises `UnclosedQuoteError` when a quote is left open, and
`OperatorSyntaxError` for a malformed operator, such as one ending the
line, `||`, `<>` or a tripled `>>>`. Both derive from `TokenizeError`, a
`ValueError`. The lower-level pieces are available too:
`verify_closed_quotes`, `verify_operators`, `env_var_flags`,
`strip_quotes`, `read_operator`, `read_word`, `is_wspace` and
`is_operator`.

## Pipe placement

```python
from minishell.syntax import ShellSyntaxError, check_syntax
from minishell.tokens import tokenize

check_syntax(tokenize("ls | wc -l"))     # returns the tokens
check_syntax(tokenize("| ls"))           # raises ShellSyntaxError
```

`check_syntax` rejects a token list that starts with a pipe or whose
first pipe is directly followed by another. `fatal_error(msg)` writes a
message to standard output and exits with status 1.

## The libft toolkit

- `minishell.libft.chars`: `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_upper`, `to_lower` on ASCII codes or
  one-character strings.
- `minishell.libft.memory`: `memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp` and `calloc` over `bytearray` buffers.
- `minishell.libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd` writing to raw file descriptors.
- `minishell.libft.strings`: `strlen`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`, `strndup`, where a
  `"\0"` ends a string and positions come back as indices or `None`.
- `minishell.libft.transform`: `atoi`, `itoa`, `split`, `substr`,
  `strjoin`, `strtrim`, `strmapi`, `striteri`.
- `minishell.libft.printf`: `render(fmt, *args)` returns the formatted
  text and `printf(fmt, *args)` writes it to standard output, supporting
  `%c %s %d %i %u %x %X %p %%`.
- `minishell.libft.lines`: `LineReader` reads a file descriptor line by
  line; `get_next_line(fd)` keeps one reader per descriptor.
- `minishell.libft.lists`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `clear`, `iterate` and `map`.

## The tester

```
minishell-tester [EXECUTABLE]
```

`EXECUTABLE` defaults to `../minishell`. The tester reports whether the
executable is present and runnable, then runs groups of command lines
through it (simple commands, arguments, `echo`, quotes and pipes) and
prints a numbered pass or fail mark for each. Where a case has no fixed
expected output, the same line is run through `bash` and its output is
used instead, so `bash` must be on `PATH`.

From Python, `ShellHarness(executable)` offers `check_executable`, `run`
and `check_memory_leaks` (which needs `valgrind`); the groups are
`simple_commands`, `arguments`, `echo`, `quotes`, `env_vars` and `pipes`.

## What this package does not do

There is no interactive shell here: no prompt loop, no `$NAME` variable
expansion, no variable store, no parsing of tokens into commands with
redirections, and no running of commands or pipelines. The tester drives
a separate shell executable; it does not provide one.