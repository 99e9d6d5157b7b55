# minishell

A minimal interactive shell prompt, together with the small helpers it is
built on.

## Running

```
minishell
```

This shows the prompt `Minishell> ` and reads one line at a time. Each line
is split into space-separated words. The session ends at end of input
(Ctrl-D) or on any line that is a prefix of `exit`. That means `exit` itself,
and also `e`, `ex`, `exi` and an empty line. `minishell --help` prints the
usage. The command takes no other options.

## What it does not do

The prompt does not run anything. Words are split out of each line and then
discarded. There is no command execution, no redirection, no pipes, no
variable expansion and no quoting. `Command` is a plain record and nothing
fills it in yet.

## Using it as a library

- `minishell.shell`
  - `is_exit(line)`: true for `None` or for any prefix of `"exit"`.
  - `run(read)`: runs the prompt loop. It calls `read(prompt)` for each line
    until an exit line, and returns the list of lines read, the exit line
    included.
  - `main(argv=None)`: runs the loop on the terminal.
- `minishell.parsing`
  - `picking(line)`: splits a line into words on spaces, dropping empty ones.
  - `Command`: a dataclass with the optional fields `infile`, `outfile`,
    `cmd` and `util`.
- `minishell.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. These are ASCII-only tests and case
  conversions. Each takes a one-character string or an integer code.
- `minishell.textutils`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `memchr`, `memcmp`. These are
  string and byte helpers with C-string semantics.
  - Strings stop at their first NUL.
  - The search functions return an index, or `None` when nothing is found.
  - `atoi` wraps its result to a signed 32-bit integer.
- `minishell.output`
  - `format_printf(fmt, *args)`: formats with the `%c %s %p %d %i %u %x %X`
    conversions. Any other character after `%` is printed as itself, so `%%`
    gives `%`. A format ending in a lone `%` raises `ValueError`. Too few
    arguments raises `TypeError`.
  - `printf(fmt, *args)`: writes the result to standard output and returns
    the number of bytes written.
  - `put_char(c, fd)`, `put_str(s, fd)`, `put_endl(s, fd)`, `put_nbr(n, fd)`:
    write to a file descriptor and return the number of bytes written.
- `minishell.linereader`
  - `LineReader(fd, buffer_size=100)`: reads a file descriptor one line at a
    time with `next_line()`, which returns `None` at the end. You can also
    iterate over it.
  - Lines keep their trailing newline.

```python
from minishell.output import format_printf
from minishell.parsing import picking

picking("grep je > outfile.txt")   # ['grep', 'je', '>', 'outfile.txt']
format_printf("%d%%", 42)          # '42%'
format_printf("%x", -1)            # 'ffffffff'
```

## Tests

```
pip install -e ".[test]"
pytest
```