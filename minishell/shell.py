"""The interactive prompt loop."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from minishell.parsing import picking

PROMPT = "Minishell> "
EXIT_WORD = "exit"

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platforms without readline
    _readline = None


def is_exit(line: Optional[str]) -> bool:
    """True when ``line`` ends the session.

    End of input (``None``) ends it, as does any line that is a prefix of
    ``"exit"``, the empty line included.
    """
    if line is None:
        return True
    return EXIT_WORD.startswith(line)


def run(read: Callable[[str], Optional[str]]) -> list[str]:
    """Prompt with ``read`` until an exit line; return the history of lines.

    ``read`` is called with the prompt and returns a line, or ``None`` at
    end of input. The line that ends the session is part of the history.
    """
    history: list[str] = []
    while True:
        line = read(PROMPT)
        if line is not None:
            picking(line)
            history.append(line)
        if is_exit(line):
            break
    return history


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prompt on the terminal."""
    parser = argparse.ArgumentParser(prog="minishell", description="A minimal shell prompt.")
    parser.parse_args(argv)
    try:
        run(_read_line)
    finally:
        if _readline is not None:
            _readline.clear_history()
    return 0