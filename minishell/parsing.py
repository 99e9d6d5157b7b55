"""Splitting a command line into words."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from minishell.textutils import split

WORD_SEPARATOR = " "


@dataclass
class Command:
    """One command of a line: its redirections, the program and its argument."""

    infile: Optional[str] = None
    outfile: Optional[str] = None
    cmd: Optional[str] = None
    util: Optional[str] = None


def picking(line: str) -> list[str]:
    """Split ``line`` into its space-separated words.

    Runs of spaces count as one separator and empty words are dropped,
    so ``"grep je > outfile.txt"`` gives ``["grep", "je", ">", "outfile.txt"]``.
    Only the space character separates words.
    """
    if line is None:
        raise ValueError("line must not be None")
    return split(line, WORD_SEPARATOR)