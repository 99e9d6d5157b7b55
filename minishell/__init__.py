"""A minimal interactive shell prompt with string, output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "textutils", "output", "linereader", "parsing", "shell"]