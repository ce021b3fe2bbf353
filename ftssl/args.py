"""Splitting of interactive command lines into argument vectors."""

from __future__ import annotations

PROGRAM_NAME = "ft_ssl"

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTE = '"'


def _count_args(line: str) -> int:
    count = 0
    in_arg = False
    quoted = False
    for char in line:
        if char in _WHITESPACE and not quoted:
            in_arg = False
        elif char == _QUOTE and quoted:
            quoted = False
        elif not quoted:
            if char == _QUOTE:
                quoted = True
            if not in_arg:
                count += 1
            in_arg = True
    return count


def _read_arg(line: str, start: int) -> tuple[str, int]:
    """Read one argument starting at ``start``; return it and the stop index."""
    end = len(line)
    position = start
    quoted = position < end and line[position] == _QUOTE
    chars: list[str] = []
    while position < end and (line[position] not in _WHITESPACE or quoted):
        if line[position] != _QUOTE:
            chars.append(line[position])
        position += 1
        if position < end and line[position] == _QUOTE:
            quoted = False
    return "".join(chars), position


def split_arg_line(line: str) -> list[str]:
    """Split a command line into an argument vector headed by the program name.

    Arguments are separated by whitespace; an argument that starts with a
    double quote may contain whitespace up to the closing quote.  Quote
    characters themselves are dropped.
    """
    expected = _count_args(line)
    words = [PROGRAM_NAME]
    end = len(line)
    position = 0
    while len(words) <= expected and position < end:
        while position < end and line[position] in _WHITESPACE:
            position += 1
        arg, position = _read_arg(line, position)
        words.append(arg)
        position += 1
    return words