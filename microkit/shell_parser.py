"""Parsing of microshell command lines into pipelines, redirections and commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional


class RedirectMode(IntEnum):
    """Which standard stream a redirection replaces."""

    STD_IN = 0
    STD_OUT = 1
    APPEND = 2


class LineKind(Enum):
    """What a command line asks the shell to do."""

    PIPE = "pipe"
    BACKGROUND = "background"
    REDIRECT = "redirect"
    CD = "cd"
    EXIT = "exit"
    COMMAND = "command"


class ParseError(ValueError):
    """Raised for a command line the shell cannot run."""


@dataclass
class ParsedLine:
    """A parsed command line: its kind, the argument vectors and redirection."""

    kind: LineKind
    commands: list[list[str]] = field(default_factory=list)
    path: Optional[str] = None
    mode: Optional[RedirectMode] = None

    @property
    def argv(self) -> list[str]:
        """The argument vector of the first command."""
        return self.commands[0] if self.commands else []


_REDIRECTS = (
    (">>", RedirectMode.APPEND, "Wrong input in redirect: command >> file"),
    (">", RedirectMode.STD_OUT, "Wrong input in redirec: command > file"),
    ("<", RedirectMode.STD_IN, "Wrong input in redirec: command < file"),
)


def split_tokens(text: str, delims: str) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty pieces."""
    if not delims:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(ch) for ch in delims) + "]"
    return [piece for piece in re.split(pattern, text) if piece]


def trim(text: str) -> str:
    """Remove one trailing and then one leading space or newline."""
    if text[-1:] in (" ", "\n") and text:
        text = text[:-1]
    if text[:1] in (" ", "\n") and text:
        text = text[1:]
    return text


def _segments(text: str, delims: str) -> list[str]:
    return [trim(token) for token in split_tokens(text, delims)]


def _argv(text: str) -> list[str]:
    return _segments(text, " ")


def parse_line(line: str) -> ParsedLine:
    """Classify and split one command line.

    Operators are checked in the order ``|``, ``&``, ``>>``, ``>``, ``<``.
    A line without operators is a ``cd`` when its first word contains
    "cd", an ``exit`` when it contains "exit", and a plain command otherwise.
    """
    if "|" in line:
        return ParsedLine(LineKind.PIPE, [_argv(seg) for seg in _segments(line, "|")])
    if "&" in line:
        return ParsedLine(
            LineKind.BACKGROUND, [_argv(seg) for seg in _segments(line, "&")]
        )
    for operator, mode, message in _REDIRECTS:
        if operator in line:
            parts = _segments(line, operator)
            if len(parts) != 2:
                raise ParseError(message)
            return ParsedLine(
                LineKind.REDIRECT, [_argv(parts[0])], path=trim(parts[1]), mode=mode
            )
    argv = _argv(line)
    if not argv:
        raise ParseError("empty command")
    if "cd" in argv[0]:
        kind = LineKind.CD
    elif "exit" in argv[0]:
        kind = LineKind.EXIT
    else:
        kind = LineKind.COMMAND
    return ParsedLine(kind, [argv])