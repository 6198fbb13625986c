"""Minimal ``ls``: list the current directory with -a/-l flags or a '*' pattern."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class LsFlags:
    """Options given on the command line."""

    show_all: bool = False
    long_format: bool = False


def parse_flags(arg: str) -> LsFlags:
    """Read ``-a``/``-l`` flags from ``arg``; an argument without '-' sets none.

    Raises ValueError for any other letter after '-'.
    """
    if not arg.startswith("-"):
        return LsFlags()
    show_all = long_format = False
    for letter in arg[1:]:
        if letter == "a":
            show_all = True
        elif letter == "l":
            long_format = True
        else:
            raise ValueError(f"Not recognized command: {letter!r}")
    return LsFlags(show_all, long_format)


def list_directory(
    folder: str = ".", show_all: bool = False, long_format: bool = False
) -> list[str]:
    """Return the names in ``folder``.

    Hidden names are left out unless ``show_all``; with ``long_format``
    each name is followed by a separate "\\n" entry.
    """
    names = sorted(os.listdir(folder))
    if show_all:
        names = [".", ".."] + names
    else:
        names = [name for name in names if not name.startswith(".")]
    result: list[str] = []
    for name in names:
        result.append(name)
        if long_format:
            result.append("\n")
    return result


def find_star_matches(names: Sequence[str], pattern: Optional[str]) -> list[str]:
    """Select names matching a pattern with a '*' wildcard.

    An empty pattern or a lone '*' selects everything. Text after the
    first '*' is searched for anywhere in a name; when '*' ends the
    pattern, the text before it must start the name.
    """
    if not pattern or pattern == "*":
        return list(names)
    star = pattern.find("*")
    if star < 0:
        raise ValueError(f"pattern {pattern!r} has no '*' wildcard")
    after = pattern[star + 1 :]
    if after:
        return [name for name in names if after in name]
    before = pattern[:star]
    return [name for name in names if name.startswith(before)]


def format_names(names: Sequence[str]) -> str:
    """Join names, each followed by a single space."""
    return "".join(f"{name} " for name in names)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    flags = LsFlags()
    pattern: Optional[str] = None
    if len(args) == 1:
        pattern = args[0]
        try:
            flags = parse_flags(pattern)
        except ValueError:
            print("Not recognized command", file=sys.stderr)
            return 1
    try:
        names = list_directory(".", flags.show_all, flags.long_format)
    except FileNotFoundError:
        print("Directory doesn't exist.", file=sys.stderr)
        return 1
    except OSError:
        print("Directory can not be opened.", file=sys.stderr)
        return 1
    if pattern is not None and not flags.show_all and not flags.long_format:
        try:
            names = find_star_matches(names, pattern)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    sys.stdout.write(format_names(names))
    return 0