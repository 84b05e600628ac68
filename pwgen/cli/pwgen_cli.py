#!/usr/bin/env python3
"""``pwgen`` entry point: picks the password or username mode and hands over the rest."""
from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Tuple

from pwgen.cli import password_cli, username_cli

Mode = Callable[[Optional[List[str]]], int]

# mode name -> (aliases, entry point, one-line flag summary)
MODES: Dict[str, Tuple[Tuple[str, ...], Mode, str]] = {
    "password": (
        ("password", "pass", "pw"),
        password_cli.main,
        "[-l N] [-c lower,upper,digits,symbol,rare-symbol] [-e CHARS] [-n] [-H] [--show-meta] [-v]",
    ),
    "username": (
        ("username", "user", "uname"),
        username_cli.main,
        "[-n DIGITS] [-c CHAR] [-N] [-v]",
    ),
}
DEFAULT_MODE = "password"
HELP_WORDS = frozenset({"-h", "--help", "help"})


def resolve_mode(word: str) -> Optional[Mode]:
    for aliases, entry, _ in MODES.values():
        if word in aliases:
            return entry
    return None


def help_text() -> str:
    lines = ["pwgen: random password and username generator", "", "Usage:"]
    lines.append(f"  pwgen {MODES[DEFAULT_MODE][2]}")
    for name, (aliases, _, flags) in MODES.items():
        lines.append(f"  pwgen {name} {flags}")
        lines.append(f"      aliases: {', '.join(aliases)}")
    lines.append("")
    lines.append("Run 'pwgen <mode> --help' for details on each flag.")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (args[0].startswith("-") and args[0] not in HELP_WORDS):
        return MODES[DEFAULT_MODE][1](args)
    if args[0] in HELP_WORDS:
        print(help_text())
        return 0

    entry = resolve_mode(args[0].lower())
    if entry is None:
        print(f"unknown command: {args[0]!r}. Use 'pwgen --help' for usage.", file=sys.stderr)
        return 2
    return entry(args[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
