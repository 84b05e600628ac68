#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from pwgen.cli.clipboard import copy_to_clipboard
from pwgen.cli.logging_config import env_flag, setup_logging
from pwgen.core.error_dialect import format_error_text
from pwgen.core.models import USERNAME_DEFAULT_DELIMITER, USERNAME_DEFAULT_SUFFIX_DIGITS, UsernameRequest
from pwgen.core.username_service import generate_username


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pwgen username",
        description="Generate a username consisting of two words and some numbers.",
    )
    parser.add_argument(
        "-n",
        "--numbers",
        type=int,
        default=USERNAME_DEFAULT_SUFFIX_DIGITS,
        help=f"Amount of digits after the words (default {USERNAME_DEFAULT_SUFFIX_DIGITS}, 0 disables).",
    )
    parser.add_argument(
        "-c",
        "--word-char",
        default=USERNAME_DEFAULT_DELIMITER,
        help="Character placed between the words and before the digits (default: none).",
    )
    parser.add_argument("-N", "--no-copy", action="store_true", help="Do not copy the username to the clipboard.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    request = UsernameRequest(
        delimiter=args.word_char,
        number_suffix_digits=args.numbers,
        copy_to_clipboard=not (args.no_copy or env_flag("PWGEN_NO_COPY")),
    )
    try:
        result = generate_username(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2

    for line in result.as_lines():
        print(line)
    if request.copy_to_clipboard:
        copy_to_clipboard(result.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
