#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from pwgen.cli.clipboard import copy_to_clipboard
from pwgen.cli.logging_config import env_flag, setup_logging
from pwgen.core.charsets import CATEGORY_CHOICES, parse_categories
from pwgen.core.error_dialect import format_error_text
from pwgen.core.models import PASSWORD_DEFAULT_LENGTH, PASSWORD_MAX_LENGTH, CharsetSpec, PasswordRequest
from pwgen.core.password_service import generate_password


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pwgen password",
        description="Generate a password consisting of random characters.",
    )
    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=PASSWORD_DEFAULT_LENGTH,
        help=f"Amount of characters (default {PASSWORD_DEFAULT_LENGTH}, max {PASSWORD_MAX_LENGTH}).",
    )
    parser.add_argument(
        "-c",
        "--char-set",
        default="",
        help=(
            f"Comma-separated character sets to draw from ({', '.join(CATEGORY_CHOICES)}). "
            "Default: lower,upper,digits. Example: --char-set lower,upper,digits"
        ),
    )
    parser.add_argument("-e", "--exclude", default="", help="Characters to remove from the sets. Example: --exclude abc!@#")
    parser.add_argument("-n", "--no-copy", action="store_true", help="Do not copy the password to the clipboard.")
    parser.add_argument("-H", "--hide", action="store_true", help="Mask the password on the terminal.")
    parser.add_argument("--show-meta", action="store_true", help="Print estimated entropy and pool size.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        request = PasswordRequest(
            length=args.length,
            charset=CharsetSpec(categories=parse_categories(args.char_set), exclude=args.exclude),
            hide_output=args.hide,
            copy_to_clipboard=not (args.no_copy or env_flag("PWGEN_NO_COPY")),
        )
        result = generate_password(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2

    for line in result.as_lines(show_meta=args.show_meta, hide=request.hide_output):
        print(line)
    if request.copy_to_clipboard and copy_to_clipboard(result.value) and request.hide_output:
        print("Copied to clipboard.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
