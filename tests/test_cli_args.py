from __future__ import annotations

import io
import os
import re
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import pyperclip

from pwgen.cli.clipboard import copy_to_clipboard
from pwgen.cli.password_cli import parse_args as parse_password_args
from pwgen.cli.pwgen_cli import main as pwgen_main
from pwgen.cli.username_cli import parse_args as parse_username_args


def _run(argv: list[str]) -> tuple[int, list[str], str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        rc = pwgen_main(argv)
    lines = [line for line in stdout.getvalue().splitlines() if line.strip()]
    return rc, lines, stderr.getvalue()


@patch.dict(os.environ, {"PWGEN_NO_COPY": "", "PWGEN_VERBOSE": ""})
class CliArgTests(unittest.TestCase):
    def test_password_defaults(self) -> None:
        args = parse_password_args([])
        self.assertEqual(args.length, 16)
        self.assertEqual(args.char_set, "")
        self.assertEqual(args.exclude, "")
        self.assertFalse(args.no_copy)
        self.assertFalse(args.hide)

    def test_username_defaults(self) -> None:
        args = parse_username_args([])
        self.assertEqual(args.numbers, 4)
        self.assertEqual(args.word_char, "")
        self.assertFalse(args.no_copy)

    def test_defaults_to_password_mode(self) -> None:
        rc, lines, _ = _run(["-l", "8", "-c", "digits", "-e", "23456789", "-n"])
        self.assertEqual(rc, 0)
        self.assertEqual(len(lines), 1)
        self.assertRegex(lines[0], r"^[01]{8}$")

    def test_password_subcommand_with_meta(self) -> None:
        rc, lines, _ = _run(["password", "-l", "8", "--char-set", "digits", "--exclude", "23456789", "-n", "--show-meta"])
        self.assertEqual(rc, 0)
        self.assertRegex(lines[0], r"^[01]{8}\t\[entropy=8 bits pool=2\]$")

    def test_empty_pool_exit_code(self) -> None:
        rc, lines, err = _run(["password", "-c", "digits", "-e", "0123456789", "-n"])
        self.assertEqual(rc, 2)
        self.assertEqual(lines, [])
        self.assertIn("empty_pool:", err)

    def test_zero_length_exit_code(self) -> None:
        rc, lines, err = _run(["pw", "-l", "0", "-n"])
        self.assertEqual(rc, 2)
        self.assertEqual(lines, [])
        self.assertIn("invalid_length:", err)

    def test_unknown_char_set_exit_code(self) -> None:
        rc, _, err = _run(["password", "-c", "lower,emoji", "-n"])
        self.assertEqual(rc, 2)
        self.assertIn("invalid_charset:", err)

    def test_username_subcommand(self) -> None:
        rc, lines, _ = _run(["username", "-c", "-", "-n", "4", "-N"])
        self.assertEqual(rc, 0)
        self.assertEqual(len(lines), 1)
        self.assertRegex(lines[0], r"^[a-z]+-[a-z]+-[0-9]{4}$")

    def test_username_without_digits(self) -> None:
        rc, lines, _ = _run(["user", "-c", "_", "-n", "0", "-N"])
        self.assertEqual(rc, 0)
        self.assertRegex(lines[0], r"^[a-z]+_[a-z]+$")

    def test_username_bad_delimiter(self) -> None:
        rc, _, err = _run(["uname", "-c", "ab", "-N"])
        self.assertEqual(rc, 2)
        self.assertIn("invalid_delimiter:", err)

    def test_password_is_copied(self) -> None:
        with patch("pwgen.cli.clipboard.pyperclip.copy") as mocked:
            rc, lines, _ = _run(["password", "-l", "12"])
        self.assertEqual(rc, 0)
        mocked.assert_called_once_with(lines[0])

    def test_no_copy_skips_clipboard(self) -> None:
        with patch("pwgen.cli.clipboard.pyperclip.copy") as mocked:
            rc, _, _ = _run(["password", "-n"])
            self.assertEqual(rc, 0)
            rc, _, _ = _run(["username", "-N"])
            self.assertEqual(rc, 0)
        mocked.assert_not_called()

    def test_env_disables_copy(self) -> None:
        with patch.dict(os.environ, {"PWGEN_NO_COPY": "yes"}):
            with patch("pwgen.cli.clipboard.pyperclip.copy") as mocked:
                rc, _, _ = _run(["username"])
        self.assertEqual(rc, 0)
        mocked.assert_not_called()

    def test_hidden_password_is_masked_but_copied(self) -> None:
        with patch("pwgen.cli.clipboard.pyperclip.copy") as mocked:
            rc, lines, _ = _run(["password", "-l", "10", "--hide"])
        self.assertEqual(rc, 0)
        self.assertEqual(lines, ["*" * 10, "Copied to clipboard."])
        copied = mocked.call_args[0][0]
        self.assertEqual(len(copied), 10)
        self.assertTrue(re.fullmatch(r"[A-Za-z0-9]{10}", copied))

    def test_clipboard_failure_is_not_fatal(self) -> None:
        with patch("pwgen.cli.clipboard.pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard")):
            rc, lines, err = _run(["username", "-c", "."])
        self.assertEqual(rc, 0)
        self.assertEqual(len(lines), 1)
        self.assertIn("Unable to copy to clipboard.", err)

    def test_copy_to_clipboard_ignores_empty_text(self) -> None:
        with patch("pwgen.cli.clipboard.pyperclip.copy") as mocked:
            self.assertFalse(copy_to_clipboard(""))
        mocked.assert_not_called()

    def test_help(self) -> None:
        rc, lines, _ = _run(["--help"])
        self.assertEqual(rc, 0)
        self.assertIn("pwgen: random password and username generator", lines[0])
        text = "\n".join(lines)
        for alias in ("pass", "pw", "user", "uname"):
            self.assertIn(alias, text)
        for flag in ("--show-meta", "rare-symbol", "-c CHAR", "-N"):
            self.assertIn(flag, text)

    def test_help_word_and_mode_names_are_case_insensitive(self) -> None:
        rc, lines, _ = _run(["help"])
        self.assertEqual(rc, 0)
        self.assertIn("aliases: username, user, uname", [line.strip() for line in lines])
        rc, lines, _ = _run(["USER", "-c", ".", "-n", "0", "-N"])
        self.assertEqual(rc, 0)
        self.assertRegex(lines[0], r"^[a-z]+\.[a-z]+$")

    def test_username_digit_delimiter_exit_code(self) -> None:
        rc, lines, err = _run(["username", "-c", "7", "-N"])
        self.assertEqual(rc, 2)
        self.assertEqual(lines, [])
        self.assertIn("invalid_delimiter: word delimiter must not be a digit", err)

    def test_unknown_command(self) -> None:
        rc, _, err = _run(["passphrase"])
        self.assertEqual(rc, 2)
        self.assertIn("unknown command: 'passphrase'", err)


if __name__ == "__main__":
    unittest.main()
