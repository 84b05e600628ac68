from __future__ import annotations

import logging
import sys

import pyperclip

log = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copy generated text to the system clipboard.

    Returns True on success. When no clipboard mechanism is available
    (headless session, missing xclip/xsel/wl-clipboard) a notice is
    printed to stderr and False is returned; generation itself still
    counts as successful.
    """
    if not text:
        return False
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        log.warning("clipboard copy failed: %s", exc)
        print("Unable to copy to clipboard.", file=sys.stderr)
        return False
    return True
