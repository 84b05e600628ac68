"""Error kinds raised by the generation core.

The core raises, the CLI renders ``<code>: <message>`` and exits 2.
"""

from __future__ import annotations

EMPTY_POOL = "empty_pool"
INVALID_LENGTH = "invalid_length"
INVALID_CHARSET = "invalid_charset"
INVALID_DELIMITER = "invalid_delimiter"
INVALID_SUFFIX = "invalid_suffix"

FALLBACK_CODE = "invalid_request"


class PwGenError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message.strip() or "unspecified error"
        super().__init__(self.message)


def make_error(code: str, message: str) -> PwGenError:
    return PwGenError(code, message)


def format_error_text(exc: ValueError) -> str:
    if isinstance(exc, PwGenError):
        return f"{exc.code}: {exc.message}"
    return f"{FALLBACK_CODE}: {str(exc).strip() or 'invalid request'}"
