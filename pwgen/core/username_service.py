from __future__ import annotations

import logging
from typing import Optional

from pwgen.core import username_engine as engine
from pwgen.core.error_dialect import INVALID_DELIMITER, INVALID_SUFFIX, make_error
from pwgen.core.models import USERNAME_MAX_SUFFIX_DIGITS, UsernameRequest, UsernameResult
from pwgen.core.randomness import RandomSource

log = logging.getLogger(__name__)


def _validate_request(request: UsernameRequest) -> None:
    if len(request.delimiter) > 1:
        raise make_error(INVALID_DELIMITER, "word delimiter must be empty or a single character")
    if request.delimiter.isspace():
        raise make_error(INVALID_DELIMITER, "word delimiter must not be whitespace")
    if request.delimiter.isdigit():
        raise make_error(INVALID_DELIMITER, "word delimiter must not be a digit")
    if request.number_suffix_digits < 0:
        raise make_error(INVALID_SUFFIX, "number suffix digits must be >= 0")
    if request.number_suffix_digits > USERNAME_MAX_SUFFIX_DIGITS:
        raise make_error(INVALID_SUFFIX, f"number suffix digits must be <= {USERNAME_MAX_SUFFIX_DIGITS}")


def generate_username(request: UsernameRequest, rng: Optional[RandomSource] = None) -> UsernameResult:
    _validate_request(request)
    value = engine.generate_username(request.delimiter, request.number_suffix_digits, rng)
    log.debug("generated username with %d suffix digit(s)", request.number_suffix_digits)
    return UsernameResult(value=value)
