from __future__ import annotations

import logging
from typing import Optional

from pwgen.core import password_engine as engine
from pwgen.core.charsets import build_pool
from pwgen.core.error_dialect import INVALID_LENGTH, make_error
from pwgen.core.models import PASSWORD_MAX_LENGTH, PasswordRequest, PasswordResult
from pwgen.core.randomness import RandomSource

log = logging.getLogger(__name__)


def _validate_length(length: int) -> None:
    if length <= 0:
        raise make_error(INVALID_LENGTH, "length must be > 0")
    if length > PASSWORD_MAX_LENGTH:
        raise make_error(INVALID_LENGTH, f"password too long; cannot be longer than {PASSWORD_MAX_LENGTH}")


def generate_password(request: PasswordRequest, rng: Optional[RandomSource] = None) -> PasswordResult:
    _validate_length(request.length)
    pool = build_pool(request.charset.categories, request.charset.exclude)
    value = engine.generate_password(request.length, pool, rng)
    log.debug("generated password of length %d", len(value))
    return PasswordResult(
        value=value,
        pool=pool,
        estimated_entropy_bits=engine.estimate_entropy_bits(request.length, pool),
    )
