from __future__ import annotations

import logging
import math
from typing import Optional

from pwgen.core.error_dialect import EMPTY_POOL, INVALID_LENGTH, make_error
from pwgen.core.randomness import RandomSource, resolve_source

log = logging.getLogger(__name__)


def generate_password(length: int, pool: str, rng: Optional[RandomSource] = None) -> str:
    if length <= 0:
        raise make_error(INVALID_LENGTH, "length must be > 0")
    if not pool:
        raise make_error(EMPTY_POOL, "character pool is empty")
    source = resolve_source(rng)
    size = len(pool)
    log.debug("sampling %d character(s) from a pool of %d", length, size)
    # Sampling with replacement; repeats are allowed.
    return "".join(pool[source.next_index(size)] for _ in range(length))


def estimate_entropy_bits(length: int, pool: str) -> float:
    if length <= 0 or len(pool) < 2:
        return 0.0
    return length * math.log2(len(pool))
