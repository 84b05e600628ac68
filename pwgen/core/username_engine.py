"""Two-word usernames: ``<adjective><delim><noun>[<delim><digits>]``."""

from __future__ import annotations

from typing import Optional, Sequence

from pwgen.core.error_dialect import INVALID_SUFFIX, make_error
from pwgen.core.randomness import RandomSource, resolve_source
from pwgen.core.username_lexicon import word_pools

DIGIT_CHARS = "0123456789"


def _pick(seq: Sequence[str], rng: RandomSource) -> str:
    return seq[rng.next_index(len(seq))]


def random_digits(count: int, rng: Optional[RandomSource] = None) -> str:
    source = resolve_source(rng)
    return "".join(_pick(DIGIT_CHARS, source) for _ in range(count))


def generate_username(
    delimiter: str = "",
    number_suffix_digits: int = 4,
    rng: Optional[RandomSource] = None,
) -> str:
    if number_suffix_digits < 0:
        raise make_error(INVALID_SUFFIX, "number suffix digits must be >= 0")
    source = resolve_source(rng)
    pools = word_pools()
    # Adjective and noun pools are disjoint, so the two words never repeat.
    parts = [_pick(pools.adjectives, source), _pick(pools.nouns, source)]
    if number_suffix_digits > 0:
        parts.append(random_digits(number_suffix_digits, source))
    return delimiter.join(parts)
