from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from pwgen.core.error_dialect import EMPTY_POOL, INVALID_CHARSET, make_error

log = logging.getLogger(__name__)

LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOL = "!@#$%^&*()-_=+[]{}:;.,?~"
# Remaining ASCII punctuation, disjoint from SYMBOL.
RARE_SYMBOL = "\"'/<>\\`|"

# Insertion order is the canonical pool order.
CHARACTER_CATEGORIES: Dict[str, str] = {
    "lower": LOWER,
    "upper": UPPER,
    "digits": DIGITS,
    "symbol": SYMBOL,
    "rare-symbol": RARE_SYMBOL,
}

CATEGORY_CHOICES: Tuple[str, ...] = tuple(CHARACTER_CATEGORIES)
DEFAULT_CATEGORIES: Tuple[str, ...] = ("lower", "upper", "digits")


def parse_categories(text: str) -> Tuple[str, ...]:
    """Split a ``lower,upper,...`` flag value into validated category names."""
    names = []
    for raw in text.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        if name not in CHARACTER_CATEGORIES:
            raise make_error(
                INVALID_CHARSET,
                f"unknown character set {name!r} (choose from: {', '.join(CATEGORY_CHOICES)})",
            )
        if name not in names:
            names.append(name)
    return tuple(names)


def dedupe_keep_order(chars: Iterable[str]) -> str:
    seen = set()
    out = []
    for ch in chars:
        if ch in seen:
            continue
        seen.add(ch)
        out.append(ch)
    return "".join(out)


def build_pool(categories: Iterable[str] = (), exclude: str = "") -> str:
    requested = set(categories)
    unknown = sorted(requested.difference(CHARACTER_CATEGORIES))
    if unknown:
        raise make_error(INVALID_CHARSET, f"unknown character set(s): {', '.join(unknown)}")
    if not requested:
        requested = set(DEFAULT_CATEGORIES)

    buffer = "".join(chars for name, chars in CHARACTER_CATEGORIES.items() if name in requested)
    excluded = set(exclude)
    pool = dedupe_keep_order(ch for ch in buffer if ch not in excluded)
    if not pool:
        raise make_error(
            EMPTY_POOL,
            "no characters are allowed; add more character sets or exclude fewer characters",
        )
    log.debug("built pool of %d characters from %d set(s)", len(pool), len(requested))
    return pool
