from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Set, Tuple


def normalize_word(s: str) -> str:
    return re.sub(r"[^a-z]+", "", s.strip().lower())


def dedupe_keep_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        n = normalize_word(w)
        if not n or n in seen:
            continue
        seen.add(n)
        out.append(n)
    return out


ADJECTIVE_RAW = """
agile amber ancient arctic autumn bold brave breezy bright brisk bronze calm candid cheerful
chilly clever cloudy coastal cosmic cozy crimson crisp curious daring dawn dizzy dusty eager early
electric elegant emerald epic fancy fearless fierce fiery flying fluffy foggy frosty gentle giant
gleaming glowing golden graceful grand happy hasty hidden hollow humble icy jolly jumpy keen kind
lazy lively lonely lucky lunar magic mellow merry mighty misty modest mossy muddy mystic nimble
noble nordic odd olive orange pale patient peaceful plucky polar proud purple quick quiet rapid
rare restless rocky rosy royal rusty sandy scarlet secret serene shadow shiny silent silver simple
sleepy slick smooth snowy solar sonic speedy spicy spry stormy sturdy sunny super swift tame tender
thirsty tidy tiny tough tranquil tricky true twilight vast velvet vivid wandering warm wild windy
wise witty wooden young zany zesty
""".split()

NOUN_RAW = """
acorn anchor antler apple arrow badger banjo barrel beacon beetle biscuit blossom boulder bucket
buffalo button cabin cactus camel canoe canyon carrot castle cedar cherry cinder cliff clover comet
compass coral cricket crow crystal dagger daisy dolphin dragon drum eagle ember engine falcon feather
fern fiddle finch flame forest fox galaxy garden geyser glacier goblin gopher granite harbor hawk
hedgehog heron hill hornet island jackal jaguar jasper kettle kite lantern lemon lion lizard llama
lobster lotus magnet maple marble meadow meteor mitten moose moth mountain mustang nebula nugget
oak ocean octopus orbit otter owl paddle panda panther parrot pebble pepper pigeon pillow pine pirate
planet pony puddle pumpkin quartz rabbit raccoon radish raven reef river robin rocket saddle salmon
sparrow spider squirrel star stone summit tiger timber toad tornado tulip turtle valley viking
violin volcano walrus whale willow wizard wolf yak zebra
""".split()


def enforce_disjoint_pools(*pools: Iterable[str]) -> Tuple[List[str], ...]:
    """Keep each word only in the first pool that lists it."""
    used: Set[str] = set()
    out_pools: List[List[str]] = []
    for pool in pools:
        cleaned = []
        for w in dedupe_keep_order(pool):
            if w in used:
                continue
            used.add(w)
            cleaned.append(w)
        out_pools.append(cleaned)
    return tuple(out_pools)


@dataclass(frozen=True)
class WordPools:
    adjectives: Tuple[str, ...]
    nouns: Tuple[str, ...]


@lru_cache(maxsize=1)
def word_pools() -> WordPools:
    adjectives, nouns = enforce_disjoint_pools(ADJECTIVE_RAW, NOUN_RAW)
    if not adjectives or not nouns:
        raise RuntimeError("embedded word lists are empty")
    return WordPools(adjectives=tuple(adjectives), nouns=tuple(nouns))


__all__ = [
    "normalize_word",
    "dedupe_keep_order",
    "ADJECTIVE_RAW",
    "NOUN_RAW",
    "enforce_disjoint_pools",
    "WordPools",
    "word_pools",
]
