"""Injected randomness: shufflers and randomizers."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from unorules.engine.card import Card

Shuffler = Callable[["List[Card]"], None]  # permutes the list in place
Randomizer = Callable[[int], int]  # n -> integer in [0, n)

_rng = random.Random()


def standard_shuffler(cards: List["Card"]) -> None:
    _rng.shuffle(cards)


def standard_randomizer(n: int) -> int:
    return _rng.randrange(n)


def seeded_shuffler(seed: Optional[int] = None) -> Shuffler:
    """Shuffler backed by its own ``random.Random(seed)``."""
    return random.Random(seed).shuffle


def seeded_randomizer(seed: Optional[int] = None) -> Randomizer:
    """Randomizer backed by its own ``random.Random(seed)``."""
    return random.Random(seed).randrange
