"""The discard pile."""

from typing import Iterable, Iterator, List

from unorules.engine.card import Card
from unorules.engine.errors import EmptyPile


class DiscardPile:
    """Played cards, most recent first. Only the top matters to the rules."""

    def __init__(self, cards: Iterable[Card] = ()):
        self.cards: List[Card] = list(cards)

    @property
    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def top(self) -> Card:
        if not self.cards:
            raise EmptyPile("The discard pile is empty")
        return self.cards[0]

    def push(self, card: Card) -> None:
        self.cards.insert(0, card)
