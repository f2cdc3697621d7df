"""Deck creation, shuffling and dealing."""

from typing import Callable, Iterable, Iterator, List

from unorules.engine.card import ACTION_TYPES, Card, CardType, Color
from unorules.engine.errors import EmptyDeck
from unorules.engine.random_utils import Shuffler

DECK_SIZE = 108


class Deck:
    """An ordered pile of cards. The top of the deck is ``cards[0]``."""

    def __init__(self, cards: Iterable[Card] = ()):
        self.cards: List[Card] = list(cards)

    @property
    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def shuffle(self, shuffler: Shuffler) -> None:
        """Reorder the deck in place with the given shuffler."""
        shuffler(self.cards)

    def deal(self) -> Card:
        """Remove and return the top card."""
        if not self.cards:
            raise EmptyDeck("Cannot deal from an empty deck")
        return self.cards.pop(0)

    def filter(self, predicate: Callable[[Card], bool]) -> "Deck":
        """Return a new deck of the cards matching predicate, in the same order."""
        return Deck(card for card in self.cards if predicate(card))


def create_standard_deck() -> Deck:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors x (one 0, two each of 1-9, two each of Skip/Reverse/Draw): 100 cards
    - 4 Wild, 4 Wild Draw: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(Card(CardType.NUMBERED, color, 0))
        for number in range(1, 10):
            cards.append(Card(CardType.NUMBERED, color, number))
            cards.append(Card(CardType.NUMBERED, color, number))
        for card_type in ACTION_TYPES:
            cards.append(Card(card_type, color))
            cards.append(Card(card_type, color))

    for card_type in (CardType.WILD, CardType.WILD_DRAW):
        for _ in range(4):
            cards.append(Card(card_type))

    return Deck(cards)
