"""Helpers for building rigged hands."""

from typing import List, Optional

from unorules.engine import Card, CardType, Color, Hand

WILD = Card(CardType.WILD)
WILD_DRAW = Card(CardType.WILD_DRAW)


def num(color: Color, number: int) -> Card:
    return Card(CardType.NUMBERED, color, number)


def act(card_type: CardType, color: Color) -> Card:
    return Card(card_type, color)


def stacked(*wanted: Card):
    """Shuffler that moves the wanted cards to the top, in order, on its first call.

    Later calls leave the deck untouched so reshuffles stay predictable.
    """
    used = False

    def shuffler(cards: List[Card]) -> None:
        nonlocal used
        if used:
            return
        used = True
        rest = list(cards)
        front = [rest.pop(rest.index(card)) for card in wanted]
        cards[:] = front + rest

    return shuffler


def deal(hands: List[List[Card]], top: Card, dealer: Optional[int] = None) -> Hand:
    """Deal exactly the given hands with top as the first discard.

    The default dealer is the last player, so player 0 starts after a numbered card.
    """
    count = len(hands)
    per_player = len(hands[0])
    order = [hands[p][r] for r in range(per_player) for p in range(count)]
    return Hand(
        [chr(ord("A") + i) for i in range(count)],
        dealer=count - 1 if dealer is None else dealer,
        shuffler=stacked(*order, top),
        cards_per_player=per_player,
    )


def total_cards(hand: Hand) -> int:
    return (
        hand.draw_pile().size
        + hand.discard_pile().size
        + sum(len(hand.player_hand(i)) for i in range(hand.player_count))
    )
