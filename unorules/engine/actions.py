"""Actions a seated player can take, and how they map onto a Hand."""

from dataclasses import dataclass
from typing import List, Optional, Union

from unorules.engine.card import Color
from unorules.engine.hand import Hand


@dataclass
class PlayCard:
    """Action: play the card at index. For wilds, chosen_color is required."""

    index: int
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw a card (when no legal play or player chooses to draw)."""

    pass


@dataclass
class SayUno:
    """Action: declare UNO while holding two cards or fewer."""

    pass


@dataclass
class CatchUnoFailure:
    """Action: accuse a player who is down to one card without saying UNO."""

    accused: int


Action = Union[PlayCard, DrawCard, SayUno, CatchUnoFailure]


def get_catch_actions(hand: Hand, player: int) -> List[Action]:
    """Return the catches player can make now, whether or not it is their turn."""
    if hand.has_ended():
        return []
    return [
        CatchUnoFailure(accused=other)
        for other in range(hand.player_count)
        if other != player and hand.can_catch_uno_failure(other)
    ]


def get_legal_actions(hand: Hand, player: int) -> List[Action]:
    """Return all legal actions for player, empty unless it is their turn."""
    if hand.player_in_turn() != player:
        return []

    actions = get_catch_actions(hand, player)

    cards = hand.player_hand(player)
    if len(cards) <= 2 and not hand.has_declared(player):
        actions.append(SayUno())

    for index, card in enumerate(cards):
        if not hand.can_play(index):
            continue
        if card.is_wild:
            for color in Color:
                actions.append(PlayCard(index=index, chosen_color=color))
        else:
            actions.append(PlayCard(index=index))

    # Can always draw if we have no play or choose to
    actions.append(DrawCard())
    return actions


def apply_action(hand: Hand, player: int, action: Action) -> None:
    """Apply an action. Plays and draws are only allowed for the player in turn."""
    if isinstance(action, (PlayCard, DrawCard)) and hand.player_in_turn() != player:
        raise ValueError(f"It is not player {player}'s turn")

    if isinstance(action, PlayCard):
        hand.play(action.index, action.chosen_color)
    elif isinstance(action, DrawCard):
        hand.draw()
    elif isinstance(action, SayUno):
        hand.say_uno(player)
    elif isinstance(action, CatchUnoFailure):
        hand.catch_uno_failure(accuser=player, accused=action.accused)
    else:
        raise ValueError(f"Unknown action: {action!r}")
