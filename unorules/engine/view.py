"""What a single player is allowed to see of a hand."""

from dataclasses import dataclass
from typing import List, Optional

from unorules.engine.card import Card
from unorules.engine.hand import Hand


@dataclass
class PlayerView:
    """Filtered hand state visible to a single player.

    Contains only that player's cards and public info.
    """

    player: int
    my_hand: List[Card]
    top_discard: Card
    current_player: Optional[int]
    direction: int
    player_names: tuple[str, ...]
    num_cards_per_player: List[int]
    declared: List[bool]
    draw_pile_size: int
    winner: Optional[int]
    history: List[str]  # Recent hand events

    @classmethod
    def from_hand(cls, hand: Hand, player: int) -> "PlayerView":
        """Create a player view of the hand, hiding other players' cards."""
        indices = range(hand.player_count)
        return cls(
            player=player,
            my_hand=hand.player_hand(player),
            top_discard=hand.discard_pile().top(),
            current_player=hand.player_in_turn(),
            direction=hand.direction,
            player_names=tuple(hand.player(i) for i in indices),
            num_cards_per_player=[len(hand.player_hand(i)) for i in indices],
            declared=[hand.has_declared(i) for i in indices],
            draw_pile_size=hand.draw_pile().size,
            winner=hand.winner(),
            history=list(hand.history[-10:]),  # Last 10 events
        )
