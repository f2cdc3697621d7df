"""Single match runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unorules.engine import (
    Game,
    Hand,
    PlayerView,
    apply_action,
    get_catch_actions,
    get_legal_actions,
)
from unorules.engine.actions import DrawCard
from unorules.engine.random_utils import seeded_randomizer, seeded_shuffler

if TYPE_CHECKING:
    from unorules.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


def poll_catches(hand: Hand, seats: list["AgentProtocol"]) -> int:
    """Give every seat but the one in turn a chance to catch a missing UNO.

    Seats are asked in turn order. Returns the number of catches made.
    """
    in_turn = hand.player_in_turn()
    caught = 0
    for offset in range(1, hand.player_count):
        seat = (in_turn + offset * hand.direction) % hand.player_count
        catches = get_catch_actions(hand, seat)
        if not catches:
            continue
        action = seats[seat].get_action(PlayerView.from_hand(hand, seat), catches, seat)
        if action is not None:
            apply_action(hand, seat, action)
            caught += 1
    return caught


@dataclass
class MatchResult:
    """Result of a completed match."""

    winner: Optional[str]
    scores: dict[str, int]
    hands_played: int
    num_turns: int
    player_ids: tuple[str, ...]


class MatchRunner:
    """Runs a single UNO match to completion."""

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        target_score: int = 500,
        seed: Optional[int] = None,
        cards_per_player: Optional[int] = None,
        max_turns: int = 20000,
    ):
        self._agents = agents
        self._target_score = target_score
        self._seed = seed
        self._cards_per_player = cards_per_player
        self._max_turns = max_turns

    def run(self) -> MatchResult:
        """Run the match and return the result."""
        player_ids = list(self._agents.keys())
        game = Game(
            player_ids,
            target_score=self._target_score,
            randomizer=seeded_randomizer(self._seed),
            shuffler=seeded_shuffler(self._seed),
            cards_per_player=self._cards_per_player,
        )
        seats = [self._agents[pid] for pid in player_ids]
        num_turns = 0

        while game.winner() is None and num_turns < self._max_turns:
            hand = game.current_hand()
            num_turns += poll_catches(hand, seats)
            player = hand.player_in_turn()
            legal = get_legal_actions(hand, player)
            if not legal:
                break

            player_view = PlayerView.from_hand(hand, player)
            action = seats[player].get_action(player_view, legal, player)

            if action is None:
                action = DrawCard()

            apply_action(hand, player, action)
            num_turns += 1

        if game.winner() is None:
            logger.warning("Match stopped after %d turns without a winner", num_turns)

        winner = game.winner()
        return MatchResult(
            winner=player_ids[winner] if winner is not None else None,
            scores={pid: game.score(i) for i, pid in enumerate(player_ids)},
            hands_played=game.hands_played,
            num_turns=num_turns,
            player_ids=tuple(player_ids),
        )
