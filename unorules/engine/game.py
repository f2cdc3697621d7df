"""A match of several hands, played until someone reaches the target score."""

import logging
from typing import List, Optional, Sequence

from unorules.engine.errors import InvalidTargetScore, PlayerIndexOutOfBounds
from unorules.engine.hand import DEFAULT_CARDS_PER_PLAYER, Hand, HandEnded
from unorules.engine.random_utils import (
    Randomizer,
    Shuffler,
    standard_randomizer,
    standard_shuffler,
)

logger = logging.getLogger(__name__)


class Game:
    """Runs hands back to back and keeps the cumulative scores.

    Each hand is dealt by a randomly chosen dealer. When a hand ends its score
    goes to the winner; a new hand starts unless the winner reached the target.
    """

    def __init__(
        self,
        players: Sequence[str] = ("A", "B"),
        target_score: int = 500,
        randomizer: Randomizer = standard_randomizer,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: Optional[int] = None,
    ):
        if target_score <= 0:
            raise InvalidTargetScore("Target score must be greater than 0")
        self._players = tuple(players)
        self._target_score = target_score
        self._randomizer = randomizer
        self._shuffler = shuffler
        self._cards_per_player = (
            DEFAULT_CARDS_PER_PLAYER if cards_per_player is None else cards_per_player
        )
        self._scores: List[int] = [0] * len(self._players)
        self._hand: Optional[Hand] = None
        self._winner: Optional[int] = None
        self._hands_played = 0
        self._start_hand()

    def _start_hand(self) -> None:
        dealer = self._randomizer(len(self._players))
        hand = Hand(
            self._players,
            dealer=dealer,
            shuffler=self._shuffler,
            cards_per_player=self._cards_per_player,
        )
        hand.on_end(lambda event: self._hand_ended(hand, event))
        self._hand = hand
        logger.debug("Hand %d started, dealer %s", self._hands_played + 1, self._players[dealer])

    def _hand_ended(self, hand: Hand, event: HandEnded) -> None:
        points = hand.score() or 0
        self._scores[event.winner] += points
        self._hands_played += 1
        logger.info(
            "%s won hand %d for %d points (total %d)",
            self._players[event.winner],
            self._hands_played,
            points,
            self._scores[event.winner],
        )
        if self._scores[event.winner] >= self._target_score:
            self._winner = event.winner
            self._hand = None
            logger.info("%s won the match", self._players[event.winner])
        else:
            self._start_hand()

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def target_score(self) -> int:
        return self._target_score

    @property
    def hands_played(self) -> int:
        return self._hands_played

    def player(self, index: int) -> str:
        self._check_player(index)
        return self._players[index]

    def current_hand(self) -> Optional[Hand]:
        return self._hand

    def score(self, index: int) -> int:
        self._check_player(index)
        return self._scores[index]

    def winner(self) -> Optional[int]:
        return self._winner

    def _check_player(self, index: int) -> None:
        if not 0 <= index < len(self._players):
            raise PlayerIndexOutOfBounds(f"Player index out of bounds: {index}")
