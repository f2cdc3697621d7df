"""Random agent - plays any legal action, used to drive simulated matches."""

import random
from typing import Optional

from unorules.engine import Action, PlayerView
from unorules.engine.actions import CatchUnoFailure, PlayCard, SayUno


class RandomAgent:
    """Picks a random legal action.

    Catches come first, then declaring UNO, then playing over drawing to make
    the hand progress. ``forgetful`` is the chance of skipping an UNO call.
    """

    def __init__(self, name: str, seed: Optional[int] = None, forgetful: float = 0.0):
        self._name = name
        self._rng = random.Random(seed)
        self._forgetful = forgetful

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        catches = [a for a in legal_actions if isinstance(a, CatchUnoFailure)]
        if catches:
            return self._rng.choice(catches)
        if any(isinstance(a, SayUno) for a in legal_actions):
            if self._rng.random() >= self._forgetful:
                return SayUno()
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return legal_actions[-1]
