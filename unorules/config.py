"""Settings read from the environment (and a .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Defaults for the command line.

    Environment variables: UNO_PLAYERS (comma-separated names), UNO_TARGET_SCORE,
    UNO_CARDS_PER_PLAYER, UNO_SEED, UNO_LOG_LEVEL.
    """

    players: tuple[str, ...] = ("A", "B")
    target_score: int = 500
    cards_per_player: int = 7
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables from a .env file in the working directory
        load_dotenv(find_dotenv(usecwd=True))
        players = tuple(
            name.strip()
            for name in os.environ.get("UNO_PLAYERS", "").split(",")
            if name.strip()
        )
        return cls(
            players=players or cls.players,
            target_score=_int_env("UNO_TARGET_SCORE", cls.target_score),
            cards_per_player=_int_env("UNO_CARDS_PER_PLAYER", cls.cards_per_player),
            seed=_int_env("UNO_SEED", None),
            log_level=os.environ.get("UNO_LOG_LEVEL", cls.log_level).upper(),
        )
