"""Tournament - run many matches and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Optional

from unorules.orchestration.match_runner import MatchRunner


def run_tournament(
    agents: dict[str, Any],
    num_matches: int = 100,
    seed: int | None = None,
    target_score: int = 500,
    cards_per_player: Optional[int] = None,
) -> dict[str, int]:
    """Run a series of matches between the same agents.

    Seating alternates between the given order and its reverse.

    Returns:
        Dict mapping player_id to number of matches won.
    """
    player_ids = list(agents.keys())
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for m in range(num_matches):
        order = player_ids if m % 2 == 0 else list(reversed(player_ids))
        ordered_agents = {pid: agents[pid] for pid in order}
        runner = MatchRunner(
            ordered_agents,
            target_score=target_score,
            seed=rng.randint(0, 2**31 - 1),
            cards_per_player=cards_per_player,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
