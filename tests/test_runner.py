"""Integration tests: full matches between random agents."""

from unorules.agents.random_agent import RandomAgent
from unorules.engine import (
    CardType,
    Color,
    Game,
    PlayerView,
    apply_action,
    get_legal_actions,
)
from unorules.engine.random_utils import seeded_randomizer, seeded_shuffler
from unorules.orchestration import MatchRunner, run_tournament
from unorules.orchestration.match_runner import poll_catches
from tests.support import act, deal, num, total_cards


def _agents(count: int, forgetful: float = 0.0) -> dict:
    return {f"p{i}": RandomAgent(f"p{i}", seed=i, forgetful=forgetful) for i in range(count)}


def test_cards_are_conserved_through_a_match() -> None:
    agents = list(_agents(4, forgetful=0.5).values())
    game = Game(
        ["p0", "p1", "p2", "p3"],
        target_score=150,
        randomizer=seeded_randomizer(11),
        shuffler=seeded_shuffler(11),
    )
    turns = 0
    while game.winner() is None and turns < 20000:
        hand = game.current_hand()
        assert total_cards(hand) == 108
        player = hand.player_in_turn()
        legal = get_legal_actions(hand, player)
        view = PlayerView.from_hand(hand, player)
        apply_action(hand, player, agents[player].get_action(view, legal, player))
        assert total_cards(hand) == 108
        if hand.has_ended():
            assert len(hand.player_hand(hand.winner())) == 0
        turns += 1

    assert game.winner() is not None
    assert game.score(game.winner()) >= 150


def test_match_runner() -> None:
    runner = MatchRunner(_agents(3), target_score=100, seed=7)
    result = runner.run()
    assert result.winner in ("p0", "p1", "p2")
    assert result.scores[result.winner] >= 100
    assert result.hands_played >= 1
    assert result.num_turns > 0
    assert result.player_ids == ("p0", "p1", "p2")


def test_match_runner_is_reproducible() -> None:
    first = MatchRunner(_agents(2), target_score=100, seed=3).run()
    second = MatchRunner(_agents(2), target_score=100, seed=3).run()
    assert first == second


def test_match_runner_turn_limit() -> None:
    result = MatchRunner(_agents(2), target_score=500, seed=3, max_turns=5).run()
    assert result.winner is None
    assert result.num_turns == 5


def test_tournament() -> None:
    wins = run_tournament(_agents(2), num_matches=3, seed=1, target_score=50)
    assert sum(wins.values()) == 3
    assert set(wins) <= {"p0", "p1"}


def test_agents_follow_the_protocol() -> None:
    from unorules.agent.protocol import AgentProtocol
    from unorules.agents import HumanAgent

    assert isinstance(RandomAgent("bot"), AgentProtocol)
    assert isinstance(HumanAgent("me"), AgentProtocol)


def test_random_agent_prefers_catching() -> None:
    from unorules.engine import CatchUnoFailure, DrawCard, PlayCard, SayUno

    agent = RandomAgent("bot", seed=0)
    legal = [CatchUnoFailure(accused=1), SayUno(), PlayCard(index=0), DrawCard()]
    assert agent.get_action(None, legal, 0) == CatchUnoFailure(accused=1)
    assert agent.get_action(None, legal[1:], 0) == SayUno()
    assert agent.get_action(None, legal[2:], 0) == PlayCard(index=0)
    assert agent.get_action(None, legal[3:], 0) == DrawCard()


class _Passer:
    name = "passer"

    def get_action(self, player_view, legal_actions, player):
        return None


def test_poll_catches_player_who_plays_again() -> None:
    hand = deal(
        [[act(CardType.SKIP, Color.RED), num(Color.RED, 7)], [num(Color.YELLOW, 1), num(Color.YELLOW, 3)]],
        num(Color.RED, 4),
    )
    hand.play(0)
    assert hand.player_in_turn() == 0
    assert poll_catches(hand, [RandomAgent("a"), RandomAgent("b")]) == 1
    assert len(hand.player_hand(0)) == 5


def test_poll_catches_any_seat() -> None:
    hands = [
        [num(Color.RED, 5), num(Color.RED, 6)],
        [num(Color.RED, 8), num(Color.GREEN, 7)],
        [num(Color.RED, 9), num(Color.GREEN, 2)],
    ]

    hand = deal(hands, num(Color.RED, 3))
    hand.play(0)
    assert poll_catches(hand, [_Passer(), _Passer(), _Passer()]) == 0
    assert len(hand.player_hand(0)) == 1

    hand = deal(hands, num(Color.RED, 3))
    hand.play(0)
    assert poll_catches(hand, [_Passer(), _Passer(), RandomAgent("c")]) == 1
    assert len(hand.player_hand(0)) == 5
    assert hand.history[-2] == "C caught A without UNO"
