"""Unit tests for the human agent prompt."""

from unorules.agents import HumanAgent
from unorules.agents.human_agent import describe_action
from unorules.engine import (
    CardType,
    CatchUnoFailure,
    Color,
    DrawCard,
    PlayCard,
    PlayerView,
    SayUno,
    get_legal_actions,
)
from tests.support import act, deal, num

R, G, B = Color.RED, Color.GREEN, Color.BLUE


def _view_and_actions():
    hand = deal([[num(R, 5), act(CardType.SKIP, B)], [num(R, 5), num(G, 7)]], num(R, 3))
    return PlayerView.from_hand(hand, 0), get_legal_actions(hand, 0)


def test_describe_action() -> None:
    view, _ = _view_and_actions()
    assert describe_action(DrawCard(), view) == "DRAW"
    assert describe_action(SayUno(), view) == "SAY UNO"
    assert describe_action(CatchUnoFailure(accused=1), view) == "CATCH B (no UNO)"
    assert describe_action(PlayCard(index=0), view) == "PLAY red_5"
    assert describe_action(PlayCard(index=1, chosen_color=G), view) == "PLAY blue_skip (choose color: green)"


def test_human_agent_retries_bad_input(monkeypatch, capsys) -> None:
    view, actions = _view_and_actions()
    answers = iter(["nope", "9", "1"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    chosen = HumanAgent("Ann").get_action(view, actions, 0)
    assert chosen == actions[1]
    out = capsys.readouterr().out
    assert "Ann's turn" in out
    assert out.count("Invalid. Try again.") == 2


def test_human_agent_without_actions() -> None:
    view, _ = _view_and_actions()
    assert HumanAgent().get_action(view, [], 0) is None


def test_human_agent_can_pass_on_a_catch(monkeypatch, capsys) -> None:
    view, _ = _view_and_actions()
    monkeypatch.setattr("builtins.input", lambda prompt: "")
    assert HumanAgent("Ann").get_action(view, [CatchUnoFailure(accused=1)], 0) is None
    assert "Ann's chance to catch" in capsys.readouterr().out
