"""Unit tests for the hand event log."""

from unorules.engine import CardType, Color, Hand
from unorules.engine.random_utils import seeded_shuffler
from tests.support import WILD, act, deal, num

R, Y, G, B = Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE


def _two_players():
    return deal([[num(R, 5), act(CardType.SKIP, B)], [num(R, 5), num(G, 7)]], num(R, 3))


def test_history_initialization():
    hand = Hand(["p1", "p2"], dealer=0, shuffler=seeded_shuffler(42))
    assert hand.history[0].startswith("p1 dealt, first card ")


def test_history_records_play():
    hand = _two_players()
    hand.play(0)
    assert hand.history[-1] == "A played red_5"


def test_history_records_wild_color():
    hand = deal([[WILD, num(R, 7)], [num(Y, 1), num(Y, 3)]], num(R, 4))
    hand.play(0, Color.BLUE)
    assert hand.history[-1] == "A played wild (chose blue)"


def test_history_records_draw():
    hand = _two_players()
    hand.draw()
    assert hand.history[-1] == "A drew a card"


def test_history_records_uno_and_catch():
    hand = _two_players()
    hand.play(0)
    hand.say_uno(1)
    hand.catch_uno_failure(accuser=1, accused=0)
    assert hand.history[-4:] == (
        "A played red_5",
        "B said UNO",
        "B caught A without UNO",
        "A drew 4 cards (penalty)",
    )


def test_history_records_win():
    hand = deal([[num(R, 7)], [num(Y, 9)]], num(R, 4))
    hand.play(0)
    assert hand.history[-1] == "A played red_7 and WON!"


def test_history_persists_across_turns():
    hand = _two_players()
    hand.play(0)
    hand.draw()
    assert hand.history[1:] == ("A played red_5", "B drew a card")
