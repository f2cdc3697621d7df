"""Simulate a match between random agents and print the hand log."""

from unorules.agents.random_agent import RandomAgent
from unorules.engine import Game, PlayerView, apply_action, get_legal_actions
from unorules.engine.random_utils import seeded_randomizer, seeded_shuffler


def main():
    names = ["p1", "p2", "p3", "p4"]
    agents = [RandomAgent(name, seed=i, forgetful=0.3) for i, name in enumerate(names)]
    game = Game(
        names,
        target_score=200,
        randomizer=seeded_randomizer(42),
        shuffler=seeded_shuffler(42),
    )

    while game.winner() is None:
        hand = game.current_hand()
        seen = len(hand.history)
        player = hand.player_in_turn()
        legal = get_legal_actions(hand, player)
        view = PlayerView.from_hand(hand, player)
        apply_action(hand, player, agents[player].get_action(view, legal, player))
        for event in hand.history[seen:]:
            print(f"> {event}")
        if hand.has_ended():
            print(f"--- hand over, {hand.player(hand.winner())} scores {hand.score()}")

    print(f"Match finished! Winner: {game.player(game.winner())}")
    for i, name in enumerate(names):
        print(f"  {name}: {game.score(i)}")


if __name__ == "__main__":
    main()
