"""Human agent - reads actions from terminal."""

from unorules.engine import Action, PlayerView
from unorules.engine.actions import CatchUnoFailure, DrawCard, SayUno


def describe_action(action: Action, view: PlayerView) -> str:
    if isinstance(action, DrawCard):
        return "DRAW"
    if isinstance(action, SayUno):
        return "SAY UNO"
    if isinstance(action, CatchUnoFailure):
        return f"CATCH {view.player_names[action.accused]} (no UNO)"
    card = view.my_hand[action.index]
    extra = f" (choose color: {action.chosen_color.value})" if action.chosen_color else ""
    return f"PLAY {card}{extra}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

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

        # Outside their turn a player is only offered catches, and may pass
        can_pass = not any(isinstance(a, DrawCard) for a in legal_actions)
        heading = "chance to catch" if can_pass else "turn"
        print(f"\n--- {self._name}'s {heading} ---")
        if player_view.history:
            print("Last:", player_view.history[-1])
        print("Your hand:", " ".join(str(c) for c in player_view.my_hand))
        print("Top discard:", player_view.top_discard)
        counts = ", ".join(
            f"{name}: {count}"
            for name, count in zip(player_view.player_names, player_view.num_cards_per_player)
        )
        print("Cards:", counts)
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a, player_view)}")

        while True:
            try:
                raw = input("Enter number (blank to pass): " if can_pass else "Enter number: ").strip()
                if can_pass and not raw:
                    return None
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            print("Invalid. Try again.")
