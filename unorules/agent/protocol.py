"""Agent protocol - interface that human and simulated players implement."""

from typing import Protocol, runtime_checkable

from unorules.engine import Action, PlayerView


@runtime_checkable
class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's cards and public info.
            legal_actions: List of valid actions to choose from.
            player: This agent's seat index in the hand.

        Returns:
            One of the legal actions, or None to draw.
        """
        ...
