"""Errors raised by the UNO rules engine.

Every failure is raised straight to the caller; the engine never retries or
corrects anything on its own.
"""


class UnoError(Exception):
    """Base class for rules engine errors."""


class InvalidPlayerCount(UnoError, ValueError):
    """A hand needs between 2 and 10 players."""


class PlayerIndexOutOfBounds(UnoError, IndexError):
    """A player index outside [0, player_count)."""


class RoundEnded(UnoError):
    """A mutating operation was called on a hand that has a winner."""


class CardNotFound(UnoError, IndexError):
    """A card index that does not address a card in the hand."""


class IllegalPlay(UnoError):
    """The card cannot be played on the current discard top."""


class MissingColorChoice(UnoError, ValueError):
    """A wild card was played without choosing a color."""


class InvalidColorChoice(UnoError, ValueError):
    """A color was chosen for a non-wild card, or the color is not valid."""


class InvalidTargetScore(UnoError, ValueError):
    """The target score of a game must be greater than 0."""


class EmptyPile(UnoError):
    """The discard pile has no cards."""


class EmptyDeck(UnoError):
    """Dealt from an empty deck."""


class NoCardsAvailable(EmptyDeck):
    """Both the draw pile and the spent discards are exhausted."""
