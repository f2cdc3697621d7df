"""Card, Color and CardType for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"


class CardType(str, Enum):
    """Card kinds."""

    NUMBERED = "numbered"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW = "draw"
    WILD = "wild"
    WILD_DRAW = "wild_draw"


WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW)


@dataclass(frozen=True)
class Card:
    """An UNO card.

    NUMBERED cards carry a color and a number 0-9. SKIP, REVERSE and DRAW carry
    a color only. WILD and WILD_DRAW are colorless in the deck and in hands;
    the discard pile holds a copy stamped with the color chosen when played.
    """

    type: CardType
    color: Optional[Color] = None
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type is CardType.NUMBERED:
            if self.color is None:
                raise ValueError("Numbered cards must have a color")
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"{self.type.value} cards have no number")
        elif self.type in ACTION_TYPES and self.color is None:
            raise ValueError(f"{self.type.value} cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    @property
    def points(self) -> int:
        """Score value of the card when left in a losing hand."""
        if self.type is CardType.NUMBERED:
            return self.number
        if self.is_wild:
            return 50
        return 20

    def with_color(self, color: Color) -> "Card":
        """Return this wild card stamped with the chosen color."""
        if not self.is_wild:
            raise ValueError("Only wild cards take a chosen color")
        return replace(self, color=color)

    def cleared(self) -> "Card":
        """Return the card as it sits in the draw pile (wilds lose their color)."""
        if self.is_wild and self.color is not None:
            return replace(self, color=None)
        return self

    def __str__(self) -> str:
        if self.is_wild:
            if self.color is None:
                return self.type.value
            return f"{self.type.value}[{self.color.value}]"
        if self.type is CardType.NUMBERED:
            return f"{self.color.value}_{self.number}"
        return f"{self.color.value}_{self.type.value}"
