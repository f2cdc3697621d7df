"""Rules engine for UNO."""

from unorules.engine.actions import (
    Action,
    CatchUnoFailure,
    DrawCard,
    PlayCard,
    SayUno,
    apply_action,
    get_catch_actions,
    get_legal_actions,
)
from unorules.engine.card import Card, CardType, Color
from unorules.engine.deck import Deck, create_standard_deck
from unorules.engine.discard_pile import DiscardPile
from unorules.engine.errors import (
    CardNotFound,
    EmptyDeck,
    EmptyPile,
    IllegalPlay,
    InvalidColorChoice,
    InvalidPlayerCount,
    InvalidTargetScore,
    MissingColorChoice,
    NoCardsAvailable,
    PlayerIndexOutOfBounds,
    RoundEnded,
    UnoError,
)
from unorules.engine.game import Game
from unorules.engine.hand import Hand, HandEnded, is_playable
from unorules.engine.view import PlayerView

__all__ = [
    "Card",
    "CardType",
    "Color",
    "Deck",
    "create_standard_deck",
    "DiscardPile",
    "Hand",
    "HandEnded",
    "is_playable",
    "Game",
    "PlayerView",
    "Action",
    "PlayCard",
    "DrawCard",
    "SayUno",
    "CatchUnoFailure",
    "get_legal_actions",
    "get_catch_actions",
    "apply_action",
    "UnoError",
    "InvalidPlayerCount",
    "PlayerIndexOutOfBounds",
    "RoundEnded",
    "CardNotFound",
    "IllegalPlay",
    "MissingColorChoice",
    "InvalidColorChoice",
    "InvalidTargetScore",
    "EmptyPile",
    "EmptyDeck",
    "NoCardsAvailable",
]
