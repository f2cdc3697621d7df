"""One round of UNO: deal, turns, special cards, UNO calls and scoring."""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from unorules.engine.card import Card, CardType, Color
from unorules.engine.deck import DECK_SIZE, Deck, create_standard_deck
from unorules.engine.discard_pile import DiscardPile
from unorules.engine.errors import (
    CardNotFound,
    IllegalPlay,
    InvalidColorChoice,
    InvalidPlayerCount,
    MissingColorChoice,
    NoCardsAvailable,
    PlayerIndexOutOfBounds,
    RoundEnded,
)
from unorules.engine.random_utils import Shuffler

MIN_PLAYERS = 2
MAX_PLAYERS = 10
DEFAULT_CARDS_PER_PLAYER = 7
UNO_PENALTY = 4


@dataclass(frozen=True)
class HandEnded:
    """Event passed to end-of-hand observers."""

    winner: int


EndObserver = Callable[[HandEnded], None]


def is_playable(hand: Sequence[Card], card: Card, top: Card) -> bool:
    """Check if card, held in hand, can be played on top.

    Wild Draw is only legal while the hand holds no card of the top color.
    """
    if card.type is CardType.WILD:
        return True
    if card.type is CardType.WILD_DRAW:
        return not any(held.color == top.color for held in hand)
    if card.color == top.color:
        return True
    if card.type is CardType.NUMBERED:
        return top.type is CardType.NUMBERED and card.number == top.number
    return card.type == top.type


class Hand:
    """Mutable state of a single round.

    The hand is over as soon as a player has no cards left. After that every
    mutating call raises RoundEnded.
    """

    def __init__(
        self,
        players: Sequence[str],
        dealer: int,
        shuffler: Shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
    ):
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidPlayerCount(
                f"Need {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(players)}"
            )
        self._players = tuple(players)
        self._check_player(dealer)
        if cards_per_player < 1 or cards_per_player * len(players) >= DECK_SIZE:
            raise ValueError(f"Invalid cards per player: {cards_per_player}")

        self._dealer = dealer
        self._shuffler = shuffler
        self._cards_per_player = cards_per_player
        self._hands: List[List[Card]] = [[] for _ in self._players]
        self._declared = [False] * len(self._players)
        self._window_owner: Optional[int] = None  # player who can be caught
        self._observers: List[EndObserver] = []
        self._history: List[str] = []
        self._direction = 1
        self._current = dealer

        self._deck = create_standard_deck()
        self._deck.shuffle(shuffler)
        for _ in range(cards_per_player):
            for hand in self._hands:
                hand.append(self._deck.deal())

        self._discard = DiscardPile([self._flip()])
        top = self._discard.top()
        self._history.append(f"{self._players[dealer]} dealt, first card {top}")
        # The first card acts as if the dealer had played it
        self._resolve(top)

    def _flip(self) -> Card:
        if not any(not card.is_wild for card in self._deck):
            raise NoCardsAvailable("No card can start the discard pile")
        # Flipped wilds are set aside and go to the bottom once a card sticks
        wilds: List[Card] = []
        card = self._deck.deal()
        while card.is_wild:
            wilds.append(card)
            self._deck.shuffle(self._shuffler)
            card = self._deck.deal()
        self._deck.cards.extend(wilds)
        return card

    # Accessors

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def dealer(self) -> int:
        return self._dealer

    @property
    def direction(self) -> int:
        """1 for clockwise, -1 for counter-clockwise."""
        return self._direction

    @property
    def cards_per_player(self) -> int:
        return self._cards_per_player

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def player(self, index: int) -> str:
        self._check_player(index)
        return self._players[index]

    def player_hand(self, index: int) -> List[Card]:
        self._check_player(index)
        return list(self._hands[index])

    def discard_pile(self) -> DiscardPile:
        return self._discard

    def draw_pile(self) -> Deck:
        return self._deck

    def player_in_turn(self) -> Optional[int]:
        if self.has_ended():
            return None
        return self._current

    def has_declared(self, index: int) -> bool:
        self._check_player(index)
        return self._declared[index]

    def can_play(self, index: int) -> bool:
        if self.has_ended():
            return False
        hand = self._hands[self._current]
        if not 0 <= index < len(hand):
            return False
        return is_playable(hand, hand[index], self._discard.top())

    def can_play_any(self) -> bool:
        if self.has_ended():
            return False
        hand = self._hands[self._current]
        top = self._discard.top()
        return any(is_playable(hand, card, top) for card in hand)

    def has_ended(self) -> bool:
        return any(not hand for hand in self._hands)

    def winner(self) -> Optional[int]:
        for index, hand in enumerate(self._hands):
            if not hand:
                return index
        return None

    def score(self) -> Optional[int]:
        """Points won by the winner: the sum of every card left in the other hands."""
        if not self.has_ended():
            return None
        return sum(card.points for hand in self._hands for card in hand)

    # Actions

    def on_end(self, callback: EndObserver) -> None:
        """Register a callback invoked once, when a player plays their last card."""
        self._observers.append(callback)

    def draw(self) -> Card:
        """Draw a card for the player in turn.

        The turn passes unless the player can play something afterwards.
        """
        self._check_active()
        player = self._current
        card = self._give(player)
        self._window_owner = None
        self._history.append(f"{self._players[player]} drew a card")
        if not self.can_play_any():
            self._current = self._next(1)
        return card

    def play(self, index: int, chosen_color: Optional[Color] = None) -> Card:
        """Play card ``index`` from the hand of the player in turn."""
        self._check_active()
        player = self._current
        hand = self._hands[player]
        if not 0 <= index < len(hand):
            raise CardNotFound(f"No card at index {index} in {self._players[player]}'s hand")
        card = hand[index]
        if chosen_color is not None:
            if not card.is_wild:
                raise InvalidColorChoice(f"Cannot choose a color for {card}")
            try:
                chosen_color = Color(chosen_color)
            except ValueError:
                raise InvalidColorChoice(f"Invalid color: {chosen_color}") from None
        if not self.can_play(index):
            raise IllegalPlay(f"Cannot play {card} on {self._discard.top()}")
        if card.is_wild and chosen_color is None:
            raise MissingColorChoice(f"{card} requires a chosen color")

        hand.pop(index)
        played = card.with_color(chosen_color) if card.is_wild else card
        self._discard.push(played)
        self._window_owner = player

        description = f"{self._players[player]} played {card}"
        if chosen_color is not None:
            description += f" (chose {chosen_color.value})"
        if not hand:
            description += " and WON!"
        self._history.append(description)

        if not hand:
            # Draw penalties still count toward the score
            if card.type is CardType.DRAW:
                self._penalize(self._next(1), 2)
            elif card.type is CardType.WILD_DRAW:
                self._penalize(self._next(1), 4)
            event = HandEnded(winner=player)
            for observer in list(self._observers):
                observer(event)
        else:
            self._resolve(played)
        return card

    def say_uno(self, index: int) -> None:
        """Declare UNO for a player. Has no effect on hands of more than 2 cards."""
        self._check_active()
        self._check_player(index)
        if len(self._hands[index]) > 2:
            return
        self._declared[index] = True
        self._history.append(f"{self._players[index]} said UNO")

    def can_catch_uno_failure(self, accused: int) -> bool:
        """Whether accused can be caught for not saying UNO right now."""
        self._check_player(accused)
        return (
            not self.has_ended()
            and self._window_owner == accused
            and len(self._hands[accused]) == 1
            and not self._declared[accused]
        )

    def catch_uno_failure(self, accuser: int, accused: int) -> bool:
        """Accuse a player of not saying UNO. On success they draw 4 cards."""
        self._check_active()
        self._check_player(accuser)
        if accuser == accused or not self.can_catch_uno_failure(accused):
            return False
        self._window_owner = None
        self._history.append(
            f"{self._players[accuser]} caught {self._players[accused]} without UNO"
        )
        self._penalize(accused, UNO_PENALTY)
        return True

    # Internals

    def _check_player(self, index: int) -> None:
        if not 0 <= index < len(self._players):
            raise PlayerIndexOutOfBounds(f"Player index out of bounds: {index}")

    def _check_active(self) -> None:
        if self.has_ended():
            raise RoundEnded("The hand has ended")

    def _next(self, steps: int) -> int:
        return (self._current + steps * self._direction) % len(self._players)

    def _resolve(self, card: Card) -> None:
        """Apply the effect of card, just played by the player in turn, and pass the turn."""
        steps = 1
        if card.type is CardType.SKIP:
            steps = 2
        elif card.type is CardType.REVERSE:
            self._direction = -self._direction
            if len(self._players) == 2:
                steps = 2
        elif card.type is CardType.DRAW:
            self._penalize(self._next(1), 2)
            steps = 2
        elif card.type is CardType.WILD_DRAW:
            self._penalize(self._next(1), 4)
            steps = 2
        self._current = self._next(steps)

    def _penalize(self, player: int, count: int) -> None:
        for _ in range(count):
            self._give(player)
        self._history.append(f"{self._players[player]} drew {count} cards (penalty)")

    def _give(self, player: int) -> Card:
        if self._deck.size == 0:
            self._reshuffle()
        card = self._deck.deal()
        hand = self._hands[player]
        hand.append(card)
        if len(hand) > 1:
            self._declared[player] = False
        return card

    def _reshuffle(self) -> None:
        """Turn every discard but the top back into a shuffled draw pile."""
        top = self._discard.top()
        spent = Deck(self._discard.cards).filter(lambda card: card is not top)
        if spent.size == 0:
            raise NoCardsAvailable("No cards left to draw")
        self._deck.cards[:] = [card.cleared() for card in spent]
        self._deck.shuffle(self._shuffler)
        self._discard.cards[:] = [top]
