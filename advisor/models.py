from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Tuple

from .errors import InvalidRange
from .validation import AmountLike, validate_amount, validate_integer

LOGGER = logging.getLogger("holdem_advisor.session")

MIN_OPPONENTS = 1
MAX_OPPONENTS = 8
ZERO = Decimal(0)


class Street(str, Enum):
    PREFLOP = "PREFLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"

    @property
    def label(self) -> str:
        return _STREET_LABELS[self]

    @property
    def cards_dealt(self) -> int:
        """Community cards revealed when the hand moves onto this street."""
        return _CARDS_DEALT[self]

    @property
    def board_size(self) -> int:
        return _BOARD_SIZE[self]

    def next(self) -> Optional[Street]:
        idx = STREET_ORDER.index(self)
        if idx + 1 >= len(STREET_ORDER):
            return None
        return STREET_ORDER[idx + 1]


STREET_ORDER: Tuple[Street, ...] = (Street.PREFLOP, Street.FLOP, Street.TURN, Street.RIVER)
_STREET_LABELS = {
    Street.PREFLOP: "Pre-flop",
    Street.FLOP: "Flop",
    Street.TURN: "Turn",
    Street.RIVER: "River",
}
_CARDS_DEALT = {Street.PREFLOP: 0, Street.FLOP: 3, Street.TURN: 1, Street.RIVER: 1}
_BOARD_SIZE = {Street.PREFLOP: 0, Street.FLOP: 3, Street.TURN: 4, Street.RIVER: 5}


class ActionType(str, Enum):
    FOLD = "FOLD"
    CALL = "CALL"
    RAISE = "RAISE"


@dataclass(frozen=True)
class Decision:
    action: ActionType
    amount: Decimal = ZERO
    reasoning: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.action, ActionType):
            raise ValueError(f"Unsupported action {self.action!r}")
        if self.amount < 0:
            raise ValueError("Decision amount cannot be negative")
        if self.action is ActionType.FOLD and self.amount != 0:
            raise ValueError("A fold carries no amount")

    @classmethod
    def fold(cls, reasoning: str = "") -> Decision:
        return cls(ActionType.FOLD, ZERO, reasoning)

    @classmethod
    def call(cls, amount: Decimal, reasoning: str = "") -> Decision:
        return cls(ActionType.CALL, Decimal(amount), reasoning)

    @classmethod
    def raise_to(cls, amount: Decimal, reasoning: str = "") -> Decision:
        return cls(ActionType.RAISE, Decimal(amount), reasoning)


@dataclass
class GameSession:
    """Table configuration that outlives a single hand."""

    opponent_count: int
    small_blind: Decimal
    big_blind: Decimal
    player_pot: Decimal = ZERO
    opponent_pots: Tuple[Decimal, ...] = field(default_factory=tuple)
    hands_played: int = 0

    @classmethod
    def configure(
        cls,
        opponent_count: int,
        small_blind: AmountLike,
        big_blind: AmountLike,
        player_pot: AmountLike = 0,
        opponent_pots: Optional[Iterable[AmountLike]] = None,
    ) -> GameSession:
        count = validate_integer(opponent_count, MIN_OPPONENTS, MAX_OPPONENTS)
        small = validate_amount(small_blind)
        big = validate_amount(big_blind)
        if small > big:
            LOGGER.warning("Small blind %s is larger than big blind %s", small, big)

        session = cls(
            opponent_count=count,
            small_blind=small,
            big_blind=big,
            player_pot=validate_amount(player_pot),
            opponent_pots=(ZERO,) * count,
        )
        if opponent_pots is not None:
            session.update_opponent_pots(opponent_pots)
        LOGGER.info("Session configured: %s opponents, blinds %s/%s", count, small, big)
        return session

    def update_pot(self, player_pot: AmountLike) -> None:
        self.player_pot = validate_amount(player_pot)

    def update_opponent_pots(self, pots: Iterable[AmountLike]) -> None:
        values = tuple(validate_amount(pot) for pot in pots)
        if len(values) != self.opponent_count:
            raise InvalidRange(f"Expected {self.opponent_count} opponent pots, got {len(values)}")
        self.opponent_pots = values

    def record_hand(self) -> None:
        self.hands_played += 1
