"""Hold'em advisor core: cards, validation, hand progression and decisions."""

from .cards import Card, RANKS, SUITS, cards_to_labels, parse_cards, validate_card
from .controller import HandObserver, HandResult, RoundController, StreetDecision
from .engine import DecisionEngine, FunctionEngine, as_engine
from .errors import (
    AdvisorError,
    DuplicateCard,
    InvalidAmount,
    InvalidCallCount,
    InvalidCardFormat,
    InvalidHandSize,
    InvalidRange,
    StreetOutOfOrder,
)
from .hand import HandSnapshot, HandState
from .models import MAX_OPPONENTS, MIN_OPPONENTS, ActionType, Decision, GameSession, Street
from .validation import validate_amount, validate_integer

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "cards_to_labels",
    "parse_cards",
    "validate_card",
    "HandObserver",
    "HandResult",
    "RoundController",
    "StreetDecision",
    "DecisionEngine",
    "FunctionEngine",
    "as_engine",
    "AdvisorError",
    "DuplicateCard",
    "InvalidAmount",
    "InvalidCallCount",
    "InvalidCardFormat",
    "InvalidHandSize",
    "InvalidRange",
    "StreetOutOfOrder",
    "HandSnapshot",
    "HandState",
    "MAX_OPPONENTS",
    "MIN_OPPONENTS",
    "ActionType",
    "Decision",
    "GameSession",
    "Street",
    "validate_amount",
    "validate_integer",
]
