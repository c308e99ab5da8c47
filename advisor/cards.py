from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import InvalidCardFormat

RANKS = "23456789TJQKA"
SUITS = "HDCS"


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if len(self.rank) != 1 or self.rank not in RANKS:
            raise InvalidCardFormat(f"Invalid rank: {self.rank}")
        if len(self.suit) != 1 or self.suit not in SUITS:
            raise InvalidCardFormat(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.label


def validate_card(token: object) -> Card:
    """Parse a token such as ``"ah"`` or ``" KS "`` into a canonical Card."""
    if not isinstance(token, str):
        raise InvalidCardFormat(f"Invalid card label: {token!r}")
    label = token.strip()
    # ASCII only: Unicode upper-casing maps some letters onto ranks and suits.
    if len(label) != 2 or not label.isascii():
        raise InvalidCardFormat(f"Invalid card label: {token!r}")
    label = label.upper()
    return Card(label[0], label[1])


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [validate_card(label) for label in labels]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]
