from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Tuple, Union

from .cards import Card, validate_card
from .errors import DuplicateCard, InvalidCallCount, InvalidHandSize, StreetOutOfOrder
from .models import GameSession, Street
from .validation import AmountLike, validate_amount

LOGGER = logging.getLogger("holdem_advisor.hand")

# HandState is a value: every transition returns a fresh instance, so the state
# a decision engine saw on one street is never altered by the next.

CardLike = Union[Card, str]


def _as_card(card: CardLike) -> Card:
    return card if isinstance(card, Card) else validate_card(card)


@dataclass(frozen=True)
class HandSnapshot:
    """Read-only view of a hand handed to decision engines."""

    street: Street
    hole_cards: Tuple[Card, Card]
    community: Tuple[Card, ...]
    player_pot: Decimal
    opponent_pots: Tuple[Decimal, ...]
    opponent_calls: Tuple[Decimal, ...]
    small_blind: Decimal
    big_blind: Decimal

    @property
    def to_call(self) -> Decimal:
        # Nobody has wagered yet: matching the big blind is the cheapest call.
        highest = max(self.opponent_calls, default=Decimal(0))
        return highest if highest > 0 else self.big_blind

    @property
    def pot_odds(self) -> Optional[Decimal]:
        if self.player_pot <= 0:
            return None
        return self.to_call / self.player_pot


@dataclass(frozen=True)
class HandState:
    hole_cards: Tuple[Card, Card]
    player_pot: Decimal
    opponent_calls: Tuple[Decimal, ...]
    opponent_pots: Tuple[Decimal, ...]
    small_blind: Decimal
    big_blind: Decimal
    community: Tuple[Card, ...] = ()
    street: Street = Street.PREFLOP
    finished: bool = False

    @classmethod
    def new_hand(
        cls,
        session: GameSession,
        hole_cards: Sequence[CardLike],
        player_pot: AmountLike,
        opponent_calls: Sequence[AmountLike],
    ) -> HandState:
        if len(hole_cards) != 2:
            raise InvalidHandSize(f"A hand needs exactly 2 hole cards, got {len(hole_cards)}")
        first, second = (_as_card(card) for card in hole_cards)
        if first == second:
            raise DuplicateCard(f"Card {first} is already in play")
        if len(opponent_calls) != session.opponent_count:
            raise InvalidCallCount(
                f"Expected {session.opponent_count} opponent calls, got {len(opponent_calls)}"
            )

        state = cls(
            hole_cards=(first, second),
            player_pot=validate_amount(player_pot),
            opponent_calls=tuple(validate_amount(call) for call in opponent_calls),
            opponent_pots=tuple(session.opponent_pots),
            small_blind=session.small_blind,
            big_blind=session.big_blind,
        )
        LOGGER.info("New hand: %s %s, pot %s", first, second, state.player_pot)
        return state

    @property
    def is_finished(self) -> bool:
        return self.finished

    def cards_in_play(self) -> Tuple[Card, ...]:
        return self.hole_cards + self.community

    def advance_street(self, new_cards: Iterable[CardLike]) -> HandState:
        if self.finished:
            raise StreetOutOfOrder("Hand is already finished")
        next_street = self.street.next()
        if next_street is None:
            raise StreetOutOfOrder(f"No street follows the {self.street.label.lower()}")

        cards = tuple(_as_card(card) for card in new_cards)
        total = len(self.community) + len(cards)
        if total != next_street.board_size:
            raise StreetOutOfOrder(
                f"{next_street.label} needs {next_street.board_size} community cards, got {total}"
            )

        seen = set(self.cards_in_play())
        for card in cards:
            if card in seen:
                raise DuplicateCard(f"Card {card} is already in play")
            seen.add(card)

        LOGGER.info("%s: %s", next_street.label, " ".join(card.label for card in cards))
        return replace(self, community=self.community + cards, street=next_street)

    def conclude(self) -> HandState:
        return replace(self, finished=True)

    def snapshot(self) -> HandSnapshot:
        return HandSnapshot(
            street=self.street,
            hole_cards=self.hole_cards,
            community=self.community,
            player_pot=self.player_pot,
            opponent_pots=self.opponent_pots,
            opponent_calls=self.opponent_calls,
            small_blind=self.small_blind,
            big_blind=self.big_blind,
        )
