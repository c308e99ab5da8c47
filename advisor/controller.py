from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .cards import Card, validate_card
from .engine import DecisionEngine, DecisionFunction, as_engine
from .errors import DuplicateCard, InvalidCardFormat
from .hand import CardLike, HandSnapshot, HandState
from .models import ActionType, Decision, GameSession, Street
from .validation import AmountLike

LOGGER = logging.getLogger("holdem_advisor.round")

# RoundController walks one hand street by street. It never prints: the outside
# world supplies raw card tokens through ``read_token`` and watches progress
# through a HandObserver.

TokenReader = Callable[[str], str]


@dataclass(frozen=True)
class StreetDecision:
    street: Street
    decision: Decision


@dataclass(frozen=True)
class HandResult:
    state: HandState
    decisions: Tuple[StreetDecision, ...]

    @property
    def final_decision(self) -> Decision:
        return self.decisions[-1].decision

    @property
    def folded(self) -> bool:
        return self.final_decision.action is ActionType.FOLD


class HandObserver:
    """Progress hooks for a hand. The defaults do nothing."""

    def cards_requested(self, street: Street) -> None:
        pass

    def street_started(self, snapshot: HandSnapshot) -> None:
        pass

    def decision_requested(self, snapshot: HandSnapshot) -> None:
        pass

    def decision_made(self, street: Street, decision: Decision) -> None:
        pass

    def input_rejected(self, prompt: str, error: Exception) -> None:
        pass

    def hand_finished(self, result: HandResult) -> None:
        pass


class RoundController:
    def __init__(
        self,
        engine: Union[DecisionEngine, DecisionFunction],
        read_token: TokenReader,
        observer: Optional[HandObserver] = None,
    ) -> None:
        self.engine = as_engine(engine)
        self.read_token = read_token
        self.observer = observer or HandObserver()

    def play_hand(
        self,
        session: GameSession,
        hole_cards: Sequence[CardLike],
        player_pot: AmountLike,
        opponent_calls: Sequence[AmountLike],
    ) -> HandResult:
        state = HandState.new_hand(session, hole_cards, player_pot, opponent_calls)
        decisions: List[StreetDecision] = []

        while True:
            self.observer.street_started(state.snapshot())
            decision = self._request_decision(state)
            decisions.append(StreetDecision(state.street, decision))

            if decision.action is ActionType.FOLD or state.street is Street.RIVER:
                state = state.conclude()
                break

            next_street = state.street.next()
            assert next_street is not None
            cards = self.collect_cards(next_street, exclude=state.cards_in_play())
            state = state.advance_street(cards)

        result = HandResult(state=state, decisions=tuple(decisions))
        LOGGER.info(
            "Hand finished on the %s: %s",
            state.street.label.lower(),
            "folded" if result.folded else result.final_decision.action.value,
        )
        self.observer.hand_finished(result)
        return result

    # Card collection ---------------------------------------------------

    def collect_cards(self, street: Street, exclude: Iterable[Card] = ()) -> List[Card]:
        taken = set(exclude)
        cards: List[Card] = []
        self.observer.cards_requested(street)
        for idx in range(street.cards_dealt):
            if street.cards_dealt == 1:
                prompt = f"Enter the {street.label.lower()} card: "
            else:
                prompt = f"  {street.label} card {idx + 1}: "
            card = self.collect_card(prompt, exclude=taken)
            taken.add(card)
            cards.append(card)
        return cards

    def collect_card(self, prompt: str, exclude: Iterable[Card] = ()) -> Card:
        """Read tokens until one names a legal card that is not already in play."""
        taken = set(exclude)
        while True:
            raw = self.read_token(prompt)
            try:
                card = validate_card(raw)
                if card in taken:
                    raise DuplicateCard(f"Card {card} is already in play")
            except (InvalidCardFormat, DuplicateCard) as exc:
                LOGGER.debug("Rejected card input %r: %s", raw, exc)
                self.observer.input_rejected(prompt, exc)
                continue
            return card

    # Decisions ---------------------------------------------------------

    def _request_decision(self, state: HandState) -> Decision:
        snapshot = state.snapshot()
        self.observer.decision_requested(snapshot)
        decision = self.engine.decide(snapshot)
        if not isinstance(decision, Decision):
            raise TypeError(f"{self.engine!r} returned {decision!r} instead of a Decision")
        LOGGER.info(
            "%s decision: %s %s (%s)",
            state.street.label,
            decision.action.value,
            decision.amount,
            decision.reasoning,
        )
        self.observer.decision_made(state.street, decision)
        return decision
