from __future__ import annotations

import logging
import random
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Optional

from advisor.engine import DecisionEngine, FunctionEngine
from advisor.hand import HandSnapshot
from advisor.models import Decision

LOGGER = logging.getLogger("holdem_advisor.strategy")

CENT = Decimal("0.01")
FOLD_BELOW = 0.2
CALL_BELOW = 0.6


class RandomStrategy:
    """Stand-in policy: a weighted coin flip between fold, call and raise.

    Roughly a fifth of spots fold, two fifths call and the rest raise to
    between two and three times the amount to call. Inject ``rng`` to make
    the sequence reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def decide(self, snapshot: HandSnapshot) -> Decision:
        roll = self.rng.random()
        LOGGER.debug(
            "Random policy on the %s: roll=%.2f pot_odds=%s",
            snapshot.street.label.lower(),
            roll,
            snapshot.pot_odds,
        )
        if roll < FOLD_BELOW:
            return Decision.fold("Hand too weak for current pot odds")
        if roll < CALL_BELOW:
            return Decision.call(snapshot.to_call, "Decent hand, calling to see next card")
        amount = (snapshot.to_call * Decimal(2 + roll)).quantize(CENT, rounding=ROUND_HALF_UP)
        # A free table (no blinds, no bets) would otherwise raise to zero.
        amount = max(amount, snapshot.to_call + CENT)
        return Decision.raise_to(amount, "Strong hand detected, raising for value/bluff")


def calling_station(snapshot: HandSnapshot) -> Decision:
    """Always match the current bet; handy for walking a hand to the river."""
    return Decision.call(snapshot.to_call, "Calling station: always see the next card")


StrategyFactory = Callable[[Optional[int]], DecisionEngine]

STRATEGIES: Dict[str, StrategyFactory] = {
    "random": lambda seed: RandomStrategy(random.Random(seed)),
    "call": lambda seed: FunctionEngine(calling_station),
}


def build_strategy(name: str, seed: Optional[int] = None) -> DecisionEngine:
    key = name.strip().casefold()
    try:
        factory = STRATEGIES[key]
    except KeyError:
        raise ValueError(f"Unknown strategy {name!r}; choose from {', '.join(sorted(STRATEGIES))}") from None
    return factory(seed)
