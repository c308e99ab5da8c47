from __future__ import annotations

from collections import deque
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from advisor.controller import HandObserver, HandResult, RoundController
from advisor.hand import HandSnapshot
from advisor.models import Decision, GameSession, Street


class ScriptedEngine:
    """Hand out queued decisions in order and remember every snapshot seen."""

    def __init__(self, decisions: Iterable[Decision]) -> None:
        self.decisions = deque(decisions)
        self.seen: List[HandSnapshot] = []

    def decide(self, snapshot: HandSnapshot) -> Decision:
        self.seen.append(snapshot)
        if not self.decisions:
            raise AssertionError(f"Unexpected decision request on the {snapshot.street.value}")
        return self.decisions.popleft()


class TokenFeed:
    """Stand-in for keyboard input: returns scripted lines and records prompts."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens = deque(tokens)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.tokens:
            raise AssertionError(f"Unexpected prompt {prompt!r}")
        return self.tokens.popleft()


class RecordingObserver(HandObserver):
    def __init__(self) -> None:
        self.streets: List[Street] = []
        self.requested: List[Street] = []
        self.consulted: List[Street] = []
        self.rejected: List[Tuple[str, Exception]] = []
        self.result: Optional[HandResult] = None

    def cards_requested(self, street: Street) -> None:
        self.requested.append(street)

    def street_started(self, snapshot: HandSnapshot) -> None:
        self.streets.append(snapshot.street)

    def decision_requested(self, snapshot: HandSnapshot) -> None:
        self.consulted.append(snapshot.street)

    def input_rejected(self, prompt: str, error: Exception) -> None:
        self.rejected.append((prompt, error))

    def hand_finished(self, result: HandResult) -> None:
        self.result = result


def create_session(
    *,
    opponents: int = 2,
    sb: int = 1,
    bb: int = 2,
    player_pot: int = 100,
) -> GameSession:
    """Session matching the reference walkthrough: two opponents, 1/2 blinds."""
    return GameSession.configure(opponents, sb, bb, player_pot=player_pot)


def create_controller(
    decisions: Iterable[Decision],
    tokens: Iterable[str] = (),
) -> Tuple[RoundController, ScriptedEngine, TokenFeed, RecordingObserver]:
    engine = ScriptedEngine(decisions)
    feed = TokenFeed(tokens)
    observer = RecordingObserver()
    return RoundController(engine, feed, observer=observer), engine, feed, observer


def call(amount: int = 2) -> Decision:
    return Decision.call(Decimal(amount), "scripted call")


def raise_to(amount: int = 6) -> Decision:
    return Decision.raise_to(Decimal(amount), "scripted raise")


def fold() -> Decision:
    return Decision.fold("scripted fold")
