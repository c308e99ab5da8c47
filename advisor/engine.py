from __future__ import annotations

from typing import Callable, Protocol, Union, runtime_checkable

from .hand import HandSnapshot
from .models import Decision


@runtime_checkable
class DecisionEngine(Protocol):
    """Recommends an action for the street a hand has reached.

    ``decide`` is called once per street, so it must tolerate several calls
    per hand. Implementations return a :class:`Decision`; a fold never
    carries an amount. Calls should be sized to ``snapshot.to_call`` and
    raises expressed as the total wagered.
    """

    def decide(self, snapshot: HandSnapshot) -> Decision:
        ...


DecisionFunction = Callable[[HandSnapshot], Decision]


class FunctionEngine:
    """Wrap a plain ``snapshot -> Decision`` function as a DecisionEngine."""

    def __init__(self, func: DecisionFunction) -> None:
        self.func = func

    def decide(self, snapshot: HandSnapshot) -> Decision:
        return self.func(snapshot)

    def __repr__(self) -> str:
        return f"FunctionEngine({getattr(self.func, '__name__', self.func)!r})"


def as_engine(engine: Union[DecisionEngine, DecisionFunction]) -> DecisionEngine:
    if isinstance(engine, DecisionEngine):
        return engine
    if callable(engine):
        return FunctionEngine(engine)
    raise TypeError(f"Not a decision engine: {engine!r}")
