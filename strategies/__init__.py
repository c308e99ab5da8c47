"""Decision engines the advisor can be started with."""

from .bots import STRATEGIES, RandomStrategy, build_strategy, calling_station

__all__ = ["STRATEGIES", "RandomStrategy", "build_strategy", "calling_station"]
