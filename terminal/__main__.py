from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from strategies import STRATEGIES, build_strategy

from .app import AdvisorConsole


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Texas Hold'em decision-support console")
    parser.add_argument(
        "--strategy",
        default="random",
        choices=sorted(STRATEGIES),
        help="Decision engine used for recommendations",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random strategy")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (WARNING keeps the interactive screen clean)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    console = AdvisorConsole(build_strategy(args.strategy, seed=args.seed))
    console.run()


if __name__ == "__main__":
    main()
