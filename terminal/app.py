from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Union

from advisor.cards import Card
from advisor.controller import HandObserver, HandResult, RoundController
from advisor.engine import DecisionEngine, DecisionFunction
from advisor.errors import DuplicateCard, InvalidAmount, InvalidRange
from advisor.hand import HandSnapshot, HandState
from advisor.models import MAX_OPPONENTS, MIN_OPPONENTS, ActionType, Decision, GameSession, Street
from advisor.validation import validate_amount, validate_integer

LOGGER = logging.getLogger("holdem_advisor.terminal")

# AdvisorConsole is the only place that talks to a human. Everything it reads
# goes through the advisor validators before reaching a GameSession or hand.

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class AdvisorConsole(HandObserver):
    def __init__(
        self,
        engine: Union[DecisionEngine, DecisionFunction],
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.input_fn = input_fn
        self.output = output_fn
        self.session: Optional[GameSession] = None
        self.last_hand: Optional[HandState] = None
        self.controller = RoundController(engine, self.input_fn, observer=self)

    # Main loop ---------------------------------------------------------

    def run(self) -> None:
        self.output("Welcome to the Hold'em Advisor!")
        try:
            while True:
                self.output(render_menu())
                choice = self.prompt_integer("Enter your choice (1-4): ", 1, 4)
                if choice == 1:
                    self.setup_game()
                elif choice == 2:
                    if self.session is None:
                        self.output("\nPlease setup a game first (Option 1).")
                    else:
                        self.play_hand()
                elif choice == 3:
                    if self.session is None:
                        self.output("\nNo game setup yet.")
                    else:
                        self.show_state()
                else:
                    self.output("\nThank you for using the Hold'em Advisor!")
                    return
        except (EOFError, KeyboardInterrupt):
            LOGGER.info("Input closed; leaving the menu")
            self.output("\nSession closed")

    # Menu actions ------------------------------------------------------

    def setup_game(self) -> GameSession:
        self.output(banner("HOLD'EM ADVISOR", 60, subtitle="Texas Hold'em decision support"))
        self.output("Setting up new game...")

        player_pot = self.prompt_amount("\nEnter your current pot/stack: $")
        count = self.prompt_integer(
            f"\nEnter number of opponents ({MIN_OPPONENTS}-{MAX_OPPONENTS}): ",
            MIN_OPPONENTS,
            MAX_OPPONENTS,
        )
        self.output("\nEnter each opponent's pot:")
        opponent_pots = [self.prompt_amount(f"  Player {idx + 2} pot: $") for idx in range(count)]

        self.output("\nEnter blind structure:")
        small_blind = self.prompt_amount("  Small blind: $")
        big_blind = self.prompt_amount("  Big blind: $")
        if small_blind > big_blind:
            self.output("Note: the small blind is larger than the big blind.")

        self.session = GameSession.configure(
            count,
            small_blind,
            big_blind,
            player_pot=player_pot,
            opponent_pots=opponent_pots,
        )
        self.last_hand = None
        self.output("\nGame setup complete!")
        self.show_state()
        return self.session

    def play_hand(self) -> HandResult:
        if self.session is None:
            raise RuntimeError("No game session configured")
        session = self.session
        self.output(banner("NEW HAND", 50))

        self.output("\nEnter your new hole cards:")
        first = self.controller.collect_card("  First card: ")
        second = self.controller.collect_card("  Second card: ", exclude=[first])

        player_pot = self.prompt_amount("\nEnter your current pot: $")
        session.update_pot(player_pot)

        self.output("\nEnter opponent actions/calls:")
        calls = [
            self.prompt_amount(f"  Player {idx + 2} call/bet amount: $")
            for idx in range(session.opponent_count)
        ]

        result = self.controller.play_hand(session, (first, second), player_pot, calls)
        self.last_hand = result.state
        session.record_hand()
        return result

    def show_state(self) -> None:
        if self.session is None:
            self.output("\nNo game setup yet.")
            return
        snapshot = self.last_hand.snapshot() if self.last_hand else None
        self.output(render_state(self.session, snapshot))

    # Prompts -----------------------------------------------------------

    def prompt_amount(self, prompt: str, minimum: Decimal = Decimal(0)) -> Decimal:
        while True:
            raw = self.input_fn(prompt)
            try:
                return validate_amount(raw, minimum)
            except InvalidAmount as exc:
                LOGGER.debug("Rejected amount %r: %s", raw, exc)
                self.output(f"Invalid amount. Please enter a number >= {minimum}")

    def prompt_integer(self, prompt: str, lo: int, hi: int) -> int:
        while True:
            raw = self.input_fn(prompt)
            try:
                return validate_integer(raw, lo, hi)
            except InvalidRange as exc:
                LOGGER.debug("Rejected integer %r: %s", raw, exc)
                self.output(f"Invalid input. Please enter a number between {lo} and {hi}")

    # HandObserver hooks ------------------------------------------------

    def cards_requested(self, street: Street) -> None:
        self.output(f"\n--- {street.label} ---")
        if street.cards_dealt > 1:
            self.output(f"Enter the {street.label.lower()} ({street.cards_dealt} cards):")

    def street_started(self, snapshot: HandSnapshot) -> None:
        if snapshot.street is Street.PREFLOP:
            self.output(f"\n--- {snapshot.street.label} ---")
        if self.session is not None:
            self.output(render_state(self.session, snapshot))

    def decision_requested(self, snapshot: HandSnapshot) -> None:
        self.output(render_processing(snapshot))

    def decision_made(self, street: Street, decision: Decision) -> None:
        self.output(render_decision(decision))

    def input_rejected(self, prompt: str, error: Exception) -> None:
        if isinstance(error, DuplicateCard):
            self.output(f"{error}. Enter a different card.")
        else:
            self.output("Invalid card format. Use format like AH, KS, 2D, TC, etc.")

    def hand_finished(self, result: HandResult) -> None:
        self.output("\nHand ended." if result.folded else "\nHand complete!")


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def render_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "--"
    return " ".join(card.label for card in cards)


def banner(title: str, width: int, subtitle: Optional[str] = None) -> str:
    lines = ["", "=" * width, title.center(width).rstrip()]
    if subtitle:
        lines.append(subtitle.center(width).rstrip())
    lines.append("=" * width)
    return "\n".join(lines)


def render_menu() -> str:
    lines = [
        banner("MAIN MENU", 40),
        "1. Setup New Game",
        "2. Play Hand",
        "3. View Current Game State",
        "4. Exit",
        "=" * 40,
    ]
    return "\n".join(lines)


def render_state(session: GameSession, snapshot: Optional[HandSnapshot] = None) -> str:
    """Summarise the table: hand, stacks, blinds and any community cards."""
    lines: List[str] = [banner("CURRENT GAME STATE", 50)]
    if snapshot is not None:
        lines.append(f"Your Hand: {render_cards(snapshot.hole_cards)}")
        lines.append(f"Your Pot: {format_money(snapshot.player_pot)}")
    else:
        lines.append("Your Hand: --")
        lines.append(f"Your Pot: {format_money(session.player_pot)}")

    lines.append("")
    lines.append("Opponents:")
    for idx, pot in enumerate(session.opponent_pots):
        lines.append(f"  Player {idx + 2}: {format_money(pot)}")

    lines.append("")
    lines.append(f"Blinds: {format_money(session.small_blind)} / {format_money(session.big_blind)}")

    if snapshot is not None and snapshot.community:
        lines.append("")
        lines.append(f"Community Cards: {render_cards(snapshot.community)}")

    lines.append("=" * 50)
    return "\n".join(lines)


def render_processing(snapshot: HandSnapshot) -> str:
    odds = snapshot.pot_odds
    lines = [
        "\n[Advisor processing...]",
        f"- Street: {snapshot.street.label}",
        f"- Amount to call: {format_money(snapshot.to_call)}",
        f"- Pot odds: {'n/a' if odds is None else format(odds, '.1%')}",
    ]
    return "\n".join(lines)


def render_decision(decision: Decision) -> str:
    lines = ["", "-" * 40, "ADVISOR DECISION".center(40).rstrip(), "-" * 40]
    lines.append(f"Action: {decision.action.value}")
    if decision.action is not ActionType.FOLD:
        lines.append(f"Amount: {format_money(decision.amount)}")
    lines.append(f"Reasoning: {decision.reasoning}")
    lines.append("-" * 40)
    return "\n".join(lines)
