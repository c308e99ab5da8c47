import logging
from decimal import Decimal

import pytest

from advisor.errors import InvalidAmount, InvalidRange
from advisor.models import GameSession

from .helpers import create_session


def test_configure_stores_blinds_and_zero_opponent_pots():
    session = GameSession.configure(3, "0.5", "1")
    assert session.opponent_count == 3
    assert session.small_blind == Decimal("0.5")
    assert session.big_blind == Decimal("1")
    assert session.opponent_pots == (Decimal(0),) * 3
    assert session.player_pot == Decimal(0)
    assert session.hands_played == 0


@pytest.mark.parametrize("count", [0, 9, -1])
def test_configure_rejects_opponent_count_outside_one_to_eight(count):
    with pytest.raises(InvalidRange):
        GameSession.configure(count, 1, 2)


def test_configure_rejects_negative_blinds():
    with pytest.raises(InvalidAmount):
        GameSession.configure(2, -1, 2)
    with pytest.raises(InvalidAmount):
        GameSession.configure(2, 1, "lots")


def test_small_blind_above_big_blind_is_allowed_but_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="holdem_advisor.session"):
        session = GameSession.configure(2, 5, 2)
    assert session.small_blind > session.big_blind
    assert "larger than big blind" in caplog.text


def test_update_pot_carries_forward_new_stack():
    session = create_session(player_pot=100)
    session.update_pot("87.5")
    assert session.player_pot == Decimal("87.5")
    with pytest.raises(InvalidAmount):
        session.update_pot(-1)
    assert session.player_pot == Decimal("87.5")


def test_update_opponent_pots_requires_one_value_per_opponent():
    session = create_session(opponents=2)
    session.update_opponent_pots([150, "75.25"])
    assert session.opponent_pots == (Decimal(150), Decimal("75.25"))
    with pytest.raises(InvalidRange, match="Expected 2 opponent pots"):
        session.update_opponent_pots([10])
    with pytest.raises(InvalidAmount):
        session.update_opponent_pots([10, -3])
    assert session.opponent_pots == (Decimal(150), Decimal("75.25"))


def test_configure_accepts_initial_opponent_pots():
    session = GameSession.configure(2, 1, 2, player_pot=100, opponent_pots=[40, 60])
    assert session.opponent_pots == (Decimal(40), Decimal(60))
    with pytest.raises(InvalidRange):
        GameSession.configure(2, 1, 2, opponent_pots=[40])


def test_record_hand_counts_completed_hands():
    session = create_session()
    session.record_hand()
    session.record_hand()
    assert session.hands_played == 2
