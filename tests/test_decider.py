"""
Tests for the decision engine rule order.
"""

import pytest

from helpers import make_event, make_prefs
from notification_gate.engine.decider import decide
from notification_gate.engine.models import Decision, DecisionReason, DecisionType, Preferences

PROCESS = {"decision": "PROCESS_NOTIFICATION"}
UNSUBSCRIBED = {"decision": "DO_NOT_NOTIFY", "reason": "USER_UNSUBSCRIBED_FROM_EVENT"}
DND = {"decision": "DO_NOT_NOTIFY", "reason": "DND_ACTIVE"}


class TestScenarios:
    def test_no_preferences_processes(self):
        assert decide(make_event("12:00"), None).to_dict() == PROCESS

    def test_disabled_event_type_is_unsubscribed(self):
        prefs = make_prefs(item_shipped=False)
        assert decide(make_event("12:00"), prefs).to_dict() == UNSUBSCRIBED

    def test_inside_dnd_window_suppresses(self):
        prefs = make_prefs(("10:00", "14:00"), item_shipped=True)
        assert decide(make_event("12:00"), prefs).to_dict() == DND

    def test_outside_dnd_window_processes(self):
        prefs = make_prefs(("10:00", "14:00"), item_shipped=True)
        assert decide(make_event("15:00"), prefs).to_dict() == PROCESS

    def test_equal_start_end_never_blocks(self):
        prefs = make_prefs(("12:00", "12:00"), item_shipped=True)
        assert decide(make_event("12:00"), prefs).to_dict() == PROCESS


@pytest.mark.parametrize("hhmm", ["00:00", "03:00", "12:00", "22:30", "23:59"])
@pytest.mark.parametrize("event_type", ["item_shipped", "order_placed", "x"])
def test_permissive_default(hhmm, event_type):
    decision = decide(make_event(hhmm, event_type=event_type))
    assert decision == Decision.process()
    assert decision.reason is None


@pytest.mark.parametrize("dnd", [None, ("10:00", "14:00"), ("22:00", "07:00"), ("12:00", "12:00")])
@pytest.mark.parametrize("hhmm", ["12:00", "23:00", "15:00"])
def test_unsubscribed_wins_over_dnd(dnd, hhmm):
    disabled = make_prefs(dnd, item_shipped=False)
    missing = make_prefs(dnd, other_event=True)
    for prefs in (disabled, missing):
        decision = decide(make_event(hhmm), prefs)
        assert decision.decision is DecisionType.DO_NOT_NOTIFY
        assert decision.reason is DecisionReason.USER_UNSUBSCRIBED_FROM_EVENT


def test_empty_preferences_unsubscribe_everything():
    assert decide(make_event("12:00"), Preferences()).to_dict() == UNSUBSCRIBED


def test_subscribed_without_dnd_processes():
    assert decide(make_event("03:00"), make_prefs(item_shipped=True)).to_dict() == PROCESS


@pytest.mark.parametrize("hhmm, expected", [
    ("21:59", PROCESS),
    ("22:00", DND),
    ("23:00", DND),
    ("00:00", DND),
    ("06:59", DND),
    ("07:00", PROCESS),
    ("08:00", PROCESS),
])
def test_night_window_crossing_midnight(hhmm, expected):
    prefs = make_prefs(("22:00", "07:00"), item_shipped=True)
    assert decide(make_event(hhmm), prefs).to_dict() == expected


def test_only_the_event_type_setting_matters():
    prefs = make_prefs(("10:00", "14:00"), item_shipped=True, promo=False)
    assert decide(make_event("12:00", event_type="promo"), prefs).to_dict() == UNSUBSCRIBED
    assert decide(make_event("12:00", event_type="item_shipped"), prefs).to_dict() == DND


def test_decide_does_not_touch_inputs():
    prefs = make_prefs(("10:00", "14:00"), item_shipped=True)
    event = make_event("12:00")
    before = (prefs.to_dict(), event)
    decide(event, prefs)
    decide(event, prefs)
    assert (prefs.to_dict(), event) == before


def test_malformed_dnd_is_rejected_not_guessed():
    prefs = make_prefs(("24:00", "07:00"), item_shipped=True)
    with pytest.raises(ValueError):
        decide(make_event("12:00"), prefs)
