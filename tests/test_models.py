import pytest

from helpers import make_prefs
from notification_gate.engine.models import Decision, DecisionReason, DecisionType, EventSetting, Preferences


def test_process_decision_has_no_reason():
    assert Decision.process().to_dict() == {"decision": "PROCESS_NOTIFICATION"}
    assert Decision.process().should_notify


def test_suppress_decision_carries_reason():
    decision = Decision.suppress(DecisionReason.DND_ACTIVE)
    assert decision.to_dict() == {"decision": "DO_NOT_NOTIFY", "reason": "DND_ACTIVE"}
    assert not decision.should_notify


def test_is_subscribed_treats_missing_and_disabled_alike():
    prefs = make_prefs(on=True, off=False)
    assert prefs.is_subscribed("on")
    assert not prefs.is_subscribed("off")
    assert not prefs.is_subscribed("missing")


def test_preferences_snapshot_is_independent_of_source_dict():
    settings = {"item_shipped": EventSetting(enabled=True)}
    prefs = Preferences(event_settings=settings)
    settings["item_shipped"] = EventSetting(enabled=False)
    assert prefs.is_subscribed("item_shipped")
    with pytest.raises(TypeError):
        prefs.event_settings["x"] = EventSetting(enabled=True)


def test_preferences_to_dict():
    assert make_prefs(("22:00", "07:00"), item_shipped=True).to_dict() == {
        "dnd": {"start": "22:00", "end": "07:00"},
        "eventSettings": {"item_shipped": {"enabled": True}},
    }
    assert make_prefs(item_shipped=False).to_dict() == {
        "eventSettings": {"item_shipped": {"enabled": False}},
    }


@pytest.mark.parametrize("decision, reason", [
    (DecisionType.PROCESS_NOTIFICATION, DecisionReason.DND_ACTIVE),
    (DecisionType.PROCESS_NOTIFICATION, DecisionReason.USER_UNSUBSCRIBED_FROM_EVENT),
    (DecisionType.DO_NOT_NOTIFY, None),
])
def test_reason_only_with_do_not_notify(decision, reason):
    with pytest.raises(ValueError):
        Decision(decision, reason)
