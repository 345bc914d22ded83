"""Builders for events and preferences used across the tests."""

from datetime import datetime, timezone

from notification_gate.engine.models import DndWindow, Event, EventSetting, Preferences


def make_event(hhmm="12:00", event_type="item_shipped", user_id="u1", event_id="e1"):
    hour, minute = map(int, hhmm.split(":"))
    return Event(
        event_id=event_id,
        user_id=user_id,
        event_type=event_type,
        timestamp=datetime(2025, 8, 30, hour, minute, tzinfo=timezone.utc),
    )


def make_prefs(dnd=None, **settings):
    """make_prefs(("22:00", "07:00"), item_shipped=True)"""
    return Preferences(
        event_settings={k: EventSetting(enabled=v) for k, v in settings.items()},
        dnd=DndWindow(*dnd) if dnd else None,
    )
