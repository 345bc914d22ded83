"""
Decision Engine: subscription and DND rules, checked in a fixed order.
Pure function, no store access, no logging. Safe to call from any thread.
"""

from typing import Optional

from notification_gate.engine.models import Decision, DecisionReason, Event, Preferences
from notification_gate.engine.time_window import in_window, minutes_since_midnight, parse_time_of_day


def decide(event: Event, preferences: Optional[Preferences] = None) -> Decision:
    """
    First matching rule wins:
      1. no preferences on file      -> PROCESS_NOTIFICATION
      2. event type not subscribed   -> DO_NOT_NOTIFY / USER_UNSUBSCRIBED_FROM_EVENT
      3. timestamp inside DND window -> DO_NOT_NOTIFY / DND_ACTIVE
      4. otherwise                   -> PROCESS_NOTIFICATION
    """
    # ── STEP 1: Permissive default ───────────────────────
    if preferences is None:
        return Decision.process()

    # ── STEP 2: Subscription (beats DND) ─────────────────
    if not preferences.is_subscribed(event.event_type):
        return Decision.suppress(DecisionReason.USER_UNSUBSCRIBED_FROM_EVENT)

    # ── STEP 3: DND window ───────────────────────────────
    dnd = preferences.dnd
    if dnd is not None:
        now = minutes_since_midnight(event.timestamp)
        if in_window(now, parse_time_of_day(dnd.start), parse_time_of_day(dnd.end)):
            return Decision.suppress(DecisionReason.DND_ACTIVE)

    return Decision.process()
