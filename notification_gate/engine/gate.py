"""
Notification Gate: looks up preferences, runs the decision engine, records the outcome.
"""

import logging
from typing import Optional

from notification_gate.engine.audit import AuditLog, audit_log
from notification_gate.engine.decider import decide
from notification_gate.engine.models import Decision, Event
from notification_gate.engine.store import PreferencesLookup

logger = logging.getLogger(__name__)


class NotificationGate:
    def __init__(self, lookup: PreferencesLookup, audit: Optional[AuditLog] = None):
        self.lookup = lookup
        self.audit = audit if audit is not None else audit_log

    def evaluate(self, event: Event) -> Decision:
        preferences = self.lookup.get(event.user_id)
        decision = decide(event, preferences)

        if decision.should_notify:
            logger.debug(
                "event=%s user=%s type=%s -> %s%s",
                event.event_id, event.user_id, event.event_type, decision.decision.value,
                "" if preferences is not None else " (no preferences on file)",
            )
        else:
            logger.info(
                "event=%s user=%s type=%s -> %s (%s)",
                event.event_id, event.user_id, event.event_type,
                decision.decision.value, decision.reason.value,
            )

        self.audit.record(event, decision)
        return decision
