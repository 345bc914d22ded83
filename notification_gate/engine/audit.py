"""
Audit Log: in-memory history of gate decisions.
In production: write to a notification_decisions table.
"""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Deque, List, Optional

from notification_gate.config import settings
from notification_gate.engine.models import Decision, DecisionReason, DecisionType, Event


@dataclass(frozen=True)
class AuditEntry:
    event_id: str
    user_id: str
    event_type: str
    decision: DecisionType
    reason: Optional[DecisionReason] = None
    decided_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict:
        return {
            "eventId": self.event_id,
            "userId": self.user_id,
            "eventType": self.event_type,
            "decision": self.decision.value,
            "reason": self.reason.value if self.reason else None,
            "decidedAt": self.decided_at,
        }


class AuditLog:
    """Keeps the most recent max_entries decisions; older ones are dropped."""

    def __init__(self, max_entries: int = 10000):
        self._log: Deque[AuditEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def record(self, event: Event, decision: Decision) -> AuditEntry:
        entry = AuditEntry(
            event_id=event.event_id,
            user_id=event.user_id,
            event_type=event.event_type,
            decision=decision.decision,
            reason=decision.reason,
        )
        with self._lock:
            self._log.append(entry)
        return entry

    def get_user_history(self, user_id: str, decision: Optional[DecisionType] = None,
                         limit: int = 50) -> List[AuditEntry]:
        with self._lock:
            results = [e for e in self._log if e.user_id == user_id]
        if decision:
            results = [e for e in results if e.decision == decision]
        return results[-limit:] if limit > 0 else []

    def get_all(self) -> List[AuditEntry]:
        with self._lock:
            return list(self._log)

    def clear(self):
        with self._lock:
            self._log.clear()

    def stats(self) -> dict:
        entries = self.get_all()
        total = len(entries)
        by_decision = {d.value: 0 for d in DecisionType}
        by_reason = {r.value: 0 for r in DecisionReason}
        for e in entries:
            by_decision[e.decision.value] += 1
            if e.reason:
                by_reason[e.reason.value] += 1
        suppressed = by_decision[DecisionType.DO_NOT_NOTIFY.value]
        return {
            "total_evaluated": total,
            "by_decision": by_decision,
            "by_reason": by_reason,
            "suppression_rate": round(suppressed / max(total, 1) * 100, 1),
        }


audit_log = AuditLog(settings.audit_max_entries)
