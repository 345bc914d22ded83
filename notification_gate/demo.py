#!/usr/bin/env python3
"""
╔══════════════════════════════════════════════════════════╗
║            Notification Gate — Live Demo                 ║
╚══════════════════════════════════════════════════════════╝

Run: python -m notification_gate.demo
"""

import sys
from datetime import datetime, timezone

from notification_gate.config import configure_logging
from notification_gate.engine.audit import AuditLog
from notification_gate.engine.gate import NotificationGate
from notification_gate.engine.models import DndWindow, Event, EventSetting, Preferences
from notification_gate.engine.store import InMemoryPreferencesStore

CYAN  = "\033[96m"
GREEN = "\033[92m"
YELLOW= "\033[93m"
BOLD  = "\033[1m"
DIM   = "\033[2m"
RESET = "\033[0m"


def banner(text):
    print(f"\n{CYAN}{BOLD}{'─'*55}")
    print(f"  {text}")
    print(f"{'─'*55}{RESET}")


def pause(msg="Press ENTER to continue..."):
    if sys.stdin.isatty():
        input(f"\n{DIM}{msg}{RESET}")


def at(hhmm):
    hour, minute = map(int, hhmm.split(":"))
    return datetime(2025, 8, 30, hour, minute, tzinfo=timezone.utc)


def show(gate, event):
    decision = gate.evaluate(event)
    colour = GREEN if decision.should_notify else YELLOW
    reason = f"  ({decision.reason.value})" if decision.reason else ""
    print(f"  {event.user_id} {event.event_type} @ {event.timestamp:%H:%M}Z"
          f" → {colour}{BOLD}{decision.decision.value}{RESET}{reason}")
    return decision


def main():
    configure_logging("WARNING")
    prefs = InMemoryPreferencesStore()
    audit = AuditLog()
    gate = NotificationGate(prefs, audit)

    print(f"""
{CYAN}{BOLD}Each scenario shows one rule of the decision engine:{RESET}
  1. no preferences      → PROCESS_NOTIFICATION
  2. not subscribed      → DO_NOT_NOTIFY (USER_UNSUBSCRIBED_FROM_EVENT)
  3. inside DND window   → DO_NOT_NOTIFY (DND_ACTIVE)
  4. otherwise           → PROCESS_NOTIFICATION
""")
    pause("Press ENTER to start the demo...")

    banner("SCENARIO A — No preferences on file")
    show(gate, Event("e-a", "user_a", "item_shipped", at("12:00")))

    banner("SCENARIO B — Unsubscribed from item_shipped")
    prefs.set("user_b", Preferences(event_settings={"item_shipped": EventSetting(enabled=False)}))
    show(gate, Event("e-b", "user_b", "item_shipped", at("12:00")))
    pause()

    banner("SCENARIO C/D — DND 10:00–14:00")
    prefs.set("user_c", Preferences(
        event_settings={"item_shipped": EventSetting(enabled=True)},
        dnd=DndWindow("10:00", "14:00"),
    ))
    show(gate, Event("e-c", "user_c", "item_shipped", at("12:00")))
    show(gate, Event("e-d", "user_c", "item_shipped", at("15:00")))
    pause()

    banner("SCENARIO E — DND 12:00–12:00 (switched off)")
    prefs.set("user_e", Preferences(
        event_settings={"item_shipped": EventSetting(enabled=True)},
        dnd=DndWindow("12:00", "12:00"),
    ))
    show(gate, Event("e-e", "user_e", "item_shipped", at("12:00")))
    pause()

    banner("NIGHT DND 22:00–07:00 (crosses midnight)")
    prefs.set("user_n", Preferences(
        event_settings={"item_shipped": EventSetting(enabled=True)},
        dnd=DndWindow("22:00", "07:00"),
    ))
    for hhmm in ("21:59", "22:00", "23:00", "00:00", "06:59", "07:00", "08:00"):
        show(gate, Event(f"e-n-{hhmm}", "user_n", "item_shipped", at(hhmm)))

    banner("DEMO COMPLETE — Audit Log Summary")
    stats = audit.stats()
    print(f"""
  Total events evaluated : {stats['total_evaluated']}
  Processed              : {stats['by_decision']['PROCESS_NOTIFICATION']}
  Suppressed             : {stats['by_decision']['DO_NOT_NOTIFY']}
    unsubscribed         : {stats['by_reason']['USER_UNSUBSCRIBED_FROM_EVENT']}
    DND active           : {stats['by_reason']['DND_ACTIVE']}

  Suppression rate       : {stats['suppression_rate']}%
""")

    print(f"""
{GREEN}{BOLD}To run as an API server:{RESET}
  notification-gate

Then test with curl:
  curl -X POST http://localhost:3000/preferences/u1 \\
    -H "Content-Type: application/json" \\
    -d '{{"dnd":{{"start":"22:00","end":"07:00"}},"eventSettings":{{"item_shipped":{{"enabled":true}}}}}}'

  curl -X POST http://localhost:3000/events \\
    -H "Content-Type: application/json" \\
    -d '{{"eventId":"e1","userId":"u1","eventType":"item_shipped","timestamp":"2025-08-30T23:30:00Z"}}'
""")


if __name__ == "__main__":
    main()
