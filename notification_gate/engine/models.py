from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping


class DecisionType(str, Enum):
    PROCESS_NOTIFICATION = "PROCESS_NOTIFICATION"
    DO_NOT_NOTIFY = "DO_NOT_NOTIFY"


class DecisionReason(str, Enum):
    USER_UNSUBSCRIBED_FROM_EVENT = "USER_UNSUBSCRIBED_FROM_EVENT"
    DND_ACTIVE = "DND_ACTIVE"


@dataclass(frozen=True)
class Event:
    event_id: str
    user_id: str
    event_type: str
    timestamp: datetime   # only the UTC time of day is used


@dataclass(frozen=True)
class DndWindow:
    start: str   # "HH:MM", 24h
    end: str     # start == end means DND is off


@dataclass(frozen=True)
class EventSetting:
    enabled: bool = False


@dataclass(frozen=True)
class Preferences:
    event_settings: Mapping[str, EventSetting] = field(default_factory=dict)
    dnd: Optional[DndWindow] = None

    def __post_init__(self):
        # Freeze the mapping so a stored snapshot can't change under a caller
        object.__setattr__(self, "event_settings", MappingProxyType(dict(self.event_settings)))

    def is_subscribed(self, event_type: str) -> bool:
        """Missing event types count as disabled."""
        setting = self.event_settings.get(event_type)
        return setting is not None and setting.enabled

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "eventSettings": {k: {"enabled": v.enabled} for k, v in self.event_settings.items()},
        }
        if self.dnd is not None:
            data["dnd"] = {"start": self.dnd.start, "end": self.dnd.end}
        return data


@dataclass(frozen=True)
class Decision:
    decision: DecisionType
    reason: Optional[DecisionReason] = None   # only set for DO_NOT_NOTIFY

    def __post_init__(self):
        if (self.reason is None) != (self.decision is DecisionType.PROCESS_NOTIFICATION):
            raise ValueError(f"reason is required for DO_NOT_NOTIFY and not allowed otherwise, "
                             f"got {self.decision.value} with {self.reason!r}")

    @classmethod
    def process(cls) -> "Decision":
        return cls(DecisionType.PROCESS_NOTIFICATION)

    @classmethod
    def suppress(cls, reason: DecisionReason) -> "Decision":
        return cls(DecisionType.DO_NOT_NOTIFY, reason)

    @property
    def should_notify(self) -> bool:
        return self.decision is DecisionType.PROCESS_NOTIFICATION

    def to_dict(self) -> Dict[str, str]:
        data = {"decision": self.decision.value}
        if self.reason is not None:
            data["reason"] = self.reason.value
        return data
