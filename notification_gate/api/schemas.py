"""Pydantic request models for the HTTP layer.

Shape validation lives here; the engine only ever sees validated values.
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, StrictBool, field_validator

from notification_gate.engine.models import DndWindow, Event, EventSetting, Preferences

# 24h HH:MM, 00:00-23:59
HHMM_PATTERN = r"^(?:[01][0-9]|2[0-3]):[0-5][0-9]$"


class DndSchema(BaseModel):
    start: str = Field(..., pattern=HHMM_PATTERN, examples=["22:00"])
    end: str = Field(..., pattern=HHMM_PATTERN, examples=["07:00"])


class EventSettingSchema(BaseModel):
    enabled: StrictBool


class PreferencesSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dnd: Optional[DndSchema] = None
    event_settings: Dict[str, EventSettingSchema] = Field(
        ...,
        alias="eventSettings",
        examples=[{"item_shipped": {"enabled": True}}],
    )

    def to_domain(self) -> Preferences:
        return Preferences(
            event_settings={k: EventSetting(enabled=v.enabled) for k, v in self.event_settings.items()},
            dnd=DndWindow(start=self.dnd.start, end=self.dnd.end) if self.dnd else None,
        )


class IncomingEventSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., alias="eventId", min_length=1)
    user_id: str = Field(..., alias="userId", min_length=1)
    event_type: str = Field(..., alias="eventType", min_length=1, examples=["item_shipped"])
    timestamp: AwareDatetime = Field(..., examples=["2025-08-30T23:30:00Z"])

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_iso(cls, v):
        # ISO-8601 text only, never Unix seconds
        if not isinstance(v, str):
            raise ValueError("timestamp must be an ISO-8601 string")
        return datetime.fromisoformat(v.replace("Z", "+00:00"))

    def to_domain(self) -> Event:
        return Event(
            event_id=self.event_id,
            user_id=self.user_id,
            event_type=self.event_type,
            timestamp=self.timestamp,
        )
