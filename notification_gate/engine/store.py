"""
In-memory preferences store, keyed by user id.
Data is lost on restart. In production: swap this for a database-backed lookup
implementing the same get(user_id) call.
"""

import threading
from typing import Dict, Optional, Protocol

from notification_gate.engine.models import Preferences


class PreferencesLookup(Protocol):
    def get(self, user_id: str) -> Optional[Preferences]:
        ...


class InMemoryPreferencesStore:
    def __init__(self):
        self._prefs: Dict[str, Preferences] = {}    # user_id -> Preferences
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[Preferences]:
        with self._lock:
            return self._prefs.get(user_id)

    def set(self, user_id: str, preferences: Preferences) -> None:
        """Create or replace a user's preferences."""
        with self._lock:
            self._prefs[user_id] = preferences

    def delete(self, user_id: str) -> bool:
        """Returns True if the user had preferences on file."""
        with self._lock:
            return self._prefs.pop(user_id, None) is not None

    def clear(self):
        with self._lock:
            self._prefs.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._prefs)


# Singleton store
store = InMemoryPreferencesStore()
