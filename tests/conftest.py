import pytest

from notification_gate.engine.audit import AuditLog
from notification_gate.engine.store import InMemoryPreferencesStore


@pytest.fixture
def prefs_store():
    return InMemoryPreferencesStore()


@pytest.fixture
def audit():
    return AuditLog()
