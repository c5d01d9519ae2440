"""Application layer: record store, statistics, ports, DTOs. Depends only on domain."""

from conquistas.application.dto import (
    ContactInput,
    ContactSummary,
    DashboardStats,
    EncounterInput,
    Invalid,
)
from conquistas.application.ports import (
    CONTACTS_KEY,
    ENCOUNTERS_KEY,
    PersistenceAdapter,
)
from conquistas.application.record_store import RecordStore
from conquistas.application.statistics import StatisticsEngine
from conquistas.application.validation import (
    PRESET_AVATARS,
    validate_contact,
    validate_encounter,
)

__all__ = [
    "CONTACTS_KEY",
    "ENCOUNTERS_KEY",
    "PRESET_AVATARS",
    "ContactInput",
    "ContactSummary",
    "DashboardStats",
    "EncounterInput",
    "Invalid",
    "PersistenceAdapter",
    "RecordStore",
    "StatisticsEngine",
    "validate_contact",
    "validate_encounter",
]
