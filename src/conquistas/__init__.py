"""
Conquistas core: clean-architecture layout.

- domain: entities (Contact, Encounter). No outer dependencies.
- application: RecordStore, StatisticsEngine, ports (PersistenceAdapter), DTOs, validation.
- infrastructure: adapters (InMemoryKeyValueStore, JsonFileKeyValueStore), phone formatting.
"""

from conquistas.application import (
    ContactInput,
    ContactSummary,
    DashboardStats,
    EncounterInput,
    Invalid,
    PersistenceAdapter,
    RecordStore,
    StatisticsEngine,
)
from conquistas.domain import Contact, Encounter
from conquistas.infrastructure import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    "Contact",
    "ContactInput",
    "ContactSummary",
    "DashboardStats",
    "Encounter",
    "EncounterInput",
    "InMemoryKeyValueStore",
    "Invalid",
    "JsonFileKeyValueStore",
    "PersistenceAdapter",
    "RecordStore",
    "StatisticsEngine",
]
