"""Input DTOs and result types for the record store and statistics."""

from dataclasses import dataclass
from datetime import date, datetime

from conquistas.domain import Contact

# --- inputs (collected by the presentation layer) ---


@dataclass(frozen=True)
class ContactInput:
    """Form data for a new contact. Core has no UI dependency."""

    name: str
    photo: str
    nickname: str | None = None
    phone: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class EncounterInput:
    """Form data for a new encounter.

    amount may be the raw text of the form field; it falls back to 0 when it
    does not parse. rating 0 (or None) means "no rating".
    """

    contact_id: str
    location: str
    date: date | datetime | None = None
    amount: float | str | None = None
    rating: int | None = None
    notes: str | None = None


# --- validation results ---


@dataclass(frozen=True)
class Invalid:
    """Input is invalid (e.g. missing name or location)."""

    reason: str


# --- statistics ---


@dataclass(frozen=True)
class ContactSummary:
    """Aggregates for one contact, as shown on its card."""

    total_spent: float
    encounter_count: int
    last_encounter_at: datetime | None = None


@dataclass(frozen=True)
class DashboardStats:
    """Header figures over all encounters."""

    total_spent: float
    total_encounters: int
    average_per_encounter: float
    most_expensive: Contact | None
    contact_count: int
