"""Domain entities: Contact and Encounter."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

MIN_RATING = 1
MAX_RATING = 5


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _today() -> datetime:
    """Midnight UTC of the current day (a form's date input default)."""
    now = _utcnow()
    return datetime(now.year, now.month, now.day, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Contact:
    """
    A tracked person (a "conquest").
    Immutable once created; deleting it removes its encounters too.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    photo: str = field(default="")
    nickname: str | None = None
    phone: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")


@dataclass(frozen=True)
class Encounter:
    """
    A dated, located event tied to exactly one Contact.
    amount is the money spent; rating is optional (1 to 5 stars).
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    contact_id: str = field(default="")
    date: datetime = field(default_factory=_today)
    location: str = field(default="")
    amount: float = 0.0
    rating: int | None = None
    notes: str | None = None

    def __post_init__(self):
        if not self.contact_id:
            raise ValueError("Encounter must reference a contact.")

        if not self.location or not self.location.strip():
            raise ValueError("Encounter location must be non-empty.")

        if self.amount < 0:
            raise ValueError("Encounter amount must not be negative.")

        if self.rating is not None and not (
            isinstance(self.rating, int)
            and not isinstance(self.rating, bool)
            and MIN_RATING <= self.rating <= MAX_RATING
        ):
            raise ValueError(
                f"Encounter rating must be an integer between {MIN_RATING} and {MAX_RATING}."
            )
