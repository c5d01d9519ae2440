"""Aggregate and per-contact figures, recomputed from the store on every call."""

from collections.abc import Iterator

from conquistas.application.dto import ContactSummary, DashboardStats
from conquistas.application.record_store import RecordStore
from conquistas.domain import Contact, Encounter


class StatisticsEngine:
    """Read-only view over a RecordStore. Holds no state of its own."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def total_spent(self) -> float:
        return sum((e.amount for e in self._store.encounters), 0.0)

    def total_encounters(self) -> int:
        return len(self._store.encounters)

    def average_per_encounter(self) -> float:
        """Mean amount per encounter; 0 when there are none."""
        count = self.total_encounters()
        if count == 0:
            return 0.0
        return self.total_spent() / count

    def spending_by_contact(self) -> dict[str, float]:
        """contact_id -> total amount. Contacts without encounters are absent."""
        out: dict[str, float] = {}
        for encounter in self._store.encounters:
            out[encounter.contact_id] = out.get(encounter.contact_id, 0.0) + encounter.amount
        return out

    def most_expensive_contact(self) -> Contact | None:
        """Contact with the highest total spend.

        Ties go to the contact whose first encounter was recorded earliest.
        None when there are no encounters or that contact no longer exists.
        """
        spending = self.spending_by_contact()
        if not spending:
            return None
        top_id = max(spending, key=spending.__getitem__)
        return self._store.get_contact(top_id)

    def encounters_for_contact(self, contact_id: str) -> Iterator[Encounter]:
        """Yield the contact's encounters, most recent first."""
        own = [e for e in self._store.encounters if e.contact_id == contact_id]
        yield from sorted(own, key=lambda e: e.date, reverse=True)

    def contact_summary(self, contact_id: str) -> ContactSummary:
        own = [e for e in self._store.encounters if e.contact_id == contact_id]
        return ContactSummary(
            total_spent=sum((e.amount for e in own), 0.0),
            encounter_count=len(own),
            last_encounter_at=max((e.date for e in own), default=None),
        )

    def dashboard(self) -> DashboardStats:
        return DashboardStats(
            total_spent=self.total_spent(),
            total_encounters=self.total_encounters(),
            average_per_encounter=self.average_per_encounter(),
            most_expensive=self.most_expensive_contact(),
            contact_count=len(self._store.contacts),
        )
