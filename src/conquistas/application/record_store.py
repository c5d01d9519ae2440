"""Contacts and encounters: create, delete, cascade. Persists after every mutation."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from conquistas.application.dto import ContactInput, EncounterInput
from conquistas.application.ports import (
    CONTACTS_KEY,
    ENCOUNTERS_KEY,
    PersistenceAdapter,
)
from conquistas.application.validation import normalize_rating, parse_amount
from conquistas.domain import Contact, Encounter

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    return (value or "").strip() or None


def _as_datetime(value: date | datetime | None) -> datetime | None:
    """Calendar dates become midnight UTC; naive datetimes are taken as UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


class RecordStore:
    """Owns the Contact and Encounter collections. Order preserved by insertion.

    The in-memory lists are the source of truth for the session; they are
    seeded once from the persistence adapter and written back on each change.
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        *,
        format_phone: Callable[[str], str] | None = None,
    ) -> None:
        self._persistence = persistence
        self._format_phone = format_phone
        self._contacts: list[Contact] = list(persistence.load(CONTACTS_KEY, []) or [])
        loaded = list(persistence.load(ENCOUNTERS_KEY, []) or [])
        contact_ids = {c.id for c in self._contacts}
        self._encounters: list[Encounter] = [e for e in loaded if e.contact_id in contact_ids]
        if len(self._encounters) != len(loaded):
            logger.warning(
                "Dropped %d encounters referencing missing contacts",
                len(loaded) - len(self._encounters),
            )
        logger.info(
            "Loaded %d contacts and %d encounters",
            len(self._contacts),
            len(self._encounters),
        )

    # --- reads ---

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    @property
    def encounters(self) -> tuple[Encounter, ...]:
        return tuple(self._encounters)

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def get_encounter(self, encounter_id: str) -> Encounter | None:
        for encounter in self._encounters:
            if encounter.id == encounter_id:
                return encounter
        return None

    def has_contact(self, contact_id: str) -> bool:
        return self.get_contact(contact_id) is not None

    # --- mutations ---

    def add_contact(self, data: ContactInput) -> Contact:
        """Create and store a contact. Name must already be validated."""
        phone = _clean(data.phone)
        if phone and self._format_phone:
            phone = self._format_phone(phone) or phone

        contact = Contact(
            name=data.name.strip(),
            photo=(data.photo or "").strip(),
            nickname=_clean(data.nickname),
            phone=phone,
            notes=_clean(data.notes),
        )
        self._contacts.append(contact)
        logger.info("Contact added: %s", contact.id)
        self._persist(CONTACTS_KEY)
        return contact

    def delete_contact(self, contact_id: str) -> bool:
        """Remove a contact and all of its encounters. Unknown id is a no-op."""
        remaining = [c for c in self._contacts if c.id != contact_id]
        if len(remaining) == len(self._contacts):
            return False

        kept_encounters = [e for e in self._encounters if e.contact_id != contact_id]
        removed = len(self._encounters) - len(kept_encounters)
        self._contacts = remaining
        self._encounters = kept_encounters
        logger.info("Contact deleted: %s (%d encounters removed)", contact_id, removed)
        self._persist(ENCOUNTERS_KEY, CONTACTS_KEY)
        return True

    def add_encounter(self, data: EncounterInput) -> Encounter:
        """Create and store an encounter. contact_id must identify an existing contact."""
        encounter_date = _as_datetime(data.date)
        fields = {}
        if encounter_date is not None:
            fields["date"] = encounter_date

        encounter = Encounter(
            contact_id=data.contact_id.strip(),
            location=data.location.strip(),
            amount=parse_amount(data.amount),
            rating=normalize_rating(data.rating),
            notes=_clean(data.notes),
            **fields,
        )
        self._encounters.append(encounter)
        logger.info("Encounter added: %s for contact %s", encounter.id, encounter.contact_id)
        self._persist(ENCOUNTERS_KEY)
        return encounter

    def delete_encounter(self, encounter_id: str) -> bool:
        """Remove one encounter; its contact is untouched. Unknown id is a no-op."""
        remaining = [e for e in self._encounters if e.id != encounter_id]
        if len(remaining) == len(self._encounters):
            return False

        self._encounters = remaining
        logger.info("Encounter deleted: %s", encounter_id)
        self._persist(ENCOUNTERS_KEY)
        return True

    def _persist(self, *keys: str) -> None:
        """Save keys in order, stopping at the first failure."""
        collections = {CONTACTS_KEY: self._contacts, ENCOUNTERS_KEY: self._encounters}
        for key in keys:
            try:
                self._persistence.save(key, list(collections[key]))
            except (OSError, TypeError, ValueError) as e:
                # In-memory state stays authoritative for the session.
                logger.warning("Failed to persist %s: %s", key, e)
                return
