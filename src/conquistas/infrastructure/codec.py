"""JSON-compatible encoding of the stored collections.

Each key maps to a list of plain dicts (camelCase field names, ISO-8601
timestamps). Absent optional fields are omitted rather than written as null.
"""

from datetime import datetime, timezone
from typing import Any

from conquistas.application.ports import CONTACTS_KEY, ENCOUNTERS_KEY
from conquistas.domain import Contact, Encounter


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _drop_none(record: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in record.items() if v is not None}


def encode_contact(contact: Contact) -> dict[str, Any]:
    return _drop_none(
        {
            "id": contact.id,
            "name": contact.name,
            "photo": contact.photo,
            "nickname": contact.nickname,
            "phone": contact.phone,
            "notes": contact.notes,
            "createdAt": _datetime_to_iso(contact.created_at),
        }
    )


def decode_contact(record: dict[str, Any]) -> Contact:
    return Contact(
        id=record["id"],
        name=record["name"],
        photo=record.get("photo", ""),
        nickname=record.get("nickname"),
        phone=record.get("phone"),
        notes=record.get("notes"),
        created_at=_iso_to_datetime(record["createdAt"]),
    )


def encode_encounter(encounter: Encounter) -> dict[str, Any]:
    return _drop_none(
        {
            "id": encounter.id,
            "contactId": encounter.contact_id,
            "date": _datetime_to_iso(encounter.date),
            "location": encounter.location,
            "amount": encounter.amount,
            "rating": encounter.rating,
            "notes": encounter.notes,
        }
    )


def decode_encounter(record: dict[str, Any]) -> Encounter:
    return Encounter(
        id=record["id"],
        contact_id=record["contactId"],
        date=_iso_to_datetime(record["date"]),
        location=record["location"],
        amount=float(record.get("amount", 0)),
        rating=record.get("rating"),
        notes=record.get("notes"),
    )


_CODECS = {
    CONTACTS_KEY: (encode_contact, decode_contact),
    ENCOUNTERS_KEY: (encode_encounter, decode_encounter),
}


def encode(key: str, value: Any) -> Any:
    """Encode a collection for storage. Unknown keys pass through unchanged."""
    codec = _CODECS.get(key)
    if codec is None:
        return value
    encoder, _ = codec
    return [encoder(item) for item in value]


def decode(key: str, data: Any) -> Any:
    """Decode a stored collection. Raises KeyError/ValueError on malformed records."""
    codec = _CODECS.get(key)
    if codec is None:
        return data
    _, decoder = codec
    return [decoder(item) for item in data]
