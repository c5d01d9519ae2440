"""Tests for the JSON codec and the key/value persistence adapters."""

import json
from datetime import datetime, timezone

from conquistas.application import (
    CONTACTS_KEY,
    ENCOUNTERS_KEY,
    ContactInput,
    EncounterInput,
    RecordStore,
)
from conquistas.domain import Contact, Encounter
from conquistas.infrastructure import InMemoryKeyValueStore, JsonFileKeyValueStore
from conquistas.infrastructure import codec


def test_contact_encoding_uses_iso_dates_and_omits_absent_fields() -> None:
    contact = Contact(
        id="c1",
        name="Maria",
        photo="https://example.com/m.jpg",
        created_at=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    )
    assert codec.encode_contact(contact) == {
        "id": "c1",
        "name": "Maria",
        "photo": "https://example.com/m.jpg",
        "createdAt": "2024-05-01T12:30:00+00:00",
    }


def test_encounter_decoding_accepts_z_suffix() -> None:
    enc = codec.decode_encounter(
        {
            "id": "e1",
            "contactId": "c1",
            "date": "2024-05-01T00:00:00.000Z",
            "location": "Bar",
            "amount": 80,
            "rating": 4,
        }
    )
    assert enc == Encounter(
        id="e1",
        contact_id="c1",
        date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        location="Bar",
        amount=80.0,
        rating=4,
    )


def test_in_memory_store_returns_default_for_missing_key() -> None:
    store = InMemoryKeyValueStore()
    assert store.load(CONTACTS_KEY, []) == []
    assert store.load("other", "fallback") == "fallback"


def test_json_file_store_roundtrip(tmp_path) -> None:
    kv = JsonFileKeyValueStore(tmp_path / "data")
    store = RecordStore(kv)
    a = store.add_contact(ContactInput(name="Maria", photo="https://x/y.jpg", nickname="Mari"))
    b = store.add_contact(ContactInput(name="Ana", photo="https://x/z.jpg", phone="123"))
    e1 = store.add_encounter(EncounterInput(contact_id=b.id, location="Cinema", amount=30, rating=5))
    e2 = store.add_encounter(EncounterInput(contact_id=a.id, location="Bar", amount="12.5"))

    assert (tmp_path / "data" / "contacts.json").exists()
    on_disk = json.loads((tmp_path / "data" / "encounters.json").read_text(encoding="utf-8"))
    assert [r["id"] for r in on_disk] == [e1.id, e2.id]

    reloaded = RecordStore(JsonFileKeyValueStore(tmp_path / "data"))
    assert reloaded.contacts == (a, b)
    assert reloaded.encounters == (e1, e2)


def test_json_file_store_missing_file_returns_default(tmp_path) -> None:
    kv = JsonFileKeyValueStore(tmp_path)
    assert kv.load(ENCOUNTERS_KEY, []) == []


def test_json_file_store_corrupt_file_returns_default(tmp_path) -> None:
    (tmp_path / "contacts.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "encounters.json").write_text('[{"id": "e1"}]', encoding="utf-8")
    kv = JsonFileKeyValueStore(tmp_path)
    assert kv.load(CONTACTS_KEY, []) == []
    assert kv.load(ENCOUNTERS_KEY, []) == []

    store = RecordStore(kv)
    assert store.contacts == ()


def test_json_file_store_leaves_no_temp_files(tmp_path) -> None:
    kv = JsonFileKeyValueStore(tmp_path)
    kv.save(CONTACTS_KEY, [Contact(name="Maria")])
    kv.save(CONTACTS_KEY, [])
    assert sorted(p.name for p in tmp_path.iterdir()) == ["contacts.json"]
    assert kv.load(CONTACTS_KEY, None) == []
