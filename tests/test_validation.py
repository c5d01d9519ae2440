"""Tests for caller-side validation and parsing helpers."""

import base64

import pytest

from conquistas.application import (
    PRESET_AVATARS,
    ContactInput,
    EncounterInput,
    Invalid,
    validate_contact,
    validate_encounter,
)
from conquistas.application.validation import (
    normalize_rating,
    parse_amount,
    validate_photo,
)


def _data_uri(size: int, mime: str = "image/png") -> str:
    return f"data:{mime};base64," + base64.b64encode(b"\x00" * size).decode("ascii")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("100", 100.0),
        (" 42.5 ", 42.5),
        ("12,50", 12.5),
        (80, 80.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
    ],
)
def test_parse_amount(raw, expected) -> None:
    assert parse_amount(raw) == expected


def test_normalize_rating() -> None:
    assert normalize_rating(0) is None
    assert normalize_rating(None) is None
    assert normalize_rating(3) == 3


def test_contact_requires_name() -> None:
    r = validate_contact(ContactInput(name="   ", photo=PRESET_AVATARS[0]))
    assert isinstance(r, Invalid)
    assert "name" in r.reason.lower()


def test_contact_with_preset_photo_is_valid() -> None:
    assert validate_contact(ContactInput(name="Maria", photo=PRESET_AVATARS[2])) is None


def test_photo_accepts_small_inline_image() -> None:
    assert validate_photo(_data_uri(1024)) is None


def test_photo_rejects_oversized_image() -> None:
    r = validate_photo(_data_uri(2048), max_bytes=1024)
    assert isinstance(r, Invalid)
    assert "MB" in r.reason


def test_photo_rejects_non_image_upload() -> None:
    r = validate_photo(_data_uri(10, mime="application/pdf"))
    assert isinstance(r, Invalid)
    assert "image" in r.reason.lower()


def test_photo_rejects_garbage() -> None:
    assert isinstance(validate_photo(""), Invalid)
    assert isinstance(validate_photo("not-a-photo"), Invalid)
    assert isinstance(validate_photo("data:image/png;base64,@@@"), Invalid)


def _exists(contact_id: str) -> bool:
    return contact_id == "c1"


def test_encounter_valid() -> None:
    data = EncounterInput(contact_id="c1", location="Bar", amount="50", rating=5)
    assert validate_encounter(data, _exists) is None


def test_encounter_unknown_contact() -> None:
    r = validate_encounter(EncounterInput(contact_id="zz", location="Bar"), _exists)
    assert isinstance(r, Invalid)
    assert "contact" in r.reason.lower()


def test_encounter_requires_location() -> None:
    r = validate_encounter(EncounterInput(contact_id="c1", location="  "), _exists)
    assert isinstance(r, Invalid)
    assert "location" in r.reason.lower()


def test_encounter_unparsable_amount_is_not_an_error() -> None:
    assert validate_encounter(EncounterInput(contact_id="c1", location="Bar", amount="x"), _exists) is None


def test_encounter_rejects_negative_amount() -> None:
    r = validate_encounter(EncounterInput(contact_id="c1", location="Bar", amount=-5), _exists)
    assert isinstance(r, Invalid)


@pytest.mark.parametrize("rating", [-1, 6])
def test_encounter_rejects_out_of_range_rating(rating: int) -> None:
    r = validate_encounter(EncounterInput(contact_id="c1", location="Bar", rating=rating), _exists)
    assert isinstance(r, Invalid)
    assert "rating" in r.reason.lower()
