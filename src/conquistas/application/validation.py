"""Caller-side input checks.

The record store trusts its input; the presentation layer runs these first
and shows the returned reason to the user instead of calling the store.
"""

import base64
import binascii
import math
import re
from collections.abc import Callable

from conquistas.application.dto import ContactInput, EncounterInput, Invalid
from conquistas.domain import MAX_RATING, MIN_RATING

DEFAULT_MAX_PHOTO_BYTES = 5 * 1024 * 1024

PRESET_AVATARS = (
    "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=200&h=200&fit=crop",
    "https://images.unsplash.com/photo-1534528741775-53994a69daeb?w=200&h=200&fit=crop",
    "https://images.unsplash.com/photo-1517841905240-472988babdf9?w=200&h=200&fit=crop",
    "https://images.unsplash.com/photo-1524504388940-b1c1722653e1?w=200&h=200&fit=crop",
    "https://images.unsplash.com/photo-1488426862026-3ee34a7d66df?w=200&h=200&fit=crop",
    "https://images.unsplash.com/photo-1502823403499-6ccfcf4fb453?w=200&h=200&fit=crop",
)

_DATA_URI = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


def parse_amount(value: float | int | str | None) -> float:
    """Parse a money amount; anything that is not a finite number becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def normalize_rating(value: int | None) -> int | None:
    """0 and None mean "no rating"."""
    if not value:
        return None
    return int(value)


def validate_photo(photo: str, max_bytes: int = DEFAULT_MAX_PHOTO_BYTES) -> Invalid | None:
    """Accept a preset avatar, an http(s) URL, or an inline image under max_bytes."""
    photo = (photo or "").strip()
    if not photo:
        return Invalid(reason="A photo is required.")
    if photo in PRESET_AVATARS or photo.startswith(("https://", "http://")):
        return None

    match = _DATA_URI.match(photo)
    if not match:
        return Invalid(reason="Photo must be an image URL or an uploaded image.")
    if not match.group("mime").lower().startswith("image/"):
        return Invalid(reason="Uploaded file must be an image.")
    try:
        raw = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError):
        return Invalid(reason="Uploaded image could not be read.")
    if len(raw) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        return Invalid(reason=f"Image must be at most {limit_mb:g} MB.")
    return None


def validate_contact(
    data: ContactInput, *, max_photo_bytes: int = DEFAULT_MAX_PHOTO_BYTES
) -> Invalid | None:
    """Return Invalid when the contact form cannot be submitted, else None."""
    if not (data.name or "").strip():
        return Invalid(reason="Name is required.")
    return validate_photo(data.photo, max_bytes=max_photo_bytes)


def validate_encounter(
    data: EncounterInput, contact_exists: Callable[[str], bool]
) -> Invalid | None:
    """Return Invalid when the encounter form cannot be submitted, else None."""
    contact_id = (data.contact_id or "").strip()
    if not contact_id or not contact_exists(contact_id):
        return Invalid(reason="Select a contact.")
    if not (data.location or "").strip():
        return Invalid(reason="Location is required.")
    if parse_amount(data.amount) < 0:
        return Invalid(reason="Amount must not be negative.")
    rating = data.rating or 0
    if isinstance(rating, bool) or not isinstance(rating, int) or not 0 <= rating <= MAX_RATING:
        return Invalid(
            reason=f"Rating must be between {MIN_RATING} and {MAX_RATING} (0 for none)."
        )
    return None
