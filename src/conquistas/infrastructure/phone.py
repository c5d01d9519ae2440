"""Phone number formatting for stored contacts (E.164 when the number is valid)."""

import phonenumbers

DEFAULT_REGION = "BR"


def normalize_phone(raw: str | None, default_region: str | None = DEFAULT_REGION) -> str | None:
    """Parse and return E.164 form of the number, or None if invalid.

    default_region applies only when the input has no leading + (e.g.
    "11 91234 5678" with "BR").
    """
    if not raw or not str(raw).strip():
        return None
    try:
        parsed = phonenumbers.parse(str(raw).strip(), default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def format_phone(raw: str, default_region: str | None = DEFAULT_REGION) -> str:
    """E.164 when the number parses, otherwise the trimmed text as typed."""
    text = (raw or "").strip()
    return normalize_phone(text, default_region) or text


def dial_uri(phone: str | None) -> str | None:
    """tel: link for a stored phone, or None when there is nothing to dial."""
    phone = (phone or "").strip()
    if not phone:
        return None
    return "tel:" + "".join(ch for ch in phone if ch.isdigit() or ch == "+")
