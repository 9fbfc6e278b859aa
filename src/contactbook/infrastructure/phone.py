"""Phone numbers: E.164 when they parse, the user's text otherwise."""

import phonenumbers


def _clean(raw: str | None) -> str | None:
    if raw is None:
        return None
    return str(raw).strip() or None


def _to_e164(number: str, default_region: str | None) -> str | None:
    try:
        parsed = phonenumbers.parse(number, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def normalize_phone(raw: str | None, default_region: str | None = None) -> str | None:
    """Return the E.164 form of raw, or None if it is blank or not a valid number.

    default_region (e.g. "US") applies only to numbers written without a
    leading +.
    """
    number = _clean(raw)
    return _to_e164(number, default_region) if number else None


def phone_for_storage(raw: str | None, default_region: str | None = None) -> str | None:
    """E.164 when the number parses, else the trimmed input. Blank input gives None."""
    number = _clean(raw)
    if number is None:
        return None
    return _to_e164(number, default_region) or number
