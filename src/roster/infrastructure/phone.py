"""Turn free-form phone input into the 10-digit form Contact.phone accepts."""

import phonenumbers

from roster.domain.entities import PHONE_DIGITS


def to_contact_phone(raw: str | None, region: str | None = "US") -> str | None:
    """Parse and return the national significant number, or None if unusable.

    Use region when the input has no leading + (e.g. "(202) 555-1234" with
    region "US"). If the number already includes a country code, region is
    ignored. Numbers whose national part is not exactly 10 digits (many
    non-NANP numbers) return None.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    national = phonenumbers.national_significant_number(parsed)
    if len(national) != PHONE_DIGITS or not national.isdigit():
        return None
    return national
