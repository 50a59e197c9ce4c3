"""Input validation for the login and signup screens

Runs before any network activity. Values are trimmed here and the trimmed
values are what the payload builder receives.
"""
from typing import Optional

from urbanshield.core.utils.error_types import (MISSING_FIELDS,
                                                TERMS_NOT_ACCEPTED,
                                                ValidationResult)


def _trim(value: Optional[str]) -> str:
    return (value or "").strip()


def validate_login(email: str, password: str) -> ValidationResult:
    """Validate login input

    Returns:
        ValidationResult with the trimmed email and password, or the
        'missing fields' reason if either is blank
    """
    fields = {"email": _trim(email), "password": _trim(password)}
    if not all(fields.values()):
        return ValidationResult.failure(MISSING_FIELDS)
    return ValidationResult.success(fields)


def validate_signup(
    name: str,
    email: str,
    password: str,
    phone: str,
    role: str,
    accepted_terms: bool
) -> ValidationResult:
    """Validate signup input

    Consent is checked before the blank-field check, so a user who left
    fields empty and declined the terms gets the terms reason.

    Returns:
        ValidationResult with trimmed fields (role included), or the
        'terms not accepted' / 'missing fields' reason
    """
    if not accepted_terms:
        return ValidationResult.failure(TERMS_NOT_ACCEPTED)

    required = {
        "name": _trim(name),
        "email": _trim(email),
        "password": _trim(password),
        "phone": _trim(phone),
    }
    if not all(required.values()):
        return ValidationResult.failure(MISSING_FIELDS)

    return ValidationResult.success({**required, "role": _trim(role)})
