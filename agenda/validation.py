from typing import Dict

from agenda.models import DraftContact

REQUIRED = "required"
MISSING_AT = "must contain @"

VALIDATED_FIELDS = ("name", "phone", "email")


def empty_errors() -> Dict[str, str]:
    return {field: "" for field in VALIDATED_FIELDS}


def validate_contact(draft: DraftContact) -> Dict[str, str]:
    """Return a message per validated field; an empty message means the field is fine."""
    errors = empty_errors()

    if not draft.name.strip():
        errors["name"] = REQUIRED

    if not draft.phone.strip():
        errors["phone"] = REQUIRED

    email = draft.email.strip()
    if not email:
        errors["email"] = REQUIRED
    elif "@" not in email:
        errors["email"] = MISSING_AT

    return errors


def is_valid(errors: Dict[str, str]) -> bool:
    return not any(errors.values())
