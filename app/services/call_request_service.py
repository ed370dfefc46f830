from __future__ import annotations

import re
from typing import List

from app.errors import ValidationError
from app.schemas.call_form import CallForm

PHONE_NUMBER_LENGTH = 10

# Base-10 integer with an optional sign, ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def validate_phone_number(number: str) -> None:
    """
    Check the destination number is a 10-character base-10 integer.

    Length is measured on the string, so "0123456789" passes. The parsed
    value is thrown away; we only keep the string.
    """
    if not _INTEGER_RE.fullmatch(number):
        raise ValidationError(
            f"phone number {number!r} is not a base-10 integer",
            fields=["recipientPhoneNumber"],
        )
    if len(number) != PHONE_NUMBER_LENGTH:
        raise ValidationError(
            f"phone number {number!r} must be exactly {PHONE_NUMBER_LENGTH} digits",
            fields=["recipientPhoneNumber"],
        )


def validate_call_form(
    recipient_number: str,
    recipient_name: str,
    objective: str,
    other_context: str = "",
) -> CallForm:
    """
    Validate raw call-form values and return them as a CallForm.

    Raises ValidationError naming every field that failed.
    """
    missing: List[str] = []
    if not recipient_number:
        missing.append("recipientPhoneNumber")
    if not objective:
        missing.append("objective")
    if not recipient_name:
        missing.append("recipientContext")

    bad_phone = ""
    if recipient_number:
        try:
            validate_phone_number(recipient_number)
        except ValidationError as exc:
            missing.extend(exc.fields)
            bad_phone = str(exc)

    if missing:
        message = f"invalid call form, check fields: {', '.join(missing)}"
        if bad_phone:
            message = f"{message} ({bad_phone})"
        raise ValidationError(message, fields=missing)

    return CallForm(
        recipient_number=recipient_number,
        recipient_name=recipient_name,
        objective=objective,
        other_context=other_context,
    )


def build_moderation_description(form: CallForm) -> str:
    return (
        f"user wants to contact:{form.recipient_name}, "
        f"user wants to accomplish: {form.objective}, "
        f"user provided outside context: {form.other_context}."
    )
