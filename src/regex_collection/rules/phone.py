"""Mainland China telephone number checks.

Mobile numbers may carry a ``+86`` or ``0086`` country prefix.  The strict
variant requires the second digit to be ``3``-``9``; the loose variant accepts
any eleven digit number starting with ``1``.  Landline numbers accept a three
digit area code with an eight digit subscriber number or a four digit area
code with seven or eight digits, either optionally followed by ``-`` and an
extension.
"""

from __future__ import annotations

from .base import ValidationRule

__all__ = [
    "PHONE",
    "PHONE_EASY",
    "TEL_PHONE",
    "RULES",
    "is_phone",
    "is_phone_easy",
    "is_tel_phone",
]

PHONE = ValidationRule(
    "phone",
    r"(?:(?:\+|00)86)?1[3-9]\d{9}",
    description="Mobile phone number (13x-19x)",
)

PHONE_EASY = ValidationRule(
    "phone_easy",
    r"(?:(?:\+|00)86)?1\d{10}",
    description="Mobile phone number, any 11 digits starting with 1",
)

TEL_PHONE = ValidationRule(
    "tel_phone",
    r"(?:(?:\d{3}-)?\d{8}|(?:\d{4}-)?\d{7,8})(?:-\d+)?",
    description="Landline number with optional area code and extension",
)

RULES: tuple[ValidationRule, ...] = (PHONE, PHONE_EASY, TEL_PHONE)


def is_phone(text: str | None) -> bool:
    """Return whether ``text`` is a mobile number starting with 13-19.

    >>> is_phone("18328073000"), is_phone("+8618317890987"), is_phone("28317890987")
    (True, True, False)
    """

    return PHONE.matches(text)


def is_phone_easy(text: str | None) -> bool:
    """Return whether ``text`` is an eleven digit mobile number starting with 1."""

    return PHONE_EASY.matches(text)


def is_tel_phone(text: str | None) -> bool:
    """Return whether ``text`` is a landline number.

    >>> is_tel_phone("0817-12341234-1233"), is_tel_phone("18317890987")
    (True, False)
    """

    return TEL_PHONE.matches(text)
