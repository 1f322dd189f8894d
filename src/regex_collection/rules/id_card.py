"""Identity card number checks for the mainland, Hong Kong, Macau and Taiwan.

Only the shape of a number is checked.  The mainland rule accepts any day
``01``-``31`` in any month ``01``-``12`` (so ``0231`` passes) and does not
verify the trailing check character.
"""

from __future__ import annotations

from .base import ValidationRule

__all__ = [
    "ID_CARD",
    "HONGKONG_ID_CARD",
    "MACAU_ID_CARD",
    "TAIWAN_ID_CARD",
    "RULES",
    "is_id_card",
    "is_hongkong_id_card",
    "is_macau_id_card",
    "is_taiwan_id_card",
]

# region(6) year(4) month(2) day(2) sequence(3) check(1)
ID_CARD = ValidationRule(
    "id_card",
    r"[1-9]\d{5}(?:18|19|20)\d{2}(?:0[1-9]|10|11|12)(?:0[1-9]|[1-2]\d|30|31)\d{3}[\dXx]",
    description="Mainland resident ID card, 18 chars, 2nd generation",
)

HONGKONG_ID_CARD = ValidationRule(
    "hongkong_id_card",
    r"[a-zA-Z]\d{6}\([\dA]\)",
    description="Hong Kong ID card, e.g. K034178(2)",
)

MACAU_ID_CARD = ValidationRule(
    "macau_id_card",
    r"[157]\d{6}\(\d\)",
    description="Macau ID card, e.g. 5534178(2)",
)

TAIWAN_ID_CARD = ValidationRule(
    "taiwan_id_card",
    r"[a-zA-Z][0-9]{9}",
    description="Taiwan ID card, e.g. K034178212",
)

RULES: tuple[ValidationRule, ...] = (
    ID_CARD,
    HONGKONG_ID_CARD,
    MACAU_ID_CARD,
    TAIWAN_ID_CARD,
)


def is_id_card(text: str | None) -> bool:
    """Return whether ``text`` is an 18 character mainland ID card number.

    The last character is a check digit and may be ``X`` or ``x``.

    >>> is_id_card("511324199612163557")
    True
    """

    return ID_CARD.matches(text)


def is_hongkong_id_card(text: str | None) -> bool:
    """Return whether ``text`` looks like ``K034178(2)``."""

    return HONGKONG_ID_CARD.matches(text)


def is_macau_id_card(text: str | None) -> bool:
    """Return whether ``text`` looks like ``5534178(2)``."""

    return MACAU_ID_CARD.matches(text)


def is_taiwan_id_card(text: str | None) -> bool:
    return TAIWAN_ID_CARD.matches(text)
