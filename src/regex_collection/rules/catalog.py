"""Read-only registry of every validation rule.

The catalog is assembled once at import time from the ``RULES`` tuples of
:mod:`~regex_collection.rules.common`, :mod:`~regex_collection.rules.id_card`
and :mod:`~regex_collection.rules.phone`.  Lookups by category name raise
:class:`~regex_collection.utils.errors.UnknownCategoryError`; that is a usage
error and distinct from a non-matching input, which is always ``False``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from ..utils.errors import PatternDefinitionError, UnknownCategoryError
from ..utils.logging import get_logger
from . import common, id_card, phone
from .base import ValidationRule

__all__ = [
    "CATALOG",
    "build_catalog",
    "categories",
    "get_rule",
    "get_predicate",
    "validate",
    "identify",
]

logger = get_logger(__name__)


def build_catalog(rules: Iterable[ValidationRule]) -> Mapping[str, ValidationRule]:
    """Return a read-only mapping of category name to rule.

    Raises
    ------
    PatternDefinitionError
        If two rules share a category name.
    """

    table: dict[str, ValidationRule] = {}
    for rule in rules:
        if rule.category in table:
            raise PatternDefinitionError(f"duplicate category '{rule.category}'")
        table[rule.category] = rule
    return MappingProxyType(table)


CATALOG: Mapping[str, ValidationRule] = build_catalog(
    (*common.RULES, *id_card.RULES, *phone.RULES)
)
logger.debug("pattern catalog ready with %d rules", len(CATALOG))


def categories() -> tuple[str, ...]:
    """Return every category name in sorted order."""

    return tuple(sorted(CATALOG))


def get_rule(category: str) -> ValidationRule:
    """Return the rule registered for ``category``."""

    try:
        return CATALOG[category]
    except KeyError:
        raise UnknownCategoryError(f"unknown category: '{category}'") from None


def get_predicate(category: str) -> Callable[[object], bool]:
    """Return the boolean predicate for ``category``."""

    return get_rule(category).matches


def validate(category: str, text: object) -> bool:
    """Check ``text`` against the rule registered for ``category``."""

    return get_rule(category).matches(text)


def identify(text: object, categories: Iterable[str] | None = None) -> list[str]:
    """Return the sorted names of every category whose rule accepts ``text``.

    ``categories`` restricts the search to a subset; unknown names raise
    :class:`UnknownCategoryError`.
    """

    if categories is None:
        rules: Iterable[ValidationRule] = CATALOG.values()
    else:
        rules = [get_rule(name) for name in categories]
    return sorted({rule.category for rule in rules if rule.matches(text)})
