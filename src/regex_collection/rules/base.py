"""Core rule model shared by every predicate in the catalog.

A :class:`ValidationRule` couples a category identifier with a regular
expression and an anchoring policy.  Patterns are written without ``^``/``$``
anchors; anchoring is applied by the matching call instead:

* :attr:`Anchoring.FULL` uses :meth:`re.Pattern.fullmatch`, so the pattern must
  account for every character of the input.  Unlike ``$`` this does not
  tolerate a trailing newline.
* :attr:`Anchoring.PREFIX` uses :meth:`re.Pattern.match`, so only the start of
  the input is pinned.

The pattern is compiled once in ``__post_init__``.  A malformed pattern is a
programming error and surfaces as :class:`PatternDefinitionError` when the
defining module is imported, never from a predicate call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from ..utils.errors import PatternDefinitionError

__all__ = ["Anchoring", "ValidationRule"]


class Anchoring(Enum):
    """Where a rule's match must begin and end."""

    FULL = "full"
    PREFIX = "prefix"


@dataclass(slots=True, frozen=True)
class ValidationRule:
    """Immutable category rule with a pre-compiled pattern."""

    category: str
    pattern: str
    anchoring: Anchoring = Anchoring.FULL
    flags: int = 0
    description: str = ""
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.category:
            raise PatternDefinitionError("rule category must be a non-empty string")
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as exc:
            raise PatternDefinitionError(
                f"invalid pattern for category '{self.category}': {exc}"
            ) from exc
        object.__setattr__(self, "compiled", compiled)

    def matches(self, text: object) -> bool:
        """Return ``True`` when ``text`` satisfies the rule.

        Anything that is not a ``str`` (``None`` included) is a non-match.
        """

        if not isinstance(text, str):
            return False
        if self.anchoring is Anchoring.FULL:
            return self.compiled.fullmatch(text) is not None
        return self.compiled.match(text) is not None
