from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

__all__ = ["ExactName", "FieldMatcher", "FieldPattern", "MaskingRule"]


@dataclass(frozen=True)
class ExactName:
    """Matches a key equal to *name*, ignoring case."""

    name: str

    def matches(self, key: str) -> bool:
        return key.lower() == self.name.lower()


@dataclass(frozen=True)
class FieldPattern:
    """Matches a key when *regex* is found anywhere in it.

    The pattern is used as given: matching is case-sensitive unless the
    pattern was compiled with ``re.IGNORECASE`` or carries ``(?i)``.
    """

    regex: re.Pattern[str]

    def matches(self, key: str) -> bool:
        return self.regex.search(key) is not None


FieldMatcher = Union[ExactName, FieldPattern]


@dataclass(frozen=True)
class MaskingRule:
    """Describes how to mask the value of every key matching *field*.

    *field* may be given as a plain string (exact, case-insensitive name),
    a compiled regex, or an already built :class:`ExactName` /
    :class:`FieldPattern`; it is normalised to one of the latter two.
    """

    field: FieldMatcher
    # Falls back to the masker's default token when None or empty
    mask: str | None = None
    partial: bool = False
    preserve_length: bool = False

    def __post_init__(self) -> None:
        matcher = _to_matcher(self.field)
        object.__setattr__(self, "field", matcher)

    @classmethod
    def pattern(cls, regex: str, flags: int = 0, **options: Any) -> MaskingRule:
        """Build a rule from a regex source string.

        An invalid expression raises :class:`re.error` here, at configuration
        time, never while masking.
        """
        return cls(FieldPattern(re.compile(regex, flags)), **options)

    def matches(self, key: str) -> bool:
        return self.field.matches(key)


def _to_matcher(field: Any) -> FieldMatcher:
    match field:
        case ExactName() | FieldPattern():
            return field
        case str():
            return ExactName(field)
        case re.Pattern():
            return FieldPattern(field)
        case _:
            raise TypeError(
                f"MaskingRule.field must be a str or compiled regex, got {type(field).__name__}"
            )
