"""Ranking of how closely an import matches a section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

MISMATCH_CLASS = 0
DEFAULT_CLASS = 10
STANDARD_CLASS = 20
MATCH_CLASS = 30
NAME_CLASS = 40


class MatchSpecificity:
    """Base for all specificity values; a higher rank wins."""

    _rank: ClassVar[int] = MISMATCH_CLASS

    def is_more_specific(self, than: MatchSpecificity) -> bool:
        """Return True if this specificity ranks above ``than``."""
        return self._rank > than._rank

    def equal(self, to: MatchSpecificity) -> bool:
        """Return True if neither value is more specific than the other."""
        return not self.is_more_specific(to) and not to.is_more_specific(self)


@dataclass(frozen=True)
class MisMatch(MatchSpecificity):
    """The import does not match the section at all."""

    _rank: ClassVar[int] = MISMATCH_CLASS

    def __str__(self) -> str:
        return "Mismatch"


@dataclass(frozen=True)
class Default(MatchSpecificity):
    """The catch-all match of the default section."""

    _rank: ClassVar[int] = DEFAULT_CLASS

    def __str__(self) -> str:
        return "Default"


@dataclass(frozen=True)
class StandardMatch(MatchSpecificity):
    """The import belongs to the Go standard library."""

    _rank: ClassVar[int] = STANDARD_CLASS

    def __str__(self) -> str:
        return "Standard"


@dataclass(frozen=True)
class Match(MatchSpecificity):
    """A prefix match; longer prefixes are more specific."""

    length: int = 0

    _rank: ClassVar[int] = MATCH_CLASS

    def is_more_specific(self, than: MatchSpecificity) -> bool:
        if super().is_more_specific(than):
            return True
        return isinstance(than, Match) and self.length > than.length

    def __str__(self) -> str:
        return f"Match(length: {self.length})"


@dataclass(frozen=True)
class NameMatch(MatchSpecificity):
    """A match on the import's name (dot, blank or alias)."""

    _rank: ClassVar[int] = NAME_CLASS

    def __str__(self) -> str:
        return "Name"