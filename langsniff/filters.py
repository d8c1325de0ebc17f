"""Lists that restrict which languages detection may return."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from langsniff.lang import Lang


class FilterKind(Enum):
    """How a filter list treats its languages."""

    ALL = "all"
    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class FilterList:
    """Allows every language, only listed ones, or all but listed ones."""

    kind: FilterKind = FilterKind.ALL
    langs: frozenset[Lang] = frozenset()

    @classmethod
    def all(cls) -> "FilterList":
        """A filter that allows every language."""
        return cls()

    @classmethod
    def allow(cls, langs: Iterable[Lang]) -> "FilterList":
        """A filter that allows only the given languages."""
        return cls(FilterKind.ALLOW, frozenset(langs))

    @classmethod
    def deny(cls, langs: Iterable[Lang]) -> "FilterList":
        """A filter that allows every language except the given ones."""
        return cls(FilterKind.DENY, frozenset(langs))

    def is_allowed(self, lang: Lang) -> bool:
        """Return True if lang passes this filter."""
        if self.kind is FilterKind.ALLOW:
            return lang in self.langs
        if self.kind is FilterKind.DENY:
            return lang not in self.langs
        return True