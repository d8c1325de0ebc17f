"""A detection request for a text whose script is already known."""

from __future__ import annotations

from dataclasses import dataclass, field

from langsniff.filters import FilterList
from langsniff.script import MultiLangScript


@dataclass
class Query:
    """Text to analyse, the shared script it is written in and a language filter.

    The lowercase form of the text is computed once, on first use.
    """

    text: str
    multi_lang_script: MultiLangScript
    filter_list: FilterList = field(default_factory=FilterList.all)
    _lowercase: str | None = field(default=None, init=False, repr=False, compare=False)

    def lowercase(self) -> str:
        """The text converted to lower case."""
        if self._lowercase is None:
            self._lowercase = self.text.lower()
        return self._lowercase