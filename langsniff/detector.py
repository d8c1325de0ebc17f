"""A reusable detector holding its own detection options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from langsniff.detect import Options, detect_with_options
from langsniff.filters import FilterList
from langsniff.info import Info
from langsniff.lang import Lang
from langsniff.script import Script
from langsniff.scripts import detect_script


@dataclass(frozen=True)
class Detector:
    """Detects languages and scripts with a fixed set of options."""

    options: Options = field(default_factory=Options)

    @classmethod
    def with_allowlist(cls, langs: Iterable[Lang]) -> "Detector":
        """A detector that only ever reports the given languages."""
        return cls(Options().set_filter_list(FilterList.allow(langs)))

    @classmethod
    def with_denylist(cls, langs: Iterable[Lang]) -> "Detector":
        """A detector that never reports the given languages."""
        return cls(Options().set_filter_list(FilterList.deny(langs)))

    def detect(self, text: str) -> Info | None:
        """Detect the language and script of text."""
        return detect_with_options(text, self.options)

    def detect_lang(self, text: str) -> Lang | None:
        """Detect only the language of text."""
        info = self.detect(text)
        return info.lang if info is not None else None

    def detect_script(self, text: str) -> Script | None:
        """Detect only the script of text."""
        return detect_script(text)