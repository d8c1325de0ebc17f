"""Detection of the language and script of a text.

Languages written in a script of their own are recognised from the script
alone; languages sharing a script are told apart by their alphabets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from langsniff import alphabets
from langsniff.filters import FilterList
from langsniff.info import Info
from langsniff.lang import Lang
from langsniff.query import Query
from langsniff.script import Script
from langsniff.scripts import RawScriptInfo, raw_detect_script


@dataclass(frozen=True)
class Options:
    """Settings for detection."""

    filter_list: FilterList = field(default_factory=FilterList.all)

    def set_filter_list(self, filter_list: FilterList) -> "Options":
        """Return a copy of these options with another filter list."""
        return replace(self, filter_list=filter_list)


def detect(text: str) -> Info | None:
    """Detect the language and script of text, or None if there is no script."""
    return detect_with_options(text, Options())


def detect_lang(text: str) -> Lang | None:
    """Detect only the language of text."""
    info = detect(text)
    return info.lang if info is not None else None


def detect_with_options(text: str, options: Options) -> Info | None:
    """Detect the language and script of text, honouring the given options."""
    raw_script_info = raw_detect_script(text)
    script = raw_script_info.main_script()
    if script is None:
        return None

    group = script.to_lang_group()
    if group.lang is not None:
        return Info(script, group.lang, 1.0)
    if group.multi is not None:
        query = Query(text, group.multi, options.filter_list)
        return alphabets.detect(query)
    return detect_lang_based_on_mandarin_script(options.filter_list, raw_script_info)


def detect_lang_based_on_mandarin_script(
    filter_list: FilterList, raw_script_info: RawScriptInfo
) -> Info:
    """Decide between Mandarin and Japanese for a text in Han characters.

    Enough kana among the characters makes Japanese the likelier language.
    """
    if not filter_list.is_allowed(Lang.CMN):
        return Info(Script.MANDARIN, Lang.JPN, 1.0)

    mandarin = raw_script_info.count(Script.MANDARIN)
    katakana = raw_script_info.count(Script.KATAKANA)
    hiragana = raw_script_info.count(Script.HIRAGANA)
    japanese = katakana + hiragana
    total = mandarin + hiragana

    if total:
        japanese_share = japanese / total
    else:
        japanese_share = math.inf if japanese else math.nan

    if japanese_share > 0.2:
        lang, confidence = Lang.JPN, 1.0
    elif japanese_share > 0.05:
        lang, confidence = Lang.JPN, 0.5
    elif japanese_share > 0.02:
        lang, confidence = Lang.CMN, 0.5
    else:
        lang, confidence = Lang.CMN, 1.0
    return Info(Script.MANDARIN, lang, confidence)