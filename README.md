# langsniff

langsniff tells you which natural language a piece of text is written in,
and which writing system (script) it uses. It needs nothing beyond the
Python standard library.

Languages are identified by their ISO 639-3 codes (`eng`, `rus`, `epo`, ...);
68 languages across 24 scripts are known.

## Installation

```
pip install langsniff
```

## Detecting a language

```python
from langsniff.detect import detect, detect_lang

info = detect("Мой дядя самых честных правил, когда не в шутку занемог")
if info is not None:
    print(info.lang.code())         # ISO 639-3 code, e.g. "rus"
    print(info.lang.eng_name())     # English name, e.g. "Russian"
    print(info.lang.native_name())  # name in the language itself
    print(info.script)              # "Cyrillic"
    print(info.confidence)          # a number between 0.0 and 1.0
    print(info.is_reliable())       # True when confidence is above 0.9

lang = detect_lang("Та нічого, все нормально. А в тебе як?")
```

`detect` returns an `Info` with the fields `script`, `lang` and
`confidence`, or `None` when the text gives nothing to go on, for example
when it holds only digits and punctuation.

How a language is chosen depends on the script:

- A script used by one language only (Greek, Georgian, Thai, Hangul, ...)
  gives that language with confidence 1.0.
- Text in Han characters is reported as Mandarin, or as Japanese when
  enough Hiragana or Katakana characters are mixed in.
- Latin and Cyrillic text is scored by how well its letters fit the
  alphabet of each language of that script.
- Arabic, Devanagari and Hebrew text has no alphabet data, so every allowed
  language of those scripts scores the same and the first in the list wins.

## Detecting only the script

Script detection is much cheaper than full language detection:

```python
from langsniff.scripts import detect_script, raw_detect_script
from langsniff.script import Script

detect_script("Привет всем!")     # Script.CYRILLIC
detect_script("1234567890-,;!")   # None

counts = raw_detect_script("Russian word любовь means love.")
counts.main_script()              # Script.LATIN
counts.count(Script.CYRILLIC)     # 6
```

## Restricting the candidate languages

A `Detector` can be limited to an allowlist, or told to ignore a denylist:

```python
from langsniff.detector import Detector
from langsniff.lang import Lang

detector = Detector.with_allowlist([Lang.ENG, Lang.RUS])
detector.detect_lang("There is no reason not to learn Esperanto.")  # Lang.ENG

detector = Detector.with_denylist([Lang.ENG, Lang.ITA])
detector.detect("Jen la trinkejo fermitis, ni iras tra mallumo kaj pluvo.")
```

The same filtering is available through `Options` and `FilterList`:

```python
from langsniff.detect import Options, detect_with_options
from langsniff.filters import FilterList
from langsniff.lang import Lang

options = Options().set_filter_list(FilterList.deny([Lang.HEB, Lang.YID]))
detect_with_options("האקדמיה ללשון העברית", options)  # None: every candidate was filtered out
```

`FilterList.all()`, `FilterList.allow(langs)` and `FilterList.deny(langs)`
build the three kinds of filter; `is_allowed(lang)` tests a language
against one.

## Languages and scripts

```python
from langsniff.lang import Lang
from langsniff.script import Script

Lang.from_code("ukr")     # Lang.UKR; None for an unknown code
Lang.parse("ENG")         # Lang.ENG; raises LangParseError for an unknown code
len(Lang.all())           # 68
str(Lang.UKR)             # "Українська"

Script.parse("cyrillic")  # Script.CYRILLIC
Script.CYRILLIC.langs()   # the languages written in Cyrillic
len(Script.all())         # 24
```

Parsing failures raise subclasses of `langsniff.errors.ParseError` (itself
a `ValueError`): `LangParseError`, `ScriptParseError` and
`MethodParseError`.

## Trigrams

`langsniff.trigrams` extracts character trigrams from lowercased text:
`count_trigrams(text)` returns a `Counter` of them, and
`get_trigrams_with_positions(text)` ranks the 600 most frequent.

## What the package does not do

The package carries no trigram profiles of the known languages, so
language detection never compares trigrams: it always uses the alphabet
scoring described above. The `langsniff.method.Method` enum (`TRIGRAM`,
`ALPHABET`, `COMBINED`, parsed with `Method.parse`) names detection
methods, but `Options` has no method setting and detection does not consult
it.

## Command line

```
langsniff
```

The command asks for a line of text on standard input and prints the
detected language together with the full detection result. It can also be
fed through a pipe:

```
echo "Ĉu vi ne volas eklerni Esperanton?" | langsniff
```