"""
Character-level transliteration and its reliability score.

Each character of the NFC-normalized input passes through an ordered chain of
rules and the first rule that produces a mapping wins:

1. **Dictionary**: an optional injected `CharacterLookup`
2. **Built-in tables**: identity for characters already valid in the target,
   then the source script's table, then the table of the character's own script
3. **Decomposition**: canonical decomposition with combining marks stripped
4. **Fallback**: placeholders for letters and digits, normalized punctuation,
   everything else dropped

Every rule carries a weight and the result's confidence is the mean weight over
all characters. Han characters outside the fixed vocabulary are read with
`pypinyin`; Hangul syllables are romanized from their jamo.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, List, Optional, Tuple, Union

import pypinyin

from namebridge.config import ScoringSettings, TransliterationSettings
from namebridge.errors import InvalidEncoding, InvalidInput
from namebridge.models import LATIN_FAMILY, SOURCE_SCRIPTS, TARGET_SCRIPTS, Script, TransliterationResult
from namebridge.script_detection import HAN, HANGUL, KANA, classify_char, script_of_char
from namebridge.transliteration_data import (
    ARABIC_TABLE,
    CHINESE_TABLE,
    CYRILLIC_TABLE,
    DEFAULT_PUNCTUATION,
    GREEK_TABLE,
    HANGUL_BASE,
    HANGUL_FINALS,
    HANGUL_INITIALS,
    HANGUL_LAST,
    HANGUL_MEDIALS,
    HEBREW_TABLE,
    HIRAGANA_TABLE,
    KATAKANA_TABLE,
    LATIN_SPECIAL_TABLE,
    PUNCTUATION_TABLE,
    THAI_TABLE,
)

# (character, source_script, target_script, locale) -> (mapped, found)
CharacterLookup = Callable[[str, str, str, Optional[str]], Tuple[str, bool]]


@dataclass(frozen=True)
class RuneMapping:
    output: str
    weight: float
    note: Optional[str] = None


# ════════════════════════════════════════════════════════════════════════════════
# SCRIPT READINGS
# ════════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=8192)
def _pinyin_reading(char: str) -> Optional[str]:
    """Toneless pinyin for a Han character outside the fixed vocabulary."""
    try:
        syllables = pypinyin.lazy_pinyin(char, style=pypinyin.Style.NORMAL, errors="ignore")
    except (AttributeError, ValueError, TypeError) as e:
        logging.warning(f"Pypinyin failed for '{char}': {e}")
        return None
    reading = "".join(syllables)
    if not reading or not reading.isascii() or not reading.isalpha():
        return None
    return reading.capitalize()


def _chinese_reading(char: str) -> Optional[str]:
    reading = CHINESE_TABLE.get(char)
    if reading is not None:
        return reading
    if classify_char(char) == HAN:
        return _pinyin_reading(char)
    return None


def _kana_reading(char: str) -> Optional[str]:
    # Half-width katakana fold to their full-width forms
    if 0xFF66 <= ord(char) <= 0xFF9F:
        char = unicodedata.normalize("NFKC", char)
    reading = HIRAGANA_TABLE.get(char)
    if reading is None:
        reading = KATAKANA_TABLE.get(char)
    return reading


def _hangul_reading(char: str) -> Optional[str]:
    """Revised Romanization of a precomposed Hangul syllable."""
    code_point = ord(char)
    if not HANGUL_BASE <= code_point <= HANGUL_LAST:
        return None
    initial, rest = divmod(code_point - HANGUL_BASE, len(HANGUL_MEDIALS) * len(HANGUL_FINALS))
    medial, final = divmod(rest, len(HANGUL_FINALS))
    return (HANGUL_INITIALS[initial] + HANGUL_MEDIALS[medial] + HANGUL_FINALS[final]).capitalize()


_SCRIPT_READERS: "MappingProxyType[Script, Callable[[str], Optional[str]]]" = MappingProxyType(
    {
        Script.CYRILLIC: CYRILLIC_TABLE.get,
        Script.GREEK: GREEK_TABLE.get,
        Script.ARABIC: ARABIC_TABLE.get,
        Script.HEBREW: HEBREW_TABLE.get,
        Script.THAI: THAI_TABLE.get,
        Script.JAPANESE: _kana_reading,
        Script.CHINESE: _chinese_reading,
        Script.KOREAN: _hangul_reading,
        Script.LATIN: LATIN_SPECIAL_TABLE.get,
        Script.ASCII: LATIN_SPECIAL_TABLE.get,
        Script.VIETNAMESE: LATIN_SPECIAL_TABLE.get,
        Script.GERMAN: LATIN_SPECIAL_TABLE.get,
        Script.INDONESIAN: LATIN_SPECIAL_TABLE.get,
    }
)

_missing_readers = SOURCE_SCRIPTS - set(_SCRIPT_READERS)
if _missing_readers:
    raise ValueError(f"No built-in reader for source scripts: {sorted(s.value for s in _missing_readers)}")


def builtin_reading(char: str, script: Script) -> Optional[str]:
    """Romanization of `char` from the built-in table of `script`, or None."""
    reader = _SCRIPT_READERS.get(script)
    if reader is None:
        return None
    return reader(char)


def _is_latin_letter(char: str) -> bool:
    return char.isalpha() and script_of_char(char) is Script.LATIN


def is_valid_for_target(text: str, target: Script) -> bool:
    """ASCII targets accept only 7-bit text; Latin targets also accept Latin letters."""
    if target is Script.ASCII:
        return text.isascii()
    return all(char.isascii() or _is_latin_letter(char) for char in text)


def _syllable_group(char: str) -> Optional[str]:
    """Han and Hangul characters each spell a whole syllable; kana runs form words."""
    group = classify_char(char)
    return group if group in (HAN, HANGUL, KANA) else None


def _needs_space(previous: Optional[str], current: Optional[str]) -> bool:
    if previous is None or current is None:
        return False
    return current != KANA or previous != KANA


def validate_output(output: str, target: Script) -> str:
    """Raise InvalidEncoding unless `output` is well-formed text for `target`."""
    try:
        output.encode("utf-8")
    except UnicodeEncodeError as e:
        logging.error(f"Transliteration produced text that is not valid UTF-8: {output!r}")
        raise InvalidEncoding(f"output is not valid UTF-8: {e}") from e
    if target is Script.ASCII and not output.isascii():
        logging.error(f"Transliteration to ascii produced non-ASCII text: {output!r}")
        raise InvalidEncoding("output contains characters outside 7-bit ASCII")
    return output


# ════════════════════════════════════════════════════════════════════════════════
# TRANSLITERATOR
# ════════════════════════════════════════════════════════════════════════════════


class Transliterator:
    """Maps text between scripts one character at a time."""

    def __init__(self, settings: Optional[TransliterationSettings] = None, lookup: Optional[CharacterLookup] = None):
        self._settings = settings or TransliterationSettings()
        self._lookup = lookup

    def transliterate(
        self,
        text: str,
        source: Union[str, Script],
        target: Union[str, Script] = Script.ASCII,
        locale: Optional[str] = None,
    ) -> TransliterationResult:
        """
        Transliterate `text` from `source` into `target`.

        Empty input yields empty output with confidence 1.0. Exceptions raised by
        an injected lookup propagate unchanged.

        Raises:
            InvalidInput: `text` is not a string
            UnsupportedScript: source or target outside the supported set
            InvalidEncoding: the output failed validation (a defect in the tables)
        """
        if not isinstance(text, str):
            raise InvalidInput(f"text must be a string, got {type(text).__name__}")
        source_script = Script.parse(source, SOURCE_SCRIPTS)
        target_script = Script.parse(target, TARGET_SCRIPTS)

        if not text:
            return TransliterationResult(output="", confidence=1.0, notes=())

        text = unicodedata.normalize("NFC", text)
        pieces: List[str] = []
        notes: Dict[str, None] = {}
        total_weight = 0.0
        previous_group: Optional[str] = None

        for char in text:
            mapping = self._map_char(char, source_script, target_script, locale)
            group = _syllable_group(char) if mapping.output.strip() else None
            if _needs_space(previous_group, group):
                pieces.append(" ")
            pieces.append(mapping.output)
            previous_group = group
            total_weight += mapping.weight
            if mapping.note:
                notes[mapping.note] = None

        output = validate_output("".join(pieces), target_script)
        return TransliterationResult(output=output, confidence=total_weight / len(text), notes=tuple(notes))

    def _map_char(self, char: str, source: Script, target: Script, locale: Optional[str]) -> RuneMapping:
        for rule in (self._from_dictionary, self._from_builtin_tables, self._from_decomposition):
            mapping = rule(char, source, target, locale)
            if mapping is not None:
                return mapping
        return self._fallback(char)

    def _from_dictionary(
        self, char: str, source: Script, target: Script, locale: Optional[str]
    ) -> Optional[RuneMapping]:
        if self._lookup is None:
            return None
        mapped, found = self._lookup(char, source.value, target.value, locale)
        if not found or not mapped:
            return None
        if not is_valid_for_target(mapped, target):
            logging.warning(f"Discarding dictionary mapping {char!r} -> {mapped!r}: not valid for {target.value}")
            return None
        return RuneMapping(mapped, self._settings.dictionary_weight)

    def _from_builtin_tables(
        self, char: str, source: Script, target: Script, locale: Optional[str]
    ) -> Optional[RuneMapping]:
        if char.isascii() or (target is Script.LATIN and _is_latin_letter(char)):
            return RuneMapping(char, self._settings.builtin_weight)

        own_script = script_of_char(char)
        for script in (source, own_script):
            reading = builtin_reading(char, script)
            if reading is None or not is_valid_for_target(reading, target):
                continue
            note = None
            if source is Script.JAPANESE and own_script is Script.CHINESE:
                note = f"Kanji {char} read as Mandarin pinyin"
            return RuneMapping(reading, self._settings.builtin_weight, note)
        return None

    def _from_decomposition(
        self, char: str, source: Script, target: Script, locale: Optional[str]
    ) -> Optional[RuneMapping]:
        decomposed = unicodedata.normalize("NFD", char)
        base = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
        if not base or base == char or not is_valid_for_target(base, target):
            return None
        return RuneMapping(base, self._settings.decomposition_weight)

    def _fallback(self, char: str) -> RuneMapping:
        weight = self._settings.fallback_weight
        if char.isalpha():
            return RuneMapping("?", weight, f"Unknown character {char!r} approximated")
        if char.isdigit():
            return RuneMapping("0", weight, f"Digit {char!r} approximated")
        if char.isspace():
            return RuneMapping(" ", weight)
        if unicodedata.category(char).startswith("P"):
            mapped = PUNCTUATION_TABLE.get(char)
            if mapped is not None:
                return RuneMapping(mapped, weight)
            return RuneMapping(DEFAULT_PUNCTUATION, weight, f"Punctuation {char!r} normalized")
        logging.debug(f"Dropping character {char!r} with no transliteration")
        return RuneMapping("", weight, f"Character {char!r} dropped")


# ════════════════════════════════════════════════════════════════════════════════
# CONFIDENCE SCORER
# ════════════════════════════════════════════════════════════════════════════════

_MEDIUM_COMPATIBILITY = frozenset({Script.CYRILLIC, Script.GREEK})
_LOW_COMPATIBILITY = frozenset(
    {Script.CHINESE, Script.JAPANESE, Script.KOREAN, Script.ARABIC, Script.HEBREW, Script.THAI}
)


def _compatibility_bonus(source: Script, target: Script, settings: ScoringSettings) -> float:
    if target not in TARGET_SCRIPTS:
        return 0.0
    if source in LATIN_FAMILY:
        return settings.high_compatibility_bonus
    if source in _MEDIUM_COMPATIBILITY:
        return settings.medium_compatibility_bonus
    if source in _LOW_COMPATIBILITY:
        return settings.low_compatibility_bonus
    return 0.0


def _non_whitespace_length(text: str) -> int:
    return sum(1 for char in text if not char.isspace())


def score_transliteration(
    input_text: str,
    output_text: str,
    source: Union[str, Script],
    target: Union[str, Script],
    settings: Optional[ScoringSettings] = None,
) -> float:
    """
    Heuristic reliability of a transliteration, clamped into [floor, ceiling].

    Combines a base score with bonuses for script-pair compatibility, for the
    share of non-whitespace characters that survived and for preserved length.
    Lengths are counted in code points.
    """
    settings = settings or ScoringSettings()
    source_script = Script(source)
    target_script = Script(target)

    score = settings.base + _compatibility_bonus(source_script, target_script, settings)

    input_chars = _non_whitespace_length(input_text)
    if input_chars > 0:
        coverage = _non_whitespace_length(output_text) / input_chars
        if coverage == 0:
            score += settings.empty_output_penalty
        elif settings.coverage_range[0] <= coverage <= settings.coverage_range[1]:
            score += settings.coverage_bonus

    if input_text:
        length_ratio = len(output_text) / len(input_text)
        if settings.length_range[0] <= length_ratio <= settings.length_range[1]:
            score += settings.length_bonus

    return max(settings.floor, min(settings.ceiling, score))
