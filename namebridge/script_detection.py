"""
Script detection by Unicode code point ranges.

Every letter of the NFC-normalized input is assigned to a bucket, the dominant
bucket wins and a stepped confidence is derived from its share of all letters.
Latin letters are further split so that Vietnamese and German text can be told
apart from generic Latin text, and Han characters mixed with kana are reported
as Japanese.

`detect_language` builds on a detection and looks for letters that only some
languages use (umlauts, traditional Chinese forms, Russian-only Cyrillic) to
produce a `LanguageHint`.

```python
from namebridge.script_detection import detect_script

detect_script("Привет").script          # Script.CYRILLIC
detect_script("Nguyễn Văn Minh").script  # Script.VIETNAMESE
detect_script("").confidence             # 0.0
```
"""

from __future__ import annotations

import unicodedata
from typing import Dict, Optional, Tuple

from namebridge.config import DetectionSettings, NameBridgeConfig
from namebridge.models import LanguageHint, Script, ScriptDetection

# ════════════════════════════════════════════════════════════════════════════════
# CODE POINT RANGES
# ════════════════════════════════════════════════════════════════════════════════

# Bucket names double as the keys of ScriptDetection.counts
LATIN = "latin"
VIETNAMESE = "vietnamese"
GERMAN = "german"
CYRILLIC = "cyrillic"
HAN = "chinese"
KANA = "japanese"
HANGUL = "korean"
ARABIC = "arabic"
GREEK = "greek"
HEBREW = "hebrew"
THAI = "thai"
UNKNOWN = "unknown"

# Inclusive ranges, checked in order
_SCRIPT_RANGES: Tuple[Tuple[int, int, str], ...] = (
    (0x0041, 0x005A, LATIN),
    (0x0061, 0x007A, LATIN),
    (0x00C0, 0x024F, LATIN),
    (0x1E00, 0x1EFF, LATIN),
    (0x0370, 0x03FF, GREEK),
    (0x1F00, 0x1FFF, GREEK),
    (0x0400, 0x052F, CYRILLIC),
    (0x2DE0, 0x2DFF, CYRILLIC),
    (0xA640, 0xA69F, CYRILLIC),
    (0x0590, 0x05FF, HEBREW),
    (0x0600, 0x06FF, ARABIC),
    (0x0750, 0x077F, ARABIC),
    (0x08A0, 0x08FF, ARABIC),
    (0xFB50, 0xFDFF, ARABIC),
    (0xFE70, 0xFEFF, ARABIC),
    (0x0E00, 0x0E7F, THAI),
    (0x1100, 0x11FF, HANGUL),
    (0x3130, 0x318F, HANGUL),
    (0xAC00, 0xD7AF, HANGUL),
    (0x3040, 0x30FF, KANA),
    (0x31F0, 0x31FF, KANA),
    (0xFF66, 0xFF9F, KANA),
    (0x3400, 0x4DBF, HAN),
    (0x4E00, 0x9FFF, HAN),
    (0xF900, 0xFAFF, HAN),
    (0x20000, 0x2A6DF, HAN),
)

# Letters that only occur in Vietnamese orthography (compared lowercased)
VIETNAMESE_LETTERS = frozenset("ăđơư")
VIETNAMESE_RANGE = (0x1EA0, 0x1EF9)
GERMAN_LETTERS = frozenset("äöüßẞÄÖÜ")

# Language markers, compared against lowercased text
GERMAN_LANGUAGE_LETTERS = frozenset("äöüß")
SPANISH_LANGUAGE_LETTERS = frozenset("ñáéíóú")
RUSSIAN_LANGUAGE_LETTERS = frozenset("ъыьэюяё")
# Forms that differ from their simplified counterparts
TRADITIONAL_CHINESE_CHARS = frozenset("龍鳳學國長開關門間問風飛馬鳥魚車電話語")

# Earlier entries win ties on letter count
_BUCKET_PRIORITY: Tuple[str, ...] = (
    LATIN,
    CYRILLIC,
    HAN,
    KANA,
    HANGUL,
    ARABIC,
    GREEK,
    HEBREW,
    THAI,
    UNKNOWN,
)

_BUCKET_SCRIPTS: Dict[str, Script] = {
    CYRILLIC: Script.CYRILLIC,
    HAN: Script.CHINESE,
    KANA: Script.JAPANESE,
    HANGUL: Script.KOREAN,
    ARABIC: Script.ARABIC,
    GREEK: Script.GREEK,
    HEBREW: Script.HEBREW,
    THAI: Script.THAI,
    UNKNOWN: Script.UNKNOWN,
}


def classify_char(char: str) -> str:
    """Return the bucket of a single letter."""
    cp = ord(char)
    for start, end, bucket in _SCRIPT_RANGES:
        if start <= cp <= end:
            if bucket == LATIN:
                return _latin_variant(char)
            return bucket
    return UNKNOWN


def script_of_char(char: str) -> Script:
    """Script whose built-in table covers `char`; Latin variants collapse to latin."""
    bucket = classify_char(char)
    if bucket in (LATIN, VIETNAMESE, GERMAN):
        return Script.LATIN
    return _BUCKET_SCRIPTS[bucket]


def _latin_variant(char: str) -> str:
    lowered = char.lower()
    if lowered in VIETNAMESE_LETTERS or VIETNAMESE_RANGE[0] <= ord(lowered) <= VIETNAMESE_RANGE[1]:
        return VIETNAMESE
    if char in GERMAN_LETTERS:
        return GERMAN
    return LATIN


# ════════════════════════════════════════════════════════════════════════════════
# DETECTOR
# ════════════════════════════════════════════════════════════════════════════════


class ScriptDetector:
    """Classifies the dominant writing system of a string. Never raises."""

    def __init__(self, settings: Optional[DetectionSettings] = None):
        self._settings = settings or DetectionSettings()

    def detect(self, text: str) -> ScriptDetection:
        if not text:
            return ScriptDetection.unknown()

        text = unicodedata.normalize("NFC", text)
        counts: Dict[str, int] = {}
        vietnamese_marks = set()
        total = 0

        for char in text:
            if not char.isalpha():
                continue
            total += 1
            bucket = classify_char(char)
            counts[bucket] = counts.get(bucket, 0) + 1
            if bucket == VIETNAMESE:
                vietnamese_marks.add(char.lower())

        if total == 0:
            return ScriptDetection(script=Script.UNKNOWN, confidence=0.0, counts=counts)

        latin_total = counts.get(LATIN, 0) + counts.get(VIETNAMESE, 0) + counts.get(GERMAN, 0)
        family_counts = {bucket: counts.get(bucket, 0) for bucket in _BUCKET_PRIORITY}
        family_counts[LATIN] = latin_total

        # max() keeps the first of equal counts, so priority order breaks ties
        dominant = max(_BUCKET_PRIORITY, key=lambda bucket: family_counts[bucket])
        dominant_count = family_counts[dominant]

        if dominant == UNKNOWN:
            return ScriptDetection(script=Script.UNKNOWN, confidence=0.0, counts=dict(counts))

        if dominant == LATIN:
            script = self._specialize_latin(vietnamese_marks, counts)
        elif dominant in (HAN, KANA) and counts.get(KANA, 0) > 0:
            script = Script.JAPANESE
            dominant_count = counts.get(HAN, 0) + counts.get(KANA, 0)
        else:
            script = _BUCKET_SCRIPTS[dominant]

        ratio = dominant_count / total
        confidence = self._step_confidence(ratio, latin_total > 0)
        return ScriptDetection(script=script, confidence=confidence, counts=dict(counts))

    def _specialize_latin(self, vietnamese_marks: set, counts: Dict[str, int]) -> Script:
        """Vietnamese and German win over generic Latin even at lower raw counts."""
        if len(vietnamese_marks) >= self._settings.vietnamese_min_marks:
            return Script.VIETNAMESE
        if counts.get(GERMAN, 0) > 0:
            return Script.GERMAN
        return Script.LATIN

    def detect_language(self, text: str, detection: Optional[ScriptDetection] = None) -> LanguageHint:
        """
        Guess the language of `text` from letters specific to it.

        The guess is only as good as the script detection it builds on; pass
        `detection` to reuse one already computed for the same text.
        """
        if not text:
            return LanguageHint.unknown(self._settings.unknown_language)
        if detection is None:
            detection = self.detect(text)

        lowered = unicodedata.normalize("NFC", text).lower()
        letters = set(lowered)
        settings = self._settings
        script = detection.script

        if script in (Script.LATIN, Script.VIETNAMESE, Script.GERMAN):
            vietnamese_marks = {char for char in letters if char.isalpha() and classify_char(char) == VIETNAMESE}
            if len(vietnamese_marks) >= settings.vietnamese_min_marks:
                return LanguageHint("vi", settings.vietnamese_language, ("vietnamese_diacritics",))
            if letters & GERMAN_LANGUAGE_LETTERS:
                return LanguageHint("de", settings.german_language, ("german_umlauts",))
            if letters & SPANISH_LANGUAGE_LETTERS:
                return LanguageHint("es", settings.spanish_language, ("spanish_characters",))
        elif script is Script.CHINESE:
            if letters & TRADITIONAL_CHINESE_CHARS:
                return LanguageHint("zh-TW", settings.traditional_chinese_language, ("traditional_characters",))
            return LanguageHint("zh-CN", settings.simplified_chinese_language, ("simplified_characters",))
        elif script is Script.JAPANESE:
            return LanguageHint("ja", settings.japanese_language, ("hiragana_katakana",))
        elif script is Script.CYRILLIC:
            if letters & RUSSIAN_LANGUAGE_LETTERS:
                return LanguageHint("ru", settings.russian_language, ("russian_patterns",))
            return LanguageHint("ru", settings.cyrillic_language, ("cyrillic_script",))
        elif script is Script.ARABIC:
            return LanguageHint("ar", settings.arabic_language, ("arabic_script",))
        elif script is Script.GREEK:
            return LanguageHint("el", settings.greek_language, ("greek_script",))

        return LanguageHint.unknown(settings.unknown_language)

    def _step_confidence(self, ratio: float, has_latin: bool) -> float:
        for threshold, confidence in self._settings.confidence_steps:
            if ratio > threshold:
                return confidence
        if has_latin:
            return self._settings.latin_default_confidence
        return ratio


def contains_script(text: str, bucket: str) -> bool:
    """True when any letter of `text` falls into the given bucket."""
    return any(char.isalpha() and classify_char(char) == bucket for char in unicodedata.normalize("NFC", text))


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


def detect_script(text: str, config: Optional[NameBridgeConfig] = None) -> ScriptDetection:
    """Detect the dominant script of `text` with default or supplied settings."""
    settings = config.detection if config is not None else None
    return ScriptDetector(settings).detect(text)


def detect_language(
    text: str, detection: Optional[ScriptDetection] = None, config: Optional[NameBridgeConfig] = None
) -> LanguageHint:
    """Guess the language of `text` with default or supplied settings."""
    settings = config.detection if config is not None else None
    return ScriptDetector(settings).detect_language(text, detection)
