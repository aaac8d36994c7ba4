"""
Result types and closed label sets shared by every pipeline component.

All result types are frozen dataclasses created fresh for each request. Sequence
fields are tuples so a result can be shared between threads without copying;
`to_dict()` converts them to the JSON-ready shape callers expose.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from namebridge.errors import NameBridgeError, UnsupportedScript


# ════════════════════════════════════════════════════════════════════════════════
# LABELS
# ════════════════════════════════════════════════════════════════════════════════


class Script(str, Enum):
    """Writing systems the core can detect or convert between."""

    LATIN = "latin"
    CYRILLIC = "cyrillic"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"
    ARABIC = "arabic"
    GREEK = "greek"
    HEBREW = "hebrew"
    THAI = "thai"
    VIETNAMESE = "vietnamese"
    GERMAN = "german"
    INDONESIAN = "indonesian"
    UNKNOWN = "unknown"
    # Target-only label: plain 7-bit text
    ASCII = "ascii"

    @classmethod
    def parse(cls, value: Union[str, "Script"], allowed: FrozenSet["Script"]) -> "Script":
        """Resolve a script label, raising UnsupportedScript when it is not in `allowed`."""
        try:
            script = cls(value.strip().lower() if isinstance(value, str) else value)
        except ValueError:
            raise UnsupportedScript(f"unsupported script: {value!r}") from None
        if script not in allowed:
            raise UnsupportedScript(f"unsupported script: {script.value}")
        return script


# Vietnamese, German and Indonesian are written in the Latin alphabet
LATIN_FAMILY: FrozenSet[Script] = frozenset(
    {Script.LATIN, Script.ASCII, Script.VIETNAMESE, Script.GERMAN, Script.INDONESIAN}
)
SOURCE_SCRIPTS: FrozenSet[Script] = frozenset(s for s in Script if s is not Script.UNKNOWN)
TARGET_SCRIPTS: FrozenSet[Script] = frozenset({Script.LATIN, Script.ASCII})


class Culture(str, Enum):
    """Closed set of naming conventions, one split strategy each."""

    WESTERN = "western"
    VIETNAMESE = "vietnamese"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"
    ARABIC = "arabic"
    INDONESIAN = "indonesian"
    INDIAN = "indian"
    THAI = "thai"


class NameOrder(str, Enum):
    FAMILY_FIRST = "family-first"
    GIVEN_FIRST = "given-first"


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "X"


class GenderSource(str, Enum):
    CULTURAL_MARKER = "cultural_marker"
    STATISTICAL = "statistical"
    UNKNOWN = "unknown"


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ScriptDetection:
    """Dominant script of a string and how sure we are about it."""

    script: Script
    confidence: float
    counts: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def unknown(cls) -> "ScriptDetection":
        return cls(script=Script.UNKNOWN, confidence=0.0, counts={})

    def to_dict(self) -> Dict[str, Any]:
        return {"script": self.script.value, "confidence": self.confidence}


@dataclass(frozen=True)
class LanguageHint:
    """Likely language of a string, with the letters or script that suggested it."""

    language: str
    confidence: float
    indicators: Tuple[str, ...] = ()

    @classmethod
    def unknown(cls, confidence: float = 0.1) -> "LanguageHint":
        return cls(language="unknown", confidence=confidence, indicators=())

    def to_dict(self) -> Dict[str, Any]:
        return {"language": self.language, "confidence": self.confidence, "indicators": list(self.indicators)}


@dataclass(frozen=True)
class TransliterationResult:
    output: str
    confidence: float
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"output": self.output, "confidence": self.confidence, "notes": list(self.notes)}


@dataclass(frozen=True)
class CulturalContext:
    """Naming convention resolved once per request."""

    culture: Culture
    name_order: NameOrder
    has_gender_markers: bool = False
    has_patronymics: bool = False
    particle_prefix: bool = False
    # culture_hint, locale, language, script, diacritics or default
    resolved_from: str = "default"


@dataclass(frozen=True)
class NameStructure:
    family: str = ""
    first: str = ""
    middle: Tuple[str, ...] = ()
    titles: Tuple[str, ...] = ()
    suffixes: Tuple[str, ...] = ()
    particles: Tuple[str, ...] = ()
    full_ascii: str = ""
    order: NameOrder = NameOrder.GIVEN_FIRST

    @classmethod
    def empty(cls, order: NameOrder = NameOrder.GIVEN_FIRST) -> "NameStructure":
        return cls(order=order)

    def token_count(self) -> int:
        """Number of input tokens this structure accounts for."""
        return (
            len(self.family.split())
            + len(self.first.split())
            + sum(len(m.split()) for m in self.middle)
            + len(self.titles)
            + len(self.suffixes)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "first": self.first,
            "middle": list(self.middle),
            "titles": list(self.titles),
            "suffixes": list(self.suffixes),
            "particles": list(self.particles),
            "full_ascii": self.full_ascii,
            "order": self.order.value,
        }


@dataclass(frozen=True)
class GenderInference:
    value: Gender
    confidence: float
    source: GenderSource
    reason: str

    @classmethod
    def unknown(cls, reason: str = "No gender indicators found", confidence: float = 0.1) -> "GenderInference":
        return cls(value=Gender.UNKNOWN, confidence=confidence, source=GenderSource.UNKNOWN, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value.value,
            "confidence": self.confidence,
            "source": self.source.value,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ProcessResult:
    """Merged output of one pipeline run."""

    script: Script
    script_confidence: float
    culture: CulturalContext
    transliteration: TransliterationResult
    confidence_score: float
    name: NameStructure
    gender: GenderInference
    language: Optional[LanguageHint] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "script": self.script.value,
            "script_confidence": self.script_confidence,
            "language": self.language.to_dict() if self.language is not None else None,
            "culture": self.culture.culture.value,
            "transliteration": self.transliteration.to_dict(),
            "confidence_score": self.confidence_score,
            "name": self.name.to_dict(),
            "gender": self.gender.to_dict(),
        }


@dataclass(frozen=True)
class Outcome:
    """Either a ProcessResult or the error that prevented one."""

    success: bool
    result: Optional[ProcessResult] = None
    error: Optional[NameBridgeError] = None

    @classmethod
    def succeeded(cls, result: ProcessResult) -> "Outcome":
        return cls(success=True, result=result, error=None)

    @classmethod
    def failed(cls, error: NameBridgeError) -> "Outcome":
        return cls(success=False, result=None, error=error)

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def map(self, f: Callable[[ProcessResult], ProcessResult]) -> "Outcome":
        """Transform a successful result; failures pass through untouched."""
        if self.success and self.result is not None:
            try:
                return Outcome.succeeded(f(self.result))
            except NameBridgeError as e:
                return Outcome.failed(e)
        return self

    def flat_map(self, f: Callable[[ProcessResult], "Outcome"]) -> "Outcome":
        if self.success and self.result is not None:
            try:
                return f(self.result)
            except NameBridgeError as e:
                return Outcome.failed(e)
        return self

    def to_dict(self) -> Dict[str, Any]:
        if self.success and self.result is not None:
            return self.result.to_dict()
        assert self.error is not None
        return {"error": str(self.error), "error_type": self.error.kind}
