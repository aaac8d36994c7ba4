"""
Tunable heuristics for detection, transliteration, scoring and gender inference.

None of these numbers are statistically calibrated. They are hand-tuned defaults
and every component reads them from a `NameBridgeConfig` instead of embedding
literals, so callers can adjust them without touching the logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class DetectionSettings:
    """Script detection thresholds."""

    # (ratio strictly above, confidence) pairs, checked in order
    confidence_steps: Tuple[Tuple[float, float], ...] = ((0.8, 0.95), (0.6, 0.85), (0.4, 0.70))
    latin_default_confidence: float = 0.60
    vietnamese_min_marks: int = 2

    # Language hints drawn from letters that only some languages use
    vietnamese_language: float = 0.85
    german_language: float = 0.80
    spanish_language: float = 0.75
    traditional_chinese_language: float = 0.80
    simplified_chinese_language: float = 0.75
    japanese_language: float = 0.90
    russian_language: float = 0.80
    cyrillic_language: float = 0.60
    arabic_language: float = 0.75
    greek_language: float = 0.90
    unknown_language: float = 0.1


@dataclass(frozen=True)
class TransliterationSettings:
    """Per-rune confidence weight of each tier in the fallback chain."""

    dictionary_weight: float = 0.95
    builtin_weight: float = 0.85
    decomposition_weight: float = 0.3
    fallback_weight: float = 0.1


@dataclass(frozen=True)
class ScoringSettings:
    """Transliteration reliability score."""

    base: float = 0.50
    high_compatibility_bonus: float = 0.30
    medium_compatibility_bonus: float = 0.20
    low_compatibility_bonus: float = 0.10
    coverage_range: Tuple[float, float] = (0.5, 1.5)
    coverage_bonus: float = 0.1
    empty_output_penalty: float = -0.2
    length_range: Tuple[float, float] = (0.5, 2.0)
    length_bonus: float = 0.1
    floor: float = 0.1
    ceiling: float = 1.0


@dataclass(frozen=True)
class GenderSettings:
    """Confidence assigned by each gender inference rule."""

    vietnamese_marker: float = 0.85
    arabic_marker: float = 0.90
    malay_marker: float = 0.88
    title_marker: float = 0.90
    vietnamese_names: float = 0.65
    arabic_names: float = 0.75
    indonesian_names: float = 0.70
    indian_names: float = 0.75
    chinese_names: float = 0.55
    japanese_female_ending: float = 0.70
    japanese_male_ending: float = 0.60
    western_names: float = 0.85
    female_pattern: float = 0.60
    male_pattern: float = 0.55
    unknown: float = 0.1
    floor: float = 0.1
    ceiling: float = 0.95
    # Terminal patterns only apply to tokens longer than this
    pattern_min_length: int = 2


@dataclass(frozen=True)
class NameBridgeConfig:
    """Immutable configuration for the whole pipeline."""

    detection: DetectionSettings = field(default_factory=DetectionSettings)
    transliteration: TransliterationSettings = field(default_factory=TransliterationSettings)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    gender: GenderSettings = field(default_factory=GenderSettings)
    max_text_length: int = 10_000

    @classmethod
    def create_default(cls) -> "NameBridgeConfig":
        """Factory method for the default configuration."""
        return cls()

    def with_detection(self, **changes) -> "NameBridgeConfig":
        return replace(self, detection=replace(self.detection, **changes))

    def with_transliteration(self, **changes) -> "NameBridgeConfig":
        return replace(self, transliteration=replace(self.transliteration, **changes))

    def with_scoring(self, **changes) -> "NameBridgeConfig":
        return replace(self, scoring=replace(self.scoring, **changes))

    def with_gender(self, **changes) -> "NameBridgeConfig":
        return replace(self, gender=replace(self.gender, **changes))

    def with_max_text_length(self, max_text_length: int) -> "NameBridgeConfig":
        return replace(self, max_text_length=max_text_length)
