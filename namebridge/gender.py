"""
Heuristic gender inference from name structure and curated name lists.

Rules are evaluated in priority order and the first match wins:

1. Structural markers (Vietnamese Văn/Thị, Arabic and Malay patronymics,
   gendered honorifics)
2. Culture-specific given-name fragments and Japanese given-name endings
3. Generic terminal patterns for Western and Indian names
4. Unknown, with a reason naming the culture

The result is an auditable hint for downstream review, never an authority. The
inferencer never raises and confidences are clamped to the configured range.
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from namebridge.config import GenderSettings
from namebridge.models import Culture, CulturalContext, Gender, GenderInference, GenderSource, NameOrder
from namebridge.name_data import (
    ARABIC_FEMALE_MARKERS,
    ARABIC_FEMALE_NAMES,
    ARABIC_MALE_MARKERS,
    ARABIC_MALE_NAMES,
    CHINESE_FEMALE_NAMES,
    CHINESE_MALE_NAMES,
    FEMALE_NAME_ENDINGS,
    INDIAN_FEMALE_NAMES,
    INDIAN_MALE_NAMES,
    INDONESIAN_FEMALE_NAMES,
    INDONESIAN_MALE_NAMES,
    JAPANESE_FEMALE_ENDINGS,
    JAPANESE_MALE_ENDINGS,
    MALAY_FEMALE_MARKERS,
    MALAY_MALE_MARKERS,
    MALE_NAME_ENDINGS,
    TITLE_GENDERS,
    VIETNAMESE_FEMALE_MARKERS,
    VIETNAMESE_FEMALE_NAMES,
    VIETNAMESE_MALE_MARKERS,
    VIETNAMESE_MALE_NAMES,
    WESTERN_FEMALE_NAMES,
    WESTERN_MALE_NAMES,
)
from namebridge.name_parser import extract_suffixes, extract_titles, strip_honorifics, tokenize

_UNKNOWN_REASONS = {
    Culture.WESTERN: "No Western gender indicators found",
    Culture.VIETNAMESE: "No Vietnamese gender markers found",
    Culture.CHINESE: "Chinese names require cultural knowledge for gender inference",
    Culture.JAPANESE: "Japanese gender inference requires cultural context",
    Culture.KOREAN: "Korean names require cultural knowledge for gender inference",
    Culture.ARABIC: "No Arabic gender markers found",
    Culture.INDONESIAN: "No Indonesian gender markers found",
    Culture.INDIAN: "No Indian gender markers found",
    Culture.THAI: "Thai names require cultural knowledge for gender inference",
}

_PATTERN_CULTURES = frozenset({Culture.WESTERN, Culture.INDIAN})


class _NameEvidence:
    """Tokens of one name, prepared once for every rule."""

    def __init__(self, original: str, transliterated: str, context: CulturalContext):
        if context.culture is Culture.JAPANESE:
            transliterated = strip_honorifics(transliterated)
        self.context = context
        _, original_rest = extract_titles(tokenize(original))
        self.original_tokens = [token.lower() for token in original_rest]
        titles, rest = extract_titles(tokenize(transliterated))
        _, rest = extract_suffixes(rest)
        self.titles = titles
        self.tokens = [token.lower() for token in rest]

    @property
    def all_tokens(self) -> List[str]:
        return self.original_tokens + self.tokens

    def given_tokens(self) -> List[str]:
        """Tokens that can hold a given name for this culture's name order."""
        if not self.tokens:
            return []
        if self.context.name_order is NameOrder.FAMILY_FIRST:
            return self.tokens[1:] or self.tokens
        return self.tokens[:1]


def _longest_fragment(tokens: Iterable[str], fragments: FrozenSet[str]) -> int:
    return max((len(fragment) for token in tokens for fragment in fragments if fragment in token), default=0)


class GenderInferencer:
    """Evaluates the gender rule chain for one name at a time."""

    def __init__(self, settings: Optional[GenderSettings] = None):
        self._settings = settings or GenderSettings()
        self._rules: Tuple[Callable[[_NameEvidence], Optional[GenderInference]], ...] = (
            self._vietnamese_markers,
            self._arabic_markers,
            self._malay_markers,
            self._title_markers,
            self._given_name_fragments,
            self._japanese_endings,
            self._terminal_patterns,
        )

    def infer(self, original: str, transliterated: str, context: CulturalContext) -> GenderInference:
        evidence = _NameEvidence(original or "", transliterated or "", context)
        for rule in self._rules:
            inference = rule(evidence)
            if inference is not None:
                return self._clamp(inference)
        reason = _UNKNOWN_REASONS.get(context.culture, "No gender indicators found")
        return self._clamp(GenderInference.unknown(reason, self._settings.unknown))

    def _clamp(self, inference: GenderInference) -> GenderInference:
        confidence = max(self._settings.floor, min(self._settings.ceiling, inference.confidence))
        if confidence == inference.confidence:
            return inference
        return GenderInference(inference.value, confidence, inference.source, inference.reason)

    # ─────────────────────────────────────────────────────────────────────────
    # Tier 1: structural markers
    # ─────────────────────────────────────────────────────────────────────────

    def _marker_rule(
        self,
        tokens: Sequence[str],
        male: FrozenSet[str],
        female: FrozenSet[str],
        confidence: float,
        male_reason: str,
        female_reason: str,
    ) -> Optional[GenderInference]:
        if any(token in male for token in tokens):
            return GenderInference(Gender.MALE, confidence, GenderSource.CULTURAL_MARKER, male_reason)
        if any(token in female for token in tokens):
            return GenderInference(Gender.FEMALE, confidence, GenderSource.CULTURAL_MARKER, female_reason)
        return None

    def _vietnamese_markers(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        if evidence.context.culture is not Culture.VIETNAMESE:
            return None
        # The family name comes first, so it can never be the marker
        tokens = evidence.original_tokens[1:] + evidence.tokens[1:]
        return self._marker_rule(
            tokens,
            VIETNAMESE_MALE_MARKERS,
            VIETNAMESE_FEMALE_MARKERS,
            self._settings.vietnamese_marker,
            "Vietnamese marker 'Văn' typically indicates male",
            "Vietnamese marker 'Thị' typically indicates female",
        )

    def _arabic_markers(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        if evidence.context.culture is not Culture.ARABIC:
            return None
        return self._marker_rule(
            evidence.all_tokens,
            ARABIC_MALE_MARKERS,
            ARABIC_FEMALE_MARKERS,
            self._settings.arabic_marker,
            "Arabic patronymic 'bin/ibn' (son of) indicates male",
            "Arabic patronymic 'bint' (daughter of) indicates female",
        )

    def _malay_markers(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        if evidence.context.culture is not Culture.INDONESIAN:
            return None
        return self._marker_rule(
            evidence.all_tokens,
            MALAY_MALE_MARKERS,
            MALAY_FEMALE_MARKERS,
            self._settings.malay_marker,
            "Malay/Indonesian patronymic 'bin' (son of) indicates male",
            "Malay/Indonesian patronymic 'binti' (daughter of) indicates female",
        )

    def _title_markers(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        for title in evidence.titles:
            value = TITLE_GENDERS.get(title)
            if value is None:
                continue
            if value == Gender.UNKNOWN.value:
                reason = f"Title '{title}' is gender-neutral"
            else:
                reason = f"Title '{title}' is gender-specific"
            return GenderInference(Gender(value), self._settings.title_marker, GenderSource.CULTURAL_MARKER, reason)
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Tier 2: given-name lists
    # ─────────────────────────────────────────────────────────────────────────

    def _fragment_lists(self, culture: Culture) -> Optional[Tuple[FrozenSet[str], FrozenSet[str], float, GenderSource]]:
        s = self._settings
        if culture is Culture.VIETNAMESE:
            return VIETNAMESE_MALE_NAMES, VIETNAMESE_FEMALE_NAMES, s.vietnamese_names, GenderSource.CULTURAL_MARKER
        if culture is Culture.ARABIC:
            return ARABIC_MALE_NAMES, ARABIC_FEMALE_NAMES, s.arabic_names, GenderSource.CULTURAL_MARKER
        if culture is Culture.INDONESIAN:
            return INDONESIAN_MALE_NAMES, INDONESIAN_FEMALE_NAMES, s.indonesian_names, GenderSource.CULTURAL_MARKER
        if culture is Culture.INDIAN:
            return INDIAN_MALE_NAMES, INDIAN_FEMALE_NAMES, s.indian_names, GenderSource.CULTURAL_MARKER
        if culture is Culture.CHINESE:
            return CHINESE_MALE_NAMES, CHINESE_FEMALE_NAMES, s.chinese_names, GenderSource.STATISTICAL
        return None

    def _given_name_fragments(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        culture = evidence.context.culture
        given = evidence.given_tokens()
        if not given:
            return None

        if culture is Culture.WESTERN:
            name = given[0]
            if name in WESTERN_MALE_NAMES:
                return GenderInference(
                    Gender.MALE, self._settings.western_names, GenderSource.STATISTICAL, "Common Western male name"
                )
            if name in WESTERN_FEMALE_NAMES:
                return GenderInference(
                    Gender.FEMALE, self._settings.western_names, GenderSource.STATISTICAL, "Common Western female name"
                )
            return None

        lists = self._fragment_lists(culture)
        if lists is None:
            return None
        male, female, confidence, source = lists
        male_length = _longest_fragment(given, male)
        female_length = _longest_fragment(given, female)
        # Equal-length evidence for both genders is no evidence
        if male_length == female_length:
            return None
        label = culture.value.capitalize()
        if male_length > female_length:
            return GenderInference(Gender.MALE, confidence, source, f"{label} given name element suggests male")
        return GenderInference(Gender.FEMALE, confidence, source, f"{label} given name element suggests female")

    def _japanese_endings(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        if evidence.context.culture is not Culture.JAPANESE:
            return None
        given = evidence.given_tokens()
        if not given:
            return None
        name = given[-1]
        if name.endswith(JAPANESE_FEMALE_ENDINGS):
            return GenderInference(
                Gender.FEMALE,
                self._settings.japanese_female_ending,
                GenderSource.CULTURAL_MARKER,
                "Japanese name ending suggests female",
            )
        if name.endswith(JAPANESE_MALE_ENDINGS):
            return GenderInference(
                Gender.MALE,
                self._settings.japanese_male_ending,
                GenderSource.CULTURAL_MARKER,
                "Japanese name ending suggests male",
            )
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Tier 3: terminal patterns
    # ─────────────────────────────────────────────────────────────────────────

    def _terminal_patterns(self, evidence: _NameEvidence) -> Optional[GenderInference]:
        if evidence.context.culture not in _PATTERN_CULTURES:
            return None
        given = evidence.given_tokens()
        if not given or len(given[0]) <= self._settings.pattern_min_length:
            return None
        name = given[0]
        if name.endswith(FEMALE_NAME_ENDINGS):
            return GenderInference(
                Gender.FEMALE,
                self._settings.female_pattern,
                GenderSource.STATISTICAL,
                "Name ending pattern suggests female",
            )
        if name.endswith(MALE_NAME_ENDINGS):
            return GenderInference(
                Gender.MALE, self._settings.male_pattern, GenderSource.STATISTICAL, "Name ending pattern suggests male"
            )
        return None


def infer_gender(
    original: str, transliterated: str, context: CulturalContext, settings: Optional[GenderSettings] = None
) -> GenderInference:
    """Infer gender with default or supplied settings."""
    return GenderInferencer(settings).infer(original, transliterated, context)
