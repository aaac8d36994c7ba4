"""
Culture-aware splitting of a transliterated name into its parts.

Parsing runs in a fixed sequence:

1. **Honorific stripping**: Japanese "-san", "-kun", ... are removed (Japanese only)
2. **Tokenization**: words split on whitespace and punctuation; apostrophes,
   hyphens and "?" placeholders stay inside a word
3. **Titles**: leading tokens matching the title vocabulary, canonicalized
4. **Suffixes**: trailing generational suffixes, canonicalized
5. **Split**: the remaining tokens go to exactly one strategy selected by culture
6. **Formatting**: `full_ascii` joins titles, name parts and suffixes

The culture itself is resolved by `resolve_cultural_context` from an explicit
hint, a locale, the script, or the diacritics of the original text, in that
order. Parsing never raises; empty input yields an empty structure.

```python
from namebridge.name_parser import NameParser, resolve_cultural_context

context = resolve_cultural_context("Nguyễn Văn Minh", culture="vietnamese")
NameParser().parse("Nguyễn Văn Minh", "Nguyen Van Minh", context).full_ascii
# 'NGUYEN Van Minh'
```
"""

from __future__ import annotations

import logging
import re
import unicodedata
from types import MappingProxyType
from typing import Callable, List, Optional, Sequence, Tuple, Union

from namebridge.models import Culture, CulturalContext, LanguageHint, NameOrder, NameStructure, Script
from namebridge.name_data import (
    CULTURE_ALIASES,
    JAPANESE_HONORIFICS,
    LINKING_WORDS,
    LOCALE_LANGUAGE_CULTURES,
    MALAY_PATRONYMIC_MARKERS,
    NOBILIARY_PARTICLES,
    SUFFIX_VARIANTS,
    TITLE_VARIANTS,
    VIETNAMESE_DIACRITIC_MARKERS,
)

# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

# A word is letters/digits or "?" placeholders, optionally joined by ' ’ or -.
# Apostrophes at either end stay: they spell sounds such as Arabic ayn.
_WORD_CHARS = r"(?:[^\W_]|\?)+"
_TOKEN_PATTERN = re.compile(rf"['’]*{_WORD_CHARS}(?:['’\-]{_WORD_CHARS})*['’]*")

_HONORIFICS = "|".join(JAPANESE_HONORIFICS)
_HONORIFIC_PATTERN = re.compile(rf"-(?:{_HONORIFICS})\b|\s+(?:{_HONORIFICS})\s*$", re.IGNORECASE)


# ════════════════════════════════════════════════════════════════════════════════
# TOKENIZATION
# ════════════════════════════════════════════════════════════════════════════════


def tokenize(text: str) -> List[str]:
    """Split text into name tokens."""
    if not text:
        return []
    return _TOKEN_PATTERN.findall(unicodedata.normalize("NFC", text))


def strip_honorifics(text: str) -> str:
    """Remove Japanese honorifics, hyphenated ("Tanaka-san") or trailing ("Tanaka san")."""
    return _HONORIFIC_PATTERN.sub("", text).strip()


def extract_titles(tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split leading title tokens from the rest.

    Matching is whole-token and case-insensitive. At least one token is always
    left for the name itself.

    Returns:
        Tuple of (canonical titles, remaining tokens)
    """
    titles: List[str] = []
    index = 0
    while index < len(tokens) - 1:
        title = TITLE_VARIANTS.get(tokens[index].lower())
        if title is None:
            break
        titles.append(title)
        index += 1
    return titles, list(tokens[index:])


def extract_suffixes(tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split trailing suffix tokens (Jr, III, ...) from the rest.

    Scanning stops at the first non-suffix token and never consumes the last
    remaining name token.

    Returns:
        Tuple of (canonical suffixes in input order, remaining tokens)
    """
    suffixes: List[str] = []
    end = len(tokens)
    while end > 1:
        suffix = SUFFIX_VARIANTS.get(tokens[end - 1].lower())
        if suffix is None:
            break
        suffixes.insert(0, suffix)
        end -= 1
    return suffixes, list(tokens[:end])


def capitalize_name_part(part: str) -> str:
    """Capitalize the first letter only, so "ts'ai" becomes "Ts'ai" and not "Ts'Ai".

    Hyphenated parts are capitalized piecewise: "jean-pierre" -> "Jean-Pierre".
    Leading apostrophes are kept and the letter after them is capitalized.
    """
    if not part:
        return part
    return "-".join(_capitalize_piece(piece) for piece in part.split("-"))


def _capitalize_piece(piece: str) -> str:
    body = piece.lstrip("'’")
    lead = piece[: len(piece) - len(body)]
    return lead + body[:1].upper() + body[1:].lower()


def _linking_or_capitalized(token: str) -> str:
    lowered = token.lower()
    if lowered in LINKING_WORDS:
        return lowered
    return capitalize_name_part(token)


# ════════════════════════════════════════════════════════════════════════════════
# CULTURAL CONTEXT
# ════════════════════════════════════════════════════════════════════════════════

# culture -> (name order, has gender markers, has patronymics, particle prefix)
_CULTURE_PROFILES = MappingProxyType(
    {
        Culture.WESTERN: (NameOrder.GIVEN_FIRST, False, False, True),
        Culture.VIETNAMESE: (NameOrder.FAMILY_FIRST, True, False, False),
        Culture.CHINESE: (NameOrder.FAMILY_FIRST, False, False, False),
        Culture.JAPANESE: (NameOrder.FAMILY_FIRST, False, False, False),
        Culture.KOREAN: (NameOrder.FAMILY_FIRST, False, False, False),
        Culture.ARABIC: (NameOrder.GIVEN_FIRST, False, True, False),
        Culture.INDONESIAN: (NameOrder.GIVEN_FIRST, False, True, False),
        Culture.INDIAN: (NameOrder.GIVEN_FIRST, False, False, True),
        Culture.THAI: (NameOrder.GIVEN_FIRST, False, False, False),
    }
)

_SCRIPT_CULTURES = MappingProxyType(
    {
        Script.VIETNAMESE: Culture.VIETNAMESE,
        Script.CHINESE: Culture.CHINESE,
        Script.JAPANESE: Culture.JAPANESE,
        Script.KOREAN: Culture.KOREAN,
        Script.ARABIC: Culture.ARABIC,
        Script.THAI: Culture.THAI,
        Script.INDONESIAN: Culture.INDONESIAN,
    }
)


def context_for(culture: Culture, resolved_from: str = "culture_hint") -> CulturalContext:
    """Build the CulturalContext of a known culture."""
    order, has_gender_markers, has_patronymics, particle_prefix = _CULTURE_PROFILES[culture]
    return CulturalContext(
        culture=culture,
        name_order=order,
        has_gender_markers=has_gender_markers,
        has_patronymics=has_patronymics,
        particle_prefix=particle_prefix,
        resolved_from=resolved_from,
    )


def _culture_from_hint(culture: Union[str, Culture, None]) -> Optional[Culture]:
    if culture is None:
        return None
    if isinstance(culture, Culture):
        return culture
    key = culture.strip().lower()
    key = CULTURE_ALIASES.get(key, key)
    try:
        return Culture(key)
    except ValueError:
        logging.warning(f"Ignoring unknown culture hint '{culture}'")
        return None


def _culture_from_locale(locale: Optional[str]) -> Optional[Culture]:
    if not locale:
        return None
    language = re.split(r"[-_]", locale.strip().lower(), maxsplit=1)[0]
    culture = LOCALE_LANGUAGE_CULTURES.get(language)
    return Culture(culture) if culture is not None else None


def _culture_from_script(script: Union[str, Script, None]) -> Optional[Culture]:
    if script is None:
        return None
    try:
        return _SCRIPT_CULTURES.get(Script(script))
    except ValueError:
        return None


def looks_vietnamese(text: str) -> bool:
    """Two or more distinct Vietnamese diacritic markers in the text."""
    lowered = unicodedata.normalize("NFC", text).lower()
    return sum(1 for marker in VIETNAMESE_DIACRITIC_MARKERS if marker in lowered) >= 2


def resolve_cultural_context(
    original: str,
    culture: Union[str, Culture, None] = None,
    locale: Optional[str] = None,
    script: Union[str, Script, None] = None,
    language: Union[str, LanguageHint, None] = None,
) -> CulturalContext:
    """
    Resolve the naming convention for a name.

    Priority: explicit culture hint, then the locale's language, then the
    language detected from the letters of the name, then the script, then the
    Vietnamese diacritic heuristic over `original`, and finally western.
    """
    resolved = _culture_from_hint(culture)
    if resolved is not None:
        return context_for(resolved, "culture_hint")

    resolved = _culture_from_locale(locale)
    if resolved is not None:
        return context_for(resolved, "locale")

    if isinstance(language, LanguageHint):
        language = language.language
    resolved = _culture_from_locale(language)
    if resolved is not None:
        return context_for(resolved, "language")

    resolved = _culture_from_script(script)
    if resolved is not None:
        return context_for(resolved, "script")

    if original and looks_vietnamese(original):
        return context_for(Culture.VIETNAMESE, "diacritics")

    return context_for(Culture.WESTERN, "default")


# ════════════════════════════════════════════════════════════════════════════════
# SPLIT STRATEGIES
# ════════════════════════════════════════════════════════════════════════════════

# (family, first, middle, particles)
SplitResult = Tuple[str, str, Tuple[str, ...], Tuple[str, ...]]
_EMPTY_SPLIT: SplitResult = ("", "", (), ())


def split_western(tokens: Sequence[str]) -> SplitResult:
    """
    Given name first, family name last.

    Particles in the run directly before the last token join the family name
    ("van Beethoven" -> "VAN BEETHOVEN") and are listed in `particles`; other
    particles stay in the middle names, lowercase.
    """
    if not tokens:
        return _EMPTY_SPLIT
    if len(tokens) == 1:
        return "", capitalize_name_part(tokens[0]), (), ()

    run_start = len(tokens) - 1
    while run_start > 1 and tokens[run_start - 1].lower() in NOBILIARY_PARTICLES:
        run_start -= 1

    particles = tuple(token.lower() for token in tokens[run_start:-1])
    family = " ".join(list(particles) + [tokens[-1]]).upper()
    middle = tuple(_linking_or_capitalized(token) for token in tokens[1:run_start])
    return family, capitalize_name_part(tokens[0]), middle, particles


def split_family_first(tokens: Sequence[str]) -> SplitResult:
    """
    Family name first, given name last, anything between is a middle name.

    Used for Vietnamese (where "Van"/"Thi" are kept as middle names) and for
    Chinese, Japanese and Korean names.
    """
    if not tokens:
        return _EMPTY_SPLIT
    if len(tokens) == 1:
        return "", capitalize_name_part(tokens[0]), (), ()
    middle = tuple(capitalize_name_part(token) for token in tokens[1:-1])
    return tokens[0].upper(), capitalize_name_part(tokens[-1]), middle, ()


def split_arabic(tokens: Sequence[str]) -> SplitResult:
    """Given name first, family last; patronymic chains stay literal in the middle."""
    if not tokens:
        return _EMPTY_SPLIT
    if len(tokens) == 1:
        return "", capitalize_name_part(tokens[0]), (), ()
    middle = tuple(_linking_or_capitalized(token) for token in tokens[1:-1])
    return tokens[-1].upper(), capitalize_name_part(tokens[0]), middle, ()


def split_indonesian(tokens: Sequence[str]) -> SplitResult:
    """Mononym, patronymic (X bin Y, no family name) or given + family."""
    if not tokens:
        return _EMPTY_SPLIT
    if len(tokens) == 1:
        return "", capitalize_name_part(tokens[0]), (), ()
    if any(token.lower() in MALAY_PATRONYMIC_MARKERS for token in tokens):
        middle = tuple(_linking_or_capitalized(token) for token in tokens[1:])
        return "", capitalize_name_part(tokens[0]), middle, ()
    middle = tuple(_linking_or_capitalized(token) for token in tokens[1:-1])
    return tokens[-1].upper(), capitalize_name_part(tokens[0]), middle, ()


SPLIT_STRATEGIES: "MappingProxyType[Culture, Callable[[Sequence[str]], SplitResult]]" = MappingProxyType(
    {
        Culture.WESTERN: split_western,
        Culture.VIETNAMESE: split_family_first,
        Culture.CHINESE: split_family_first,
        Culture.JAPANESE: split_family_first,
        Culture.KOREAN: split_family_first,
        Culture.ARABIC: split_arabic,
        Culture.INDONESIAN: split_indonesian,
        Culture.INDIAN: split_western,
        Culture.THAI: split_western,
    }
)

_missing_strategies = set(Culture) - set(SPLIT_STRATEGIES)
if _missing_strategies:
    raise ValueError(f"No split strategy for cultures: {sorted(c.value for c in _missing_strategies)}")
_missing_profiles = set(Culture) - set(_CULTURE_PROFILES)
if _missing_profiles:
    raise ValueError(f"No naming profile for cultures: {sorted(c.value for c in _missing_profiles)}")


# ════════════════════════════════════════════════════════════════════════════════
# PARSER
# ════════════════════════════════════════════════════════════════════════════════


def format_full_name(
    titles: Sequence[str],
    family: str,
    first: str,
    middle: Sequence[str],
    suffixes: Sequence[str],
    order: NameOrder,
) -> str:
    """Join the parts of a name in display order."""
    if order is NameOrder.FAMILY_FIRST:
        name_parts = [family, *middle, first]
    else:
        name_parts = [first, *middle, family]
    return " ".join(part for part in [*titles, *name_parts, *suffixes] if part)


class NameParser:
    """Splits transliterated names according to a CulturalContext. Stateless."""

    def name_tokens(self, transliterated: str, context: CulturalContext) -> Tuple[List[str], List[str], List[str]]:
        """
        Tokenize and peel off titles and suffixes.

        Returns:
            Tuple of (titles, name tokens, suffixes)
        """
        if context.culture is Culture.JAPANESE:
            transliterated = strip_honorifics(transliterated)
        titles, rest = extract_titles(tokenize(transliterated))
        suffixes, rest = extract_suffixes(rest)
        return titles, rest, suffixes

    def parse(self, original: str, transliterated: str, context: CulturalContext) -> NameStructure:
        if not transliterated or not transliterated.strip():
            return NameStructure.empty(context.name_order)

        titles, tokens, suffixes = self.name_tokens(transliterated, context)
        if not tokens:
            return NameStructure.empty(context.name_order)

        family, first, middle, particles = SPLIT_STRATEGIES[context.culture](tokens)
        logging.debug(f"Parsed {transliterated!r} as {context.culture.value}: {family!r} / {first!r} / {middle!r}")

        return NameStructure(
            family=family,
            first=first,
            middle=middle,
            titles=tuple(titles),
            suffixes=tuple(suffixes),
            particles=particles,
            full_ascii=format_full_name(titles, family, first, middle, suffixes, context.name_order),
            order=context.name_order,
        )


def parse_name(
    original: str,
    transliterated: str,
    culture: Union[str, Culture, None] = None,
    locale: Optional[str] = None,
    script: Union[str, Script, None] = None,
) -> NameStructure:
    """Resolve the cultural context and parse in one call."""
    context = resolve_cultural_context(original, culture=culture, locale=locale, script=script)
    return NameParser().parse(original, transliterated, context)
