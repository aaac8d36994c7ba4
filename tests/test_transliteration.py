import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namebridge
sys.path.insert(0, str(Path(__file__).parent.parent))

from namebridge.config import ScoringSettings, TransliterationSettings
from namebridge.errors import InvalidEncoding, InvalidInput, UnsupportedScript
from namebridge.models import Script
from namebridge.transliteration import (
    Transliterator,
    builtin_reading,
    is_valid_for_target,
    score_transliteration,
    validate_output,
)

# (text, source, target, expected output)
TRANSLITERATION_CASES = [
    ("Привет", "cyrillic", "latin", "Privet"),
    ("Привет", "cyrillic", "ascii", "Privet"),
    ("Αθήνα", "greek", "ascii", "Athina"),
    ("محمد", "arabic", "ascii", "mhmd"),
    ("שלום", "hebrew", "ascii", "shlvm"),
    ("たなか", "japanese", "ascii", "tanaka"),
    ("你好", "chinese", "ascii", "ni hao"),
    ("李小龍", "chinese", "ascii", "Li Xiao Long"),
    ("한국", "korean", "ascii", "Han Guk"),
    ("김", "korean", "ascii", "Gim"),
    ("Jürgen Groß", "german", "ascii", "Jurgen Gross"),
    ("Jürgen Groß", "german", "latin", "Jürgen Groß"),
    ("Nguyễn Văn Minh", "vietnamese", "ascii", "Nguyen Van Minh"),
    ("Łukasz Søren", "latin", "ascii", "Lukasz Soren"),
    ("Hello мир", "latin", "ascii", "Hello mir"),
]

# Already-ASCII input is returned unchanged
ASCII_FIXED_POINTS = [
    "John Smith",
    "Jean-Pierre O'Neil, Jr.",
    "Dr. A. B. Smith III",
    "x_y 123 !?",
]

ASCII_OUTPUT_INPUTS = [
    ("Привет мир", "cyrillic"),
    ("Ελληνικά", "greek"),
    ("عبد الله", "arabic"),
    ("ᚠᚢᚦ", "latin"),
    ("“Zoë” — née Brontë…", "latin"),
    ("田中 太郎", "japanese"),
    ("蔡英文", "chinese"),
    ("☃ snow", "latin"),
]


@pytest.fixture(scope="session")
def transliterator():
    return Transliterator()


def test_transliteration_cases(transliterator):
    for text, source, target, expected in TRANSLITERATION_CASES:
        result = transliterator.transliterate(text, source, target)
        assert result.output == expected, f"For '{text}' ({source}->{target}): expected '{expected}', got '{result.output}'"


def test_ascii_is_fixed_point(transliterator):
    for text in ASCII_FIXED_POINTS:
        result = transliterator.transliterate(text, "ascii", "ascii")
        assert result.output == text, f"Expected '{text}' unchanged, got '{result.output}'"


def test_ascii_target_output_is_seven_bit(transliterator):
    for text, source in ASCII_OUTPUT_INPUTS:
        output = transliterator.transliterate(text, source, "ascii").output
        assert all(ord(char) < 128 for char in output), f"For '{text}': non-ASCII output '{output}'"


def test_empty_input(transliterator):
    result = transliterator.transliterate("", "latin")
    assert result.output == ""
    assert result.confidence == 1.0
    assert result.notes == ()


def test_builtin_table_weight(transliterator):
    assert transliterator.transliterate("Привет", "cyrillic").confidence == pytest.approx(0.85)


def test_decomposition_weight(transliterator):
    result = transliterator.transliterate("é", "latin", "ascii")
    assert result.output == "e"
    assert result.confidence == pytest.approx(0.3)


def test_confidence_is_mean_weight(transliterator):
    # "A" from the built-in tier, "é" from decomposition
    assert transliterator.transliterate("Aé", "latin", "ascii").confidence == pytest.approx((0.85 + 0.3) / 2)


def test_latin_target_keeps_latin_letters(transliterator):
    result = transliterator.transliterate("é", "latin", "latin")
    assert result.output == "é"
    assert result.confidence == pytest.approx(0.85)


def test_unknown_letter_becomes_placeholder(transliterator):
    result = transliterator.transliterate("ᚠᚠ", "latin")
    assert result.output == "??"
    assert result.confidence == pytest.approx(0.1)
    assert result.notes == ("Unknown character 'ᚠ' approximated",)


def test_unknown_digit_becomes_zero(transliterator):
    result = transliterator.transliterate("३", "latin")
    assert result.output == "0"
    assert result.notes == ("Digit '३' approximated",)


def test_arabic_indic_digits_from_table(transliterator):
    assert transliterator.transliterate("٣", "arabic").output == "3"


def test_punctuation_normalization(transliterator):
    assert transliterator.transliterate("«Anna»", "latin").output == '"Anna"'
    assert transliterator.transliterate("A—B", "latin").output == "A-B"
    result = transliterator.transliterate("A※", "latin")
    assert result.output == "A."
    assert result.notes == ("Punctuation '※' normalized",)


def test_symbols_are_dropped(transliterator):
    result = transliterator.transliterate("A☃", "latin")
    assert result.output == "A"
    assert result.notes == ("Character '☃' dropped",)


def test_kanji_read_as_pinyin_is_noted(transliterator):
    result = transliterator.transliterate("中", "japanese")
    assert result.output == "Zhong"
    assert result.notes == ("Kanji 中 read as Mandarin pinyin",)


def test_han_outside_vocabulary_uses_pinyin(transliterator):
    result = transliterator.transliterate("蔡", "chinese")
    assert result.output == "Cai"
    assert result.confidence == pytest.approx(0.85)


def test_half_width_katakana(transliterator):
    assert transliterator.transliterate("ﾀﾅｶ", "japanese").output == "tanaka"


def test_source_script_label_is_parsed(transliterator):
    assert transliterator.transliterate("Привет", Script.CYRILLIC, Script.LATIN).output == "Privet"
    assert transliterator.transliterate("Привет", " Cyrillic ", "ASCII").output == "Privet"


def test_invalid_arguments(transliterator):
    with pytest.raises(InvalidInput):
        transliterator.transliterate(None, "latin")
    with pytest.raises(UnsupportedScript):
        transliterator.transliterate("abc", "klingon")
    with pytest.raises(UnsupportedScript):
        transliterator.transliterate("abc", "unknown")
    with pytest.raises(UnsupportedScript):
        transliterator.transliterate("abc", "latin", "cyrillic")


# ════════════════════════════════════════════════════════════════════════════════
# DICTIONARY LOOKUP
# ════════════════════════════════════════════════════════════════════════════════


def test_lookup_takes_precedence():
    calls = []

    def lookup(char, source, target, locale):
        calls.append((char, source, target, locale))
        if char == "ж":
            return "j", True
        return "", False

    result = Transliterator(lookup=lookup).transliterate("жа", "cyrillic", "ascii", "fr-FR")
    assert result.output == "ja"
    assert result.confidence == pytest.approx((0.95 + 0.85) / 2)
    assert calls[0] == ("ж", "cyrillic", "ascii", "fr-FR")


def test_lookup_not_found_falls_through():
    result = Transliterator(lookup=lambda *args: ("ignored", False)).transliterate("ж", "cyrillic")
    assert result.output == "zh"


def test_lookup_invalid_mapping_is_discarded():
    result = Transliterator(lookup=lambda *args: ("ž", True)).transliterate("ж", "cyrillic", "ascii")
    assert result.output == "zh"
    assert result.confidence == pytest.approx(0.85)


def test_lookup_errors_propagate():
    def lookup(char, source, target, locale):
        raise RuntimeError("dictionary unavailable")

    with pytest.raises(RuntimeError, match="dictionary unavailable"):
        Transliterator(lookup=lookup).transliterate("ж", "cyrillic")


def test_custom_tier_weights():
    settings = TransliterationSettings(builtin_weight=0.5)
    assert Transliterator(settings).transliterate("Привет", "cyrillic").confidence == pytest.approx(0.5)


# ════════════════════════════════════════════════════════════════════════════════
# HELPERS
# ════════════════════════════════════════════════════════════════════════════════


def test_validate_output():
    assert validate_output("Privet", Script.ASCII) == "Privet"
    assert validate_output("Jürgen", Script.LATIN) == "Jürgen"
    with pytest.raises(InvalidEncoding):
        validate_output("Jürgen", Script.ASCII)
    with pytest.raises(InvalidEncoding):
        validate_output("\ud800", Script.LATIN)


def test_is_valid_for_target():
    assert is_valid_for_target("abc", Script.ASCII)
    assert not is_valid_for_target("é", Script.ASCII)
    assert is_valid_for_target("é", Script.LATIN)
    assert not is_valid_for_target("ж", Script.LATIN)


def test_builtin_reading():
    assert builtin_reading("ж", Script.CYRILLIC) == "zh"
    assert builtin_reading("ж", Script.GREEK) is None
    assert builtin_reading("ß", Script.GERMAN) == "ss"
    assert builtin_reading("ᚠ", Script.UNKNOWN) is None


# ════════════════════════════════════════════════════════════════════════════════
# CONFIDENCE SCORER
# ════════════════════════════════════════════════════════════════════════════════

# (input, output, source, target, expected score)
SCORING_CASES = [
    ("Привет", "Privet", "cyrillic", "latin", 0.9),
    ("John", "John", "latin", "ascii", 1.0),
    ("Jürgen", "Jurgen", "german", "ascii", 1.0),
    ("你好", "ni hao", "chinese", "ascii", 0.6),
    ("abc", "", "latin", "ascii", 0.6),
    ("", "", "latin", "ascii", 0.8),
]


def test_scoring_cases():
    for input_text, output_text, source, target, expected in SCORING_CASES:
        score = score_transliteration(input_text, output_text, source, target)
        assert score == pytest.approx(expected), f"For '{input_text}' -> '{output_text}': expected {expected}, got {score}"


def test_score_is_clamped():
    settings = ScoringSettings(base=0.0)
    assert score_transliteration("ᚠ", "", Script.UNKNOWN, Script.ASCII, settings) == pytest.approx(0.1)
    settings = ScoringSettings(base=0.9)
    assert score_transliteration("John", "John", "latin", "ascii", settings) == pytest.approx(1.0)


def test_score_counts_code_points():
    # Two Han characters that become six ASCII characters fall outside both ratio ranges
    assert score_transliteration("李龍", "LiLong", "chinese", "ascii") == pytest.approx(0.6)


def test_kana_after_kanji_starts_a_new_word(transliterator):
    assert transliterator.transliterate("田中さん", "japanese").output == "Tian Zhong san"
    assert transliterator.transliterate("山田はなこ", "japanese").output == "Shan Tian hanako"
    assert transliterator.transliterate("やまだ・はなこ", "japanese").output == "yamada hanako"


def test_inverted_and_full_width_question_marks_are_dropped(transliterator):
    for text, source in [("¿Juan", "latin"), ("王？", "chinese"), ("محمد؟", "arabic")]:
        output = transliterator.transliterate(text, source).output
        assert "?" not in output, f"For '{text}': got '{output}'"
    assert transliterator.transliterate("¿Juan", "latin").output == "Juan"
    assert transliterator.transliterate("محمد؟", "arabic").output == "mhmd"
