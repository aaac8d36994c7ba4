import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namebridge
sys.path.insert(0, str(Path(__file__).parent.parent))

from namebridge.config import NameBridgeConfig
from namebridge.models import Script
from namebridge.script_detection import (
    CYRILLIC,
    GERMAN,
    HAN,
    VIETNAMESE,
    ScriptDetector,
    classify_char,
    contains_script,
    detect_script,
    detect_language,
    script_of_char,
)

# (text, expected script, expected confidence)
DETECTION_CASES = [
    ("Привет", Script.CYRILLIC, 0.95),
    ("Nguyễn Văn Minh", Script.VIETNAMESE, 0.95),
    ("Jürgen Groß", Script.GERMAN, 0.95),
    ("John Smith", Script.LATIN, 0.95),
    ("李小龍", Script.CHINESE, 0.95),
    ("田中さん", Script.JAPANESE, 0.95),
    ("たなか", Script.JAPANESE, 0.95),
    ("김민수", Script.KOREAN, 0.95),
    ("محمد", Script.ARABIC, 0.95),
    ("Αθήνα", Script.GREEK, 0.95),
    ("שלום", Script.HEBREW, 0.95),
    ("สมชาย", Script.THAI, 0.95),
    ("Hello мир", Script.LATIN, 0.85),
]

# (text, expected language, expected confidence, expected indicators)
LANGUAGE_CASES = [
    ("Nguyễn Văn Minh", "vi", 0.85, ("vietnamese_diacritics",)),
    ("Jürgen Groß", "de", 0.80, ("german_umlauts",)),
    ("Maria del Carmen Núñez", "es", 0.75, ("spanish_characters",)),
    ("José María", "es", 0.75, ("spanish_characters",)),
    ("李小龍", "zh-TW", 0.80, ("traditional_characters",)),
    ("王伟", "zh-CN", 0.75, ("simplified_characters",)),
    ("田中さん", "ja", 0.90, ("hiragana_katakana",)),
    ("Горбачёв", "ru", 0.80, ("russian_patterns",)),
    ("Привет", "ru", 0.60, ("cyrillic_script",)),
    ("محمد", "ar", 0.75, ("arabic_script",)),
    ("Αθήνα", "el", 0.90, ("greek_script",)),
    ("John Smith", "unknown", 0.1, ()),
    ("Rafael Manuel", "unknown", 0.1, ()),
    ("김민수", "unknown", 0.1, ()),
    ("", "unknown", 0.1, ()),
]

# Inputs with no letters at all
NO_LETTER_CASES = ["", "123", "  ", "--!?", "٣٤"]


@pytest.fixture(scope="session")
def detector():
    return ScriptDetector()


def test_detection_cases(detector):
    for text, expected_script, expected_confidence in DETECTION_CASES:
        result = detector.detect(text)
        assert result.script is expected_script, f"For '{text}': expected {expected_script}, got {result.script}"
        assert result.confidence == pytest.approx(
            expected_confidence
        ), f"For '{text}': expected confidence {expected_confidence}, got {result.confidence}"


def test_no_letters_is_unknown(detector):
    for text in NO_LETTER_CASES:
        result = detector.detect(text)
        assert result.script is Script.UNKNOWN, f"For '{text}': expected unknown, got {result.script}"
        assert result.confidence == 0.0, f"For '{text}': expected 0.0, got {result.confidence}"


def test_confidence_is_bounded(detector):
    texts = [text for text, _, _ in DETECTION_CASES] + NO_LETTER_CASES + ["абвαβγאבג", "abАБВαβγ", "ᚠᚢᚦ x"]
    for text in texts:
        confidence = detector.detect(text).confidence
        assert 0.0 <= confidence <= 1.0, f"For '{text}': confidence {confidence} out of range"


def test_counts_per_bucket(detector):
    result = detector.detect("Hello мир")
    assert result.counts == {"latin": 5, "cyrillic": 3}


def test_single_vietnamese_mark_stays_latin(detector):
    assert detector.detect("Đoàn").script is Script.LATIN
    assert detector.detect("Café").script is Script.LATIN


def test_vietnamese_wins_over_german(detector):
    assert detector.detect("Nguyễn Văn Müller").script is Script.VIETNAMESE


def test_tie_breaks_by_priority_and_reports_raw_ratio(detector):
    # Three scripts with three letters each; Cyrillic comes first
    result = detector.detect("абвαβγאבג")
    assert result.script is Script.CYRILLIC
    assert result.confidence == pytest.approx(1 / 3)


def test_low_ratio_with_latin_uses_latin_default(detector):
    # Cyrillic dominates with 3 of 8 letters, but Latin letters are present
    result = detector.detect("abАБВαβγ")
    assert result.script is Script.CYRILLIC
    assert result.confidence == pytest.approx(0.60)


def test_stepped_confidence(detector):
    # Greek 4 of 7 letters
    result = detector.detect("абвαβγδ")
    assert result.script is Script.GREEK
    assert result.confidence == pytest.approx(0.70)


def test_han_with_kana_is_japanese(detector):
    result = detector.detect("山田太郎です")
    assert result.script is Script.JAPANESE
    assert result.counts[HAN] == 4


def test_counts_are_not_shared(detector):
    first = detector.detect("Привет")
    second = detector.detect("Привет")
    assert first.counts == second.counts
    assert first.counts is not second.counts


def test_configurable_thresholds():
    config = NameBridgeConfig.create_default().with_detection(latin_default_confidence=0.5, vietnamese_min_marks=1)
    assert detect_script("abАБВαβγ", config).confidence == pytest.approx(0.5)
    assert detect_script("Đoàn", config).script is Script.VIETNAMESE


def test_classify_char():
    assert classify_char("ễ") == VIETNAMESE
    assert classify_char("Ă") == VIETNAMESE
    assert classify_char("ß") == GERMAN
    assert classify_char("ж") == CYRILLIC
    assert classify_char("李") == HAN


def test_script_of_char_collapses_latin_variants():
    assert script_of_char("ß") is Script.LATIN
    assert script_of_char("ễ") is Script.LATIN
    assert script_of_char("м") is Script.CYRILLIC
    assert script_of_char("ᚠ") is Script.UNKNOWN


def test_contains_script():
    assert contains_script("Hello мир", CYRILLIC)
    assert not contains_script("Hello", CYRILLIC)


def test_to_dict():
    assert detect_script("Привет").to_dict() == {"script": "cyrillic", "confidence": 0.95}


def test_unclassified_letters_have_no_confidence(detector):
    result = detector.detect("ᚠᚢᚦ")
    assert result.script is Script.UNKNOWN
    assert result.confidence == 0.0
    assert result.counts == {"unknown": 3}

    result = detector.detect("ᚠᚢᚦ x")
    assert result.script is Script.UNKNOWN
    assert result.confidence == 0.0


# ════════════════════════════════════════════════════════════════════════════════
# LANGUAGE HINTS
# ════════════════════════════════════════════════════════════════════════════════


def test_language_cases(detector):
    for text, language, confidence, indicators in LANGUAGE_CASES:
        hint = detector.detect_language(text)
        result = (hint.language, hint.confidence, hint.indicators)
        assert result[0] == language, f"For '{text}': expected {language}, got {result}"
        assert result[1] == pytest.approx(confidence), f"For '{text}': expected {confidence}, got {result}"
        assert result[2] == indicators, f"For '{text}': expected {indicators}, got {result}"


def test_language_follows_given_detection(detector):
    # A caller-supplied detection is trusted over the letters
    detection = detector.detect("Привет")
    assert detector.detect_language("John", detection).language == "ru"


def test_language_confidences_are_configurable():
    config = NameBridgeConfig.create_default().with_detection(greek_language=0.5, unknown_language=0.2)
    assert detect_language("Αθήνα", config=config).confidence == pytest.approx(0.5)
    assert detect_language("김민수", config=config).confidence == pytest.approx(0.2)


def test_language_to_dict():
    assert detect_language("李小龍").to_dict() == {
        "language": "zh-TW",
        "confidence": 0.80,
        "indicators": ["traditional_characters"],
    }
