# ═════════════════════════════════════════════════════════════════════════════════
# NAME VOCABULARIES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Closed word lists used by the name parser and the gender inferencer:
#
# 1. TITLES / SUFFIXES: surface forms mapped to one canonical spelling
# 2. LINKING WORDS: nobiliary particles and patronymic markers
# 3. CULTURE RESOLUTION: hint aliases, locale languages, diacritic markers
# 4. GENDER EVIDENCE: structural markers, given-name fragments, endings
#
# All keys are lowercase. Tables are validated at import and frozen.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# ─────────────────────────────────────────────────────────────────────────────────
# TITLES AND SUFFIXES
# ─────────────────────────────────────────────────────────────────────────────────

CANONICAL_TITLES = frozenset({"DR", "PROF", "MR", "MRS", "MS", "MISS", "MX", "SIR", "DAME", "LORD", "LADY", "HON", "REV"})

TITLE_VARIANTS = {
    # English
    "dr": "DR",
    "doctor": "DR",
    "prof": "PROF",
    "professor": "PROF",
    "mr": "MR",
    "mister": "MR",
    "mrs": "MRS",
    "ms": "MS",
    "miss": "MISS",
    "mx": "MX",
    "sir": "SIR",
    "dame": "DAME",
    "lord": "LORD",
    "lady": "LADY",
    "hon": "HON",
    "honourable": "HON",
    "honorable": "HON",
    "rev": "REV",
    "reverend": "REV",
    # German
    "herr": "MR",
    "frau": "MRS",
    "fraulein": "MS",
    "fräulein": "MS",
    "doktor": "DR",
    # Spanish
    "dra": "DR",
    "señor": "MR",
    "senor": "MR",
    "señora": "MRS",
    "senora": "MRS",
    "señorita": "MS",
    "senorita": "MS",
    # French
    "monsieur": "MR",
    "madame": "MRS",
    "mme": "MRS",
    "mademoiselle": "MS",
    "mlle": "MS",
    "professeur": "PROF",
}

# Canonical title -> "M", "F" or "X"
TITLE_GENDERS = {
    "MR": "M",
    "SIR": "M",
    "LORD": "M",
    "MRS": "F",
    "MS": "F",
    "MISS": "F",
    "LADY": "F",
    "DAME": "F",
    "MX": "X",
}

SUFFIX_VARIANTS = {
    "jr": "Jr",
    "junior": "Jr",
    "sr": "Sr",
    "senior": "Sr",
    "ii": "II",
    "iii": "III",
    "iv": "IV",
    "v": "V",
    "2nd": "II",
    "3rd": "III",
    "4th": "IV",
    "5th": "V",
    "phd": "PhD",
    "md": "MD",
    "esq": "Esq",
}

JAPANESE_HONORIFICS = ("san", "kun", "chan", "sama", "sensei", "senpai")

# ─────────────────────────────────────────────────────────────────────────────────
# LINKING WORDS
# ─────────────────────────────────────────────────────────────────────────────────

NOBILIARY_PARTICLES = frozenset(
    {
        "de",
        "del",
        "della",
        "di",
        "da",
        "van",
        "von",
        "der",
        "den",
        "ter",
        "le",
        "la",
        "du",
        "des",
        "al",
        "el",
    }
)

# Latin spellings plus the consonant skeletons left by romanizing Arabic script
PATRONYMIC_MARKERS = frozenset({"bin", "binti", "binte", "ibn", "bint", "bn", "abn", "bnt"})

# Kept lowercase wherever they appear in a given-first name
LINKING_WORDS = NOBILIARY_PARTICLES | PATRONYMIC_MARKERS

# Malay/Indonesian markers that switch to the patronymic split
MALAY_PATRONYMIC_MARKERS = frozenset({"bin", "binti", "binte"})

# ─────────────────────────────────────────────────────────────────────────────────
# CULTURE RESOLUTION
# ─────────────────────────────────────────────────────────────────────────────────

CULTURE_ALIASES = {
    "malaysian": "indonesian",
    "malay": "indonesian",
}

# ISO 639-1 language -> culture
LOCALE_LANGUAGE_CULTURES = {
    "vi": "vietnamese",
    "zh": "chinese",
    "ja": "japanese",
    "ko": "korean",
    "ar": "arabic",
    "id": "indonesian",
    "ms": "indonesian",
    "hi": "indian",
    "ta": "indian",
    "te": "indian",
    "bn": "indian",
    "th": "thai",
}

# Substrings of the lowercased original; two or more distinct hits mean Vietnamese
VIETNAMESE_DIACRITIC_MARKERS = ("ă", "â", "đ", "ê", "ô", "ơ", "ư", "thị", "văn")

# ─────────────────────────────────────────────────────────────────────────────────
# GENDER EVIDENCE
# ─────────────────────────────────────────────────────────────────────────────────

# Whole-token structural markers
VIETNAMESE_MALE_MARKERS = frozenset({"văn", "van"})
VIETNAMESE_FEMALE_MARKERS = frozenset({"thị", "thi"})
# Latin, romanized and Arabic-script forms
ARABIC_MALE_MARKERS = frozenset({"bin", "ibn", "bn", "abn", "بن", "ابن"})
ARABIC_FEMALE_MARKERS = frozenset({"bint", "binte", "bnt", "بنت"})
MALAY_MALE_MARKERS = frozenset({"bin"})
MALAY_FEMALE_MARKERS = frozenset({"binti", "binte"})

# Given-name fragments matched as substrings, longest match wins
VIETNAMESE_MALE_NAMES = frozenset({"minh", "duc", "hoang", "quang", "thanh", "tuan", "hung", "dung", "phong"})
VIETNAMESE_FEMALE_NAMES = frozenset({"linh", "mai", "lan", "yen", "huong", "ngoc", "thuy", "anh", "ha"})

ARABIC_MALE_NAMES = frozenset(
    {"ahmad", "muhammad", "ali", "omar", "khalid", "hassan", "ibrahim", "yousef", "abdullah"}
)
ARABIC_FEMALE_NAMES = frozenset({"fatima", "aisha", "sarah", "mariam", "zahra", "layla", "amina", "khadija", "nour"})

INDONESIAN_MALE_NAMES = frozenset({"ahmad", "muhammad", "adi", "budi", "eko", "hadi", "indra", "joko", "rudi"})
INDONESIAN_FEMALE_NAMES = frozenset({"sari", "dewi", "rina", "maya", "indah", "fitri", "wati", "ning", "sri"})

INDIAN_MALE_NAMES = frozenset(
    {"raj", "kumar", "singh", "dev", "krishna", "ram", "sharma", "gupta", "anil", "sunil"}
)
INDIAN_FEMALE_NAMES = frozenset(
    {"devi", "kumari", "priya", "sita", "gita", "lata", "rani", "shanti", "maya", "radha"}
)

CHINESE_MALE_NAMES = frozenset({"jian", "ming", "wei", "gang", "jun", "qiang", "lei", "bin"})
CHINESE_FEMALE_NAMES = frozenset({"li", "mei", "hua", "yan", "hong", "ping", "na", "jing", "xue"})

# Matched as whole given names only
WESTERN_MALE_NAMES = frozenset(
    {"john", "david", "michael", "james", "robert", "william", "richard", "thomas", "mark", "daniel"}
)
WESTERN_FEMALE_NAMES = frozenset(
    {"mary", "patricia", "jennifer", "linda", "elizabeth", "barbara", "susan", "jessica", "sarah", "karen"}
)

JAPANESE_FEMALE_ENDINGS = ("ko", "mi", "ka")
JAPANESE_MALE_ENDINGS = ("ro", "ta", "ki")

# Generic terminal patterns for given-first names
FEMALE_NAME_ENDINGS = ("ina", "ia", "a")
MALE_NAME_ENDINGS = ("er", "on", "us")


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _assert_lowercase_keys(table_name, keys):
    """Validate that lookups by lowercased token can reach every key."""
    bad = {key for key in keys if key != key.lower()}
    if bad:
        raise ValueError(f"Keys in {table_name} must be lowercase: {bad}")


def _assert_disjoint(table_name, male, female):
    """Validate that no word is evidence for both genders."""
    overlap = male & female
    if overlap:
        raise ValueError(f"Words listed as both male and female in {table_name}: {overlap}")


_assert_lowercase_keys("TITLE_VARIANTS", TITLE_VARIANTS)
_assert_lowercase_keys("SUFFIX_VARIANTS", SUFFIX_VARIANTS)
_assert_lowercase_keys("LINKING_WORDS", LINKING_WORDS)

_unknown_titles = set(TITLE_VARIANTS.values()) - CANONICAL_TITLES
if _unknown_titles:
    raise ValueError(f"Title variants map to non-canonical titles: {_unknown_titles}")
_unknown_titles = set(TITLE_GENDERS) - CANONICAL_TITLES
if _unknown_titles:
    raise ValueError(f"Gendered titles are not canonical: {_unknown_titles}")

_overlap = set(TITLE_VARIANTS) & set(SUFFIX_VARIANTS)
if _overlap:
    raise ValueError(f"Words listed as both title and suffix: {_overlap}")

_assert_disjoint("VIETNAMESE_MARKERS", VIETNAMESE_MALE_MARKERS, VIETNAMESE_FEMALE_MARKERS)
_assert_disjoint("ARABIC_MARKERS", ARABIC_MALE_MARKERS, ARABIC_FEMALE_MARKERS)
_assert_disjoint("MALAY_MARKERS", MALAY_MALE_MARKERS, MALAY_FEMALE_MARKERS)
_assert_disjoint("VIETNAMESE_NAMES", VIETNAMESE_MALE_NAMES, VIETNAMESE_FEMALE_NAMES)
_assert_disjoint("ARABIC_NAMES", ARABIC_MALE_NAMES, ARABIC_FEMALE_NAMES)
_assert_disjoint("INDONESIAN_NAMES", INDONESIAN_MALE_NAMES, INDONESIAN_FEMALE_NAMES)
_assert_disjoint("INDIAN_NAMES", INDIAN_MALE_NAMES, INDIAN_FEMALE_NAMES)
_assert_disjoint("CHINESE_NAMES", CHINESE_MALE_NAMES, CHINESE_FEMALE_NAMES)
_assert_disjoint("WESTERN_NAMES", WESTERN_MALE_NAMES, WESTERN_FEMALE_NAMES)


# Create immutable versions for concurrent read-only use

TITLE_VARIANTS = MappingProxyType(TITLE_VARIANTS)
TITLE_GENDERS = MappingProxyType(TITLE_GENDERS)
SUFFIX_VARIANTS = MappingProxyType(SUFFIX_VARIANTS)
CULTURE_ALIASES = MappingProxyType(CULTURE_ALIASES)
LOCALE_LANGUAGE_CULTURES = MappingProxyType(LOCALE_LANGUAGE_CULTURES)
