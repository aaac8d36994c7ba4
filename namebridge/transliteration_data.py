# ═════════════════════════════════════════════════════════════════════════════════
# BUILT-IN CHARACTER TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# One table per source script, each mapping a single character to its Latin
# romanization. Lowercase tables are written once and uppercase entries are
# derived from them. A value may be the empty string (hard/soft signs, vowel
# marks, the sokuon); a missing key means "not covered by this table".
#
# Hangul is not tabulated: syllables are romanized algorithmically from their
# jamo decomposition, so only the jamo component lists live here.
#
# Every table is validated at import and frozen as a MappingProxyType so it can
# be read from any number of threads without locking.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType


def _with_uppercase(table):
    """Add capitalized entries for every cased key in `table`."""
    merged = dict(table)
    for key, value in table.items():
        upper = key.upper()
        if len(upper) == 1 and upper != key and not upper.isascii() and upper not in merged:
            merged[upper] = value.capitalize()
    return merged


# Russian, then Ukrainian, Belarusian, Serbian and Macedonian letters
CYRILLIC_TABLE = _with_uppercase(
    {
        "а": "a",
        "б": "b",
        "в": "v",
        "г": "g",
        "д": "d",
        "е": "e",
        "ё": "yo",
        "ж": "zh",
        "з": "z",
        "и": "i",
        "й": "y",
        "к": "k",
        "л": "l",
        "м": "m",
        "н": "n",
        "о": "o",
        "п": "p",
        "р": "r",
        "с": "s",
        "т": "t",
        "у": "u",
        "ф": "f",
        "х": "kh",
        "ц": "ts",
        "ч": "ch",
        "ш": "sh",
        "щ": "shch",
        "ъ": "",
        "ы": "y",
        "ь": "",
        "э": "e",
        "ю": "yu",
        "я": "ya",
        # Ukrainian
        "є": "ye",
        "і": "i",
        "ї": "yi",
        "ґ": "g",
        # Belarusian
        "ў": "w",
        # Serbian
        "ђ": "dj",
        "ј": "j",
        "љ": "lj",
        "њ": "nj",
        "ћ": "c",
        "џ": "dz",
        # Macedonian
        "ѓ": "gj",
        "ќ": "kj",
        "ѕ": "dz",
    }
)

# Modern Greek, ELOT 743 style
GREEK_TABLE = _with_uppercase(
    {
        "α": "a",
        "β": "v",
        "γ": "g",
        "δ": "d",
        "ε": "e",
        "ζ": "z",
        "η": "i",
        "θ": "th",
        "ι": "i",
        "κ": "k",
        "λ": "l",
        "μ": "m",
        "ν": "n",
        "ξ": "x",
        "ο": "o",
        "π": "p",
        "ρ": "r",
        "σ": "s",
        "ς": "s",
        "τ": "t",
        "υ": "y",
        "φ": "f",
        "χ": "ch",
        "ψ": "ps",
        "ω": "o",
        # Tonos and dialytika
        "ά": "a",
        "έ": "e",
        "ή": "i",
        "ί": "i",
        "ό": "o",
        "ύ": "y",
        "ώ": "o",
        "ϊ": "i",
        "ϋ": "y",
        "ΐ": "i",
        "ΰ": "y",
    }
)

ARABIC_TABLE = {
    "ا": "a",
    "ب": "b",
    "ت": "t",
    "ث": "th",
    "ج": "j",
    "ح": "h",
    "خ": "kh",
    "د": "d",
    "ذ": "dh",
    "ر": "r",
    "ز": "z",
    "س": "s",
    "ش": "sh",
    "ص": "s",
    "ض": "d",
    "ط": "t",
    "ظ": "z",
    "ع": "'",
    "غ": "gh",
    "ف": "f",
    "ق": "q",
    "ك": "k",
    "ل": "l",
    "م": "m",
    "ن": "n",
    "ه": "h",
    "و": "w",
    "ي": "y",
    # Hamza and alef forms
    "ء": "'",
    "آ": "aa",
    "أ": "a",
    "إ": "i",
    "ؤ": "u",
    "ئ": "i",
    "ٱ": "a",
    "ة": "h",
    "ى": "a",
    # Persian and Urdu letters
    "پ": "p",
    "چ": "ch",
    "ژ": "zh",
    "گ": "g",
    "ک": "k",
    "ی": "y",
    # Short vowels and other diacritics
    "ً": "an",
    "ٌ": "un",
    "ٍ": "in",
    "َ": "a",
    "ُ": "u",
    "ِ": "i",
    "ّ": "",
    "ْ": "",
    # Tatweel
    "ـ": "",
}
# Arabic-Indic and Extended Arabic-Indic digits
ARABIC_TABLE.update({chr(0x0660 + i): str(i) for i in range(10)})
ARABIC_TABLE.update({chr(0x06F0 + i): str(i) for i in range(10)})

HEBREW_TABLE = {
    "א": "'",
    "ב": "b",
    "ג": "g",
    "ד": "d",
    "ה": "h",
    "ו": "v",
    "ז": "z",
    "ח": "ch",
    "ט": "t",
    "י": "y",
    "כ": "kh",
    "ל": "l",
    "מ": "m",
    "נ": "n",
    "ס": "s",
    "ע": "'",
    "פ": "p",
    "צ": "ts",
    "ק": "q",
    "ר": "r",
    "ש": "sh",
    "ת": "t",
    # Final forms
    "ך": "kh",
    "ם": "m",
    "ן": "n",
    "ף": "f",
    "ץ": "ts",
}
# Niqqud vowel points carry no consonant
HEBREW_TABLE.update({chr(cp): "" for cp in range(0x05B0, 0x05BD)})

THAI_TABLE = {
    # Consonants
    "ก": "k",
    "ข": "kh",
    "ฃ": "kh",
    "ค": "kh",
    "ฅ": "kh",
    "ฆ": "kh",
    "ง": "ng",
    "จ": "j",
    "ฉ": "ch",
    "ช": "ch",
    "ซ": "s",
    "ฌ": "ch",
    "ญ": "y",
    "ฎ": "d",
    "ฏ": "t",
    "ฐ": "th",
    "ฑ": "th",
    "ฒ": "th",
    "ณ": "n",
    "ด": "d",
    "ต": "t",
    "ถ": "th",
    "ท": "th",
    "ธ": "th",
    "น": "n",
    "บ": "b",
    "ป": "p",
    "ผ": "ph",
    "ฝ": "f",
    "พ": "ph",
    "ฟ": "f",
    "ภ": "ph",
    "ม": "m",
    "ย": "y",
    "ร": "r",
    "ฤ": "rue",
    "ล": "l",
    "ฦ": "lue",
    "ว": "w",
    "ศ": "s",
    "ษ": "s",
    "ส": "s",
    "ห": "h",
    "ฬ": "l",
    "อ": "'",
    "ฮ": "h",
    # Vowels
    "ะ": "a",
    "ั": "a",
    "า": "a",
    "ำ": "am",
    "ิ": "i",
    "ี": "i",
    "ึ": "ue",
    "ื": "ue",
    "ุ": "u",
    "ู": "u",
    "เ": "e",
    "แ": "ae",
    "โ": "o",
    "ใ": "ai",
    "ไ": "ai",
    "ๅ": "",
    # Tone marks and other signs
    "็": "",
    "่": "",
    "้": "",
    "๊": "",
    "๋": "",
    "์": "",
    "ๆ": "",
    "ฯ": "",
}
THAI_TABLE.update({chr(0x0E50 + i): str(i) for i in range(10)})

# Hepburn romanization of hiragana; small kana map to their full-size reading
HIRAGANA_TABLE = {
    "あ": "a",
    "い": "i",
    "う": "u",
    "え": "e",
    "お": "o",
    "か": "ka",
    "き": "ki",
    "く": "ku",
    "け": "ke",
    "こ": "ko",
    "が": "ga",
    "ぎ": "gi",
    "ぐ": "gu",
    "げ": "ge",
    "ご": "go",
    "さ": "sa",
    "し": "shi",
    "す": "su",
    "せ": "se",
    "そ": "so",
    "ざ": "za",
    "じ": "ji",
    "ず": "zu",
    "ぜ": "ze",
    "ぞ": "zo",
    "た": "ta",
    "ち": "chi",
    "つ": "tsu",
    "て": "te",
    "と": "to",
    "だ": "da",
    "ぢ": "ji",
    "づ": "zu",
    "で": "de",
    "ど": "do",
    "な": "na",
    "に": "ni",
    "ぬ": "nu",
    "ね": "ne",
    "の": "no",
    "は": "ha",
    "ひ": "hi",
    "ふ": "fu",
    "へ": "he",
    "ほ": "ho",
    "ば": "ba",
    "び": "bi",
    "ぶ": "bu",
    "べ": "be",
    "ぼ": "bo",
    "ぱ": "pa",
    "ぴ": "pi",
    "ぷ": "pu",
    "ぺ": "pe",
    "ぽ": "po",
    "ま": "ma",
    "み": "mi",
    "む": "mu",
    "め": "me",
    "も": "mo",
    "や": "ya",
    "ゆ": "yu",
    "よ": "yo",
    "ら": "ra",
    "り": "ri",
    "る": "ru",
    "れ": "re",
    "ろ": "ro",
    "わ": "wa",
    "ゐ": "wi",
    "ゑ": "we",
    "を": "wo",
    "ん": "n",
    "ゔ": "vu",
    # Small kana
    "ぁ": "a",
    "ぃ": "i",
    "ぅ": "u",
    "ぇ": "e",
    "ぉ": "o",
    "ゃ": "ya",
    "ゅ": "yu",
    "ょ": "yo",
    "ゎ": "wa",
    "っ": "",
}

# Katakana occupy the same layout 0x60 code points above hiragana
KATAKANA_TABLE = {chr(ord(k) + 0x60): v for k, v in HIRAGANA_TABLE.items()}
KATAKANA_TABLE["ー"] = ""

# Fixed vocabulary checked before any pinyin reading: common surnames,
# given-name characters, numerals, directions and everyday words
CHINESE_TABLE = {
    # Numerals
    "一": "Yi",
    "二": "Er",
    "三": "San",
    "四": "Si",
    "五": "Wu",
    "六": "Liu",
    "七": "Qi",
    "八": "Ba",
    "九": "Jiu",
    "十": "Shi",
    # Surnames
    "李": "Li",
    "王": "Wang",
    "张": "Zhang",
    "刘": "Liu",
    "陈": "Chen",
    "杨": "Yang",
    "赵": "Zhao",
    "黄": "Huang",
    "周": "Zhou",
    "吴": "Wu",
    "徐": "Xu",
    "孙": "Sun",
    "胡": "Hu",
    "朱": "Zhu",
    "高": "Gao",
    "林": "Lin",
    "何": "He",
    "郭": "Guo",
    "马": "Ma",
    "罗": "Luo",
    "梁": "Liang",
    "宋": "Song",
    "郑": "Zheng",
    "谢": "Xie",
    "韩": "Han",
    "唐": "Tang",
    "冯": "Feng",
    "于": "Yu",
    "董": "Dong",
    "萧": "Xiao",
    "程": "Cheng",
    "曹": "Cao",
    "袁": "Yuan",
    "邓": "Deng",
    "许": "Xu",
    "傅": "Fu",
    "沈": "Shen",
    "曾": "Zeng",
    "彭": "Peng",
    "吕": "Lu",
    # Given-name characters
    "小": "Xiao",
    "大": "Da",
    "中": "Zhong",
    "文": "Wen",
    "明": "Ming",
    "华": "Hua",
    "建": "Jian",
    "国": "Guo",
    "民": "Min",
    "伟": "Wei",
    "龍": "Long",
    "龙": "Long",
    "凤": "Feng",
    "鳳": "Feng",
    "玉": "Yu",
    "金": "Jin",
    "春": "Chun",
    "红": "Hong",
    "军": "Jun",
    "强": "Qiang",
    "云": "Yun",
    "平": "Ping",
    "志": "Zhi",
    "刚": "Gang",
    "勇": "Yong",
    "磊": "Lei",
    "娜": "Na",
    "静": "Jing",
    "丽": "Li",
    "敏": "Min",
    "秀": "Xiu",
    "英": "Ying",
    "芳": "Fang",
    "燕": "Yan",
    "雪": "Xue",
    "琴": "Qin",
    "梅": "Mei",
    "莉": "Li",
    "兰": "Lan",
    "翠": "Cui",
    # Everyday words
    "你": "ni",
    "好": "hao",
    "是": "shi",
    "的": "de",
    "我": "wo",
    "他": "ta",
    "她": "ta",
    "们": "men",
    "有": "you",
    "在": "zai",
    "了": "le",
    "不": "bu",
    "就": "jiu",
    "人": "ren",
    "都": "dou",
    # Directions
    "东": "Dong",
    "南": "Nan",
    "西": "Xi",
    "北": "Bei",
    "上": "Shang",
    "下": "Xia",
    "左": "Zuo",
    "右": "You",
    "前": "Qian",
    "后": "Hou",
    # Descriptors
    "新": "Xin",
    "老": "Lao",
    "长": "Chang",
    "短": "Duan",
    "低": "Di",
    "快": "Kuai",
    "慢": "Man",
    "早": "Zao",
    "晚": "Wan",
}

# Latin letters without a canonical decomposition to an ASCII base
LATIN_SPECIAL_TABLE = _with_uppercase(
    {
        "ß": "ss",
        "æ": "ae",
        "œ": "oe",
        "ø": "o",
        "đ": "d",
        "ł": "l",
        "ı": "i",
        "þ": "th",
        "ð": "d",
        "ĳ": "ij",
        "ŋ": "ng",
        "ħ": "h",
        "ŧ": "t",
        "ƒ": "f",
    }
)
LATIN_SPECIAL_TABLE["ẞ"] = "SS"
LATIN_SPECIAL_TABLE["Æ"] = "AE"
LATIN_SPECIAL_TABLE["Œ"] = "OE"
LATIN_SPECIAL_TABLE["Ĳ"] = "IJ"

# Revised Romanization jamo, in Unicode composition order
HANGUL_INITIALS = (
    "g", "kk", "n", "d", "tt", "r", "m", "b", "pp", "s",
    "ss", "", "j", "jj", "ch", "k", "t", "p", "h",
)  # fmt: skip
HANGUL_MEDIALS = (
    "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o", "wa", "wae",
    "oe", "yo", "u", "wo", "we", "wi", "yu", "eu", "ui", "i",
)  # fmt: skip
HANGUL_FINALS = (
    "", "k", "k", "k", "n", "n", "n", "t", "l", "k", "m", "l", "l", "l",
    "p", "l", "m", "p", "p", "t", "t", "ng", "t", "t", "k", "t", "p", "t",
)  # fmt: skip
HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3

# Fallback punctuation; anything else in a punctuation category becomes "."
PUNCTUATION_TABLE = {
    "“": '"',
    "”": '"',
    "„": '"',
    "‘": "'",
    "’": "'",
    "‚": "'",
    "…": "...",
    "‐": "-",
    "‑": "-",
    "‒": "-",
    "–": "-",
    "—": "-",
    "―": "-",
    "«": '"',
    "»": '"',
    "‹": "'",
    "›": "'",
    "•": "*",
    "¡": "!",
    "¿": "",
    # Name separators in CJK and Western typesetting
    "·": " ",
    "・": " ",
    # CJK punctuation
    "、": ",",
    "。": ".",
    "，": ",",
    "．": ".",
    "：": ":",
    "；": ";",
    "！": "!",
    "？": "",
    "（": "(",
    "）": ")",
    "「": '"',
    "」": '"',
    "『": '"',
    "』": '"',
    # Arabic punctuation
    "،": ",",
    "؛": ";",
    "؟": "",
}
DEFAULT_PUNCTUATION = "."


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _assert_single_char_keys(table_name, table):
    """Validate that every key is exactly one code point."""
    for key in table:
        if len(key) != 1:
            raise ValueError(f"Key in {table_name} is not a single character: {key!r}")


def _assert_ascii_values(table_name, table):
    """Validate that every romanization is plain ASCII."""
    bad = {key: value for key, value in table.items() if not value.isascii()}
    if bad:
        raise ValueError(f"Non-ASCII romanizations in {table_name}: {bad}")


def _assert_no_overlap(*tables):
    """Validate that no character is claimed by two script tables."""
    seen = set()
    for table_name, table in tables:
        duplicates = seen.intersection(table.keys())
        if duplicates:
            raise ValueError(f"Characters claimed by more than one table, found in {table_name}: {duplicates}")
        seen.update(table.keys())


_ALL_TABLES = (
    ("CYRILLIC_TABLE", CYRILLIC_TABLE),
    ("GREEK_TABLE", GREEK_TABLE),
    ("ARABIC_TABLE", ARABIC_TABLE),
    ("HEBREW_TABLE", HEBREW_TABLE),
    ("THAI_TABLE", THAI_TABLE),
    ("HIRAGANA_TABLE", HIRAGANA_TABLE),
    ("KATAKANA_TABLE", KATAKANA_TABLE),
    ("CHINESE_TABLE", CHINESE_TABLE),
    ("LATIN_SPECIAL_TABLE", LATIN_SPECIAL_TABLE),
)

for _name, _table in _ALL_TABLES:
    _assert_single_char_keys(_name, _table)
    _assert_ascii_values(_name, _table)
_assert_single_char_keys("PUNCTUATION_TABLE", PUNCTUATION_TABLE)
_assert_ascii_values("PUNCTUATION_TABLE", PUNCTUATION_TABLE)
_assert_no_overlap(*_ALL_TABLES)

if len(HANGUL_INITIALS) != 19 or len(HANGUL_MEDIALS) != 21 or len(HANGUL_FINALS) != 28:
    raise ValueError("Hangul jamo tables must hold 19 initials, 21 medials and 28 finals")


# Create immutable versions for concurrent read-only use

CYRILLIC_TABLE = MappingProxyType(CYRILLIC_TABLE)
GREEK_TABLE = MappingProxyType(GREEK_TABLE)
ARABIC_TABLE = MappingProxyType(ARABIC_TABLE)
HEBREW_TABLE = MappingProxyType(HEBREW_TABLE)
THAI_TABLE = MappingProxyType(THAI_TABLE)
HIRAGANA_TABLE = MappingProxyType(HIRAGANA_TABLE)
KATAKANA_TABLE = MappingProxyType(KATAKANA_TABLE)
CHINESE_TABLE = MappingProxyType(CHINESE_TABLE)
LATIN_SPECIAL_TABLE = MappingProxyType(LATIN_SPECIAL_TABLE)
PUNCTUATION_TABLE = MappingProxyType(PUNCTUATION_TABLE)
