from namebridge.config import NameBridgeConfig
from namebridge.errors import EmptyResult, InvalidEncoding, InvalidInput, NameBridgeError, UnsupportedScript
from namebridge.models import (
    Culture,
    CulturalContext,
    Gender,
    GenderInference,
    GenderSource,
    LanguageHint,
    NameOrder,
    NameStructure,
    Outcome,
    ProcessResult,
    Script,
    ScriptDetection,
    TransliterationResult,
)
from namebridge.pipeline import (
    NameTransliterator,
    detect_language,
    detect_script,
    process,
    transliterate_text,
    try_process,
)

__all__ = [
    "NameBridgeConfig",
    "NameBridgeError",
    "InvalidInput",
    "UnsupportedScript",
    "EmptyResult",
    "InvalidEncoding",
    "Culture",
    "CulturalContext",
    "Gender",
    "GenderInference",
    "GenderSource",
    "LanguageHint",
    "NameOrder",
    "NameStructure",
    "Outcome",
    "ProcessResult",
    "Script",
    "ScriptDetection",
    "TransliterationResult",
    "NameTransliterator",
    "detect_language",
    "detect_script",
    "process",
    "transliterate_text",
    "try_process",
]
