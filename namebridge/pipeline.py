"""
End-to-end name processing.

`NameTransliterator` detects the script once, transliterates, and then runs the
name parser, the gender inferencer and the confidence scorer independently over
the same inputs before merging everything into one `ProcessResult`. It holds
only immutable configuration and an optional dictionary lookup, so a single
instance can serve concurrent callers.

```python
from namebridge import process

result = process("Doctor Nguyễn Văn Minh", culture="vietnamese")
result.name.full_ascii      # 'DR NGUYEN Van Minh'
result.gender.value         # Gender.MALE
```
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from namebridge.config import NameBridgeConfig
from namebridge.errors import EmptyResult, InvalidInput, NameBridgeError, UnsupportedScript
from namebridge.gender import GenderInferencer
from namebridge.models import (
    SOURCE_SCRIPTS,
    TARGET_SCRIPTS,
    Culture,
    LanguageHint,
    Outcome,
    ProcessResult,
    Script,
    ScriptDetection,
    TransliterationResult,
)
from namebridge.name_parser import NameParser, resolve_cultural_context
from namebridge.script_detection import ScriptDetector
from namebridge.transliteration import CharacterLookup, Transliterator, score_transliteration


class NameTransliterator:
    """Orchestrates detection, transliteration, parsing, gender and scoring."""

    def __init__(self, config: Optional[NameBridgeConfig] = None, lookup: Optional[CharacterLookup] = None):
        self._config = config or NameBridgeConfig.create_default()
        self._detector = ScriptDetector(self._config.detection)
        self._transliterator = Transliterator(self._config.transliteration, lookup)
        self._parser = NameParser()
        self._gender = GenderInferencer(self._config.gender)

    @property
    def config(self) -> NameBridgeConfig:
        return self._config

    def detect_script(self, text: str) -> ScriptDetection:
        """Detect the dominant script. Never raises."""
        if not isinstance(text, str):
            return ScriptDetection.unknown()
        return self._detector.detect(text)

    def detect_language(self, text: str) -> LanguageHint:
        """Guess the language from letters specific to it. Never raises."""
        if not isinstance(text, str):
            return LanguageHint.unknown(self._config.detection.unknown_language)
        return self._detector.detect_language(text)

    def transliterate(
        self,
        text: str,
        source: Union[str, Script],
        target: Union[str, Script] = Script.ASCII,
        locale: Optional[str] = None,
    ) -> TransliterationResult:
        """
        Transliterate and insist on a non-empty result.

        Raises:
            EmptyResult: the output is empty, including for empty input
            UnsupportedScript: source or target outside the supported set
        """
        result = self._transliterator.transliterate(text, source, target, locale)
        if not result.output:
            logging.error(f"Transliteration of {text!r} from {source} produced no output")
            raise EmptyResult(f"transliteration of {text!r} produced no output")
        return result

    def process(
        self,
        text: str,
        source_script: Union[str, Script, None] = None,
        target_script: Union[str, Script] = Script.ASCII,
        locale: Optional[str] = None,
        culture: Union[str, Culture, None] = None,
    ) -> ProcessResult:
        """
        Run the full pipeline over one name.

        Args:
            text: The name as written
            source_script: Script hint; detected from `text` when omitted
            target_script: "ascii" (default) or "latin"
            locale: Optional locale such as "vi-VN", used for culture resolution
            culture: Optional explicit culture hint, e.g. "vietnamese"

        Raises:
            InvalidInput: text missing, empty or longer than max_text_length
            UnsupportedScript: bad hint or target, or undetectable script
            EmptyResult: transliteration produced nothing
            InvalidEncoding: transliteration output failed validation
        """
        self._validate_text(text)
        target = Script.parse(target_script, TARGET_SCRIPTS)
        detection = self._detector.detect(text)

        if source_script is not None:
            source = Script.parse(source_script, SOURCE_SCRIPTS)
            script_confidence = detection.confidence if source is detection.script else 1.0
        elif detection.script is Script.UNKNOWN:
            raise UnsupportedScript(f"could not detect a supported script in {text!r}")
        else:
            source = detection.script
            script_confidence = detection.confidence

        # Language only from a detection the hint agrees with
        language = self._detector.detect_language(text, detection) if source is detection.script else None

        transliteration = self.transliterate(text, source, target, locale)
        context = resolve_cultural_context(text, culture=culture, locale=locale, script=source, language=language)
        logging.debug(f"Resolved {text!r} to culture {context.culture.value} from {context.resolved_from}")

        name = self._parser.parse(text, transliteration.output, context)
        gender = self._gender.infer(text, transliteration.output, context)
        score = score_transliteration(text, transliteration.output, source, target, self._config.scoring)

        return ProcessResult(
            script=source,
            script_confidence=script_confidence,
            culture=context,
            transliteration=transliteration,
            confidence_score=score,
            name=name,
            gender=gender,
            language=language,
        )

    def try_process(
        self,
        text: str,
        source_script: Union[str, Script, None] = None,
        target_script: Union[str, Script] = Script.ASCII,
        locale: Optional[str] = None,
        culture: Union[str, Culture, None] = None,
    ) -> Outcome:
        """Like `process`, but returns failures as an Outcome instead of raising."""
        try:
            return Outcome.succeeded(self.process(text, source_script, target_script, locale, culture))
        except NameBridgeError as e:
            logging.debug(f"Processing {text!r} failed with {e.kind}: {e}")
            return Outcome.failed(e)

    def _validate_text(self, text: str) -> None:
        if text is None or not isinstance(text, str):
            raise InvalidInput("text is required")
        if not text.strip():
            raise InvalidInput("text must not be empty")
        if len(text) > self._config.max_text_length:
            raise InvalidInput(f"text is longer than {self._config.max_text_length} characters")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global instance for module-level functions
_global_transliterator: Optional[NameTransliterator] = None


def _get_global_transliterator() -> NameTransliterator:
    """Get or create the global transliterator instance."""
    global _global_transliterator
    if _global_transliterator is None:
        _global_transliterator = NameTransliterator()
    return _global_transliterator


def detect_script(text: str) -> ScriptDetection:
    return _get_global_transliterator().detect_script(text)


def detect_language(text: str) -> LanguageHint:
    return _get_global_transliterator().detect_language(text)


def transliterate_text(
    text: str,
    source: Union[str, Script],
    target: Union[str, Script] = Script.ASCII,
    locale: Optional[str] = None,
) -> TransliterationResult:
    return _get_global_transliterator().transliterate(text, source, target, locale)


def process(
    text: str,
    source_script: Union[str, Script, None] = None,
    target_script: Union[str, Script] = Script.ASCII,
    locale: Optional[str] = None,
    culture: Union[str, Culture, None] = None,
) -> ProcessResult:
    """
    Module-level convenience function for the full pipeline.

    Returns:
        ProcessResult; see `NameTransliterator.process` for the errors raised
    """
    return _get_global_transliterator().process(text, source_script, target_script, locale, culture)


def try_process(
    text: str,
    source_script: Union[str, Script, None] = None,
    target_script: Union[str, Script] = Script.ASCII,
    locale: Optional[str] = None,
    culture: Union[str, Culture, None] = None,
) -> Outcome:
    return _get_global_transliterator().try_process(text, source_script, target_script, locale, culture)
