"""Turn speech engine output into processed transcript segments."""

from __future__ import annotations

import logging
import re
from typing import Optional

from common.schemas import (
    DEFAULT_PROCESSOR_CONFIG,
    EngineResult,
    ProcessedSegment,
    ProcessorConfig,
    RawFragment,
)
from transcript_processor.fillers import clean_transcript
from transcript_processor.pipeline import process_transcript
from transcript_processor.terms import correct_terms

logger = logging.getLogger(__name__)

# Engine annotations such as [Music] or [BLANK_AUDIO]
_NON_SPEECH = re.compile(r"^\[.*\]$")

DEFAULT_ENGINE_CONFIDENCE = 0.8
WHOLE_TEXT_DURATION_MS = 5000


class TranscriptionError(RuntimeError):
    pass


def _is_non_speech(text: str) -> bool:
    return bool(_NON_SPEECH.match(text))


def fragments_from_result(result: EngineResult) -> list[RawFragment]:
    fragments: list[RawFragment] = []
    for seg in result.segments:
        text = (seg.text or "").strip()
        if not text or _is_non_speech(text):
            continue
        fragments.append(
            RawFragment(
                text=text,
                start_time=seg.start,
                end_time=seg.end,
                confidence=seg.confidence if seg.confidence is not None else DEFAULT_ENGINE_CONFIDENCE,
            )
        )
    return fragments


def postprocess_result(
    result: EngineResult,
    slide_text: Optional[str] = None,
    config: ProcessorConfig = DEFAULT_PROCESSOR_CONFIG,
    skip_processing: bool = False,
) -> list[ProcessedSegment]:
    """Post-process one engine result.

    Segment lists go through the full pipeline (or only the confidence
    filter when ``skip_processing`` is set). A result carrying only whole
    text becomes a single segment. Raises TranscriptionError when the
    result holds no speech at all.
    """
    if result.segments:
        fragments = fragments_from_result(result)
        if skip_processing:
            return [
                ProcessedSegment(**f.model_dump())
                for f in fragments
                if f.confidence >= config.confidence_threshold
            ]
        return process_transcript(fragments, slide_text, config)

    text = (result.text or "").strip()
    if not text:
        raise TranscriptionError("No transcription results")
    if _is_non_speech(text):
        raise TranscriptionError("No speech detected")

    if not skip_processing:
        text = clean_transcript(text, config.verbosity)
        if slide_text:
            text = correct_terms(text, slide_text)

    if not text.strip():
        logger.debug("Whole-text result was empty after cleaning")
        return []

    return [
        ProcessedSegment(
            text=text,
            start_time=0,
            end_time=WHOLE_TEXT_DURATION_MS,
            confidence=DEFAULT_ENGINE_CONFIDENCE,
        )
    ]
