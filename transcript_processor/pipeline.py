from __future__ import annotations

import logging
from typing import Optional

from common.schemas import ProcessedSegment, ProcessorConfig, RawFragment
from transcript_processor.fillers import clean_transcript
from transcript_processor.segmenter import segment_transcript
from transcript_processor.terms import correct_terms

logger = logging.getLogger(__name__)


def process_transcript(
    fragments: list[RawFragment],
    slide_text: Optional[str],
    config: ProcessorConfig,
) -> list[ProcessedSegment]:
    """Full post-processing: filter, clean, segment, then correct terms."""
    confident = [f for f in fragments if f.confidence >= config.confidence_threshold]
    if not confident:
        logger.debug("No fragments at or above confidence %.2f", config.confidence_threshold)
        return []

    cleaned: list[RawFragment] = []
    for fragment in confident:
        text = clean_transcript(fragment.text, config.verbosity)
        if text and text.strip():
            cleaned.append(fragment.model_copy(update={"text": text}))

    if not cleaned:
        logger.debug("All %d fragments were empty after cleaning", len(confident))
        return []

    paragraphs = segment_transcript(cleaned, config.paragraph_gap_ms)
    corrected = [
        p.model_copy(update={"text": correct_terms(p.text, slide_text)})
        for p in paragraphs
    ]

    logger.debug(
        "Processed %d fragments (%d kept) into %d paragraphs",
        len(fragments), len(cleaned), len(corrected),
    )
    return corrected
