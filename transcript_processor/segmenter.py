from __future__ import annotations

from typing import Iterable

from common.schemas import ProcessedSegment, RawFragment
from transcript_processor.models import OpenParagraph


def segment_transcript(
    fragments: Iterable[RawFragment],
    gap_threshold_ms: int = 5000,
) -> list[ProcessedSegment]:
    """Merge time-adjacent fragments into paragraphs.

    A pause of at least ``gap_threshold_ms`` between the end of the current
    paragraph and the start of the next fragment starts a new paragraph.
    Fragments are never reordered; blank ones are skipped.
    """
    paragraphs: list[ProcessedSegment] = []
    current: OpenParagraph | None = None

    for fragment in fragments:
        text = fragment.text.strip() if fragment.text else ""
        if not text:
            continue

        if current is None:
            current = OpenParagraph.start(fragment, text)
            continue

        gap = fragment.start_time - current.end_time
        if gap >= gap_threshold_ms:
            paragraphs.append(current.close())
            current = OpenParagraph.start(fragment, text)
        else:
            current.merge(fragment, text)

    if current is not None:
        paragraphs.append(current.close())

    return paragraphs
