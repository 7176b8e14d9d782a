"""Internal models for transcript post-processing."""

from __future__ import annotations

from dataclasses import dataclass, field

from common.schemas import ProcessedSegment, RawFragment


@dataclass
class OpenParagraph:
    start_time: int
    end_time: int
    confidence: float
    parts: list[str] = field(default_factory=list)

    @classmethod
    def start(cls, fragment: RawFragment, text: str) -> OpenParagraph:
        return cls(
            start_time=fragment.start_time,
            end_time=fragment.end_time,
            confidence=fragment.confidence,
            parts=[text],
        )

    def merge(self, fragment: RawFragment, text: str) -> None:
        self.parts.append(text)
        self.end_time = fragment.end_time
        self.confidence = min(self.confidence, fragment.confidence)

    def close(self) -> ProcessedSegment:
        return ProcessedSegment(
            text=" ".join(self.parts),
            start_time=self.start_time,
            end_time=self.end_time,
            confidence=self.confidence,
        )
