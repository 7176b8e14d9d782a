from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# --- Transcript fragments and paragraphs ---

class Verbosity(str, Enum):
    verbatim = "verbatim"
    clean = "clean"
    minimal = "minimal"


class RawFragment(BaseModel):
    text: str
    start_time: int  # ms
    end_time: int  # ms
    confidence: float


class ProcessedSegment(BaseModel):
    text: str
    start_time: int
    end_time: int
    confidence: float  # minimum over all merged fragments


class ProcessorConfig(BaseModel):
    verbosity: Verbosity = Verbosity.clean
    confidence_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    paragraph_gap_ms: int = Field(default=5000, ge=0)

    model_config = {"frozen": True}


DEFAULT_PROCESSOR_CONFIG = ProcessorConfig()


# --- Speech engine output, as handed over by the recognizer ---

class EngineSegment(BaseModel):
    text: Optional[str] = None
    start: int = 0
    end: int = 0
    confidence: Optional[float] = None


class EngineResult(BaseModel):
    text: Optional[str] = None
    segments: list[EngineSegment] = []


# --- HTTP request / response ---

class ProcessRequest(BaseModel):
    fragments: list[RawFragment]
    slide_text: Optional[str] = None
    config: Optional[ProcessorConfig] = None


class EngineResultRequest(BaseModel):
    result: EngineResult
    slide_text: Optional[str] = None
    config: Optional[ProcessorConfig] = None
    skip_processing: bool = False


class ProcessResponse(BaseModel):
    segments: list[ProcessedSegment]
