from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from common.config import ProcessorSettings
from common.schemas import EngineResultRequest, ProcessRequest, ProcessResponse
from transcript_processor.ingest import TranscriptionError, postprocess_result
from transcript_processor.pipeline import process_transcript

logger = logging.getLogger(__name__)

settings = ProcessorSettings()
app = FastAPI(title="Transcript Processor Service")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/process-transcript", response_model=ProcessResponse)
async def process(req: ProcessRequest):
    config = req.config or settings.processor_config()
    segments = process_transcript(req.fragments, req.slide_text, config)
    logger.info("Processed %d fragments into %d segments", len(req.fragments), len(segments))
    return ProcessResponse(segments=segments)


@app.post("/process-engine-result", response_model=ProcessResponse)
async def process_engine_result(req: EngineResultRequest):
    config = req.config or settings.processor_config()
    try:
        segments = postprocess_result(
            req.result,
            slide_text=req.slide_text,
            config=config,
            skip_processing=req.skip_processing,
        )
    except TranscriptionError as exc:
        logger.warning("Engine result rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))

    return ProcessResponse(segments=segments)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
