from pydantic_settings import BaseSettings

from common.schemas import ProcessorConfig, Verbosity


class ProcessorSettings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8003
    verbosity: Verbosity = Verbosity.clean
    confidence_threshold: float = 0.5
    paragraph_gap_ms: int = 5000

    model_config = {"env_prefix": "PROCESSOR_"}

    def processor_config(self) -> ProcessorConfig:
        return ProcessorConfig(
            verbosity=self.verbosity,
            confidence_threshold=self.confidence_threshold,
            paragraph_gap_ms=self.paragraph_gap_ms,
        )
