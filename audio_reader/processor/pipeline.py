from abc import ABC, abstractmethod
from dataclasses import dataclass

from audio_reader.store.models import DocumentRecord
from audio_reader.synthesis.synthesizer import SynthesisResult


@dataclass(slots=True)
class PipelineContext:
    document_id: str
    run_token: str
    voice_id: str
    document: DocumentRecord | None = None
    extracted_text: str = ""
    cleaned_text: str = ""
    synthesis: SynthesisResult | None = None
    error_message: str = ""
    superseded: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
