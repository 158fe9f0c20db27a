from audio_reader.ai.factory import AIClientFactory
from audio_reader.config.settings import Settings
from audio_reader.extraction.ai_extractor import AIExtractor
from audio_reader.extraction.base import BaseExtractor
from audio_reader.extraction.source_fetcher import SourceFetcher
from audio_reader.extraction.text_layer import PdfPlumberAdapter, PyMuPdfAdapter, TextLayerExtractor


class ExtractorFactory:
    """Creates the configured text extractor."""

    TEXT_LAYER_ADAPTERS: dict[str, type[TextLayerExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings, fetcher: SourceFetcher) -> BaseExtractor:
        provider = settings.extraction_provider.lower()
        adapter_cls = cls.TEXT_LAYER_ADAPTERS.get(provider)
        if adapter_cls is not None:
            return adapter_cls(fetcher)
        if not AIClientFactory.is_supported(provider):
            supported = [*AIClientFactory.supported_providers(), *cls.TEXT_LAYER_ADAPTERS]
            raise ValueError(
                f"Unknown extraction provider '{provider}'. Choose from: {supported}"
            )
        client = AIClientFactory.create(provider, settings, settings.extraction_timeout_seconds)
        return AIExtractor(
            client=client,
            model=settings.extraction_model_name,
            fetcher=fetcher,
        )
