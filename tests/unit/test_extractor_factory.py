from unittest.mock import MagicMock

import pytest

from audio_reader.config.settings import Settings
from audio_reader.extraction.ai_extractor import AIExtractor
from audio_reader.extraction.factory import ExtractorFactory
from audio_reader.extraction.text_layer import PdfPlumberAdapter, PyMuPdfAdapter


class TestExtractorFactory:
    @pytest.mark.parametrize(
        ("provider", "expected"),
        [("pdfplumber", PdfPlumberAdapter), ("PyMuPDF", PyMuPdfAdapter), ("example", AIExtractor)],
    )
    def test_creates_configured_engine(self, provider: str, expected: type) -> None:
        settings = Settings(_env_file=None, extraction_provider=provider)

        assert isinstance(ExtractorFactory.create(settings, MagicMock()), expected)

    def test_unknown_provider_raises(self) -> None:
        settings = Settings(_env_file=None, extraction_provider="tesseract")

        with pytest.raises(ValueError, match="Unknown extraction provider 'tesseract'"):
            ExtractorFactory.create(settings, MagicMock())
