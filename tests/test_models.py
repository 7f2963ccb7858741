"""
Tests for classification models and settings.
"""

import pytest

from src.config import Settings
from src.models import BarcodeSymbology, ClassificationResult


class TestBarcodeSymbology:
    """Tests for the BarcodeSymbology enum."""

    def test_closed_set(self):
        assert [s.value for s in BarcodeSymbology] == [
            "Code128",
            "Code39",
            "Code93",
            "EAN-13",
            "EAN-8",
            "UPC-A",
            "UPC-E",
            "Codabar",
            "Unknown",
        ]

    def test_lookup_by_display_name(self):
        assert BarcodeSymbology("UPC-A") == BarcodeSymbology.UPC_A
        assert BarcodeSymbology.UPC_A.display_name == "UPC-A"


class TestClassificationResult:
    """Tests for ClassificationResult model."""

    def test_defaults(self):
        result = ClassificationResult(code="xyz")

        assert result.symbology == BarcodeSymbology.UNKNOWN
        assert result.format == "Unknown"
        assert not result.is_valid
        assert result.check_digit is None

    def test_symbology_from_display_name(self):
        result = ClassificationResult(code="96385074", symbology="EAN-8", is_valid=True)

        assert result.symbology == BarcodeSymbology.EAN_8
        assert result.type == BarcodeSymbology.EAN_8

    def test_equality_by_value(self):
        a = ClassificationResult(code="ABC-123", symbology=BarcodeSymbology.CODE_128, is_valid=True)
        b = ClassificationResult(code="ABC-123", symbology=BarcodeSymbology.CODE_128, is_valid=True)

        assert a == b


class TestSettings:
    """Tests for application settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.description_locale == "en"
        assert settings.scan_duplicate_window == 3.0
        assert settings.scan_history_size == 5
        assert settings.decoder_rotation_angles == [0, 180]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DESCRIPTION_LOCALE", "fr")
        monkeypatch.setenv("SCAN_DUPLICATE_WINDOW", "2.5")
        monkeypatch.setenv("DECODER_ROTATION_ANGLES", "[0, 90, 180, 270]")
        settings = Settings(_env_file=None)

        assert settings.description_locale == "fr"
        assert settings.scan_duplicate_window == 2.5
        assert settings.decoder_rotation_angles == [0, 90, 180, 270]

    def test_rejects_bad_values(self, monkeypatch):
        monkeypatch.setenv("SCAN_HISTORY_SIZE", "0")
        with pytest.raises(ValueError):
            Settings(_env_file=None)
