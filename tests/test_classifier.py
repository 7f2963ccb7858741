"""
Tests for barcode classification.
"""

import pytest
from pydantic import ValidationError

from src.barcode.classifier import classify, resolve_hint
from src.barcode.validator import calculate_ean13_checksum
from src.models.barcode import BarcodeSymbology


class TestResolveHint:
    """Tests for scanner symbology hint resolution."""

    def test_none(self):
        assert resolve_hint(None) is None

    def test_enum(self):
        assert resolve_hint(BarcodeSymbology.EAN_8) == BarcodeSymbology.EAN_8

    def test_unknown_enum_is_no_hint(self):
        assert resolve_hint(BarcodeSymbology.UNKNOWN) is None

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("CODE_128", BarcodeSymbology.CODE_128),
            ("CODE128", BarcodeSymbology.CODE_128),
            ("Code128", BarcodeSymbology.CODE_128),
            ("EAN_13", BarcodeSymbology.EAN_13),
            ("EAN13", BarcodeSymbology.EAN_13),
            ("EAN-13", BarcodeSymbology.EAN_13),
            ("upc_a", BarcodeSymbology.UPC_A),
            ("UPCE", BarcodeSymbology.UPC_E),
            ("CODABAR", BarcodeSymbology.CODABAR),
            ("Code 93", BarcodeSymbology.CODE_93),
        ],
    )
    def test_library_names(self, name, expected):
        assert resolve_hint(name) == expected

    @pytest.mark.parametrize("name", ["QR_CODE", "QRCODE", "I25", "Unknown", ""])
    def test_unsupported_names(self, name):
        assert resolve_hint(name) is None


class TestClassifyRetailCodes:
    """Tests for EAN/UPC classification."""

    def test_valid_ean13(self):
        result = classify("4006381333931")
        assert result.symbology == BarcodeSymbology.EAN_13
        assert result.format == "EAN-13"
        assert result.is_valid
        assert result.check_digit == "1"

    def test_invalid_ean13_checksum(self):
        result = classify("4006381333930")
        assert result.format == "EAN-13"
        assert not result.is_valid
        assert result.check_digit == "1"

    @pytest.mark.parametrize(
        "payload",
        ["400638133393", "590123412345", "978020137962", "000000000000", "999999999999"],
    )
    def test_ean13_valid_iff_last_digit_matches(self, payload):
        expected = calculate_ean13_checksum(payload)
        for last in range(10):
            result = classify(payload + str(last))
            assert result.format == "EAN-13"
            assert result.is_valid == (last == expected)

    def test_valid_ean8(self):
        result = classify("96385074")
        assert result.symbology == BarcodeSymbology.EAN_8
        assert result.is_valid
        assert result.check_digit == "4"

    def test_valid_upca(self):
        result = classify("036000291452")
        assert result.symbology == BarcodeSymbology.UPC_A
        assert result.is_valid
        assert result.check_digit == "2"

    def test_invalid_upca(self):
        result = classify("036000291453")
        assert result.symbology == BarcodeSymbology.UPC_A
        assert not result.is_valid

    def test_upce_length_only(self):
        result = classify("1234567")
        assert result.symbology == BarcodeSymbology.UPC_E
        assert result.is_valid
        assert result.check_digit is None


class TestClassifyOtherFormats:
    """Tests for Code39, Code128 and hinted formats."""

    def test_code39_with_delimiters(self):
        result = classify("*CODE39*")
        assert result.symbology == BarcodeSymbology.CODE_39
        assert result.is_valid

    def test_code39_without_delimiters(self):
        result = classify("CODE39")
        assert result.symbology != BarcodeSymbology.CODE_39

        hinted = classify("CODE39", BarcodeSymbology.CODE_39)
        assert hinted.symbology == BarcodeSymbology.CODE_39
        assert not hinted.is_valid

    @pytest.mark.parametrize("code", ["ABC-123", "SKU2024X", "item_00042", "LOT-2024-11-AB"])
    def test_generic_alphanumeric_falls_through_to_code128(self, code):
        result = classify(code)
        assert result.symbology == BarcodeSymbology.CODE_128
        assert result.is_valid
        assert result.check_digit is None

    def test_hint_overrides_detection(self):
        result = classify("4006381333931", "CODE_128")
        assert result.symbology == BarcodeSymbology.CODE_128
        assert result.is_valid
        assert result.check_digit is None

    def test_hinted_ean13_with_wrong_shape(self):
        result = classify("ABC", "EAN_13")
        assert result.symbology == BarcodeSymbology.EAN_13
        assert not result.is_valid
        assert result.check_digit is None

    def test_unsupported_hint_falls_back_to_detection(self):
        result = classify("4006381333931", "QR_CODE")
        assert result.symbology == BarcodeSymbology.EAN_13

    def test_codabar_hint(self):
        result = classify("A40156B", "CODABAR")
        assert result.format == "Codabar"
        assert result.is_valid


class TestClassifyInvalidInput:
    """Tests for inputs that must never raise and never validate."""

    def test_empty_string(self):
        result = classify("")
        assert result.code == ""
        assert result.symbology == BarcodeSymbology.UNKNOWN
        assert not result.is_valid
        assert result.check_digit is None

    def test_whitespace_only(self):
        result = classify("   \n")
        assert result.code == ""
        assert not result.is_valid

    @pytest.mark.parametrize("code", ["café", "4006381333931é", "CRÉME-BRÛLÉE", "*CODE39à*"])
    def test_accented_never_valid(self, code):
        assert not classify(code).is_valid
        for symbology in BarcodeSymbology:
            assert not classify(code, symbology).is_valid

    @pytest.mark.parametrize("code", ["", "a", "12", "A" * 51, "1" * 60])
    def test_length_bounds(self, code):
        for symbology in BarcodeSymbology:
            assert not classify(code, symbology).is_valid

    def test_ui_text_misread(self):
        assert not classify("-&\"'").is_valid
        assert not classify("Entrée").is_valid

    def test_lone_surrogate(self, capsys):
        result = classify("ABC\ud800DEF")
        assert result.symbology == BarcodeSymbology.UNKNOWN
        assert result.is_valid is False
        assert capsys.readouterr().out == ""


class TestClassificationResult:
    """Tests for result shape and stability."""

    def test_code_is_trimmed(self):
        result = classify("  4006381333931\n")
        assert result.code == "4006381333931"
        assert result.is_valid

    def test_group_separator_is_kept(self):
        result = classify("\x1c4006381333931")
        assert result.code == "\x1c4006381333931"
        assert result.symbology == BarcodeSymbology.CODE_128
        assert not result.is_valid

    def test_byte_order_mark_is_trimmed(self):
        result = classify("\ufeff4006381333931\u00a0")
        assert result.code == "4006381333931"
        assert result.symbology == BarcodeSymbology.EAN_13
        assert result.is_valid

    @pytest.mark.parametrize(
        "code",
        ["  4006381333931 ", "*CODE39*", "café", "", " ABC-123 ", "1234567", "&&&&"],
    )
    def test_reclassification_is_stable(self, code):
        first = classify(code)
        assert classify(first.code) == first

    def test_type_and_format_agree(self):
        result = classify("96385074")
        assert result.type == result.symbology
        assert result.format == result.type.value

    def test_result_is_immutable(self):
        result = classify("4006381333931")
        with pytest.raises(ValidationError):
            result.is_valid = False

    def test_description_locale(self):
        assert classify("4006381333931").description.startswith("EAN-13 - European")
        french = classify("4006381333931", locale="fr")
        assert french.description == "EAN-13 - Standard européen pour produits de consommation"

    def test_to_dict(self):
        data = classify("4006381333931").to_dict()
        assert data == {
            "code": "4006381333931",
            "format": "EAN-13",
            "type": "EAN-13",
            "isValid": True,
            "description": "EAN-13 - European standard for consumer products",
            "checkDigit": "1",
        }
