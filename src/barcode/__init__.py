"""
Barcode classification utilities.

The pyzbar-backed image decoder lives in ``src.barcode.decoder`` and is not
imported here, since loading it requires the ZBar shared library.
"""

from src.barcode.classifier import classify, resolve_hint
from src.barcode.presentation import get_description, get_type_color, get_type_icon
from src.barcode.validator import (
    calculate_ean8_checksum,
    calculate_ean13_checksum,
    check_digit_for,
    detect_symbology,
    is_noise,
    is_valid_barcode,
    validate_ean8_checksum,
    validate_ean13_checksum,
    validate_format,
    validate_upc_checksum,
)

__all__ = [
    "classify",
    "resolve_hint",
    "get_description",
    "get_type_color",
    "get_type_icon",
    "calculate_ean13_checksum",
    "calculate_ean8_checksum",
    "check_digit_for",
    "detect_symbology",
    "is_noise",
    "is_valid_barcode",
    "validate_ean13_checksum",
    "validate_ean8_checksum",
    "validate_format",
    "validate_upc_checksum",
]
