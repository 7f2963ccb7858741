"""
Barcode validation utilities.

Checksum calculators for the EAN/UPC family, the false-positive (noise) filter,
per-symbology validators and pattern-based symbology detection.
"""

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from src.models.barcode import BarcodeSymbology, ensure_exhaustive

ACCENTED_CHARS = "àáâãäåæçèéêëìíîïñòóôõöøùúûüý"
TYPOGRAPHIC_CHARS = "'\"„‚“”‘’–—…"

MIN_CODE_LENGTH = 3
MAX_CODE_LENGTH = 50

_ACCENTED = re.compile(f"[{ACCENTED_CHARS}]", re.IGNORECASE)
_INVALID_CHARS = re.compile(f"[{ACCENTED_CHARS}{re.escape(TYPOGRAPHIC_CHARS)}]", re.IGNORECASE)
_SPECIAL_CHAR_RUN = re.compile(r"[&\"'<>%@#$]{3,}")
_ONLY_SYMBOLS = re.compile(r"[^a-zA-Z0-9]{2,}")

_CODE39_CHARSET = re.compile(r"[0-9A-Z\-. $/+%*]+")
_ASCII = re.compile(r"[\x00-\x7f]+")
_PRINTABLE_ASCII = re.compile(r"[\x20-\x7e]+")

# Shapes seen when the camera reads UI labels or French words as Code128
_CODE128_SUSPICIOUS = (
    re.compile(r"[-&\"'àéèç\s]+", re.ASCII),
    re.compile(r"[^\w\s]{3,}", re.ASCII),
)


def _is_digits(code: str, length: int | None = None) -> bool:
    if length is not None and len(code) != length:
        return False
    return re.fullmatch(r"[0-9]+", code) is not None


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 1
    2. Multiply digits at even positions (2, 4, 6, ...) by 3
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10
    """
    if len(code) < 12:
        raise ValueError("Code must have at least 12 digits for EAN-13")

    total = 0
    for i, digit in enumerate(code[:12]):
        if digit not in "0123456789":
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 1 if i % 2 == 0 else 3
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def calculate_ean8_checksum(code: str) -> int:
    """
    Calculate EAN-8 checksum digit.

    Same formula as EAN-13 over 7 digits, with the weights mirrored:
    odd positions (1, 3, 5, 7) have weight 3.
    """
    if len(code) < 7:
        raise ValueError("Code must have at least 7 digits for EAN-8")

    total = 0
    for i, digit in enumerate(code[:7]):
        if digit not in "0123456789":
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def ean13_check_digit(code: str) -> str | None:
    """Check digit for a full 13-digit EAN code, or None if it is not one."""
    if not _is_digits(code, 13):
        return None
    return str(calculate_ean13_checksum(code))


def ean8_check_digit(code: str) -> str | None:
    """Check digit for a full 8-digit EAN code, or None if it is not one."""
    if not _is_digits(code, 8):
        return None
    return str(calculate_ean8_checksum(code))


def upca_check_digit(code: str) -> str | None:
    """UPC-A shares the EAN-13 check digit of the zero-padded code."""
    if not _is_digits(code, 12):
        return None
    return ean13_check_digit("0" + code)


def check_digit_for(code: str, symbology: BarcodeSymbology) -> str | None:
    """
    Recompute the check digit of a code for its symbology.

    Returns None for symbologies without a check digit and for codes whose
    length does not match the symbology.
    """
    if symbology == BarcodeSymbology.EAN_13:
        return ean13_check_digit(code)
    elif symbology == BarcodeSymbology.EAN_8:
        return ean8_check_digit(code)
    elif symbology == BarcodeSymbology.UPC_A:
        return upca_check_digit(code)
    return None


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    expected = ean13_check_digit(code)
    return expected is not None and expected == code[-1]


def validate_ean8_checksum(code: str) -> bool:
    """
    Validate EAN-8 checksum.

    Args:
        code: 8-digit EAN code

    Returns:
        True if checksum is valid
    """
    expected = ean8_check_digit(code)
    return expected is not None and expected == code[-1]


def validate_upc_checksum(code: str) -> bool:
    """
    Validate UPC-A checksum.

    UPC-A is EAN-13 with a leading 0, so the 12-digit code is validated
    as the corresponding 13-digit EAN.
    """
    if not _is_digits(code, 12):
        return False
    return validate_ean13_checksum("0" + code)


def validate_code128(code: str) -> bool:
    """Printable ASCII, 4-48 characters, and not shaped like misread text."""
    if _PRINTABLE_ASCII.fullmatch(code) is None:
        return False
    if len(code) < 4 or len(code) > 48:
        return False
    if any(pattern.fullmatch(code) for pattern in _CODE128_SUSPICIOUS):
        return False
    return _ACCENTED.search(code) is None


def validate_code39(code: str) -> bool:
    """Code 39 charset, 3-43 characters, framed by the '*' start/stop character."""
    if _CODE39_CHARSET.fullmatch(code) is None:
        return False
    if len(code) < 3 or len(code) > 43:
        return False
    return code.startswith("*") and code.endswith("*")


def validate_length_only(code: str) -> bool:
    # Code 93, Codabar and UPC-E: no checksum verification
    return MIN_CODE_LENGTH <= len(code) <= MAX_CODE_LENGTH


# Noise rules, evaluated in order; the first match names the rejection reason
NOISE_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (lambda code: len(code) < MIN_CODE_LENGTH, "too short"),
    (lambda code: len(code) > MAX_CODE_LENGTH, "too long"),
    (lambda code: _INVALID_CHARS.search(code) is not None, "accented or typographic character"),
    (lambda code: _SPECIAL_CHAR_RUN.search(code) is not None, "special character sequence"),
    (lambda code: _ONLY_SYMBOLS.fullmatch(code) is not None, "no alphanumeric character"),
)


def noise_reason(code: str) -> str | None:
    """Reason a code looks like a misread of ordinary text, or None if it does not."""
    for predicate, reason in NOISE_RULES:
        if predicate(code):
            return reason
    return None


def is_noise(code: str) -> bool:
    """Check whether a code looks like a camera misread rather than a barcode."""
    return noise_reason(code) is not None


FORMAT_VALIDATORS: Mapping[BarcodeSymbology, Callable[[str], bool]] = MappingProxyType({
    BarcodeSymbology.EAN_13: validate_ean13_checksum,
    BarcodeSymbology.EAN_8: validate_ean8_checksum,
    BarcodeSymbology.UPC_A: validate_upc_checksum,
    BarcodeSymbology.CODE_128: validate_code128,
    BarcodeSymbology.CODE_39: validate_code39,
    BarcodeSymbology.CODE_93: validate_length_only,
    BarcodeSymbology.CODABAR: validate_length_only,
    BarcodeSymbology.UPC_E: validate_length_only,
    BarcodeSymbology.UNKNOWN: lambda code: False,
})
ensure_exhaustive(FORMAT_VALIDATORS, "FORMAT_VALIDATORS")


def validate_format(code: str, symbology: BarcodeSymbology) -> bool:
    """Structural and checksum validation of a code for a given symbology."""
    return FORMAT_VALIDATORS[symbology](code)


def is_valid_barcode(code: str, symbology: BarcodeSymbology) -> bool:
    """
    Validate a barcode completely.

    The noise filter runs first and rejects regardless of symbology.
    """
    if is_noise(code):
        return False
    return validate_format(code, symbology)


# Detection rules, evaluated in order; digit-only retail shapes come first and
# the permissive Code128 rule last
DETECTION_RULES: tuple[tuple[Callable[[str], bool], BarcodeSymbology], ...] = (
    (lambda code: _is_digits(code, 13), BarcodeSymbology.EAN_13),
    (lambda code: _is_digits(code, 8), BarcodeSymbology.EAN_8),
    (lambda code: _is_digits(code, 12), BarcodeSymbology.UPC_A),
    (lambda code: len(code) in (6, 7, 8) and _is_digits(code), BarcodeSymbology.UPC_E),
    (
        lambda code: _CODE39_CHARSET.fullmatch(code) is not None
        and code.startswith("*")
        and code.endswith("*"),
        BarcodeSymbology.CODE_39,
    ),
    (lambda code: len(code) >= 4 and _ASCII.fullmatch(code) is not None, BarcodeSymbology.CODE_128),
)


def detect_symbology(code: str) -> BarcodeSymbology:
    """
    Detect barcode symbology from the shape of the code.

    Args:
        code: Barcode string

    Returns:
        Detected symbology, UNKNOWN if no rule matches
    """
    for predicate, symbology in DETECTION_RULES:
        if predicate(code):
            return symbology
    return BarcodeSymbology.UNKNOWN

