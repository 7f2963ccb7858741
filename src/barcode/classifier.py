"""
Barcode classification: symbology resolution, validation and check digit.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from src.barcode.presentation import Locale, get_description
from src.barcode.validator import (
    check_digit_for,
    detect_symbology,
    is_valid_barcode,
)
from src.models.barcode import BarcodeSymbology, ClassificationResult

# Symbology names emitted by scanning libraries (ZXing, pyzbar), keyed by
# their normalized form: upper case without separators
LIBRARY_SYMBOLOGY_NAMES: Mapping[str, BarcodeSymbology] = MappingProxyType({
    "CODE128": BarcodeSymbology.CODE_128,
    "CODE39": BarcodeSymbology.CODE_39,
    "CODE93": BarcodeSymbology.CODE_93,
    "EAN13": BarcodeSymbology.EAN_13,
    "EAN8": BarcodeSymbology.EAN_8,
    "UPCA": BarcodeSymbology.UPC_A,
    "UPCE": BarcodeSymbology.UPC_E,
    "CODABAR": BarcodeSymbology.CODABAR,
})

_SEPARATORS = re.compile(r"[\s_\-]")

# ECMAScript trim set: keeps the \x1c-\x1f separators (GS1 uses \x1d), drops U+FEFF
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def resolve_hint(hint: BarcodeSymbology | str | None) -> BarcodeSymbology | None:
    """
    Map a symbology hint to a known symbology.

    Accepts the enum itself, its display name, or a scanning library name
    such as ``CODE_128`` or ``EAN13``. Returns None when the hint is missing
    or not one of the supported symbologies, so the caller falls back to
    pattern detection.
    """
    if hint is None:
        return None
    if isinstance(hint, BarcodeSymbology):
        return None if hint == BarcodeSymbology.UNKNOWN else hint
    key = _SEPARATORS.sub("", str(hint)).upper()
    return LIBRARY_SYMBOLOGY_NAMES.get(key)


def classify(
    raw_code: str,
    hint: BarcodeSymbology | str | None = None,
    locale: Locale = "en",
) -> ClassificationResult:
    """
    Classify a decoded barcode string.

    Args:
        raw_code: Decoded text from a scanner or manual entry
        hint: Symbology reported by the scanning library, if any
        locale: Language of the description

    Returns:
        Classification result; invalid input yields ``is_valid=False``
    """
    code = raw_code.strip(TRIM_CHARS)

    symbology = resolve_hint(hint)
    if symbology is None:
        symbology = detect_symbology(code)

    return ClassificationResult(
        code=code,
        symbology=symbology,
        is_valid=is_valid_barcode(code, symbology),
        description=get_description(symbology, locale),
        check_digit=check_digit_for(code, symbology),
    )
