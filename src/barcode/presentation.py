"""
Display lookups per symbology: description copy, badge color and icon.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from src.models.barcode import BarcodeSymbology, ensure_exhaustive

Locale = Literal["en", "fr"]

DESCRIPTIONS_EN: Mapping[BarcodeSymbology, str] = MappingProxyType({
    BarcodeSymbology.CODE_128: "Code 128 - High-density format for alphanumeric data",
    BarcodeSymbology.EAN_13: "EAN-13 - European standard for consumer products",
    BarcodeSymbology.EAN_8: "EAN-8 - Short version for small products",
    BarcodeSymbology.UPC_A: "UPC-A - American standard for consumer products",
    BarcodeSymbology.UPC_E: "UPC-E - Compact UPC version for small spaces",
    BarcodeSymbology.CODE_39: "Code 39 - Industrial alphanumeric format",
    BarcodeSymbology.CODE_93: "Code 93 - Improved version of Code 39",
    BarcodeSymbology.CODABAR: "Codabar - Format for libraries and medical use",
    BarcodeSymbology.UNKNOWN: "Unrecognized barcode format",
})

DESCRIPTIONS_FR: Mapping[BarcodeSymbology, str] = MappingProxyType({
    BarcodeSymbology.CODE_128: "Code 128 - Format haute densité pour données alphanumériques",
    BarcodeSymbology.EAN_13: "EAN-13 - Standard européen pour produits de consommation",
    BarcodeSymbology.EAN_8: "EAN-8 - Version courte pour petits produits",
    BarcodeSymbology.UPC_A: "UPC-A - Standard américain pour produits de consommation",
    BarcodeSymbology.UPC_E: "UPC-E - Version compacte UPC pour petits espaces",
    BarcodeSymbology.CODE_39: "Code 39 - Format alphanumérique industriel",
    BarcodeSymbology.CODE_93: "Code 93 - Version améliorée de Code 39",
    BarcodeSymbology.CODABAR: "Codabar - Format pour bibliothèques et médical",
    BarcodeSymbology.UNKNOWN: "Format de code-barres non reconnu",
})

DESCRIPTIONS: Mapping[str, Mapping[BarcodeSymbology, str]] = MappingProxyType({
    "en": DESCRIPTIONS_EN,
    "fr": DESCRIPTIONS_FR,
})

TYPE_COLORS: Mapping[BarcodeSymbology, str] = MappingProxyType({
    BarcodeSymbology.CODE_128: "bg-blue-100 text-blue-800 border-blue-200",
    BarcodeSymbology.EAN_13: "bg-green-100 text-green-800 border-green-200",
    BarcodeSymbology.EAN_8: "bg-green-100 text-green-800 border-green-200",
    BarcodeSymbology.UPC_A: "bg-purple-100 text-purple-800 border-purple-200",
    BarcodeSymbology.UPC_E: "bg-purple-100 text-purple-800 border-purple-200",
    BarcodeSymbology.CODE_39: "bg-orange-100 text-orange-800 border-orange-200",
    BarcodeSymbology.CODE_93: "bg-orange-100 text-orange-800 border-orange-200",
    BarcodeSymbology.CODABAR: "bg-yellow-100 text-yellow-800 border-yellow-200",
    BarcodeSymbology.UNKNOWN: "bg-gray-100 text-gray-800 border-gray-200",
})

TYPE_ICONS: Mapping[BarcodeSymbology, str] = MappingProxyType({
    BarcodeSymbology.CODE_128: "📊",
    BarcodeSymbology.EAN_13: "🛒",
    BarcodeSymbology.EAN_8: "🛒",
    BarcodeSymbology.UPC_A: "🇺🇸",
    BarcodeSymbology.UPC_E: "🇺🇸",
    BarcodeSymbology.CODE_39: "🏭",
    BarcodeSymbology.CODE_93: "🏭",
    BarcodeSymbology.CODABAR: "📚",
    BarcodeSymbology.UNKNOWN: "❓",
})

for _name, _table in (
    ("DESCRIPTIONS_EN", DESCRIPTIONS_EN),
    ("DESCRIPTIONS_FR", DESCRIPTIONS_FR),
    ("TYPE_COLORS", TYPE_COLORS),
    ("TYPE_ICONS", TYPE_ICONS),
):
    ensure_exhaustive(_table, _name)


def get_description(symbology: BarcodeSymbology, locale: Locale = "en") -> str:
    """Display sentence for a symbology; unknown locales fall back to English."""
    return DESCRIPTIONS.get(locale, DESCRIPTIONS_EN)[symbology]


def get_type_color(symbology: BarcodeSymbology) -> str:
    """CSS classes for the symbology badge."""
    return TYPE_COLORS[symbology]


def get_type_icon(symbology: BarcodeSymbology) -> str:
    return TYPE_ICONS[symbology]
