"""
Barcode classification models.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies. The value is the display name."""

    CODE_128 = "Code128"
    CODE_39 = "Code39"
    CODE_93 = "Code93"
    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    CODABAR = "Codabar"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        """Human-readable format name."""
        return self.value


def ensure_exhaustive(table: Mapping[BarcodeSymbology, Any], name: str) -> None:
    """Raise if a lookup table keyed by symbology misses a member."""
    missing = [s.value for s in BarcodeSymbology if s not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


class ClassificationResult(BaseModel):
    """
    Classification of a single decoded barcode string.

    Immutable; a new instance is produced for every classification call.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Trimmed input string")
    symbology: BarcodeSymbology = Field(default=BarcodeSymbology.UNKNOWN)
    is_valid: bool = Field(False, description="Shape, checksum and noise checks passed")
    description: str = Field("", description="Display sentence for the format")
    check_digit: str | None = Field(
        None, description="Recomputed check digit (EAN-13, EAN-8, UPC-A only)"
    )

    @property
    def format(self) -> str:
        """Display name of the symbology."""
        return self.symbology.display_name

    @property
    def type(self) -> BarcodeSymbology:
        return self.symbology

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the field names the scanner UI consumes."""
        return {
            "code": self.code,
            "format": self.format,
            "type": self.symbology.value,
            "isValid": self.is_valid,
            "description": self.description,
            "checkDigit": self.check_digit,
        }
