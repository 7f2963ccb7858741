"""
Pydantic models for barcode classification results.
"""

from src.models.barcode import BarcodeSymbology, ClassificationResult

__all__ = [
    "BarcodeSymbology",
    "ClassificationResult",
]
