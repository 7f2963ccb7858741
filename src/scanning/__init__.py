"""
Caller-side scanning helpers built on the classifier.
"""

from src.scanning.session import ScanOutcome, ScanSession, ScanStatus
from src.scanning.stats import TypeStats, compute_type_stats

__all__ = [
    "ScanOutcome",
    "ScanSession",
    "ScanStatus",
    "TypeStats",
    "compute_type_stats",
]
