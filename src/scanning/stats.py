"""
Statistics over a history of classified scans.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.models.barcode import BarcodeSymbology, ClassificationResult


@dataclass(frozen=True)
class TypeStats:
    """Per-type breakdown of a scan history."""

    total: int = 0
    valid_count: int = 0
    counts: list[tuple[BarcodeSymbology, int]] = field(default_factory=list)

    @property
    def validation_rate(self) -> float:
        """Percentage of valid scans, 0 for an empty history."""
        if self.total == 0:
            return 0.0
        return self.valid_count / self.total * 100

    @property
    def most_scanned(self) -> BarcodeSymbology | None:
        return self.counts[0][0] if self.counts else None

    def share(self, symbology: BarcodeSymbology) -> float:
        """Percentage of the history with the given symbology."""
        if self.total == 0:
            return 0.0
        return dict(self.counts).get(symbology, 0) / self.total * 100


def compute_type_stats(results: Iterable[ClassificationResult]) -> TypeStats:
    """
    Count scans per symbology.

    Counts are ordered by frequency; ties keep the order in which the
    symbology first appeared.
    """
    counter: Counter[BarcodeSymbology] = Counter()
    total = 0
    valid_count = 0

    for result in results:
        counter[result.symbology] += 1
        total += 1
        if result.is_valid:
            valid_count += 1

    return TypeStats(
        total=total,
        valid_count=valid_count,
        counts=counter.most_common(),
    )
