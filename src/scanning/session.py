"""
Scan session: duplicate suppression and valid-only acceptance for a scanner.

A scanner fires once per decoded frame, so the same code arrives many times
in a row. The session ignores a repeat of the last accepted code for a short
window and only accepts codes the classifier considers valid.
"""

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog

from src.barcode.classifier import TRIM_CHARS, classify
from src.barcode.presentation import Locale
from src.config import Settings
from src.models.barcode import BarcodeSymbology, ClassificationResult

logger = structlog.get_logger(__name__)


class ScanStatus(str, Enum):
    """What the session did with a submitted code."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class ScanOutcome:
    """Result of submitting a code to a session."""

    status: ScanStatus
    result: ClassificationResult | None = None

    @property
    def accepted(self) -> bool:
        return self.status == ScanStatus.ACCEPTED


class ScanSession:
    """
    Per-scanner state: last accepted code, scan counter and recent history.

    Not thread-safe; use one session per scanner.
    """

    def __init__(
        self,
        duplicate_window: float = 3.0,
        history_size: int = 5,
        locale: Locale = "en",
        clock: Callable[[], float] = time.monotonic,
    ):
        if duplicate_window < 0:
            raise ValueError("duplicate_window must not be negative")
        if history_size < 1:
            raise ValueError("history_size must be at least 1")

        self.duplicate_window = duplicate_window
        self.locale = locale
        self._clock = clock
        self._history: deque[ClassificationResult] = deque(maxlen=history_size)
        self._last_code: str | None = None
        self._last_accepted_at = 0.0
        self.scan_count = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScanSession":
        """Create a session configured from application settings."""
        return cls(
            duplicate_window=settings.scan_duplicate_window,
            history_size=settings.scan_history_size,
            locale=settings.description_locale,
        )

    @property
    def history(self) -> list[ClassificationResult]:
        """Recently accepted results, newest first."""
        return list(self._history)

    @property
    def last_code(self) -> str | None:
        return self._last_code

    def is_duplicate(self, code: str) -> bool:
        """Check whether a code repeats the last accepted one within the window."""
        if self._last_code is None or code.strip(TRIM_CHARS) != self._last_code:
            return False
        return self._clock() - self._last_accepted_at < self.duplicate_window

    def submit(
        self,
        raw_code: str,
        hint: BarcodeSymbology | str | None = None,
    ) -> ScanOutcome:
        """
        Classify a scanned code and record it if it is accepted.

        Args:
            raw_code: Decoded text from the scanner
            hint: Symbology reported by the scanning library

        Returns:
            Outcome with the classification (None for duplicates)
        """
        if self.is_duplicate(raw_code):
            return ScanOutcome(ScanStatus.DUPLICATE)

        result = classify(raw_code, hint, locale=self.locale)

        if not result.is_valid:
            logger.info("Invalid barcode skipped", code=result.code, symbology=result.format)
            return ScanOutcome(ScanStatus.REJECTED, result)

        self._last_code = result.code
        self._last_accepted_at = self._clock()
        self.scan_count += 1
        self._history.appendleft(result)

        logger.info(
            "Barcode accepted",
            code=result.code,
            symbology=result.format,
            scan_count=self.scan_count,
        )
        return ScanOutcome(ScanStatus.ACCEPTED, result)

    def reset(self) -> None:
        """Forget the last code, the counter and the history."""
        self._history.clear()
        self._last_code = None
        self._last_accepted_at = 0.0
        self.scan_count = 0
