"""
Still-image barcode decoder using pyzbar (ZBar) library.

Every decoded symbol is passed through the classifier with the symbology
ZBar reported as hint.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from io import BytesIO

import numpy as np
import structlog
from PIL import Image
from pyzbar import pyzbar
from pyzbar.pyzbar import Decoded, ZBarSymbol

from src.barcode.classifier import classify
from src.barcode.presentation import Locale
from src.config import Settings
from src.models.barcode import ClassificationResult

logger = structlog.get_logger(__name__)


@dataclass
class DecodedBarcode:
    """A barcode found in an image, with its classification."""

    classification: ClassificationResult
    raw_symbology: str
    rotation: int
    rect: tuple[int, int, int, int] | None = None  # x, y, width, height
    polygon: list[tuple[int, int]] | None = None

    @property
    def code(self) -> str:
        return self.classification.code

    @property
    def is_valid(self) -> bool:
        return self.classification.is_valid


class BarcodeDecoder:
    """
    Barcode decoder using ZBar via pyzbar.

    Supports the linear symbologies the classifier knows:
    Code 128, Code 39, Code 93, Codabar, EAN-13, EAN-8, UPC-A, UPC-E.
    """

    SCAN_SYMBOLS = [
        ZBarSymbol.CODE128,
        ZBarSymbol.CODE39,
        ZBarSymbol.CODE93,
        ZBarSymbol.CODABAR,
        ZBarSymbol.EAN13,
        ZBarSymbol.EAN8,
        ZBarSymbol.UPCA,
        ZBarSymbol.UPCE,
    ]

    def __init__(
        self,
        try_rotations: bool = True,
        rotation_angles: list[int] | None = None,
        locale: Locale = "en",
    ):
        """
        Initialize decoder.

        Args:
            try_rotations: Whether to try multiple rotations
            rotation_angles: Specific angles to try (default: [0, 180])
            locale: Language of the classification descriptions
        """
        self.try_rotations = try_rotations
        self.rotation_angles = rotation_angles or [0, 180]
        self.locale = locale

    @classmethod
    def from_settings(cls, settings: Settings) -> "BarcodeDecoder":
        """Create a decoder configured from application settings."""
        return cls(
            try_rotations=True,
            rotation_angles=settings.decoder_rotation_angles,
            locale=settings.description_locale,
        )

    def decode(
        self,
        image_data: bytes | BytesIO | np.ndarray | Image.Image,
    ) -> list[DecodedBarcode]:
        """
        Decode barcodes from an image.

        Args:
            image_data: Image as bytes, BytesIO, numpy array, or PIL Image

        Returns:
            One entry per distinct decoded code
        """
        pil_image = self._to_pil_image(image_data)

        if pil_image.mode != "L":
            pil_image = pil_image.convert("L")

        angles = self.rotation_angles if self.try_rotations else [0]

        all_results: list[DecodedBarcode] = []
        seen_codes: set[str] = set()

        for angle in angles:
            rotated = pil_image.rotate(angle, expand=True) if angle != 0 else pil_image
            for result in self._decode_image(rotated, angle):
                if result.code not in seen_codes:
                    seen_codes.add(result.code)
                    all_results.append(result)

        logger.debug(
            "Decoded image",
            found=len(all_results),
            valid=sum(1 for r in all_results if r.is_valid),
        )
        return all_results

    def decode_file(self, file_path: str) -> list[DecodedBarcode]:
        """Decode barcodes from an image file."""
        with open(file_path, "rb") as f:
            return self.decode(f.read())

    def _to_pil_image(
        self,
        image_data: bytes | BytesIO | np.ndarray | Image.Image,
    ) -> Image.Image:
        """Convert various image formats to PIL Image."""
        if isinstance(image_data, Image.Image):
            return image_data
        elif isinstance(image_data, np.ndarray):
            return Image.fromarray(image_data)
        elif isinstance(image_data, bytes):
            return Image.open(BytesIO(image_data))
        elif isinstance(image_data, BytesIO):
            return Image.open(image_data)
        else:
            raise TypeError(f"Unsupported image type: {type(image_data)}")

    def _decode_image(self, image: Image.Image, rotation: int) -> list[DecodedBarcode]:
        """Decode barcodes from a single image orientation."""
        try:
            decoded_objects: Sequence[Decoded] = pyzbar.decode(
                image,
                symbols=self.SCAN_SYMBOLS,
            )
        except Exception as e:
            logger.error("ZBar decoding failed", rotation=rotation, error=str(e))
            return []

        results: list[DecodedBarcode] = []
        for obj in decoded_objects:
            result = self._process_decoded(obj, rotation)
            if result:
                results.append(result)
        return results

    def _process_decoded(self, decoded: Decoded, rotation: int) -> DecodedBarcode | None:
        """Classify a decoded symbol, skipping payloads that are not text."""
        try:
            code = decoded.data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping non UTF-8 payload", symbology=decoded.type)
            return None

        rect = decoded.rect
        polygon = [(p.x, p.y) for p in decoded.polygon] if decoded.polygon else None

        return DecodedBarcode(
            classification=classify(code, decoded.type, locale=self.locale),
            raw_symbology=decoded.type,
            rotation=rotation,
            rect=(rect.left, rect.top, rect.width, rect.height) if rect else None,
            polygon=polygon,
        )

