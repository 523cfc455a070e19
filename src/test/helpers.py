"""Helpers compartidos por los tests: detecciones, permisos y OCR falso."""
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

from src.domain.Interfaces.text_detector import ITextDetector
from src.domain.Models.permit import PermitRecord, Vehicle
from src.domain.Models.text_detection import DetectionKind, TextDetection

PERMITS_JSON = Path(__file__).resolve().parents[2] / "data" / "permits.json"
FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def lines(*texts: str) -> List[TextDetection]:
    return [TextDetection(text=t, kind=DetectionKind.LINE) for t in texts]


def words(*texts: str) -> List[TextDetection]:
    return [TextDetection(text=t, kind=DetectionKind.WORD) for t in texts]


def make_permit(plate="LGX 137", valid_from=None, valid_to=None, spot=1) -> PermitRecord:
    return PermitRecord(
        plate=plate,
        owner="Test Owner",
        vehicle=Vehicle(make="Toyota", model="Corolla", color="Silver"),
        valid_from=valid_from or datetime(2025, 1, 1, tzinfo=timezone.utc),
        valid_to=valid_to or datetime(2027, 1, 1, tzinfo=timezone.utc),
        spot=spot,
    )


class FakeTextDetector(ITextDetector):
    """OCR falso: devuelve detecciones fijas o lanza el error configurado."""

    def __init__(self, detections: Sequence[TextDetection] = (), error: Exception = None):
        self.detections = list(detections)
        self.error = error
        self.calls: List[bytes] = []

    async def detect_text(self, image: bytes) -> List[TextDetection]:
        self.calls.append(image)
        if self.error is not None:
            raise self.error
        return list(self.detections)


