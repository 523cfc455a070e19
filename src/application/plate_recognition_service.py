import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from src.core.config import Settings
from src.core.errors import TextDetectionError
from src.core.plate_rules import PlateExtractionPolicy
from src.domain.Interfaces.permit_repository import IPermitRepository
from src.domain.Interfaces.text_detector import ITextDetector
from src.domain.Models.detection_result import DetectionResult
from src.domain.Models.permit import PermitRecord
from src.domain.Services.authorization import is_active
from src.domain.Services.fallback_heuristic import FallbackPlateHeuristic
from src.domain.Services.plate_extractor import PlateExtractor
from src.domain.Services.plate_pattern_matcher import PlatePatternMatcher
from src.infrastructure.Normalizer.plate_normalizer import PlateNormalizer, normalize_plate_text
from src.monitoring.metrics import (
    ocr_failures_total, permit_lookups_total, plate_detection_misses_total, plates_detected_total
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_plate_extractor(policy: PlateExtractionPolicy) -> PlateExtractor:
    return PlateExtractor(
        normalizer=PlateNormalizer(policy),
        matcher=PlatePatternMatcher(policy.patterns),
        fallback=FallbackPlateHeuristic(policy.fallback_min_length, policy.fallback_max_length),
    )


class PlateRecognitionService:
    """
    Orquesta las tres operaciones del API:
    - detect_plate: OCR -> extracción de placa -> directorio -> autorización
    - lookup_plate: directorio -> autorización, sin OCR
    - list_permits: tabla completa

    Sin estado mutable propio: el extractor y el directorio son de solo lectura.
    """

    def __init__(
        self,
        text_detector: ITextDetector,
        permits: IPermitRepository,
        extractor: PlateExtractor,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.text_detector = text_detector
        self.permits = permits
        self.extractor = extractor
        self.clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        text_detector: ITextDetector,
        permits: IPermitRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> "PlateRecognitionService":
        policy = PlateExtractionPolicy.from_settings(settings)
        return cls(text_detector, permits, build_plate_extractor(policy), clock=clock)

    # ---------------------------------------------------------
    # DETECT
    # ---------------------------------------------------------
    async def detect_plate(self, image: bytes) -> DetectionResult:
        try:
            detections = await self.text_detector.detect_text(image)
        except TextDetectionError:
            raise
        except Exception as e:
            ocr_failures_total.inc()
            raise TextDetectionError(f"OCR falló: {e}") from e

        guess = self.extractor.guess(detections)
        if guess is None:
            plate_detection_misses_total.inc()
            logger.debug("Sin placa entre %d detecciones", len(detections))
            return DetectionResult(plate=None, is_authorized=False, permit=None)

        plates_detected_total.labels(source=guess.source).inc()
        permit = self.permits.get_by_plate(guess.text)
        return DetectionResult(
            plate=guess.text,
            is_authorized=self._authorize(permit),
            permit=permit,
        )

    # ---------------------------------------------------------
    # LOOKUP
    # ---------------------------------------------------------
    def lookup_plate(self, plate: str) -> DetectionResult:
        permit = self.permits.get_by_plate(plate)
        return DetectionResult(
            plate=permit.plate if permit else plate,
            is_authorized=self._authorize(permit),
            permit=permit,
        )

    def list_permits(self) -> List[PermitRecord]:
        return self.permits.get_all()

    def _authorize(self, permit: Optional[PermitRecord]) -> bool:
        if permit is None:
            permit_lookups_total.labels(result="unknown").inc()
            return False

        active = is_active(permit, self.clock())
        permit_lookups_total.labels(result="authorized" if active else "inactive").inc()
        if not active:
            logger.info("Permiso de %s fuera de vigencia", normalize_plate_text(permit.plate))
        return active
