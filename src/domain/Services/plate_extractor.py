# src/domain/Services/plate_extractor.py
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.domain.Interfaces.text_normalizer import ITextNormalizer
from src.domain.Models.text_detection import TextDetection
from src.domain.Services.fallback_heuristic import FallbackPlateHeuristic
from src.domain.Services.plate_pattern_matcher import PlatePatternMatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlateGuess:
    text: str
    source: str   # "pattern" | "pair" | "fallback"


class PlateExtractor:
    """
    Pipeline de extracción: Normalizer -> PatternMatcher -> (si nada) Fallback.
    Síncrono y sin efectos secundarios; se puede probar sin red.
    """

    def __init__(
        self,
        normalizer: ITextNormalizer,
        matcher: PlatePatternMatcher,
        fallback: FallbackPlateHeuristic,
    ):
        self.normalizer = normalizer
        self.matcher = matcher
        self.fallback = fallback

    def guess(self, detections: Sequence[TextDetection]) -> Optional[PlateGuess]:
        candidates = self.normalizer.normalize(detections)
        if not candidates:
            return None

        single = self.matcher.match_single(candidates)
        if single:
            return PlateGuess(single, "pattern")

        pair = self.matcher.match_pairs(candidates)
        if pair:
            return PlateGuess(pair, "pair")

        chosen = self.fallback.select(candidates)
        if chosen:
            logger.debug("Sin patrón; fallback eligió '%s' de %d candidatas", chosen, len(candidates))
            return PlateGuess(chosen, "fallback")
        return None

    def extract_plate(self, detections: Sequence[TextDetection]) -> Optional[str]:
        result = self.guess(detections)
        return result.text if result else None
