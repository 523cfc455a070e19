# src/infrastructure/Normalizer/plate_normalizer.py
import logging
import re
from typing import List, Optional, Sequence

from src.core.plate_rules import PlateExtractionPolicy
from src.domain.Interfaces.text_normalizer import ITextNormalizer
from src.domain.Models.text_detection import DetectionKind, TextDetection

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_plate_text(text: Optional[str]) -> str:
    """Recorta, pasa a mayúsculas y colapsa espacios. Forma canónica para comparar placas."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.strip()).upper()


class PlateNormalizer(ITextNormalizer):
    """
    Limpia las líneas del OCR antes de buscar la placa:
    - Solo detecciones de tipo LINE
    - Longitud cruda >= min_line_length
    - Solo letras, dígitos, espacio y los separadores configurados
    - Mayúsculas, sin espacios sobrantes
    - Rechazar si coincide exactamente con la lista de vocabulario no-placa
    """

    def __init__(self, policy: Optional[PlateExtractionPolicy] = None):
        self.policy = policy or PlateExtractionPolicy.build()
        extra = "".join(re.escape(ch) for ch in self.policy.separators if ch != " ")
        self._allowed = re.compile(rf"^[A-Za-z0-9 {extra}]+$")

    def normalize(self, detections: Sequence[TextDetection]) -> List[str]:
        candidates = []

        for d in detections:
            if d.kind != DetectionKind.LINE:
                continue

            raw = d.text or ""
            if len(raw) < self.policy.min_line_length:
                continue
            if not self._allowed.match(raw):
                continue

            line = normalize_plate_text(raw)
            if not line or line in self.policy.denylist:
                continue

            candidates.append(line)

        logger.debug("Normalizer: detections=%d candidates=%d", len(detections), len(candidates))
        return candidates
