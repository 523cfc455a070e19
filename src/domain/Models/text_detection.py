from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DetectionKind(str, Enum):
    LINE = "LINE"
    WORD = "WORD"


@dataclass(frozen=True)
class TextDetection:
    """
    Texto detectado por el colaborador OCR.
    El orden de la lista devuelta por el OCR aproxima el orden vertical en la imagen.
    """
    text: str
    kind: DetectionKind
    confidence: Optional[float] = None   # 0-100 en Rekognition, 0-1 en EasyOCR
