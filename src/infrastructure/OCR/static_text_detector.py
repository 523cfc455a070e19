from typing import List, Optional, Sequence
from src.domain.Models.text_detection import DetectionKind, TextDetection
from src.domain.Interfaces.text_detector import ITextDetector

class StaticTextDetector(ITextDetector):
    """
    Implementación dummy que devuelve siempre las mismas detecciones.
    Útil en desarrollo sin credenciales de AWS.
    """

    def __init__(self, detections: Optional[Sequence[TextDetection]] = None):
        if detections is None:
            detections = [TextDetection(text="FAKE 123", kind=DetectionKind.LINE, confidence=99.0)]
        self.detections = list(detections)

    async def detect_text(self, image: bytes) -> List[TextDetection]:
        return list(self.detections)
