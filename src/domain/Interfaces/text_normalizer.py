from typing import List, Protocol, Sequence
from src.domain.Models.text_detection import TextDetection

class ITextNormalizer(Protocol):
    def normalize(self, detections: Sequence[TextDetection]) -> List[str]: ...
