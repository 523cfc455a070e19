from abc import ABC, abstractmethod
from typing import List
from src.domain.Models.text_detection import TextDetection

class ITextDetector(ABC):
    """
    Colaborador OCR: recibe los bytes de la imagen y devuelve las líneas/palabras detectadas.
    """
    @abstractmethod
    async def detect_text(self, image: bytes) -> List[TextDetection]:
        """
        Devuelve las detecciones en el orden del proveedor.
        Cualquier fallo del proveedor se propaga como TextDetectionError, sin reintentos.
        """
        pass
