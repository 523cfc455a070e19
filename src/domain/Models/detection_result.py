# src/domain/Models/detection_result.py
from dataclasses import dataclass
from typing import Optional
from src.domain.Models.permit import PermitRecord

@dataclass
class DetectionResult:
    """
    Resultado de una petición de detección o consulta de placa.
    plate=None significa "no se identificó una placa con confianza", no un error.
    """
    plate: Optional[str]
    is_authorized: bool
    permit: Optional[PermitRecord] = None

    def to_dict(self) -> dict:
        """Convierte a dict serializable."""
        return {
            "plate": self.plate,
            "isAuthorized": self.is_authorized,
            "permit": self.permit.to_dict() if self.permit else None,
        }
