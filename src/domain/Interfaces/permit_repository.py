from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.Models.permit import PermitRecord

class IPermitRepository(ABC):

    @abstractmethod
    def get_all(self) -> List[PermitRecord]:
        pass

    @abstractmethod
    def get_by_plate(self, plate: str) -> Optional[PermitRecord]:
        """Búsqueda exacta tras normalizar mayúsculas y espacios."""
        pass
