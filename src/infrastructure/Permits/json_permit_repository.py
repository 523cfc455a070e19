# src/infrastructure/Permits/json_permit_repository.py
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Optional, Union

from src.core.errors import PermitDataError
from src.domain.Interfaces.permit_repository import IPermitRepository
from src.domain.Models.permit import PermitRecord
from src.infrastructure.Normalizer.plate_normalizer import normalize_plate_text

logger = logging.getLogger(__name__)


class JsonPermitRepository(IPermitRepository):
    """
    Directorio de permisos de solo lectura.
    Se carga una vez al arrancar; las lecturas concurrentes no necesitan locks.
    """

    def __init__(self, permits: Iterable[PermitRecord]):
        self._permits = tuple(permits)
        index = {}
        for p in self._permits:
            key = normalize_plate_text(p.plate)
            if key in index:
                logger.warning("Placa duplicada en la tabla de permisos: %s (se conserva la primera)", key)
                continue
            index[key] = p
        self._by_plate = MappingProxyType(index)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "JsonPermitRepository":
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PermitDataError(f"No se pudo leer la tabla de permisos {path}: {e}") from e

        if not isinstance(raw, list):
            raise PermitDataError(f"{path}: se esperaba un array JSON de permisos")

        permits = []
        for i, item in enumerate(raw):
            try:
                permits.append(PermitRecord.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                raise PermitDataError(f"{path}: permiso #{i} inválido: {e}") from e

        logger.info("✅ %d permisos cargados desde %s", len(permits), path)
        return cls(permits)

    def get_all(self) -> List[PermitRecord]:
        return list(self._permits)

    def get_by_plate(self, plate: str) -> Optional[PermitRecord]:
        return self._by_plate.get(normalize_plate_text(plate))
