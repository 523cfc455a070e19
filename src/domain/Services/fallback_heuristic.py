# src/domain/Services/fallback_heuristic.py
import re
from typing import Optional, Sequence

_ALNUM = re.compile(r"^[A-Z0-9]+$")
_BARE_YEAR = re.compile(r"^\d{4}$")


class FallbackPlateHeuristic:
    """
    Último recurso cuando ningún patrón coincide: la primera candidata que,
    sin espacios, tenga entre min_len y max_len caracteres alfanuméricos y no
    sea un número de 4 dígitos (año del modelo, códigos promocionales).
    """

    def __init__(self, min_len: int = 3, max_len: int = 8):
        self.min_len = min_len
        self.max_len = max_len

    def accepts(self, candidate: str) -> bool:
        compact = "".join(candidate.split()).upper()
        if not (self.min_len <= len(compact) <= self.max_len):
            return False
        if not _ALNUM.match(compact):
            return False
        return not _BARE_YEAR.match(compact)

    def select(self, candidates: Sequence[str]) -> Optional[str]:
        for c in candidates:
            if self.accepts(c):
                return c
        return None
