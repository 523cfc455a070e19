# src/domain/Services/plate_pattern_matcher.py
import logging
from typing import Optional, Sequence, Tuple

from src.domain.Models.plate_pattern import PlatePattern

logger = logging.getLogger(__name__)


class PlatePatternMatcher:
    """
    Busca la primera línea candidata que encaje con algún patrón de placa.

    Dos pasadas:
        1) cada candidata por separado, en orden
        2) pares adyacentes "c[i] c[i+1]" (placas impresas en dos filas que el
           OCR reporta como dos líneas)

    Para cada candidata los patrones se prueban en su orden de prioridad y gana
    el primero que coincide. Determinista y sin efectos sobre la entrada.
    """

    def __init__(self, patterns: Sequence[PlatePattern]):
        self.patterns: Tuple[PlatePattern, ...] = tuple(sorted(patterns, key=lambda p: p.priority))

    def first_pattern(self, candidate: str) -> Optional[PlatePattern]:
        for pattern in self.patterns:
            if pattern.matches(candidate):
                return pattern
        return None

    def match_single(self, candidates: Sequence[str]) -> Optional[str]:
        for c in candidates:
            pattern = self.first_pattern(c)
            if pattern is not None:
                logger.debug("Línea '%s' coincide con patrón #%d", c, pattern.priority)
                return c
        return None

    def match_pairs(self, candidates: Sequence[str]) -> Optional[str]:
        for first, second in zip(candidates, candidates[1:]):
            joined = " ".join(f"{first} {second}".split())
            pattern = self.first_pattern(joined)
            if pattern is not None:
                logger.debug("Par '%s' coincide con patrón #%d", joined, pattern.priority)
                return joined
        return None

    def match(self, candidates: Sequence[str]) -> Optional[str]:
        return self.match_single(candidates) or self.match_pairs(candidates)
