from dataclasses import dataclass
from typing import Pattern


@dataclass(frozen=True)
class PlatePattern:
    """
    Forma de un formato regional de placa.
    `priority` es la posición en la lista configurada (0 = se prueba primero).
    """
    template: str      # plantilla original con el marcador {sep}
    regex: Pattern     # expresión compilada
    priority: int

    def matches(self, candidate: str) -> bool:
        return self.regex.match(candidate) is not None
