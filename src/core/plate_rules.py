# src/core/plate_rules.py
"""
Reglas estáticas de extracción de placas.

El orden de DEFAULT_PLATE_PATTERNS es la prioridad: gana el primer patrón
que coincide, así que los patrones amplios (con forma de "fallback") van
al final. Cada plantilla usa el marcador `{sep}`, que se sustituye por la
clase de separadores permitidos (espacio + PLATE_SEPARATORS).
"""
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from src.domain.Models.plate_pattern import PlatePattern

SEP_PLACEHOLDER = "{sep}"

DEFAULT_PLATE_PATTERNS: Tuple[str, ...] = (
    # ABC 123 / ABC-1234
    r"^[A-Z]{3}{sep}?\d{3,4}$",
    # 1ABC234 (formato California)
    r"^\d[A-Z]{3}{sep}?\d{3}$",
    # 123 ABC / 123-ABCD
    r"^\d{3}{sep}?[A-Z]{3,4}$",
    # AB1 2345 (placas de dos filas de moto/remolque)
    r"^[A-Z]{2}\d{sep}?\d{3,4}$",
    # AB 12345
    r"^[A-Z]{1,2}{sep}?\d{4,5}$",
    # 12A B34: bloques alfanuméricos con separador, al menos una letra y un dígito
    r"^(?=.*[A-Z])(?=.*\d)[A-Z0-9]{2,4}{sep}[A-Z0-9]{2,4}$",
)

# Vocabulario que aparece en la superficie de la placa pero no es la placa:
# estados, lemas, concesionarios, campañas.
DEFAULT_DENYLIST: Tuple[str, ...] = (
    "USA",
    "CALIFORNIA",
    "TEXAS",
    "FLORIDA",
    "NEW YORK",
    "ARIZONA",
    "OREGON",
    "WASHINGTON",
    "NEVADA",
    "COLORADO",
    "THE GOLDEN STATE",
    "SUNSHINE STATE",
    "THE LONE STAR STATE",
    "EMPIRE STATE",
    "GRAND CANYON STATE",
    "EVERGREEN STATE",
    "SILVER STATE",
    "DMV",
    "DEALER",
    "PARKING",
    "PERMIT",
    "VISITOR",
    "STAFF",
    "RESERVED",
    "STADIUM",
    "ARENA",
    "CAMPUS",
    "GO TEAM",
    "VOTE",
    "EXPIRES",
)


def separator_class(separators: str) -> str:
    """Clase regex de separadores: el espacio siempre, más los configurados."""
    extra = "".join(re.escape(ch) for ch in separators if ch != " ")
    return f"[ {extra}]"


def compile_patterns(templates: Iterable[str], separators: str) -> Tuple[PlatePattern, ...]:
    sep = separator_class(separators)
    compiled = []
    for priority, template in enumerate(templates):
        compiled.append(PlatePattern(
            template=template,
            regex=re.compile(template.replace(SEP_PLACEHOLDER, sep)),
            priority=priority,
        ))
    return tuple(compiled)


@dataclass(frozen=True)
class PlateExtractionPolicy:
    """
    Configuración inmutable de la heurística de extracción.
    Se construye una sola vez al arrancar y se comparte entre peticiones.
    """
    patterns: Tuple[PlatePattern, ...]
    denylist: frozenset
    separators: str = "-"
    min_line_length: int = 3
    fallback_min_length: int = 3
    fallback_max_length: int = 8

    @classmethod
    def build(
        cls,
        pattern_templates: Iterable[str] = DEFAULT_PLATE_PATTERNS,
        denylist: Iterable[str] = DEFAULT_DENYLIST,
        separators: str = "-",
        min_line_length: int = 3,
        fallback_min_length: int = 3,
        fallback_max_length: int = 8,
    ) -> "PlateExtractionPolicy":
        return cls(
            patterns=compile_patterns(pattern_templates, separators),
            denylist=frozenset(" ".join(w.split()).upper() for w in denylist),
            separators=separators,
            min_line_length=min_line_length,
            fallback_min_length=fallback_min_length,
            fallback_max_length=fallback_max_length,
        )

    @classmethod
    def from_settings(cls, settings) -> "PlateExtractionPolicy":
        return cls.build(
            pattern_templates=settings.plate_patterns,
            denylist=settings.plate_denylist,
            separators=settings.plate_separators,
            min_line_length=settings.plate_min_line_length,
            fallback_min_length=settings.fallback_min_length,
            fallback_max_length=settings.fallback_max_length,
        )
