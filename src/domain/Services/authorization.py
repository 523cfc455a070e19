from datetime import datetime

from src.domain.Models.permit import PermitRecord


def is_active(permit: PermitRecord, now: datetime) -> bool:
    """El permiso está activo si valid_from <= now <= valid_to (ambos extremos incluidos)."""
    return permit.valid_from <= now <= permit.valid_to
