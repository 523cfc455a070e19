# src/domain/Models/permit.py
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def parse_timestamp(value: Any) -> datetime:
    """ISO-8601 o epoch en segundos -> datetime con zona; sin zona se asume UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(value, tz=timezone.utc)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class Vehicle:
    make: str
    model: str
    color: str

    def to_dict(self) -> dict:
        return {"make": self.make, "model": self.model, "color": self.color}


@dataclass(frozen=True)
class PermitRecord:
    """
    Permiso de estacionamiento para una placa, válido en [valid_from, valid_to].
    Solo lectura: se carga al arrancar y no cambia durante la vida del proceso.
    """
    plate: str
    owner: str
    vehicle: Vehicle
    valid_from: datetime
    valid_to: datetime
    spot: int

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PermitRecord":
        """Convierte un registro JSON (claves camelCase) a modelo de dominio."""
        vehicle = data.get("vehicle") or {}
        return PermitRecord(
            plate=str(data["plate"]),
            owner=str(data["owner"]),
            vehicle=Vehicle(
                make=str(vehicle.get("make", "")),
                model=str(vehicle.get("model", "")),
                color=str(vehicle.get("color", "")),
            ),
            valid_from=parse_timestamp(data["validFrom"]),
            valid_to=parse_timestamp(data["validTo"]),
            spot=int(data["spot"]),
        )

    def to_dict(self) -> dict:
        """Convierte a dict serializable con las claves del contrato HTTP."""
        return {
            "plate": self.plate,
            "owner": self.owner,
            "vehicle": self.vehicle.to_dict(),
            "validFrom": self.valid_from.isoformat(),
            "validTo": self.valid_to.isoformat(),
            "spot": self.spot,
        }
