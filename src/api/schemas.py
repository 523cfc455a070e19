from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.Models.detection_result import DetectionResult
from src.domain.Models.permit import PermitRecord, Vehicle


# Peticiones: los campos se aceptan con cualquier tipo y se validan en la ruta,
# para responder con los mensajes 400 del contrato en lugar de un 422 genérico.

class DetectPlateRequest(BaseModel):
    """Imagen data-URL: data:<mime>;base64,<datos>"""
    image: Optional[Any] = Field(None, examples=["data:image/jpeg;base64,/9j/4AAQSkZJRg..."])


class LookupPlateRequest(BaseModel):
    plate: Optional[Any] = Field(None, examples=["LGX 137"])


# Respuestas

class VehicleResponse(BaseModel):
    make: str
    model: str
    color: str

    @classmethod
    def from_domain(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(make=vehicle.make, model=vehicle.model, color=vehicle.color)


class PermitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plate: str
    owner: str
    vehicle: VehicleResponse
    valid_from: datetime = Field(..., alias="validFrom")
    valid_to: datetime = Field(..., alias="validTo")
    spot: int

    @classmethod
    def from_domain(cls, permit: PermitRecord) -> "PermitResponse":
        return cls(
            plate=permit.plate,
            owner=permit.owner,
            vehicle=VehicleResponse.from_domain(permit.vehicle),
            valid_from=permit.valid_from,
            valid_to=permit.valid_to,
            spot=permit.spot,
        )


class DetectionResponse(BaseModel):
    """plate=None: no se identificó placa (no es un error)."""
    model_config = ConfigDict(populate_by_name=True)

    plate: Optional[str]
    is_authorized: bool = Field(..., alias="isAuthorized")
    permit: Optional[PermitResponse] = None

    @classmethod
    def from_domain(cls, result: DetectionResult) -> "DetectionResponse":
        return cls(
            plate=result.plate,
            is_authorized=result.is_authorized,
            permit=PermitResponse.from_domain(result.permit) if result.permit else None,
        )


class ErrorResponse(BaseModel):
    error: str
