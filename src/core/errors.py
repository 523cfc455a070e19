class PlateServiceError(Exception):
    """Error base del servicio de placas."""


class TextDetectionError(PlateServiceError):
    """El colaborador OCR falló; el detalle se registra, no se expone al cliente."""


class InvalidImagePayload(PlateServiceError):
    """El cuerpo no trae una imagen data-URL base64 utilizable."""


class PermitDataError(PlateServiceError):
    """La tabla de permisos no se pudo leer o tiene registros inválidos."""
