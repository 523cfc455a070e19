import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.middleware import BodySizeLimitMiddleware
from src.api.schemas import (
    DetectionResponse, DetectPlateRequest, ErrorResponse, LookupPlateRequest, PermitResponse
)
from src.application.plate_recognition_service import PlateRecognitionService
from src.core.config import Settings, settings as default_settings
from src.core.errors import InvalidImagePayload, TextDetectionError
from src.infrastructure.OCR.factory import create_text_detector
from src.infrastructure.Permits.json_permit_repository import JsonPermitRepository
from src.utils.image_payload import decode_data_url

logger = logging.getLogger(__name__)

NO_IMAGE = "No image provided."
INVALID_PLATE = "A valid plate string must be provided."
OCR_FAILED = "Failed to process image."
FORBIDDEN = "Forbidden."

# cuerpo no-JSON o con forma inesperada -> mismo 400 que un campo ausente
VALIDATION_MESSAGES = {
    "/api/detect-plate": NO_IMAGE,
    "/api/lookup-plate": INVALID_PLATE,
}


class ClientNotAllowed(Exception):
    pass


def get_service(request: Request) -> PlateRecognitionService:
    return request.app.state.service


def require_client(request: Request) -> None:
    """Exige la cabecera de cliente configurada en las rutas /api."""
    cfg: Settings = request.app.state.settings
    if not cfg.require_client_header:
        return
    value = request.headers.get(cfg.client_header_name)
    if value not in cfg.client_header_values:
        raise ClientNotAllowed(value)


router = APIRouter(
    prefix="/api",
    dependencies=[Depends(require_client)],
    responses={403: {"model": ErrorResponse}},
)


@router.post(
    "/detect-plate",
    response_model=DetectionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def detect_plate(
    payload: Optional[DetectPlateRequest] = None,
    service: PlateRecognitionService = Depends(get_service),
):
    image = decode_data_url(payload.image if payload else None)
    result = await service.detect_plate(image)
    return DetectionResponse.from_domain(result)


@router.post(
    "/lookup-plate",
    response_model=DetectionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def lookup_plate(
    payload: Optional[LookupPlateRequest] = None,
    service: PlateRecognitionService = Depends(get_service),
):
    plate = payload.plate if payload else None
    if not isinstance(plate, str) or not plate.strip():
        return JSONResponse(status_code=400, content={"error": INVALID_PLATE})
    return DetectionResponse.from_domain(service.lookup_plate(plate))


@router.get("/permits", response_model=List[PermitResponse])
def list_permits(service: PlateRecognitionService = Depends(get_service)):
    return [PermitResponse.from_domain(p) for p in service.list_permits()]


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[PlateRecognitionService] = None,
) -> FastAPI:
    """
    Construye la app. Sin argumentos usa la configuración del entorno:
    tabla de permisos desde PERMITS_PATH y backend OCR según OCR_BACKEND.
    """
    cfg = settings or default_settings
    if service is None:
        service = PlateRecognitionService.from_settings(
            cfg,
            text_detector=create_text_detector(cfg),
            permits=JsonPermitRepository.from_file(cfg.permits_path),
        )

    app = FastAPI(
        title=cfg.app_name,
        description="License plate detection and permit validation",
        version="1.0.0",
    )
    app.state.settings = cfg
    app.state.service = service

    # el último middleware añadido es el más externo: CORS envuelve también al 413
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=cfg.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        message = VALIDATION_MESSAGES.get(request.url.path)
        if message is None:
            return await request_validation_exception_handler(request, exc)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(InvalidImagePayload)
    async def invalid_image(request: Request, exc: InvalidImagePayload):
        logger.debug("Imagen rechazada: %s", exc)
        return JSONResponse(status_code=400, content={"error": NO_IMAGE})

    @app.exception_handler(TextDetectionError)
    async def ocr_failed(request: Request, exc: TextDetectionError):
        logger.error("Error del OCR: %s", exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": OCR_FAILED})

    @app.exception_handler(ClientNotAllowed)
    async def client_not_allowed(request: Request, exc: ClientNotAllowed):
        logger.warning("Cliente rechazado en %s", request.url.path)
        return JSONResponse(status_code=403, content={"error": FORBIDDEN})

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "License Plate API is running."

    @app.get("/health")
    def health_check():
        return {"status": "ok", "env": cfg.app_env}

    app.include_router(router)
    return app
