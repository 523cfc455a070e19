import logging

from src.core.config import Settings, settings as default_settings
from src.domain.Interfaces.text_detector import ITextDetector

logger = logging.getLogger(__name__)


def create_text_detector(settings: Settings = default_settings) -> ITextDetector:
    backend = settings.ocr_backend.lower()
    logger.info("Backend OCR: %s", backend)

    if backend == "rekognition":
        from src.infrastructure.OCR.rekognition_text_detector import RekognitionTextDetector
        return RekognitionTextDetector(
            region=settings.aws_region,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
        )
    elif backend == "easyocr":
        from src.infrastructure.OCR.easyocr_text_detector import EasyOCRTextDetector
        return EasyOCRTextDetector(lang=settings.ocr_lang)
    elif backend == "static":
        from src.infrastructure.OCR.static_text_detector import StaticTextDetector
        return StaticTextDetector()
    else:
        raise ValueError(f"OCR_BACKEND desconocido: {settings.ocr_backend}")
