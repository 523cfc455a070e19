# src/infrastructure/OCR/rekognition_text_detector.py
import asyncio
import logging
import time
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.errors import TextDetectionError
from src.domain.Interfaces.text_detector import ITextDetector
from src.domain.Models.text_detection import DetectionKind, TextDetection
from src.monitoring.metrics import ocr_failures_total, ocr_latency

logger = logging.getLogger(__name__)


class RekognitionTextDetector(ITextDetector):
    """
    OCR con AWS Rekognition DetectText.
    - Región y credenciales llegan por constructor (si faltan, cadena por defecto de boto3)
    - Sin reintentos: cualquier error se propaga como TextDetectionError
    - Sin timeout propio; lo decide el transporte
    """

    def __init__(
        self,
        region: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        client=None,
    ):
        self.client = client or boto3.client(
            "rekognition",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    async def detect_text(self, image: bytes) -> List[TextDetection]:
        t0 = time.perf_counter()
        try:
            # boto3 es bloqueante: se ejecuta en un hilo para no frenar el event loop
            response = await asyncio.to_thread(self.client.detect_text, Image={"Bytes": image})
        except (BotoCoreError, ClientError) as e:
            ocr_failures_total.inc()
            raise TextDetectionError(f"Rekognition DetectText falló: {e}") from e
        finally:
            ocr_latency.observe(time.perf_counter() - t0)

        return self._to_detections(response)

    @staticmethod
    def _to_detections(response: dict) -> List[TextDetection]:
        detections = []
        for item in response.get("TextDetections") or []:
            text = item.get("DetectedText")
            kind = item.get("Type")
            if not text or kind not in (DetectionKind.LINE.value, DetectionKind.WORD.value):
                continue
            detections.append(TextDetection(
                text=text,
                kind=DetectionKind(kind),
                confidence=item.get("Confidence"),
            ))
        return detections
