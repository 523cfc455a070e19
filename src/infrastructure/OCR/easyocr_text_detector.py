import asyncio
import threading
import time
from typing import List

from src.core.errors import TextDetectionError
from src.domain.Interfaces.text_detector import ITextDetector
from src.domain.Models.text_detection import DetectionKind, TextDetection
from src.monitoring.metrics import ocr_failures_total, ocr_latency

class EasyOCRTextDetector(ITextDetector):
    """
    Backend OCR local usando EasyOCR:
    - Cada región de texto se reporta como una línea (LINE)
    - Orden de arriba hacia abajo y de izquierda a derecha, como el OCR en la nube
    - easyocr se importa y el Reader se crea en el primer uso (carga de modelo costosa)
    """
    def __init__(self, lang: str = "en", gpu: bool = False, reader=None):
        self.lang = lang
        self.gpu = gpu
        self._reader = reader
        self._lock = threading.Lock()

    @property
    def reader(self):
        with self._lock:
            if self._reader is None:
                import easyocr
                self._reader = easyocr.Reader([self.lang], gpu=self.gpu)
            return self._reader

    async def detect_text(self, image: bytes) -> List[TextDetection]:
        t0 = time.perf_counter()
        try:
            results = await asyncio.to_thread(self._read, image)
        except Exception as e:
            ocr_failures_total.inc()
            raise TextDetectionError(f"EasyOCR falló: {e}") from e
        finally:
            ocr_latency.observe(time.perf_counter() - t0)

        return results

    def _read(self, image: bytes) -> List[TextDetection]:
        # readtext -> [(bbox, text, confidence)], bbox = 4 puntos (x, y)
        results = self.reader.readtext(image)

        def top_left(r):
            xs = [pt[0] for pt in r[0]]
            ys = [pt[1] for pt in r[0]]
            return (min(ys), min(xs))

        detections = []
        for bbox, text, confidence in sorted(results, key=top_left):
            text = (text or "").strip()
            if not text:
                continue
            detections.append(TextDetection(
                text=text,
                kind=DetectionKind.LINE,
                confidence=float(confidence),
            ))
        return detections
