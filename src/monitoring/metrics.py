import logging

from prometheus_client import Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

# Latencia OCR
ocr_latency = Histogram(
    "ocr_latency_seconds",
    "Tiempo de la llamada al OCR"
)

# Fallos del colaborador OCR
ocr_failures_total = Counter(
    "ocr_failures_total",
    "Total de llamadas OCR fallidas"
)

# Placas extraídas, por etapa de la heurística
plates_detected_total = Counter(
    "plates_detected_total",
    "Total de placas extraídas",
    ["source"]
)

# Imágenes sin placa identificable
plate_detection_misses_total = Counter(
    "plate_detection_misses_total",
    "Imágenes donde no se identificó placa"
)

# Consultas al directorio de permisos
permit_lookups_total = Counter(
    "permit_lookups_total",
    "Consultas de permisos por resultado",
    ["result"]
)

def start_metrics_server(port: int = 9100):
    """Arranca servidor de métricas Prometheus."""
    start_http_server(port)
    logger.info("📊 Prometheus metrics disponible en :%d", port)
