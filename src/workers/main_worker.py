import logging

import uvicorn

from src.core.config import settings
from src.monitoring.metrics import start_metrics_server

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    if settings.metrics_port:
        try:
            start_metrics_server(port=settings.metrics_port)
        except OSError:
            logger.exception("⚠️ No se pudo iniciar el servidor de métricas")

    logger.info("🚀 API de placas iniciando en :%d (OCR=%s)", settings.app_port, settings.ocr_backend)
    uvicorn.run(
        "src.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
