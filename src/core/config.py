import os
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from dotenv import load_dotenv

from src.core.plate_rules import DEFAULT_DENYLIST, DEFAULT_PLATE_PATTERNS


# ==========================================================
# 1) Cargar .env raíz
# ==========================================================
load_dotenv(".env")
DEPLOY_ENV = os.getenv("DEPLOY_ENV", "prod").lower()

# ==========================================================
# 2) Cargar .env del entorno
# ==========================================================
ENV_PATH = f"DevOps/{DEPLOY_ENV}/.env"
load_dotenv(ENV_PATH, override=True)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        extra="allow",
        populate_by_name=True,
    )

    # =========================
    #  App
    # =========================
    deploy_env: str = Field("prod", validation_alias="DEPLOY_ENV")
    app_name: str = Field("Parking Enforcement API", validation_alias="APP_NAME")
    app_env: str = Field("prod", validation_alias="APP_ENV")
    app_port: int = Field(4000, validation_alias=AliasChoices("APP_PORT", "PORT"))

    # =========================
    #  Permisos
    # =========================
    permits_path: str = Field("data/permits.json", validation_alias="PERMITS_PATH")

    # =========================
    #  OCR
    # =========================
    ocr_backend: str = Field("rekognition", validation_alias="OCR_BACKEND")
    ocr_lang: str = Field("en", validation_alias="OCR_LANG")
    aws_region: Optional[str] = Field(None, validation_alias="AWS_REGION")
    aws_access_key_id: Optional[str] = Field(None, validation_alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = Field(None, validation_alias="AWS_SECRET_ACCESS_KEY")

    # =========================
    #  HTTP
    # =========================
    cors_allowed_origins: List[str] = Field(["*"], validation_alias="CORS_ALLOWED_ORIGINS")
    client_header_name: str = Field("x-app-client", validation_alias="CLIENT_HEADER_NAME")
    client_header_values: List[str] = Field(["lpr-client"], validation_alias="CLIENT_HEADER_VALUES")
    require_client_header: bool = Field(True, validation_alias="REQUIRE_CLIENT_HEADER")
    max_body_bytes: int = Field(5 * 1024 * 1024, validation_alias="MAX_BODY_BYTES")

    # =========================
    #  Extracción de placa
    # =========================
    plate_min_line_length: int = Field(3, validation_alias="PLATE_MIN_LINE_LENGTH")
    plate_separators: str = Field("-", validation_alias="PLATE_SEPARATORS")
    plate_denylist: List[str] = Field(list(DEFAULT_DENYLIST), validation_alias="PLATE_DENYLIST")
    plate_patterns: List[str] = Field(list(DEFAULT_PLATE_PATTERNS), validation_alias="PLATE_PATTERNS")
    fallback_min_length: int = Field(3, validation_alias="FALLBACK_MIN_LENGTH")
    fallback_max_length: int = Field(8, validation_alias="FALLBACK_MAX_LENGTH")

    # =========================
    #  Monitoring
    # =========================
    metrics_port: int = Field(9100, validation_alias="METRICS_PORT")


settings = Settings()
