"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Backing store for client, application and template lists."""

    model_config = {"env_prefix": "COSTSPLIT_STORAGE_"}

    backend: Literal["local", "s3", "memory"] = "local"
    data_dir: str = "./data"
    clients_key: str = "clientes.txt"
    applications_key: str = "aplicaciones.txt"
    templates_key: str = "plantillas_servicios.json"


class S3Config(BaseSettings):
    """S3 file storage configuration."""

    model_config = {"env_prefix": "COSTSPLIT_S3_"}

    bucket: str = "costsplit-data"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    prefix: str = ""


class UploadConfig(BaseSettings):
    """Staging area for uploaded CSV files."""

    model_config = {"env_prefix": "COSTSPLIT_UPLOAD_"}

    upload_dir: str = "./uploads"


class ApiConfig(BaseSettings):
    """HTTP server configuration."""

    model_config = {"env_prefix": "COSTSPLIT_API_"}

    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3001


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "COSTSPLIT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    storage: StorageConfig = StorageConfig()
    s3: S3Config = S3Config()
    upload: UploadConfig = UploadConfig()
    api: ApiConfig = ApiConfig()
