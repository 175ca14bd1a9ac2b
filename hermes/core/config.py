# hermes/core/config.py
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

# cargar variables de entorno del .env
load_dotenv()


def _parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    app_name: str
    api_prefix: str
    cors_origins: List[str]
    log_level: str
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Lee la configuración del entorno (.env ya cargado).
    Cacheado: en tests usar get_settings.cache_clear() tras cambiar el entorno.
    """
    return Settings(
        app_name=os.getenv("APP_NAME", "Hermes Notification Service"),
        api_prefix=os.getenv("API_PREFIX", "/api/v1").rstrip("/"),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
