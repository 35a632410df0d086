# recipe_md_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging
import math
import os

from dotenv import load_dotenv

"""
recipe_md_core.config
=====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para uso local (CLI y API de desarrollo).
- El core (parse / scale / render) NO lee configuración: recibe todo por
  parámetro. Solo los puntos de entrada (CLI, API) usan `get_settings()`.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global.

    Attributes
    ----------
    environment:
        Ambiente de ejecución ("local", "staging", "production"). Solo informativo.
    default_scale_factor:
        Factor usado por la CLI cuando no se pasa `--factor`.
    log_level:
        Nivel de logging de los puntos de entrada (DEBUG, INFO, ...).
    output_dir:
        Directorio donde la CLI guarda las recetas escaladas con `--save`.
    cors_origins:
        Orígenes permitidos por la API HTTP.
    """

    environment: str = "local"
    default_scale_factor: float = 1.0
    log_level: str = "INFO"
    output_dir: str = "output"
    cors_origins: List[str] = field(default_factory=list)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not (math.isfinite(value) and value > 0):
        logger.warning(f"⚠️ {name}={raw!r} no es un número positivo; se usa {default}")
        return default
    return value


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - ENVIRONMENT (default: "local")
    - RECIPE_SCALE_FACTOR (default: 1.0; si no es un número positivo, se loguea un warning y se usa el default)
    - LOG_LEVEL (default: "INFO")
    - OUTPUT_DIR (default: "output")
    - CORS_ORIGINS (lista separada por comas)

    Notas
    -----
    En tests, usar `get_settings.cache_clear()` después de cambiar el entorno.
    """
    cors_raw = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        environment=os.getenv("ENVIRONMENT", "local"),
        default_scale_factor=_env_float("RECIPE_SCALE_FACTOR", 1.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        output_dir=os.getenv("OUTPUT_DIR", "output"),
        cors_origins=[o.strip() for o in cors_raw.split(",") if o.strip()],
    )
