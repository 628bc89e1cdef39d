# kgw/interface/api/config.py

import os
import logging
from dataclasses import dataclass

from kgw.core.config.protocol_constants import ProtocolConstants

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ApiConfig:
    """
    Parámetros del servidor HTTP (infraestructura).
    Los límites de simulación viven en ConfigManager().simulation y se leen por petición,
    así un --config JSON cargado antes de 'serve' también aplica a la API.
    """
    host: str
    port: int
    title: str
    version: str
    debug_mode: bool

    @classmethod
    def load(cls) -> 'ApiConfig':
        config = cls(
            host=os.getenv("KGW_API_HOST", "0.0.0.0"),
            port=int(os.getenv("KGW_API_PORT", 8080)),
            title=os.getenv("KGW_API_TITLE", "KGW Difficulty Simulator API"),
            version=ProtocolConstants.VERSION,
            debug_mode=os.getenv("KGW_DEBUG", "False").lower() == "true"
        )

        logger.info("⚙️  Configuración de la API cargada:")
        logger.info(f"   URL: http://{config.host}:{config.port}")
        logger.info(f"   Título: {config.title} v{config.version} | Debug: {config.debug_mode}")

        return config

# Instancia Singleton inmutable
settings = ApiConfig.load()
