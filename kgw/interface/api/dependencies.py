# kgw/interface/api/dependencies.py
import logging
from typing import Optional

# Imports de Capa Core
from kgw.core.interfaces.i_header_source import IHeaderSource
from kgw.core.config.config_manager import ConfigManager
from kgw.core.config.network_params import NetworkParams
from kgw.core.config.simulation_config import SimulationConfig
from kgw.core.factories.simulation_factory import SimulationFactory

logger = logging.getLogger(__name__)

class SourceContainer:
    _instance: Optional[IHeaderSource] = None

    @classmethod
    def get_instance(cls) -> IHeaderSource:
        if cls._instance is None:
            logger.critical("🚨 ERROR DE ARRANQUE: La fuente de headers no ha sido inicializada.")
            raise RuntimeError("La fuente de headers no ha sido inicializada. Ejecute set_instance() primero.")
        return cls._instance

    @classmethod
    def set_instance(cls, source: IHeaderSource):
        if cls._instance is not None:
            logger.debug("Fuente de headers ya inyectada. Ignorando set_instance.")
            return

        cls._instance = source
        logger.info(f"✅ [API-DI] Fuente '{type(source).__name__}' inyectada correctamente.")

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def initialize(cls):
        """Crea la fuente RPC desde la configuración si nadie inyectó otra."""
        if cls._instance is None:
            cls.set_instance(SimulationFactory.create_rpc_source(ConfigManager().rpc))

    @classmethod
    def shutdown(cls):
        if cls._instance:
            if hasattr(cls._instance, 'close'):
                cls._instance.close()  # type: ignore
            logger.info("🛑 [API] Fuente de headers liberada.")
            cls._instance = None
        else:
            logger.debug("La fuente ya estaba liberada.")

def get_source_dependency() -> IHeaderSource:
    return SourceContainer.get_instance()

def get_params_dependency() -> NetworkParams:
    return ConfigManager().network

def get_simulation_config_dependency() -> SimulationConfig:
    return ConfigManager().simulation
