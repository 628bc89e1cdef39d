# kgw/core/factories/simulation_factory.py

import logging
from typing import Optional

from kgw.core.config.network_params import NetworkParams, VERTCOIN_PARAMS
from kgw.core.interfaces.i_header_source import IHeaderSource
from kgw.core.managers.simulation_manager import SimulationManager
from kgw.core.models.header_window import HeaderWindow
from kgw.core.config.rpc_config import RpcConfig
from kgw.infra.rpc.header_loader import HeaderLoader
from kgw.infra.rpc.rpc_client import RpcClient
from kgw.infra.rpc.rpc_header_source import RpcHeaderSource

logger = logging.getLogger(__name__)

class SimulationFactory:
    """
    Fábrica del simulador.
    Encapsula la descarga del historial y el ensamblado de la ventana + driver.
    """

    @staticmethod
    def from_source(
        source: IHeaderSource,
        hash_rate: int,
        override_bits: Optional[int] = None,
        params: Optional[NetworkParams] = None
    ) -> SimulationManager:
        params = params or VERTCOIN_PARAMS

        try:
            headers = HeaderLoader.load_window(source, params.window_capacity)
            window = HeaderWindow(params.window_capacity, headers)

            manager = SimulationManager(params, window, hash_rate, start_bits=override_bits)

            logger.info(
                f"🏭 Simulador ensamblado: punta #{window.height} | {len(window)} headers | "
                f"bits iniciales {manager.current_bits:08x} | {hash_rate} H/s"
            )
            return manager

        except Exception:
            logger.exception("Fallo al ensamblar el simulador")
            raise

    @staticmethod
    def create_rpc_source(config: RpcConfig) -> RpcHeaderSource:
        logger.info(f"🔗 Conectando al nodo RPC en {config.url}")
        return RpcHeaderSource(RpcClient(config))
