# kgw/interface/api/server.py

import logging

# --- Framework Imports ---
from fastapi import FastAPI, Depends, HTTPException, status
from contextlib import asynccontextmanager

# --- Project Imports ---
from kgw.interface.api import schemas
from kgw.interface.api.dependencies import (
    SourceContainer, get_source_dependency, get_params_dependency, get_simulation_config_dependency
)
from kgw.interface.api.config import settings
from kgw.core.interfaces.i_header_source import IHeaderSource
from kgw.core.config.network_params import NetworkParams
from kgw.core.config.simulation_config import SimulationConfig
from kgw.core.consensus.difficulty_adjuster import DifficultyAdjuster
from kgw.core.consensus.work_calculator import WorkCalculator
from kgw.core.factories.simulation_factory import SimulationFactory
from kgw.core.models.header_window import HeaderWindow
from kgw.core.utils.difficulty_utils import DifficultyUtils
from kgw.core.utils.hashrate import HashRate
from kgw.core.exceptions import InsufficientHistoryError, RpcError, HeaderChainError
from kgw.infra.rpc.header_loader import HeaderLoader

logger = logging.getLogger(__name__)

# ==============================================================================
# 🏗️ SERVICE LAYER
# ==============================================================================

class SimulationService:
    def __init__(self, source: IHeaderSource, params: NetworkParams, config: SimulationConfig):
        self.source = source
        self.params = params
        self.config = config

    def get_status(self) -> schemas.NetworkStatusResponse:
        try:
            headers = HeaderLoader.load_window(self.source, self.params.window_capacity)
            window = HeaderWindow(self.params.window_capacity, headers)
            tip = window.tip
            if tip is None:
                raise HeaderChainError("El nodo no devolvió ningún header.")

            next_bits = DifficultyAdjuster(self.params).calculate_next_bits(window, tip.height + 1)

            return schemas.NetworkStatusResponse(
                network=self.params.name,
                best_height=tip.height,
                tip_bits=DifficultyUtils.bits_to_hex(tip.bits),
                next_bits=DifficultyUtils.bits_to_hex(next_bits),
                window_size=len(window)
            )
        except (InsufficientHistoryError, RpcError, HeaderChainError) as e:
            raise self._to_http(e)

    def simulate(self, req: schemas.SimulationRequest) -> schemas.SimulationResponse:
        try:
            if req.blocks > self.config.max_api_blocks:
                raise ValueError(f"Máximo {self.config.max_api_blocks} bloques por petición.")

            unit = req.unit or self.config.hashrate_unit
            hash_rate = HashRate.to_hashes_per_second(req.hashrate, unit)
            override = DifficultyUtils.parse_bits(req.override_bits) if req.override_bits else None

            manager = SimulationFactory.from_source(self.source, hash_rate, override, self.params)
            start_height = manager.next_height
            summary = manager.run(req.blocks)

            return schemas.SimulationResponse(
                start_height=start_height,
                unit=unit,
                hashrate_hs=hash_rate,
                blocks=[
                    schemas.SimulatedBlockResponse(
                        height=b.height, bits=b.bits_hex, seconds=b.seconds, duration=b.duration
                    )
                    for b in summary.blocks
                ],
                blocks_simulated=summary.blocks_simulated,
                total_seconds=summary.total_seconds,
                average_seconds=summary.average_seconds
            )

        except ValueError as e:
            logger.warning(f"Petición de simulación inválida: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except (InsufficientHistoryError, RpcError, HeaderChainError) as e:
            raise self._to_http(e)

    @staticmethod
    def _to_http(error: Exception) -> HTTPException:
        if isinstance(error, InsufficientHistoryError):
            return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))

        logger.error(f"❌ Fallo con el nodo fuente: {error}")
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("📈 [BOOT] Iniciando API del simulador KGW...")
    SourceContainer.initialize()
    try:
        yield
    finally:
        logger.info("🛑 Apagando API del simulador...")
        SourceContainer.shutdown()

app = FastAPI(title=settings.title, version=settings.version, debug=settings.debug_mode, lifespan=lifespan)

def get_simulation_service(
    source: IHeaderSource = Depends(get_source_dependency),
    params: NetworkParams = Depends(get_params_dependency),
    config: SimulationConfig = Depends(get_simulation_config_dependency)
) -> SimulationService:
    return SimulationService(source, params, config)

@app.get("/status", response_model=schemas.NetworkStatusResponse, tags=["Red"])
def get_status(service: SimulationService = Depends(get_simulation_service)):
    return service.get_status()

@app.get("/work/{bits}", response_model=schemas.WorkResponse, tags=["Dificultad"])
def get_work(bits: str):
    try:
        compact = DifficultyUtils.parse_bits(bits)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    target = DifficultyUtils.compact_to_big(compact)
    return schemas.WorkResponse(
        bits=DifficultyUtils.bits_to_hex(compact),
        target=f"{target:064x}" if target >= 0 else f"-{-target:064x}",
        work=str(WorkCalculator.calc_work(compact))
    )

@app.post("/simulate", response_model=schemas.SimulationResponse, tags=["Simulación"])
def simulate(req: schemas.SimulationRequest, service: SimulationService = Depends(get_simulation_service)):
    return service.simulate(req)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
