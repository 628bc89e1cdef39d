# kgw/interface/api/schemas.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional

from kgw.core.config.protocol_constants import ProtocolConstants

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

# --- SIMULACIÓN ---

class SimulationRequest(ImmutableModel):
    hashrate: int = Field(..., gt=0, description="Hashrate de la red en la unidad indicada")
    unit: Optional[str] = Field(
        None, description="Unidad del hashrate (H, KH, MH, GH, TH, PH, EH). Por defecto la configurada"
    )
    blocks: int = Field(..., gt=0, description="Cantidad de bloques a simular")
    override_bits: Optional[str] = Field(None, description="nBits en hex para el primer bloque simulado")

    @field_validator("unit")
    @classmethod
    def check_unit(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        unit = value.upper()
        if unit not in ProtocolConstants.HASHRATE_UNITS:
            raise ValueError(f"Unidad desconocida: {value}")
        return unit

class SimulatedBlockResponse(ImmutableModel):
    height: int
    bits: str
    seconds: int
    duration: str

class SimulationResponse(ImmutableModel):
    start_height: int
    unit: str
    hashrate_hs: int
    blocks: List[SimulatedBlockResponse]
    blocks_simulated: int
    total_seconds: int
    average_seconds: int

# --- CONSULTAS DE DIFICULTAD Y ESTADO ---

class WorkResponse(ImmutableModel):
    bits: str
    target: str
    work: str

class NetworkStatusResponse(ImmutableModel):
    network: str
    best_height: int
    tip_bits: str
    next_bits: str
    window_size: int
