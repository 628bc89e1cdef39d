# kgw/core/config/network_params.py
'''
class NetworkParams:
    Constantes de consenso inmutables de la red simulada (límite de PoW, tiempo objetivo
    por bloque y longitudes de ventana del Kimoto Gravity Well).

    Methods:
        load(cls) -> NetworkParams: Construye los parámetros de referencia (Vertcoin) aplicando overrides del entorno.
        ceiling_target (property): Target decodificado de pow_limit_bits (lo que realmente "cabe" en formato compacto).
'''

import os
import logging
from dataclasses import dataclass

from kgw.core.utils.difficulty_utils import DifficultyUtils

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class NetworkParams:
    name: str
    pow_limit: int
    pow_limit_bits: int
    target_time_per_block: int
    min_blocks: int
    max_blocks: int
    window_capacity: int

    def __post_init__(self) -> None:
        if self.min_blocks <= 0 or self.max_blocks < self.min_blocks:
            raise ValueError(f"Ventana KGW inválida: min={self.min_blocks} max={self.max_blocks}")
        # La ventana rodante debe cubrir el horizonte completo de escaneo
        if self.window_capacity < self.max_blocks:
            raise ValueError(
                f"Capacidad de ventana ({self.window_capacity}) menor que max_blocks ({self.max_blocks})"
            )
        if self.target_time_per_block <= 0:
            raise ValueError("El tiempo objetivo por bloque debe ser positivo.")

    @property
    def ceiling_target(self) -> int:
        return DifficultyUtils.compact_to_big(self.pow_limit_bits)

    @classmethod
    def load(cls) -> 'NetworkParams':
        params = cls(
            name=os.getenv("KGW_NETWORK_NAME", VERTCOIN_PARAMS.name),
            pow_limit=VERTCOIN_PARAMS.pow_limit,
            pow_limit_bits=VERTCOIN_PARAMS.pow_limit_bits,
            target_time_per_block=int(os.getenv("KGW_BLOCK_TIME", VERTCOIN_PARAMS.target_time_per_block)),
            min_blocks=int(os.getenv("KGW_MIN_BLOCKS", VERTCOIN_PARAMS.min_blocks)),
            max_blocks=int(os.getenv("KGW_MAX_BLOCKS", VERTCOIN_PARAMS.max_blocks)),
            window_capacity=int(os.getenv("KGW_WINDOW_CAPACITY", VERTCOIN_PARAMS.window_capacity)),
        )

        logger.info(
            f"⚙️  Parámetros de red '{params.name}': "
            f"{params.target_time_per_block}s/bloque | ventana KGW {params.min_blocks}-{params.max_blocks} "
            f"| límite {params.pow_limit_bits:08x}"
        )
        return params


# Red de referencia: Vertcoin (KGW con 144..4032 bloques, 2.5 minutos por bloque)
VERTCOIN_PARAMS = NetworkParams(
    name="vtc",
    pow_limit=(1 << 236) - 1,
    pow_limit_bits=0x1E0FFFFF,
    target_time_per_block=150,
    min_blocks=144,
    max_blocks=4032,
    window_capacity=4200,
)
