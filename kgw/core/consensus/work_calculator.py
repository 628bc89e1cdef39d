# kgw/core/consensus/work_calculator.py

from kgw.core.config.protocol_constants import ProtocolConstants
from kgw.core.utils.difficulty_utils import DifficultyUtils

class WorkCalculator:

    @staticmethod
    def calc_work(bits: int) -> int:
        """Cantidad esperada de hashes para encontrar un bloque con estos bits."""
        target = DifficultyUtils.compact_to_big(bits)

        # Bits negativos o nulos no deberían existir en bloques válidos,
        # pero uno inválido podría traerlos: trabajo cero.
        if target <= 0:
            return 0

        return ProtocolConstants.ONE_LSH_256 // (target + 1)

    @staticmethod
    def time_to_block(bits: int, hash_rate: int) -> int:
        """Segundos enteros (truncados) para minar un bloque a `hash_rate` H/s."""
        if hash_rate <= 0:
            raise ValueError(f"El hashrate debe ser positivo: {hash_rate}")

        return WorkCalculator.calc_work(bits) // hash_rate
