# kgw/core/utils/hashrate.py
import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from kgw.core.config.protocol_constants import ProtocolConstants

HashRateInput = Union[int, str, Decimal]

logger = logging.getLogger(__name__)

class HashRate:

    @staticmethod
    def to_hashes_per_second(value: HashRateInput, unit: str = "GH") -> int:
        try:
            factor = ProtocolConstants.HASHRATE_UNITS[unit.upper()]

            # 1. Normalización a Decimal (str protege contra imprecisión de floats)
            d_value = Decimal(str(value))

            # 2. Escala a H/s; las fracciones de hash se truncan
            hashes = int(d_value * factor)

        except KeyError:
            raise ValueError(f"Unidad de hashrate desconocida: {unit}")
        except (InvalidOperation, ValueError, TypeError):
            logger.exception(f"Hashrate inválido: {value} {unit}")
            raise ValueError(f"Hashrate inválido: {value!r}")

        if hashes <= 0:
            raise ValueError(f"El hashrate debe ser positivo: {value} {unit}/s")
        return hashes

    @staticmethod
    def format_duration(seconds: int) -> str:
        """Formato 'XmYYs' usado en la tabla de simulación."""
        minutes, secs = divmod(seconds, 60)
        return f"{minutes}m{secs:02d}s"
