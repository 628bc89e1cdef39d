import os
from typing import Dict, Any

from kgw.core.config.protocol_constants import ProtocolConstants

class SimulationConfig:
    """
    Configuración de la Simulación.
    """
    def __init__(self):
        self._hashrate_unit = os.getenv("KGW_HASHRATE_UNIT", "GH").upper()
        self._max_api_blocks = int(os.getenv("KGW_MAX_API_BLOCKS", 10000))

        if self._hashrate_unit not in ProtocolConstants.HASHRATE_UNITS:
            raise ValueError(f"Unidad de hashrate desconocida: {self._hashrate_unit}")

    @property
    def hashrate_unit(self) -> str: return self._hashrate_unit
    @property
    def max_api_blocks(self) -> int: return self._max_api_blocks

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if not data: return

        if "hashrate_unit" in data:
            unit = str(data["hashrate_unit"]).upper()
            if unit not in ProtocolConstants.HASHRATE_UNITS:
                raise ValueError(f"Unidad de hashrate desconocida: {unit}")
            self._hashrate_unit = unit

        if "max_api_blocks" in data:
            self._max_api_blocks = int(data["max_api_blocks"])
