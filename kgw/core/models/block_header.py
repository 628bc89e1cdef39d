# kgw/core/models/block_header.py

from typing import Dict, Any
import logging

from kgw.core.config.protocol_constants import ProtocolConstants

logger = logging.getLogger(__name__)

class BlockHeader:
    """
    Header reducido: solo lo que el retargeting necesita (altura, tiempo, bits)
    más los enlaces de hash para reconstruir la cadena desde el nodo.
    """

    def __init__(
        self,
        height: int,
        timestamp: int,
        bits: int,
        previous_hash: str = ProtocolConstants.NULL_HASH,
        block_hash: str = ProtocolConstants.NULL_HASH,
        synthetic: bool = False
    ) -> None:
        self._height = height
        self._timestamp = timestamp
        self._bits = bits
        self._previous_hash = previous_hash
        self._hash = block_hash
        self._synthetic = synthetic

    # --- Getters ---
    @property
    def height(self) -> int: return self._height
    @property
    def timestamp(self) -> int: return self._timestamp
    @property
    def bits(self) -> int: return self._bits
    @property
    def previous_hash(self) -> str: return self._previous_hash
    @property
    def hash(self) -> str: return self._hash
    @property
    def synthetic(self) -> bool: return self._synthetic

    @classmethod
    def synthesize(cls, previous: 'BlockHeader', seconds: int, bits: int) -> 'BlockHeader':
        """Bloque simulado: sin PoW real, enlazado con hashes nulos."""
        return cls(
            height=previous.height + 1,
            timestamp=previous.timestamp + seconds,
            bits=bits,
            synthetic=True
        )

    @classmethod
    def from_rpc_dict(cls, data: Dict[str, Any]) -> 'BlockHeader':
        """Construye el header desde la respuesta de 'getblockheader <hash> true'."""
        try:
            return cls(
                height=int(data["height"]),
                timestamp=int(data["time"]),
                bits=int(str(data["bits"]), 16),
                # El génesis no trae 'previousblockhash'
                previous_hash=data.get("previousblockhash", ProtocolConstants.NULL_HASH),
                block_hash=str(data["hash"])
            )
        except (KeyError, TypeError, ValueError):
            logger.exception(f"Header RPC malformado: {data}")
            raise ValueError("Header RPC malformado.")

    def __repr__(self) -> str:
        kind = "sintético" if self._synthetic else "real"
        return f"BlockHeader(#{self._height}, t={self._timestamp}, bits={self._bits:08x}, {kind})"
