# kgw/core/interfaces/i_header_source.py

from abc import ABC, abstractmethod
from kgw.core.models.block_header import BlockHeader

class IHeaderSource(ABC):
    """
    Contrato para el proveedor de headers históricos (normalmente un nodo vía RPC).
    El simulador solo necesita poder caminar la cadena hacia atrás desde la punta.
    """

    @abstractmethod
    def get_best_block_hash(self) -> str:
        """Hash del último bloque de la cadena principal."""
        pass

    @abstractmethod
    def get_block_count(self) -> int:
        """Altura actual de la cadena principal."""
        pass

    @abstractmethod
    def get_block_header(self, block_hash: str) -> BlockHeader:
        """Header reducido del bloque identificado por `block_hash`."""
        pass
