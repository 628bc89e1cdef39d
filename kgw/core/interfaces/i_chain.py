# kgw/core/interfaces/i_chain.py

from abc import ABC, abstractmethod
from typing import Optional
from kgw.core.models.block_header import BlockHeader

class IChain(ABC):
    """
    Contrato base para cualquier secuencia ordenada de headers.

    Permite que el simulador trabaje con la ventana sin importar si los headers
    son reales (descargados del nodo) o sintéticos.
    """

    @property
    @abstractmethod
    def height(self) -> int:
        """
        Retorna la altura del último header (-1 si está vacía).
        """
        pass

    @property
    @abstractmethod
    def tip(self) -> Optional[BlockHeader]:
        """
        Retorna el último encabezado de la secuencia.
        """
        pass

    @abstractmethod
    def add_header(self, header: BlockHeader) -> bool:
        """
        Enlaza un nuevo encabezado al final.

        Args:
            header: El BlockHeader a añadir (altura = punta + 1).

        Returns:
            bool: True si se agregó.
        """
        pass
