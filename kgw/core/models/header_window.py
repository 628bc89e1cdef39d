# kgw/core/models/header_window.py

import logging
from collections import deque
from typing import Deque, Iterable, Iterator, Optional

from kgw.core.models.block_header import BlockHeader
from kgw.core.interfaces.i_chain import IChain

logger = logging.getLogger(__name__)

class HeaderWindow(IChain):
    """
    Ventana rodante de capacidad fija (FIFO): al añadir por encima de la capacidad
    se descarta el header más antiguo. Las alturas son estrictamente consecutivas.
    """

    def __init__(self, capacity: int, headers: Iterable[BlockHeader] = ()) -> None:
        if capacity <= 0:
            raise ValueError(f"Capacidad de ventana inválida: {capacity}")

        self._capacity = capacity
        self._headers: Deque[BlockHeader] = deque(maxlen=capacity)

        for header in headers:
            self.add_header(header)

        logger.debug(f"🪟 Ventana iniciada con {len(self._headers)}/{capacity} headers.")

    # --- Propiedades de la Interfaz ---
    @property
    def height(self) -> int:
        tip = self.tip
        return tip.height if tip else -1

    @property
    def tip(self) -> Optional[BlockHeader]:
        return self._headers[-1] if self._headers else None

    @property
    def capacity(self) -> int:
        return self._capacity

    # --- Métodos Públicos ---

    def add_header(self, header: BlockHeader) -> bool:
        last = self.tip

        if last is not None and header.height != last.height + 1:
            logger.warning(f"⛔ Header #{header.height} rechazado: no continúa la punta #{last.height}.")
            raise ValueError(
                f"Header #{header.height} no continúa la ventana (punta #{last.height})"
            )

        # deque(maxlen) expulsa el más antiguo automáticamente
        self._headers.append(header)
        return True

    def __len__(self) -> int:
        return len(self._headers)

    def __iter__(self) -> Iterator[BlockHeader]:
        return iter(self._headers)

    def __reversed__(self) -> Iterator[BlockHeader]:
        return reversed(self._headers)

    def __getitem__(self, index: int) -> BlockHeader:
        return self._headers[index]
