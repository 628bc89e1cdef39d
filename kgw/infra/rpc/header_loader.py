# kgw/infra/rpc/header_loader.py

import logging
from typing import List

from kgw.core.interfaces.i_header_source import IHeaderSource
from kgw.core.models.block_header import BlockHeader
from kgw.core.config.protocol_constants import ProtocolConstants
from kgw.core.exceptions import HeaderChainError

logger = logging.getLogger(__name__)

class HeaderLoader:

    @staticmethod
    def load_window(source: IHeaderSource, count: int) -> List[BlockHeader]:
        """
        Camina la cadena hacia atrás desde la punta siguiendo 'previous_hash'
        hasta reunir `count` headers o llegar al génesis.
        Devuelve la lista en orden ascendente de altura.
        """
        if count <= 0:
            raise ValueError(f"Cantidad de headers inválida: {count}")

        block_hash = source.get_best_block_hash()
        best_height = source.get_block_count()
        logger.info(f"📥 Descargando {count} headers desde la punta #{best_height} ({block_hash[:16]}...)")

        collected: List[BlockHeader] = []
        while len(collected) < count:
            header = source.get_block_header(block_hash)

            if header.hash != block_hash:
                raise HeaderChainError(f"El nodo devolvió {header.hash[:16]} al pedir {block_hash[:16]}")

            # La punta debe coincidir con la altura reportada (si no, llegó un bloque entre llamadas)
            if not collected and header.height != best_height:
                raise HeaderChainError(
                    f"La punta {block_hash[:16]} está en #{header.height} pero el nodo reporta #{best_height}"
                )

            if collected and header.height != collected[-1].height - 1:
                raise HeaderChainError(
                    f"Altura inesperada: #{header.height} tras #{collected[-1].height}"
                )

            collected.append(header)

            # Log reducido para no saturar
            if len(collected) % 1000 == 0:
                logger.info(f"   {len(collected)}/{count} headers descargados...")

            if header.height == 0 or header.previous_hash == ProtocolConstants.NULL_HASH:
                logger.info(f"🧱 Inicio de la cadena alcanzado en #{header.height} con {len(collected)} headers.")
                break

            block_hash = header.previous_hash

        collected.reverse()
        return collected
