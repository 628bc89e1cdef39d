# kgw/infra/rpc/rpc_header_source.py

import logging

from kgw.core.interfaces.i_header_source import IHeaderSource
from kgw.core.models.block_header import BlockHeader
from kgw.core.exceptions import RpcError
from kgw.infra.rpc.rpc_client import RpcClient

logger = logging.getLogger(__name__)

class RpcHeaderSource(IHeaderSource):
    """
    Adaptador IHeaderSource sobre el RPC del nodo (getbestblockhash, getblockcount, getblockheader).
    """

    def __init__(self, client: RpcClient) -> None:
        self._client = client

    def get_best_block_hash(self) -> str:
        return str(self._client.call("getbestblockhash"))

    def get_block_count(self) -> int:
        return int(self._client.call("getblockcount"))

    def get_block_header(self, block_hash: str) -> BlockHeader:
        data = self._client.call("getblockheader", block_hash, True)
        if not isinstance(data, dict):
            raise RpcError("getblockheader", f"Respuesta inesperada para {block_hash}")

        try:
            return BlockHeader.from_rpc_dict(data)
        except ValueError as e:
            raise RpcError("getblockheader", str(e)) from e

    def close(self) -> None:
        self._client.close()
