# kgw/infra/rpc/rpc_client.py
'''
class RpcClient:
    Cliente JSON-RPC 1.0 sobre HTTP POST (el nodo no soporta otro modo ni TLS por defecto).

    Methods::
        call(method, *params) -> Any:
            Ejecuta el método remoto y devuelve el campo 'result'. Lanza RpcError ante cualquier fallo.
'''

import logging
from typing import Any, Optional

import requests

from kgw.core.config.rpc_config import RpcConfig
from kgw.core.config.protocol_constants import ProtocolConstants
from kgw.core.exceptions import RpcError

logger = logging.getLogger(__name__)

class RpcClient:

    def __init__(self, config: RpcConfig, session: Optional[requests.Session] = None) -> None:
        self._url = config.url
        self._timeout = config.timeout
        self._session = session or requests.Session()
        self._session.auth = (config.user, config.password)
        self._session.headers.update({
            "Content-Type": "application/json",
            "User-Agent": ProtocolConstants.USER_AGENT
        })
        self._request_id = 0

    def call(self, method: str, *params: Any) -> Any:
        self._request_id += 1
        payload = {
            "jsonrpc": "1.0",
            "id": self._request_id,
            "method": method,
            "params": list(params)
        }

        try:
            response = self._session.post(self._url, json=payload, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error(f"🔌 Sin conexión con el nodo en {self._url}: {e}")
            raise RpcError(method, str(e)) from e

        # El nodo responde 401 sin cuerpo JSON cuando las credenciales fallan
        if response.status_code == 401:
            raise RpcError(method, "Credenciales RPC rechazadas", 401)

        try:
            body = response.json()
        except ValueError as e:
            raise RpcError(method, f"Respuesta no JSON (HTTP {response.status_code})", response.status_code) from e

        error = body.get("error")
        if error:
            code = int(error.get("code", 0)) if isinstance(error, dict) else 0
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            logger.warning(f"RPC '{method}' devolvió error {code}: {message}")
            raise RpcError(method, message, code)

        if response.status_code != 200:
            raise RpcError(method, f"HTTP {response.status_code}", response.status_code)

        return body.get("result")

    def close(self) -> None:
        self._session.close()
