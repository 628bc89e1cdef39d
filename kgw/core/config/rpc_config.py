# kgw/core/config/rpc_config.py

import os
from typing import Dict, Any

class RpcConfig:
    """
    Configuración del acceso JSON-RPC al nodo que provee los headers históricos.
    Aisla los detalles de conexión (Host, Puerto, Credenciales) de la lógica de dificultad.
    """
    def __init__(self) -> None:
        self._host: str = os.getenv("KGW_RPC_HOST", "localhost")
        self._port: int = int(os.getenv("KGW_RPC_PORT", 5888))
        self._user: str = os.getenv("KGW_RPC_USER", "")
        self._password: str = os.getenv("KGW_RPC_PASSWORD", "")
        self._timeout: float = float(os.getenv("KGW_RPC_TIMEOUT", 30))

    # --- Getters Públicos (Solo Lectura) ---
    @property
    def host(self) -> str: return self._host
    @property
    def port(self) -> int: return self._port
    @property
    def user(self) -> str: return self._user
    @property
    def password(self) -> str: return self._password
    @property
    def timeout(self) -> float: return self._timeout

    @property
    def url(self) -> str:
        # El nodo no ofrece TLS por defecto
        return f"http://{self._host}:{self._port}/"

    # --- Método de Actualización Controlada ---
    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Inyecta configuración externa (JSON o CLI) respetando el encapsulamiento.
        """
        if not data: return

        if data.get("host"):
            self._host = str(data["host"])

        if data.get("port"):
            self._port = int(data["port"])

        if "user" in data and data["user"] is not None:
            self._user = str(data["user"])

        if "password" in data and data["password"] is not None:
            self._password = str(data["password"])

        if data.get("timeout"):
            self._timeout = float(data["timeout"])
