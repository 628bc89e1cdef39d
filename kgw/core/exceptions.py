# kgw/core/exceptions.py
"""
Excepciones del simulador.

Jerarquía:
- KgwError: Base para todos los fallos reportables del simulador.
- InsufficientHistoryError: La ventana no cubre el horizonte de escaneo del KGW.
- HeaderChainError: Los headers obtenidos del nodo no forman una cadena contigua.
- RpcError: El nodo respondió con error o no se pudo contactar.
"""

class KgwError(Exception):
    """Base para los errores del simulador."""
    pass

class InsufficientHistoryError(KgwError):
    """
    Se pidió recalcular la dificultad para una altura cuyo horizonte de escaneo
    excede los headers suministrados. Nunca se trunca en silencio.
    """

    def __init__(self, height: int, required: int, available: int) -> None:
        self.height = height
        self.required = required
        self.available = available
        super().__init__(
            f"Historial insuficiente para la altura {height}: "
            f"se requieren {required} headers y hay {available}"
        )

class HeaderChainError(KgwError):
    """Headers con huecos, desordenados o con enlaces previos rotos."""
    pass

class RpcError(KgwError):
    """Fallo de comunicación JSON-RPC con el nodo."""

    def __init__(self, method: str, message: str, code: int = 0) -> None:
        self.method = method
        self.code = code
        super().__init__(f"RPC '{method}' falló ({code}): {message}")
