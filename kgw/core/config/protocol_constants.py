# kgw/core/config/protocol_constants.py

from typing import Final, Dict

class ProtocolConstants:
    """
    Vocabulario inmutable del simulador.
    Centraliza:
    1. Máscaras del formato compacto (nBits).
    2. Constantes numéricas de trabajo (2^256).
    3. Unidades de hashrate aceptadas por la CLI y la API.
    """

    # ==========================================================================
    # 1. METADATOS GLOBALES
    # ==========================================================================
    VERSION: Final[str]    = "0.1.0"
    USER_AGENT: Final[str] = "KGW-Simulator/0.1"

    # ==========================================================================
    # 2. FORMATO COMPACTO (nBits)
    # ==========================================================================
    # | Exponente 8 bits [31-24] | Signo 1 bit [23] | Mantisa 23 bits [22-00] |
    MANTISSA_MASK: Final[int] = 0x007FFFFF
    SIGN_BIT: Final[int]      = 0x00800000
    MAX_COMPACT: Final[int]   = 0xFFFFFFFF

    # ==========================================================================
    # 3. TRABAJO
    # ==========================================================================
    ONE_LSH_256: Final[int] = 1 << 256

    # Los headers sintéticos no tienen PoW real: se enlazan con hashes nulos
    NULL_HASH: Final[str] = "0" * 64

    # ==========================================================================
    # 4. UNIDADES DE HASHRATE (hashes/segundo)
    # ==========================================================================
    HASHRATE_UNITS: Final[Dict[str, int]] = {
        "H": 1,
        "KH": 10 ** 3,
        "MH": 10 ** 6,
        "GH": 10 ** 9,
        "TH": 10 ** 12,
        "PH": 10 ** 15,
        "EH": 10 ** 18,
    }
