# kgw/core/utils/difficulty_utils.py
'''
class DifficultyUtils:
    Conversión entre el formato compacto de 32 bits (nBits) y el target numérico de precisión arbitraria.

    El formato es similar a un flotante IEEE754:

        -------------------------------------------------
        |   Exponente    |    Signo   |     Mantisa     |
        -------------------------------------------------
        | 8 bits [31-24] | 1 bit [23] | 23 bits [22-00] |
        -------------------------------------------------

        N = (-1^signo) * mantisa * 256^(exponente-3)

    En la práctica los targets nunca son negativos, pero el bit de signo se respeta
    para reproducir exactamente los datos históricos de la cadena.

    Methods::
        compact_to_big(compact) -> int: Decodifica nBits a target.
        big_to_compact(n) -> int: Codifica un target a nBits (trunca a 3 bytes de mantisa).
        bits_to_hex(bits) -> str: Representación hexadecimal de 8 dígitos.
        parse_bits(text) -> int: Interpreta nBits escritos en hexadecimal ("1c0ffff0" o "0x1c0ffff0").
'''

import logging

from kgw.core.config.protocol_constants import ProtocolConstants

logger = logging.getLogger(__name__)

class DifficultyUtils:

    @staticmethod
    def compact_to_big(compact: int) -> int:
        mantissa = compact & ProtocolConstants.MANTISSA_MASK
        is_negative = compact & ProtocolConstants.SIGN_BIT != 0
        exponent = (compact >> 24) & 0xFF

        # Base 256: el exponente es la cantidad de bytes del número completo.
        # Con exponente <= 3 la mantisa se desplaza a la derecha (se pierden bytes).
        if exponent <= 3:
            target = mantissa >> (8 * (3 - exponent))
        else:
            target = mantissa << (8 * (exponent - 3))

        return -target if is_negative else target

    @staticmethod
    def big_to_compact(n: int) -> int:
        if n == 0:
            return 0

        magnitude = abs(n)
        exponent = (magnitude.bit_length() + 7) // 8

        if exponent <= 3:
            mantissa = magnitude << (8 * (3 - exponent))
        else:
            mantissa = magnitude >> (8 * (exponent - 3))

        # Si la mantisa ya ocupa el bit de signo, el número no cabe en 23 bits:
        # dividimos entre 256 y aumentamos el exponente.
        if mantissa & ProtocolConstants.SIGN_BIT:
            mantissa >>= 8
            exponent += 1

        if exponent > 0xFF:
            raise OverflowError(f"Target fuera de rango para formato compacto ({exponent} bytes)")

        compact = (exponent << 24) | mantissa
        if n < 0:
            compact |= ProtocolConstants.SIGN_BIT
        return compact

    @staticmethod
    def bits_to_hex(bits: int) -> str:
        return f"{bits:08x}"

    @staticmethod
    def parse_bits(text: str) -> int:
        try:
            raw = text.strip().lower()
            if raw.startswith("0x"):
                raw = raw[2:]
            if not raw or len(raw) > 8:
                raise ValueError("longitud inválida")

            bits = int(raw, 16)

        except (ValueError, AttributeError) as e:
            logger.warning(f"Bits de dificultad inválidos: {text!r}")
            raise ValueError(f"Bits de dificultad inválidos: {text!r}") from e

        if not 0 <= bits <= ProtocolConstants.MAX_COMPACT:
            raise ValueError(f"Bits fuera de rango de 32 bits: {text!r}")
        return bits
