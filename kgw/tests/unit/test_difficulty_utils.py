# kgw/tests/unit/test_difficulty_utils.py
'''
Test Suite para DifficultyUtils:
    Verifica la conversión entre formato compacto (Bits) y numérico (Target).
    Debe reproducir exactamente el formato histórico de la cadena.

    Functions::
        test_compact_to_big_reference_values(): Valores conocidos (límite de la red, génesis de Bitcoin).
        test_round_trip_conversion(): bits -> target -> bits con exponentes 0..3 y mayores.
        test_truncation_boundaries(): Casos documentados donde la mantisa pierde bytes.
        test_sign_bit_handling(): Targets negativos y mantisas con el bit alto ocupado.
        test_overflow_is_fatal(): Exponentes imposibles lanzan OverflowError.
        test_parse_bits(): Lectura de bits en hexadecimal desde la CLI/API.
'''

import sys
import os
import pytest

# --- AJUSTE DE RUTA PARA EJECUCIÓN DIRECTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from kgw.core.utils.difficulty_utils import DifficultyUtils
from kgw.core.config.network_params import VERTCOIN_PARAMS

def test_compact_to_big_reference_values():
    print(">> Ejecutando: test_compact_to_big_reference_values...")

    # Génesis de Bitcoin: 0xffff * 256^26
    assert DifficultyUtils.compact_to_big(0x1D00FFFF) == 0xFFFF << 208

    # Límite de la red de referencia: 0x0fffff * 256^27
    assert DifficultyUtils.compact_to_big(0x1E0FFFFF) == 0x0FFFFF << 216
    assert DifficultyUtils.compact_to_big(0x1C0FFFF0) == 0x0FFFF0 << 200

    assert DifficultyUtils.compact_to_big(0) == 0
    print("[SUCCESS] Decodificación de referencia correcta.\n")

def test_round_trip_conversion():
    print(">> Ejecutando: test_round_trip_conversion...")

    originals = [
        0x00000000,  # exponente 0: target nulo
        0x01120000,  # exponente 1
        0x02008000,  # exponente 2 con mantisa normalizada
        0x03123456,  # exponente 3
        0x04123456,
        0x05009234,
        0x1B0404CB,  # dificultad histórica de Bitcoin
        0x1C0FFFF0,
        0x1D00FFFF,
        0x1E0FFFFF,
    ]

    for original_bits in originals:
        target = DifficultyUtils.compact_to_big(original_bits)
        calculated_bits = DifficultyUtils.big_to_compact(target)

        if calculated_bits != original_bits:
            print(f"   [DEBUG] Error Round-Trip: Orig '{original_bits:08x}' -> Calc '{calculated_bits:08x}'")
        assert calculated_bits == original_bits

    print("[SUCCESS] Round-trip (Ida y Vuelta) consistente.\n")

def test_truncation_boundaries():
    print(">> Ejecutando: test_truncation_boundaries...")

    # Exponente <= 3: los bytes bajos de la mantisa se descartan al decodificar
    assert DifficultyUtils.compact_to_big(0x00123456) == 0
    assert DifficultyUtils.big_to_compact(DifficultyUtils.compact_to_big(0x00123456)) == 0
    assert DifficultyUtils.compact_to_big(0x00800000) == 0  # signo sin magnitud
    assert DifficultyUtils.compact_to_big(0x01003456) == 0
    assert DifficultyUtils.big_to_compact(DifficultyUtils.compact_to_big(0x01003456)) == 0
    assert DifficultyUtils.compact_to_big(0x02123456) == 0x1234

    # Al codificar solo sobreviven los 3 bytes altos
    pow_limit_bits = DifficultyUtils.big_to_compact(VERTCOIN_PARAMS.pow_limit)
    assert pow_limit_bits == VERTCOIN_PARAMS.pow_limit_bits
    assert DifficultyUtils.compact_to_big(pow_limit_bits) == (0x0FFFFF << 216)
    assert DifficultyUtils.compact_to_big(pow_limit_bits) < VERTCOIN_PARAMS.pow_limit

    print("[SUCCESS] Truncamiento de mantisa documentado.\n")

def test_sign_bit_handling():
    print(">> Ejecutando: test_sign_bit_handling...")

    # El bit 23 es el signo
    assert DifficultyUtils.compact_to_big(0x04923456) == -0x12345600
    assert DifficultyUtils.big_to_compact(-0x12345600) == 0x04923456

    # Una mantisa con el bit alto ocupado sube de exponente
    assert DifficultyUtils.big_to_compact(0x80) == 0x02008000
    assert DifficultyUtils.big_to_compact(0x800000) == 0x04008000

    print("[SUCCESS] Bit de signo manejado correctamente.\n")

def test_overflow_is_fatal():
    print(">> Ejecutando: test_overflow_is_fatal...")

    with pytest.raises(OverflowError):
        DifficultyUtils.big_to_compact(1 << (8 * 256))

    print("[SUCCESS] Overflow detectado.\n")

def test_parse_bits():
    print(">> Ejecutando: test_parse_bits...")

    assert DifficultyUtils.parse_bits("1c0ffff0") == 0x1C0FFFF0
    assert DifficultyUtils.parse_bits("0x1E0FFFFF") == 0x1E0FFFFF
    assert DifficultyUtils.bits_to_hex(0x0404CB) == "000404cb"

    for bad_bits in ["", "patata", "1c0ffff0ff", "-1"]:
        with pytest.raises(ValueError):
            DifficultyUtils.parse_bits(bad_bits)

    print("[SUCCESS] Lectura de bits en hex correcta.\n")

# --- PUNTO DE ENTRADA PARA EJECUCIÓN MANUAL ---
if __name__ == "__main__":
    print("=======================================")
    print("   EJECUTANDO TESTS DIFFICULTY UTILS   ")
    print("=======================================\n")

    try:
        test_compact_to_big_reference_values()
        test_round_trip_conversion()
        test_truncation_boundaries()
        test_sign_bit_handling()
        test_overflow_is_fatal()
        test_parse_bits()

        print("==========================================")
        print("   TODOS LOS TESTS PASARON EXITOSAMENTE   ")
        print("==========================================")
    except AssertionError as e:
        print(f"\nFALLO DE ASERCIÓN: {e}")
