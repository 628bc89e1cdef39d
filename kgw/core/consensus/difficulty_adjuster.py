# kgw/core/consensus/difficulty_adjuster.py
'''
class DifficultyAdjuster:
    Retargeting Kimoto Gravity Well (KGW): recorre hacia atrás una ventana de longitud variable,
    promedia los targets y corta la ventana cuando el ritmo real de bloques sale del "horizonte de eventos".

    Methods::
        calculate_next_bits(headers, height) -> int:
            nBits para el bloque `height`. `headers` termina en height-1 (nunca incluye el bloque que se está tasando).
'''

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Sequence

# Modelos y Configuración
from kgw.core.models.block_header import BlockHeader
from kgw.core.config.network_params import NetworkParams
from kgw.core.exceptions import InsufficientHistoryError

# Utilidades Matemáticas
from kgw.core.utils.difficulty_utils import DifficultyUtils

logger = logging.getLogger(__name__)

# Constantes de la envolvente del horizonte de eventos
EVENT_HORIZON_FACTOR = 0.7084
EVENT_HORIZON_EXPONENT = -1.228

@dataclass(frozen=True)
class ScanState:
    """Acumulador del escaneo hacia atrás."""
    blocks_scanned: int
    difficulty_average: int
    actual_rate: int
    target_rate: int

    @property
    def rate_adjustment_ratio(self) -> float:
        if self.actual_rate != 0 and self.target_rate != 0:
            return self.target_rate / self.actual_rate
        return 1.0

class DifficultyAdjuster:

    def __init__(self, params: NetworkParams) -> None:
        self._params = params

    @property
    def params(self) -> NetworkParams:
        return self._params

    def calculate_next_bits(self, headers: Sequence[BlockHeader], height: int) -> int:
        params = self._params

        # 1. Cadena demasiado joven: dificultad mínima
        if height - 1 < params.min_blocks:
            return params.pow_limit_bits

        # 2. La ventana debe cubrir todo el horizonte de escaneo
        horizon = min(params.max_blocks, height - 1)
        if len(headers) < horizon:
            logger.error(f"📉 Historial insuficiente para #{height}: {len(headers)}/{horizon} headers.")
            raise InsufficientHistoryError(height, horizon, len(headers))

        last_solved = headers[-1]
        if last_solved.height != height - 1:
            raise ValueError(
                f"La ventana termina en #{last_solved.height}, se esperaba #{height - 1}"
            )

        # 3. Escaneo hacia atrás con acumulador explícito (vacío: media 0, 0 bloques)
        state = ScanState(blocks_scanned=0, difficulty_average=0, actual_rate=0, target_rate=0)
        for current in islice(reversed(headers), horizon):
            state = self._scan_step(state, current, last_solved)
            if self._outside_event_horizon(state):
                break

        # 4. Nuevo target: promedio escalado por el ritmo real/objetivo
        new_target = state.difficulty_average
        if state.actual_rate != 0 and state.target_rate != 0:
            new_target = new_target * state.actual_rate // state.target_rate

        if new_target > params.pow_limit:
            new_target = params.pow_limit

        new_bits = DifficultyUtils.big_to_compact(new_target)

        logger.debug(
            f"KGW #{height}: {state.blocks_scanned} bloques escaneados "
            f"(Real: {state.actual_rate}s | Obj: {state.target_rate}s) -> {new_bits:08x}"
        )
        return new_bits

    # --- Métodos Privados de Ayuda ---

    def _scan_step(self, state: ScanState, current: BlockHeader, last_solved: BlockHeader) -> ScanState:
        target = DifficultyUtils.compact_to_big(current.bits)

        # Media móvil acumulada: cada muestra pesa 1/i (división entera por piso).
        # Con i = 1 el resultado es exactamente el primer target.
        scanned = state.blocks_scanned + 1
        average = state.difficulty_average + (target - state.difficulty_average) // scanned

        actual_rate = max(0, last_solved.timestamp - current.timestamp)
        target_rate = self._params.target_time_per_block * scanned

        return ScanState(
            blocks_scanned=scanned,
            difficulty_average=average,
            actual_rate=actual_rate,
            target_rate=target_rate
        )

    def _outside_event_horizon(self, state: ScanState) -> bool:
        if state.blocks_scanned < self._params.min_blocks:
            return False

        deviation = self.event_horizon_deviation(state.blocks_scanned, self._params.min_blocks)
        ratio = state.rate_adjustment_ratio
        return ratio <= 1 / deviation or ratio >= deviation

    @staticmethod
    def event_horizon_deviation(blocks_scanned: int, min_blocks: int) -> float:
        """Tolerancia que se estrecha a medida que se acumulan muestras."""
        return 1 + EVENT_HORIZON_FACTOR * (blocks_scanned / min_blocks) ** EVENT_HORIZON_EXPONENT
