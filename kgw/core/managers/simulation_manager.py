# kgw/core/managers/simulation_manager.py
'''
class SimulationManager:
    Proyecta bloques futuros a un hashrate fijo: tasa cada bloque con la dificultad vigente,
    sintetiza su header, lo añade a la ventana y recalcula la dificultad con KGW.

    Methods::
        simulate(num_blocks, stop_event=None) -> Iterator[SimulatedBlock]:
            Genera los bloques simulados uno a uno (perezoso).
        run(num_blocks, stop_event=None) -> SimulationSummary:
            Simula `num_blocks` bloques y devuelve el resumen con todas las filas.
'''

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from kgw.core.config.network_params import NetworkParams
from kgw.core.consensus.difficulty_adjuster import DifficultyAdjuster
from kgw.core.consensus.work_calculator import WorkCalculator
from kgw.core.models.block_header import BlockHeader
from kgw.core.models.header_window import HeaderWindow
from kgw.core.utils.hashrate import HashRate

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SimulatedBlock:
    height: int
    bits: int
    seconds: int

    @property
    def bits_hex(self) -> str:
        return f"{self.bits:08x}"

    @property
    def duration(self) -> str:
        return HashRate.format_duration(self.seconds)

@dataclass(frozen=True)
class SimulationSummary:
    blocks: List[SimulatedBlock] = field(default_factory=list)
    total_seconds: int = 0

    @property
    def blocks_simulated(self) -> int:
        return len(self.blocks)

    @property
    def average_seconds(self) -> int:
        if not self.blocks:
            return 0
        return self.total_seconds // len(self.blocks)

class SimulationManager:

    def __init__(
        self,
        params: NetworkParams,
        window: HeaderWindow,
        hash_rate: int,
        start_bits: Optional[int] = None
    ) -> None:
        if hash_rate <= 0:
            raise ValueError(f"El hashrate debe ser positivo: {hash_rate}")
        tip = window.tip
        if tip is None:
            raise ValueError("La ventana de headers está vacía.")

        self._params = params
        self._window = window
        self._hash_rate = hash_rate
        self._adjuster = DifficultyAdjuster(params)
        self._total_seconds = 0

        # Último header de la ventana (real o sintético): base del siguiente bloque
        self._tip: BlockHeader = tip
        self._next_height = tip.height + 1

        # El override solo aplica al primer bloque simulado; después manda KGW
        if start_bits is not None:
            self._current_bits = start_bits
            logger.info(f"🎛️  Override de dificultad para #{self._next_height}: {start_bits:08x}")
        else:
            self._current_bits = self._adjuster.calculate_next_bits(self._window, self._next_height)

    # --- Getters ---
    @property
    def next_height(self) -> int: return self._next_height
    @property
    def current_bits(self) -> int: return self._current_bits
    @property
    def total_seconds(self) -> int: return self._total_seconds
    @property
    def hash_rate(self) -> int: return self._hash_rate
    @property
    def window(self) -> HeaderWindow: return self._window

    def simulate(self, num_blocks: int, stop_event: Optional[threading.Event] = None) -> Iterator[SimulatedBlock]:
        if num_blocks <= 0:
            raise ValueError(f"La cantidad de bloques debe ser positiva: {num_blocks}")

        for _ in range(num_blocks):
            if stop_event is not None and stop_event.is_set():
                logger.info(f"🛑 Simulación interrumpida antes del bloque #{self._next_height}.")
                return

            yield self._step()

    def run(self, num_blocks: int, stop_event: Optional[threading.Event] = None) -> SimulationSummary:
        start_seconds = self._total_seconds
        blocks = list(self.simulate(num_blocks, stop_event))
        summary = SimulationSummary(blocks=blocks, total_seconds=self._total_seconds - start_seconds)

        logger.info(
            f"⛏️  Simulados {summary.blocks_simulated} bloques en {summary.total_seconds}s "
            f"(~{summary.average_seconds}s por bloque)"
        )
        return summary

    # --- Método Privado de Ayuda ---

    def _step(self) -> SimulatedBlock:
        # 1. Tiempo esperado según trabajo y hashrate
        seconds = WorkCalculator.time_to_block(self._current_bits, self._hash_rate)
        block = SimulatedBlock(height=self._next_height, bits=self._current_bits, seconds=seconds)
        self._total_seconds += seconds

        # 2. Header sintético (sin PoW) encadenado a la punta
        self._tip = BlockHeader.synthesize(self._tip, seconds, self._current_bits)
        self._window.add_header(self._tip)

        # 3. Dificultad del siguiente bloque
        self._next_height += 1
        self._current_bits = self._adjuster.calculate_next_bits(self._window, self._next_height)

        logger.debug(f"Bloque simulado #{block.height} | bits {block.bits_hex} | {block.duration}")
        return block
