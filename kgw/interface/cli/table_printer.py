# kgw/interface/cli/table_printer.py

import sys
from typing import TextIO, Optional

from kgw.core.managers.simulation_manager import SimulatedBlock, SimulationSummary

class TablePrinter:
    """
    Salida tabular de la simulación:

        |        Altura      |    Bits Dificultad |  Tiempo al bloque  |
        |--------------------|--------------------|--------------------|
        |              1235|            1b0404cb|               2m30s|
    """

    COLUMN_WIDTH = 20

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._out = stream or sys.stdout

    def print_header(self) -> None:
        w = self.COLUMN_WIDTH
        self._out.write(f"|{'Altura':>{w}}|{'Bits Dificultad':>{w}}|{'Tiempo al bloque':>{w}}|\n")
        self._out.write("|" + "|".join(["-" * w] * 3) + "|\n")

    def print_row(self, block: SimulatedBlock) -> None:
        w = self.COLUMN_WIDTH
        self._out.write(f"|{block.height:>{w}d}|{block.bits:>{w}x}|{block.duration:>{w}}|\n")

    def print_summary(self, summary: SimulationSummary) -> None:
        self._out.write(
            f"Minados {summary.blocks_simulated} bloques en {summary.total_seconds} segundos "
            f"(~{summary.average_seconds} por bloque)\n"
        )
