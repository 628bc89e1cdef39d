import os
import sys
import json
import argparse
import logging
from typing import Any, Dict, List, Optional

# Importamos uvicorn para el servidor API (Solo se usa en modo 'serve')
import uvicorn

import logger_config

from kgw.core.config.config_manager import ConfigManager
from kgw.core.config.protocol_constants import ProtocolConstants
from kgw.core.factories.simulation_factory import SimulationFactory
from kgw.core.managers.simulation_manager import SimulationSummary
from kgw.core.utils.difficulty_utils import DifficultyUtils
from kgw.core.utils.hashrate import HashRate
from kgw.core.exceptions import KgwError
from kgw.interface.cli.table_printer import TablePrinter

logger = logging.getLogger("kgw.main")

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' no es un entero")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' debe ser positivo")
    return number

def compact_bits(value: str) -> int:
    try:
        return DifficultyUtils.parse_bits(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def load_config(config_path: str) -> Dict[str, Any]:
    """Carga el archivo JSON de configuración opcional."""
    if not os.path.exists(config_path):
        logger.critical(f"❌ No existe el archivo de configuración: {config_path}")
        sys.exit(1)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ JSON Corrupto en {config_path}: {e}")
        sys.exit(1)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulador de dificultad Kimoto Gravity Well")
    parser.add_argument("--config", help="Archivo JSON con secciones 'rpc' y 'simulation'")
    parser.add_argument("--verbose", action="store_true", help="Registrar cada retarget en el log")

    sub = parser.add_subparsers(dest="command", required=True)

    sim = sub.add_parser("simulate", help="Proyectar bloques futuros desde la punta del nodo")
    sim.add_argument("rpcuser", help="Usuario RPC del nodo")
    sim.add_argument("rpcpass", help="Contraseña RPC del nodo")
    sim.add_argument("hashrate", type=positive_int, help="Hashrate esperado de la red (por defecto en GH/s)")
    sim.add_argument("num", type=positive_int, help="Cantidad de bloques a simular")
    sim.add_argument("diff", nargs="?", type=compact_bits, help="Override de bits (hex) para el primer bloque")
    sim.add_argument("--unit", choices=sorted(ProtocolConstants.HASHRATE_UNITS), help="Unidad del hashrate")
    sim.add_argument("--rpc-host", help="Host del nodo")
    sim.add_argument("--rpc-port", type=positive_int, help="Puerto RPC del nodo")

    srv = sub.add_parser("serve", help="Levantar la API HTTP del simulador")
    srv.add_argument("--host", default=None, help="Host de escucha")
    srv.add_argument("--port", type=positive_int, default=None, help="Puerto de escucha")

    return parser

# =========================================================
# 🚀 COMANDOS
# =========================================================

def run_simulation(args: argparse.Namespace) -> int:
    config = ConfigManager()
    config.rpc.update_from_dict({
        "host": args.rpc_host,
        "port": args.rpc_port,
        "user": args.rpcuser,
        "password": args.rpcpass
    })

    unit = args.unit or config.simulation.hashrate_unit
    source = None
    try:
        hash_rate = HashRate.to_hashes_per_second(args.hashrate, unit)
        source = SimulationFactory.create_rpc_source(config.rpc)
        manager = SimulationFactory.from_source(source, hash_rate, args.diff, config.network)

        printer = TablePrinter()
        printer.print_header()

        blocks = []
        for block in manager.simulate(args.num):
            printer.print_row(block)
            blocks.append(block)

        printer.print_summary(SimulationSummary(blocks=blocks, total_seconds=manager.total_seconds))
        return 0

    except (KgwError, ValueError) as e:
        logger.critical(f"❌ Simulación abortada: {e}")
        return 1
    finally:
        if source is not None:
            source.close()

def run_server(args: argparse.Namespace) -> int:
    # La API importa su configuración del entorno al cargarse
    if args.host:
        os.environ["KGW_API_HOST"] = args.host
    if args.port:
        os.environ["KGW_API_PORT"] = str(args.port)

    from kgw.interface.api.config import settings

    print(f"🌐 API Disponible en: http://{settings.host}:{settings.port}")
    uvicorn.run("kgw.interface.api.server:app", host=settings.host, port=settings.port, log_level="info")
    return 0

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_file = logger_config.setup_logging(verbose=args.verbose)
    logger.info(f"📝 Log de sesión: {log_file}")

    if args.config:
        ConfigManager().load_from_json_dict(load_config(args.config))

    if args.command == "serve":
        return run_server(args)
    return run_simulation(args)

if __name__ == "__main__":
    sys.exit(main())
