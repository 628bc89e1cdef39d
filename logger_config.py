# logger_config.py
import logging
import sys

from kgw.core.config.paths import Paths

FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'
CONSOLE_FORMAT = '\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'

def setup_logging(verbose: bool = False) -> str:
    """
    Configura el root logger para una sesión del simulador y devuelve la ruta del log.

    - Archivo numerado (data/logs/kgw_N.log): INFO, o DEBUG con --verbose (un renglón por retarget).
    - stderr: solo ERROR/CRITICAL; stdout queda reservado para la tabla.
    """
    level = logging.DEBUG if verbose else logging.INFO
    nombre_archivo = Paths.next_log_file()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Evita handlers duplicados si se llama dos veces (tests, recarga de uvicorn)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(FILE_FORMAT))

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.ERROR)
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    # urllib3 (bajo requests) es ruidoso en DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return nombre_archivo
