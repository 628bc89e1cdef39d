# kgw/core/config/paths.py

import os
import glob
from pathlib import Path
from typing import Dict

class Paths:
    """
    Rutas de datos del simulador (solo logs de sesión: no hay persistencia de cadena).
    KGW_DATA_DIR permite redirigirlas, p. ej. en tests o contenedores.
    """

    # Raíz del repo (kgw/core/config -> raíz)
    _CODE_ROOT = Path(__file__).resolve().parent.parent.parent.parent

    DATA_DIR = Path(os.getenv("KGW_DATA_DIR", _CODE_ROOT / "data"))
    LOGS_DIR = DATA_DIR / "logs"

    LOG_PREFIX = "kgw_"

    @staticmethod
    def ensure_directories_exist() -> Dict[str, str]:
        os.makedirs(Paths.LOGS_DIR, exist_ok=True)
        return {
            "root": str(Paths.DATA_DIR),
            "logs": str(Paths.LOGS_DIR)
        }

    @staticmethod
    def next_log_file() -> str:
        """Siguiente archivo de sesión libre: kgw_0.log, kgw_1.log, ..."""
        log_dir = Paths.ensure_directories_exist()["logs"]

        indices = []
        for archivo in glob.glob(os.path.join(log_dir, f"{Paths.LOG_PREFIX}*.log")):
            sufijo = Path(archivo).stem[len(Paths.LOG_PREFIX):]
            if sufijo.isdigit():
                indices.append(int(sufijo))

        siguiente = max(indices) + 1 if indices else 0
        return os.path.join(log_dir, f"{Paths.LOG_PREFIX}{siguiente}.log")
