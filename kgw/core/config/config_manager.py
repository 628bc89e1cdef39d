# kgw/core/config/config_manager.py
'''
class ConfigManager:
    Orquesta y centraliza el acceso a la configuración (Red, RPC y Simulación), cargando valores desde el entorno o JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las sub-configuraciones a partir de un diccionario JSON.

'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

# Importar piezas de configuración
from kgw.core.config.network_params import NetworkParams
from kgw.core.config.rpc_config import RpcConfig
from kgw.core.config.simulation_config import SimulationConfig

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._network = NetworkParams.load()     # Reglas de dificultad (inmutables)
        self._rpc = RpcConfig()                  # Nodo fuente de headers
        self._simulation = SimulationConfig()    # Unidades y límites

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        # Nodo
        if "rpc" in json_data:
            self._rpc.update_from_dict(json_data["rpc"])

        # Simulación
        if "simulation" in json_data:
            self._simulation.update_from_dict(json_data["simulation"])

        # Los parámetros de red son inmutables: solo se leen del entorno al arrancar

    # --- ACCESORES ORGANIZADOS ---

    @property
    def network(self) -> NetworkParams:
        return self._network

    @property
    def rpc(self) -> RpcConfig:
        return self._rpc

    @property
    def simulation(self) -> SimulationConfig:
        return self._simulation
