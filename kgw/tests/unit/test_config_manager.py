# kgw/tests/unit/test_config_manager.py
'''
Test Suite para la capa de configuración:
    Verifica los parámetros de red inmutables, los overrides de entorno y la carga desde JSON.
'''

import sys
import os
import dataclasses
import tempfile
from pathlib import Path
import unittest
from unittest.mock import patch

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from kgw.core.config.config_manager import ConfigManager
from kgw.core.config.network_params import NetworkParams, VERTCOIN_PARAMS
from kgw.core.config.rpc_config import RpcConfig
from kgw.core.config.simulation_config import SimulationConfig
from kgw.core.config.paths import Paths
from kgw.interface.api.config import ApiConfig

class TestNetworkParams(unittest.TestCase):

    def test_reference_network(self):
        print("\n>> Ejecutando: test_reference_network...")
        self.assertEqual(VERTCOIN_PARAMS.pow_limit, (1 << 236) - 1)
        self.assertEqual(VERTCOIN_PARAMS.pow_limit_bits, 0x1E0FFFFF)
        self.assertEqual(VERTCOIN_PARAMS.min_blocks, 144)
        self.assertEqual(VERTCOIN_PARAMS.max_blocks, 4032)
        self.assertEqual(VERTCOIN_PARAMS.target_time_per_block, 150)
        self.assertEqual(VERTCOIN_PARAMS.ceiling_target, 0x0FFFFF << 216)

    def test_params_are_immutable(self):
        print("\n>> Ejecutando: test_params_are_immutable...")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            VERTCOIN_PARAMS.max_blocks = 10  # type: ignore

    def test_window_must_cover_horizon(self):
        print("\n>> Ejecutando: test_window_must_cover_horizon...")
        with self.assertRaises(ValueError):
            dataclasses.replace(VERTCOIN_PARAMS, window_capacity=100)

    @patch.dict(os.environ, {"KGW_BLOCK_TIME": "60", "KGW_NETWORK_NAME": "regtest"})
    def test_load_reads_environment(self):
        print("\n>> Ejecutando: test_load_reads_environment...")
        params = NetworkParams.load()

        self.assertEqual(params.name, "regtest")
        self.assertEqual(params.target_time_per_block, 60)
        self.assertEqual(params.max_blocks, VERTCOIN_PARAMS.max_blocks)

class TestConfigManager(unittest.TestCase):

    def setUp(self):
        setattr(ConfigManager, "_instance", None)

    def tearDown(self):
        setattr(ConfigManager, "_instance", None)

    def test_singleton(self):
        print("\n>> Ejecutando: test_singleton...")
        self.assertIs(ConfigManager(), ConfigManager())

    def test_load_from_json_dict(self):
        print("\n>> Ejecutando: test_load_from_json_dict...")
        config = ConfigManager()
        config.load_from_json_dict({
            "rpc": {"host": "10.0.0.2", "port": 15888, "user": "bob"},
            "simulation": {"hashrate_unit": "th", "max_api_blocks": 50}
        })

        self.assertEqual(config.rpc.url, "http://10.0.0.2:15888/")
        self.assertEqual(config.rpc.user, "bob")
        self.assertEqual(config.simulation.hashrate_unit, "TH")
        self.assertEqual(config.simulation.max_api_blocks, 50)

    def test_rejects_unknown_unit(self):
        print("\n>> Ejecutando: test_rejects_unknown_unit...")
        with self.assertRaises(ValueError):
            SimulationConfig().update_from_dict({"hashrate_unit": "ZH"})

    def test_rpc_update_ignores_missing_values(self):
        print("\n>> Ejecutando: test_rpc_update_ignores_missing_values...")
        rpc = RpcConfig()
        port = rpc.port
        rpc.update_from_dict({"host": None, "port": None, "user": "carol"})

        self.assertEqual(rpc.port, port)
        self.assertEqual(rpc.user, "carol")

class TestApiConfig(unittest.TestCase):

    @patch.dict(os.environ, {"KGW_DEBUG": "true", "KGW_API_PORT": "9090"})
    def test_load_reads_environment(self):
        print("\n>> Ejecutando: test_load_reads_environment (API)...")
        config = ApiConfig.load()

        self.assertTrue(config.debug_mode)
        self.assertEqual(config.port, 9090)

    @patch.dict(os.environ, {"KGW_DEBUG": "no"})
    def test_debug_disabled_by_default(self):
        print("\n>> Ejecutando: test_debug_disabled_by_default...")
        self.assertFalse(ApiConfig.load().debug_mode)

class TestPaths(unittest.TestCase):

    def test_next_log_file_is_numbered(self):
        print("\n>> Ejecutando: test_next_log_file_is_numbered...")
        with tempfile.TemporaryDirectory() as tmp:
            logs = Path(tmp) / "logs"
            with patch.object(Paths, "LOGS_DIR", logs):
                self.assertTrue(Paths.next_log_file().endswith("kgw_0.log"))

                (logs / "kgw_0.log").touch()
                (logs / "kgw_7.log").touch()
                (logs / "kgw_notas.log").touch()
                self.assertTrue(Paths.next_log_file().endswith("kgw_8.log"))

if __name__ == "__main__":
    unittest.main()
