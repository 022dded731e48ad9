"""Tests for services/config_manager.py"""

import json

from services.config_manager import ConfigManager
from services.diff_engine import DiffEngine


class TestConfigManager:
    def test_defaults_when_file_missing(self, tmp_path):
        config = ConfigManager(config_dir=str(tmp_path)).get_config()
        assert config["defaults"] == {"ignoreWhitespace": False, "ignoreCase": False, "detectMoved": False}
        assert config["limits"]["maxLines"] == 20000
        assert config["logLevel"] == "INFO"

    def test_set_persists(self, tmp_path):
        ConfigManager(config_dir=str(tmp_path)).set("logLevel", "DEBUG")
        assert ConfigManager(config_dir=str(tmp_path)).get("logLevel") == "DEBUG"

    def test_partial_section_merges_with_defaults(self, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({"limits": {"maxLines": 5}}))
        config = ConfigManager(config_dir=str(tmp_path)).get_config()
        assert config["limits"] == {"maxLines": 5, "maxLineTokens": 4000, "maxAlignmentWork": 10_000_000}

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "config.json").write_text("{not json")
        config = ConfigManager(config_dir=str(tmp_path)).get_config()
        assert config["server"]["port"] == 8000

    def test_non_object_section_keeps_defaults(self, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({"limits": None, "defaults": [1], "logLevel": "DEBUG"}))
        config = ConfigManager(config_dir=str(tmp_path)).get_config()
        assert config["limits"]["maxLines"] == 20000
        assert config["defaults"]["ignoreCase"] is False
        assert config["logLevel"] == "DEBUG"
        assert DiffEngine.from_config(config).max_lines == 20000

    def test_non_object_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "config.json").write_text("[]")
        config = ConfigManager(config_dir=str(tmp_path)).get_config()
        assert config["limits"]["maxLineTokens"] == 4000

    def test_get_config_returns_copy(self, tmp_path):
        manager = ConfigManager(config_dir=str(tmp_path))
        manager.get_config()["limits"]["maxLines"] = 1
        assert manager.get_config()["limits"]["maxLines"] == 20000

    def test_singleton_uses_environment(self, config_dir):
        manager = ConfigManager.get_instance()
        assert manager is ConfigManager.get_instance()
        assert manager.config_file == config_dir / "config.json"
