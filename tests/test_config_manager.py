"""Test configuration discovery and merging."""

import pytest

from npminit.core.config_manager import ConfigManager


class TestConfigManager:

    def test_package_default_config(self):
        config = ConfigManager().load_package_default_config()

        assert config["registry"]["url"] == "https://registry.npmjs.com"
        assert config["registry"]["max_name_attempts"] == 10
        assert config["manifest"]["path"] == "package.json"
        assert config["manifest"]["license"] == "MIT"
        assert config["manifest"]["defaults"]["version"] == "1.0.0"
        assert config["manifest"]["defaults"]["scripts"]["test"] == 'echo "Error: no test specified" && exit 1'
        assert config["logging"]["file"] is None

    def test_deep_merge(self):
        manager = ConfigManager()
        merged = manager.deep_merge(
            {"registry": {"url": "a", "timeout": 30}, "logging": {"level": "WARNING"}},
            {"registry": {"timeout": 5}},
        )
        assert merged == {"registry": {"url": "a", "timeout": 5}, "logging": {"level": "WARNING"}}

    def test_explicit_config_is_merged(self, tmp_path):
        user_config = tmp_path / "custom.yaml"
        user_config.write_text("registry:\n  url: https://npm.example.com\n", encoding="utf-8")

        config = ConfigManager().discover_and_load_config(str(user_config))

        assert config["registry"]["url"] == "https://npm.example.com"
        assert config["registry"]["timeout"] == 30

    def test_missing_explicit_config_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager().discover_and_load_config(str(tmp_path / "nope.yaml"))

    def test_discovers_config_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "npminit.config.yaml").write_text("manifest:\n  license: ISC\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        config = ConfigManager().discover_and_load_config(None)

        assert config["manifest"]["license"] == "ISC"
        assert config["manifest"]["path"] == "package.json"

    def test_empty_user_config(self, tmp_path):
        user_config = tmp_path / "empty.yaml"
        user_config.write_text("", encoding="utf-8")

        config = ConfigManager().discover_and_load_config(str(user_config))

        assert config["manifest"]["license"] == "MIT"
