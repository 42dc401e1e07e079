"""Tests for the config module."""

from pathlib import Path

from enplace_shopper import config


class TestPaths:
    """Tests for config paths."""

    def test_checklist_inside_config_dir(self):
        assert config.CHECKLIST_FILE.parent == config.CONFIG_DIR
        assert config.CHECKLIST_FILE.name == "checklist.json"


class TestGetRecipesFile:
    """Tests for get_recipes_file function."""

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENPLACE_RECIPES_FILE", str(tmp_path / "recipes.json"))
        assert config.get_recipes_file() == tmp_path / "recipes.json"

    def test_expands_home(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_RECIPES_FILE", "~/recipes.json")
        assert config.get_recipes_file() == Path.home() / "recipes.json"

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("ENPLACE_RECIPES_FILE", raising=False)
        assert config.get_recipes_file() is None

    def test_empty(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_RECIPES_FILE", "")
        assert config.get_recipes_file() is None


class TestGetLogLevel:
    """Tests for get_log_level function."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("ENPLACE_LOG_LEVEL", raising=False)
        assert config.get_log_level() == "WARNING"

    def test_upper_cased(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"


class TestGetLogFormat:
    """Tests for get_log_format function."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("ENPLACE_LOG_FORMAT", raising=False)
        assert config.get_log_format() == "text"

    def test_json(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_LOG_FORMAT", "JSON")
        assert config.get_log_format() == "json"

    def test_unknown_falls_back_to_text(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_LOG_FORMAT", "xml")
        assert config.get_log_format() == "text"


class TestGetLogFile:
    """Tests for get_log_file function."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("ENPLACE_LOG_FILE", raising=False)
        assert config.get_log_file() is None

    def test_empty(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_LOG_FILE", "")
        assert config.get_log_file() is None

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENPLACE_LOG_FILE", str(tmp_path / "enplace.log"))
        assert config.get_log_file() == str(tmp_path / "enplace.log")

    def test_expands_home(self, monkeypatch):
        monkeypatch.setenv("ENPLACE_LOG_FILE", "~/enplace.log")
        assert config.get_log_file() == str(Path.home() / "enplace.log")
