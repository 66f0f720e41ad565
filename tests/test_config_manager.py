"""Unit tests for run configuration and fetch settings."""

import pytest

from homophone_scraper.config_manager import (
    ConfigManager, FetchSettings, RunConfig, DEFAULT_BASE_URL, DEFAULT_SELECTOR,
)
from homophone_scraper.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("HOMOPHONE_BASE_URL", raising=False)
    monkeypatch.delenv("HOMOPHONE_BACKOFF_SECONDS", raising=False)


class TestRunConfig:
    """Tests for RunConfig.validate()."""

    def test_requires_an_output(self, tmp_path):
        config = RunConfig(inputs=[tmp_path / "words.txt"])

        with pytest.raises(ConfigurationError, match="Nothing to do"):
            config.validate()

    def test_requires_an_input(self, tmp_path):
        config = RunConfig(pairs_path=tmp_path / "pairs.txt")

        with pytest.raises(ConfigurationError, match="input"):
            config.validate()

    def test_existing_output_without_force(self, tmp_path):
        singles = tmp_path / "singles.txt"
        singles.write_text("son\n", encoding="utf-8")
        config = RunConfig(inputs=[tmp_path / "words.txt"], singles_path=singles)

        with pytest.raises(ConfigurationError, match="already exists"):
            config.validate()

    def test_existing_output_with_force(self, tmp_path):
        pairs = tmp_path / "pairs.txt"
        pairs.write_text("sun,son\n", encoding="utf-8")
        config = RunConfig(inputs=[tmp_path / "words.txt"], pairs_path=pairs, force=True)

        config.validate()

    def test_output_paths(self, tmp_path):
        config = RunConfig(inputs=[tmp_path / "w"], singles_path=tmp_path / "s")

        assert config.output_paths() == [tmp_path / "s"]


class TestConfigManager:
    """Tests for ConfigManager.get_fetch_settings()."""

    def test_defaults_without_file(self):
        settings = ConfigManager().get_fetch_settings()

        assert settings == FetchSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.backoff_seconds == 20
        assert settings.selector == DEFAULT_SELECTOR

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "fetch:\n  base_url: https://en.wiktionary.org/w/\n  backoff_seconds: 5\n",
            encoding="utf-8",
        )

        settings = ConfigManager(str(path)).get_fetch_settings()

        assert settings.base_url == "https://en.wiktionary.org/w/"
        assert settings.backoff_seconds == 5
        assert settings.timeout == FetchSettings().timeout

    def test_environment_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  backoff_seconds: 5\n", encoding="utf-8")
        monkeypatch.setenv("HOMOPHONE_BACKOFF_SECONDS", "1.5")
        monkeypatch.setenv("HOMOPHONE_BASE_URL", "http://localhost:8000/wiki/")

        settings = ConfigManager(str(path)).get_fetch_settings()

        assert settings.backoff_seconds == 1.5
        assert settings.base_url == "http://localhost:8000/wiki/"

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("HOMOPHONE_BACKOFF_SECONDS", "soon")

        with pytest.raises(ConfigurationError, match="HOMOPHONE_BACKOFF_SECONDS"):
            ConfigManager().get_fetch_settings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigManager(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigManager(str(path))

    def test_unknown_fetch_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  retries: 5\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Unknown fetch setting"):
            ConfigManager(str(path))

    def test_negative_backoff(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  backoff_seconds: -1\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="backoff_seconds"):
            ConfigManager(str(path))

    def test_invalid_selector(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  selector: \"span[[\"\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid CSS selector"):
            ConfigManager(str(path))

    def test_custom_selector_is_accepted(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  selector: \"ul.alt li a\"\n", encoding="utf-8")

        assert ConfigManager(str(path)).get_fetch_settings().selector == "ul.alt li a"

    def test_zero_timeout(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  timeout: 0\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="greater than zero"):
            ConfigManager(str(path))

    def test_zero_backoff_is_allowed(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  backoff_seconds: 0\n", encoding="utf-8")

        assert ConfigManager(str(path)).get_fetch_settings().backoff_seconds == 0

    @pytest.mark.parametrize("key", ["timeout", "backoff_seconds"])
    def test_boolean_number(self, tmp_path, key):
        path = tmp_path / "config.yaml"
        path.write_text(f"fetch:\n  {key}: true\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a number"):
            ConfigManager(str(path))

    @pytest.mark.parametrize("key", ["base_url", "user_agent", "selector"])
    def test_non_string_setting(self, tmp_path, key):
        path = tmp_path / "config.yaml"
        path.write_text(f"fetch:\n  {key}: 42\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a string"):
            ConfigManager(str(path))

    def test_negative_backoff_from_environment(self, monkeypatch):
        monkeypatch.setenv("HOMOPHONE_BACKOFF_SECONDS", "-5")

        with pytest.raises(ConfigurationError, match="backoff_seconds"):
            ConfigManager().get_fetch_settings()
