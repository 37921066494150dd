"""Tests for configuration loading."""

import os
import tempfile

import pytest
import yaml

from recruit_assistant.config import AppConfig, load_config, normalize_database_url, validate_config


@pytest.fixture
def config_file():
    """Create a temporary config file."""
    config_data = {
        "database": {"url": "sqlite:///tmp/recruit.db"},
        "cache": {"ttl_seconds": 60, "warm_interval_minutes": 4},
        "assistant": {"api_key": "sk-test", "model": "gpt-4o-mini", "max_profiles": 10},
        "server": {"port": 8080, "cors_origins": ["https://recruit.example.com"]},
        "log_level": "DEBUG",
    }

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config_data, f)
        path = f.name

    yield path
    os.unlink(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "OPENAI_API_KEY", "OPENAI_BASE_URL", "PORT"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_loads_valid_config(self, config_file):
        config = load_config(config_file)
        assert config.database.url == "sqlite:///tmp/recruit.db"
        assert config.cache.ttl_seconds == 60
        assert config.cache.warm_interval_minutes == 4
        assert config.assistant.model == "gpt-4o-mini"
        assert config.assistant.max_profiles == 10
        assert config.server.port == 8080
        assert config.server.cors_origins == ["https://recruit.example.com"]
        assert config.log_level == "DEBUG"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent.yaml")

    def test_defaults_applied(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            path = f.name

        try:
            config = load_config(path)
            assert config.cache.ttl_seconds == 300
            assert config.assistant.model == "gpt-4o"
            assert config.assistant.temperature == 0.7
            assert config.server.port == 5000
        finally:
            os.unlink(path)

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db/recruit")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("PORT", "9000")
        config = load_config(config_file)
        assert config.database.url == "postgresql://u:p@db/recruit"
        assert config.assistant.api_key == "sk-env"
        assert config.server.port == 9000


class TestValidateConfig:
    def test_no_api_key_warns(self):
        warnings = validate_config(AppConfig())
        assert any("openai" in w.lower() for w in warnings)

    def test_non_positive_ttl_warns(self):
        config = AppConfig()
        config.cache.ttl_seconds = 0
        assert any("ttl" in w.lower() for w in validate_config(config))

    def test_valid_config_no_warnings(self, config_file):
        assert validate_config(load_config(config_file)) == []


def test_normalize_database_url():
    assert normalize_database_url("postgres://x/y") == "postgresql://x/y"
    assert normalize_database_url("sqlite:///a.db") == "sqlite:///a.db"
