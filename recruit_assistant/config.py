"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_DATABASE_URL = "sqlite:///data/recruit_assistant.db"


@dataclass
class DatabaseConfig:
    url: str = DEFAULT_DATABASE_URL


@dataclass
class CacheConfig:
    ttl_seconds: float = 300.0  # 5 minutes
    warm_interval_minutes: int = 0  # 0 disables background refresh


@dataclass
class AssistantConfig:
    api_key: str = ""
    base_url: str = ""  # empty = OpenAI default endpoint
    model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 1000
    max_profiles: int = 20


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])


@dataclass
class AppConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    assistant: AssistantConfig = field(default_factory=AssistantConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def normalize_database_url(url: str) -> str:
    # Heroku/Railway style postgres:// is rejected by SQLAlchemy 2.x
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return config_from_dict(raw)


def config_from_dict(raw: dict) -> AppConfig:
    """Build an AppConfig from parsed YAML, applying env var overrides."""
    config = AppConfig()

    # Database (env var takes precedence)
    db_raw = raw.get("database", {}) or {}
    config.database = DatabaseConfig(
        url=normalize_database_url(
            os.environ.get("DATABASE_URL", db_raw.get("url", DEFAULT_DATABASE_URL))
        ),
    )

    # Cache
    cache_raw = raw.get("cache", {}) or {}
    config.cache = CacheConfig(
        ttl_seconds=float(cache_raw.get("ttl_seconds", 300)),
        warm_interval_minutes=int(cache_raw.get("warm_interval_minutes", 0)),
    )

    # Assistant (env vars take precedence)
    assistant_raw = raw.get("assistant", {}) or {}
    config.assistant = AssistantConfig(
        api_key=os.environ.get("OPENAI_API_KEY", assistant_raw.get("api_key", "")),
        base_url=os.environ.get("OPENAI_BASE_URL", assistant_raw.get("base_url", "")),
        model=assistant_raw.get("model", "gpt-4o"),
        temperature=float(assistant_raw.get("temperature", 0.7)),
        max_tokens=int(assistant_raw.get("max_tokens", 1000)),
        max_profiles=int(assistant_raw.get("max_profiles", 20)),
    )

    # Server
    server_raw = raw.get("server", {}) or {}
    config.server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(os.environ.get("PORT", server_raw.get("port", 5000))),
        cors_origins=server_raw.get("cors_origins", ["http://localhost:3000"]),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = raw.get("log_level", "INFO")

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if config.cache.ttl_seconds <= 0:
        warnings.append("Cache TTL is not positive - every request will rebuild the snapshot")

    if config.cache.warm_interval_minutes < 0:
        warnings.append("Negative cache warm interval - background refresh disabled")

    if not config.assistant.api_key:
        warnings.append("No OpenAI API key configured - AI analysis endpoint will be unavailable")

    if config.assistant.max_profiles <= 0:
        warnings.append("assistant.max_profiles must be positive - no candidates will reach the assistant")

    if config.database.url.startswith("sqlite:///:memory:"):
        warnings.append("In-memory SQLite database configured - records are lost on restart")

    return warnings
