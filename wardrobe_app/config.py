"""Configuration helpers for the wardrobe suggestion service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_DB_PATH = "data/wardrobe.db"


@dataclass
class AppConfig:
    """Configuration values for the wardrobe app.

    Values come from an optional environment YAML file merged with process
    environment variables, so deployments can override any single key without
    shipping a file.
    """

    environment: Optional[str] = None
    wardrobe_db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"
    default_page_size: int = 10
    max_page_size: int = 100
    min_rating: int = 1
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; ``APP_CONFIG_PATH`` points at an explicit file instead.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("APP_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            environment=env_name,
            wardrobe_db_path=str(get_value("wardrobe_db_path", DEFAULT_DB_PATH) or DEFAULT_DB_PATH),
            log_level=str(get_value("log_level", "INFO") or "INFO"),
            default_page_size=int(get_value("default_page_size", "10") or 10),
            max_page_size=int(get_value("max_page_size", "100") or 100),
            min_rating=int(get_value("min_rating", "1") or 1),
            host=str(get_value("host", "0.0.0.0") or "0.0.0.0"),
            port=int(get_value("port", "8080") or 8080),
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
