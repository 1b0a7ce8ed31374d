"""Configuration helpers for the FitStyle app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Dict, Optional

DEFAULT_DATA_DIR = "data"
DEFAULT_ANALYSIS_DELAY_SECONDS = 0.7
ENV_PREFIX = "FITSTYLE_"
_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """Configuration values for the FitStyle app.

    Paths left as ``None`` resolve inside ``data_dir`` so a single directory
    override is enough to relocate every durable file.
    """

    data_dir: str = DEFAULT_DATA_DIR
    saved_looks_path: Optional[str] = None
    preferences_path: Optional[str] = None
    analysis_delay_seconds: float = DEFAULT_ANALYSIS_DELAY_SECONDS
    log_level: str = "INFO"
    seed_wardrobe: bool = True
    environment: str | None = None

    @property
    def resolved_saved_looks_path(self) -> Path:
        return Path(self.saved_looks_path or Path(self.data_dir) / "saved_looks.json")

    @property
    def resolved_preferences_path(self) -> Path:
        return Path(self.preferences_path or Path(self.data_dir) / "preferences.json")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from ``FITSTYLE_*`` variables layered over a YAML file.

        The file is ``APP_CONFIG_PATH`` when set, otherwise
        ``<FITSTYLE_CONFIG_DIR>/<APP_ENV>.yaml`` (default directory
        ``config/environments``). ``LOG_LEVEL`` is honoured unprefixed.
        """

        env_name = os.getenv("APP_ENV")
        config_file = _config_file(env_name)
        file_values = cls._load_yaml_config(config_file) if config_file else {}

        def lookup(key: str) -> Optional[str]:
            return os.getenv(ENV_PREFIX + key.upper(), file_values.get(key)) or None

        delay = lookup("analysis_delay_seconds")
        seed = lookup("seed_wardrobe")
        log_level = os.getenv("LOG_LEVEL") or file_values.get("log_level") or "INFO"
        return cls(
            data_dir=lookup("data_dir") or DEFAULT_DATA_DIR,
            saved_looks_path=lookup("saved_looks_path"),
            preferences_path=lookup("preferences_path"),
            analysis_delay_seconds=float(delay) if delay else DEFAULT_ANALYSIS_DELAY_SECONDS,
            log_level=log_level.upper(),
            seed_wardrobe=seed is None or seed.strip().lower() not in _FALSE_WORDS,
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> Dict[str, str]:
        """Read flat ``key: value`` lines; nesting and lists are not supported."""

        values: Dict[str, str] = {}
        for line in path.read_text().splitlines():
            if line.lstrip().startswith("#") or ":" not in line:
                continue
            key, _, raw = line.partition(":")
            value = raw.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            values[key.strip()] = value
        return values


def _config_file(env_name: Optional[str]) -> Optional[Path]:
    explicit = os.getenv("APP_CONFIG_PATH")
    if explicit:
        candidate = Path(explicit)
    elif env_name:
        candidate = Path(os.getenv("FITSTYLE_CONFIG_DIR", "config/environments")) / f"{env_name}.yaml"
    else:
        return None
    return candidate if candidate.exists() else None
