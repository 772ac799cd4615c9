"""Runtime settings entity."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from cachegen.core.entities.cache_config import DEFAULT_CONFIG_NAME

ENV_PREFIX = "CACHEGEN_"


def _default_config_dir() -> Path:
    return Path.home() / ".config" / "orion"


@dataclass
class Settings:
    """Runtime settings for the collaborators around the analyzer.

    Timeouts are in seconds. ``config_dir`` holds the credentials file.
    """

    config_dir: Path = field(default_factory=_default_config_dir)
    introspection_timeout: float = 30.0
    llm_timeout: float = 60.0
    config_name: str = DEFAULT_CONFIG_NAME
    schema_cache_ttl: float = 300.0
    schema_cache_size: int = 32

    def __post_init__(self) -> None:
        """Accept a plain string for the config dir."""
        self.config_dir = Path(self.config_dir)

    @property
    def credentials_path(self) -> Path:
        return self.config_dir / "credentials.json"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``CACHEGEN_*`` environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings with environment overrides applied.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        if config_dir := env.get(f"{ENV_PREFIX}CONFIG_DIR"):
            settings.config_dir = Path(config_dir)

        if timeout := env.get(f"{ENV_PREFIX}INTROSPECTION_TIMEOUT"):
            settings.introspection_timeout = float(timeout)
        if timeout := env.get(f"{ENV_PREFIX}LLM_TIMEOUT"):
            settings.llm_timeout = float(timeout)
        if name := env.get(f"{ENV_PREFIX}CONFIG_NAME"):
            settings.config_name = name
        if ttl := env.get(f"{ENV_PREFIX}SCHEMA_CACHE_TTL"):
            settings.schema_cache_ttl = float(ttl)
        if size := env.get(f"{ENV_PREFIX}SCHEMA_CACHE_SIZE"):
            settings.schema_cache_size = int(size)

        return settings
