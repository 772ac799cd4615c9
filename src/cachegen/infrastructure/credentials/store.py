"""File-based storage of LLM provider API keys.

Keys live in ``<config_dir>/credentials.json``, readable and writable by
the owner only. Environment variables take precedence over the file.
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from cachegen.core.entities.settings import Settings
from cachegen.infrastructure.llm.providers import AIProvider

logger = logging.getLogger(__name__)

CREDENTIALS_FILE_MODE = 0o600

# Environment variables checked for each provider, in priority order.
ENV_VAR_PRIORITY: dict[AIProvider, tuple[str, ...]] = {
    AIProvider.ANTHROPIC: ("ANTHROPIC_API_KEY",),
    AIProvider.OPENAI: ("OPENAI_API_KEY",),
    AIProvider.GEMINI: ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    AIProvider.GROK: ("XAI_API_KEY", "GROK_API_KEY"),
    AIProvider.GROQ: ("GROQ_API_KEY",),
    AIProvider.HUGGINGFACE: ("HF_TOKEN", "HUGGINGFACE_API_KEY"),
    AIProvider.OLLAMA: (),
}


@dataclass(frozen=True)
class KeyFormat:
    """Expected shape of a provider's API keys."""

    pattern: re.Pattern[str]
    min_length: int
    description: str


KEY_FORMATS: dict[AIProvider, KeyFormat] = {
    AIProvider.ANTHROPIC: KeyFormat(
        re.compile(r"^sk-ant-"), 20, "Anthropic keys start with 'sk-ant-'"
    ),
    AIProvider.OPENAI: KeyFormat(re.compile(r"^sk-"), 20, "OpenAI keys start with 'sk-'"),
    AIProvider.GEMINI: KeyFormat(re.compile(r"^AIza"), 30, "Gemini keys start with 'AIza'"),
    AIProvider.GROK: KeyFormat(re.compile(r"^xai-"), 20, "Grok keys start with 'xai-'"),
}


@dataclass
class KeyValidationResult:
    """Outcome of an API key format check."""

    valid: bool
    error: str | None = None


def get_env_var_names(provider: AIProvider | str) -> tuple[str, ...]:
    """Environment variable names checked for a provider."""
    return ENV_VAR_PRIORITY[AIProvider(provider)]


def get_api_key_from_env(
    provider: AIProvider | str,
    environ: dict[str, str] | None = None,
) -> str | None:
    """Return the first non-empty API key found in the environment."""
    env = os.environ if environ is None else environ
    for name in get_env_var_names(provider):
        value = env.get(name)
        if value:
            return value
    return None


def validate_api_key(provider: AIProvider | str, api_key: str | None) -> KeyValidationResult:
    """Check an API key against the provider's known key format.

    Providers without a known format accept any non-empty key.
    """
    if not api_key or not api_key.strip():
        return KeyValidationResult(valid=False, error="API key is required")

    key_format = KEY_FORMATS.get(AIProvider(provider))
    if key_format is None:
        return KeyValidationResult(valid=True)

    if len(api_key) < key_format.min_length:
        return KeyValidationResult(
            valid=False,
            error=f"Key too short (minimum {key_format.min_length} characters)",
        )
    if not key_format.pattern.match(api_key):
        return KeyValidationResult(valid=False, error=key_format.description)

    return KeyValidationResult(valid=True)


def mask_api_key(api_key: str | None) -> str:
    """Mask an API key for display: first 8 and last 4 characters."""
    if not api_key or len(api_key) <= 12:
        return "***" + (api_key[-4:] if api_key else "")
    return f"{api_key[:8]}...{api_key[-4:]}"


class CredentialStore:
    """Reads and writes the credentials file."""

    def __init__(self, config_dir: str | Path | None = None) -> None:
        """Initialize the store.

        Args:
            config_dir: Directory holding ``credentials.json``. Defaults to
                the directory from ``Settings.from_env()``.
        """
        settings = Settings(config_dir=Path(config_dir)) if config_dir else Settings.from_env()
        self._path = settings.credentials_path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        """Load the saved credentials.

        Returns:
            The credentials document, or None if the file is missing or
            unreadable.
        """
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read credentials from %s: %s", self._path, e)
            return None
        return data if isinstance(data, dict) else None

    def get_api_key(self, provider: AIProvider | str) -> str | None:
        """Return the saved API key of a provider, if any."""
        credentials = self.load() or {}
        keys = credentials.get("ai")
        if not isinstance(keys, dict):
            return None
        return keys.get(AIProvider(provider).value) or None

    def resolve_api_key(
        self,
        provider: AIProvider | str,
        environ: dict[str, str] | None = None,
    ) -> str | None:
        """Return the API key from the environment, else from the file."""
        return get_api_key_from_env(provider, environ) or self.get_api_key(provider)

    def save_api_key(self, provider: AIProvider | str, api_key: str) -> Path:
        """Save or overwrite the API key of a provider.

        Creates the config directory if needed and restricts the file to
        owner read/write.

        Returns:
            The credentials file path.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)

        credentials = self.load() or {}
        if not isinstance(credentials.get("ai"), dict):
            credentials["ai"] = {}
        credentials["ai"][AIProvider(provider).value] = api_key
        credentials["savedAt"] = datetime.now(timezone.utc).isoformat()

        self._path.write_text(json.dumps(credentials, indent=2), encoding="utf-8")
        os.chmod(self._path, CREDENTIALS_FILE_MODE)
        return self._path
