"""Credential storage."""

from cachegen.infrastructure.credentials.store import (
    CredentialStore,
    KeyValidationResult,
    get_api_key_from_env,
    mask_api_key,
    validate_api_key,
)

__all__ = [
    "CredentialStore",
    "KeyValidationResult",
    "get_api_key_from_env",
    "mask_api_key",
    "validate_api_key",
]
