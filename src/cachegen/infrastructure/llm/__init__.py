"""LLM provider clients."""

from cachegen.infrastructure.llm.providers import (
    DEFAULT_MODELS,
    PROVIDERS,
    AIProvider,
    LLMClient,
    ProviderSpec,
    get_default_model,
    get_provider_spec,
    get_supported_providers,
)

__all__ = [
    "AIProvider",
    "LLMClient",
    "ProviderSpec",
    "PROVIDERS",
    "DEFAULT_MODELS",
    "get_default_model",
    "get_provider_spec",
    "get_supported_providers",
]
