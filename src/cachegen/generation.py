"""One-call AI cache config generation.

Wires an LLMClient for the chosen provider into AIConfigGenerator, with
the API key resolved from the environment or the credentials file when
not given.
"""

import httpx

from cachegen.core.entities.cache_config import (
    ConfigPreferences,
    GenerateConfigResult,
)
from cachegen.core.entities.schema import AnalyzedSchema
from cachegen.core.entities.settings import Settings
from cachegen.core.services.ai_config_generator import AIConfigGenerator
from cachegen.infrastructure.credentials.store import CredentialStore
from cachegen.infrastructure.llm.providers import (
    AIProvider,
    LLMClient,
    get_provider_spec,
)


async def generate_cache_config(
    schema: AnalyzedSchema,
    provider: AIProvider | str,
    api_key: str | None = None,
    model: str | None = None,
    preferences: ConfigPreferences | None = None,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GenerateConfigResult:
    """Generate a cache config for a schema with one LLM call.

    Args:
        schema: The analyzed schema.
        provider: The LLM provider to use.
        api_key: Provider API key. Resolved from the environment, then
            the credentials file, when omitted.
        model: Model name. Defaults to the provider's default.
        preferences: Optional caller preferences.
        settings: Runtime settings. Defaults to ``Settings.from_env()``.
        transport: Optional httpx transport, mainly for tests.

    Returns:
        The generation result. Errors, including an unknown provider or
        a missing API key, are reported in the result rather than raised.

    Example:
        result = await generate_cache_config(analyzed, "anthropic")
        if result.success:
            JsonConfigSerializer().write(result.config, "cache-config.json")
    """
    settings = settings or Settings.from_env()

    try:
        provider = AIProvider(provider)
    except ValueError:
        return GenerateConfigResult(success=False, error=f"Unknown provider: {provider}")

    if api_key is None:
        api_key = CredentialStore(settings.config_dir).resolve_api_key(provider)
    if get_provider_spec(provider).requires_api_key and not api_key:
        return GenerateConfigResult(
            success=False, error=f"{provider.value} API key is required"
        )

    client = LLMClient(
        provider,
        api_key=api_key,
        model=model,
        timeout=settings.llm_timeout,
        transport=transport,
    )
    generator = AIConfigGenerator(client, config_name=settings.config_name)
    return await generator.generate(schema, preferences)
