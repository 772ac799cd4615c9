"""AI config generator - orchestrates one LLM-backed generation attempt."""

import logging

from cachegen.core.entities.cache_config import (
    DEFAULT_CONFIG_NAME,
    ConfigPreferences,
    GenerateConfigResult,
)
from cachegen.core.entities.schema import AnalyzedSchema
from cachegen.core.interfaces.llm_client import ILLMClient, ProviderError
from cachegen.core.services.config_converter import convert_to_cache_config
from cachegen.core.services.prompt_builder import (
    build_system_prompt,
    build_user_prompt,
)
from cachegen.core.services.response_parser import (
    ResponseParseError,
    parse_ai_response,
)
from cachegen.utils.hashing import hash_value

logger = logging.getLogger(__name__)


class AIConfigGenerator:
    """Generates a cache config by asking a language model.

    Composes prompt building, a single LLM call, reply parsing and
    conversion. Failures are returned as unsuccessful results, never
    raised.
    """

    def __init__(
        self,
        client: ILLMClient,
        config_name: str = DEFAULT_CONFIG_NAME,
    ) -> None:
        """Initialize the generator.

        Args:
            client: The LLM client to send prompts to.
            config_name: Name given to generated configs.
        """
        self._client = client
        self._config_name = config_name

    async def generate(
        self,
        schema: AnalyzedSchema,
        preferences: ConfigPreferences | None = None,
    ) -> GenerateConfigResult:
        """Generate a cache config for an analyzed schema.

        Args:
            schema: The analyzed schema.
            preferences: Optional caller preferences.

        Returns:
            A successful result with the config and the parsed LLM reply,
            or an unsuccessful one carrying the error message.
        """
        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(schema, preferences)
        logger.debug(
            "Requesting cache config from %s (prompt %s)",
            self._client.provider_name,
            hash_value(user_prompt),
        )

        try:
            response_text = await self._client.complete(system_prompt, user_prompt)
            ai_response = parse_ai_response(response_text)
        except (ProviderError, ResponseParseError) as e:
            logger.warning("Cache config generation failed: %s", e)
            return GenerateConfigResult(success=False, error=str(e))

        config = convert_to_cache_config(
            ai_response, preferences, name=self._config_name
        )
        return GenerateConfigResult(
            success=True,
            config=config,
            ai_response=ai_response,
        )
