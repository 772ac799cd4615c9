"""LLM provider table and httpx client.

Every provider differs only in endpoint, auth headers, request body and
where the reply text sits in the response. Each is described by one
ProviderSpec record and served by the same LLMClient.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from cachegen.core.interfaces.llm_client import ProviderError

logger = logging.getLogger(__name__)

MAX_TOKENS = 4096
TEMPERATURE = 0.7


class AIProvider(Enum):
    """Supported LLM providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GEMINI = "gemini"
    GROK = "grok"
    # Free or local providers
    GROQ = "groq"
    OLLAMA = "ollama"
    HUGGINGFACE = "huggingface"


COMMERCIAL_PROVIDERS = (
    AIProvider.ANTHROPIC,
    AIProvider.OPENAI,
    AIProvider.GEMINI,
    AIProvider.GROK,
)
FREE_PROVIDERS = (AIProvider.GROQ, AIProvider.OLLAMA, AIProvider.HUGGINGFACE)


@dataclass(frozen=True)
class ProviderSpec:
    """How to talk to one provider.

    Attributes:
        name: Display name, also used as the error message prefix.
        base_url: Scheme and host of the API.
        path: Builds the request path from the model name.
        headers: Builds request headers from the API key.
        body: Builds the JSON body from (model, system prompt, user prompt).
        extract: Pulls the reply text out of the decoded JSON response.
        default_model: Model used when none is configured.
        models: Known model names, for display.
        requires_api_key: Whether calls without a key are rejected.
        description: One-line description.
        setup_url: Where to obtain an API key.
    """

    name: str
    base_url: str
    path: Callable[[str], str]
    headers: Callable[[str | None], dict[str, str]]
    body: Callable[[str, str, str], dict[str, Any]]
    extract: Callable[[Any], str]
    default_model: str
    models: tuple[str, ...] = ()
    requires_api_key: bool = True
    description: str = ""
    setup_url: str = ""


def _json_headers(api_key: str | None) -> dict[str, str]:
    return {"Content-Type": "application/json"}


def _bearer_headers(api_key: str | None) -> dict[str, str]:
    return {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}


def _anthropic_headers(api_key: str | None) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key or "",
        "anthropic-version": "2023-06-01",
    }


def _gemini_headers(api_key: str | None) -> dict[str, str]:
    # Header instead of ?key= so the key stays out of URLs and logs
    return {"Content-Type": "application/json", "x-goog-api-key": api_key or ""}


def _chat_completion_body(model: str, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


def _chat_completion_text(result: Any) -> str:
    return result["choices"][0]["message"]["content"]


def _anthropic_body(model: str, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "max_tokens": MAX_TOKENS,
        "system": system_prompt,
        "messages": [{"role": "user", "content": user_prompt}],
    }


def _anthropic_text(result: Any) -> str:
    return result["content"][0]["text"]


def _gemini_body(model: str, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": f"{system_prompt}\n\n{user_prompt}"}]}],
        "generationConfig": {"temperature": TEMPERATURE, "maxOutputTokens": MAX_TOKENS},
    }


def _gemini_text(result: Any) -> str:
    return result["candidates"][0]["content"]["parts"][0]["text"]


def _ollama_body(model: str, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "prompt": f"{system_prompt}\n\nUser: {user_prompt}",
        "stream": False,
        "options": {"temperature": TEMPERATURE},
    }


def _ollama_text(result: Any) -> str:
    return result["response"]


def _huggingface_body(model: str, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "inputs": f"{system_prompt}\n\nUser: {user_prompt}",
        "parameters": {"max_length": MAX_TOKENS, "temperature": TEMPERATURE},
    }


def _huggingface_text(result: Any) -> str:
    # The inference API answers with a list of generations
    return result[0]["generated_text"]


PROVIDERS: dict[AIProvider, ProviderSpec] = {
    AIProvider.ANTHROPIC: ProviderSpec(
        name="Anthropic",
        base_url="https://api.anthropic.com",
        path=lambda model: "/v1/messages",
        headers=_anthropic_headers,
        body=_anthropic_body,
        extract=_anthropic_text,
        default_model="claude-sonnet-4-20250514",
        models=("claude-opus-4-1", "claude-sonnet-4-20250514", "claude-haiku-3-5"),
        description="Claude models - strong reasoning and analysis",
        setup_url="https://console.anthropic.com/",
    ),
    AIProvider.OPENAI: ProviderSpec(
        name="OpenAI",
        base_url="https://api.openai.com",
        path=lambda model: "/v1/chat/completions",
        headers=_bearer_headers,
        body=_chat_completion_body,
        extract=_chat_completion_text,
        default_model="gpt-4o",
        models=("gpt-4o", "gpt-4-turbo", "gpt-4"),
        description="GPT-4 and GPT-4o models",
        setup_url="https://platform.openai.com/account/api-keys",
    ),
    AIProvider.GEMINI: ProviderSpec(
        name="Gemini",
        base_url="https://generativelanguage.googleapis.com",
        path=lambda model: f"/v1beta/models/{model}:generateContent",
        headers=_gemini_headers,
        body=_gemini_body,
        extract=_gemini_text,
        default_model="gemini-2.0-flash",
        models=("gemini-2.0-flash", "gemini-1.5-pro", "gemini-1.5-flash"),
        description="Google's multimodal models - fast, with a free tier",
        setup_url="https://ai.google.dev/",
    ),
    AIProvider.GROK: ProviderSpec(
        name="Grok",
        base_url="https://api.x.ai",
        path=lambda model: "/v1/chat/completions",
        headers=_bearer_headers,
        body=_chat_completion_body,
        extract=_chat_completion_text,
        default_model="grok-2",
        models=("grok-2", "grok-vision-beta"),
        description="xAI's Grok models",
        setup_url="https://console.x.ai/",
    ),
    AIProvider.GROQ: ProviderSpec(
        name="Groq",
        base_url="https://api.groq.com",
        path=lambda model: "/openai/v1/chat/completions",
        headers=_bearer_headers,
        body=_chat_completion_body,
        extract=_chat_completion_text,
        default_model="mixtral-8x7b-32768",
        models=("mixtral-8x7b-32768", "llama2-70b-4096"),
        description="Fast cloud inference with a free tier",
        setup_url="https://console.groq.com",
    ),
    AIProvider.OLLAMA: ProviderSpec(
        name="Ollama",
        base_url="http://localhost:11434",
        path=lambda model: "/api/generate",
        headers=_json_headers,
        body=_ollama_body,
        extract=_ollama_text,
        default_model="mistral",
        models=("mistral", "neural-chat", "dolphin-mixtral"),
        requires_api_key=False,
        description="Local models, no API key needed",
        setup_url="https://ollama.ai",
    ),
    AIProvider.HUGGINGFACE: ProviderSpec(
        name="Hugging Face",
        base_url="https://api-inference.huggingface.co",
        path=lambda model: f"/models/{model}",
        headers=_bearer_headers,
        body=_huggingface_body,
        extract=_huggingface_text,
        default_model="mistralai/Mistral-7B-Instruct-v0.1",
        models=("mistralai/Mistral-7B-Instruct-v0.1", "meta-llama/Llama-2-7b-chat"),
        description="Hosted inference API with many models",
        setup_url="https://huggingface.co/settings/tokens",
    ),
}

DEFAULT_MODELS = {provider: spec.default_model for provider, spec in PROVIDERS.items()}


def get_provider_spec(provider: AIProvider | str) -> ProviderSpec:
    """Look up the ProviderSpec of a provider by enum or name.

    Raises:
        ValueError: If the provider is unknown.
    """
    return PROVIDERS[AIProvider(provider)]


def get_default_model(provider: AIProvider | str) -> str:
    """Get the default model for a provider."""
    return get_provider_spec(provider).default_model


def get_supported_providers(include_free: bool = False) -> list[AIProvider]:
    """Get the supported providers.

    Args:
        include_free: Also list the free and local providers.
    """
    providers = list(COMMERCIAL_PROVIDERS)
    if include_free:
        providers.extend(FREE_PROVIDERS)
    return providers


class LLMClient:
    """Sends one prompt to a provider over HTTP.

    Implements ILLMClient. One POST per call, no retries.
    """

    def __init__(
        self,
        provider: AIProvider | str,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float = 60.0,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            provider: Which provider to call.
            api_key: The provider API key.
            model: Model name. Defaults to the provider's default model.
            timeout: Request timeout in seconds.
            base_url: Override of the provider's base URL (e.g. a remote
                Ollama host).
            transport: Optional httpx transport, mainly for tests.
        """
        self._provider = AIProvider(provider)
        self._spec = PROVIDERS[self._provider]
        self._api_key = api_key
        self._model = model or self._spec.default_model
        self._timeout = timeout
        self._base_url = (base_url or self._spec.base_url).rstrip("/")
        self._transport = transport

    @property
    def provider(self) -> AIProvider:
        return self._provider

    @property
    def provider_name(self) -> str:
        return self._spec.name

    @property
    def model(self) -> str:
        return self._model

    @property
    def endpoint(self) -> str:
        """Full URL the prompt is posted to."""
        return f"{self._base_url}{self._spec.path(self._model)}"

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send the prompts and return the reply text.

        Raises:
            ProviderError: On a missing API key, transport failure,
                non-success status or unexpected response shape.
        """
        if self._spec.requires_api_key and not self._api_key:
            raise ProviderError(f"{self._provider.value} API key is required")

        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    headers=self._spec.headers(self._api_key),
                    json=self._spec.body(self._model, system_prompt, user_prompt),
                )
            except httpx.TimeoutException as e:
                raise ProviderError(
                    f"{self.provider_name} API error: request timed out "
                    f"after {self._timeout}s"
                ) from e
            except httpx.HTTPError as e:
                raise ProviderError(f"{self.provider_name} API error: {e}") from e

        if not response.is_success:
            raise ProviderError(
                f"{self.provider_name} API error: "
                f"{response.status_code} - {response.text}"
            )

        try:
            text = self._spec.extract(response.json())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(
                f"{self.provider_name} API error: unexpected response format"
            ) from e

        if not isinstance(text, str):
            raise ProviderError(
                f"{self.provider_name} API error: unexpected response format"
            )

        logger.debug("%s replied with %d characters", self.provider_name, len(text))
        return text


async def is_ollama_available(
    base_url: str = "http://localhost:11434",
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Check if an Ollama server answers on ``base_url``."""
    try:
        async with httpx.AsyncClient(timeout=5.0, transport=transport) as client:
            response = await client.get(f"{base_url.rstrip('/')}/api/tags")
    except httpx.HTTPError:
        return False
    return response.is_success


async def list_ollama_models(
    base_url: str = "http://localhost:11434",
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    """List the models pulled on an Ollama server, or [] if unreachable."""
    try:
        async with httpx.AsyncClient(timeout=5.0, transport=transport) as client:
            response = await client.get(f"{base_url.rstrip('/')}/api/tags")
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError):
        return []
    return [m["name"] for m in data.get("models", []) if "name" in m]
