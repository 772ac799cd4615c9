"""LLM client interface."""

from typing import Protocol


class ProviderError(Exception):
    """Raised when an LLM provider call fails.

    Covers non-success HTTP statuses, transport errors, timeouts and
    replies that do not have the provider's documented shape. The message
    names the provider.
    """

    pass


class ILLMClient(Protocol):
    """Contract for sending one prompt to a language model.

    Implementations issue a single request per call and do not retry.
    """

    @property
    def provider_name(self) -> str:
        """Human-readable provider name used in error messages."""
        ...

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send the prompts and return the model's text reply.

        Args:
            system_prompt: Instructions describing the task.
            user_prompt: The task input.

        Returns:
            The reply text.

        Raises:
            ProviderError: If the call fails or the reply is malformed.
        """
        ...
