"""LLM generation client using the Anthropic Messages API."""

from __future__ import annotations

import logging
import os

import anthropic

from transmute.core.config import API_KEY_ENV_VARS
from transmute.core.errors import ConfigurationError, GenerationError, ValidationError
from transmute.core.models import AIModelConfig

logger = logging.getLogger(__name__)

EMPTY_OUTPUT_PLACEHOLDER = "// No output generated"


class GenerationClient:
    """Sends one prompt, returns one completion.

    The credential is supplied at construction; the SDK client is created
    lazily on the first call. Retries and the request timeout are delegated
    to the SDK via ``max_retries`` and ``timeout_ms``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        max_retries: int = 3,
        timeout_ms: int = 60000,
        client=None,
    ):
        self.api_key = api_key
        self.max_retries = max_retries
        self.timeout_ms = timeout_ms
        self._client = client

    @classmethod
    def from_env(cls, ai_config: AIModelConfig | None = None) -> GenerationClient:
        """Build a client whose key comes from ``ANTHROPIC_API_KEY`` / ``TRANSMUTE_API_KEY``."""
        key = next((os.environ[name] for name in API_KEY_ENV_VARS if os.environ.get(name)), None)
        if ai_config is None:
            return cls(api_key=key)
        return cls(api_key=key, max_retries=ai_config.max_retries, timeout_ms=ai_config.timeout_ms)

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self):
        """Lazy-initialize the async Anthropic client."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError(
                    "Generation API key not configured. "
                    f"Set {' or '.join(API_KEY_ENV_VARS)}."
                )
            self._client = anthropic.AsyncAnthropic(
                api_key=self.api_key,
                max_retries=self.max_retries,
                timeout=self.timeout_ms / 1000,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the SDK client's connection pool; the next call builds a new one."""
        if self._client is not None and hasattr(self._client, "close"):
            await self._client.close()
        self._client = None

    async def generate(
        self,
        prompt: str,
        model_name: str,
        temperature: float = 0.7,
        max_tokens: int = 4096,
        top_p: float = 0.95,
    ) -> str:
        """Return the generated text, never an empty string."""
        if max_tokens <= 0:
            raise ValidationError(f"max_tokens must be positive, got {max_tokens}")

        client = self._get_client()
        try:
            response = await client.messages.create(
                model=model_name,
                max_tokens=max_tokens,
                temperature=temperature,
                top_p=top_p,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            logger.error("Generation API error from %s: %s", model_name, e.message)
            raise GenerationError(f"Generation API error: {e.message}", upstream=e.message) from e
        except Exception as e:
            logger.error("Generation request to %s failed: %s", model_name, e)
            raise GenerationError(f"Generation API error: {e}", upstream=str(e)) from e

        text = "".join(
            getattr(block, "text", "") for block in response.content
            if getattr(block, "type", "text") == "text"
        )
        return text or EMPTY_OUTPUT_PLACEHOLDER
