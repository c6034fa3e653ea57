"""
OpenAI adapter - OpenAI API client.

Provides:
- Chat completions for room chat replies
- JSON completions (optionally with an inline image) for tag suggestions

Each request is attempted once and bounded by AI_TIMEOUT_SECONDS.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, APIError, APIConnectionError, APITimeoutError, RateLimitError

from ...config.settings import settings
from ..core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass
class CompletionResult:
    """Result of LLM completion."""

    content: str
    model: str
    usage_prompt_tokens: int
    usage_completion_tokens: int


class OpenAIAdapter:
    """
    Adapter for OpenAI API operations.

    Handles:
    - LLM completions for chat and tagging
    - Inline base64 images for vision-capable models
    - Timeout and error logging
    """

    COMPLETION_MAX_TOKENS = 256

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize OpenAI adapter.

        Args:
            api_key: OpenAI API key. If not provided, uses settings.
            model: Chat model name. If not provided, uses settings.
            timeout: Per-request timeout in seconds. If not provided, uses settings.
        """
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.timeout = timeout if timeout is not None else settings.AI_TIMEOUT_SECONDS
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key)

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy-loaded async OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise ExternalServiceError("openai", "OpenAI API key not configured")
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    @staticmethod
    def _user_content(user_prompt: str, image_base64: Optional[str]) -> Any:
        if not image_base64:
            return user_prompt
        return [
            {
                "type": "image_url",
                "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
            },
            {"type": "text", "text": user_prompt},
        ]

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        image_base64: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> CompletionResult:
        """
        Generate LLM completion.

        Args:
            system_prompt: System instruction
            user_prompt: User message
            image_base64: Optional JPEG payload (no data-URI prefix)
            temperature: Sampling temperature (0-1)
            max_tokens: Maximum tokens in response

        Returns:
            CompletionResult with generated text

        Raises:
            ExternalServiceError: If the adapter has no API key
            APIError: If the API call fails or times out
        """
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": self._user_content(user_prompt, image_base64)},
        ]

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens or self.COMPLETION_MAX_TOKENS,
            )
        except APITimeoutError as e:
            logger.warning("OpenAI request timed out after %ss: %s", self.timeout, e)
            raise
        except RateLimitError as e:
            logger.warning("OpenAI rate limit hit: %s", e)
            raise
        except APIConnectionError as e:
            logger.error("OpenAI connection error: %s", e)
            raise
        except APIError as e:
            logger.error("OpenAI API error: %s", e)
            raise

        choice = response.choices[0]
        usage = response.usage

        return CompletionResult(
            content=choice.message.content or "",
            model=response.model,
            usage_prompt_tokens=usage.prompt_tokens if usage else 0,
            usage_completion_tokens=usage.completion_tokens if usage else 0,
        )

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        image_base64: Optional[str] = None,
        temperature: float = 0.2,
    ) -> Any:
        """
        Generate LLM completion and parse it as JSON.

        Returns:
            Parsed JSON value, or None when the model returned nothing

        Raises:
            ValueError: If response is not valid JSON
        """
        result = await self.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            image_base64=image_base64,
            temperature=temperature,
        )

        content = result.content.strip()
        if not content:
            return None

        # Handle markdown code blocks
        if content.startswith("```json"):
            content = content[7:]
        if content.startswith("```"):
            content = content[3:]
        if content.endswith("```"):
            content = content[:-3]

        try:
            return json.loads(content.strip())
        except json.JSONDecodeError as e:
            logger.error("Failed to parse JSON response: %s", content[:200])
            raise ValueError(f"Invalid JSON response from LLM: {e}") from e


# Singleton instance for convenience
_openai_adapter: Optional[OpenAIAdapter] = None


def get_openai_adapter() -> OpenAIAdapter:
    """Get or create OpenAI adapter singleton."""
    global _openai_adapter
    if _openai_adapter is None:
        _openai_adapter = OpenAIAdapter()
    return _openai_adapter
