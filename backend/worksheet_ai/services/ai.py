import logging

import anthropic

from worksheet_ai.core.config import get_settings
from worksheet_ai.core.deps import get_anthropic_client, log_prompt

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base for every failure surfaced by worksheet generation."""


class TransportError(GenerationError):
    """The request never produced an HTTP response (network, timeout)."""


class ProviderStatusError(GenerationError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status {status_code}): {body}")


class ResponseShapeError(GenerationError):
    """The provider answered but the reply carried no usable content blocks."""


class AIService:
    def __init__(self, client=None, settings=None):
        settings = settings or get_settings()
        if client is None:
            client = get_anthropic_client(settings.anthropic_api_key, settings.request_timeout)
        self.client = client
        self.model = settings.anthropic_model
        self.max_tokens = settings.max_tokens

    async def generate_completion(
        self,
        prompt: str,
        system_prompt: str | None = None,
    ) -> str:
        """Send one user message and return the text of the first content block."""
        kwargs = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            kwargs["system"] = system_prompt
        log_prompt(self.model, system_prompt, prompt, self.max_tokens)

        try:
            response = await self.client.messages.create(**kwargs)
        except anthropic.APIStatusError as e:
            raise ProviderStatusError(e.status_code, e.message) from e
        except anthropic.APIConnectionError as e:
            raise TransportError(f"API request failed: {e}") from e
        except anthropic.APIResponseValidationError as e:
            raise ResponseShapeError(f"failed to parse response: {e}") from e

        if not response.content:
            raise ResponseShapeError("empty response from API")

        return getattr(response.content[0], "text", None) or ""


def get_ai_service() -> AIService:
    return AIService()
