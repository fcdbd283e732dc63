import logging
import os
from functools import lru_cache
from anthropic import AsyncAnthropic
from worksheet_ai.core.config import get_settings

_prompt_logger = logging.getLogger("worksheet_ai.llm_prompts")


@lru_cache
def get_anthropic_client(api_key: str | None = None, timeout: float | None = None) -> AsyncAnthropic:
    """One shared client per key/timeout. Retries are disabled: every call is one attempt."""
    if api_key is None or timeout is None:
        settings = get_settings()
        api_key = settings.anthropic_api_key if api_key is None else api_key
        timeout = settings.request_timeout if timeout is None else timeout
    return AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)


def log_prompt(model: str, system: str | None, prompt: str, max_tokens: int) -> None:
    """Dump the outgoing prompt when DEBUG_LLM_PROMPTS is set."""
    if os.environ.get("DEBUG_LLM_PROMPTS", "").lower() not in ("1", "true"):
        return
    _prompt_logger.warning(
        "\n\n%s\n"
        "── SYSTEM ──────────────────────────────────────────────\n%s\n"
        "── USER ────────────────────────────────────────────────\n%s\n"
        "── CONFIG ──────────────────────────────────────────────\n"
        "  model=%s  max_tokens=%s\n"
        "%s",
        "=" * 60,
        system or "(none)",
        prompt,
        model,
        max_tokens,
        "=" * 60,
    )
