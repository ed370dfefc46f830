from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from openai import OpenAI, OpenAIError

from app.config import get_settings
from app.errors import AppError, ConfigError, ModerationRejected, UpstreamError

logger = logging.getLogger(__name__)

APPROVAL_TOKEN = "true"

MODERATION_INSTRUCTION = (
    "Below is a request a user has asked an employee to complete over the phone. "
    "We have a phone number and this set of instructions. Your job is to respond "
    "with *only* the word 'true', or to explain why you think the request is not "
    "valid. Respond with true if the request is in no way harmful to complete and "
    "has no legal implications in any US state. If you have any ethical concerns, "
    "respond with nothing more than your reason for thinking the request may not "
    "be valid..."
)


@dataclass
class ModerationResult:
    """
    Outcome of a moderation check.

    `reason` is empty and `error` is None only when the request was approved.
    """

    reason: str = ""
    error: Optional[AppError] = None

    @property
    def approved(self) -> bool:
        return self.error is None


class ModerationClient:
    """
    Thin wrapper around the OpenAI chat API used to vet call requests.

    Each call to `generate` is exactly one network request: no retries,
    no caching. The `client` argument lets tests pass a fake exposing
    `chat.completions.create`.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        max_tokens: int = 1024,
        client: Any = None,
    ):
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        """
        Send `prompt` as a single user message and return the text reply.

        Raises ConfigError when no API key is configured and UpstreamError
        when the provider call fails.
        """
        if not self._api_key:
            raise ConfigError("OPENAI_API_KEY is not set")

        try:
            resp = self._get_client().chat.completions.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as exc:
            raise UpstreamError(f"error calling OpenAI: {exc}") from exc

        parts: list[str] = []
        for choice in resp.choices:
            content = choice.message.content
            if content is None:
                logger.warning(
                    "OpenAI returned a choice without text content (finish_reason=%s)",
                    getattr(choice, "finish_reason", None),
                )
                continue
            parts.append(content)
        return "".join(parts)

    def check_prompt_validity(self, description: str) -> ModerationResult:
        """
        Ask the model whether the described call request is OK to act on.

        The request is approved only when the reply is exactly "true". Any
        other text, including "True" or "true.", is taken as the rejection
        reason. Provider and config failures are returned, not raised.
        """
        try:
            resp = self.generate(f"{MODERATION_INSTRUCTION}\n\n{description}")
        except (ConfigError, UpstreamError) as exc:
            logger.warning("moderation check could not run: %s", exc)
            return ModerationResult(
                reason=f"error calling the moderation model: {exc}",
                error=exc,
            )

        if resp != APPROVAL_TOKEN:
            reason = f"the moderation model flagged the request as invalid: {resp}"
            logger.warning("call request rejected by moderation: %r", resp)
            return ModerationResult(reason=reason, error=ModerationRejected(reason))

        return ModerationResult()


def get_moderation_client() -> ModerationClient:
    """
    FastAPI dependency to get a ModerationClient built from settings.

    A missing API key is not an error here; it surfaces as ConfigError
    from `generate` so the request can be answered instead of crashing.
    """
    settings = get_settings()
    return ModerationClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        max_tokens=settings.openai_max_tokens,
    )
