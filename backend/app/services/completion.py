import logging
import time
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from ..config import Settings
from ..errors import UpstreamError

log = logging.getLogger(__name__)


class CompletionClient:
    """Single-shot chat completion against an OpenAI-compatible endpoint.

    One request per call. SDK retries are switched off and the transport
    timeout is whatever the SDK defaults to.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        # An empty key is passed through so the failure surfaces upstream
        self._client = AsyncOpenAI(
            api_key=settings.api_key or "",
            base_url=settings.base_url,
            max_retries=0,
        )

    async def aclose(self) -> None:
        await self._client.close()

    async def complete(self, system_instruction: str, user_instruction: str) -> str:
        start = time.time()
        try:
            resp = await self._client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_instruction},
                ],
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except openai.APIError as exc:
            raise UpstreamError(_error_message(getattr(exc, "body", None)) or str(exc)) from exc
        finally:
            log.info(
                "completion model=%s elapsed_ms=%d",
                self.settings.model,
                int((time.time() - start) * 1000),
            )

        error = getattr(resp, "error", None)
        if error:
            raise UpstreamError(_error_message(error) or "Upstream returned an error")

        choices = getattr(resp, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return (getattr(message, "content", None) or "") if message is not None else ""


def _error_message(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    nested = body.get("error")
    if isinstance(nested, dict) and nested.get("message"):
        return str(nested["message"])
    if body.get("message"):
        return str(body["message"])
    return None
