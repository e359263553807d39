"""
Thin wrapper around the OpenAI Responses API.

The gateway makes exactly one call per request; any problem on the way
(missing key, network, provider error) comes back as CompletionError so the
routes can swap in their fallback content.
"""
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from server import config

__all__ = ["CompletionClient", "CompletionError"]


class CompletionError(RuntimeError):
    """Raised when the completion provider cannot be contacted or returns an error."""


class CompletionClient:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 sdk_client: Optional[AsyncOpenAI] = None):
        self.api_key = config.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or config.OPENAI_MODEL
        self._sdk = sdk_client

    def _get_sdk(self) -> AsyncOpenAI:
        # created on first use so the app boots without a key
        if self._sdk is None:
            if not self.api_key:
                raise CompletionError("OPENAI_API_KEY environment variable must be set")
            self._sdk = AsyncOpenAI(api_key=self.api_key, max_retries=0)
        return self._sdk

    async def complete(self, messages: List[Dict[str, str]], max_output_tokens: int) -> str:
        """
        Send one message list and return the stripped output text.

        An empty string means the model answered with nothing usable; the
        caller decides what to do with it.

        Raises:
            CompletionError: if the key is missing or the API call fails
        """
        try:
            resp = await self._get_sdk().responses.create(
                model=self.model,
                input=messages,
                max_output_tokens=max_output_tokens,
            )
            return (resp.output_text or "").strip()
        except CompletionError:
            raise
        except OpenAIError as exc:
            raise CompletionError(f"OpenAI API error: {exc}") from exc
        except Exception as exc:
            raise CompletionError(f"Failed to contact OpenAI API: {exc}") from exc
