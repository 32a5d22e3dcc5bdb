"""Client side of the generation relay: turns a request into a stream of text chunks"""

import json
from typing import AsyncIterator, Optional

import httpx

import config
from semphcode.models import GenerationRequest
from semphcode.normalizer import TransportError
from semphcode.prompt import DEFAULT_HTML
from semphcode.logger import get_logger

logger = get_logger(__name__)

SSE_PREFIX = "data: "
SSE_DONE = "data: [DONE]"


def build_payload(request: GenerationRequest) -> dict:
    """Request body for the relay; the untouched starter page is never sent"""
    payload = {"prompt": request.prompt}
    if request.html and request.html != DEFAULT_HTML:
        payload["html"] = request.html
    if request.previous_prompt:
        payload["previousPrompt"] = request.previous_prompt
    return payload


async def decode_sse(lines: AsyncIterator[str]) -> AsyncIterator[str]:
    """Unwrap `data: {json}` lines into the content deltas they carry"""
    async for line in lines:
        line = line.strip()
        if not line:
            continue
        if line == SSE_DONE:
            return
        if not line.startswith(SSE_PREFIX):
            continue
        try:
            event = json.loads(line[len(SSE_PREFIX) :])
            choices = event.get("choices") or [{}]
            content = (choices[0].get("delta") or {}).get("content") or ""
        except (ValueError, AttributeError, TypeError, KeyError, IndexError) as e:
            raise TransportError(f"Malformed stream chunk: {line[:100]}") from e
        if not isinstance(content, str):
            raise TransportError(f"Malformed stream chunk: {line[:100]}")
        if content:
            yield content


async def _error_message(response: httpx.Response) -> str:
    body = await response.aread()
    try:
        message = json.loads(body).get("message")
    except (ValueError, AttributeError) as e:
        logger.error(f"Could not parse error envelope: {e}")
        return "Failed to reach the generation API. Check that the API key is valid."
    return message or "Request to the generation API failed"


class RelayClient:
    """Streams generations from the relay's /api/deepseek endpoint"""

    def __init__(
        self,
        base_url: str = config.RELAY_URL,
        client: Optional[httpx.AsyncClient] = None,
        sse: bool = False,
        timeout: float = 300.0,
    ):
        self.base_url = base_url
        self.client = client
        self.sse = sse
        self.timeout = timeout

    async def stream(self, request: GenerationRequest) -> AsyncIterator[str]:
        client = self.client or httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout
        )
        try:
            logger.info(f"Requesting generation, prompt length: {len(request.prompt)}")
            async with client.stream(
                "POST", "/api/deepseek", json=build_payload(request)
            ) as response:
                if not response.is_success:
                    message = await _error_message(response)
                    logger.error(f"Relay error {response.status_code}: {message}")
                    raise TransportError(message)

                if self.sse:
                    async for content in decode_sse(response.aiter_lines()):
                        yield content
                else:
                    async for chunk in response.aiter_text():
                        if chunk:
                            yield chunk
        except httpx.HTTPError as e:
            logger.error(f"Relay transport error: {e}")
            raise TransportError(f"Error contacting the generation API: {e}") from e
        finally:
            if self.client is None:
                await client.aclose()
