"""Groq chat completion client (non-streaming)."""

import logging
from typing import List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from .config import config
from .errors import DecodeError, EmptyResultError, EncodingError, ServerError, TransportError
from .models import ChatMessage, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

# Cut generation short before preambles and multi-line answers.
DEFAULT_STOP = ["?", "\n", "Sure,", "Here's"]


# =============================================================================
# Request encoding
# =============================================================================

def build_request(
    messages: Sequence[ChatMessage],
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    stop: Optional[List[str]] = None,
) -> ChatRequest:
    """
    Assemble a ChatRequest, filling unset sampling parameters from config.

    Raises EncodingError if the values do not fit the request schema,
    e.g. more stop sequences than Groq accepts.
    """
    try:
        return ChatRequest(
            messages=list(messages),
            model=model or config.groq_model,
            temperature=config.temperature if temperature is None else temperature,
            max_tokens=config.max_tokens if max_tokens is None else max_tokens,
            stream=False,
            stop=DEFAULT_STOP if stop is None else stop,
        )
    except ValidationError as e:
        raise EncodingError(f"Failed to encode request body: {e}") from e


def encode_request(request: ChatRequest) -> bytes:
    """Serialize to the JSON body; unset optionals are sent as null."""
    try:
        return request.model_dump_json().encode("utf-8")
    except (ValueError, TypeError) as e:
        raise EncodingError(f"Failed to encode request body: {e}") from e


# =============================================================================
# Response handling
# =============================================================================

def validate_response(status_code: int, raw_body: bytes) -> None:
    """Pass 2xx through; anything else is a ServerError without the body."""
    if 200 <= status_code <= 299:
        return
    logger.error(f"Groq HTTP error: {status_code}")
    logger.debug(f"Groq error body: {raw_body[:500]!r}")
    raise ServerError(status_code)


def decode_response(raw_body: bytes) -> ChatResponse:
    """Parse the body into a ChatResponse."""
    try:
        return ChatResponse.model_validate_json(raw_body)
    except ValidationError as e:
        kinds = ", ".join(sorted({err["type"] for err in e.errors()}))
        logger.error(f"Failed to decode Groq response: {e.error_count()} errors ({kinds})")
        logger.debug(f"Groq decode details: {e}")
        raise DecodeError(f"Could not read the question service response ({kinds}).") from e


def extract_content(response: ChatResponse) -> str:
    """Text of the first choice."""
    if not response.choices:
        raise EmptyResultError()
    return response.choices[0].message.content


def _check_url(url: str) -> str:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise EncodingError("Invalid API URL.") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise EncodingError("Invalid API URL.")
    return url


# =============================================================================
# Client
# =============================================================================

class GroqClient:
    """
    Async client for the Groq chat completions endpoint.

    Handles:
    - Bearer authorization with an injected credential
    - A single buffered POST per question, no retries
    - Status validation and typed decoding of the reply
    """

    def __init__(
        self,
        api_key: str,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = _check_url(url or config.groq_url)
        self._api_key = api_key
        timeout = config.request_timeout if timeout is None else timeout
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=10.0),
            transport=transport,
        )

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "GroqClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def send(self, body: bytes) -> Tuple[int, bytes]:
        """POST an encoded request; returns (status_code, raw_body)."""
        try:
            resp = await self.client.post(
                self.url,
                content=body,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._api_key}",
                },
            )
        except httpx.RequestError as e:
            logger.error(f"Groq transport error: {e!r}")
            raise TransportError(f"Could not reach the question service: {e}") from e

        return resp.status_code, resp.content

    async def ask(self, messages: Sequence[ChatMessage], **params) -> str:
        """
        Run one chat completion and return the raw assistant text.

        `params` override the sampling parameters of build_request.
        """
        request = build_request(messages, **params)
        body = encode_request(request)

        logger.info(f"Requesting question: model={request.model}, messages={len(request.messages)}")

        status_code, raw_body = await self.send(body)
        validate_response(status_code, raw_body)
        response = decode_response(raw_body)
        return extract_content(response)
