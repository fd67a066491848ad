"""
Groq chat-completion client.

Sends a ChatRequest to the OpenAI-compatible Groq endpoint through the
openai SDK and maps SDK failures onto the pipeline's error taxonomy.
SDK retries are disabled: one request attempt per query.
"""

import logging

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError

from verse_explorer.core.config import Settings
from verse_explorer.core.errors import InvalidEndpoint, MalformedResponse, TransportFailure
from verse_explorer.core.telemetry import get_tracer
from verse_explorer.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


def resolve_endpoint(raw_url: str) -> httpx.URL:
    """Parse the configured base URL, rejecting anything but absolute http(s)."""
    try:
        url = httpx.URL(raw_url)
    except httpx.InvalidURL as exc:
        raise InvalidEndpoint(str(exc)) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidEndpoint(f"{raw_url!r} is not an absolute http(s) URL.")
    return url


class ChatCompletionClient:
    """Async wrapper around the Groq chat-completions endpoint."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = settings.groq_api_base_url
        self._timeout = settings.request_timeout_seconds
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self._timeout)
        self._tracer = get_tracer()

    async def complete(self, request: ChatRequest) -> ChatResponse:
        """
        Send one chat-completion request.

        Args:
            request: Fully built request, including the bearer credential.

        Returns:
            The decoded response envelope.

        Raises:
            InvalidEndpoint: The configured base URL cannot be used.
            TransportFailure: Connection, timeout or HTTP status failure.
            MalformedResponse: The response envelope does not decode.
        """
        base_url = resolve_endpoint(self._base_url)

        # The credential is per request, the connection pool is shared.
        client = AsyncOpenAI(
            api_key=request.api_key.get_secret_value(),
            base_url=str(base_url),
            timeout=self._timeout,
            max_retries=0,
            http_client=self._http_client,
        )

        with self._tracer.start_as_current_span("groq.chat") as span:
            span.set_attribute("groq.model", request.model)
            span.set_attribute("groq.temperature", request.temperature)

            try:
                completion = await client.chat.completions.create(**request.model_dump())
            except openai.APIStatusError as exc:
                logger.warning("Chat completion rejected with HTTP %d", exc.status_code)
                raise TransportFailure(f"HTTP {exc.status_code}: {exc.message}") from exc
            except openai.APIConnectionError as exc:
                logger.warning("Chat completion transport error: %s", exc)
                raise TransportFailure(str(exc)) from exc

            # Non-JSON or non-object bodies come back as str/list, not a model.
            if not isinstance(completion, BaseModel):
                raise MalformedResponse(
                    f"Unexpected {type(completion).__name__} response body from the chat endpoint."
                )

            try:
                response = ChatResponse.model_validate(completion.model_dump())
            except ValidationError as exc:
                raise MalformedResponse(str(exc)) from exc

            if response.usage:
                span.set_attribute("groq.prompt_tokens", response.usage.prompt_tokens)
                span.set_attribute("groq.completion_tokens", response.usage.completion_tokens)
                logger.info("Chat completion: %d tokens used", response.usage.total_tokens)

            return response

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()
