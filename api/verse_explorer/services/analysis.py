"""
Verse analysis orchestrator — core query pipeline.

Coordinates the Build → Send → Extract flow:
1. Check that a credential is configured.
2. Build the chat request for the verse.
3. Send it to the chat-completion endpoint.
4. Recover the analysis JSON from the first choice.

Every stage fails fast with an AnalysisError; nothing is retried.
"""

import logging
from typing import Protocol

from verse_explorer.core.errors import AnalysisError, MalformedResponse, MissingCredential
from verse_explorer.core.telemetry import get_tracer
from verse_explorer.models.analysis import AnalysisRecord, AnalysisState
from verse_explorer.models.chat import ChatRequest, ChatResponse
from verse_explorer.services.extractor import extract_analysis
from verse_explorer.services.request_builder import DEFAULT_MODEL, build_chat_request

logger = logging.getLogger(__name__)


class ChatTransport(Protocol):
    async def complete(self, request: ChatRequest) -> ChatResponse: ...


class VerseAnalysisService:
    """Runs one verse through the full request/response pipeline."""

    def __init__(
        self,
        chat_client: ChatTransport,
        credential: str | None,
        model: str = DEFAULT_MODEL,
    ) -> None:
        self._chat = chat_client
        self._credential = credential
        self._model = model
        self._tracer = get_tracer()

    @property
    def model(self) -> str:
        return self._model

    async def analyze(self, verse_reference: str) -> AnalysisRecord:
        """
        Produce the analysis record for a verse.

        Args:
            verse_reference: Trimmed, non-empty verse reference.

        Returns:
            The decoded AnalysisRecord. Individual fields may be None.

        Raises:
            AnalysisError: One of MissingCredential, InvalidEndpoint,
                TransportFailure or MalformedResponse.
        """
        with self._tracer.start_as_current_span("analysis.analyze") as span:
            span.set_attribute("analysis.verse_length", len(verse_reference))
            try:
                record = await self._run(verse_reference)
            except AnalysisError as exc:
                span.set_attribute("analysis.outcome", exc.kind.value)
                logger.warning("Analysis of %r failed (%s): %s", verse_reference, exc.kind.value, exc.detail)
                raise
            span.set_attribute("analysis.outcome", "success")
            return record

    async def _run(self, verse_reference: str) -> AnalysisRecord:
        if not self._credential:
            raise MissingCredential()

        request = build_chat_request(verse_reference, self._credential, model=self._model)
        response = await self._chat.complete(request)

        if not response.choices:
            raise MalformedResponse("The response contained no choices.")
        content = response.choices[0].message.content

        logger.debug("Raw model response:\n%s", content)
        return extract_analysis(content)


class AnalysisSession:
    """
    Owns the single result slot of one view.

    Each submission bumps a generation counter; a query that completes after
    a newer one was submitted is discarded, so the slot always reflects the
    latest submission.
    """

    def __init__(self, service: VerseAnalysisService) -> None:
        self._service = service
        self._generation = 0
        self.state = AnalysisState.idle()

    @property
    def generation(self) -> int:
        return self._generation

    async def submit(self, verse_input: str) -> AnalysisState:
        verse = verse_input.strip()
        if not verse:
            # Submission is disabled for blank input.
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = AnalysisState.loading()

        try:
            record = await self._service.analyze(verse)
            outcome = AnalysisState.success(record)
        except AnalysisError as exc:
            outcome = AnalysisState.failure(exc.user_message)

        if generation != self._generation:
            logger.info("Discarding stale result for %r (generation %d)", verse, generation)
            return outcome

        self.state = outcome
        return outcome
