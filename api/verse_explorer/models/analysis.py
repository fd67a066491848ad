"""
Pydantic models for the decoded verse analysis and the per-view query state.

Every analysis field is optional: the producer is a language model that does
not enforce a schema, so an omitted or null key decodes to None instead of
failing. Mistyped values still fail validation.
"""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, PrivateAttr


def _new_id() -> str:
    return uuid4().hex


class CrossReference(BaseModel):
    """One supporting citation for the analysed verse."""

    reference: str | None = None
    text: str | None = None

    # Not derived from content: identical citations are still distinct entries.
    _id: str = PrivateAttr(default_factory=_new_id)

    @property
    def id(self) -> str:
        return self._id


class AnalysisRecord(BaseModel):
    """The decoded result of one verse query."""

    verse_reference: str | None = Field(None, description="e.g. 'John 3:16'")
    verse_text: str | None = None
    context: str | None = Field(None, description="Historical and literary context")
    exegesis: str | None = Field(None, description="Direct interpretation")
    themes: str | None = Field(None, description="Theological themes")
    cross_references: list[CrossReference] | None = None

    _fallback_id: str = PrivateAttr(default_factory=_new_id)

    @property
    def id(self) -> str:
        """List/diffing identity, not used for caching or deduplication."""
        return self._fallback_id if self.verse_reference is None else self.verse_reference


class AnalysisStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AnalysisState(BaseModel):
    """
    The single result slot a view owns.

    `record` is set only for SUCCESS and `error` only for ERROR; use the
    constructors below rather than building states by hand.
    """

    status: AnalysisStatus = AnalysisStatus.IDLE
    record: AnalysisRecord | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> "AnalysisState":
        return cls(status=AnalysisStatus.IDLE)

    @classmethod
    def loading(cls) -> "AnalysisState":
        return cls(status=AnalysisStatus.LOADING)

    @classmethod
    def success(cls, record: AnalysisRecord) -> "AnalysisState":
        return cls(status=AnalysisStatus.SUCCESS, record=record)

    @classmethod
    def failure(cls, message: str) -> "AnalysisState":
        return cls(status=AnalysisStatus.ERROR, error=message)
