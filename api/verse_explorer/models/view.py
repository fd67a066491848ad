"""
Pydantic models for the /analyze API contract and the rendered tab view.
"""

from pydantic import BaseModel, Field, field_validator

from verse_explorer.core.errors import ErrorKind


class AnalyzeRequest(BaseModel):
    """Request body for the POST /analyze endpoint."""

    verse: str = Field(..., description="Scripture reference, e.g. 'Romans 8:28'")

    @field_validator("verse")
    @classmethod
    def verse_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("verse must not be empty")
        return value


class CrossReferenceView(BaseModel):
    id: str
    reference: str
    text: str


class TabView(BaseModel):
    """One lens of the analysis (Context, Exegesis, Themes, Cross-Ref)."""

    tab: str = Field(..., description="Tab label shown in the picker")
    title: str = Field(..., description="Heading shown above the tab content")
    content: str | None = Field(None, description="Body text for prose tabs")
    cross_references: list[CrossReferenceView] = Field(default_factory=list)
    notice: str | None = Field(None, description="Shown when a list tab is empty")


class AnalysisView(BaseModel):
    """Response body from the POST /analyze endpoint."""

    id: str
    verse_reference: str
    verse_text: str
    tabs: list[TabView]


class StateView(BaseModel):
    """A rendered query state: a headline plus either a view or a message."""

    status: str
    headline: str
    message: str | None = None
    analysis: AnalysisView | None = None


class ErrorResponse(BaseModel):
    kind: ErrorKind
    message: str
