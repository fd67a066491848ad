"""
Presentation mapping from AnalysisRecord / AnalysisState to tabbed views.

Absent and empty fields both render with a fixed fallback string.
"""

from enum import Enum

from verse_explorer.models.analysis import AnalysisRecord, AnalysisState, AnalysisStatus
from verse_explorer.models.view import AnalysisView, CrossReferenceView, StateView, TabView

UNKNOWN_REFERENCE = "Unknown Reference"
NO_VERSE_TEXT = "No text provided."
NO_CONTEXT = "No context provided."
NO_EXEGESIS = "No exegesis provided."
NO_THEMES = "No themes provided."
NO_CROSS_REFERENCES = "No cross-references were provided for this verse."
MISSING_CROSS_REFERENCE = "N/A"
MISSING_CROSS_REFERENCE_TEXT = "..."

IDLE_PROMPT = "Enter a verse and tap 'Analyze' to begin."
LOADING_MESSAGE = "Generating Analysis..."
ERROR_HEADLINE = "An Error Occurred"


class AnalysisTab(str, Enum):
    CONTEXT = "Context"
    EXEGESIS = "Exegesis"
    THEMES = "Themes"
    CROSS_REF = "Cross-Ref"

    @property
    def heading(self) -> str:
        return _TAB_TITLES[self]


_TAB_TITLES = {
    AnalysisTab.CONTEXT: "Historical & Literary Context",
    AnalysisTab.EXEGESIS: "Exegesis (Direct Interpretation)",
    AnalysisTab.THEMES: "Theological Themes",
    AnalysisTab.CROSS_REF: "Illuminating Cross-References",
}


def _or_fallback(value: str | None, fallback: str) -> str:
    if value is None or not value.strip():
        return fallback
    return value


def render_tab(record: AnalysisRecord, tab: AnalysisTab) -> TabView:
    if tab is AnalysisTab.CROSS_REF:
        references = [
            CrossReferenceView(
                id=ref.id,
                reference=_or_fallback(ref.reference, MISSING_CROSS_REFERENCE),
                text=_or_fallback(ref.text, MISSING_CROSS_REFERENCE_TEXT),
            )
            for ref in record.cross_references or []
        ]
        return TabView(
            tab=tab.value,
            title=tab.heading,
            cross_references=references,
            notice=None if references else NO_CROSS_REFERENCES,
        )

    prose = {
        AnalysisTab.CONTEXT: (record.context, NO_CONTEXT),
        AnalysisTab.EXEGESIS: (record.exegesis, NO_EXEGESIS),
        AnalysisTab.THEMES: (record.themes, NO_THEMES),
    }
    value, fallback = prose[tab]
    return TabView(tab=tab.value, title=tab.heading, content=_or_fallback(value, fallback))


def render_analysis(record: AnalysisRecord) -> AnalysisView:
    """Build the header and every tab for a decoded record."""
    return AnalysisView(
        id=record.id,
        verse_reference=_or_fallback(record.verse_reference, UNKNOWN_REFERENCE),
        verse_text=_or_fallback(record.verse_text, NO_VERSE_TEXT),
        tabs=[render_tab(record, tab) for tab in AnalysisTab],
    )


def render_state(state: AnalysisState) -> StateView:
    """Map each query state to what the view shows."""
    if state.status is AnalysisStatus.IDLE:
        return StateView(status=state.status.value, headline=IDLE_PROMPT)
    if state.status is AnalysisStatus.LOADING:
        return StateView(status=state.status.value, headline=LOADING_MESSAGE)
    if state.status is AnalysisStatus.SUCCESS and state.record is not None:
        view = render_analysis(state.record)
        return StateView(status=state.status.value, headline=view.verse_reference, analysis=view)
    return StateView(status=AnalysisStatus.ERROR.value, headline=ERROR_HEADLINE, message=state.error)
