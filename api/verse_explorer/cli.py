"""
Verse analysis CLI.

Runs a single verse through the analysis pipeline and prints the rendered
result.

Usage:
    verse-explorer "John 3:16"
    verse-explorer "Romans 8:28" --tab exegesis
    verse-explorer "Psalm 23:1" --json
"""

import argparse
import asyncio
import logging
import sys

from verse_explorer.core.config import get_settings
from verse_explorer.core.telemetry import setup_telemetry
from verse_explorer.models.analysis import AnalysisStatus
from verse_explorer.models.view import StateView, TabView
from verse_explorer.services.analysis import AnalysisSession, VerseAnalysisService
from verse_explorer.services.groq_client import ChatCompletionClient
from verse_explorer.services.presentation import AnalysisTab, render_state

logger = logging.getLogger(__name__)

TAB_CHOICES = {
    "context": AnalysisTab.CONTEXT,
    "exegesis": AnalysisTab.EXEGESIS,
    "themes": AnalysisTab.THEMES,
    "cross-ref": AnalysisTab.CROSS_REF,
}


def format_tab(tab: TabView) -> str:
    lines = [f"## {tab.title}", ""]
    if tab.content is not None:
        lines.append(tab.content)
    elif tab.notice:
        lines.append(tab.notice)
    else:
        for ref in tab.cross_references:
            lines.append(f"- {ref.reference}: {ref.text}")
    return "\n".join(lines)


def format_state(view: StateView, tab: str = "all") -> str:
    """Render a state view as plain text for the terminal."""
    if view.analysis is None:
        parts = [view.headline]
        if view.message:
            parts.extend(["", view.message])
        return "\n".join(parts)

    analysis = view.analysis
    parts = [f"# {analysis.verse_reference}", "", f'"{analysis.verse_text}"']
    for tab_view in analysis.tabs:
        if tab == "all" or tab_view.tab == TAB_CHOICES[tab].value:
            parts.extend(["", format_tab(tab_view)])
    return "\n".join(parts)


async def run(verse: str, tab: str = "all", as_json: bool = False) -> int:
    settings = get_settings()
    setup_telemetry(settings.otel_console_export)

    chat_client = ChatCompletionClient(settings)
    session = AnalysisSession(
        VerseAnalysisService(chat_client, credential=settings.groq_api_key, model=settings.groq_model)
    )
    try:
        state = await session.submit(verse)
    finally:
        await chat_client.aclose()

    view = render_state(state)
    if as_json:
        print(view.model_dump_json(indent=2))
    else:
        print(format_state(view, tab))
    return 0 if state.status is AnalysisStatus.SUCCESS else 1


def main():
    parser = argparse.ArgumentParser(
        description="Generate context, exegesis, themes and cross-references for a verse"
    )
    parser.add_argument("verse", help='Verse reference, e.g. "Romans 8:28"')
    parser.add_argument(
        "--tab",
        default="all",
        choices=["all", *TAB_CHOICES],
        help="Only print one analysis tab (default: all)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the rendered view as JSON"
    )

    args = parser.parse_args()
    if not args.verse.strip():
        parser.error("verse must not be empty")

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")

    sys.exit(asyncio.run(run(args.verse, tab=args.tab, as_json=args.json)))


if __name__ == "__main__":
    main()
