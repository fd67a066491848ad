"""
Analyze router — POST /analyze endpoint.

Receives a verse reference, runs the analysis pipeline, and returns the
rendered tabbed view.
"""

from fastapi import APIRouter, Depends

from verse_explorer.models.view import AnalysisView, AnalyzeRequest, ErrorResponse
from verse_explorer.services.analysis import VerseAnalysisService
from verse_explorer.services.presentation import render_analysis

router = APIRouter(tags=["analysis"])


def get_analysis_service() -> VerseAnalysisService:
    """
    Dependency injection for the analysis service.
    Initialized once in main.py and stored in app.state.
    """
    from verse_explorer.main import app

    return app.state.analysis_service


@router.post(
    "/analyze",
    response_model=AnalysisView,
    responses={
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def analyze(
    request: AnalyzeRequest,
    service: VerseAnalysisService = Depends(get_analysis_service),
) -> AnalysisView:
    """
    Generate a multi-section analysis for a verse.

    Failures (missing credential, endpoint or transport errors, unparseable
    model output) are returned as an ErrorResponse by the handler in main.py.
    """
    record = await service.analyze(request.verse)
    return render_analysis(record)
