"""
FastAPI application entrypoint.

Registers routers, configures CORS, initializes telemetry,
and creates service instances on startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from verse_explorer.core.config import get_settings
from verse_explorer.core.errors import AnalysisError
from verse_explorer.core.telemetry import setup_telemetry
from verse_explorer.models.view import ErrorResponse
from verse_explorer.routers import analyze, health
from verse_explorer.services.analysis import VerseAnalysisService
from verse_explorer.services.groq_client import ChatCompletionClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Application lifespan handler.
    Initializes service clients on startup, cleans up on shutdown.
    """
    settings = get_settings()

    # Configure logging
    logging.basicConfig(level=settings.log_level)

    # Initialize telemetry
    setup_telemetry(settings.otel_console_export)

    # Credential is read once here and threaded into the service
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; /analyze will fail until it is configured.")
    chat_client = ChatCompletionClient(settings)
    analysis_service = VerseAnalysisService(
        chat_client,
        credential=settings.groq_api_key,
        model=settings.groq_model,
    )

    # Store in app state for dependency injection
    application.state.analysis_service = analysis_service

    logger.info("Verse Explorer API started.")
    yield
    await chat_client.aclose()
    logger.info("Verse Explorer API shutting down.")


app = FastAPI(
    title="Verse Explorer API",
    description="LLM-generated context, exegesis, themes and cross-references for scripture verses.",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    body = ErrorResponse(kind=exc.kind, message=exc.user_message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


# Register routers
app.include_router(health.router)
app.include_router(analyze.router)
