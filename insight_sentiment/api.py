"""
HTTP surface for the sentiment classifier.

Routes:
    GET  /_health    liveness probe
    POST /sentiment  {"text": "..."} -> {"label": "...", "score": 0..1}

A missing API key is a client-side configuration problem and maps to 400;
every other classification failure maps to 500.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from insight_sentiment.config import get_env_int, get_env_variable, load_env_variables
from insight_sentiment.config.logging_config import get_logger, setup_logging
from insight_sentiment.sentiment import ClassificationError, SentimentService, UnconfiguredError

logger = get_logger(__name__)

project_root = Path(__file__).resolve().parent.parent


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(service: SentimentService | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Classifier to serve; one is created at startup if omitted

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if service is None:
            app.state.sentiment_service = SentimentService()
        else:
            app.state.sentiment_service = service
        logger.info("Sentiment API ready")
        try:
            yield
        finally:
            app.state.sentiment_service.close()

    app = FastAPI(title="Insight Sentiment", lifespan=lifespan)

    @app.get("/_health")
    def health() -> str:
        return "OK"

    @app.post("/sentiment")
    async def sentiment(request: Request) -> Any:
        try:
            payload = await request.json()
        except ValueError:
            return _error("Invalid JSON", 400)

        text = payload.get("text") if isinstance(payload, dict) else None
        if not text:
            return _error("text is required", 400)

        classifier: SentimentService = request.app.state.sentiment_service
        try:
            result = await run_in_threadpool(classifier.classify, str(text))
        except UnconfiguredError as e:
            return _error(str(e), 400)
        except ClassificationError as e:
            logger.error("Sentiment analysis failed: %s", e)
            return _error(str(e), 500)

        return result.model_dump(mode="json")

    return app


def app_factory() -> FastAPI:
    """
    Load ``.env``, configure logging and build the app.

    Entry point for ``uvicorn --factory insight_sentiment.api:app_factory``.
    """
    load_env_variables(project_root / ".env")
    setup_logging(
        log_dir=get_env_variable("LOG_DIR", "logs"),
        log_level=get_env_variable("LOG_LEVEL", "INFO"),
    )
    return create_app()


def main() -> None:
    app = app_factory()
    port = get_env_int("SERVER_PORT", 8080)
    logger.info("Starting server on port %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)


if __name__ == "__main__":
    main()
