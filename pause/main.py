"""
Pause - Main Entry Point

Headless "Before You Scroll" screen: one trigger that asks Groq for a
short reflection question, and one view of the current screen state.

Usage:
    python -m pause.main

Environment Variables:
    PAUSE_HOST          - Server host (default: 0.0.0.0)
    PAUSE_PORT          - Server port (default: 8000)
    GROQ_API_KEY        - Groq credential (else read from the secrets file)
    PAUSE_SECRETS_PATH  - Property-list secrets file (default: secrets.plist)
    GROQ_URL            - Chat completions URL
    GROQ_MODEL          - Model (default: llama3-8b-8192)
    GROQ_TEMPERATURE    - Sampling temperature (default: 0.7)
    GROQ_MAX_TOKENS     - Max output tokens (default: 120)
    GROQ_TIMEOUT        - Request timeout in seconds (default: 30)
    LOG_LEVEL           - Logging level (default: INFO)
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api import router as api_router
from .config import config, load_api_key
from .fetcher import QuestionFetcher
from .groq_client import GroqClient

# Configure logging
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""

    # Startup: a missing credential aborts here
    api_key = load_api_key()
    client = GroqClient(api_key)
    app.state.fetcher = QuestionFetcher(client)

    logger.info(f"Groq URL: {client.url}")
    logger.info(f"Groq Model: {config.groq_model}")
    logger.info(f"Server ready at http://{config.host}:{config.port}")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await app.state.fetcher.wait()
    await client.close()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Build the FastAPI app."""
    app = FastAPI(
        title="Pause",
        description="Asks for one thought-provoking question before you open a social media app.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(api_router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        fetcher = app.state.fetcher
        return {
            "status": "healthy",
            "state": fetcher.state.state.value,
            "model": config.groq_model,
        }

    @app.get("/")
    async def root():
        """Root endpoint with basic info."""
        return {
            "name": "Pause",
            "version": "0.1.0",
            "endpoints": {
                "fetch": "/fetch",
                "state": "/state",
                "health": "/health",
            },
        }

    return app


app = create_app()


def main():
    """Run the Pause server."""
    uvicorn.run(
        "pause.main:app",
        host=config.host,
        port=config.port,
        reload=False,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
