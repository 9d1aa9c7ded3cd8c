"""
Screen endpoints.

The screen has one action and one view:
- POST /fetch asks for a new question (rejected with 409 while loading)
- GET /state renders what the screen currently shows
"""

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from .fetcher import QuestionFetcher, render
from .models import UIState

logger = logging.getLogger(__name__)

router = APIRouter()


def _state_payload(state: UIState) -> dict:
    return {
        "state": state.state.value,
        "question": state.question,
        "error": state.error,
        "text": render(state),
        "loading": state.is_loading,
    }


def _fetcher(request: Request) -> QuestionFetcher:
    return request.app.state.fetcher


@router.get("/state")
async def get_state(request: Request):
    """Current screen state."""
    return _state_payload(_fetcher(request).state)


@router.post("/fetch")
async def fetch_question(request: Request, wait: bool = False):
    """
    Trigger a question fetch.

    Returns 202 with the LOADING state, or with `wait=true` the settled
    SUCCESS/ERROR state. Returns 409 if a fetch is already running.
    """
    fetcher = _fetcher(request)

    task = fetcher.trigger()
    if task is None:
        return JSONResponse(
            status_code=409,
            content={
                "detail": "A question is already being generated.",
                **_state_payload(fetcher.state),
            },
        )

    if wait:
        await asyncio.shield(task)
        return _state_payload(fetcher.state)

    return JSONResponse(status_code=202, content=_state_payload(fetcher.state))
