"""
Question fetch flow and screen state.

One user action runs the whole pipeline:

    prompt -> encode -> POST -> status check -> decode -> normalize

and lands the screen in SUCCESS or ERROR. While a fetch is LOADING, further
triggers are rejected instead of queued or cancelled.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .errors import FetchInProgressError, QuestionError
from .groq_client import GroqClient
from .models import ChatMessage, UIState, ViewState
from .normalizer import normalize_question
from .prompts import build_messages

logger = logging.getLogger(__name__)

IDLE_TEXT = "Tap to get a thought-provoking question."
LOADING_TEXT = "Generating question..."
GENERIC_ERROR = "Something went wrong. Please try again."


class QuestionFetcher:
    """
    Owns the screen state and runs fetches against a GroqClient.

    State goes IDLE -> LOADING on trigger, then SUCCESS or ERROR once the
    call settles. A new trigger from SUCCESS/ERROR goes straight back to
    LOADING.
    """

    def __init__(
        self,
        client: GroqClient,
        prompt_builder: Callable[[], List[ChatMessage]] = build_messages,
    ):
        self.client = client
        self.prompt_builder = prompt_builder
        self._outcome = UIState.idle()
        self._loading = False
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> UIState:
        """Current screen state."""
        if self._loading:
            return UIState.loading()
        return self._outcome

    @property
    def is_loading(self) -> bool:
        return self._loading

    def trigger(self) -> Optional[asyncio.Task]:
        """
        Handle the user action.

        Returns the running task, or None if a fetch is already loading.
        The LOADING transition happens here, before anything is awaited.
        Must be called from inside a running event loop.
        """
        if self._loading:
            logger.info("Fetch already in progress, ignoring trigger")
            return None

        self._outcome = UIState.idle()
        self._loading = True
        logger.debug("Screen state -> LOADING")

        self._task = asyncio.create_task(self._run())
        return self._task

    async def fetch(self) -> UIState:
        """Trigger and wait for the fetch to settle."""
        task = self.trigger()
        if task is None:
            raise FetchInProgressError("A question is already being generated.")
        await asyncio.shield(task)
        return self.state

    async def wait(self) -> UIState:
        """Wait for an in-flight fetch, if any."""
        if self._task is not None and not self._task.done():
            await asyncio.shield(self._task)
        return self.state

    async def _run(self):
        try:
            raw = await self.client.ask(self.prompt_builder())
            question = normalize_question(raw)
            self._outcome = UIState.success(question)
            logger.info(f"Question ready: {question!r}")
        except QuestionError as e:
            logger.warning(f"Fetch failed ({type(e).__name__}): {e.message}")
            self._outcome = UIState.failure(e.display_message)
        except Exception:
            logger.exception("Unexpected error while fetching question")
            self._outcome = UIState.failure(f"Error: {GENERIC_ERROR}")
        finally:
            self._loading = False
            logger.debug(f"Screen state -> {self._outcome.state.value.upper()}")


def render(state: UIState) -> str:
    """Text the screen shows for a state."""
    if state.state == ViewState.LOADING:
        return LOADING_TEXT
    if state.state == ViewState.ERROR:
        return state.error
    if state.state == ViewState.SUCCESS:
        return state.question
    return IDLE_TEXT
