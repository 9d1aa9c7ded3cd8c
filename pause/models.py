"""Data models for the question pipeline."""

from enum import Enum
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# Groq allows at most this many stop sequences per request
MAX_STOP_SEQUENCES = 4


# ============================================================================
# Groq (OpenAI-Compatible) Request/Response Models
# ============================================================================

class Role(str, Enum):
    """Chat message author."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """OpenAI chat message format."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Groq chat completion request. Always non-streaming."""
    messages: List[ChatMessage]
    model: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    stream: Literal[False] = False
    stop: Optional[Annotated[List[str], Field(max_length=MAX_STOP_SEQUENCES)]] = None


class Choice(BaseModel):
    """One completion candidate."""
    message: ChatMessage
    index: int


class ChatResponse(BaseModel):
    """Groq chat completion response (non-streaming)."""
    choices: List[Choice]
    model: str


# ============================================================================
# Screen State Models
# ============================================================================

class ViewState(str, Enum):
    """What the screen is showing."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class UIState(BaseModel):
    """
    Current screen state.

    Exactly one variant is active; `question` is set only for SUCCESS and
    `error` only for ERROR.
    """
    model_config = ConfigDict(frozen=True)

    state: ViewState = ViewState.IDLE
    question: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def idle(cls) -> "UIState":
        return cls(state=ViewState.IDLE)

    @classmethod
    def loading(cls) -> "UIState":
        return cls(state=ViewState.LOADING)

    @classmethod
    def success(cls, question: str) -> "UIState":
        return cls(state=ViewState.SUCCESS, question=question)

    @classmethod
    def failure(cls, message: str) -> "UIState":
        return cls(state=ViewState.ERROR, error=message)

    @property
    def is_loading(self) -> bool:
        return self.state == ViewState.LOADING
