"""Fixed prompt pair for the reflection question."""

from typing import List

from .models import ChatMessage, Role

SYSTEM_PROMPT = (
    "You are an AI assistant designed to help users reflect on their screen time. "
    "Provide only a single, complete question in response to the user's prompt. "
    "Your output must always end with a question mark and contain no other "
    "punctuation that would make it appear incomplete."
)

USER_PROMPT = (
    "I'm about to open a social media app. Generate a single, concise, "
    "thought-provoking question that makes me reconsider if this is the best use "
    "of my time right now. The question must be grammatically complete and end "
    "with a question mark. Avoid any introductory phrases, conversational fillers, "
    "or concluding remarks."
)


def build_messages() -> List[ChatMessage]:
    """System instruction first, then the user instruction."""
    return [
        ChatMessage(role=Role.SYSTEM, content=SYSTEM_PROMPT),
        ChatMessage(role=Role.USER, content=USER_PROMPT),
    ]
