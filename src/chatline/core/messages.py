"""
Message schemas for conversation transcripts.

Defines the value shapes flowing through a transcript:
- Message: a single human/assistant message sent to the model
- ContextMessage: a message derived from retrieved context (code snippets, docs)
- ChatMessage: a display-facing message shown in the chat UI
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Speaker = Literal["human", "assistant"]


class Message(BaseModel):
    """Immutable chat message. `text` goes to the model, `display_text` to the UI."""
    model_config = ConfigDict(frozen=True)

    speaker: Speaker
    text: str = ""
    display_text: Optional[str] = Field(
        default=None,
        description="Text rendered in the UI; falls back to `text` when unset"
    )
    timestamp: Optional[str] = Field(default=None, description="Short display timestamp, e.g. 9:05")


class ContextMessage(Message):
    """Message generated from retrieved context."""
    file_name: Optional[str] = Field(default=None, description="File the snippet was taken from")


class ChatMessage(Message):
    """Message as displayed in the chat UI."""
    context_files: list[str] = Field(
        default_factory=list,
        description="Files whose context supported this message"
    )
