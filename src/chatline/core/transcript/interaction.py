"""
Interaction - one human/assistant turn of a conversation.

An interaction owns its human message, an optional assistant reply and the
retrieval context gathered for the human message. The context may be supplied
eagerly (a list of ContextMessage) or lazily as an async callable; the latter
is resolved on first use and memoized.
"""

import inspect
from typing import Awaitable, Callable, Optional, Sequence, Union

from chatline.core.messages import ChatMessage, ContextMessage, Message

ContextResolver = Callable[[], Awaitable[Sequence[ContextMessage]]]
ContextSource = Union[Sequence[ContextMessage], ContextResolver]


class Interaction:
    """
    A single conversation turn.

    Rendering rules:
    - invalid (empty human text): no messages at all
    - unanswered: the human message plus an empty assistant placeholder in the
      prompt, the human message alone in the chat view
    - answered: human + assistant pair
    """

    def __init__(
        self,
        human_message: Message,
        assistant_message: Optional[Message] = None,
        context: Optional[ContextSource] = None,
    ):
        self._human_message = human_message
        self._assistant_message = assistant_message
        self._context_source = context
        self._context: Optional[list[ContextMessage]] = None
        if context is None:
            self._context = []
        elif not callable(context):
            self._context = list(context)

    @property
    def human_message(self) -> Message:
        return self._human_message

    def get_assistant_message(self) -> Optional[Message]:
        return self._assistant_message

    def set_assistant_message(self, message: Message) -> None:
        self._assistant_message = message

    def is_valid(self) -> bool:
        return bool(self._human_message.text)

    async def get_context(self) -> list[ContextMessage]:
        """Resolve the context messages. Resolver errors propagate and are retried next call."""
        if self._context is None:
            result = self._context_source()
            if inspect.isawaitable(result):
                result = await result
            self._context = list(result)
        return self._context

    async def has_context(self) -> bool:
        context = await self.get_context()
        return len(context) > 0

    async def to_prompt(self, include_context: bool) -> list[Message]:
        if not self.is_valid():
            return []

        messages: list[Message] = []
        if include_context:
            messages.extend(await self.get_context())
        messages.append(self._human_message)
        # Unanswered turns still end on an assistant slot so pairs stay aligned
        messages.append(self._assistant_message or Message(speaker="assistant", text=""))

        return [Message(speaker=m.speaker, text=m.text) for m in messages]

    def get_context_files(self) -> list[str]:
        """File names of the resolved context, empty until the context is resolved."""
        if not self._context:
            return []
        files: list[str] = []
        for message in self._context:
            if message.file_name and message.file_name not in files:
                files.append(message.file_name)
        return files

    def to_chat(self) -> list[ChatMessage]:
        if not self.is_valid():
            return []

        chat = [_to_chat_message(self._human_message)]
        if self._assistant_message is not None:
            chat.append(_to_chat_message(self._assistant_message, self.get_context_files()))
        return chat

    def __repr__(self) -> str:
        answered = self._assistant_message is not None
        return f"Interaction(human={self._human_message.text[:40]!r}, answered={answered})"


def _to_chat_message(message: Message, context_files: Optional[list[str]] = None) -> ChatMessage:
    return ChatMessage(
        speaker=message.speaker,
        text=message.text,
        display_text=message.display_text if message.display_text is not None else message.text,
        timestamp=message.timestamp,
        context_files=context_files or [],
    )
