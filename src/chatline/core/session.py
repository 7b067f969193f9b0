"""
ChatSession - drives a Transcript against a chat model.

One `ask` call is one conversation turn: record the question, build the
budgeted prompt, call the model, record the answer.
"""

from typing import Optional

from langchain_core.language_models import BaseChatModel

from chatline.core.llm import to_langchain_messages
from chatline.core.logger import logger
from chatline.core.messages import ChatMessage, Message
from chatline.core.prompt.preamble import get_preamble
from chatline.core.timestamp import get_short_timestamp
from chatline.core.transcript import ContextSource, Interaction, Transcript


class ChatSession:
    """
    A single conversation with a chat model.

    Example:
        session = ChatSession(LLMFactory.get_llm(), codebase="github.com/acme/api")
        answer = await session.ask("Where is auth handled?", context=fetch_snippets)
    """

    def __init__(
        self,
        llm: BaseChatModel,
        transcript: Optional[Transcript] = None,
        codebase: Optional[str] = None,
    ):
        self.llm = llm
        self.transcript = transcript if transcript is not None else Transcript()
        self.codebase = codebase

    async def ask(
        self,
        text: str,
        context: Optional[ContextSource] = None,
        display_text: Optional[str] = None,
    ) -> str:
        """
        Ask a question and record the model's answer.

        Model and context errors propagate; the interaction then stays unanswered.
        """
        human_message = Message(
            speaker="human",
            text=text,
            display_text=display_text if display_text is not None else text,
            timestamp=get_short_timestamp(),
        )
        self.transcript.add_interaction(Interaction(human_message, context=context))

        prompt = await self.transcript.to_prompt(get_preamble(self.codebase))
        logger.debug(f"Sending prompt: {len(prompt)} messages")

        response = await self.llm.ainvoke(to_langchain_messages(prompt))
        answer = response.content if isinstance(response.content, str) else str(response.content)

        self.transcript.add_assistant_response(answer)
        return answer

    def to_chat(self) -> list[ChatMessage]:
        return self.transcript.to_chat()

    def reset(self) -> None:
        logger.info("Starting new conversation")
        self.transcript.reset()
