"""
Transcript - ordered interactions of one conversation.

Turns the conversation history into the message list sent to the model:
only the most recent interaction with context contributes its context
messages, and older pairs are dropped once the token budget is spent.
"""

from typing import Optional, Sequence

from chatline.core.context.builder import ContextBuilder
from chatline.core.context.token_counter import TokenCounter
from chatline.core.logger import logger
from chatline.core.timestamp import get_short_timestamp
from chatline.core.transcript.interaction import Interaction
from chatline.core.messages import ChatMessage, Message


class Transcript:
    """
    Ordered collection of interactions.

    Not safe for concurrent mutation: callers must not add interactions or
    responses while `to_prompt` is running.
    """

    def __init__(
        self,
        max_prompt_tokens: int | None = None,
        token_counter: TokenCounter | None = None,
    ):
        """
        Args:
            max_prompt_tokens: Prompt budget override (default: settings.MAX_AVAILABLE_PROMPT_LENGTH)
            token_counter: Estimator override (default: settings.CHARS_PER_TOKEN ratio)
        """
        self._interactions: list[Interaction] = []
        self._builder = ContextBuilder(token_counter, max_tokens=max_prompt_tokens)

    @property
    def interactions(self) -> tuple[Interaction, ...]:
        return tuple(self._interactions)

    def __len__(self) -> int:
        return len(self._interactions)

    def add_interaction(self, interaction: Optional[Interaction]) -> None:
        if interaction is None:
            return
        self._interactions.append(interaction)

    def get_last_interaction(self) -> Optional[Interaction]:
        return self._interactions[-1] if self._interactions else None

    def add_assistant_response(self, text: str) -> None:
        last_interaction = self.get_last_interaction()
        if last_interaction is None:
            return
        last_interaction.set_assistant_message(
            Message(
                speaker="assistant",
                text=text,
                display_text=text,
                timestamp=get_short_timestamp(),
            )
        )

    async def _get_last_interaction_with_context_index(self) -> int:
        # Sequential on purpose: the newest hit wins and stops the scan
        for index in range(len(self._interactions) - 1, -1, -1):
            if await self._interactions[index].has_context():
                return index
        return -1

    async def to_prompt(self, preamble: Sequence[Message] = ()) -> list[Message]:
        """
        Render the history into a budgeted prompt.

        Args:
            preamble: Leading messages, always included and counted against the budget

        Returns:
            Preamble followed by the newest history pairs that fit, oldest first
        """
        context_index = await self._get_last_interaction_with_context_index()
        logger.debug(f"Context cursor: {context_index} of {len(self._interactions)} interactions")

        messages: list[Message] = []
        for index, interaction in enumerate(self._interactions):
            messages.extend(await interaction.to_prompt(index == context_index))

        return self._builder.build_context(preamble, messages)

    def to_chat(self) -> list[ChatMessage]:
        return [message for interaction in self._interactions for message in interaction.to_chat()]

    def reset(self) -> None:
        self._interactions = []
