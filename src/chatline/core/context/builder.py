"""
ContextBuilder - Budgeted prompt construction from conversation history.

- Preamble: always included, its cost is subtracted from the budget
- History: consumed in human/assistant pairs, newest first
- The first pair that does not fit stops the walk; older pairs are dropped
  even if they would fit on their own, so retained history stays contiguous
"""

from typing import Sequence

from loguru import logger

from chatline.core.config import settings
from chatline.core.context.token_counter import TokenCounter
from chatline.core.messages import Message


class ContextBuilder:
    """
    Builds the message list sent to the model within an estimated token budget.
    """
    
    def __init__(
        self,
        token_counter: TokenCounter | None = None,
        max_tokens: int | None = None,
    ):
        """
        Initialize context builder.
        
        Args:
            token_counter: TokenCounter instance (default: configured ratio)
            max_tokens: Total prompt budget (default: settings.MAX_AVAILABLE_PROMPT_LENGTH)
        """
        self.token_counter = token_counter or TokenCounter()
        self.max_tokens = max_tokens
    
    @property
    def budget(self) -> int:
        if self.max_tokens is None:
            return settings.MAX_AVAILABLE_PROMPT_LENGTH
        return self.max_tokens
    
    def build_context(
        self,
        preamble: Sequence[Message],
        history: Sequence[Message],
    ) -> list[Message]:
        """
        Build context within the token budget.
        
        Args:
            preamble: Leading messages, always included
            history: Chronological conversation messages
        
        Returns:
            Preamble followed by the retained history, oldest first
        """
        preamble_tokens = self.token_counter.count_messages(list(preamble))
        remaining_budget = self.budget - preamble_tokens
        
        if remaining_budget <= 0:
            logger.warning(f"Preamble ({preamble_tokens} tokens) leaves no budget for history (limit: {self.budget:,}).")
        
        return list(preamble) + self.truncate(history, remaining_budget)
    
    def truncate(self, messages: Sequence[Message], max_tokens: int) -> list[Message]:
        """
        Keep the newest message pairs that fit in `max_tokens`.
        
        Pairs are (messages[i-1], messages[i]) for i stepping down from the
        last index by 2. An odd leading message is never evaluated.
        """
        kept: list[Message] = []
        remaining_budget = max_tokens
        for i in range(len(messages) - 1, 0, -2):
            human_message = messages[i - 1]
            bot_message = messages[i]
            pair_tokens = self.token_counter.count_message(human_message) + self.token_counter.count_message(bot_message)
            
            if pair_tokens > remaining_budget:
                logger.debug(f"Budget exhausted. Dropping {i + 1} older messages.")
                break
            
            kept.extend((bot_message, human_message))
            remaining_budget -= pair_tokens
        
        # Collected newest first, restore chat order
        kept.reverse()
        
        logger.debug(f"Built context: {len(kept)}/{len(messages)} history messages ({max_tokens - remaining_budget:,}/{max_tokens:,} tokens)")
        
        return kept
