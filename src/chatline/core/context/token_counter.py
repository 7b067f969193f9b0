"""
Token Counter for estimating message token counts.

Uses a fixed characters-per-token ratio instead of a real tokenizer. The
estimate is cheap and deterministic; prompt budgets are defined against it.
"""

import math

from chatline.core.config import settings
from chatline.core.messages import Message


class TokenCounter:
    """
    Length-based token estimator.
    
    Only the model-facing `text` of a message is counted, never `display_text`.
    """
    
    def __init__(self, chars_per_token: int | None = None):
        """
        Initialize the token counter.
        
        Args:
            chars_per_token: Characters per estimated token (default: settings.CHARS_PER_TOKEN)
        """
        self.chars_per_token = settings.CHARS_PER_TOKEN if chars_per_token is None else chars_per_token
        if self.chars_per_token <= 0:
            raise ValueError(f"chars_per_token must be positive, got {self.chars_per_token}")
    
    def count_text(self, text: str) -> int:
        """Estimate tokens in a text string (halves round up)."""
        return math.floor(len(text) / self.chars_per_token + 0.5)
    
    def count_message(self, message: Message) -> int:
        """Estimate tokens in a single message."""
        return self.count_text(message.text)
    
    def count_messages(self, messages: list[Message]) -> int:
        """Estimate total tokens in a list of messages."""
        return sum(self.count_message(message) for message in messages)


def estimate_tokens(message: Message) -> int:
    """Estimate tokens of one message with the configured ratio."""
    return TokenCounter().count_message(message)
