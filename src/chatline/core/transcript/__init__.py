from .interaction import ContextResolver, ContextSource, Interaction
from chatline.core.messages import ChatMessage, ContextMessage, Message, Speaker
from .transcript import Transcript

__all__ = [
    "ChatMessage",
    "ContextMessage",
    "ContextResolver",
    "ContextSource",
    "Interaction",
    "Message",
    "Speaker",
    "Transcript",
]
