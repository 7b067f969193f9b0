from typing import Sequence

from langchain_openai import ChatOpenAI
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from chatline.core.config import settings
from chatline.core.logger import logger
from chatline.core.messages import Message

class LLMFactory:
    """
    Factory for creating configured LLM instances.
    Supports OpenAI-compatible APIs (OpenAI, DeepSeek, etc.)
    """
    
    @staticmethod
    def get_llm(model: str | None = None) -> BaseChatModel:
        """
        Get a configured ChatOpenAI instance.
        
        Args:
            model: Model identifier (e.g., "gpt-4o").
                  If None, uses settings.DEFAULT_MODEL.
                   
        Returns:
            Configured LangChain ChatModel.
        """
        target_model = model or settings.DEFAULT_MODEL
        
        logger.debug(f"Creating LLM: model={target_model}, base_url={settings.OPENAI_BASE_URL}")
        
        return ChatOpenAI(
            model=target_model,
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            temperature=0,
        )


def to_langchain_messages(messages: Sequence[Message]) -> list[BaseMessage]:
    """
    Convert prompt messages to LangChain messages.
    
    Empty assistant messages mark an unanswered turn and are skipped: chat
    completion APIs expect the request to end on the human message.
    """
    converted: list[BaseMessage] = []
    for message in messages:
        if message.speaker == "human":
            converted.append(HumanMessage(content=message.text))
        elif message.text:
            converted.append(AIMessage(content=message.text))
    return converted
