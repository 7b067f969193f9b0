from .preamble import get_preamble
from .templates import (
    get_context_message_with_response,
    populate_code_context_template,
    populate_markdown_context_template,
)

__all__ = [
    "get_context_message_with_response",
    "get_preamble",
    "populate_code_context_template",
    "populate_markdown_context_template",
]
