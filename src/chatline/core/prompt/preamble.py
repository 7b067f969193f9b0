"""
Preamble - fixed leading messages of every prompt.

Rendered as a human/assistant pair so it never disturbs message pairing.
"""

from chatline.core.messages import Message

ROLE = (
    "You are a coding assistant embedded in the user's editor. "
    "Your job is to answer questions about code and help with programming tasks."
)

RULES = """Follow these rules in every answer:
- Be brief and precise without losing clarity.
- Format code snippets as Markdown code blocks with a language tag.
- Only reference files, functions and symbols that appear in the provided context or in the conversation.
- If you do not know the answer or lack context, say so instead of guessing."""

ANSWER = (
    "Understood. I am a coding assistant and will answer questions about code "
    "and help with programming tasks, following the rules above."
)


def get_preamble(codebase: str | None = None) -> list[Message]:
    """
    Build the preamble pair.

    Args:
        codebase: Repository name the assistant has context for, if any

    Returns:
        [human, assistant] preamble messages
    """
    preamble = [ROLE, RULES]
    response = [ANSWER]

    if codebase:
        preamble.append(
            f"You have access to the `{codebase}` repository. "
            f"I will share relevant code snippets from `{codebase}` when they are needed to answer my questions."
        )
        response.append(f"I have access to the `{codebase}` repository and can answer questions about its files.")

    return [
        Message(speaker="human", text="\n\n".join(preamble)),
        Message(speaker="assistant", text="\n".join(response)),
    ]
