"""
Context message templates.

Retrieved snippets are sent as a human message followed by a short assistant
acknowledgement, so context always occupies whole message pairs.
"""

from pathlib import PurePosixPath

from chatline.core.messages import ContextMessage

CONTEXT_ACKNOWLEDGEMENT = "Ok."

CODE_CONTEXT_TEMPLATE = """Use the following code snippet from file `{file_path}`:
```{language}
{code}
```"""

MARKDOWN_CONTEXT_TEMPLATE = """Use the following text from file `{file_path}`:
{markdown}"""

EXTENSION_LANGUAGES = {
    ".py": "python",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".rb": "ruby",
    ".sh": "bash",
    ".md": "markdown",
}


def get_language(file_path: str) -> str:
    """Markdown fence language for a file path, empty when unknown."""
    return EXTENSION_LANGUAGES.get(PurePosixPath(file_path).suffix.lower(), "")


def populate_code_context_template(code: str, file_path: str) -> str:
    return CODE_CONTEXT_TEMPLATE.format(file_path=file_path, language=get_language(file_path), code=code)


def populate_markdown_context_template(markdown: str, file_path: str) -> str:
    return MARKDOWN_CONTEXT_TEMPLATE.format(file_path=file_path, markdown=markdown)


def get_context_message_with_response(text: str, file_name: str | None = None) -> list[ContextMessage]:
    """Wrap context text into a [human, assistant] pair."""
    return [
        ContextMessage(speaker="human", text=text, file_name=file_name),
        ContextMessage(speaker="assistant", text=CONTEXT_ACKNOWLEDGEMENT, file_name=file_name),
    ]
