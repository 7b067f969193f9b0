"""
Tests for Interaction rendering and lazy context resolution.
"""

import asyncio

import pytest
from pydantic import ValidationError

from chatline.core.messages import ContextMessage, Message
from chatline.core.prompt.templates import get_context_message_with_response
from chatline.core.transcript import Interaction


def human(text: str = "What does main.py do?") -> Message:
    return Message(speaker="human", text=text, display_text=f"**{text}**", timestamp="9:05")


def assistant(text: str = "It starts the server.") -> Message:
    return Message(speaker="assistant", text=text, display_text=text, timestamp="9:06")


def test_prompt_without_context():
    context = get_context_message_with_response("snippet", "main.py")
    interaction = Interaction(human(), assistant(), context=context)

    prompt = asyncio.run(interaction.to_prompt(False))

    assert [(m.speaker, m.text) for m in prompt] == [
        ("human", "What does main.py do?"),
        ("assistant", "It starts the server."),
    ]


def test_prompt_with_context_puts_context_first():
    context = get_context_message_with_response("snippet", "main.py")
    interaction = Interaction(human(), assistant(), context=context)

    prompt = asyncio.run(interaction.to_prompt(True))

    assert [m.text for m in prompt] == ["snippet", "Ok.", "What does main.py do?", "It starts the server."]


def test_prompt_messages_drop_display_fields():
    prompt = asyncio.run(Interaction(human(), assistant()).to_prompt(False))

    assert all(m.display_text is None and m.timestamp is None for m in prompt)
    assert all(type(m) is Message for m in prompt)


def test_unanswered_prompt_ends_with_empty_assistant():
    prompt = asyncio.run(Interaction(human()).to_prompt(False))

    assert [(m.speaker, m.text) for m in prompt] == [
        ("human", "What does main.py do?"),
        ("assistant", ""),
    ]


def test_invalid_interaction_renders_nothing():
    interaction = Interaction(Message(speaker="human", text=""), assistant())

    assert asyncio.run(interaction.to_prompt(True)) == []
    assert interaction.to_chat() == []


def test_has_context():
    assert asyncio.run(Interaction(human()).has_context()) is False
    assert asyncio.run(Interaction(human(), context=[]).has_context()) is False
    with_context = Interaction(human(), context=get_context_message_with_response("x"))
    assert asyncio.run(with_context.has_context()) is True


def test_lazy_context_resolved_once():
    calls = []

    async def resolve():
        calls.append(1)
        await asyncio.sleep(0)
        return get_context_message_with_response("snippet", "a.py")

    interaction = Interaction(human(), context=resolve)

    async def run():
        assert await interaction.has_context()
        return await interaction.to_prompt(True)

    prompt = asyncio.run(run())

    assert len(calls) == 1
    assert prompt[0].text == "snippet"


def test_lazy_context_failure_propagates_and_is_retried():
    attempts = []

    async def resolve():
        attempts.append(1)
        if len(attempts) == 1:
            raise ConnectionError("search backend unavailable")
        return []

    interaction = Interaction(human(), context=resolve)

    with pytest.raises(ConnectionError):
        asyncio.run(interaction.has_context())
    assert asyncio.run(interaction.has_context()) is False
    assert len(attempts) == 2


def test_chat_uses_display_text():
    chat = Interaction(human(), assistant()).to_chat()

    assert [m.speaker for m in chat] == ["human", "assistant"]
    assert chat[0].display_text == "**What does main.py do?**"
    assert chat[0].timestamp == "9:05"


def test_chat_display_text_falls_back_to_text():
    chat = Interaction(Message(speaker="human", text="hi")).to_chat()

    assert len(chat) == 1
    assert chat[0].display_text == "hi"


def test_chat_never_contains_context_text():
    context = [
        ContextMessage(speaker="human", text="SECRET SNIPPET", file_name="a.py"),
        ContextMessage(speaker="assistant", text="Ok.", file_name="a.py"),
    ]
    interaction = Interaction(human(), assistant(), context=context)

    chat = interaction.to_chat()

    assert len(chat) == 2
    assert all("SECRET SNIPPET" not in m.text for m in chat)
    assert chat[1].context_files == ["a.py"]


def test_context_files_available_after_resolution():
    async def resolve():
        return get_context_message_with_response("x", "b.py") + get_context_message_with_response("y", "c.py")

    interaction = Interaction(human(), assistant(), context=resolve)
    assert interaction.to_chat()[1].context_files == []

    asyncio.run(interaction.has_context())

    assert interaction.to_chat()[1].context_files == ["b.py", "c.py"]


def test_set_assistant_message_overwrites():
    interaction = Interaction(human())
    interaction.set_assistant_message(assistant("first"))
    interaction.set_assistant_message(assistant("second"))

    assert interaction.get_assistant_message().text == "second"
    assert len(interaction.to_chat()) == 2


def test_messages_are_immutable():
    message = human()
    with pytest.raises(ValidationError):
        message.text = "changed"
