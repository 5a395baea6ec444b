# Copyright (c) Microsoft. All rights reserved.

from collections.abc import Iterable
from typing import Any

from openai.types.beta.thread_create_params import Message as ThreadMessageParam
from openai.types.beta.threads import Message, TextContentBlockParam

from .._logging import get_logger
from .._types import ChatMessage, Role, TextContent

logger = get_logger("agent_framework_assistants.openai")


def to_message_content(message: ChatMessage) -> list[TextContentBlockParam]:
    """Gets the text blocks of a message in the shape the assistants API accepts."""
    return [TextContentBlockParam(type="text", text=content.text) for content in message.contents if content.text]


def to_message_role(message: ChatMessage) -> str:
    # The assistants API only knows user and assistant messages.
    return "assistant" if message.role == Role.ASSISTANT else "user"


def to_thread_messages(messages: Iterable[ChatMessage]) -> list[ThreadMessageParam]:
    """Converts seed messages to the message params of a thread create request.

    Messages without text content are skipped.
    """
    thread_messages: list[ThreadMessageParam] = []
    for message in messages:
        content = to_message_content(message)
        if not content:
            logger.debug("Skipping a '%s' message without text content.", message.role)
            continue
        thread_messages.append(ThreadMessageParam(role=to_message_role(message), content=content))  # type: ignore[typeddict-item]
    return thread_messages


def from_thread_message(message: Message) -> ChatMessage:
    """Converts a message read from a thread into a ChatMessage."""
    contents = [
        TextContent(block.text.value, raw_representation=block)
        for block in message.content
        if block.type == "text"
    ]
    additional_properties: dict[str, Any] = {
        "thread_id": message.thread_id,
        "run_id": message.run_id,
        "assistant_id": message.assistant_id,
        "created_at": message.created_at,
    }
    return ChatMessage(
        role=Role.ASSISTANT if message.role == "assistant" else Role.USER,
        contents=contents,
        author_name=message.assistant_id,
        message_id=message.id,
        raw_representation=message,
        additional_properties=additional_properties,
    )
