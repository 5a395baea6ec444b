# Copyright (c) Microsoft. All rights reserved.

from collections.abc import Sequence
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ChatMessage", "Role", "TextContent"]


class Role(BaseModel):
    """Describes the intended purpose of a message within a chat interaction."""

    model_config = ConfigDict(frozen=True)

    value: str

    SYSTEM: ClassVar["Role"]  # type: ignore[assignment]
    """The role that instructs or sets the behaviour of the AI system."""
    USER: ClassVar["Role"]  # type: ignore[assignment]
    """The role that provides user input for chat interactions."""
    ASSISTANT: ClassVar["Role"]  # type: ignore[assignment]
    """The role that provides responses to system-instructed, user-prompted input."""
    TOOL: ClassVar["Role"]  # type: ignore[assignment]
    """The role that provides additional information and references in response to tool use requests."""

    def __str__(self) -> str:
        """Returns the string representation of the role."""
        return self.value

    def __repr__(self) -> str:
        """Returns the string representation of the role."""
        return f"Role(value={self.value!r})"


Role.SYSTEM = Role(value="system")
Role.USER = Role(value="user")
Role.ASSISTANT = Role(value="assistant")
Role.TOOL = Role(value="tool")
# An enum is avoided here, the service may return roles this version does not know about.


class TextContent(BaseModel):
    """Represents text content in a chat."""

    type: Literal["text"] = "text"
    text: str
    """The text content represented by this instance."""
    raw_representation: Any | None = Field(default=None, exclude=True)
    """The raw representation of the content from an underlying implementation."""
    additional_properties: dict[str, Any] | None = None
    """Additional properties for the content."""

    def __init__(self, text: str, **kwargs: Any) -> None:
        super().__init__(text=text, **kwargs)


class ChatMessage(BaseModel):
    """Represents a chat message read from or added to a thread."""

    role: Role
    """The role of the author of the message."""
    contents: list[TextContent] = Field(default_factory=list)
    """The chat message content items."""
    author_name: str | None = None
    """The name of the author of the message."""
    message_id: str | None = None
    """The ID of the chat message."""
    raw_representation: Any | None = Field(default=None, exclude=True)
    """The raw representation of the chat message from an underlying implementation."""
    additional_properties: dict[str, Any] | None = None
    """Any additional properties associated with the chat message."""

    def __init__(
        self,
        role: Role | str,
        *,
        text: str | None = None,
        contents: Sequence[TextContent] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a ChatMessage.

        Args:
            role: The role of the author, either a `Role` or its string value.

        Keyword Args:
            text: Shorthand for a single text content, placed before any `contents`.
            contents: The content items of the message.
            **kwargs: The remaining fields.
        """
        if isinstance(role, str):
            role = Role(value=role)
        items: list[TextContent] = []
        if text is not None:
            items.append(TextContent(text))
        if contents:
            items.extend(contents)
        super().__init__(role=role, contents=items, **kwargs)

    @property
    def text(self) -> str:
        """Returns the text content of the message.

        Remarks:
            This property concatenates the text of all TextContent objects in contents.
        """
        return "\n".join(content.text for content in self.contents if isinstance(content, TextContent))
