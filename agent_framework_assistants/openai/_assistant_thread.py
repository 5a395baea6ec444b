# Copyright (c) Microsoft. All rights reserved.

from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any, Literal, TypedDict

from openai import AsyncOpenAI

from .._logging import get_logger
from .._threads import AgentThread
from .._types import ChatMessage
from ..exceptions import AgentThreadInitializationError
from ._messages import from_thread_message, to_message_content, to_message_role, to_thread_messages

logger = get_logger("agent_framework_assistants.openai")

__all__ = [
    "AssistantToolResources",
    "OpenAIAssistantAgentThread",
    "ThreadCreationOptions",
]


# region Thread Creation Options TypedDict


class VectorStoreToolResource(TypedDict, total=False):
    """Vector store configuration for file search tool resources."""

    vector_store_ids: list[str]
    """IDs of vector stores attached to this thread."""


class CodeInterpreterToolResource(TypedDict, total=False):
    """Code interpreter tool resource configuration."""

    file_ids: list[str]
    """File IDs accessible by the code interpreter tool."""


class AssistantToolResources(TypedDict, total=False):
    """Tool resources attached to the thread.

    See: https://platform.openai.com/docs/api-reference/threads/createThread#threads-createthread-tool_resources
    """

    code_interpreter: CodeInterpreterToolResource
    """Resources for code interpreter tool, including file IDs."""

    file_search: VectorStoreToolResource
    """Resources for file search tool, including vector store IDs."""


class ThreadCreationOptions(TypedDict, total=False):
    """Options used when the thread is created in the service.

    Keys:
        metadata: Up to 16 key-value pairs attached to the thread.
        tool_resources: Resources made available to the assistant's tools in this thread.
    """

    metadata: dict[str, str]
    tool_resources: AssistantToolResources


# endregion


class OpenAIAssistantAgentThread(AgentThread):
    """A thread kept by the OpenAI Assistants service.

    The thread is created in the service the first time an operation needs its id,
    or explicitly through `create`. Passing a `thread_id` resumes a thread that
    already exists in the service.

    Examples:
        .. code-block:: python

            client = create_assistant_client()

            thread = OpenAIAssistantAgentThread(client, messages=[ChatMessage("user", text="Hello")])
            async for message in thread.get_messages():
                print(message.role, message.text)
            await thread.delete()
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        thread_id: str | None = None,
        *,
        messages: Sequence[ChatMessage] | None = None,
        options: ThreadCreationOptions | None = None,
    ) -> None:
        """Initialize an OpenAI assistant thread.

        Args:
            client: The OpenAI client used to reach the service. The thread does not own it.
            thread_id: The id of an existing thread to resume. If not provided, a new thread
                is created on first use.

        Keyword Args:
            messages: Messages to seed a new thread with.
            options: Options applied when a new thread is created.

        Raises:
            AgentThreadInitializationError: If the client is missing, the thread id is empty,
                the options are not a mapping, or creation parameters are combined with a thread id.
        """
        if client is None:
            raise AgentThreadInitializationError("The OpenAI client is required.")
        if thread_id is not None:
            if not isinstance(thread_id, str) or not thread_id.strip():
                raise AgentThreadInitializationError("The thread id must be a non-empty string.")
            if messages or options:
                raise AgentThreadInitializationError(
                    "Messages and creation options cannot be used when resuming an existing thread."
                )
        if options is not None and not isinstance(options, Mapping):
            raise AgentThreadInitializationError("The thread creation options must be a mapping.")

        super().__init__(thread_id)
        self._client = client
        self._messages: list[ChatMessage] = list(messages) if messages else []
        self._options: ThreadCreationOptions = options if options is not None else ThreadCreationOptions()

    @classmethod
    def resume(cls, client: AsyncOpenAI, thread_id: str) -> "OpenAIAssistantAgentThread":
        """Resumes a thread that already exists in the service.

        Raises:
            AgentThreadInitializationError: If the client or the thread id is missing.
        """
        if thread_id is None:
            raise AgentThreadInitializationError("The thread id is required to resume a thread.")
        return cls(client, thread_id)

    async def get_messages(self, sort_order: Literal["asc", "desc"] | None = None) -> AsyncIterator[ChatMessage]:
        """Gets the messages in the thread, in the order the service lists them.

        The thread is created first if it does not have an id yet. Each call starts a new listing.

        Args:
            sort_order: The order to list messages by creation time. Defaults to the service's ordering.

        Yields:
            The messages in the thread.

        Raises:
            AgentThreadOperationException: If the thread was deleted.
        """
        self._ensure_not_deleted("read messages from")

        thread_id = await self.create()

        list_args: dict[str, Any] = {"thread_id": thread_id}
        if sort_order is not None:
            list_args["order"] = sort_order

        async for message in self._client.beta.threads.messages.list(**list_args):  # type: ignore[reportDeprecated]
            yield from_thread_message(message)

    async def _create(self) -> str:
        create_args: dict[str, Any] = {}
        if self._messages:
            create_args["messages"] = to_thread_messages(self._messages)
        if metadata := self._options.get("metadata"):
            create_args["metadata"] = metadata
        if tool_resources := self._options.get("tool_resources"):
            create_args["tool_resources"] = tool_resources

        thread = await self._client.beta.threads.create(**create_args)  # type: ignore[reportDeprecated]
        return thread.id

    async def _delete(self) -> None:
        await self._client.beta.threads.delete(self._id)  # type: ignore[arg-type, reportDeprecated]

    async def _on_new_message(self, message: ChatMessage) -> None:
        if message.additional_properties and message.additional_properties.get("thread_id") == self._id:
            # The message was read from this thread, the service already holds it.
            return

        content = to_message_content(message)
        if not content:
            logger.debug("Skipping a '%s' message without text content.", message.role)
            return

        await self._client.beta.threads.messages.create(  # type: ignore[reportDeprecated]
            thread_id=self._id,  # type: ignore[arg-type]
            role=to_message_role(message),  # type: ignore[arg-type]
            content=content,
        )
        logger.debug("Added a '%s' message to thread '%s'.", message.role, self._id)
