# Copyright (c) Microsoft. All rights reserved.

from abc import ABC, abstractmethod
from enum import Enum

from ._logging import get_logger
from ._telemetry import ThreadOtelAttr, tracer
from ._types import ChatMessage
from .exceptions import AgentThreadOperationException

logger = get_logger("agent_framework_assistants.threads")

__all__ = ["AgentThread", "AgentThreadState"]


class AgentThreadState(str, Enum):
    """The lifecycle state of an agent thread."""

    UNBOUND = "unbound"
    """The thread has no id yet, it is created on first use."""
    BOUND = "bound"
    """The thread has an id, either assigned by the service or supplied when resuming."""
    DELETED = "deleted"
    """The thread was deleted, no further operation may succeed against it."""


class AgentThread(ABC):
    """Base abstraction for all agent threads.

    A thread represents a specific conversation with an agent. Threads owned by a
    service move from `UNBOUND` to `BOUND` when `create` is called, explicitly or
    implicitly by the first operation that needs an id, and from `BOUND` to `DELETED`
    when `delete` is called. No transition leaves `DELETED`.

    Instances are not safe for concurrent use, callers sharing a thread must
    synchronize access themselves.
    """

    def __init__(self, thread_id: str | None = None) -> None:
        """Initialize a new instance of the AgentThread class.

        Args:
            thread_id: The id of an existing thread to resume, or None to create one lazily.
        """
        self._id: str | None = thread_id
        self._is_deleted: bool = False

    @property
    def id(self) -> str | None:
        """Gets the id of the current thread, None until the thread has been created."""
        return self._id

    @property
    def is_deleted(self) -> bool:
        """Gets whether the thread has been deleted."""
        return self._is_deleted

    @property
    def state(self) -> AgentThreadState:
        """Gets the lifecycle state of the thread."""
        if self._is_deleted:
            return AgentThreadState.DELETED
        if self._id is None:
            return AgentThreadState.UNBOUND
        return AgentThreadState.BOUND

    async def create(self) -> str:
        """Creates the thread and returns its id.

        Does nothing if the thread already has an id.

        Raises:
            AgentThreadOperationException: If the thread was deleted.
        """
        self._ensure_not_deleted("create")

        if self._id is not None:
            return self._id

        with tracer.start_as_current_span(str(ThreadOtelAttr.CREATE_OPERATION)) as span:
            span.set_attribute(str(ThreadOtelAttr.THREAD_TYPE), type(self).__name__)
            # A failed create leaves the thread unbound.
            thread_id = await self._create()
            span.set_attribute(str(ThreadOtelAttr.THREAD_ID), thread_id)

        self._id = thread_id
        logger.debug("Created thread '%s'.", thread_id)
        return thread_id

    async def delete(self) -> None:
        """Deletes the thread.

        Does nothing if the thread was already deleted.

        Raises:
            AgentThreadOperationException: If the thread was never created.
        """
        if self._is_deleted:
            return

        if self._id is None:
            raise AgentThreadOperationException("Cannot delete the thread, since it has not been created.")

        with tracer.start_as_current_span(str(ThreadOtelAttr.DELETE_OPERATION)) as span:
            span.set_attribute(str(ThreadOtelAttr.THREAD_TYPE), type(self).__name__)
            span.set_attribute(str(ThreadOtelAttr.THREAD_ID), self._id)
            await self._delete()

        self._is_deleted = True
        logger.debug("Deleted thread '%s'.", self._id)

    async def on_new_message(self, message: ChatMessage) -> None:
        """Invoked when a new message has been contributed to the chat by any participant.

        The thread is created first if it does not have an id yet.

        Raises:
            AgentThreadOperationException: If the thread was deleted.
        """
        self._ensure_not_deleted("add a message to")
        if self._id is None:
            await self.create()
        await self._on_new_message(message)

    def _ensure_not_deleted(self, operation: str) -> None:
        if self._is_deleted:
            raise AgentThreadOperationException(f"Cannot {operation} the thread, since it has been deleted.")

    @abstractmethod
    async def _create(self) -> str:
        """Creates the thread in the underlying service and returns its id."""
        ...

    @abstractmethod
    async def _delete(self) -> None:
        """Deletes the thread in the underlying service."""
        ...

    @abstractmethod
    async def _on_new_message(self, message: ChatMessage) -> None:
        """Adds a message to the thread in the underlying service."""
        ...
