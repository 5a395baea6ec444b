# Copyright (c) Microsoft. All rights reserved.

import os
from enum import Enum
from typing import Any, Final

from opentelemetry.trace import get_tracer

from ._version import VERSION

__all__ = [
    "AGENT_FRAMEWORK_USER_AGENT",
    "APP_INFO",
    "TELEMETRY_DISABLED_ENV_VAR",
    "USER_AGENT_KEY",
    "ThreadOtelAttr",
    "prepend_agent_framework_to_user_agent",
    "tracer",
]

tracer = get_tracer("agent_framework_assistants", VERSION)


class ThreadOtelAttr(str, Enum):
    """Span names and attribute keys used when tracing thread lifecycle calls."""

    CREATE_OPERATION = "agent_thread.create"
    DELETE_OPERATION = "agent_thread.delete"
    THREAD_ID = "agent_thread.id"
    THREAD_TYPE = "agent_thread.type"

    def __str__(self) -> str:
        return self.value


# Note that if this environment variable does not exist, telemetry is enabled.
TELEMETRY_DISABLED_ENV_VAR = "AGENT_FRAMEWORK_TELEMETRY_DISABLED"
IS_TELEMETRY_ENABLED = os.environ.get(TELEMETRY_DISABLED_ENV_VAR, "false").lower() not in ["true", "1"]

APP_INFO = (
    {
        "agent-framework-version": f"python/{VERSION}",
    }
    if IS_TELEMETRY_ENABLED
    else None
)
USER_AGENT_KEY: Final[str] = "User-Agent"
HTTP_USER_AGENT: Final[str] = "agent-framework-python"
AGENT_FRAMEWORK_USER_AGENT = f"{HTTP_USER_AGENT}/{VERSION}"


def prepend_agent_framework_to_user_agent(headers: dict[str, Any]) -> dict[str, Any]:
    """Prepend "agent-framework" to the User-Agent in the headers.

    Args:
        headers: The existing headers dictionary.

    Returns:
        The modified headers dictionary with "agent-framework-python/{version}" prepended to the User-Agent.
    """
    headers[USER_AGENT_KEY] = (
        f"{AGENT_FRAMEWORK_USER_AGENT} {headers[USER_AGENT_KEY]}"
        if USER_AGENT_KEY in headers
        else AGENT_FRAMEWORK_USER_AGENT
    )

    return headers
