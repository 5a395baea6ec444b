# Copyright (c) Microsoft. All rights reserved.

from ._logging import get_logger
from ._settings import AFSettings, SecretString
from ._threads import AgentThread, AgentThreadState
from ._types import ChatMessage, Role, TextContent
from ._version import VERSION

__version__ = VERSION

__all__ = [
    "AFSettings",
    "AgentThread",
    "AgentThreadState",
    "ChatMessage",
    "Role",
    "SecretString",
    "TextContent",
    "__version__",
    "get_logger",
]
