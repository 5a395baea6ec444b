# Copyright (c) Microsoft. All rights reserved.

from ._assistant_thread import AssistantToolResources, OpenAIAssistantAgentThread, ThreadCreationOptions
from ._shared import OpenAISettings, create_assistant_client

__all__ = [
    "AssistantToolResources",
    "OpenAIAssistantAgentThread",
    "OpenAISettings",
    "ThreadCreationOptions",
    "create_assistant_client",
]
