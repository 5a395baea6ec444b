# Copyright (c) Microsoft. All rights reserved.

import logging

from .exceptions import AgentFrameworkException

ROOT_LOGGER_NAME = "agent_framework_assistants"

__all__ = ["get_logger"]


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger with the specified name, defaulting to 'agent_framework_assistants'.

    Args:
        name: The name of the logger. Must be the package name or one of its children.

    Returns:
        The configured logger.

    Raises:
        AgentFrameworkException: If the name is outside the package namespace.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        raise AgentFrameworkException(f"Logger name must start with '{ROOT_LOGGER_NAME}'.")
    return logging.getLogger(name)
