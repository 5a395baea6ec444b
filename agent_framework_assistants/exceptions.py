# Copyright (c) Microsoft. All rights reserved.


class AgentFrameworkException(Exception):
    """Base class for exceptions in the Agent Framework."""

    pass


class ServiceException(AgentFrameworkException):
    """Base class for all service exceptions."""

    pass


class ServiceInitializationError(ServiceException):
    """An error occurred while initializing the service client."""

    pass


class AgentThreadException(AgentFrameworkException):
    """Base class for all agent thread exceptions."""

    pass


class AgentThreadInitializationError(AgentThreadException):
    """An agent thread was constructed with a missing or invalid argument."""

    pass


class AgentThreadOperationException(AgentThreadException):
    """An operation is not valid in the current state of the agent thread."""

    pass
