# Copyright (c) Microsoft. All rights reserved.

import logging
from collections.abc import Mapping
from copy import copy
from typing import Any, ClassVar

from httpx import AsyncClient
from openai import AsyncOpenAI

from .._logging import get_logger
from .._settings import AFSettings, SecretString
from .._telemetry import APP_INFO, prepend_agent_framework_to_user_agent
from ..exceptions import ServiceInitializationError

logger: logging.Logger = get_logger("agent_framework_assistants.openai")

__all__ = ["OpenAISettings", "create_assistant_client"]


class OpenAISettings(AFSettings):
    """OpenAI settings.

    The settings are first loaded from environment variables with the prefix 'OPENAI_'.
    If the environment variables are not found, the settings can be loaded from a .env file
    with the encoding 'utf-8'. If the settings are not found in the .env file, they are None.

    Keyword Args:
        api_key: OpenAI API key, see https://platform.openai.com/account/api-keys
            (Env var OPENAI_API_KEY)
        org_id: This is usually optional unless your account belongs to multiple organizations.
            (Env var OPENAI_ORG_ID)
        base_url: The base URL for the OpenAI API, for OpenAI compatible endpoints.
            (Env var OPENAI_BASE_URL)
        env_file_path: If provided, the .env settings are read from this file path location.
        env_file_encoding: The encoding of the .env file, defaults to 'utf-8'.

    Examples:
        .. code-block:: python

            # Via environment variable OPENAI_API_KEY
            settings = OpenAISettings()

            # Or explicitly
            settings = OpenAISettings(api_key="sk-...")
    """

    env_prefix: ClassVar[str] = "OPENAI_"

    api_key: SecretString | None = None
    org_id: str | None = None
    base_url: str | None = None


def create_assistant_client(
    *,
    api_key: str | None = None,
    org_id: str | None = None,
    base_url: str | None = None,
    default_headers: Mapping[str, str] | None = None,
    http_client: AsyncClient | None = None,
    env_file_path: str | None = None,
    env_file_encoding: str | None = None,
) -> AsyncOpenAI:
    """Create an OpenAI client for use with assistant threads.

    Keyword Args:
        api_key: The API key, overrides the env vars or .env file value.
        org_id: The organization ID, overrides the env vars or .env file value.
        base_url: The base URL, overrides the env vars or .env file value.
        default_headers: Default headers for HTTP requests.
        http_client: An existing httpx client to send requests with.
        env_file_path: Use the environment settings file as a fallback to environment variables.
        env_file_encoding: The encoding of the environment settings file.

    Returns:
        The configured AsyncOpenAI client.

    Raises:
        ServiceInitializationError: If no API key is available.
    """
    settings = OpenAISettings(
        api_key=api_key,
        org_id=org_id,
        base_url=base_url,
        env_file_path=env_file_path,
        env_file_encoding=env_file_encoding,
    )
    if not settings.api_key:
        raise ServiceInitializationError(
            "OpenAI API key is required. Set via 'api_key' parameter or 'OPENAI_API_KEY' environment variable."
        )

    # Merge APP_INFO into the headers
    merged_headers = dict(copy(default_headers)) if default_headers else {}
    if APP_INFO:
        merged_headers.update(APP_INFO)
        merged_headers = prepend_agent_framework_to_user_agent(merged_headers)

    args: dict[str, Any] = {
        "api_key": str(settings.api_key),
        "default_headers": merged_headers,
    }
    if settings.org_id:
        args["organization"] = settings.org_id
    if settings.base_url:
        args["base_url"] = settings.base_url
    if http_client is not None:
        args["http_client"] = http_client

    logger.debug("Creating OpenAI client for assistant threads (base_url=%s).", settings.base_url or "default")
    return AsyncOpenAI(**args)
