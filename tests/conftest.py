# Copyright (c) Microsoft. All rights reserved.

import pytest
from pytest import fixture


@fixture(scope="function", autouse=True)
def openai_unit_test_env(monkeypatch) -> None:  # type: ignore
    """Fixture to remove the OpenAI environment variables, so tests never reach a real account."""
    env_vars = [
        "OPENAI_API_KEY",
        "OPENAI_ORG_ID",
        "OPENAI_BASE_URL",
    ]

    for key in env_vars:
        monkeypatch.delenv(key, raising=False)  # type: ignore


@pytest.fixture
def missing_env_file() -> str:
    """A .env path that does not exist, so settings only come from arguments and the environment."""
    return "tests/does-not-exist.env"
