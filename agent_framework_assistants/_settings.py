# Copyright (c) Microsoft. All rights reserved.

"""Settings base class with environment variable resolution.

Values are resolved from constructor arguments first, then environment variables,
then a .env file, and finally the class defaults.
"""

import os
import types
from contextlib import suppress
from typing import Any, ClassVar, Union, get_args, get_origin, get_type_hints

from dotenv import load_dotenv

__all__ = ["AFSettings", "SecretString"]


class SecretString(str):
    """A string subclass that masks its value in repr() to prevent accidental exposure.

    SecretString behaves exactly like a regular string in all operations,
    but its repr() shows '**********' instead of the actual value.

    Example:
        ```python
        api_key = SecretString("sk-secret-key")
        print(api_key)  # sk-secret-key
        print(repr(api_key))  # SecretString('**********')
        ```
    """

    def __repr__(self) -> str:
        """Return a masked representation to prevent secret exposure."""
        return "SecretString('**********')"


def _coerce_value(value: str, target_type: Any) -> Any:
    """Coerce a string value read from the environment to the target type.

    Raises:
        ValueError: If the value cannot be coerced.
    """
    origin = get_origin(target_type)
    if origin is Union or origin is types.UnionType:
        for arg in get_args(target_type):
            if arg is type(None):
                continue
            with suppress(ValueError, TypeError):
                return _coerce_value(value, arg)
        return value

    if isinstance(target_type, type) and issubclass(target_type, SecretString):
        return SecretString(value)
    if target_type is str:
        return value
    if target_type is int:
        return int(value)
    if target_type is float:
        return float(value)
    if target_type is bool:
        return value.lower() in ("true", "1", "yes", "on")

    return value


class AFSettings:
    """Base class for settings with environment variable resolution.

    Subclasses define fields as annotated class attributes and set `env_prefix`.
    The environment variable for a field is `env_prefix` + the field name in upper case,
    unless `field_env_vars` maps the field to another suffix.

    Example:
        ```python
        class MySettings(AFSettings):
            env_prefix: ClassVar[str] = "MY_APP_"

            api_key: SecretString | None = None
            timeout: int = 30
        ```
    """

    env_prefix: ClassVar[str] = ""
    field_env_vars: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        *,
        env_file_path: str | None = None,
        env_file_encoding: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize settings from environment variables and constructor arguments.

        Keyword Args:
            env_file_path: Path to .env file. Defaults to searching for ".env".
            env_file_encoding: Encoding for .env file. Defaults to "utf-8".
            **kwargs: Field values. These take precedence over environment variables,
                None values are ignored.
        """
        encoding = env_file_encoding or "utf-8"

        # Existing environment values take precedence over the .env file.
        load_dotenv(dotenv_path=env_file_path, encoding=encoding)

        self._env_file_path = env_file_path
        self._env_file_encoding = encoding

        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        for field_name, field_type in self._get_field_hints().items():
            if field_name in kwargs:
                value = kwargs[field_name]
                if isinstance(value, str):
                    with suppress(ValueError, TypeError):
                        value = _coerce_value(value, field_type)
                setattr(self, field_name, value)
                continue

            env_value = os.getenv(self._get_env_var_name(field_name))
            if env_value is not None:
                try:
                    setattr(self, field_name, _coerce_value(env_value, field_type))
                except (ValueError, TypeError):
                    setattr(self, field_name, env_value)
                continue

            setattr(self, field_name, getattr(self.__class__, field_name, None))

    @property
    def env_file_path(self) -> str | None:
        """Get the .env file path used for loading settings."""
        return self._env_file_path

    @property
    def env_file_encoding(self) -> str:
        """Get the encoding used for reading the .env file."""
        return self._env_file_encoding

    def _get_field_hints(self) -> dict[str, Any]:
        hints: dict[str, Any] = {}
        for cls in type(self).__mro__:
            if cls in (AFSettings, object):
                continue
            with suppress(TypeError):
                for name, hint in get_type_hints(cls).items():
                    if name in hints or name.startswith("_") or get_origin(hint) is ClassVar:
                        continue
                    hints[name] = hint
        return hints

    def _get_env_var_name(self, field_name: str) -> str:
        suffix = self.field_env_vars.get(field_name, field_name.upper())
        return f"{self.env_prefix}{suffix}"

    def __repr__(self) -> str:
        """Return a string representation of the settings with secrets masked."""
        fields: list[str] = []
        for field_name in self._get_field_hints():
            value = getattr(self, field_name, None)
            if value is not None:
                fields.append(f"{field_name}={value!r}")
        return f"{self.__class__.__name__}({', '.join(fields)})"
