"""Parser settings loaded from the environment.

Values come from ``CMDARGS_*`` variables or a ``.env`` file in the
working directory.  Explicit keyword arguments always win over the
environment.  :func:`load_settings` is the entry point used by the
parser and the demo program: it maps pydantic validation failures to
:class:`~cmdargs.exceptions.ConfigurationError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmdargs.exceptions import ConfigurationError

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ParserSettings(BaseSettings):
    """Parser behaviour knobs."""

    model_config = SettingsConfigDict(
        env_prefix="CMDARGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Fail a pass when a parameter declared required=True was not supplied
    enforce_required: bool = Field(False)

    # DEBUG-level logs from the library loggers
    debug: bool = Field(False)

    log_format: str = Field(DEFAULT_LOG_FORMAT)


def load_settings(**overrides: Any) -> ParserSettings:
    """Build :class:`ParserSettings`, raising only our own error type.

    Raises
    ------
    ConfigurationError
        If a ``CMDARGS_*`` variable (or an override) has an invalid value.
    """
    try:
        return ParserSettings(**overrides)
    except ValidationError as exc:
        fields = ", ".join(
            "CMDARGS_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise ConfigurationError(
            f"Invalid cmdargs settings: {fields or exc.title}",
            hint="Check the CMDARGS_* environment variables and any .env file.",
        ) from exc
