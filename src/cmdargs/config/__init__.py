"""Configuration layer — environment-driven settings and logging setup."""

from cmdargs.config.logging_config import configure_logging
from cmdargs.config.settings import ParserSettings, load_settings

__all__: list[str] = ["ParserSettings", "configure_logging", "load_settings"]
