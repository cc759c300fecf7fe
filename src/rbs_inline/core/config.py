"""Global configuration for rbs-inline.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class RbsInlineConfig(BaseSettings):
    """rbs-inline configuration settings.

    Values can be overridden via environment variables with RBS_INLINE_ prefix.
    Example: RBS_INLINE_LOG_LEVEL=DEBUG overrides log_level.
    """

    # Diagnostics
    warn_unsupported_receiver: bool = Field(
        default=True,
        description="Log a warning for `def obj.foo` receivers treated as instance methods",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level used by the CLI",
    )

    # Source reading
    source_encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode Ruby source text",
    )

    # Output
    show_private: bool = Field(
        default=True,
        description="Include private declarations in CLI output",
    )

    model_config = {
        "env_prefix": "RBS_INLINE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> RbsInlineConfig:
    """Get cached configuration instance.

    Returns:
        RbsInlineConfig singleton instance.
    """
    return RbsInlineConfig()


def reload_config() -> RbsInlineConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh RbsInlineConfig instance.
    """
    get_config.cache_clear()
    return get_config()
