"""Settings mixins for application identity, logging and store behaviour.

AppSettingsMixin: Application identity (app_name).
LoggingSettingsMixin: Log verbosity and output format.
StoreSettingsMixin: How the CLI builds its task store.

These live outside config.py so that each concern can be tested and
documented on its own, then composed into Settings.
"""

from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="tasklist",
        title="App Name",
        description="Application name, also used for the JSON config directory",
    )

    @field_validator("app_name")
    @classmethod
    def strip_app_name(cls, v: str) -> str:
        """Reject blank application names."""
        v = v.strip()
        if not v:
            raise ValueError("app_name must not be blank")
        return v


class LoggingSettingsMixin:
    """Settings for logging configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )


class StoreSettingsMixin:
    """Settings for task store construction."""

    thread_safe: bool = Field(
        default=False,
        title="Thread Safe",
        description="Wrap the task store so each operation runs under one lock",
    )
