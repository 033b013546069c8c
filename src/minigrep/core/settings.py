"""Environment-driven configuration using Pydantic Settings (v2).

Only real environment variables are read; there is no config file.

* ``IGNORE_CASE`` — presence (any value, even empty) turns off case
  matching.
* ``MINIGREP_LOG_LEVEL`` — level for the ``minigrep`` logger.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from minigrep.exceptions import ConfigurationError

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

IGNORE_CASE_VAR: str = "IGNORE_CASE"
LOG_LEVEL_VAR: str = "MINIGREP_LOG_LEVEL"

_ENV_NAMES: dict[str, str] = {
    "ignore_case": IGNORE_CASE_VAR,
    "log_level": LOG_LEVEL_VAR,
}


class Settings(BaseSettings):
    """Typed configuration loaded from the process environment.

    Attributes
    ----------
    ignore_case : Optional[str]
        Raw value of `IGNORE_CASE`; only whether it is set matters.
    log_level : LogLevelName
        Level name for the package logger; maps from `MINIGREP_LOG_LEVEL`.
    """

    ignore_case: str | None = Field(default=None, alias=IGNORE_CASE_VAR)
    log_level: LogLevelName = Field(default="WARNING", alias=LOG_LEVEL_VAR)

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def case_sensitive(self) -> bool:
        """Return False when `IGNORE_CASE` is present in any form."""
        return self.ignore_case is None

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.WARNING)


def load_settings() -> Settings:
    """Build a `Settings` instance from the current environment.

    Not cached: each invocation reflects the environment at call time.

    Raises
    ------
    ConfigurationError
        If a variable holds a value outside its allowed set.
    """
    try:
        return Settings()
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        name = _ENV_NAMES.get(field, field or "environment")
        raise ConfigurationError(
            f"Invalid value for {name}: {first.get('msg', 'invalid')}",
            hint=f"{LOG_LEVEL_VAR} must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        ) from exc
