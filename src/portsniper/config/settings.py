"""Settings for a single portsniper run."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_seconds, env_str

# Process termination timeouts (seconds)
GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS = 3.0
FORCE_KILL_TIMEOUT_SECONDS = 2.0


@dataclass(frozen=True)
class PortSniperSettings:
    graceful_timeout: float = GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS
    force_timeout: float = FORCE_KILL_TIMEOUT_SECONDS
    assume_yes: bool = False
    force: bool = False
    log_file: Optional[str] = None

    def with_overrides(
        self,
        *,
        graceful_timeout: Optional[float] = None,
        assume_yes: bool = False,
        force: bool = False,
    ) -> "PortSniperSettings":
        """Apply command-line flags on top of the environment settings.

        Flags can only switch behaviour on; an unset flag keeps the value
        loaded from the environment.
        """
        if graceful_timeout is not None and (not math.isfinite(graceful_timeout) or graceful_timeout < 0):
            raise ConfigurationError.invalid_value("--timeout", graceful_timeout, "Timeout must be a finite non-negative number")
        return replace(
            self,
            graceful_timeout=self.graceful_timeout if graceful_timeout is None else graceful_timeout,
            assume_yes=self.assume_yes or assume_yes,
            force=self.force or force,
        )


def load_settings() -> PortSniperSettings:
    """Build settings from PORTSNIPER_* environment variables and .env defaults."""
    return PortSniperSettings(
        graceful_timeout=_seconds("PORTSNIPER_GRACEFUL_TIMEOUT_SECONDS", GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS),
        force_timeout=_seconds("PORTSNIPER_FORCE_TIMEOUT_SECONDS", FORCE_KILL_TIMEOUT_SECONDS),
        assume_yes=bool(env_bool("PORTSNIPER_ASSUME_YES", or_value=False)),
        force=bool(env_bool("PORTSNIPER_FORCE", or_value=False)),
        log_file=env_str("PORTSNIPER_LOG_FILE"),
    )


def _seconds(name: str, default: float) -> float:
    value = env_seconds(name, or_value=default)
    if value is None:
        return default
    return value


__all__ = [
    "FORCE_KILL_TIMEOUT_SECONDS",
    "GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS",
    "PortSniperSettings",
    "load_settings",
]
