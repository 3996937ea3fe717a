"""Error types raised while locating and terminating a port's owner."""

from __future__ import annotations

from typing import Optional


class PortSniperError(RuntimeError):
    """Base class for every failure reported to the user."""


class InvalidPortError(PortSniperError, ValueError):
    """Raised when the requested port is not an integer in [1, 65535]."""

    def __init__(self, value: object, *, reason: str = "Invalid port number.") -> None:
        super().__init__(reason)
        self.value = value
        self.reason = reason


class LookupCommandError(PortSniperError):
    """Raised when the platform lookup command cannot be executed."""

    def __init__(self, command: str, *, reason: str) -> None:
        super().__init__(f"Could not run {command}: {reason}")
        self.command = command
        self.reason = reason


class ProcessNotFoundError(PortSniperError):
    """Raised when nothing is listening on the requested port."""

    def __init__(self, port: int) -> None:
        super().__init__("No process found on this port.")
        self.port = port


class ProcessParseError(PortSniperError):
    """Raised when the lookup output cannot be turned into a PID and name."""

    def __init__(self, output: str, *, detail: Optional[str] = None) -> None:
        super().__init__("Failed to parse process information.")
        self.output = output
        self.detail = detail


class TerminationError(PortSniperError):
    """Raised when the termination signal could not be delivered or had no effect."""

    def __init__(self, pid: int, *, detail: Optional[str] = None) -> None:
        message = "Failed to terminate the process."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.pid = pid
        self.detail = detail


__all__ = [
    "InvalidPortError",
    "LookupCommandError",
    "PortSniperError",
    "ProcessNotFoundError",
    "ProcessParseError",
    "TerminationError",
]
