from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_WINDOWS_NAME = "Unknown (Windows)"


@dataclass(frozen=True)
class ProcessDescriptor:
    """The process found listening on a port."""

    pid: int
    name: str

    def __post_init__(self) -> None:
        if isinstance(self.pid, bool) or not isinstance(self.pid, int) or self.pid <= 0:
            raise ValueError(f"PID must be a positive integer (got {self.pid!r})")


@dataclass(frozen=True)
class TerminationResult:
    """Outcome of a successful termination."""

    pid: int
    forced: bool = False
    already_exited: bool = False
