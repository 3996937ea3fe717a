"""Terminate a process with graceful shutdown, then force kill if allowed."""

from __future__ import annotations

import logging
import os
from typing import Any

from ..errors import TerminationError
from .process_models import ProcessDescriptor, TerminationResult

logger = logging.getLogger(__name__)


def import_psutil() -> Any:
    """Import psutil or raise a helpful error."""
    try:
        import psutil

    except ImportError as import_exc:
        raise RuntimeError("psutil is required for process management but not available.") from import_exc
    else:
        return psutil


def terminate_process(
    descriptor: ProcessDescriptor,
    *,
    graceful_timeout: float,
    force: bool = False,
    force_timeout: float = 0.0,
) -> TerminationResult:
    """
    Send SIGTERM to ``descriptor.pid`` and wait for it to exit.

    Args:
        descriptor: Process found on the port
        graceful_timeout: Seconds to wait after SIGTERM; 0 returns right after the signal
        force: Send SIGKILL if the process outlives ``graceful_timeout``
        force_timeout: Seconds to wait after SIGKILL

    Returns:
        TerminationResult describing how the process went away

    Raises:
        TerminationError: If the signal cannot be delivered or the process survives
    """
    pid = descriptor.pid
    if pid == os.getpid():
        raise TerminationError(pid, detail="Refusing to terminate portsniper itself.")

    psutil = import_psutil()
    try:
        proc = psutil.Process(pid)
        logger.info("Sending SIGTERM to %s (PID %s)", descriptor.name, pid)
        proc.terminate()
    except psutil.NoSuchProcess:
        logger.info("Process %s exited before it could be signalled", pid)
        return TerminationResult(pid=pid, already_exited=True)
    except psutil.AccessDenied as exc:
        raise TerminationError(pid, detail="Permission denied.") from exc

    if graceful_timeout <= 0:
        return TerminationResult(pid=pid)

    try:
        proc.wait(timeout=graceful_timeout)
    except psutil.TimeoutExpired:
        logger.info("Process %s did not terminate within %ss", pid, graceful_timeout)
    except psutil.NoSuchProcess:
        return TerminationResult(pid=pid)
    else:
        return TerminationResult(pid=pid)

    if not force:
        raise TerminationError(
            pid,
            detail=f"Process is still running after {graceful_timeout}s; rerun with --force to send SIGKILL.",
        )
    return _force_kill(proc, psutil, force_timeout)


def _force_kill(proc: Any, psutil: Any, force_timeout: float) -> TerminationResult:
    """Force kill process after graceful shutdown fails."""
    pid = proc.pid
    try:
        logger.info("Sending SIGKILL to PID %s", pid)
        proc.kill()
    except psutil.NoSuchProcess:
        return TerminationResult(pid=pid)
    except psutil.AccessDenied as exc:
        raise TerminationError(pid, detail="Permission denied.") from exc

    try:
        proc.wait(timeout=force_timeout)
    except psutil.TimeoutExpired as kill_exc:
        raise TerminationError(
            pid,
            detail=f"Process persisted after SIGKILL for {force_timeout}s; manual intervention required.",
        ) from kill_exc
    except psutil.NoSuchProcess:
        logger.debug("Process %s reaped before wait returned", pid)
    return TerminationResult(pid=pid, forced=True)
