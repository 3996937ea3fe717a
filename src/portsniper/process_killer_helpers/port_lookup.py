"""Platform-specific lookup of the process listening on a TCP port."""

from __future__ import annotations

import logging
import platform
import subprocess
from typing import Callable, List, Optional

from ..errors import LookupCommandError, ProcessNotFoundError
from .output_parser import parse_lsof_output, parse_netstat_output
from .process_models import ProcessDescriptor
from .process_terminator import import_psutil

logger = logging.getLogger(__name__)

CommandRunner = Callable[[List[str]], "subprocess.CompletedProcess[str]"]

WINDOWS = "Windows"


def build_lookup_command(port: int, system: Optional[str] = None) -> List[str]:
    """Return the argv used to find the listener on ``port``."""
    system = system or platform.system()
    if system == WINDOWS:
        return ["netstat", "-ano"]
    return ["lsof", "-nP", f"-iTCP:{port}", "-sTCP:LISTEN"]


def run_lookup_command(command: List[str]) -> "subprocess.CompletedProcess[str]":
    try:
        return subprocess.run(command, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise LookupCommandError(command[0], reason="command not found") from exc
    except PermissionError as exc:
        raise LookupCommandError(command[0], reason="permission denied") from exc


def find_process_by_port(
    port: int,
    *,
    system: Optional[str] = None,
    runner: Optional[CommandRunner] = None,
) -> ProcessDescriptor:
    """
    Locate the process bound to ``port``.

    Args:
        port: A port already checked by :func:`validate_port`
        system: Platform name as returned by ``platform.system()``; detected when omitted
        runner: Callable executing the lookup argv; defaults to :func:`run_lookup_command`

    Raises:
        LookupCommandError: If the lookup command is unavailable
        ProcessNotFoundError: If the command fails or reports nothing
        ProcessParseError: If the command output cannot be parsed
    """
    system = system or platform.system()
    command = build_lookup_command(port, system)
    runner = runner or run_lookup_command

    logger.debug("Running lookup command: %s", " ".join(command))
    completed = runner(command)
    stdout = completed.stdout or ""

    if completed.returncode != 0 or not stdout.strip():
        logger.debug(
            "Lookup command exited with %s (stderr=%r)",
            completed.returncode,
            (completed.stderr or "").strip(),
        )
        raise ProcessNotFoundError(port)

    if system == WINDOWS:
        descriptor = parse_netstat_output(stdout, port)
        return _resolve_windows_name(descriptor)
    return parse_lsof_output(stdout, port)


def _resolve_windows_name(descriptor: ProcessDescriptor) -> ProcessDescriptor:
    """Fill in the executable name that netstat omits, when psutil can see it."""
    psutil = import_psutil()
    try:
        name = psutil.Process(descriptor.pid).name()
    except (psutil.NoSuchProcess, psutil.AccessDenied) as exc:
        logger.debug("Could not resolve name for PID %s: %s", descriptor.pid, exc)
        return descriptor
    if not name:
        return descriptor
    return ProcessDescriptor(pid=descriptor.pid, name=name)
