"""
Port Sniper

Finds the process listening on a TCP port and, once the user agrees,
terminates it. Each step reports through the ``console`` callables so the
pipeline can be driven from the CLI or from tests.

Usage:
    from portsniper.process_killer import snipe_port

    exit_code = snipe_port("8080")
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from .config import PortSniperSettings
from .errors import PortSniperError
from .port_validation import validate_port
from .process_killer_helpers.confirmation import CONFIRMATION_QUESTION, ask_confirmation
from .process_killer_helpers.port_lookup import find_process_by_port
from .process_killer_helpers.process_models import ProcessDescriptor
from .process_killer_helpers.process_terminator import terminate_process

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
# 128 + SIGINT, the shell convention for Ctrl-C
EXIT_INTERRUPTED = 130

Console = Callable[[str], None]


def _stdout(message: str) -> None:
    print(message)


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


def report_process(descriptor: ProcessDescriptor, console: Console) -> None:
    console("Process Found:")
    console(f"PID   : {descriptor.pid}")
    console(f"Name  : {descriptor.name}\n")


def snipe_port(
    port_text: str,
    *,
    settings: Optional[PortSniperSettings] = None,
    prompt: Callable[[str], str] = input,
    console: Console = _stdout,
    error_console: Console = _stderr,
) -> int:
    """
    Run the lookup, confirm, terminate pipeline for one port.

    Args:
        port_text: Raw ``--port`` value
        settings: Timeouts and flags; defaults apply when omitted
        prompt: Reads the confirmation answer
        console: Receives status lines
        error_console: Receives failure lines

    Returns:
        Process exit code
    """
    settings = settings or PortSniperSettings()

    try:
        port = validate_port(port_text)
    except PortSniperError as exc:
        error_console(f"❌ {exc}")
        return EXIT_FAILURE

    console(f"🔍 Scanning port {port}...\n")

    try:
        descriptor = find_process_by_port(port)
        report_process(descriptor, console)

        if settings.assume_yes:
            logger.debug("Confirmation skipped for PID %s", descriptor.pid)
        elif not ask_confirmation(CONFIRMATION_QUESTION, prompt=prompt):
            console("❎ Operation cancelled by user.")
            return EXIT_OK

        result = terminate_process(
            descriptor,
            graceful_timeout=settings.graceful_timeout,
            force=settings.force,
            force_timeout=settings.force_timeout,
        )
    except PortSniperError as exc:
        logger.debug("Port %s: %s", port, exc, exc_info=True)
        error_console(f"❌ {exc}")
        return EXIT_FAILURE

    if result.already_exited:
        console("✅ Process had already exited.")
    elif result.forced:
        console("✅ Process force killed.")
    else:
        console("✅ Process terminated successfully.")
    return EXIT_OK


__all__ = ["EXIT_FAILURE", "EXIT_INTERRUPTED", "EXIT_OK", "report_process", "snipe_port"]
