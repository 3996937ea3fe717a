"""Parse lookup command output into a :class:`ProcessDescriptor`."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import ProcessNotFoundError, ProcessParseError
from .process_models import UNKNOWN_WINDOWS_NAME, ProcessDescriptor

logger = logging.getLogger(__name__)

# lsof columns: COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
_LSOF_NAME_COLUMN = 0
_LSOF_PID_COLUMN = 1

# netstat -ano TCP columns: Proto LocalAddress ForeignAddress State PID
_NETSTAT_PROTO_COLUMN = 0
_NETSTAT_LOCAL_ADDRESS_COLUMN = 1
_NETSTAT_STATE_COLUMN = 3
_NETSTAT_TCP_COLUMNS = 5
_NETSTAT_LISTENING = "LISTENING"


def parse_lsof_output(output: str, port: int) -> ProcessDescriptor:
    """Read the first process row that follows the lsof header."""
    lines = _non_blank_lines(output)
    if not lines:
        raise ProcessNotFoundError(port)
    if len(lines) < 2:
        raise ProcessParseError(output, detail="lsof output has no process row")

    columns = lines[1].split()
    if len(columns) <= _LSOF_PID_COLUMN:
        raise ProcessParseError(output, detail=f"lsof row has too few columns: {lines[1]!r}")

    pid = _parse_pid(columns[_LSOF_PID_COLUMN], output)
    return _build_descriptor(pid, columns[_LSOF_NAME_COLUMN], output)


def parse_netstat_output(output: str, port: int) -> ProcessDescriptor:
    """Take the PID from the first listening TCP row bound locally to ``port``.

    IPv4 and IPv6 rows are both considered; UDP rows and connections in any
    state other than LISTENING are skipped.

    netstat does not report process names, so the descriptor carries
    :data:`UNKNOWN_WINDOWS_NAME` until a caller resolves it.
    """
    line = _first_netstat_match(output, port)
    if line is None:
        raise ProcessNotFoundError(port)

    pid = _parse_pid(line.split()[-1], output)
    return _build_descriptor(pid, UNKNOWN_WINDOWS_NAME, output)


def _first_netstat_match(output: str, port: int) -> Optional[str]:
    suffix = f":{port}"
    for line in _non_blank_lines(output):
        columns = line.split()
        if len(columns) != _NETSTAT_TCP_COLUMNS or columns[_NETSTAT_PROTO_COLUMN].upper() != "TCP":
            continue
        if columns[_NETSTAT_STATE_COLUMN].upper() != _NETSTAT_LISTENING:
            continue
        if columns[_NETSTAT_LOCAL_ADDRESS_COLUMN].endswith(suffix):
            return line
    return None


def _non_blank_lines(output: str) -> List[str]:
    return [line.strip() for line in output.strip().splitlines() if line.strip()]


def _parse_pid(token: str, output: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ProcessParseError(output, detail=f"PID column is not numeric: {token!r}")
    return int(token)


def _build_descriptor(pid: int, name: str, output: str) -> ProcessDescriptor:
    try:
        descriptor = ProcessDescriptor(pid=pid, name=name)
    except ValueError as exc:
        raise ProcessParseError(output, detail=str(exc)) from exc
    logger.debug("Parsed process descriptor pid=%s name=%s", descriptor.pid, descriptor.name)
    return descriptor
