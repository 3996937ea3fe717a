"""Building blocks for locating and terminating the owner of a port."""

from .confirmation import ask_confirmation, is_affirmative
from .output_parser import parse_lsof_output, parse_netstat_output
from .port_lookup import build_lookup_command, find_process_by_port
from .process_models import UNKNOWN_WINDOWS_NAME, ProcessDescriptor, TerminationResult
from .process_terminator import terminate_process

__all__ = [
    "UNKNOWN_WINDOWS_NAME",
    "ProcessDescriptor",
    "TerminationResult",
    "ask_confirmation",
    "build_lookup_command",
    "find_process_by_port",
    "is_affirmative",
    "parse_lsof_output",
    "parse_netstat_output",
    "terminate_process",
]
