"""Find the process listening on a TCP port and terminate it."""

__version__ = "1.0.0"
