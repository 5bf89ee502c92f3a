"""
portsweep - concurrent TCP connect scanner.

Splits ports 1-65535 across N workers by stride, probes each port with a
plain connect, and reports the open ones in ascending order.
"""

from .config import ScanConfig
from .errors import ConfigurationError, PortsweepError, ScanAborted
from .partition import assign, partitions
from .prober import PortProber
from .report import render_report
from .scanner import PortScanner, scan_worker
from .utils import parse_address

__version__ = "0.1.0"

__all__ = [
    "ScanConfig",
    "ConfigurationError",
    "PortsweepError",
    "ScanAborted",
    "assign",
    "partitions",
    "PortProber",
    "render_report",
    "PortScanner",
    "scan_worker",
    "parse_address",
]
