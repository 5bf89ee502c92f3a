"""
Exception hierarchy for portsweep.

Per-port connection failures are not errors; a refused or timed out
connect simply means the port is closed.
"""


class PortsweepError(Exception):
    """Base class for every error raised by portsweep."""

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class ConfigurationError(PortsweepError):
    """
    Bad user input: thread count, target address or command line options.
    Always raised before any worker is started.
    """


class ScanAborted(PortsweepError):
    """A worker crashed and the remaining workers were cancelled."""

    def __init__(self, message: str, worker_id: int = -1):
        self.worker_id = worker_id
        super().__init__(message, context=f"worker {worker_id}" if worker_id >= 0 else "")
