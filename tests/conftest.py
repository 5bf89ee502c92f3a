import io

import pytest
from rich.console import Console

from portsweep.ui import ScannerUI

KNOWN_OPEN = {1025, 2048, 65000}


def make_ui() -> ScannerUI:
    console = Console(file=io.StringIO(), highlight=False, soft_wrap=True,
                      force_terminal=False, color_system=None)
    return ScannerUI(console)


def output_of(ui: ScannerUI) -> str:
    return ui.console.file.getvalue()


@pytest.fixture
def ui():
    return make_ui()


@pytest.fixture
def fake_probe():
    """Probe that reports KNOWN_OPEN as open and records every port it saw."""
    seen = []

    async def probe(port):
        seen.append(port)
        return port in KNOWN_OPEN

    probe.seen = seen
    return probe
