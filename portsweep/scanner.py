import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

from .config import ScanConfig
from .errors import ConfigurationError, ScanAborted
from .partition import MAX_PORT, assign
from .prober import PortProber
from .report import render_report
from .ui import ScannerUI

logger = logging.getLogger(__name__)

Probe = Callable[[int], Awaitable[bool]]


async def scan_worker(worker_id: int, workers: int, probe: Probe,
                      results: asyncio.Queue, ui: ScannerUI) -> int:
    """
    Probes every port of one stride partition in order and puts each open
    port on the shared results queue. Never stops early, never retries.
    """
    found = 0
    for port in assign(worker_id, workers):
        if await probe(port):
            ui.mark_open()
            results.put_nowait(port)
            found += 1
    logger.debug("worker %d finished, %d open", worker_id, found)
    return found


class PortScanner:
    """
    Spawns one worker task per partition, waits for all of them and
    collects the open ports they report.
    """

    def __init__(self, config: ScanConfig, probe: Optional[Probe] = None,
                 ui: Optional[ScannerUI] = None):
        self.config = config
        self._probe = probe
        self.ui = ui or ScannerUI()
        self.duration = 0.0

    async def run(self) -> List[int]:
        """Scans every port of the target and returns the open ones ascending."""
        workers = self.config.workers
        if workers < 1:
            raise ConfigurationError(f"worker count must be at least 1, got {workers}")

        # Created here so the semaphore binds to the running loop
        probe = self._probe or PortProber(self.config).probe

        # Unbounded: a worker must never block on reporting a result
        results: asyncio.Queue = asyncio.Queue()

        logger.info("scanning %s ports 1-%d with %d workers",
                    self.config.target, MAX_PORT, workers)
        start_time = time.time()

        tasks = [
            asyncio.create_task(scan_worker(worker_id, workers, probe, results, self.ui))
            for worker_id in range(workers)
        ]
        try:
            await asyncio.gather(*tasks)
        except Exception as e:
            failed = next((i for i, t in enumerate(tasks)
                           if t.done() and not t.cancelled() and t.exception() is e), -1)
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise ScanAborted(f"scan aborted: {e!r}", worker_id=failed) from e

        open_ports = []
        while not results.empty():
            open_ports.append(results.get_nowait())

        self.duration = time.time() - start_time
        logger.info("scan of %s finished in %.2fs, %d open",
                    self.config.target, self.duration, len(open_ports))
        return sorted(open_ports)

    async def scan(self) -> List[int]:
        """Runs the scan and writes the rendered report through the UI."""
        open_ports = await self.run()
        self.ui.display_report(render_report(open_ports))
        return open_ports
