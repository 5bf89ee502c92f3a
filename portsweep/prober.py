import asyncio
import logging
from typing import Optional

from .config import ScanConfig

logger = logging.getLogger(__name__)


class PortProber:
    """
    TCP connect probe against a single target.

    A completed handshake means open; the connection is closed straight
    away without sending or reading anything. Every OSError (refused,
    unreachable, reset) and every timeout means closed.
    """

    def __init__(self, config: ScanConfig, semaphore: Optional[asyncio.Semaphore] = None):
        self.host = str(config.target)
        self.timeout = config.timeout
        # Caps connect attempts in flight across all workers so a large
        # worker count cannot run out of file descriptors (EMFILE would
        # otherwise read as "closed").
        self.semaphore = semaphore or asyncio.Semaphore(config.max_inflight)

    async def probe(self, port: int) -> bool:
        async with self.semaphore:
            try:
                reader, writer = await asyncio.wait_for(
                    asyncio.open_connection(self.host, port),
                    timeout=self.timeout
                )
            except (asyncio.TimeoutError, OSError) as e:
                logger.debug("%s:%d closed (%s)", self.host, port, e.__class__.__name__)
                return False

            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                # Peer reset during teardown; the handshake already succeeded
                pass
            return True
