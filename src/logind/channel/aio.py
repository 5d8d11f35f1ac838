"""asyncio adapter for a blocking channel.

Each request runs on a worker thread so the event loop is never blocked;
signal callbacks arriving on whatever thread the wrapped channel uses are
handed back to the event loop with :meth:`asyncio.loop.call_soon_threadsafe`.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Callable, List, Optional

from ..protocol.wire import Variant
from .base import Channel, Handle


logger = logging.getLogger(__name__)


class AsyncChannel(Channel):
    """Wrap the blocking *channel*; every request method returns a coroutine.

    The *workers* argument bounds the number of requests in flight at once.
    """

    def __init__(self, channel: Channel, workers: int = 4,
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        self.channel = channel
        self.loop = loop
        self.executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix='logind')

    async def _run(self, method, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, method, *args)

    async def call(self, service: str, interface: str, path: str, method: str,
                   args: List[Variant]) -> List[Variant]:
        return await self._run(self.channel.call, service, interface, path, method, args)

    async def get_property(self, service: str, interface: str, path: str,
                           name: str) -> Variant:
        return await self._run(self.channel.get_property, service, interface, path, name)

    async def set_property(self, service: str, interface: str, path: str,
                           name: str, value: Variant) -> None:
        return await self._run(self.channel.set_property, service, interface, path, name, value)

    def subscribe(self, service: str, interface: str, path: str, signal: str,
                  callback: Callable[[List[Variant]], None]) -> Handle:
        """Subscribe on the wrapped channel; *callback* always runs on the
        event loop, which must be running (or passed to the constructor)."""

        loop = self.loop
        if loop is None:
            loop = asyncio.get_running_loop()

        def relay(args):
            if loop.is_closed():
                logger.debug("%s.%s: event loop closed, dropping emission", interface, signal)
                return
            loop.call_soon_threadsafe(callback, args)

        return self.channel.subscribe(service, interface, path, signal, relay)

    def close(self) -> None:
        self.executor.shutdown(wait=True)
        self.channel.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
