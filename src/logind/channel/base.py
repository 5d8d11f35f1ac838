"""Channel interface.

This is the (small) contract a channel implementation must follow. The
facades only ever talk to a channel; they know nothing about the bus
library underneath. Every argument and reply is a
:class:`logind.protocol.wire.Variant`.

Any of :func:`Channel.call`, :func:`Channel.get_property` and
:func:`Channel.set_property` may return an awaitable instead of the value;
the facades detect this and hand the caller a coroutine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List

from ..errors import (
    ChannelError,
    ChannelClosed,
    MalformedReply,
    MethodNotFound,
    PermissionDenied,
)
from ..protocol.wire import Variant


__all__ = (
    'Channel',
    'Handle',
    'ChannelError',
    'ChannelClosed',
    'MalformedReply',
    'MethodNotFound',
    'PermissionDenied',
)


class Handle(ABC):
    """What :func:`Channel.subscribe` returns."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop delivering the signal. Cancelling twice is harmless."""


class Channel(ABC):
    """Minimal contract for talking to a remote object."""

    @abstractmethod
    def call(self, service: str, interface: str, path: str, method: str,
             args: List[Variant]) -> Any:
        """Invoke *method* and return the reply body as a list of Variant
        instances, possibly empty."""

    @abstractmethod
    def get_property(self, service: str, interface: str, path: str,
                     name: str) -> Any:
        """Return the current value of a property as a Variant."""

    @abstractmethod
    def set_property(self, service: str, interface: str, path: str,
                     name: str, value: Variant) -> Any:
        """Assign a new value to a writable property."""

    @abstractmethod
    def subscribe(self, service: str, interface: str, path: str, signal: str,
                  callback: Callable[[List[Variant]], None]) -> Handle:
        """Arrange for *callback* to be invoked with the arguments of every
        emission of *signal*, in emission order."""

    def close(self) -> None:
        """Release any resources held by the channel."""
