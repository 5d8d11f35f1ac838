"""Channel implementations.

The dbus-python backend is imported on demand, so the rest of the package
(and any alternative channel) works without dbus-python installed.
"""

import os

from .base import (
    Channel,
    Handle,
    ChannelError,
    ChannelClosed,
    MalformedReply,
    MethodNotFound,
    PermissionDenied,
)
from .aio import AsyncChannel


def system(**kwargs):
    """Return a :class:`dbus.DBusChannel` for the bus named by the
    ``LOGIND_BUS`` environment variable: ``system`` (the default) or
    ``session``."""

    kind = os.environ.get("LOGIND_BUS", "system").strip().lower() or "system"

    if kind not in ("system", "session"):
        raise ValueError(f"unknown LOGIND_BUS value: {kind!r}")

    from .dbus import DBusChannel
    return DBusChannel(kind=kind, **kwargs)


def session(**kwargs):
    """Return a :class:`dbus.DBusChannel` for the session bus."""

    from .dbus import DBusChannel
    return DBusChannel(kind="session", **kwargs)
