"""dbus-python channel.

Converts between :class:`logind.protocol.wire.Variant` and the ``dbus.*``
value types, and maps :class:`dbus.exceptions.DBusException` onto the
:class:`logind.errors.ChannelError` hierarchy.

Signal delivery requires a main loop integration; by default the GLib
integration from :mod:`dbus.mainloop.glib` is installed as the default
before the bus is opened. The application is responsible for running a
GLib main loop (or iterating its context) so that signals are dispatched.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

import dbus
import dbus.exceptions
import dbus.types

from ..errors import ChannelError, EncodeError, MalformedReply
from ..protocol import fields
from ..protocol import wire
from ..protocol.wire import Variant
from .base import Channel, Handle


logger = logging.getLogger(__name__)

_mainloop_lock = threading.Lock()
_mainloop_installed = False


# Order matters: dbus.Boolean is an int, and dbus.ObjectPath and
# dbus.Signature are both str.

_scalars = (
    (dbus.Boolean, wire.BOOLEAN, bool),
    (dbus.Byte, wire.BYTE, int),
    (dbus.Int16, wire.INT16, int),
    (dbus.UInt16, wire.UINT16, int),
    (dbus.Int32, wire.INT32, int),
    (dbus.UInt32, wire.UINT32, int),
    (dbus.Int64, wire.INT64, int),
    (dbus.UInt64, wire.UINT64, int),
    (dbus.Double, wire.DOUBLE, float),
    (dbus.ObjectPath, wire.OBJECT_PATH, wire.ObjectPath),
    (dbus.Signature, wire.SIGNATURE, str),
    (dbus.String, wire.STRING, str),
)

_outbound = {
    wire.BOOLEAN: dbus.Boolean,
    wire.BYTE: dbus.Byte,
    wire.INT16: dbus.Int16,
    wire.UINT16: dbus.UInt16,
    wire.INT32: dbus.Int32,
    wire.UINT32: dbus.UInt32,
    wire.INT64: dbus.Int64,
    wire.UINT64: dbus.UInt64,
    wire.DOUBLE: dbus.Double,
    wire.OBJECT_PATH: dbus.ObjectPath,
    wire.SIGNATURE: dbus.Signature,
    wire.STRING: dbus.String,
}


def from_dbus(value) -> Variant:
    """Convert a value returned by dbus-python into a Variant."""

    if isinstance(value, dbus.types.UnixFd):
        # take() hands ownership of the descriptor to the caller.
        return wire.Variant(wire.UNIX_FD, value.take())

    for dbus_type, kind, convert in _scalars:
        if isinstance(value, dbus_type):
            return wire.Variant(kind, convert(value))

    if isinstance(value, dbus.Dictionary):
        pairs = [wire.struct(from_dbus(key), from_dbus(item)) for key, item in value.items()]
        return wire.array(pairs)

    if isinstance(value, (dbus.Struct, tuple)):
        return wire.struct(*(from_dbus(field) for field in value))

    if isinstance(value, (dbus.Array, dbus.ByteArray, list)):
        if isinstance(value, (bytes, bytearray)):
            return wire.array(wire.byte(item) for item in value)
        return wire.array(from_dbus(item) for item in value)

    # Plain Python values show up when dbus-python is asked not to wrap.

    if isinstance(value, bool):
        return wire.boolean(value)
    if isinstance(value, int):
        return wire.int64(value)
    if isinstance(value, float):
        return wire.double(value)
    if isinstance(value, str):
        return wire.string(value)

    raise MalformedReply('cannot convert reply value of type ' + type(value).__name__)


def signature_of(value: Variant) -> str:
    """Return the bus signature for a single Variant."""

    if value.kind == wire.STRUCT:
        return '(' + ''.join(signature_of(field) for field in value.value) + ')'

    if value.kind == wire.ARRAY:
        if len(value.value) == 0:
            return 'av'
        return 'a' + signature_of(value.value[0])

    return value.kind


def to_dbus(value: Variant):
    """Convert a Variant into the matching dbus-python value."""

    kind = value.kind

    if kind == wire.VARIANT:
        return to_dbus(value.value)

    if kind == wire.UNIX_FD:
        return dbus.types.UnixFd(value.value)

    if kind == wire.STRUCT:
        return dbus.Struct([to_dbus(field) for field in value.value],
                           signature=signature_of(value)[1:-1])

    if kind == wire.ARRAY:
        return dbus.Array([to_dbus(item) for item in value.value],
                          signature=signature_of(value)[1:])

    try:
        constructor = _outbound[kind]
    except KeyError:
        raise EncodeError('no dbus-python type for wire kind ' + repr(kind)) from None

    return constructor(value.value)


def _translate(exception):
    name = exception.get_dbus_name()
    message = exception.get_dbus_message() or str(exception)
    return ChannelError.from_name(name, message)


def install_mainloop():
    """Install the GLib main loop integration as the dbus-python default.
    Harmless to call more than once."""

    global _mainloop_installed

    with _mainloop_lock:
        if _mainloop_installed:
            return

        from dbus.mainloop.glib import DBusGMainLoop
        DBusGMainLoop(set_as_default=True)
        _mainloop_installed = True


class SignalHandle(Handle):

    def __init__(self, match):
        self.match = match

    def cancel(self) -> None:
        match = self.match
        if match is None:
            return

        self.match = None
        match.remove()


class DBusChannel(Channel):
    """A blocking channel over a :class:`dbus.Bus` connection.

    *bus* may be an existing connection; otherwise *kind* selects the
    ``system`` or ``session`` bus. Pass ``mainloop=False`` to leave the
    dbus-python default main loop alone, for example when the application
    has installed its own.
    """

    def __init__(self, bus=None, kind: str = 'system', mainloop: bool = True,
                 timeout: Optional[float] = None):

        if mainloop:
            install_mainloop()

        if bus is None:
            if kind == 'system':
                bus = dbus.SystemBus()
            elif kind == 'session':
                bus = dbus.SessionBus()
            else:
                raise ValueError('unknown bus kind: ' + repr(kind))

        self.bus = bus
        self.timeout = timeout

    def _object(self, service, path):
        try:
            return self.bus.get_object(service, path, introspect=False)
        except dbus.exceptions.DBusException as e:
            raise _translate(e) from e

    def _invoke(self, service, interface, path, method, args):

        signature = ''.join(signature_of(arg) for arg in args)
        converted = [to_dbus(arg) for arg in args]

        remote = self._object(service, path).get_dbus_method(method, interface)

        kwargs = dict(signature=signature)
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        logger.debug("%s %s.%s(%s)", path, interface, method, signature)

        try:
            return remote(*converted, **kwargs)
        except dbus.exceptions.DBusException as e:
            raise _translate(e) from e

    def call(self, service: str, interface: str, path: str, method: str,
             args: List[Variant]) -> List[Variant]:

        reply = self._invoke(service, interface, path, method, args)

        # dbus-python returns None for no values, the bare value for one,
        # and a plain tuple for several.
        if reply is None:
            return []
        if isinstance(reply, tuple) and not isinstance(reply, dbus.Struct):
            return [from_dbus(value) for value in reply]
        return [from_dbus(reply)]

    def get_property(self, service: str, interface: str, path: str,
                     name: str) -> Variant:

        args = [wire.string(interface), wire.string(name)]
        reply = self._invoke(service, fields.PROPERTIES_INTERFACE, path, 'Get', args)
        return from_dbus(reply)

    def set_property(self, service: str, interface: str, path: str,
                     name: str, value: Variant) -> None:

        args = [wire.string(interface), wire.string(name), wire.variant(value)]
        self._invoke(service, fields.PROPERTIES_INTERFACE, path, 'Set', args)

    def subscribe(self, service: str, interface: str, path: str, signal: str,
                  callback: Callable[[List[Variant]], None]) -> Handle:

        def receive(*args):
            callback([from_dbus(arg) for arg in args])

        logger.debug("subscribe %s %s.%s", path, interface, signal)

        match = self.bus.add_signal_receiver(receive,
                                             signal_name=signal,
                                             dbus_interface=interface,
                                             bus_name=service,
                                             path=path)
        return SignalHandle(match)

    def close(self) -> None:
        self.bus.close()
