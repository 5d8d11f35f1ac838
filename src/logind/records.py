""" Immutable records decoded from the structures logind returns. Each record
    is a frozen dataclass whose fields are listed in wire order; the field
    metadata names the :class:`protocol.codec.Codec` used for that field, so
    decoding, encoding, and conversion to and from plain dictionaries are
    all driven by the one table.
"""

from __future__ import annotations

import dataclasses
from typing import FrozenSet

from . import errors
from . import types
from .fd import FileDescriptor
from .protocol import codec
from .protocol import wire
from .protocol.wire import ObjectPath


def wired(field_codec, **kwargs):
    """ Declare a record field converted by *field_codec*.
    """

    metadata = {'wire': field_codec}
    return dataclasses.field(metadata=metadata, **kwargs)


def _fd_decode(value):
    return FileDescriptor(codec.as_fd(value))


def _fd_dump(value):
    if value.closed:
        return None
    return value.fileno()


FILE_DESCRIPTOR = codec.Codec(_fd_decode, wire.unix_fd, _fd_dump, FileDescriptor)


@dataclasses.dataclass(frozen=True)
class Record:
    """ Base class for all records. Subclasses only declare their fields.
    """

    @classmethod
    def _wired_fields(cls):
        return dataclasses.fields(cls)


    @classmethod
    def from_fields(cls, parts):
        """ Build a record from a sequence of wire values, one per field, in
            declaration order. Signals deliver their arguments this way.
        """

        fields = cls._wired_fields()

        if len(parts) != len(fields):
            raise errors.ArityMismatch(cls.__name__, len(fields), len(parts))

        values = dict()

        for field, part in zip(fields, parts):
            field_codec = field.metadata['wire']
            try:
                values[field.name] = field_codec.decode(part)
            except ValueError as e:
                raise errors.FieldTypeMismatch('%s.%s: %s' % (cls.__name__, field.name, e)) from e

        return cls(**values)


    @classmethod
    def from_wire(cls, value):
        """ Decode a record from a structure :class:`wire.Variant`.
        """

        parts = codec.as_struct(value, len(cls._wired_fields()), cls.__name__)
        return cls.from_fields(parts)


    def to_wire(self):
        """ Encode this record as a structure, fields in declaration order.
        """

        parts = list()

        for field in self._wired_fields():
            field_codec = field.metadata['wire']
            parts.append(field_codec.encode(getattr(self, field.name)))

        return wire.struct(*parts)


    def to_dict(self):
        """ Return a dictionary of JSON-friendly values, keyed by field name.
        """

        result = dict()

        for field in self._wired_fields():
            field_codec = field.metadata['wire']
            result[field.name] = field_codec.dump(getattr(self, field.name))

        return result


    @classmethod
    def from_dict(cls, data):
        """ The inverse of :func:`to_dict`.
        """

        values = dict()

        for field in cls._wired_fields():
            field_codec = field.metadata['wire']
            values[field.name] = field_codec.load(data[field.name])

        return cls(**values)


# end of class Record



@dataclasses.dataclass(frozen=True)
class LabeledPath(Record):
    """ A textual label paired with the object path it names.
    """

    label: str = wired(codec.STRING)
    path: ObjectPath = wired(codec.OBJECT_PATH)


class SeatPath(LabeledPath):
    """ A seat identifier, such as ``seat0``, and the seat object path.
    """


class SessionPath(LabeledPath):
    """ A session identifier and the session object path.
    """


class DbusPath(LabeledPath):
    pass


def labeled_or_none(record_class):
    """ Return a decoder for a labeled path property where logind reports
        "none" as an empty label (with the path ``/``); such values decode
        to None.
    """

    def decode(value):
        record = record_class.from_wire(value)
        if record.label == '':
            return None
        return record

    return decode


@dataclasses.dataclass(frozen=True)
class UserPath(Record):
    uid: int = wired(codec.UINT32)
    path: ObjectPath = wired(codec.OBJECT_PATH)


@dataclasses.dataclass(frozen=True)
class SessionInfo(Record):
    """ One entry returned by :func:`logind.Manager.list_sessions`.
    """

    sid: str = wired(codec.STRING)
    uid: int = wired(codec.UINT32)
    user: str = wired(codec.STRING)
    seat: str = wired(codec.STRING)
    path: ObjectPath = wired(codec.OBJECT_PATH)


@dataclasses.dataclass(frozen=True)
class UserInfo(Record):
    """ One entry returned by :func:`logind.Manager.list_users`.
    """

    uid: int = wired(codec.UINT32)
    name: str = wired(codec.STRING)
    path: ObjectPath = wired(codec.OBJECT_PATH)


@dataclasses.dataclass(frozen=True)
class ScheduledShutdown(Record):
    """ The pending shutdown, if any. The *kind* is a shutdown type token,
        kept as a plain string since logind reports it verbatim; an empty
        *kind* and a zero *time* mean nothing is scheduled, in which case
        the record is falsy.
    """

    kind: str = wired(codec.STRING)
    time: types.TimeStamp = wired(types.TIMESTAMP)

    def __bool__(self):
        return self.kind != '' or self.time != 0


    @property
    def type(self):
        """ The :class:`types.ShutdownType` for :attr:`kind`.
        """

        if self.kind == '':
            return types.ShutdownType.INVALID
        return types.ShutdownType.lookup(self.kind)


@dataclasses.dataclass(frozen=True)
class Inhibitor(Record):
    """ One entry returned by :func:`logind.Manager.list_inhibitors`.
    """

    what: FrozenSet[types.InhibitWhat] = wired(types.InhibitWhat.list_codec())
    who: str = wired(codec.STRING)
    why: str = wired(codec.STRING)
    mode: types.Mode = wired(types.Mode.codec())
    uid: int = wired(codec.UINT32)
    pid: int = wired(codec.UINT32)


@dataclasses.dataclass(frozen=True)
class Device(Record):
    """ The reply to :func:`logind.Session.take_device`. The caller owns
        :attr:`fd` and is responsible for closing it.
    """

    fd: FileDescriptor = wired(FILE_DESCRIPTOR)
    inactive: bool = wired(codec.BOOLEAN)


@dataclasses.dataclass(frozen=True)
class DevicePause(Record):
    """ The payload of the Session PauseDevice signal.
    """

    major: int = wired(codec.UINT32)
    minor: int = wired(codec.UINT32)
    kind: types.PauseType = wired(types.PauseType.codec())


@dataclasses.dataclass(frozen=True)
class DeviceResume(Record):
    """ The payload of the Session ResumeDevice signal. The receiver owns
        :attr:`fd`.
    """

    major: int = wired(codec.UINT32)
    minor: int = wired(codec.UINT32)
    fd: FileDescriptor = wired(FILE_DESCRIPTOR)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
