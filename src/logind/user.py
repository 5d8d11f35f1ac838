""" The :class:`User` facade for ``org.freedesktop.login1.User``.
"""

from . import records
from . import types
from .protocol import codec
from .protocol import fields
from .proxy import Proxy, array_of, reader


class User(Proxy):
    """ Facade for one user known to logind. The path is usually taken from
        :func:`logind.Manager.list_users` or :func:`logind.Manager.get_user`.
    """

    interface = fields.USER

    def kill(self, signal_number):
        return self._call('Kill', 'i', signal_number)


    def terminate(self):
        return self._call('Terminate')


    display = reader('Display', records.labeled_or_none(records.SessionPath))
    gid = reader('GID', codec.as_uint32)
    idle_hint = reader('IdleHint', codec.as_bool)
    idle_since_hint = reader('IdleSinceHint', types.TimeStamp.decode)
    idle_since_hint_monotonic = reader('IdleSinceHintMonotonic', types.TimeStamp.decode)
    linger = reader('Linger', codec.as_bool)
    name = reader('Name', codec.as_string)
    runtime_path = reader('RuntimePath', codec.as_string)
    service = reader('Service', codec.as_string)
    sessions = reader('Sessions', array_of(records.SessionPath.from_wire))
    slice = reader('Slice', codec.as_string)
    state = reader('State', types.UserState.decode)
    timestamp = reader('Timestamp', types.TimeStamp.decode)
    timestamp_monotonic = reader('TimestampMonotonic', types.TimeStamp.decode)
    uid = reader('UID', codec.as_uint32)


# end of class User


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
