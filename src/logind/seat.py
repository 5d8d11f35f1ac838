""" The :class:`Seat` facade for ``org.freedesktop.login1.Seat``.
"""

from . import records
from . import types
from .protocol import codec
from .protocol import fields
from .proxy import Proxy, array_of, reader


class Seat(Proxy):
    """ Facade for one seat: a set of display, input and sound devices used
        together by one person at a time. The path is usually taken from
        :func:`logind.Manager.list_seats` or :func:`logind.Manager.get_seat`.
    """

    interface = fields.SEAT

    def activate_session(self, session_id):
        return self._call('ActivateSession', 's', session_id)


    def switch_to(self, vtnr):
        """ Switch to the session on virtual terminal *vtnr*.
        """

        return self._call('SwitchTo', 'u', vtnr)


    def switch_to_next(self):
        return self._call('SwitchToNext')


    def switch_to_previous(self):
        return self._call('SwitchToPrevious')


    def terminate(self):
        return self._call('Terminate')


    active_session = reader('ActiveSession', records.labeled_or_none(records.SessionPath))
    can_graphical = reader('CanGraphical', codec.as_bool)
    can_tty = reader('CanTTY', codec.as_bool)
    id = reader('Id', codec.as_string)
    idle_hint = reader('IdleHint', codec.as_bool)
    idle_since_hint = reader('IdleSinceHint', types.TimeStamp.decode)
    idle_since_hint_monotonic = reader('IdleSinceHintMonotonic', types.TimeStamp.decode)
    sessions = reader('Sessions', array_of(records.SessionPath.from_wire))


# end of class Seat


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
