""" The :class:`Session` facade for ``org.freedesktop.login1.Session``.

    A session is one login: a graphical desktop, a text console, an SSH
    connection, and so on. A display server running on behalf of a session
    can use :func:`Session.take_control` and :func:`Session.take_device` to
    obtain access to input and graphics devices without elevated privileges.
"""

from . import records
from . import types
from .protocol import codec
from .protocol import fields
from .proxy import Proxy, no_arguments, reader, signal


class Session(Proxy):
    """ Facade for one session. The path is usually taken from
        :func:`logind.Manager.list_sessions`, whose records can be passed
        directly as the *path*.
    """

    interface = fields.SESSION

    def activate(self):
        return self._call('Activate')


    def kill(self, who, signal_number):
        """ Send *signal_number* to the session leader or to every process
            in the session, as selected by *who* (a :class:`types.KillWho`
            member or token).
        """

        who = types.KillWho.parse(who)
        return self._call('Kill', 'si', who, signal_number)


    def lock(self):
        return self._call('Lock')


    def unlock(self):
        return self._call('Unlock')


    def terminate(self):
        return self._call('Terminate')


    def set_idle_hint(self, idle):
        return self._call('SetIdleHint', 'b', idle)


    def set_locked_hint(self, locked):
        return self._call('SetLockedHint', 'b', locked)


    def set_type(self, kind):
        return self._call('SetType', 's', types.SessionType.parse(kind))


    def set_brightness(self, subsystem, name, brightness):
        """ Set the brightness of a backlight or LED device, for example
            ``set_brightness('backlight', 'intel_backlight', 400)``.
        """

        return self._call('SetBrightness', 'ssu', subsystem, name, brightness)


    def take_control(self, force=False):
        return self._call('TakeControl', 'b', force)


    def release_control(self):
        return self._call('ReleaseControl')


    def take_device(self, major, minor):
        """ Open the device node *major*:*minor* on behalf of the session
            controller. Returns a :class:`records.Device`; the caller owns
            its descriptor.
        """

        return self._call('TakeDevice', 'uu', major, minor, decode=records.Device.from_fields)


    def release_device(self, major, minor):
        return self._call('ReleaseDevice', 'uu', major, minor)


    def pause_device_complete(self, major, minor):
        return self._call('PauseDeviceComplete', 'uu', major, minor)


    active = reader('Active', codec.as_bool)
    audit = reader('Audit', codec.as_uint32)
    class_ = reader('Class', types.SessionClass.decode)
    desktop = reader('Desktop', codec.as_string)
    display = reader('Display', codec.as_string)
    id = reader('Id', codec.as_string)
    idle_hint = reader('IdleHint', codec.as_bool)
    idle_since_hint = reader('IdleSinceHint', types.TimeStamp.decode)
    idle_since_hint_monotonic = reader('IdleSinceHintMonotonic', types.TimeStamp.decode)
    leader = reader('Leader', codec.as_uint32)
    locked_hint = reader('LockedHint', codec.as_bool)
    name = reader('Name', codec.as_string)
    remote = reader('Remote', codec.as_bool)
    remote_host = reader('RemoteHost', codec.as_optional_string)
    remote_user = reader('RemoteUser', codec.as_optional_string)
    scope = reader('Scope', codec.as_string)
    seat = reader('Seat', records.labeled_or_none(records.SeatPath))
    service = reader('Service', codec.as_string)
    state = reader('State', types.SessionState.decode)
    timestamp = reader('Timestamp', types.TimeStamp.decode)
    timestamp_monotonic = reader('TimestampMonotonic', types.TimeStamp.decode)
    tty = reader('TTY', codec.as_optional_string)
    type = reader('Type', types.SessionType.decode)
    user = reader('User', records.UserPath.from_wire)
    vtnr = reader('VTNr', codec.as_uint32)

    receive_lock = signal('Lock', no_arguments)
    receive_unlock = signal('Unlock', no_arguments)
    receive_pause_device = signal('PauseDevice', records.DevicePause.from_fields)
    receive_resume_device = signal('ResumeDevice', records.DeviceResume.from_fields)


# end of class Session


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
