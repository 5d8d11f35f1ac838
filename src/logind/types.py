""" Enumerated states and scalar types used by the logind object model. The
    enumeration values are the exact tokens used by systemd-logind on the
    bus; they must not be altered.
"""

import datetime

from .protocol import codec
from .protocol import wire
from .protocol.tokens import Token


class SessionType(Token):
    """ The kind of display a session runs on.
    """

    X11 = 'x11'
    WAYLAND = 'wayland'
    MIR = 'mir'
    TTY = 'tty'
    UNSPECIFIED = 'unspecified'
    INVALID = None


class SessionClass(Token):
    """ What a session is for. Only the first three are guaranteed by older
        versions of systemd.
    """

    USER = 'user'
    GREETER = 'greeter'
    LOCK_SCREEN = 'lock-screen'
    USER_EARLY = 'user-early'
    USER_INCOMPLETE = 'user-incomplete'
    BACKGROUND = 'background'
    BACKGROUND_LIGHT = 'background-light'
    MANAGER = 'manager'
    MANAGER_EARLY = 'manager-early'
    INVALID = None


class SessionState(Token):
    ONLINE = 'online'
    ACTIVE = 'active'
    CLOSING = 'closing'
    INVALID = None


class UserState(Token):
    ONLINE = 'online'
    OFFLINE = 'offline'
    LINGERING = 'lingering'
    ACTIVE = 'active'
    CLOSING = 'closing'
    INVALID = None


class IsSupported(Token):
    """ The answer to any of the Manager ``Can*()`` queries. ``CHALLENGE``
        means the operation is possible after interactive authorization.
    """

    NA = 'na'
    YES = 'yes'
    NO = 'no'
    CHALLENGE = 'challenge'
    INVALID = None


class InhibitWhat(Token):
    """ A category of system transition an inhibitor lock can block. On the
        wire several categories are joined with colons into one string; see
        :func:`Token.split` and :func:`Token.join`.
    """

    SHUTDOWN = 'shutdown'
    SLEEP = 'sleep'
    IDLE = 'idle'
    HANDLE_POWER_KEY = 'handle-power-key'
    HANDLE_SUSPEND_KEY = 'handle-suspend-key'
    HANDLE_HIBERNATE_KEY = 'handle-hibernate-key'
    HANDLE_LID_SWITCH = 'handle-lid-switch'
    HANDLE_REBOOT_KEY = 'handle-reboot-key'
    INVALID = None


class Mode(Token):
    """ How an inhibitor lock behaves.
    """

    BLOCK = 'block'     # The transition is refused while the lock is held.
    DELAY = 'delay'     # The transition waits, up to InhibitDelayMaxUSec.
    BLOCK_WEAK = 'block-weak'
    INVALID = None


class ShutdownType(Token):
    POWER_OFF = 'poweroff'
    DRY_POWER_OFF = 'dry-poweroff'
    REBOOT = 'reboot'
    DRY_REBOOT = 'dry-reboot'
    HALT = 'halt'
    DRY_HALT = 'dry-halt'
    INVALID = None


class HandleAction(Token):
    """ The configured reaction to a key press, lid switch, or idle timeout.
    """

    IGNORE = 'ignore'
    POWER_OFF = 'poweroff'
    REBOOT = 'reboot'
    HALT = 'halt'
    KEXEC = 'kexec'
    SUSPEND = 'suspend'
    HIBERNATE = 'hibernate'
    HYBRID_SLEEP = 'hybrid-sleep'
    SUSPEND_THEN_HIBERNATE = 'suspend-then-hibernate'
    LOCK = 'lock'
    FACTORY_RESET = 'factory-reset'
    INVALID = None


class PauseType(Token):
    """ The reason given in a Session PauseDevice signal.
    """

    PAUSE = 'pause'
    FORCE = 'force'
    GONE = 'gone'
    INVALID = None


class KillWho(Token):
    """ Which processes of a session receive a signal.
    """

    LEADER = 'leader'
    ALL = 'all'
    INVALID = None


class TimeStamp(int):
    """ A count of microseconds, as logind reports timestamps and timeouts.
        This is an integer, so the exact value is never lost; :attr:`delta`
        provides the :class:`datetime.timedelta` equivalent. Zero is the
        conventional "not set" value, and is falsy.
    """

    maximum = wire.ranges[wire.UINT64][1]

    def __new__(cls, microseconds=0):

        microseconds = int(microseconds)
        if microseconds < 0 or microseconds > cls.maximum:
            raise ValueError('timestamp out of range: %d' % (microseconds))

        return int.__new__(cls, microseconds)


    def __repr__(self):
        return 'TimeStamp(%d)' % (self)


    @property
    def microseconds(self):
        return int(self)


    @property
    def seconds(self):
        return self / 1000000


    @property
    def delta(self):
        return datetime.timedelta(microseconds=int(self))


    def as_datetime(self):
        """ Interpret this value as microseconds since the UNIX epoch and
            return the corresponding timezone-aware UTC datetime. Returns None
            for the "not set" value; raises :class:`OverflowError` for values
            past the end of year 9999, which :class:`datetime.datetime`
            cannot represent.
        """

        if self == 0:
            return None

        epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
        return epoch + self.delta


    @classmethod
    def coerce(cls, value):
        """ Accept an integer count of microseconds, a
            :class:`datetime.timedelta`, or a timezone-aware
            :class:`datetime.datetime` (converted to microseconds since the
            UNIX epoch).
        """

        if isinstance(value, cls):
            return value

        if isinstance(value, datetime.timedelta):
            return cls(value // datetime.timedelta(microseconds=1))

        if isinstance(value, datetime.datetime):
            if value.tzinfo is None:
                raise ValueError('datetime must be timezone-aware')
            epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
            return cls((value - epoch) // datetime.timedelta(microseconds=1))

        return cls(value)


    @classmethod
    def decode(cls, value):
        return cls(codec.as_uint64(value))


    def to_wire(self):
        return wire.uint64(int(self))


# end of class TimeStamp


TIMESTAMP = codec.Codec(TimeStamp.decode, TimeStamp.to_wire, int, TimeStamp)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
