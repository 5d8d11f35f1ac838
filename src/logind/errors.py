""" Exceptions raised by the logind bindings. Everything raised deliberately
    by this package derives from :class:`LogindError`; the decode and encode
    failures additionally derive from :class:`ValueError`, since they are
    complaints about a value rather than about the bus.
"""


class LogindError(Exception):
    """ Base class for all errors raised by this package.
    """


class DecodeError(LogindError, ValueError):
    """ A wire value could not be turned into the requested domain type.
    """


class UnrecognizedToken(DecodeError):
    """ A string token did not match any member of a strict enumeration.
    """

    def __init__(self, enumeration, token):
        self.enumeration = enumeration
        self.token = token
        DecodeError.__init__(self, '%s: unrecognized token %r' % (enumeration, token))


class ArityMismatch(DecodeError):
    """ A structure arrived with the wrong number of fields.
    """

    def __init__(self, name, expected, received):
        self.name = name
        self.expected = expected
        self.received = received
        text = '%s: expected %d fields, received %d' % (name, expected, received)
        DecodeError.__init__(self, text)


class FieldTypeMismatch(DecodeError):
    """ A wire value, or one field of a structure, had the wrong kind.
    """


class EncodeError(LogindError, ValueError):
    """ A value cannot be put on the wire; for example, the INVALID member
        of an enumeration, or an integer outside the range of its wire type.
    """


class InvalidPath(LogindError, ValueError):
    """ A string is not a syntactically valid object path.
    """


class ChannelError(LogindError):
    """ The channel, or the remote service behind it, reported a failure.
        The *name* is the bus error name when one is known, for example
        ``org.freedesktop.DBus.Error.AccessDenied``.
    """

    def __init__(self, message='', name=None):
        self.name = name
        LogindError.__init__(self, message)


    @classmethod
    def from_name(cls, name, message=''):
        """ Return an instance of the most specific :class:`ChannelError`
            subclass for the bus error *name*.
        """

        for subclass in (MethodNotFound, PermissionDenied, MalformedReply, ChannelClosed):
            if name in subclass.names:
                return subclass(message, name)

        return cls(message, name)


class MethodNotFound(ChannelError):
    """ The remote object does not have the requested method or property.
    """

    names = frozenset((
        'org.freedesktop.DBus.Error.UnknownMethod',
        'org.freedesktop.DBus.Error.UnknownObject',
        'org.freedesktop.DBus.Error.UnknownInterface',
        'org.freedesktop.DBus.Error.UnknownProperty',
    ))


class PermissionDenied(ChannelError):
    """ The caller is not allowed to perform the operation.
    """

    names = frozenset((
        'org.freedesktop.DBus.Error.AccessDenied',
        'org.freedesktop.DBus.Error.AuthFailed',
        'org.freedesktop.DBus.Error.InteractiveAuthorizationRequired',
        'org.freedesktop.DBus.Error.PropertyReadOnly',
    ))


class MalformedReply(ChannelError):
    """ The reply did not have the shape the caller expected.
    """

    names = frozenset((
        'org.freedesktop.DBus.Error.InvalidSignature',
        'org.freedesktop.DBus.Error.InconsistentMessage',
    ))


class ChannelClosed(ChannelError):
    """ The channel is gone, or the service is no longer on the bus.
    """

    names = frozenset((
        'org.freedesktop.DBus.Error.Disconnected',
        'org.freedesktop.DBus.Error.NoReply',
        'org.freedesktop.DBus.Error.ServiceUnknown',
        'org.freedesktop.DBus.Error.NameHasNoOwner',
    ))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
