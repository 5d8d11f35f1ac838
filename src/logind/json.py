""" Wrapper around :mod:`orjson` that knows how to serialize the values this
    package hands back. As with :func:`orjson.dumps`, :func:`dumps` returns
    bytes.
"""

import orjson

from .fd import FileDescriptor
from .protocol.tokens import Token


_options = orjson.OPT_PASSTHROUGH_DATACLASS | orjson.OPT_SORT_KEYS


def _default(value):

    to_dict = getattr(value, 'to_dict', None)
    if to_dict is not None:
        return to_dict()

    if isinstance(value, (frozenset, set)):
        members = list(value)
        if all(isinstance(member, Token) for member in members):
            return sorted(member.value for member in members if member.value is not None)
        return sorted(members)

    if isinstance(value, FileDescriptor):
        if value.closed:
            return None
        return value.fileno()

    raise TypeError('cannot serialize ' + type(value).__name__)


def dumps(value, option=0):
    """ Serialize *value*; records are rendered with their ``to_dict()``
        method, enumeration members as their wire token, and timestamps as
        integer microseconds.
    """

    return orjson.dumps(value, default=_default, option=_options | option)


loads = orjson.loads


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
