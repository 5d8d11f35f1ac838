""" The tagged value representation used between the facades and a channel.
    Every argument and every reply is a :class:`Variant`: a bus signature
    code identifying what kind of value it is, and the Python value itself.
    Structures and arrays hold tuples of further :class:`Variant` instances.

    The helper functions named after each kind (:func:`string`,
    :func:`uint32`, :func:`struct`, and so on) are the only sanctioned way
    to build a :class:`Variant`; they check that the Python value is
    representable on the wire, raising :class:`errors.EncodeError` if it is
    not.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Any, Iterable, List, Sequence

from .. import errors


STRING = 's'
OBJECT_PATH = 'o'
SIGNATURE = 'g'
BOOLEAN = 'b'
BYTE = 'y'
INT16 = 'n'
UINT16 = 'q'
INT32 = 'i'
UINT32 = 'u'
INT64 = 'x'
UINT64 = 't'
DOUBLE = 'd'
UNIX_FD = 'h'
STRUCT = '('
ARRAY = 'a'
VARIANT = 'v'

ranges = {
    BYTE:   (0, 0xFF),
    INT16:  (-0x8000, 0x7FFF),
    UINT16: (0, 0xFFFF),
    INT32:  (-0x80000000, 0x7FFFFFFF),
    UINT32: (0, 0xFFFFFFFF),
    INT64:  (-0x8000000000000000, 0x7FFFFFFFFFFFFFFF),
    UINT64: (0, 0xFFFFFFFFFFFFFFFF),
    UNIX_FD: (0, 0x7FFFFFFF),
}

integers = frozenset((BYTE, INT16, UINT16, INT32, UINT32, INT64, UINT64))
kinds = frozenset((STRING, OBJECT_PATH, SIGNATURE, BOOLEAN, DOUBLE,
                   UNIX_FD, STRUCT, ARRAY, VARIANT)) | integers


class ObjectPath(str):
    """ An opaque handle into the bus namespace. This is a string, and
        compares equal to the equivalent string; construction rejects
        anything that is not valid object path syntax.
    """

    syntax = re.compile(r'/|(/[A-Za-z0-9_]+)+')

    def __new__(cls, path):

        if isinstance(path, ObjectPath):
            return path

        if not isinstance(path, str):
            raise errors.InvalidPath('object path must be a string, not ' + type(path).__name__)

        if cls.syntax.fullmatch(path) is None:
            raise errors.InvalidPath('invalid object path: ' + repr(path))

        return str.__new__(cls, path)


    def __repr__(self):
        return 'ObjectPath(%s)' % (str.__repr__(self))


# end of class ObjectPath



@dataclasses.dataclass(frozen=True)
class Variant:
    """ One tagged wire value. The *kind* is a single bus signature code;
        the *value* is the Python representation appropriate for that kind.
    """

    kind: str
    value: Any

    def __post_init__(self):
        if self.kind not in kinds:
            raise ValueError('unknown wire kind: ' + repr(self.kind))


    def __repr__(self):
        return 'Variant(%r, %r)' % (self.kind, self.value)


# end of class Variant



def _integer(kind, value):

    if isinstance(value, bool) or not isinstance(value, int):
        raise errors.EncodeError('%s requires an integer, not %s' % (kind, type(value).__name__))

    minimum, maximum = ranges[kind]
    if value < minimum or value > maximum:
        raise errors.EncodeError('%d is out of range for wire kind %r' % (value, kind))

    return Variant(kind, int(value))


def string(value: str) -> Variant:
    if not isinstance(value, str):
        raise errors.EncodeError('string requires str, not ' + type(value).__name__)
    return Variant(STRING, str(value))


def object_path(value) -> Variant:
    return Variant(OBJECT_PATH, ObjectPath(value))


def signature(value: str) -> Variant:
    split_signature(value)
    return Variant(SIGNATURE, value)


def boolean(value: bool) -> Variant:
    if not isinstance(value, bool):
        raise errors.EncodeError('boolean requires bool, not ' + type(value).__name__)
    return Variant(BOOLEAN, value)


def byte(value: int) -> Variant:
    return _integer(BYTE, value)


def int16(value: int) -> Variant:
    return _integer(INT16, value)


def uint16(value: int) -> Variant:
    return _integer(UINT16, value)


def int32(value: int) -> Variant:
    return _integer(INT32, value)


def uint32(value: int) -> Variant:
    return _integer(UINT32, value)


def int64(value: int) -> Variant:
    return _integer(INT64, value)


def uint64(value: int) -> Variant:
    return _integer(UINT64, value)


def double(value: float) -> Variant:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise errors.EncodeError('double requires a number, not ' + type(value).__name__)
    return Variant(DOUBLE, float(value))


def unix_fd(value: int) -> Variant:
    """ Wrap a file descriptor number. Objects with a fileno() method, such
        as :class:`logind.fd.FileDescriptor`, are accepted as well.
    """

    fileno = getattr(value, 'fileno', None)
    if fileno is not None:
        value = fileno()

    return _integer(UNIX_FD, value)


def struct(*fields: Variant) -> Variant:
    for field in fields:
        if not isinstance(field, Variant):
            raise errors.EncodeError('struct fields must be Variant instances, not ' + type(field).__name__)
    return Variant(STRUCT, tuple(fields))


def array(items: Iterable[Variant]) -> Variant:
    items = tuple(items)
    for item in items:
        if not isinstance(item, Variant):
            raise errors.EncodeError('array items must be Variant instances, not ' + type(item).__name__)
    return Variant(ARRAY, items)


def variant(inner: Variant) -> Variant:
    if not isinstance(inner, Variant):
        raise errors.EncodeError('variant must wrap a Variant, not ' + type(inner).__name__)
    return Variant(VARIANT, inner)


constructors = {
    STRING: string,
    OBJECT_PATH: object_path,
    SIGNATURE: signature,
    BOOLEAN: boolean,
    BYTE: byte,
    INT16: int16,
    UINT16: uint16,
    INT32: int32,
    UINT32: uint32,
    INT64: int64,
    UINT64: uint64,
    DOUBLE: double,
    UNIX_FD: unix_fd,
}


def split_signature(text: str) -> List[str]:
    """ Split a bus signature into its complete types; for example,
        ``'s(so)a(uso)b'`` becomes ``['s', '(so)', 'a(uso)', 'b']``.
    """

    result = list()
    index = 0

    while index < len(text):
        end = _complete_type(text, index)
        result.append(text[index:end])
        index = end

    return result


def _complete_type(text, index):
    """ Return the index one past the end of the complete type starting at
        *index* within the signature *text*.
    """

    try:
        code = text[index]
    except IndexError:
        raise errors.EncodeError('truncated signature: ' + repr(text)) from None

    if code == ARRAY:
        return _complete_type(text, index + 1)

    if code == STRUCT or code == '{':
        closing = ')' if code == STRUCT else '}'
        index += 1
        while index < len(text) and text[index] != closing:
            index = _complete_type(text, index)
        if index >= len(text):
            raise errors.EncodeError('unbalanced signature: ' + repr(text))
        return index + 1

    if code in kinds:
        return index + 1

    raise errors.EncodeError('invalid signature code %r in %r' % (code, text))


def pack(kind: str, value: Any) -> Variant:
    """ Convert the Python *value* to a :class:`Variant` of the complete
        type *kind*. Values that already know how to put themselves on the
        wire (anything with a ``to_wire()`` method, such as enumeration
        members and records) are asked to do so; tuples are packed as
        structures, iterables as arrays.
    """

    if isinstance(value, Variant):
        return value

    to_wire = getattr(value, 'to_wire', None)
    if to_wire is not None:
        return to_wire()

    code = kind[0]

    if code == STRUCT:
        inner = split_signature(kind[1:-1])
        value = tuple(value)
        if len(inner) != len(value):
            raise errors.EncodeError('%s requires %d fields, received %d' % (kind, len(inner), len(value)))
        return struct(*(pack(sub, field) for sub, field in zip(inner, value)))

    if code == ARRAY:
        return array(pack(kind[1:], item) for item in value)

    try:
        constructor = constructors[code]
    except KeyError:
        raise errors.EncodeError('cannot pack a bare Python value as ' + repr(kind)) from None

    return constructor(value)


def pack_all(signature: str, values: Sequence[Any]) -> List[Variant]:
    """ Pack a sequence of method arguments according to *signature*.
    """

    types = split_signature(signature)

    if len(types) != len(values):
        raise errors.EncodeError('signature %r requires %d arguments, received %d' % (signature, len(types), len(values)))

    return [pack(kind, value) for kind, value in zip(types, values)]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
