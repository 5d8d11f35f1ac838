""" Extraction of Python values from :class:`wire.Variant` instances. Each
    ``as_*`` function checks the kind of the wire value before handing back
    its contents, raising :class:`errors.FieldTypeMismatch` when the kind is
    wrong; nested variants are unwrapped along the way.

    The :class:`Codec` tuples at the bottom of this module bundle the four
    directions a record field needs: decode from the wire, encode to the
    wire, dump to a JSON-friendly value, and load from one.
"""

from __future__ import annotations

from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from .. import errors
from . import wire


def _unwrap(value):

    if not isinstance(value, wire.Variant):
        raise errors.FieldTypeMismatch('expected a wire value, received ' + type(value).__name__)

    while value.kind == wire.VARIANT:
        value = value.value

    return value


def _expect(value, kinds, description):

    value = _unwrap(value)

    if value.kind not in kinds:
        raise errors.FieldTypeMismatch('expected %s, received wire kind %r' % (description, value.kind))

    return value.value


def _as_integer(value, kind):

    number = _expect(value, wire.integers, 'an integer')
    minimum, maximum = wire.ranges[kind]

    if number < minimum or number > maximum:
        raise errors.FieldTypeMismatch('%d does not fit wire kind %r' % (number, kind))

    return number


def as_string(value: wire.Variant) -> str:
    return _expect(value, (wire.STRING, wire.SIGNATURE), 'a string')


def as_optional_string(value: wire.Variant) -> Optional[str]:
    """ An empty string on the wire means "not set"; return None for it.
    """

    text = as_string(value)
    if text == '':
        return None
    return text


def as_object_path(value: wire.Variant) -> wire.ObjectPath:

    path = _expect(value, (wire.OBJECT_PATH,), 'an object path')

    try:
        return wire.ObjectPath(path)
    except errors.InvalidPath as e:
        raise errors.FieldTypeMismatch(str(e)) from e


def as_bool(value: wire.Variant) -> bool:
    return _expect(value, (wire.BOOLEAN,), 'a boolean')


def as_int32(value: wire.Variant) -> int:
    return _as_integer(value, wire.INT32)


def as_uint32(value: wire.Variant) -> int:
    return _as_integer(value, wire.UINT32)


def as_uint64(value: wire.Variant) -> int:
    return _as_integer(value, wire.UINT64)


def as_double(value: wire.Variant) -> float:
    return float(_expect(value, (wire.DOUBLE,), 'a double'))


def as_fd(value: wire.Variant) -> int:

    fd = _expect(value, (wire.UNIX_FD,), 'a file descriptor')

    if isinstance(fd, bool) or not isinstance(fd, int) or fd < 0:
        raise errors.FieldTypeMismatch('invalid file descriptor: %r' % (fd,))

    return fd


def as_struct(value: wire.Variant, arity: int, name: str = 'struct') -> Tuple[wire.Variant, ...]:
    """ Return the fields of a structure, which must have exactly *arity*
        fields. The *name* is only used to make error messages useful.
    """

    fields = _expect(value, (wire.STRUCT,), 'a structure for ' + name)

    if len(fields) != arity:
        raise errors.ArityMismatch(name, arity, len(fields))

    return fields


def as_array(value: wire.Variant, item: Optional[Callable[[wire.Variant], Any]] = None) -> List[Any]:
    """ Return the contents of an array, with each element passed through
        the *item* decoder if one is provided.
    """

    items = _expect(value, (wire.ARRAY,), 'an array')

    if item is None:
        return list(items)

    return [item(element) for element in items]


def as_string_list(value: wire.Variant) -> List[str]:
    return as_array(value, as_string)


class Codec(NamedTuple):
    """ The per-field conversion rules for a record field.
    """

    decode: Callable[[wire.Variant], Any]
    encode: Callable[[Any], wire.Variant]
    dump: Callable[[Any], Any]
    load: Callable[[Any], Any]


def _same(value):
    return value


STRING = Codec(as_string, wire.string, _same, str)
OBJECT_PATH = Codec(as_object_path, wire.object_path, str, wire.ObjectPath)
BOOLEAN = Codec(as_bool, wire.boolean, _same, bool)
INT32 = Codec(as_int32, wire.int32, _same, int)
UINT32 = Codec(as_uint32, wire.uint32, _same, int)
UINT64 = Codec(as_uint64, wire.uint64, _same, int)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
