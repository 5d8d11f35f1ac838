""" Enumerations carried on the wire as lowercase, hyphenated string tokens.

    Every enumeration derives from :class:`Token` and defines its members
    with the wire token as the member value, plus an ``INVALID`` member
    whose value is None. Decoding is lenient: a token that matches no member
    decodes to ``INVALID`` rather than raising. Coercing caller-supplied
    input with :func:`Token.parse` is strict, since an unrecognized token
    there is a mistake by the caller, and encoding ``INVALID`` is refused
    outright.
"""

import enum
import logging

from .. import errors
from . import codec
from . import fields
from . import wire


logger = logging.getLogger(__name__)


class Token(enum.Enum):
    """ Base class for string-token enumerations.
    """

    def __str__(self):
        if self.value is None:
            return '<invalid>'
        return self.value


    @property
    def token(self):
        """ The wire token for this member, or None for ``INVALID``.
        """

        return self.value


    @classmethod
    def parse(cls, text):
        """ Strictly convert *text* to a member of this enumeration. Members
            are passed through unchanged; anything else must be a string that
            exactly matches a token once surrounding whitespace is removed.
            Raises :class:`errors.UnrecognizedToken` on no match, and
            :class:`errors.EncodeError` if handed the ``INVALID`` member.
        """

        if isinstance(text, cls):
            if text.value is None:
                raise errors.EncodeError(cls.__name__ + '.INVALID is not a usable value')
            return text

        if not isinstance(text, str):
            raise errors.UnrecognizedToken(cls.__name__, text)

        try:
            return cls(text.strip())
        except ValueError:
            raise errors.UnrecognizedToken(cls.__name__, text) from None


    @classmethod
    def lookup(cls, text):
        """ Leniently convert *text* to a member of this enumeration; an
            unrecognized token yields ``INVALID``.
        """

        try:
            return cls.parse(text)
        except errors.UnrecognizedToken:
            logger.warning("%s: unrecognized token %r, using INVALID", cls.__name__, text)
            return cls.INVALID


    @classmethod
    def decode(cls, value):
        """ Decode a string :class:`wire.Variant` into a member.
        """

        return cls.lookup(codec.as_string(value))


    def encode(self):
        """ Return the wire token for this member.
        """

        if self.value is None:
            raise errors.EncodeError('cannot encode ' + type(self).__name__ + '.INVALID')

        return self.value


    def to_wire(self):
        return wire.string(self.encode())


    @classmethod
    def split(cls, text):
        """ Leniently decode a colon-delimited list of tokens, returning a
            frozenset of members. Empty segments are ignored.
        """

        members = set()

        for segment in text.split(fields.LIST_SEPARATOR):
            segment = segment.strip()
            if segment == '':
                continue
            members.add(cls.lookup(segment))

        return frozenset(members)


    @classmethod
    def coerce(cls, items):
        """ Strictly convert *items* to a frozenset of members. A single
            member, a colon-delimited string, or any iterable mixing members
            and strings are all accepted.
        """

        if isinstance(items, (cls, str)):
            items = (items,)

        members = set()

        for item in items:
            if isinstance(item, str):
                for segment in item.split(fields.LIST_SEPARATOR):
                    if segment.strip() != '':
                        members.add(cls.parse(segment))
            else:
                members.add(cls.parse(item))

        return frozenset(members)


    @classmethod
    def join(cls, members):
        """ Encode a collection of members as a single colon-delimited token
            string, in declaration order. Duplicates are collapsed.
        """

        members = cls.coerce(members)
        ordered = [member.encode() for member in cls if member in members]
        return fields.LIST_SEPARATOR.join(ordered)


    @classmethod
    def codec(cls):
        """ Return a :class:`codec.Codec` for a record field holding a single
            member of this enumeration.
        """

        def load(value):
            if value is None:
                return cls.INVALID
            return cls.lookup(value)

        return codec.Codec(cls.decode, cls.to_wire, lambda member: member.value, load)


    @classmethod
    def list_codec(cls):
        """ Return a :class:`codec.Codec` for a record field holding a set of
            members, flattened into one colon-delimited string on the wire.
        """

        def decode(value):
            return cls.split(codec.as_string(value))

        def encode(members):
            return wire.string(cls.join(members))

        return codec.Codec(decode, encode, cls.describe, cls.split)


    @classmethod
    def describe(cls, members):
        """ Render a set of members as a colon-delimited string without
            refusing ``INVALID``: known tokens come first, in declaration
            order, followed by ``<invalid>`` if an unrecognized token was
            decoded. Loading the result with :func:`split` yields the same
            set. Use :func:`join` for anything sent to logind.
        """

        ordered = [member.value for member in cls if member in members and member.value is not None]

        if cls.INVALID in members:
            ordered.append(str(cls.INVALID))

        return fields.LIST_SEPARATOR.join(ordered)


# end of class Token


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
