from . import fields
from . import wire
from . import codec
from . import tokens


"""
logind Wire-Value Layer
=======================

This package defines how values cross the channel boundary: the tagged
wire value, the extraction of typed Python values from it, and the string
token enumerations. It is pure; nothing here performs I/O.

The wire-value layer MUST NOT depend on any channel implementation
(e.g. dbus-python, or an in-memory test double).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Facades (manager.py, seat.py, session.py, user.py)
    │
    ▼
Domain Catalog (types.py, records.py, fd.py)
    Enumerations, timestamps, immutable records, descriptor leases
    - decode from wire values
    - encode back in the same positional order

    │
    ▼
Token Enumerations (tokens.py)
    String-backed enums with an INVALID sentinel
    - lenient decode, strict parse
    - colon-delimited lists

    │
    ▼
Extractors (codec.py)
    Kind-checked access to wire values
    - as_string(), as_uint32(), as_struct(), ...
    - Codec tuples for record fields

    │
    ▼
Wire Values (wire.py)
    Immutable tagged values
    - Variant
    - ObjectPath
    - range-checked constructors

    │
    ▼
Field Vocabulary (fields.py)
    Canonical service, interface and path names

---------------------------------------------------------------------

Below the Wire-Value Layer (for context)
----------------------------------------

Channel Layer
    Moves wire values to and from the remote object
    - call()
    - get_property() / set_property()
    - subscribe()

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
