""" Python bindings for systemd-logind. This includes typed facades for the
    logind manager, seats, sessions, and users, the enumerations and records
    they exchange, and the channel abstraction that carries requests to the
    service.
"""

# Utility components.

from . import errors
from . import json

# Submodules used by multiple other components.

from . import protocol
from . import config
from . import types
from . import records
from . import fd
from . import channel

ObjectPath = protocol.wire.ObjectPath

# Primary public-facing interfaces.

from .manager import Manager
from .seat import Seat
from .session import Session
from .user import User
from .proxy import Subscription

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
