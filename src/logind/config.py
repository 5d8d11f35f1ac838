""" Where the logind service lives on the bus. The defaults are the names
    systemd-logind registers; they can be overridden for a relocated or mock
    service, either explicitly or through the ``LOGIND_SERVICE`` and
    ``LOGIND_PATH`` environment variables.
"""

import dataclasses
import os

from .protocol import fields
from .protocol.wire import ObjectPath


@dataclasses.dataclass(frozen=True)
class Destination:
    """ The bus name, manager object path, and interface prefix used by the
        facades. Instances are immutable; make a new one to point elsewhere.
    """

    service: str = fields.SERVICE
    manager_path: ObjectPath = ObjectPath(fields.MANAGER_PATH)
    interface_prefix: str = fields.INTERFACE_PREFIX

    def __post_init__(self):
        object.__setattr__(self, 'manager_path', ObjectPath(self.manager_path))


    def interface(self, name):
        """ Return the full interface name for the object category *name*;
            for example, ``Session`` becomes ``org.freedesktop.login1.Session``.
        """

        return self.interface_prefix + '.' + name


# end of class Destination



def from_environment(environ=None):
    """ Return a :class:`Destination` honoring the ``LOGIND_SERVICE`` and
        ``LOGIND_PATH`` environment variables. The interface prefix always
        follows the service name, since logind names its interfaces after
        itself.
    """

    if environ is None:
        environ = os.environ

    service = environ.get('LOGIND_SERVICE', '').strip()
    path = environ.get('LOGIND_PATH', '').strip()

    if service == '':
        service = fields.SERVICE
    if path == '':
        path = fields.MANAGER_PATH

    return Destination(service, ObjectPath(path), service)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
