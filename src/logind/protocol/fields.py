"""Canonical bus names.

Keep these in one place to avoid stringly-typed handling of the service,
its interfaces, and its object paths.
"""

SERVICE = "org.freedesktop.login1"
MANAGER_PATH = "/org/freedesktop/login1"
INTERFACE_PREFIX = "org.freedesktop.login1"

PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"

# Interface suffixes, one per object category.
MANAGER = "Manager"
SEAT = "Seat"
SESSION = "Session"
USER = "User"

# Separator for list-valued string fields, such as inhibitor categories.
LIST_SEPARATOR = ":"
