""" Owned file descriptors. Some replies from logind hand back a descriptor
    whose lifetime is meaningful on the remote side: an inhibitor lock is
    held for exactly as long as its descriptor stays open. A
    :class:`FileDescriptor` is the exclusive owner of such a descriptor.
"""

import contextlib
import os
import warnings
import weakref


def _leaked(fd, description):
    """ Finalizer for a descriptor that was never explicitly closed.
    """

    warnings.warn('unclosed ' + description, ResourceWarning, stacklevel=2)

    # The descriptor number may already have been recycled by the time the
    # garbage collector gets here; nothing useful can be done about it.
    with contextlib.suppress(OSError):
        os.close(fd)


class FileDescriptor:
    """ Exclusive ownership of the file descriptor *fd*. The descriptor is
        closed by :func:`close`, by leaving a ``with`` block, or, as a last
        resort, when the object is garbage collected (which also emits a
        :class:`ResourceWarning`).

        :ivar closed: True once the descriptor has been closed or detached.
    """

    def __init__(self, fd):

        fd = int(fd)
        if fd < 0:
            raise ValueError('invalid file descriptor: %d' % (fd))

        self._fd = fd
        self._finalizer = weakref.finalize(self, _leaked, fd, self._describe(fd))


    def _describe(self, fd):
        return '%s fd=%d' % (type(self).__name__, fd)


    def __repr__(self):
        if self.closed:
            return '<%s closed>' % (type(self).__name__)
        return '<%s fd=%d>' % (type(self).__name__, self._fd)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    @property
    def closed(self):
        return self._fd < 0


    def fileno(self):
        """ Return the descriptor number. Raises :class:`ValueError` if the
            descriptor has already been closed.
        """

        if self._fd < 0:
            raise ValueError('operation on closed ' + type(self).__name__)

        return self._fd


    def close(self):
        """ Close the descriptor. Closing twice is harmless.
        """

        if self._fd < 0:
            return

        fd = self._fd
        self._fd = -1
        self._finalizer.detach()
        os.close(fd)


    def detach(self):
        """ Give up ownership without closing; the caller becomes responsible
            for the returned descriptor number.
        """

        fd = self.fileno()
        self._fd = -1
        self._finalizer.detach()
        return fd


# end of class FileDescriptor



class InhibitLock(FileDescriptor):
    """ An inhibitor lock returned by :func:`logind.Manager.inhibit`. The
        lock is held by logind for as long as the descriptor is open; call
        :func:`release` (or use the lock as a context manager) to let the
        inhibited operations proceed.

        :ivar what: The frozenset of :class:`logind.types.InhibitWhat` held.
        :ivar who: The human-readable name of the lock holder.
        :ivar why: The human-readable reason for the lock.
        :ivar mode: The :class:`logind.types.Mode` of the lock.
    """

    def __init__(self, fd, what, who, why, mode):

        FileDescriptor.__init__(self, fd)
        self.what = what
        self.who = who
        self.why = why
        self.mode = mode


    def __repr__(self):
        tokens = ':'.join(sorted(member.value for member in self.what))
        state = 'released' if self.closed else 'held'
        return '<InhibitLock %s %s by %r: %s>' % (self.mode.value, tokens, self.who, state)


    @property
    def held(self):
        return not self.closed


    release = FileDescriptor.close


# end of class InhibitLock


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
