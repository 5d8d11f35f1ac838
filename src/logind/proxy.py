""" The machinery shared by the :class:`logind.Manager`, :class:`logind.Seat`,
    :class:`logind.Session`, and :class:`logind.User` facades.

    A :class:`Proxy` binds a channel to one remote object. Every remote
    operation is a single round trip: the arguments are packed into wire
    values, handed to the channel, and the reply is decoded into the domain
    type. If the channel returns an awaitable instead of a reply the facade
    method returns a coroutine instead of a value, so the same facade serves
    blocking and asyncio callers alike.
"""

import inspect
import logging
import queue
import threading

from . import config
from . import errors
from .protocol import codec
from .protocol import wire
from .protocol.wire import ObjectPath


logger = logging.getLogger(__name__)

_stop = object()


def nothing(reply):
    """ Decoder for methods with no return value.
    """

    return None


def single(decode):
    """ Return a decoder for a reply carrying exactly one value, which is
        passed through *decode*.
    """

    def unpack(reply):
        if len(reply) != 1:
            raise errors.ArityMismatch('reply', 1, len(reply))
        return decode(reply[0])

    return unpack


def array_of(decode):
    """ Return a decoder for an array whose elements are passed through
        *decode*.
    """

    def unpack(value):
        return codec.as_array(value, decode)

    return unpack


def reader(name, decode, doc=None):
    """ Build a facade method that reads the remote property *name* and
        passes the value through *decode*.
    """

    def read(self):
        return self._get(name, decode)

    read.remote_name = name
    if doc is None:
        doc = ' Read the ``%s`` property.\n' % (name)
    read.__doc__ = doc
    return read


def signal(name, decode, doc=None):
    """ Build a facade method that subscribes to the remote signal *name*;
        each emission's arguments are passed through *decode*, which receives
        the full list of wire values.
    """

    def receive(self, callback=None):
        return self.subscribe(name, decode, callback)

    receive.remote_name = name
    if doc is None:
        doc = ' Subscribe to the ``%s`` signal; see :class:`Subscription`.\n' % (name)
    receive.__doc__ = doc
    return receive


def no_arguments(args):
    if len(args) != 0:
        raise errors.ArityMismatch('signal', 0, len(args))
    return None


class Subscription:
    """ One subscription to a remote signal. If a *callback* was provided it
        is invoked with each decoded payload, in emission order; otherwise
        payloads are queued, and can be retrieved with :func:`next` or by
        iterating over the subscription.

        A payload that fails to decode, or a callback that raises, cancels
        this subscription (and only this one); the failure is logged.
    """

    def __init__(self, name, decode, callback=None):

        self.name = name
        self.decode = decode
        self.callback = callback
        self.handle = None
        self.cancelled = False
        self._lock = threading.Lock()

        if callback is None:
            self.queue = queue.SimpleQueue()
        else:
            self.queue = None


    def __repr__(self):
        state = 'cancelled' if self.cancelled else 'active'
        return '<Subscription %s %s>' % (self.name, state)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.cancel()


    def __iter__(self):
        return self


    def __next__(self):
        return self.next()


    def next(self, timeout=None):
        """ Return the next queued payload, waiting up to *timeout* seconds
            (forever if *timeout* is None). Raises :class:`queue.Empty` if
            the timeout expires, and :class:`StopIteration` once the
            subscription is cancelled and the queue has been drained.
        """

        if self.queue is None:
            raise TypeError('subscription delivers to a callback, not a queue')

        payload = self.queue.get(timeout=timeout)

        if payload is _stop:
            self.queue.put(_stop)
            raise StopIteration

        return payload


    def deliver(self, args):
        """ Invoked by the channel with the wire arguments of one emission.
        """

        if self.cancelled:
            return

        try:
            payload = self.decode(args)
        except Exception:
            logger.warning("%s: undecodable emission, cancelling subscription", self.name, exc_info=True)
            self.cancel()
            return

        if self.queue is not None:
            self.queue.put(payload)
            return

        try:
            self.callback(payload)
        except Exception:
            logger.warning("%s: callback failed, cancelling subscription", self.name, exc_info=True)
            self.cancel()


    def cancel(self):
        """ Stop receiving emissions. Cancelling twice is harmless.
        """

        with self._lock:
            if self.cancelled:
                return
            self.cancelled = True
            handle = self.handle
            self.handle = None

        if handle is not None:
            handle.cancel()

        if self.queue is not None:
            self.queue.put(_stop)


# end of class Subscription



class Proxy:
    """ Base class for the facades. The *channel* carries every request; the
        *path* may be a string, an :class:`ObjectPath`, or any record with a
        ``path`` attribute, such as :class:`logind.records.SessionInfo`. The
        *destination* names the service, and defaults to the standard
        systemd-logind names. No remote call is made here.
    """

    interface = None

    def __init_subclass__(cls, **kwargs):

        super().__init_subclass__(**kwargs)

        # Methods built by reader() and signal() take the attribute name.
        for attribute, value in vars(cls).items():
            if getattr(value, 'remote_name', None) is None:
                continue
            value.__name__ = attribute
            value.__qualname__ = cls.__name__ + '.' + attribute


    def __init__(self, channel, path=None, destination=None):

        if destination is None:
            destination = config.Destination()

        if path is None:
            path = self.default_path(destination)

        path = getattr(path, 'path', path)

        self.channel = channel
        self.destination = destination
        self.path = ObjectPath(path)
        self.interface_name = destination.interface(self.interface)


    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self.path)


    def default_path(self, destination):
        raise TypeError(type(self).__name__ + ' requires an object path')


    def _finish(self, reply, decode):

        if inspect.isawaitable(reply):
            return self._finish_async(reply, decode)

        return decode(reply)


    async def _finish_async(self, reply, decode):
        reply = await reply
        return decode(reply)


    def _call(self, method, signature='', *args, decode=nothing):
        """ Invoke the remote *method*, packing *args* according to the bus
            *signature*; the list of reply values is passed to *decode*.
        """

        packed = wire.pack_all(signature, args)
        logger.debug("%s %s.%s", self.path, self.interface_name, method)

        reply = self.channel.call(self.destination.service, self.interface_name,
                                  self.path, method, packed)

        return self._finish(reply, decode)


    def _get(self, name, decode):

        logger.debug("%s %s.%s (get)", self.path, self.interface_name, name)

        reply = self.channel.get_property(self.destination.service,
                                          self.interface_name, self.path, name)

        return self._finish(reply, decode)


    def _set(self, name, value):

        logger.debug("%s %s.%s (set)", self.path, self.interface_name, name)

        reply = self.channel.set_property(self.destination.service,
                                          self.interface_name, self.path, name, value)

        return self._finish(reply, nothing)


    def subscribe(self, name, decode, callback=None):
        """ Subscribe to the remote signal *name*; each emission's list of
            wire values is passed to *decode*. Returns a :class:`Subscription`.
        """

        subscription = Subscription(name, decode, callback)

        logger.debug("%s %s.%s (subscribe)", self.path, self.interface_name, name)

        handle = self.channel.subscribe(self.destination.service,
                                        self.interface_name, self.path, name,
                                        subscription.deliver)

        with subscription._lock:
            if subscription.cancelled:
                cancel_now = True
            else:
                subscription.handle = handle
                cancel_now = False

        if cancel_now:
            handle.cancel()

        return subscription


# end of class Proxy


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
