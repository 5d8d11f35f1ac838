import os
import pytest

import logind
from logind import errors
from logind import records
from logind import types
from logind.protocol import wire


SESSION_C1 = '/org/freedesktop/login1/session/c1'


@pytest.fixture
def session(channel):
    return logind.Session(channel, SESSION_C1)


def test_path_from_listing(channel):

    info = records.SessionInfo('c1', 1000, 'alice', 'seat0', wire.ObjectPath(SESSION_C1))
    session = logind.Session(channel, info)

    assert session.path == SESSION_C1
    assert channel.calls == []


def test_path_is_required(channel):

    with pytest.raises(TypeError):
        logind.Session(channel)

    with pytest.raises(errors.InvalidPath):
        logind.Session(channel, 'session/c1')

    assert channel.calls == []


def test_interface(channel, session):

    session.activate()
    assert channel.calls[0][1:4] == ('org.freedesktop.login1.Session', SESSION_C1, 'Activate')


def test_enumerated_properties(channel, session):

    channel.properties['Type'] = wire.string('wayland')
    channel.properties['Class'] = wire.string('greeter')
    channel.properties['State'] = wire.string('active')

    assert session.type() is types.SessionType.WAYLAND
    assert session.class_() is types.SessionClass.GREETER
    assert session.state() is types.SessionState.ACTIVE


def test_optional_strings(channel, session):

    channel.properties['TTY'] = wire.string('')
    channel.properties['RemoteHost'] = wire.string('')
    channel.properties['RemoteUser'] = wire.string('bob')

    assert session.tty() is None
    assert session.remote_host() is None
    assert session.remote_user() == 'bob'

    channel.properties['TTY'] = wire.string('tty2')
    assert session.tty() == 'tty2'


def test_seat(channel, session):

    channel.properties['Seat'] = wire.struct(wire.string(''), wire.object_path('/'))
    assert session.seat() is None

    channel.properties['Seat'] = wire.struct(wire.string('seat0'), wire.object_path('/org/freedesktop/login1/seat/seat0'))
    seat = session.seat()

    assert isinstance(seat, records.SeatPath)
    assert seat.label == 'seat0'

    # The record can be handed straight to the facade.
    assert logind.Seat(channel, seat).path == '/org/freedesktop/login1/seat/seat0'


def test_user(channel, session):

    channel.properties['User'] = wire.struct(wire.uint32(1000), wire.object_path('/org/freedesktop/login1/user/_1000'))

    user = session.user()
    assert user == records.UserPath(1000, wire.ObjectPath('/org/freedesktop/login1/user/_1000'))


def test_timestamps(channel, session):

    channel.properties['Timestamp'] = wire.uint64(1704067200000000)
    channel.properties['IdleSinceHint'] = wire.uint64(0)

    assert session.timestamp().as_datetime().year == 2024
    assert not session.idle_since_hint()


def test_kill(channel, session):

    session.kill('leader', 9)
    assert channel.calls[0][3:] == ('Kill', [wire.string('leader'), wire.int32(9)])

    with pytest.raises(errors.UnrecognizedToken):
        session.kill('everyone', 9)


def test_set_type(channel, session):

    session.set_type(types.SessionType.X11)
    assert channel.calls[0][3:] == ('SetType', [wire.string('x11')])


def test_set_brightness(channel, session):

    session.set_brightness('backlight', 'intel_backlight', 400)
    assert channel.calls[0][4] == [wire.string('backlight'), wire.string('intel_backlight'), wire.uint32(400)]


def test_take_device(channel, session, pipe):

    read, write = pipe
    channel.replies['TakeDevice'] = [wire.unix_fd(read), wire.boolean(True)]

    device = session.take_device(226, 0)

    assert channel.calls[0][4] == [wire.uint32(226), wire.uint32(0)]
    assert isinstance(device, records.Device)
    assert device.inactive is True

    with device.fd:
        assert device.fd.fileno() == read

    with pytest.raises(BrokenPipeError):
        os.write(write, b'x')


def test_lock_signals(channel, session):

    locks = session.receive_lock()

    channel.emit('Lock')
    assert locks.next(timeout=0) is None
    assert not locks.cancelled

    channel.emit('Lock', wire.string('unexpected'))
    assert locks.cancelled


def test_device_signals(channel, session, pipe):

    read, write = pipe

    paused = list()
    resumed = list()
    session.receive_pause_device(paused.append)
    session.receive_resume_device(resumed.append)

    channel.emit('PauseDevice', wire.uint32(13), wire.uint32(64), wire.string('pause'))
    channel.emit('ResumeDevice', wire.uint32(13), wire.uint32(64), wire.unix_fd(read))

    assert paused == [records.DevicePause(13, 64, types.PauseType.PAUSE)]
    assert resumed[0].major == 13
    assert resumed[0].fd.fileno() == read

    resumed[0].fd.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
