import logind
from logind import records
from logind import types
from logind.protocol import wire


SEAT0 = '/org/freedesktop/login1/seat/seat0'
USER1000 = '/org/freedesktop/login1/user/_1000'
SESSION_C1 = '/org/freedesktop/login1/session/c1'


def session_list():
    return wire.array([wire.struct(wire.string('c1'), wire.object_path(SESSION_C1))])


def test_seat_properties(channel):

    seat = logind.Seat(channel, SEAT0)

    channel.properties['ActiveSession'] = wire.struct(wire.string('c1'), wire.object_path(SESSION_C1))
    channel.properties['Sessions'] = session_list()
    channel.properties['CanGraphical'] = wire.boolean(True)
    channel.properties['Id'] = wire.string('seat0')

    assert seat.active_session() == records.SessionPath('c1', wire.ObjectPath(SESSION_C1))
    assert seat.sessions() == [records.SessionPath('c1', wire.ObjectPath(SESSION_C1))]
    assert seat.can_graphical() is True
    assert seat.id() == 'seat0'

    for call in channel.calls:
        assert call[1] == 'org.freedesktop.login1.Seat'
        assert call[2] == SEAT0


def test_seat_without_active_session(channel):

    seat = logind.Seat(channel, SEAT0)

    channel.properties['ActiveSession'] = wire.struct(wire.string(''), wire.object_path('/'))
    assert seat.active_session() is None


def test_seat_methods(channel):

    seat = logind.Seat(channel, SEAT0)

    seat.switch_to(2)
    seat.switch_to_next()
    seat.terminate()

    assert channel.calls[0][3:] == ('SwitchTo', [wire.uint32(2)])
    assert channel.methods == ['SwitchTo', 'SwitchToNext', 'Terminate']


def test_user_properties(channel):

    user = logind.User(channel, USER1000)

    channel.properties['State'] = wire.string('lingering')
    channel.properties['UID'] = wire.uint32(1000)
    channel.properties['Sessions'] = session_list()
    channel.properties['RuntimePath'] = wire.string('/run/user/1000')

    assert user.state() is types.UserState.LINGERING
    assert user.uid() == 1000
    assert user.sessions()[0].label == 'c1'
    assert user.runtime_path() == '/run/user/1000'


def test_user_display(channel):

    user = logind.User(channel, USER1000)

    channel.properties['Display'] = wire.struct(wire.string(''), wire.object_path('/'))
    assert user.display() is None

    channel.properties['Display'] = wire.struct(wire.string('c1'), wire.object_path(SESSION_C1))
    assert user.display().path == SESSION_C1


def test_user_methods(channel):

    user = logind.User(channel, USER1000)

    user.kill(15)
    user.terminate()

    assert channel.calls[0][3:] == ('Kill', [wire.int32(15)])
    assert channel.calls[1][1:4] == ('org.freedesktop.login1.User', USER1000, 'Terminate')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
