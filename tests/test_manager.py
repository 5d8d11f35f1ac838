import datetime
import os
import pytest

import logind
from logind import errors
from logind import records
from logind import types
from logind.protocol import wire


MANAGER = 'org.freedesktop.login1.Manager'
SESSION_C1 = '/org/freedesktop/login1/session/c1'


def test_list_sessions(channel, manager):

    channel.replies['ListSessions'] = [wire.array([
        wire.struct(wire.string('c1'),
                    wire.uint32(1000),
                    wire.string('alice'),
                    wire.string('seat0'),
                    wire.object_path(SESSION_C1)),
    ])]

    sessions = manager.list_sessions()

    assert sessions == [records.SessionInfo('c1', 1000, 'alice', 'seat0', wire.ObjectPath(SESSION_C1))]
    assert channel.calls == [('org.freedesktop.login1', MANAGER, '/org/freedesktop/login1', 'ListSessions', [])]


def test_list_sessions_empty(channel, manager):

    channel.replies['ListSessions'] = [wire.array([])]
    assert manager.list_sessions() == []


def test_list_sessions_malformed(channel, manager):

    channel.replies['ListSessions'] = [wire.array([
        wire.struct(wire.string('c1'), wire.uint32(1000)),
    ])]

    with pytest.raises(errors.ArityMismatch):
        manager.list_sessions()


def test_list_sessions_invalid_path(channel, manager):

    channel.replies['ListSessions'] = [wire.array([
        wire.struct(wire.string('c1'),
                    wire.uint32(1000),
                    wire.string('alice'),
                    wire.string('seat0'),
                    wire.Variant(wire.OBJECT_PATH, 'not/a/path')),
    ])]

    with pytest.raises(errors.FieldTypeMismatch):
        manager.list_sessions()



def test_list_seats_and_users(channel, manager):

    channel.replies['ListSeats'] = [wire.array([
        wire.struct(wire.string('seat0'), wire.object_path('/org/freedesktop/login1/seat/seat0')),
    ])]
    channel.replies['ListUsers'] = [wire.array([
        wire.struct(wire.uint32(1000), wire.string('alice'), wire.object_path('/org/freedesktop/login1/user/_1000')),
    ])]

    seats = manager.list_seats()
    assert seats[0].label == 'seat0'
    assert isinstance(seats[0], records.SeatPath)

    users = manager.list_users()
    assert users[0].name == 'alice'
    assert isinstance(users[0], records.UserInfo)


def test_list_inhibitors(channel, manager):

    channel.replies['ListInhibitors'] = [wire.array([
        wire.struct(wire.string('sleep'), wire.string('GNOME Shell'),
                    wire.string('GNOME needs to lock the screen'), wire.string('delay'),
                    wire.uint32(1000), wire.uint32(2201)),
    ])]

    inhibitors = manager.list_inhibitors()

    assert inhibitors[0].what == frozenset((types.InhibitWhat.SLEEP,))
    assert inhibitors[0].mode is types.Mode.DELAY


def test_get_session(channel, manager):

    channel.replies['GetSession'] = [wire.object_path(SESSION_C1)]

    path = manager.get_session('c1')

    assert path == SESSION_C1
    assert isinstance(path, wire.ObjectPath)
    assert channel.calls[0][3:] == ('GetSession', [wire.string('c1')])


def test_get_user_by_pid(channel, manager):

    channel.replies['GetUserByPID'] = [wire.object_path('/org/freedesktop/login1/user/_1000')]

    manager.get_user_by_pid(4242)
    assert channel.calls[0][3:] == ('GetUserByPID', [wire.uint32(4242)])

    with pytest.raises(errors.EncodeError):
        manager.get_user_by_pid(-1)


def test_can_queries(channel, manager):

    channel.replies['CanSuspend'] = [wire.string('challenge')]
    channel.replies['CanHibernate'] = [wire.string('maybe')]

    assert manager.can_suspend() is types.IsSupported.CHALLENGE
    assert manager.can_hibernate() is types.IsSupported.INVALID


def test_power_transitions(channel, manager):

    manager.suspend()
    manager.reboot(interactive=True)

    assert channel.calls[0][3:] == ('Suspend', [wire.boolean(False)])
    assert channel.calls[1][3:] == ('Reboot', [wire.boolean(True)])


def test_channel_errors_pass_through(channel, manager):

    channel.replies['PowerOff'] = errors.PermissionDenied('Access denied', 'org.freedesktop.DBus.Error.AccessDenied')

    with pytest.raises(errors.PermissionDenied) as caught:
        manager.power_off()

    assert caught.value.name == 'org.freedesktop.DBus.Error.AccessDenied'


def test_inhibit(channel, manager, pipe):

    read, write = pipe
    channel.replies['Inhibit'] = [wire.unix_fd(read)]

    lock = manager.inhibit('shutdown:sleep', 'test', 'testing', 'delay')

    assert isinstance(lock, logind.fd.InhibitLock)
    assert lock.fileno() == read
    assert lock.mode is types.Mode.DELAY
    assert lock.what == frozenset((types.InhibitWhat.SHUTDOWN, types.InhibitWhat.SLEEP))

    sent = channel.calls[0][4]
    assert sent == [wire.string('shutdown:sleep'), wire.string('test'), wire.string('testing'), wire.string('delay')]

    lock.release()

    with pytest.raises(BrokenPipeError):
        os.write(write, b'x')


def test_inhibit_rejects_bad_arguments(channel, manager):

    with pytest.raises(errors.EncodeError):
        manager.inhibit((), 'test', 'testing')

    with pytest.raises(errors.UnrecognizedToken):
        manager.inhibit('sleep:nap', 'test', 'testing')

    with pytest.raises(errors.UnrecognizedToken):
        manager.inhibit('sleep', 'test', 'testing', 'sometimes')

    assert channel.calls == []


def test_schedule_shutdown(channel, manager):

    when = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    manager.schedule_shutdown(types.ShutdownType.REBOOT, when)
    manager.schedule_shutdown('poweroff', 5)

    assert channel.calls[0][4] == [wire.string('reboot'), wire.uint64(1704067200000000)]
    assert channel.calls[1][4] == [wire.string('poweroff'), wire.uint64(5)]

    channel.replies['CancelScheduledShutdown'] = [wire.boolean(True)]
    assert manager.cancel_scheduled_shutdown() is True


def test_kill_session(channel, manager):

    manager.kill_session('c1', types.KillWho.ALL, 15)
    assert channel.calls[0][4] == [wire.string('c1'), wire.string('all'), wire.int32(15)]


def test_properties(channel, manager):

    channel.properties['BlockInhibited'] = wire.string('shutdown:sleep:idle')
    channel.properties['HandleLidSwitch'] = wire.string('suspend')
    channel.properties['InhibitDelayMaxUSec'] = wire.uint64(5000000)
    channel.properties['NAutoVTs'] = wire.uint32(6)
    channel.properties['KillExcludeUsers'] = wire.array([wire.string('root')])
    channel.properties['ScheduledShutdown'] = wire.struct(wire.string(''), wire.uint64(0))

    assert manager.block_inhibited() == frozenset((types.InhibitWhat.SHUTDOWN,
                                                   types.InhibitWhat.SLEEP,
                                                   types.InhibitWhat.IDLE))
    assert manager.handle_lid_switch() is types.HandleAction.SUSPEND
    assert manager.inhibit_delay_max().delta == datetime.timedelta(seconds=5)
    assert manager.n_auto_vts() == 6
    assert manager.kill_exclude_users() == ['root']
    assert not manager.scheduled_shutdown()

    with pytest.raises(errors.MethodNotFound):
        manager.wall_message()


def test_set_enable_wall_messages(channel, manager):

    manager.set_enable_wall_messages(True)

    service, interface, path, name, value = channel.writes[0]
    assert (interface, name, value) == (MANAGER, 'EnableWallMessages', wire.boolean(True))
    assert manager.enable_wall_messages() is True


def test_signal_callback(channel, manager):

    received = list()
    subscription = manager.receive_session_new(received.append)

    channel.emit('SessionNew', wire.string('c2'), wire.object_path('/org/freedesktop/login1/session/c2'))
    channel.emit('SessionNew', wire.string('c3'), wire.object_path('/org/freedesktop/login1/session/c3'))

    assert [session.label for session in received] == ['c2', 'c3']
    assert isinstance(received[0], records.SessionPath)

    subscription.cancel()
    channel.emit('SessionNew', wire.string('c4'), wire.object_path('/org/freedesktop/login1/session/c4'))

    assert len(received) == 2
    assert channel.listening('SessionNew') == 0


def test_signal_queue(channel, manager):

    subscription = manager.receive_prepare_for_sleep()

    channel.emit('PrepareForSleep', wire.boolean(True))
    channel.emit('PrepareForSleep', wire.boolean(False))

    assert subscription.next(timeout=0) is True
    assert subscription.next(timeout=0) is False

    subscription.cancel()
    assert list(subscription) == []


def test_signal_decode_failure_cancels_one_subscription(channel, manager):

    seats = manager.receive_seat_new()
    sleep = manager.receive_prepare_for_sleep()

    channel.emit('SeatNew', wire.string('seat1'))

    assert seats.cancelled
    assert not sleep.cancelled
    assert channel.listening('SeatNew') == 0

    channel.emit('PrepareForSleep', wire.boolean(True))
    assert sleep.next(timeout=0) is True


def test_signal_callback_failure_cancels_subscription(channel, manager):

    def explode(payload):
        raise RuntimeError('callback failed')

    subscription = manager.receive_user_new(explode)
    channel.emit('UserNew', wire.uint32(1000), wire.object_path('/org/freedesktop/login1/user/_1000'))

    assert subscription.cancelled


def test_signal_invalid_path_cancels_one_subscription(channel, manager):

    seats = manager.receive_seat_new()
    sleep = manager.receive_prepare_for_sleep()

    # The failure stays inside the subscription; emit() does not raise.
    channel.emit('SeatNew', wire.string('seat1'), wire.Variant(wire.OBJECT_PATH, 'not/a/path'))

    assert seats.cancelled
    assert channel.listening('SeatNew') == 0
    assert list(seats) == []

    channel.emit('PrepareForSleep', wire.boolean(False))
    assert not sleep.cancelled
    assert sleep.next(timeout=0) is False


def test_generated_method_names():

    assert logind.Manager.receive_seat_new.__name__ == 'receive_seat_new'
    assert logind.Seat.active_session.__name__ == 'active_session'
    assert logind.Seat.active_session.__qualname__ == 'Seat.active_session'
    assert logind.Session.class_.__qualname__ == 'Session.class_'
    assert logind.Session.receive_lock.__qualname__ == 'Session.receive_lock'



def test_destination(channel):

    destination = logind.config.Destination('org.example.login1', '/org/example/login1', 'org.example.login1')
    manager = logind.Manager(channel, destination=destination)

    channel.replies['LockSessions'] = []
    manager.lock_sessions()

    assert channel.calls[0][:3] == ('org.example.login1', 'org.example.login1.Manager', '/org/example/login1')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
