""" The :class:`Manager` facade for ``org.freedesktop.login1.Manager``, the
    entry point for everything logind tracks: seats, sessions, users, and
    inhibitor locks, along with the system power transitions.
"""

from . import errors
from . import records
from . import types
from .fd import InhibitLock
from .protocol import codec
from .protocol import fields
from .protocol import wire
from .proxy import Proxy, array_of, reader, signal, single


def _inhibited(value):
    return types.InhibitWhat.split(codec.as_string(value))


_supported = single(types.IsSupported.decode)
_path = single(codec.as_object_path)


class Manager(Proxy):
    """ Facade for the logind manager object. The *channel* carries the
        requests; the object path defaults to the manager path of the
        *destination*.

        Methods that take an *interactive* flag ask logind to allow
        interactive authorization (a polkit prompt) where needed.
    """

    interface = fields.MANAGER

    def default_path(self, destination):
        return destination.manager_path


    # Seats, sessions, and users.

    def activate_session(self, session_id):
        return self._call('ActivateSession', 's', session_id)


    def activate_session_on_seat(self, session_id, seat_id):
        return self._call('ActivateSessionOnSeat', 'ss', session_id, seat_id)


    def attach_device(self, seat_id, sysfs_path, interactive=False):
        return self._call('AttachDevice', 'ssb', seat_id, sysfs_path, interactive)


    def flush_devices(self, interactive=False):
        return self._call('FlushDevices', 'b', interactive)


    def get_seat(self, seat_id):
        """ Return the object path of the seat named *seat_id*.
        """

        return self._call('GetSeat', 's', seat_id, decode=_path)


    def get_session(self, session_id):
        return self._call('GetSession', 's', session_id, decode=_path)


    def get_session_by_pid(self, pid):
        return self._call('GetSessionByPID', 'u', pid, decode=_path)


    def get_user(self, uid):
        return self._call('GetUser', 'u', uid, decode=_path)


    def get_user_by_pid(self, pid):
        return self._call('GetUserByPID', 'u', pid, decode=_path)


    def kill_session(self, session_id, who, signal_number):
        """ Send *signal_number* to the processes of a session; *who* is a
            :class:`types.KillWho` member or token.
        """

        who = types.KillWho.parse(who)
        return self._call('KillSession', 'ssi', session_id, who, signal_number)


    def kill_user(self, uid, signal_number):
        return self._call('KillUser', 'ui', uid, signal_number)


    def list_inhibitors(self):
        return self._call('ListInhibitors', decode=single(array_of(records.Inhibitor.from_wire)))


    def list_seats(self):
        return self._call('ListSeats', decode=single(array_of(records.SeatPath.from_wire)))


    def list_sessions(self):
        """ Return a list of :class:`records.SessionInfo`, one per session.
        """

        return self._call('ListSessions', decode=single(array_of(records.SessionInfo.from_wire)))


    def list_users(self):
        return self._call('ListUsers', decode=single(array_of(records.UserInfo.from_wire)))


    def lock_session(self, session_id):
        return self._call('LockSession', 's', session_id)


    def lock_sessions(self):
        return self._call('LockSessions')


    def release_session(self, session_id):
        return self._call('ReleaseSession', 's', session_id)


    def set_user_linger(self, uid, enable, interactive=False):
        return self._call('SetUserLinger', 'ubb', uid, enable, interactive)


    def terminate_seat(self, seat_id):
        return self._call('TerminateSeat', 's', seat_id)


    def terminate_session(self, session_id):
        return self._call('TerminateSession', 's', session_id)


    def terminate_user(self, uid):
        return self._call('TerminateUser', 'u', uid)


    def unlock_session(self, session_id):
        return self._call('UnlockSession', 's', session_id)


    def unlock_sessions(self):
        return self._call('UnlockSessions')


    # Power transitions.

    def can_halt(self):
        return self._call('CanHalt', decode=_supported)


    def can_hibernate(self):
        return self._call('CanHibernate', decode=_supported)


    def can_hybrid_sleep(self):
        return self._call('CanHybridSleep', decode=_supported)


    def can_power_off(self):
        return self._call('CanPowerOff', decode=_supported)


    def can_reboot(self):
        return self._call('CanReboot', decode=_supported)


    def can_reboot_parameter(self):
        return self._call('CanRebootParameter', decode=_supported)


    def can_reboot_to_boot_loader_entry(self):
        return self._call('CanRebootToBootLoaderEntry', decode=_supported)


    def can_reboot_to_boot_loader_menu(self):
        return self._call('CanRebootToBootLoaderMenu', decode=_supported)


    def can_reboot_to_firmware_setup(self):
        return self._call('CanRebootToFirmwareSetup', decode=_supported)


    def can_suspend(self):
        return self._call('CanSuspend', decode=_supported)


    def can_suspend_then_hibernate(self):
        return self._call('CanSuspendThenHibernate', decode=_supported)


    def halt(self, interactive=False):
        return self._call('Halt', 'b', interactive)


    def hibernate(self, interactive=False):
        return self._call('Hibernate', 'b', interactive)


    def hybrid_sleep(self, interactive=False):
        return self._call('HybridSleep', 'b', interactive)


    def power_off(self, interactive=False):
        return self._call('PowerOff', 'b', interactive)


    def reboot(self, interactive=False):
        return self._call('Reboot', 'b', interactive)


    def suspend(self, interactive=False):
        return self._call('Suspend', 'b', interactive)


    def suspend_then_hibernate(self, interactive=False):
        return self._call('SuspendThenHibernate', 'b', interactive)


    def schedule_shutdown(self, kind, when):
        """ Schedule a shutdown of *kind* (a :class:`types.ShutdownType`
            member or token) at *when*, which is anything accepted by
            :func:`types.TimeStamp.coerce`: microseconds since the UNIX
            epoch, a :class:`datetime.timedelta` since the epoch, or an
            aware :class:`datetime.datetime`.
        """

        kind = types.ShutdownType.parse(kind)
        when = types.TimeStamp.coerce(when)
        return self._call('ScheduleShutdown', 'st', kind, when)


    def cancel_scheduled_shutdown(self):
        """ Cancel a scheduled shutdown; the reply is True if one was
            pending.
        """

        return self._call('CancelScheduledShutdown', decode=single(codec.as_bool))


    def set_reboot_parameter(self, parameter):
        return self._call('SetRebootParameter', 's', parameter)


    def set_reboot_to_boot_loader_entry(self, entry):
        return self._call('SetRebootToBootLoaderEntry', 's', entry)


    def set_reboot_to_boot_loader_menu(self, timeout):
        """ Ask the boot loader to show its menu on the next boot, for up to
            *timeout* (microseconds or a :class:`datetime.timedelta`); zero
            clears the request.
        """

        timeout = types.TimeStamp.coerce(timeout)
        return self._call('SetRebootToBootLoaderMenu', 't', timeout)


    def set_reboot_to_firmware_setup(self, enable):
        return self._call('SetRebootToFirmwareSetup', 'b', enable)


    def set_wall_message(self, message, enable):
        return self._call('SetWallMessage', 'sb', message, enable)


    def inhibit(self, what, who, why, mode=types.Mode.BLOCK):
        """ Take an inhibitor lock blocking or delaying the transitions named
            by *what*: a :class:`types.InhibitWhat` member, a set of members,
            or a colon-delimited string of tokens. The *who* and *why*
            arguments are human-readable descriptions shown to other users
            of logind.

            Returns an :class:`InhibitLock`. The lock is held until the lock
            is released, by calling :func:`InhibitLock.release` or by using
            it as a context manager.
        """

        what = types.InhibitWhat.coerce(what)
        if len(what) == 0:
            raise errors.EncodeError('an inhibitor lock must name at least one category')

        mode = types.Mode.parse(mode)
        joined = types.InhibitWhat.join(what)

        def decode(reply):
            fd = single(codec.as_fd)(reply)
            return InhibitLock(fd, what, who, why, mode)

        return self._call('Inhibit', 'ssss', joined, who, why, mode, decode=decode)


    # Properties.

    block_inhibited = reader('BlockInhibited', _inhibited)
    delay_inhibited = reader('DelayInhibited', _inhibited)
    boot_loader_entries = reader('BootLoaderEntries', codec.as_string_list)
    docked = reader('Docked', codec.as_bool)
    enable_wall_messages = reader('EnableWallMessages', codec.as_bool)

    handle_hibernate_key = reader('HandleHibernateKey', types.HandleAction.decode)
    handle_lid_switch = reader('HandleLidSwitch', types.HandleAction.decode)
    handle_lid_switch_docked = reader('HandleLidSwitchDocked', types.HandleAction.decode)
    handle_lid_switch_external_power = reader('HandleLidSwitchExternalPower', types.HandleAction.decode)
    handle_power_key = reader('HandlePowerKey', types.HandleAction.decode)
    handle_suspend_key = reader('HandleSuspendKey', types.HandleAction.decode)
    idle_action = reader('IdleAction', types.HandleAction.decode)

    holdoff_timeout = reader('HoldoffTimeoutUSec', types.TimeStamp.decode)
    idle_action_timeout = reader('IdleActionUSec', types.TimeStamp.decode)
    inhibit_delay_max = reader('InhibitDelayMaxUSec', types.TimeStamp.decode)
    user_stop_delay = reader('UserStopDelayUSec', types.TimeStamp.decode)

    idle_hint = reader('IdleHint', codec.as_bool)
    idle_since_hint = reader('IdleSinceHint', types.TimeStamp.decode)
    idle_since_hint_monotonic = reader('IdleSinceHintMonotonic', types.TimeStamp.decode)

    inhibitors_max = reader('InhibitorsMax', codec.as_uint64)
    kill_exclude_users = reader('KillExcludeUsers', codec.as_string_list)
    kill_only_users = reader('KillOnlyUsers', codec.as_string_list)
    kill_user_processes = reader('KillUserProcesses', codec.as_bool)
    lid_closed = reader('LidClosed', codec.as_bool)
    n_auto_vts = reader('NAutoVTs', codec.as_uint32)
    n_current_inhibitors = reader('NCurrentInhibitors', codec.as_uint64)
    n_current_sessions = reader('NCurrentSessions', codec.as_uint64)
    on_external_power = reader('OnExternalPower', codec.as_bool)
    preparing_for_shutdown = reader('PreparingForShutdown', codec.as_bool)
    preparing_for_sleep = reader('PreparingForSleep', codec.as_bool)
    reboot_parameter = reader('RebootParameter', codec.as_string)
    reboot_to_boot_loader_entry = reader('RebootToBootLoaderEntry', codec.as_string)
    reboot_to_boot_loader_menu = reader('RebootToBootLoaderMenu', types.TimeStamp.decode)
    reboot_to_firmware_setup = reader('RebootToFirmwareSetup', codec.as_bool)
    remove_ipc = reader('RemoveIPC', codec.as_bool)
    runtime_directory_inodes_max = reader('RuntimeDirectoryInodesMax', codec.as_uint64)
    runtime_directory_size = reader('RuntimeDirectorySize', codec.as_uint64)
    scheduled_shutdown = reader('ScheduledShutdown', records.ScheduledShutdown.from_wire)
    sessions_max = reader('SessionsMax', codec.as_uint64)
    wall_message = reader('WallMessage', codec.as_string)


    def set_enable_wall_messages(self, enable):
        return self._set('EnableWallMessages', wire.boolean(enable))


    # Signals.

    receive_prepare_for_shutdown = signal('PrepareForShutdown', single(codec.as_bool))
    receive_prepare_for_sleep = signal('PrepareForSleep', single(codec.as_bool))
    receive_seat_new = signal('SeatNew', records.SeatPath.from_fields)
    receive_seat_removed = signal('SeatRemoved', records.SeatPath.from_fields)
    receive_session_new = signal('SessionNew', records.SessionPath.from_fields)
    receive_session_removed = signal('SessionRemoved', records.SessionPath.from_fields)
    receive_user_new = signal('UserNew', records.UserPath.from_fields)
    receive_user_removed = signal('UserRemoved', records.UserPath.from_fields)


# end of class Manager


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
