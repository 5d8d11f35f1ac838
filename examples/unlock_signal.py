""" Wait for the first regular user session to be unlocked. Requires the
    ``dbus`` extra, since signals are dispatched from a GLib main loop.
"""

from gi.repository import GLib

import logind


def main():

    channel = logind.channel.system()
    manager = logind.Manager(channel)
    sessions = manager.list_sessions()

    for info in sessions:
        if info.uid >= 1000:
            break
    else:
        raise SystemExit('no regular user session found')

    session = logind.Session(channel, info)
    loop = GLib.MainLoop()

    def unlocked(payload):
        print('Unlocked')
        subscription.cancel()
        loop.quit()

    subscription = session.receive_unlock(unlocked)
    loop.run()


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
