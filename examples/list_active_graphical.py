""" Report whether each graphical user session is active. Requires the
    ``dbus`` extra.
"""

import logind


graphical = (logind.types.SessionType.X11,
             logind.types.SessionType.WAYLAND,
             logind.types.SessionType.MIR)


def main():

    channel = logind.channel.system()
    manager = logind.Manager(channel)

    for info in manager.list_sessions():
        session = logind.Session(channel, info)

        if session.class_() != logind.types.SessionClass.USER:
            continue

        if session.type() not in graphical:
            continue

        if session.active():
            print('Active graphical session found: ' + info.sid)
        else:
            print('Inactive graphical session found: ' + info.sid)


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
