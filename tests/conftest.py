import os
import pytest

import logind
from fakechannel import FakeChannel


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def manager(channel):
    return logind.Manager(channel)


@pytest.fixture
def pipe():
    """ A fresh pipe. The read end is handed to whatever lease the test
        creates; the write end is closed here, and can be used to check
        whether the read end is still open.
    """

    read, write = os.pipe()

    yield read, write

    os.close(write)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
