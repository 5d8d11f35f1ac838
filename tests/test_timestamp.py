import datetime
import pytest

from logind import errors
from logind.protocol import wire
from logind.types import TimeStamp


def test_zero_is_unset():

    zero = TimeStamp.decode(wire.uint64(0))

    assert zero == 0
    assert not zero
    assert zero.as_datetime() is None
    assert zero.delta == datetime.timedelta(0)


def test_maximum():

    maximum = 2 ** 64 - 1
    stamp = TimeStamp.decode(wire.uint64(maximum))

    assert stamp.microseconds == maximum
    assert stamp.delta == datetime.timedelta(microseconds=maximum)
    assert stamp.to_wire() == wire.uint64(maximum)

    with pytest.raises(OverflowError):
        stamp.as_datetime()


def test_conversions():

    stamp = TimeStamp(1500000)

    assert stamp.seconds == 1.5
    assert stamp.delta == datetime.timedelta(seconds=1, milliseconds=500)
    assert repr(stamp) == 'TimeStamp(1500000)'

    epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
    assert stamp.as_datetime() == epoch + datetime.timedelta(seconds=1.5)


def test_coerce():

    assert TimeStamp.coerce(10) == 10
    assert TimeStamp.coerce(datetime.timedelta(minutes=5)) == 300000000

    when = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    assert TimeStamp.coerce(when) == 1704067200000000
    assert TimeStamp.coerce(when).as_datetime() == when

    with pytest.raises(ValueError):
        TimeStamp.coerce(datetime.datetime(2024, 1, 1))


def test_range():

    with pytest.raises(ValueError):
        TimeStamp(-1)

    with pytest.raises(ValueError):
        TimeStamp(2 ** 64)


def test_decode_checks_kind():

    with pytest.raises(errors.FieldTypeMismatch):
        TimeStamp.decode(wire.int64(-5))

    with pytest.raises(errors.FieldTypeMismatch):
        TimeStamp.decode(wire.string('5'))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
