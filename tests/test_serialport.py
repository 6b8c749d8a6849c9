import pytest
import serial

from autopointing.comsettings import ComSettings, Parity, StopBit
from autopointing.serialport import ComError, ComPort, StateBit


def _loop_port(**kwargs):
    port = ComPort(ComSettings(**kwargs))
    port.device = "loop://"
    return port


def test_new_port_is_loaded_but_bad():
    port = ComPort(ComSettings())
    assert port.is_loaded()
    assert port.is_bad()
    assert not port.is_good()
    assert not port.is_opened()
    assert port.state == StateBit.PARAM


def test_open_and_set_param_makes_port_good():
    port = _loop_port()
    port.open_and_set_param()
    try:
        assert port.is_opened()
        assert port.is_good()
        assert port.state == StateBit.GOOD
    finally:
        port.close()


def test_open_alone_is_not_good():
    port = _loop_port()
    port.open()
    try:
        assert port.is_opened()
        assert port.is_bad()
        assert port.state & StateBit.OPEN
    finally:
        port.close()


def test_write_then_read_round_trip():
    with _loop_port(timeout=200) as port:
        port.open_and_set_param()
        assert port.write(b"abc\r") == 4
        assert port.read(4) == b"abc\r"


def test_settings_are_applied():
    with _loop_port(baud_rate=115200, parity=Parity.EVEN,
                    stop_bit=StopBit.TWO, timeout=250) as port:
        port.open_and_set_param()
        handle = port.handle
        assert handle.baudrate == 115200
        assert handle.parity == serial.PARITY_EVEN
        assert handle.stopbits == serial.STOPBITS_TWO
        assert handle.bytesize == serial.EIGHTBITS
        assert handle.timeout == pytest.approx(0.25)


def test_close_clears_state():
    port = _loop_port()
    port.open_and_set_param()
    port.close()
    assert not port.is_opened()
    assert port.is_bad()
    assert port.is_loaded()
    assert port.handle is None


def test_read_when_closed_raises():
    port = _loop_port()
    with pytest.raises(ComError):
        port.read(1)


def test_write_when_closed_raises():
    port = _loop_port()
    with pytest.raises(ComError):
        port.write(b"x")


def test_clear_buffer_when_closed_raises():
    port = _loop_port()
    with pytest.raises(ComError):
        port.clear_buffer()


def test_clear_buffer_discards_input():
    with _loop_port(timeout=100) as port:
        port.open_and_set_param()
        port.write(b"zz")
        port.clear_buffer()
        assert port.read(2) == b""


def test_open_missing_device_raises():
    port = ComPort(ComSettings())
    port.device = "/nonexistent/device/for/test"
    with pytest.raises(ComError):
        port.open()
    assert not port.is_opened()