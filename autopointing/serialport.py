"""Access to a serial (COM) port with the line settings of a ComSettings."""

from __future__ import annotations

from enum import IntFlag
from typing import Optional

import serial

from .comsettings import ComSettings, Parity, StopBit

_PARITIES = {
    Parity.NONE: serial.PARITY_NONE,
    Parity.EVEN: serial.PARITY_EVEN,
    Parity.ODD: serial.PARITY_ODD,
    Parity.MARK: serial.PARITY_MARK,
    Parity.SPACE: serial.PARITY_SPACE,
}

_STOPBITS = {
    StopBit.ONE: serial.STOPBITS_ONE,
    StopBit.ONE_POINT_FIVE: serial.STOPBITS_ONE_POINT_FIVE,
    StopBit.TWO: serial.STOPBITS_TWO,
}


class StateBit(IntFlag):
    """Progress of bringing a port into service."""

    CLEAR = 0
    PARAM = 1
    OPEN = 2
    BAUDRATE = 4
    TIMEOUT = 8
    GOOD = 15


class ComError(Exception):
    """Raised when the port cannot be opened, configured, read or written."""


def default_device(port_no: int) -> str:
    """Return the device name of COM port number ``port_no``."""
    return f"COM{port_no}"


class ComPort:
    """A serial port opened and configured from a ComSettings.

    ``device`` names what is opened; it defaults to ``COM<port_no>`` and may
    be set to any device name or URL that the serial library understands.
    """

    def __init__(self, settings: Optional[ComSettings] = None) -> None:
        self.settings = settings if settings is not None else ComSettings()
        self.device: Optional[str] = None
        self._serial: Optional[serial.SerialBase] = None
        self._state = StateBit.PARAM

    def __enter__(self) -> "ComPort":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def state(self) -> StateBit:
        return self._state

    @property
    def handle(self) -> Optional[serial.SerialBase]:
        """The underlying open serial object, or None."""
        return self._serial

    def _device_name(self) -> str:
        return self.device if self.device else default_device(self.settings.port_no)

    def open(self) -> None:
        """Open the port, closing it first if it was open."""
        self.close()
        name = self._device_name()
        try:
            self._serial = serial.serial_for_url(name)
        except (serial.SerialException, ValueError, OSError) as exc:
            self._serial = None
            raise ComError(f"cannot open {name}: {exc}") from exc
        self._state |= StateBit.OPEN

    def open_and_set_param(self) -> None:
        """Open the port, then apply the line settings and the timeouts."""
        self.open()
        self._apply_line_settings()
        self._apply_timeouts()

    def _apply_line_settings(self) -> None:
        port = self._require_open()
        settings = self.settings
        try:
            port.baudrate = settings.baud_rate
            port.bytesize = serial.EIGHTBITS
            port.parity = _PARITIES.get(Parity(settings.parity), serial.PARITY_NONE)
            port.stopbits = _STOPBITS.get(StopBit(settings.stop_bit), serial.STOPBITS_TWO)
            port.xonxoff = False
            port.rtscts = False
            port.dsrdtr = False
            port.dtr = True
            port.rts = False
        except (serial.SerialException, ValueError, OSError) as exc:
            raise ComError(f"cannot set line parameters: {exc}") from exc
        self._state |= StateBit.BAUDRATE

    def _apply_timeouts(self) -> None:
        port = self._require_open()
        seconds = self.settings.timeout / 1000.0
        try:
            port.timeout = seconds
            port.inter_byte_timeout = seconds
            port.write_timeout = seconds
        except (serial.SerialException, ValueError, OSError) as exc:
            raise ComError(f"cannot set timeouts: {exc}") from exc
        self._state |= StateBit.TIMEOUT

    def _require_open(self) -> serial.SerialBase:
        if self._serial is None:
            raise ComError("port is not open")
        return self._serial

    def close(self) -> None:
        """Close the port if it is open and mark it out of service."""
        self._state &= ~(StateBit.OPEN | StateBit.BAUDRATE | StateBit.TIMEOUT)
        if self._serial is not None:
            try:
                self._serial.close()
            finally:
                self._serial = None

    def is_opened(self) -> bool:
        return self._serial is not None

    def is_loaded(self) -> bool:
        return bool(self._state & StateBit.PARAM)

    def is_bad(self) -> bool:
        return self._state != StateBit.GOOD

    def is_good(self) -> bool:
        return self._state == StateBit.GOOD

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; fewer come back when the timeout runs out."""
        if self.is_bad():
            raise ComError("port is not ready")
        try:
            return self._require_open().read(size)
        except (serial.SerialException, OSError) as exc:
            raise ComError(f"read failed: {exc}") from exc

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        if self.is_bad():
            raise ComError("port is not ready")
        try:
            written = self._require_open().write(bytes(data))
        except (serial.SerialException, OSError) as exc:
            raise ComError(f"write failed: {exc}") from exc
        return len(data) if written is None else written

    def clear_buffer(self) -> None:
        """Discard whatever waits in the input and output buffers."""
        port = self._require_open()
        try:
            port.reset_input_buffer()
            port.reset_output_buffer()
        except (serial.SerialException, OSError) as exc:
            raise ComError(f"cannot clear buffers: {exc}") from exc