"""Talking to the digitizer: hex-encoded command frames over a serial port."""

from __future__ import annotations

import threading
from typing import Callable, List, Optional, Protocol

from .numerical import ascii_to_int, bytes_to_uint32, hex_dump, uint16_to_bytes
from .serialport import ComError

CR = 0x0D

SYSTEM_COMMAND = 0x99
VERSION_COMMAND = 0x99
RESOLUTION_COMMAND = 0x90
CLICK_COMMAND = 0x07

DEFAULT_BUFFER_SIZE = 64
DEFAULT_RX_TIMEOUT = 10
POLL_INTERVAL = 0.01


class _Port(Protocol):
    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> int: ...


def encode_command(command1: int, command2: int, data: bytes = b"") -> bytes:
    """Return the wire form of a command: upper-case hex of all bytes, then CR."""
    return hex_dump(bytes([command1 & 0xFF, command2 & 0xFF]) + bytes(data)) + bytes([CR])


class FrameDecoder:
    """Collects hex characters into bytes and yields a frame at each CR."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE, timeout: int = DEFAULT_RX_TIMEOUT) -> None:
        self.buffer_size = buffer_size
        self.timeout = timeout
        self._nibbles = 0
        self._buffer: List[int] = []
        self._timer = 0

    def _reset(self) -> None:
        self._nibbles = 0
        self._buffer.clear()

    def feed(self, byte: int) -> Optional[bytes]:
        """Take one received byte; return the completed frame when it ends one."""
        frame: Optional[bytes] = None
        if byte != CR:
            value = ascii_to_int(byte)
            if self._nibbles % 2 == 0:
                self._buffer.append(value << 4)
            else:
                self._buffer[-1] |= value
            self._nibbles += 1
            if self._nibbles > self.buffer_size:
                self._reset()
        else:
            if self._nibbles % 2 == 0:
                frame = bytes(self._buffer)
            self._reset()
        self._timer = self.timeout
        return frame

    def tick(self) -> None:
        """Note one poll without data; a long silence drops a partial frame."""
        if self._timer > 0:
            self._timer -= 1
        else:
            self._reset()


class Digitizer:
    """Sends commands to the digitizer and handles the frames it sends back."""

    def __init__(
        self,
        port: _Port,
        device_id: int,
        on_version: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.port = port
        self.device_id = device_id
        self.on_version = on_version
        self.decoder = FrameDecoder()

    def send_command(self, command1: int, command2: int, data: bytes = b"") -> None:
        """Send one command; a failed write raises ComError."""
        self.port.write(encode_command(command1, command2, data))

    def set_display_resolution(self, x: int, y: int) -> None:
        """Tell the digitizer the screen resolution."""
        self.send_command(self.device_id, RESOLUTION_COMMAND, uint16_to_bytes(x) + uint16_to_bytes(y))

    def click(self, x: int, y: int) -> None:
        """Press and release the screen at ``(x, y)``."""
        self.send_command(self.device_id, CLICK_COMMAND, uint16_to_bytes(x) + uint16_to_bytes(y))

    def handle_frame(self, frame: bytes) -> None:
        """Act on a received frame; only system frames are handled."""
        if len(frame) < 2 or frame[0] != SYSTEM_COMMAND:
            return
        if frame[1] == VERSION_COMMAND and len(frame) >= 6:
            if self.on_version is not None:
                self.on_version(bytes_to_uint32(frame[2:6]))

    def run(self, stop_event: threading.Event) -> None:
        """Read and decode incoming bytes until ``stop_event`` is set."""
        while not stop_event.is_set():
            try:
                data = self.port.read(1)
            except ComError:
                data = b""
            if data:
                frame = self.decoder.feed(data[0])
                if frame is not None:
                    self.handle_frame(frame)
            else:
                self.decoder.tick()
                stop_event.wait(POLL_INTERVAL)