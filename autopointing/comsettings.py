"""Serial line settings: baud rate table, parity, stop bits, INI and XML storage."""

from __future__ import annotations

import configparser
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

BAUD_RATES = (300, 1200, 4800, 9600, 19200, 38400, 115200, 230400)

DEFAULT_INI_FILE = "ComSet.ini"
DEFAULT_SECTION = "ComSet"

PORT_NO_KEY = "PortNo"
BAUD_RATE_KEY = "BaudRate"
TIMEOUT_KEY = "Timeout"
STOPBIT_KEY = "Stopbit"
PARITY_KEY = "Parity"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Parity(IntEnum):
    """Parity of the serial line."""

    NONE = 0
    EVEN = 1
    ODD = 2
    MARK = 3
    SPACE = 4


class StopBit(IntEnum):
    """Number of stop bits of the serial line."""

    ONE = 0
    ONE_POINT_FIVE = 1
    TWO = 2


def bps_to_index(bps: int) -> int:
    """Return the position of ``bps`` in the baud rate table, or 0 when absent."""
    try:
        return BAUD_RATES.index(bps)
    except ValueError:
        return 0


def index_to_bps(index: int) -> int:
    """Return the baud rate at ``index``; out-of-range indexes give the slowest rate."""
    if not 0 <= index < len(BAUD_RATES):
        return BAUD_RATES[0]
    return BAUD_RATES[index]


def _parse_profile_int(text: Optional[str], default: int) -> int:
    """Read an INI integer the way profile readers do: leading digits, else 0."""
    if text is None:
        return default
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class ComSettings:
    """Port number, speed, timeout, stop bits and parity of a COM port."""

    port_no: int = 1
    baud_rate: int = 9600
    timeout: int = 1000
    stop_bit: StopBit = StopBit.ONE
    parity: Parity = Parity.NONE

    def load_ini(
        self,
        path: Union[str, Path] = DEFAULT_INI_FILE,
        section: str = DEFAULT_SECTION,
    ) -> None:
        """Read settings from ``section`` of an INI file; missing keys keep their values."""
        parser = configparser.ConfigParser(interpolation=None)
        parser.read(Path(path), encoding="utf-8")
        values = parser[section] if parser.has_section(section) else {}

        def get(key: str, current: int) -> int:
            return _parse_profile_int(values.get(key.lower()), current)

        self.port_no = get(PORT_NO_KEY, self.port_no)
        self.baud_rate = get(BAUD_RATE_KEY, self.baud_rate)
        self.timeout = get(TIMEOUT_KEY, self.timeout)
        self.stop_bit = StopBit(get(STOPBIT_KEY, int(self.stop_bit)))
        self.parity = Parity(get(PARITY_KEY, int(self.parity)))

    def save_ini(
        self,
        path: Union[str, Path] = DEFAULT_INI_FILE,
        section: str = DEFAULT_SECTION,
    ) -> None:
        """Write the settings into ``section`` of an INI file, keeping other content."""
        target = Path(path)
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        if target.exists():
            parser.read(target, encoding="utf-8")
        if not parser.has_section(section):
            parser.add_section(section)
        for key, value in self._items():
            parser.set(section, key, str(value))
        with target.open("w", encoding="utf-8") as handle:
            parser.write(handle)

    def load_xml(self, element: Optional[ET.Element]) -> None:
        """Read settings from the attributes of ``element``; missing ones keep their values."""
        if element is None:
            raise ValueError("no element to read COM settings from")

        def get(key: str, current: int) -> int:
            text = element.get(key)
            return current if text is None else int(text)

        self.port_no = get(PORT_NO_KEY, self.port_no)
        self.baud_rate = get(BAUD_RATE_KEY, self.baud_rate)
        self.timeout = get(TIMEOUT_KEY, self.timeout)
        self.stop_bit = StopBit(get(STOPBIT_KEY, int(self.stop_bit)))
        self.parity = Parity(get(PARITY_KEY, int(self.parity)))

    def save_xml(self, tag: str = "com") -> ET.Element:
        """Return a new element named ``tag`` holding the settings as attributes."""
        element = ET.Element(tag)
        for key, value in self._items():
            element.set(key, str(value))
        return element

    def _items(self):
        return (
            (PORT_NO_KEY, int(self.port_no)),
            (BAUD_RATE_KEY, int(self.baud_rate)),
            (TIMEOUT_KEY, int(self.timeout)),
            (STOPBIT_KEY, int(self.stop_bit)),
            (PARITY_KEY, int(self.parity)),
        )