"""Discovery of the serial (COM) ports available on this computer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Tuple

from serial.tools import list_ports

PortSource = Callable[[], Iterable[Tuple[str, str]]]

_COM_NAME = re.compile(r"COM(\d+)$", re.IGNORECASE)


@dataclass(frozen=True)
class PortEntry:
    """One detected COM port: its number, display name and device path."""

    port_no: int
    name: str
    device: str


def _system_ports() -> Iterator[Tuple[str, str]]:
    for info in list_ports.comports():
        yield info.device, info.description


class ComPortList:
    """Detected COM ports, ordered by ascending port number."""

    def __init__(self, source: Optional[PortSource] = None) -> None:
        self._source: PortSource = source if source is not None else _system_ports
        self._entries: Tuple[PortEntry, ...] = ()

    @property
    def entries(self) -> Tuple[PortEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PortEntry]:
        return iter(self._entries)

    def refresh(self) -> Tuple[PortEntry, ...]:
        """Search the ports again and return the new list."""
        self.clear()
        found = []
        for device, description in self._source():
            match = _COM_NAME.search(device)
            if match is None:
                continue
            name = description if description and description != "n/a" else device
            found.append(PortEntry(int(match.group(1)), name, device))
        found.sort(key=lambda entry: entry.port_no)
        self._entries = tuple(found)
        return self._entries

    def clear(self) -> None:
        """Forget every detected port."""
        self._entries = ()

    def port_at(self, index: int) -> PortEntry:
        """Return the entry at ``index``; raise IndexError when out of range."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no COM port at index {index}")
        return self._entries[index]

    def index_of(self, port_no: int) -> int:
        """Return the index of the entry with ``port_no``, or -1."""
        found = -1
        for index, entry in enumerate(self._entries):
            if entry.port_no == port_no:
                found = index
        return found

    def find_name(self, text: str) -> int:
        """Return the index of the last entry whose name contains ``text``, or -1."""
        found = -1
        for index, entry in enumerate(self._entries):
            if text in entry.name:
                found = index
        return found