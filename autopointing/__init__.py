"""Touch works, settings storage and the serial digitizer protocol for touch automation."""

__version__ = "1.0.0"

__all__ = [
    "comlist",
    "comsettings",
    "config",
    "digitizer",
    "display",
    "endtimer",
    "fileops",
    "numerical",
    "pathutil",
    "serialport",
    "strings",
    "works",
]