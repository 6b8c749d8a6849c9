"""Loading and saving the application settings file."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .comsettings import ComSettings
from .works import Work, WorkError, load_work_list, save_work_list

Point = Tuple[int, int]

DEFAULT_BLUR_POINT: Point = (4, 4)
DEFAULT_BLUR_TIME = 4

_TRUE_WORDS = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when the settings file cannot be read or has the wrong form."""


@dataclass
class Settings:
    """Everything the settings file holds."""

    title: str = ""
    target_window_name: str = ""
    base_point: Point = (0, 0)
    inside_check: bool = False
    inside_margin: Point = (0, 0)
    window_pos: Point = (0, 0)
    com: ComSettings = field(default_factory=ComSettings)
    blur_point: Point = DEFAULT_BLUR_POINT
    blur_time: int = DEFAULT_BLUR_TIME
    active_pause_time: int = 0
    now_times: Tuple[int, int, int] = (0, 0, 0)
    spin_time: int = 0
    work_index: int = 0
    works: List[Work] = field(default_factory=list)
    work_names: List[str] = field(default_factory=list)
    soft_version: int = 0


def _int(element: ET.Element, key: str, current: int) -> int:
    text = element.get(key)
    if text is None:
        return current
    try:
        return int(text.strip(), 0) if text.strip().lower().startswith("0x") else int(text)
    except ValueError as exc:
        raise ConfigError(f"attribute {key!r} of <{element.tag}> is not an integer: {text!r}") from exc


def _bool(element: ET.Element, key: str, current: bool) -> bool:
    text = element.get(key)
    if text is None:
        return current
    return text.strip().lower() in _TRUE_WORDS


def load_settings(path: Union[str, Path], app_name: str) -> Settings:
    """Read the settings file at ``path`` whose root element is named ``app_name``."""
    try:
        tree = ET.parse(Path(path))
    except OSError as exc:
        raise ConfigError(f"cannot read settings: {exc}") from exc
    except ET.ParseError as exc:
        raise ConfigError(f"settings are not valid XML: {exc}") from exc

    root = tree.getroot()
    if root is None:
        raise ConfigError("the settings XML is broken")
    if root.tag != app_name:
        raise ConfigError(f"the settings XML has the wrong form: <{root.tag}>")

    settings = Settings()

    title = root.find("title")
    if title is not None:
        settings.title = title.text or ""

    node = root.find("target")
    if node is not None:
        settings.target_window_name = node.get("window_name", settings.target_window_name)
        settings.base_point = (
            _int(node, "x", settings.base_point[0]),
            _int(node, "y", settings.base_point[1]),
        )

    node = root.find("inside")
    if node is not None:
        settings.inside_check = _bool(node, "check", settings.inside_check)
        settings.inside_margin = (
            _int(node, "margin_x", settings.inside_margin[0]),
            _int(node, "margin_y", settings.inside_margin[1]),
        )

    node = root.find("window")
    if node is not None:
        settings.window_pos = (
            _int(node, "vpos", settings.window_pos[0]),
            _int(node, "hpos", settings.window_pos[1]),
        )

    node = root.find("com")
    if node is not None:
        try:
            settings.com.load_xml(node)
        except ValueError as exc:
            raise ConfigError(f"bad COM settings: {exc}") from exc

    node = root.find("blur")
    if node is None:
        settings.blur_point = DEFAULT_BLUR_POINT
        settings.blur_time = DEFAULT_BLUR_TIME
    else:
        settings.blur_point = (
            _int(node, "x", settings.blur_point[0]),
            _int(node, "y", settings.blur_point[1]),
        )
        settings.blur_time = _int(node, "time", settings.blur_time)

    node = root.find("active")
    if node is not None:
        settings.active_pause_time = _int(node, "pause_time", settings.active_pause_time)

    node = root.find("end_time")
    if node is not None:
        settings.now_times = (
            _int(node, "time0", settings.now_times[0]),
            _int(node, "time1", settings.now_times[1]),
            _int(node, "time2", settings.now_times[2]),
        )
        settings.spin_time = _int(node, "spin", settings.spin_time)

    works = root.find("works")
    if works is None:
        raise ConfigError("the settings XML has no works element")
    settings.work_index = _int(works, "index", settings.work_index)
    try:
        settings.works, settings.work_names = load_work_list(works)
    except WorkError as exc:
        raise ConfigError(f"bad work: {exc}") from exc
    if settings.work_index >= len(settings.works):
        settings.work_index = 0

    return settings


def _sub(parent: ET.Element, tag: str, **attributes: object) -> ET.Element:
    element = ET.SubElement(parent, tag)
    for key, value in attributes.items():
        element.set(key, str(value))
    return element


def save_settings(settings: Settings, path: Union[str, Path], app_name: str) -> None:
    """Write ``settings`` to ``path`` under a root element named ``app_name``."""
    root = ET.Element(app_name)
    root.set("version", "1.0")
    root.set("encoding", "utf-8")

    ET.SubElement(root, "title").text = settings.title
    ET.SubElement(root, "soft_version").text = f"{settings.soft_version & 0xFFFFFFFF:08X}"

    _sub(
        root, "target",
        window_name=settings.target_window_name,
        x=settings.base_point[0],
        y=settings.base_point[1],
    )
    _sub(
        root, "inside",
        check="true" if settings.inside_check else "false",
        margin_x=settings.inside_margin[0],
        margin_y=settings.inside_margin[1],
    )
    _sub(root, "window", vpos=settings.window_pos[0], hpos=settings.window_pos[1])
    root.append(settings.com.save_xml("com"))
    _sub(
        root, "blur",
        x=settings.blur_point[0],
        y=settings.blur_point[1],
        time=settings.blur_time,
    )
    _sub(root, "active", pause_time=settings.active_pause_time)
    _sub(
        root, "end_time",
        time0=settings.now_times[0],
        time1=settings.now_times[1],
        time2=settings.now_times[2],
        spin=settings.spin_time,
    )
    works = _sub(root, "works", index=settings.work_index)
    save_work_list(settings.works, settings.work_names, works)

    tree = ET.ElementTree(root)
    ET.indent(tree, space="\t")
    try:
        tree.write(Path(path), encoding="utf-8", xml_declaration=True)
    except OSError as exc:
        raise ConfigError(f"cannot write settings: {exc}") from exc


def _optional(value: Optional[str]) -> str:
    return value or ""