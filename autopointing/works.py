"""Works: touch, multi-touch and wait operations, loaded from and saved to XML."""

from __future__ import annotations

import itertools
import random
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .strings import find_string_list_id

WORK_TAG = "work"
NAME_ATTR = "name"
LOOP_ATTR = "loop_n"
COMMENT_ATTR = "comment"
TYPE_ATTR = "type"
DELAY_ATTR = "delay"

DEFAULT_WAIT_MSEC = 400


class WorkType(IntEnum):
    """Kind of work; the value indexes ``WORK_NAMES``."""

    TOUCH = 0
    TOUCHS = 1
    WAIT = 2


WORK_NAMES = ("touch", "touchs", "wait")


class TouchMode(IntEnum):
    """How a multi-touch work goes through its children."""

    EACH = 0
    ANYONE = 1


MODE_NAMES = ("each", "anyone")


class WorkError(Exception):
    """Raised when a work cannot be loaded or run."""


@dataclass
class TouchPoint:
    """A point to touch, in target-window coordinates, and the delay after it."""

    x: int = 0
    y: int = 0
    delay: int = 0


def _sleep_ms(msec: int) -> None:
    time.sleep(max(msec, 0) / 1000.0)


def _ignore(_text: str) -> None:
    return None


def _always() -> bool:
    return True


@dataclass
class WorkContext:
    """What a running work talks to: the pointer, the clock and the display."""

    point: Callable[[int, int], None]
    is_alive: Callable[[], bool] = field(default=_always)
    sleep: Callable[[int], None] = field(default=_sleep_ms)
    show_comment: Callable[[str], None] = field(default=_ignore)
    show_count: Callable[[str], None] = field(default=_ignore)
    choose: Callable[[int], int] = field(default=random.randrange)


def _int_attr(element: ET.Element, key: str) -> Optional[int]:
    text = element.get(key)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise WorkError(f"attribute {key!r} is not an integer: {text!r}") from exc


class Work:
    """Common behaviour of every work: repetition, comment and XML helpers."""

    work_type: WorkType = WorkType.TOUCH

    def __init__(self) -> None:
        self.loop_n = 1
        self.comment = ""

    @property
    def name(self) -> str:
        """The tag name of this kind of work."""
        return WORK_NAMES[self.work_type]

    def run(self, ctx: WorkContext) -> None:
        """Run the work ``loop_n`` times, or until stopped when ``loop_n`` is 0."""
        rounds = itertools.count() if self.loop_n == 0 else range(self.loop_n)
        for count in rounds:
            if not ctx.is_alive():
                return
            ctx.show_comment(self.comment)
            ctx.show_count(self._count_text(count))
            self.run_once(ctx)

    def _count_text(self, count: int) -> str:
        if self.loop_n == 0:
            return ""
        return str(self.loop_n - (count + 1))

    def run_once(self, ctx: WorkContext) -> None:
        """Run one round of the work."""
        raise WorkError(f"{type(self).__name__} has nothing to run")

    def load_xml(self, element: ET.Element) -> None:
        """Read the work from ``element``."""
        self._load_common(element)

    def save_xml(self) -> ET.Element:
        """Return an element, named after the work type, describing the work."""
        element = ET.Element(self.name)
        self._save_common(element)
        return element

    def _load_common(self, element: ET.Element) -> None:
        loop_n = _int_attr(element, LOOP_ATTR)
        if loop_n is not None:
            self.loop_n = loop_n
        comment = element.get(COMMENT_ATTR)
        if comment is not None:
            self.comment = comment

    def _save_common(self, element: ET.Element) -> None:
        if self.loop_n != 1:
            element.set(LOOP_ATTR, str(self.loop_n))
        if self.comment:
            element.set(COMMENT_ATTR, self.comment)

    @staticmethod
    def _touch_and_delay(ctx: WorkContext, point: TouchPoint) -> None:
        ctx.point(point.x, point.y)
        ctx.sleep(point.delay)


def _load_touch_point(element: ET.Element) -> TouchPoint:
    values = []
    for key in ("x", "y", DELAY_ATTR):
        value = _int_attr(element, key)
        if value is None:
            raise WorkError(f"missing attribute {key!r}")
        values.append(value)
    return TouchPoint(*values)


class TouchWork(Work):
    """Touch one point, then wait its delay."""

    work_type = WorkType.TOUCH

    def __init__(self, point: Optional[TouchPoint] = None) -> None:
        super().__init__()
        self.point = point if point is not None else TouchPoint()

    def run_once(self, ctx: WorkContext) -> None:
        self._touch_and_delay(ctx, self.point)

    def load_xml(self, element: ET.Element) -> None:
        self.point = _load_touch_point(element)
        self._load_common(element)

    def save_xml(self) -> ET.Element:
        element = ET.Element(self.name)
        element.set("x", str(self.point.x))
        element.set("y", str(self.point.y))
        element.set(DELAY_ATTR, str(self.point.delay))
        self._save_common(element)
        return element


class TouchesWork(Work):
    """Run child works one after another, or one picked at random."""

    work_type = WorkType.TOUCHS

    def __init__(self, mode: TouchMode = TouchMode.EACH) -> None:
        super().__init__()
        self.mode = mode
        self.children: List[Work] = []

    def run_once(self, ctx: WorkContext) -> None:
        if not self.children:
            raise WorkError("no works to run")
        if self.mode == TouchMode.EACH:
            for child in self.children:
                if not ctx.is_alive():
                    return
                child.run(ctx)
        else:
            if not ctx.is_alive():
                return
            index = ctx.choose(len(self.children)) % len(self.children)
            self.children[index].run(ctx)

    def load_xml(self, element: ET.Element) -> None:
        mode_text = element.get(TYPE_ATTR)
        if mode_text is not None:
            mode = find_string_list_id(mode_text, MODE_NAMES)
            if mode >= 0:
                self.mode = TouchMode(mode)
        for child_element in element:
            child = new_work(find_string_list_id(child_element.tag, WORK_NAMES))
            child.load_xml(child_element)
            self.children.append(child)
        self._load_common(element)

    def save_xml(self) -> ET.Element:
        element = ET.Element(self.name)
        element.set(TYPE_ATTR, MODE_NAMES[self.mode])
        for child in self.children:
            element.append(child.save_xml())
        self._save_common(element)
        return element


class WaitWork(Work):
    """Wait a fixed number of milliseconds."""

    work_type = WorkType.WAIT

    def __init__(self, wait_msec: int = DEFAULT_WAIT_MSEC) -> None:
        super().__init__()
        self.wait_msec = wait_msec

    def run_once(self, ctx: WorkContext) -> None:
        ctx.sleep(self.wait_msec)

    def load_xml(self, element: ET.Element) -> None:
        delay = _int_attr(element, DELAY_ATTR)
        if delay is not None:
            self.wait_msec = delay
        self._load_common(element)

    def save_xml(self) -> ET.Element:
        element = ET.Element(self.name)
        element.set(DELAY_ATTR, str(self.wait_msec))
        self._save_common(element)
        return element


_WORK_CLASSES = {
    WorkType.TOUCH: TouchWork,
    WorkType.TOUCHS: TouchesWork,
    WorkType.WAIT: WaitWork,
}


def new_work(work_type: Union[WorkType, int]) -> Work:
    """Create an empty work of ``work_type``."""
    try:
        kind = WorkType(work_type)
    except ValueError as exc:
        raise WorkError(f"unknown work type: {work_type!r}") from exc
    return _WORK_CLASSES[kind]()


def load_work_list(element: ET.Element) -> Tuple[List[Work], List[str]]:
    """Read the ``work`` children of ``element`` and return the works and their names.

    A work without a name takes the name of the one before it.
    """
    works: List[Work] = []
    names: List[str] = []
    name = ""
    for child in element:
        name = child.get(NAME_ATTR, name)
        if child.tag != WORK_TAG:
            raise WorkError(f"not work: {child.tag!r}")
        work = new_work(WorkType.TOUCHS)
        work.load_xml(child)
        works.append(work)
        names.append(name)
    return works, names


def save_work_list(
    works: Sequence[Work], names: Sequence[str], parent: ET.Element
) -> None:
    """Append one ``work`` element per work to ``parent``, its name first."""
    if len(works) != len(names):
        raise ValueError("works and names differ in length")
    for work, name in zip(works, names):
        element = work.save_xml()
        element.tag = WORK_TAG
        attributes = {NAME_ATTR: name}
        attributes.update(element.attrib)
        element.attrib = attributes
        parent.append(element)