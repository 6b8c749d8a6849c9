"""Texts and coordinates shown by the main window."""

from __future__ import annotations

from typing import Optional, Tuple

Rect = Tuple[int, int, int, int]
"""A rectangle as (left, top, right, bottom)."""

NO_FIRMWARE_VERSION = 0xFFFFFFFF


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _cmod(numerator: int, denominator: int) -> int:
    return numerator - _cdiv(numerator, denominator) * denominator


def about_text(app_version: int, firmware_version: int) -> Tuple[str, str]:
    """Return the application and firmware version lines of the about box."""
    app = f"Aplication Version: {app_version & 0xFFFFFFFF:08X}"
    if firmware_version == NO_FIRMWARE_VERSION:
        firmware = "Firmware  Version: --------"
    else:
        firmware = f"Firmware  Version: {firmware_version & 0xFFFFFFFF:08X}"
    return app, firmware


def delay_text(msec: int) -> str:
    """Format a remaining delay in milliseconds as seconds with three decimals."""
    return "%4d.%03d" % (_cdiv(msec, 1000), _cmod(msec, 1000))


def point_text(x: int, y: int) -> str:
    """Format a screen coordinate."""
    return "x=%5d , y=%5d" % (x, y)


def relative_point_text(x: int, y: int, rect: Optional[Rect]) -> str:
    """Format a coordinate relative to the target window, or dashes without one."""
    if rect is None:
        return "-------  -------"
    left, top, _right, _bottom = rect
    return point_text(x - left, y - top)


def target_size_text(rect: Optional[Rect]) -> str:
    """Describe the target window's position and size, or dashes without one."""
    if rect is None:
        return "----"
    left, top, right, bottom = rect
    return "x=%d y=%d h=%d w=%d" % (right, top, bottom - top + 1, right - left + 1)


def window_pos_from_rect(
    left: int, top: int, free_width: int, free_height: int, denominator: int
) -> Tuple[int, int]:
    """Turn a window origin into a position scaled to ``denominator``.

    ``free_width`` and ``free_height`` are the screen size less the window size.
    """
    return (
        _cdiv(left * denominator, free_width),
        _cdiv(top * denominator, free_height),
    )


def window_origin(
    pos_x: int, pos_y: int, free_width: int, free_height: int, denominator: int
) -> Tuple[int, int]:
    """Turn a scaled position back into a window origin in pixels."""
    return (
        _cdiv(pos_x * free_width, denominator),
        _cdiv(pos_y * free_height, denominator),
    )