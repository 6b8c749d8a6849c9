import re
import time
from datetime import datetime

from autopointing.endtimer import EndTimer


NOW = 1_700_000_000


def test_unset_timer():
    timer = EndTimer()
    assert timer.text() == ""
    assert timer.expired(NOW) is False


def test_hundred_units_is_an_hour():
    timer = EndTimer()
    short = timer.set(0, now=NOW)
    long = timer.set(100, now=NOW)
    assert long - short == 3600
    assert timer.end_time == long


def test_expiry_is_strict():
    timer = EndTimer()
    timer.set(0, now=NOW)
    assert timer.expired(NOW) is False
    assert timer.expired(NOW + 1) is True
    assert timer.expired(NOW - 1) is False


def test_shift_round_trip():
    timer = EndTimer()
    original = timer.set(50, now=NOW)
    timer.shift(600)
    assert timer.end_time > original
    timer.shift(-600)
    assert timer.end_time == original


def test_shift_unset_does_nothing():
    timer = EndTimer()
    timer.shift(600)
    assert timer.end_time is None


def test_text_round_trips_to_end_time():
    timer = EndTimer()
    timer.set(123, now=NOW)
    text = timer.text()
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}", text)
    parsed = datetime.strptime(text, "%Y/%m/%d %H:%M:%S")
    assert int(time.mktime(parsed.timetuple())) == timer.end_time


def test_set_without_now_uses_clock():
    timer = EndTimer()
    before = int(time.time())
    end = timer.set(0)
    after = int(time.time())
    assert before <= end <= after
    assert timer.expired(end + 1) is True