import xml.etree.ElementTree as ET

import pytest

from autopointing.comsettings import Parity, StopBit
from autopointing.config import ConfigError, Settings, load_settings, save_settings
from autopointing.works import TouchesWork, TouchMode, TouchPoint, TouchWork, WaitWork

APP = "AutoPointing"


def _sample_settings():
    group = TouchesWork(TouchMode.ANYONE)
    group.children.append(TouchWork(TouchPoint(10, 20, 300)))
    group.children.append(WaitWork(250))
    group.loop_n = 3
    group.comment = "first"
    other = TouchesWork()
    other.children.append(TouchWork(TouchPoint(1, 2, 3)))
    settings = Settings(
        title="demo",
        target_window_name="Target",
        base_point=(5, 6),
        inside_check=True,
        inside_margin=(7, 8),
        window_pos=(100, 200),
        blur_point=(2, 3),
        blur_time=9,
        active_pause_time=1500,
        now_times=(10, 20, 30),
        spin_time=17,
        work_index=1,
        works=[group, other],
        work_names=["one", "two"],
    )
    settings.com.port_no = 5
    settings.com.baud_rate = 115200
    settings.com.parity = Parity.EVEN
    settings.com.stop_bit = StopBit.TWO
    return settings


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_round_trip(tmp_path):
    original = _sample_settings()
    path = tmp_path / "apd_ini.xml"
    save_settings(original, path, APP)
    loaded = load_settings(path, APP)

    assert loaded.title == original.title
    assert loaded.target_window_name == original.target_window_name
    assert loaded.base_point == original.base_point
    assert loaded.inside_check is True
    assert loaded.inside_margin == original.inside_margin
    assert loaded.window_pos == original.window_pos
    assert loaded.com == original.com
    assert loaded.blur_point == original.blur_point
    assert loaded.blur_time == original.blur_time
    assert loaded.active_pause_time == original.active_pause_time
    assert loaded.now_times == original.now_times
    assert loaded.spin_time == original.spin_time
    assert loaded.work_index == original.work_index
    assert loaded.work_names == original.work_names
    assert [ET.tostring(w.save_xml()) for w in loaded.works] == [
        ET.tostring(w.save_xml()) for w in original.works
    ]


def test_saved_root_carries_name_and_works(tmp_path):
    path = tmp_path / "out.xml"
    save_settings(_sample_settings(), path, APP)
    root = ET.parse(path).getroot()
    assert root.tag == APP
    assert root.get("version") == "1.0"
    assert [w.get("name") for w in root.find("works")] == ["one", "two"]


def test_wrong_root_is_rejected(tmp_path):
    path = _write(tmp_path / "a.xml", "<Other><works/></Other>")
    with pytest.raises(ConfigError):
        load_settings(path, APP)


def test_missing_works_is_rejected(tmp_path):
    path = _write(tmp_path / "a.xml", f"<{APP}><title>t</title></{APP}>")
    with pytest.raises(ConfigError):
        load_settings(path, APP)


def test_broken_xml_is_rejected(tmp_path):
    path = _write(tmp_path / "a.xml", f"<{APP}><works>")
    with pytest.raises(ConfigError):
        load_settings(path, APP)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "absent.xml", APP)


def test_blur_defaults_when_absent(tmp_path):
    path = _write(tmp_path / "a.xml", f"<{APP}><works/></{APP}>")
    settings = load_settings(path, APP)
    assert settings.blur_point == (4, 4)
    assert settings.blur_time == 4
    assert settings.works == []


def test_out_of_range_index_falls_back_to_zero(tmp_path):
    text = (
        f'<{APP}><works index="5">'
        '<work name="w"><touch x="1" y="2" delay="3"/></work>'
        f"</works></{APP}>"
    )
    settings = load_settings(_write(tmp_path / "a.xml", text), APP)
    assert settings.work_index == 0
    assert settings.work_names == ["w"]


def test_non_work_child_is_rejected(tmp_path):
    text = f'<{APP}><works><job name="w"/></works></{APP}>'
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path / "a.xml", text), APP)


def test_bad_integer_is_rejected(tmp_path):
    text = f'<{APP}><blur x="a" y="1" time="1"/><works/></{APP}>'
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path / "a.xml", text), APP)