# autopointing

`autopointing` holds the building blocks of a touch automation tool: a
model of scripted "works" (touches and pauses, repeated or picked at
random), an XML settings file that stores them together with the serial
settings and timing presets, and the hex-ASCII protocol used to send
resolution and click commands to a digitizer over a serial port.

## Modules

- `autopointing.works` – the work model. A `TouchWork` touches one
  `TouchPoint` (`x`, `y`, `delay`) and then waits its delay; a
  `TouchesWork` runs its `children` either each in turn or one picked by
  `WorkContext.choose` (`TouchMode.EACH` / `TouchMode.ANYONE`); a
  `WaitWork` pauses `wait_msec` milliseconds (400 by default). Every
  `Work` has `loop_n` (`0` means repeat while `is_alive()` holds) and a
  `comment`, and offers `run`, `run_once`, `load_xml` and `save_xml`.
  `load_work_list` reads the `<work>` children of a `<works>` element and
  returns the works and their names; `save_work_list` writes them back.
  `new_work` builds an empty work of a `WorkType`. A `WorkContext` gives a
  running work its hooks: `point(x, y)`, `is_alive()`, `sleep(msec)`,
  `show_comment(text)`, `show_count(text)` and `choose(n)`. Bad input or
  a work with nothing to run raises `WorkError`.
- `autopointing.config` – `load_settings(path, app_name)` reads the
  settings file into a `Settings` dataclass and `save_settings(settings,
  path, app_name)` writes it; an unreadable or malformed file raises
  `ConfigError`.
- `autopointing.digitizer` – `encode_command` builds a frame (upper-case
  hex of every byte, then a carriage return); `FrameDecoder.feed` turns
  received bytes back into frames and `FrameDecoder.tick` drops a partial
  frame after a silence. `Digitizer` sends `set_display_resolution` and
  `click` commands, hands the firmware version from a system reply to its
  `on_version` callback, and `run(stop_event)` reads and decodes until the
  event is set.
- `autopointing.serialport` – `ComPort` opens a serial port from a
  `ComSettings` (device `COM<port_no>` unless `device` is set to another
  name or a pyserial URL), tracks its progress in `StateBit`, and raises
  `ComError` on failure. It works as a context manager.
- `autopointing.comsettings` – `ComSettings` (port number, baud rate,
  timeout, `StopBit`, `Parity`) with `load_ini` / `save_ini` and
  `load_xml` / `save_xml`, plus `bps_to_index` / `index_to_bps` over the
  table `BAUD_RATES`.
- `autopointing.comlist` – `ComPortList.refresh()` lists the machine's
  `COM<n>` serial ports as `PortEntry` items sorted by number;
  `index_of` and `find_name` search them.
- `autopointing.endtimer` – `EndTimer`: `set(units)` puts the end time
  `units` × 36 seconds ahead (100 units = one hour), `shift(seconds)`
  moves it, `text()` formats it as local `YYYY/MM/DD hh:mm:ss`, and
  `expired()` tells whether it has passed.
- `autopointing.display` – text for status readouts (`delay_text`,
  `point_text`, `relative_point_text`, `target_size_text`, `about_text`)
  and conversion between a window origin and a scaled position
  (`window_pos_from_rect`, `window_origin`).
- `autopointing.pathutil` – string handling of paths: `base_directory`,
  `to_absolute_path` and wildcard matching with `comp_path`.
- `autopointing.fileops` – `module_file_path`,
  `module_attachment_file_path` (a file next to the running program),
  `is_directory`, `copy_file`, `delete_file` and `move_file`.
- `autopointing.numerical` and `autopointing.strings` – big-endian byte
  packing, `hex_dump`, `ascii_to_int`, `division45`, the `Pair` value
  type, and name lookups in tables.

## Example

```python
from autopointing.config import load_settings
from autopointing.digitizer import Digitizer
from autopointing.serialport import ComPort
from autopointing.works import WorkContext

settings = load_settings("apd_ini.xml", "AutoPointing")

with ComPort(settings.com) as port:
    port.open_and_set_param()
    digitizer = Digitizer(port, 0x01, on_version=print)
    digitizer.set_display_resolution(1920, 1080)

    ctx = WorkContext(point=digitizer.click)
    settings.works[settings.work_index].run(ctx)
```

The device id (`0x01` above) is whatever first command byte your
digitizer expects.

## Settings file

The root element is named after the application name passed to
`load_settings`. Inside it: `<title>`, `<target>` (`window_name`, `x`,
`y`), `<inside>` (`check`, `margin_x`, `margin_y`), `<window>` (`vpos`,
`hpos`), `<com>` (the `ComSettings` attributes), `<blur>` (`x`, `y`,
`time`; 4, 4 and 4 when the element is absent), `<active>`
(`pause_time`), `<end_time>` (`time0`, `time1`, `time2`, `spin`) and the
required `<works>` (`index`), whose `<work name="…">` children hold
`touch`, `touchs` and `wait` elements. `save_settings` also writes a
`<soft_version>` element in hex.

## What the package does not do

There is no command-line program and no window: nothing here finds the
target window, reads the cursor, shows the status texts or starts and
stops a run by the end timer. The `blur`, `inside`, `active` and target
values are stored and loaded but not applied. A `TouchWork` passes its
stored coordinates straight to `WorkContext.point`; turning them into
screen coordinates is up to the function you supply.