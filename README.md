# amsynth

Support code for an analogue-modelling software synthesizer, as a plain
Python library with no third-party dependencies:

- `amsynth.controls`: the synthesizer's parameter indices (`Param`, with
  `PARAMETER_COUNT`) and the `KeyboardMode` and `PortamentoMode`
  enumerations.
- `amsynth.midi`: MIDI status values (`MidiStatus`), controller numbers
  (`MidiCC`), raw MIDI input at a frame offset (`MidiEvent`) and controller
  messages (`ControlChange`).
- `amsynth.paths`: where factory banks, skins, the user's configuration,
  controller map and preset banks live (`Filesystem`, `get_filesystem()`),
  following the XDG base directory layout, including moving older dot-files
  out of the home directory.
- `amsynth.config`: the shared settings file (`Configuration`,
  `get_configuration()`): audio and MIDI drivers, devices, sample rate,
  polyphony, pitch bend range, tuning file, locked parameters and JACK
  auto-connection.
- `amsynth.layout`: a reader for skin `layout.ini` files
  (`LayoutDescription`, `Resource`, `Control`, `parse_ini()`,
  `read_ini_file()`).
- `amsynth.i18n`: message translation helpers (`gettext`, `ngettext`,
  `pgettext`, `npgettext`, `gettext_noop`, `install_translations`) that give
  back the untranslated text when no catalogue is installed.

## Installation

```
pip install .
```

Python 3.10 or newer is required.

## Usage

### Settings

```python
from amsynth.config import get_configuration

config = get_configuration()      # defaults, then the user's config file
config.polyphony = 16
config.pitch_bend_range = 12
config.save()                     # writes the file back
```

`get_configuration()` returns the same object on every call. A
`Configuration` can also be made directly with a `path` of your own.
`Configuration.reset_defaults()` restores the built-in defaults (the locked
parameters are kept) and `Configuration.load()` re-reads the settings file;
a missing file leaves the settings unchanged. In the file, a token starting
with `#` makes the rest of its line a comment, and unknown keys are skipped
together with their value. `Configuration.save()` raises `OSError` when the
file cannot be written or no path is set.

### Where files live

```python
from amsynth.paths import get_filesystem

fs = get_filesystem()
print(fs.config, fs.default_bank, fs.user_banks)
```

On first use `get_filesystem()` creates the user's configuration and data
directories and seeds the configuration and default bank from the shared data
directory (`<sys.prefix>/share/amsynth`). The user paths are `None` when
`HOME` is not set.

`Filesystem.from_environ(environ, data_dir)` builds the same description from
an explicit environment mapping without touching the disk, and
`Filesystem.prepare(home, data_dir)` creates the directories and files,
returning the paths it could not create.

### MIDI

```python
from amsynth.midi import ControlChange, MidiEvent, MidiStatus

message = ControlChange.from_bytes(bytes([0xB0, 7, 100]))
assert ControlChange.from_bytes(message.to_bytes()) == message

event = MidiEvent(offset_frames=0, data=bytes([0x91, 60, 100]))
assert event.status == MidiStatus.NOTE_ON and event.channel == 1
```

`MidiEvent.status` and `MidiEvent.channel` are properties that split the
first byte of an event into message type and channel; they raise
`ValueError` for an empty event or a data byte in that position.
`ControlChange` checks that the channel is 0–15 and the controller number and
value are 0–127.

### Skin layouts

```python
from amsynth.layout import LayoutDescription

layout = LayoutDescription.from_file("skins/default/layout.ini")
print(layout.background)
for name, control in layout.controls.items():
    print(name, control.type, control.x, control.y, control.resource.frames)
```

A `layout.ini` holds a `[layout]` section naming the background image, one
section per image resource (`file`, `width`, `height`, `frames`) and one
section per parameter (`type`, `resource`, `pos_x`, `pos_y`).
`LayoutDescription.from_file()` logs an invalid file and returns what it
could read; `LayoutDescription.from_sections()` raises `KeyError` or
`ValueError` instead.

### Translations

```python
from amsynth.i18n import install_translations, gettext, ngettext

install_translations("amsynth", "/usr/share/locale")
print(gettext("Save"))
print(ngettext("voice", "voices", 3))
```

## What this package does not do

It holds no sound engine: there are no oscillators, filters, voices or
effects, no audio or MIDI drivers, no preset banks and no user interface.
It provides the parameter list, MIDI types, settings, file locations, skin
layout reading and translation helpers that such a program is built on.

## Running the tests

```
pip install .[test]
pytest
```