"""User configuration stored as whitespace-separated key/value pairs."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path

from amsynth.paths import get_filesystem

_INT_PREFIX = re.compile(r"[+-]?\d+")

_STRING_KEYS = {
    "audio_driver": "audio_driver",
    "midi_driver": "midi_driver",
    "oss_midi_device": "oss_midi_device",
    "oss_audio_device": "oss_audio_device",
    "alsa_audio_device": "alsa_audio_device",
    "tuning_file": "current_tuning_file",
    "ignored_parameters": "locked_parameters",
}

_INT_KEYS = frozenset({"midi_channel", "sample_rate", "polyphony", "pitch_bend_range"})

_RESET_FIELDS = (
    "audio_driver",
    "midi_driver",
    "oss_midi_device",
    "midi_channel",
    "oss_audio_device",
    "alsa_audio_device",
    "sample_rate",
    "channels",
    "buffer_size",
    "polyphony",
    "pitch_bend_range",
    "jack_autoconnect",
    "jack_client_name_preference",
    "current_tuning_file",
)


def _parse_int(token: str) -> int:
    """Read a leading integer as a stream would; anything else gives 0."""
    match = _INT_PREFIX.match(token)
    return int(match.group()) if match else 0


def _tokens(text: str) -> Iterator[tuple[int, str]]:
    for lineno, line in enumerate(text.splitlines()):
        for token in line.split():
            yield lineno, token


@dataclass
class Configuration:
    """Settings shared between the components of the synthesiser."""

    path: Path | None = None
    default_bank: str = ""
    sample_rate: int = 44100
    midi_channel: int = 0
    channels: int = 2
    buffer_size: int = 128
    polyphony: int = 10
    pitch_bend_range: int = 2
    audio_driver: str = "auto"
    current_audio_driver: str = ""
    midi_driver: str = "auto"
    current_midi_driver: str = ""
    oss_midi_device: str = "/dev/midi"
    oss_audio_device: str = "/dev/dsp"
    alsa_audio_device: str = "default"
    current_bank_file: str = ""
    current_tuning_file: str = "default"
    locked_parameters: str = ""
    jack_autoconnect: bool = True
    jack_client_name: str = ""
    jack_client_name_preference: str = "amsynth"
    alsa_seq_client_id: int = 0
    xruns: int = 0
    realtime: bool = False
    current_audio_driver_wants_realtime: bool = False

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = Path(self.path)
        if not self.current_bank_file:
            self.current_bank_file = self.default_bank

    def reset_defaults(self) -> None:
        """Restore the default settings (locked parameters are kept)."""
        defaults = {f.name: f.default for f in fields(self)}
        for name in _RESET_FIELDS:
            setattr(self, name, defaults[name])
        self.current_bank_file = self.default_bank

    def load(self) -> None:
        """Read settings from the file; a missing file leaves them unchanged."""
        if self.path is None:
            return
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return

        tokens = _tokens(text)
        comment_line = -1
        for lineno, key in tokens:
            if lineno == comment_line:
                continue
            if key.startswith("#"):
                comment_line = lineno
                continue
            _, value = next(tokens, (None, None))
            if value is None:
                break
            self._apply(key, value)

    def _apply(self, key: str, value: str) -> None:
        if key in _STRING_KEYS:
            setattr(self, _STRING_KEYS[key], value)
        elif key in _INT_KEYS:
            setattr(self, key, _parse_int(value))
        elif key == "jack_autoconnect":
            self.jack_autoconnect = value == "true"

    def save(self) -> None:
        """Write the settings to the file, raising OSError on failure."""
        if self.path is None:
            raise OSError("no configuration file path is set")
        entries = (
            ("midi_driver", self.midi_driver),
            ("oss_midi_device", self.oss_midi_device),
            ("midi_channel", self.midi_channel),
            ("audio_driver", self.audio_driver),
            ("oss_audio_device", self.oss_audio_device),
            ("alsa_audio_device", self.alsa_audio_device),
            ("sample_rate", self.sample_rate),
            ("polyphony", self.polyphony),
            ("pitch_bend_range", self.pitch_bend_range),
            ("tuning_file", self.current_tuning_file),
            ("ignored_parameters", self.locked_parameters),
            ("jack_autoconnect", "true" if self.jack_autoconnect else "false"),
        )
        with self.path.open("w", encoding="utf-8") as stream:
            stream.writelines(f"{key}\t{value}\n" for key, value in entries)


@lru_cache(maxsize=None)
def get_configuration() -> Configuration:
    """The process-wide configuration, loaded from the user's file."""
    fs = get_filesystem()
    config = Configuration(
        path=fs.config,
        default_bank=str(fs.default_bank) if fs.default_bank else "",
    )
    config.load()
    return config