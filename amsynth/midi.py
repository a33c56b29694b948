"""MIDI status bytes, controller numbers and event containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MidiStatus(IntEnum):
    """Channel voice message status values (upper nibble of the status byte)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    NOTE_PRESSURE = 0xA0
    CONTROLLER = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_WHEEL = 0xE0


class MidiCC(IntEnum):
    """Control change numbers."""

    BANK_SELECT_MSB = 0x00
    MODULATION_WHEEL_MSB = 0x01
    PORTAMENTO_TIME = 0x05
    DATA_ENTRY_MSB = 0x06
    VOLUME = 0x07
    PAN_MSB = 0x0A

    BANK_SELECT_LSB = 0x20
    DATA_ENTRY_LSB = 0x26

    SUSTAIN_PEDAL = 0x40
    PORTAMENTO = 0x41
    SOSTENUTO = 0x42
    SOUND_CONTROLLER_1 = 0x46
    SOUND_CONTROLLER_2 = 0x47
    SOUND_CONTROLLER_3 = 0x48
    SOUND_CONTROLLER_4 = 0x49
    SOUND_CONTROLLER_5 = 0x4A
    SOUND_CONTROLLER_6 = 0x4B
    SOUND_CONTROLLER_7 = 0x4C
    SOUND_CONTROLLER_8 = 0x4D
    SOUND_CONTROLLER_9 = 0x4E
    SOUND_CONTROLLER_10 = 0x4F
    EFFECTS_1_DEPTH = 0x5B
    EFFECTS_2_DEPTH = 0x5C
    EFFECTS_3_DEPTH = 0x5D
    EFFECTS_4_DEPTH = 0x5E
    EFFECTS_5_DEPTH = 0x5F
    NRPN_LSB = 0x62
    NRPN_MSB = 0x63
    RPN_LSB = 0x64
    RPN_MSB = 0x65

    # Channel mode messages
    ALL_SOUND_OFF = 0x78
    RESET_ALL_CONTROLLERS = 0x79
    LOCAL_CONTROL = 0x7A
    ALL_NOTES_OFF = 0x7B
    OMNI_MODE_OFF = 0x7C
    OMNI_MODE_ON = 0x7D
    MONO_MODE_ON = 0x7E
    POLY_MODE_ON = 0x7F


@dataclass(frozen=True)
class MidiEvent:
    """Raw MIDI bytes scheduled at a frame offset within a processing block."""

    offset_frames: int
    data: bytes

    def __post_init__(self) -> None:
        if self.offset_frames < 0:
            raise ValueError("offset_frames must not be negative")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def length(self) -> int:
        return len(self.data)

    def _status_byte(self) -> int:
        if not self.data:
            raise ValueError("MIDI event has no data")
        first = self.data[0]
        if first < 0x80:
            raise ValueError(f"0x{first:02X} is not a status byte")
        return first

    @property
    def status(self) -> int:
        """The message type: the status byte with the channel bits cleared."""
        return self._status_byte() & 0xF0

    @property
    def channel(self) -> int:
        """The zero-based MIDI channel carried in the status byte."""
        return self._status_byte() & 0x0F


def _check_7bit(name: str, value: int) -> None:
    if not 0 <= value <= 0x7F:
        raise ValueError(f"{name} must be in 0..127, got {value}")


@dataclass(frozen=True)
class ControlChange:
    """A controller message on one channel."""

    channel: int
    cc: int
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.channel <= 0x0F:
            raise ValueError(f"channel must be in 0..15, got {self.channel}")
        _check_7bit("cc", self.cc)
        _check_7bit("value", self.value)

    def to_bytes(self) -> bytes:
        return bytes((MidiStatus.CONTROLLER | self.channel, self.cc, self.value))

    @classmethod
    def from_bytes(cls, data: bytes) -> ControlChange:
        if len(data) < 3:
            raise ValueError("a control change message needs three bytes")
        if data[0] & 0xF0 != MidiStatus.CONTROLLER:
            raise ValueError(f"0x{data[0]:02X} is not a controller status byte")
        return cls(channel=data[0] & 0x0F, cc=data[1], value=data[2])