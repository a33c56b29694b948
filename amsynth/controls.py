"""Synthesiser parameter identifiers and keyboard modes."""

from enum import IntEnum


class Param(IntEnum):
    """Index of every synthesiser parameter, in preset order."""

    AMP_ENV_ATTACK = 0
    AMP_ENV_DECAY = 1
    AMP_ENV_SUSTAIN = 2
    AMP_ENV_RELEASE = 3

    OSCILLATOR1_WAVEFORM = 4

    FILTER_ENV_ATTACK = 5
    FILTER_ENV_DECAY = 6
    FILTER_ENV_SUSTAIN = 7
    FILTER_ENV_RELEASE = 8
    FILTER_RESONANCE = 9
    FILTER_ENV_AMOUNT = 10
    FILTER_CUTOFF = 11

    OSCILLATOR2_DETUNE = 12
    OSCILLATOR2_WAVEFORM = 13

    MASTER_VOLUME = 14

    LFO_FREQ = 15
    LFO_WAVEFORM = 16

    OSCILLATOR2_OCTAVE = 17
    OSCILLATOR_MIX = 18

    LFO_TO_OSCILLATORS = 19
    LFO_TO_FILTER_CUTOFF = 20
    LFO_TO_AMP = 21

    OSCILLATOR_MIX_RING_MOD = 22

    OSCILLATOR1_PULSEWIDTH = 23
    OSCILLATOR2_PULSEWIDTH = 24

    REVERB_ROOMSIZE = 25
    REVERB_DAMP = 26
    REVERB_WET = 27
    REVERB_WIDTH = 28

    AMP_DISTORTION = 29

    OSCILLATOR2_SYNC = 30

    PORTAMENTO_TIME = 31

    KEYBOARD_MODE = 32

    OSCILLATOR2_PITCH = 33
    FILTER_TYPE = 34
    FILTER_SLOPE = 35

    LFO_OSCILLATOR_SELECT = 36

    FILTER_KEY_TRACK_AMOUNT = 37
    FILTER_KEY_VELOCITY_AMOUNT = 38

    AMP_VELOCITY_AMOUNT = 39

    PORTAMENTO_MODE = 40


PARAMETER_COUNT = len(Param)


class KeyboardMode(IntEnum):
    """How incoming notes are assigned to voices."""

    POLY = 0
    MONO = 1
    LEGATO = 2


class PortamentoMode(IntEnum):
    """When portamento glides are applied."""

    ALWAYS = 0
    LEGATO = 1