"""Support code for an analogue-modelling software synthesizer: parameters, MIDI types, settings, paths, skin layouts and translations."""

__version__ = "1.0.0"

__all__ = ["config", "controls", "i18n", "layout", "midi", "paths"]