"""Tools for inspecting and converting Standard MIDI files, with SVG piano-roll helpers."""

__version__ = "0.1.0"