"""Settings and small helpers for piano-roll SVG rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from collections.abc import Sequence

DEFAULT_SHAPE = "rectangle"

_DIATONIC_STEPS = (0, 0, 1, 2, 2, 3, 3, 4, 4, 5, 6, 6)

_SHAPE_CODES = {
    "r": "rectangle",
    "e": "eyelid",
    "d": "diamond",
    "h": "hexthin",
    "H": "hexthick",
    "p": "plus",
    "r1": "round1",
    "r2": "round2",
    "r3": "round3",
    "r4": "round4",
    "o": "oval",
    "O": "antioval",
    "R": "antiround",
    "R1": "antiround1",
    "R2": "antiround2",
    "R3": "antiround3",
    "R4": "antiround4",
    "c": "curvedinner",
    "c1": "curvedinner1",
    "c2": "curvedinner2",
    "c3": "curvedinner3",
    "c4": "curvedinner4",
    "C": "curvedouter",
    "C1": "curvedouter1",
    "C2": "curvedouter2",
    "C3": "curvedouter3",
    "C4": "curvedouter4",
    "tu": "triangleup",
    "td": "triangledown",
    "tl": "triangleleft",
    "tr": "triangleright",
    "trl": "triangleroundleft",
    "trr": "triangleroundright",
}

_SHAPE_SEPARATORS = re.compile(r"[\t :,;|\n]+")
_DIGITS = "0123456789"


def _identity_map() -> list[int]:
    return list(range(128))


@dataclass
class RollOptions:
    """Rendering choices for a piano-roll image."""

    data: bool = False
    rounded: bool = False
    dark: bool = False
    bw: bool = False
    scale: float = 1.0
    border: float = 1.0
    opacity: float = 1.0
    drums: bool = False
    line: bool = False
    curve: bool = False
    radius_lines: bool = False
    radius: float = 0.25
    staff: bool = False
    clefs: bool = False
    brace: bool = False
    diatonic: bool = False
    grand: bool = False
    final_barline: bool = False
    double_barline: bool = False
    transparent: bool = True
    velocity_brightness: bool = False
    dashed: bool = False
    clef_factor: float = 6.0
    staff_thickness: float = 0.5
    line_thickness: float = 0.5
    staff_color: str = "#555555"
    clef_color: str = "#cdcdcd"
    stroke_color: str = "black"
    stroke_width: float = 0.1
    max_rest: float = 4.0
    end_space: float = 0.0
    aspect_ratio: float = 2.5
    percussion_map: list[int] = field(default_factory=_identity_map)
    shapes: list[str] = field(default_factory=lambda: [DEFAULT_SHAPE, DEFAULT_SHAPE])

    @property
    def unscale(self) -> float:
        """Horizontal factor that undoes the aspect stretch for drawn glyphs."""
        return 2.5 / self.aspect_ratio


def base12_to_base7(pitch: int) -> int:
    """MIDI key number to a diatonic step number; middle C is octave 5."""
    octave, chroma = divmod(abs(pitch), 12)
    if pitch < 0:
        octave, chroma = -octave, -chroma
    step = _DIATONIC_STEPS[chroma] if chroma >= 0 else 0
    return step + 7 * octave


def double_class(value: float) -> str:
    """A number rounded to three decimals with "d" for the decimal point."""
    value = int(value * 1000.0 + 0.5) / 1000.0
    return f"{value:.3f}".replace(".", "d", 1)


def parse_percussion_map(spec: str) -> list[int]:
    """Key mapping from text such as "60>40, 61>51"; other keys map to themselves.

    Numbers are read in source/target pairs separated by any non-digit
    characters, and both are clamped to 0..127.
    """
    mapping = _identity_map()
    text = spec + " "
    start = next((i for i, ch in enumerate(text) if ch in _DIGITS), len(text))
    source = target = 0
    reading_source = True
    after_separator = False
    for ch in text[start:]:
        if ch in _DIGITS:
            if reading_source:
                source = source * 10 + int(ch)
            else:
                target = target * 10 + int(ch)
            after_separator = False
            continue
        if not after_separator:
            reading_source = not reading_source
        after_separator = True
        if reading_source:
            mapping[min(max(source, 0), 127)] = min(max(target, 0), 127)
            source = target = 0
    return mapping


def shape_from_code(code: str) -> str:
    """Full shape name for an abbreviation; other text is returned as given."""
    return _SHAPE_CODES.get(code, code)


def parse_shapes(spec: str) -> list[str]:
    """Shape names from a list of codes separated by spaces or punctuation."""
    return [shape_from_code(token) for token in _SHAPE_SEPARATORS.split(spec) if token]


def track_shape(shapes: Sequence[str], track: int) -> str:
    """Shape for a track; tracks 0 and 1 share the first entry."""
    index = max(track, 0)
    if index > 0:
        index -= 1
    if index < len(shapes):
        return shapes[index]
    return DEFAULT_SHAPE