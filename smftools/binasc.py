"""Readable byte listing of MIDI files for text-to-binary assemblers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from smftools.score import MidiEvent, Score, read_score


def vlv_size(value: int) -> int:
    """Number of bytes needed to write the value as a variable-length value."""
    if value < 0x80:
        return 1
    if value < 0x4000:
        return 2
    if value < 0x200000:
        return 3
    if value < 0x10000000:
        return 4
    return 5


def hex_byte(value: int) -> str:
    """Two-digit lower-case hexadecimal form of a byte."""
    if not 0 <= value <= 255:
        raise ValueError(f"value is too large: {value}")
    return f"{value:02x}"


def format_event(tick: int, data: tuple[int, ...]) -> str:
    """One event line: delta time, then the message bytes."""
    command = data[0]
    if command & 0xF0 in (0x80, 0x90):
        rest = [f"'{value}" for value in data[1:]]
    else:
        rest = [hex_byte(value) for value in data[1:]]
    return " ".join([f"v{tick}\t{hex_byte(command)}", *rest])


def track_byte_count(events: Iterable[tuple[int, tuple[int, ...]]]) -> int:
    """Bytes in a track chunk after its header, for (delta, data) pairs."""
    return sum(vlv_size(delta) + len(data) for delta, data in events)


def _header(track_count: int, ticks_per_quarter: int) -> str:
    if track_count == 0:
        fmt = "2'0\t\t\t\t; format: Type-0 (single track)"
    else:
        fmt = "2'1\t\t\t\t; format: Type-1 (multi-track)"
    plural = "" if track_count == 1 else "s"
    lines = [
        "+M +T +h +d\t\t\t; MIDI file header chunk marker",
        "4'6\t\t\t\t; bytes in header to follow",
        fmt,
        f"2'{track_count}\t\t\t\t; track count: {track_count} track{plural}",
        f"2'{ticks_per_quarter}\t\t\t\t; ticks per quarter note",
    ]
    return "\n".join(lines) + "\n"


def format_header(score: Score) -> str:
    return _header(len(score.tracks), score.ticks_per_quarter)


def _track_text(events: list[tuple[int, tuple[int, ...]]]) -> str:
    lines = [
        "",
        "+M +T +r +k\t\t\t; Track chunk marker",
        f"4'{track_byte_count(events)}\t\t\t\t; number of bytes to follow in track",
        "",
        *(format_event(delta, data) for delta, data in events),
    ]
    return "\n".join(lines) + "\n"


def format_track(score: Score, track: int) -> str:
    return _track_text(score.delta_events(track))


def _deltas(events: list[MidiEvent]) -> list[tuple[int, tuple[int, ...]]]:
    pairs = []
    previous = 0
    for event in events:
        pairs.append((event.tick - previous, event.data))
        previous = event.tick
    return pairs


def convert(score: Score, type0: bool = False) -> str:
    """The whole file as text; type0 joins all tracks into one."""
    if type0:
        return _header(1, score.ticks_per_quarter) + _track_text(_deltas(score.merged()))
    tracks = "".join(format_track(score, index) for index, _ in enumerate(score.tracks))
    return format_header(score) + tracks


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="midi2binasc", description="List a MIDI file as annotated bytes."
    )
    parser.add_argument("midifile")
    parser.add_argument(
        "--debug", action="store_true", help="debug mode to find errors in input file"
    )
    args = parser.parse_args(argv)
    try:
        score = read_score(args.midifile)
        text = convert(score)
    except (OSError, ValueError) as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0