"""Standard MIDI file loading with note pairing and tempo-based timing."""

from __future__ import annotations

import io
import os
from bisect import bisect_right
from collections import defaultdict
from dataclasses import dataclass, field
from itertools import chain
from operator import attrgetter
from typing import BinaryIO, Union

import mido

DEFAULT_TEMPO = 500_000  # microseconds per quarter note (120 bpm)


class MidiFormatError(ValueError):
    """Raised when bytes cannot be read as a Standard MIDI file."""


@dataclass(eq=False)
class MidiEvent:
    """A timed MIDI message with its raw bytes and optional note partner."""

    tick: int
    data: tuple[int, ...]
    track: int = 0
    seconds: float = 0.0
    linked: MidiEvent | None = field(default=None, repr=False)

    @property
    def _status(self) -> int:
        return self.data[0] if self.data else 0

    def is_note_on(self) -> bool:
        return (
            len(self.data) >= 3
            and self._status & 0xF0 == 0x90
            and self.data[2] > 0
        )

    def is_note_off(self) -> bool:
        if len(self.data) < 3:
            return False
        command = self._status & 0xF0
        return command == 0x80 or (command == 0x90 and self.data[2] == 0)

    def is_meta(self) -> bool:
        return self._status == 0xFF

    def _is_tempo(self) -> bool:
        return self.is_meta() and len(self.data) >= 6 and self.data[1] == 0x51

    def _tempo_usec(self) -> int:
        return (self.data[3] << 16) | (self.data[4] << 8) | self.data[5]

    def channel(self) -> int:
        return self._status & 0x0F

    def key(self) -> int:
        return self.data[1]

    def velocity(self) -> int:
        return self.data[2]

    def tick_duration(self) -> int:
        """Ticks between this event and its linked partner, 0 if unlinked."""
        if self.linked is None:
            return 0
        return abs(self.linked.tick - self.tick)

    def duration_seconds(self) -> float:
        """Seconds between this event and its linked partner, 0 if unlinked."""
        if self.linked is None:
            return 0.0
        return abs(self.linked.seconds - self.seconds)


def _link_note_pairs(events: list[MidiEvent]) -> None:
    pending: dict[tuple[int, int], list[MidiEvent]] = defaultdict(list)
    for event in events:
        if event.is_note_on():
            pending[(event.channel(), event.key())].append(event)
        elif event.is_note_off():
            stack = pending.get((event.channel(), event.key()))
            if stack:
                note_on = stack.pop()
                note_on.linked = event
                event.linked = note_on


@dataclass
class Score:
    """Tracks of absolute-tick events with a tempo map for timing."""

    tracks: list[list[MidiEvent]]
    ticks_per_quarter: int
    filename: str = ""
    _tempo_ticks: list[int] = field(init=False, repr=False, default_factory=list)
    _tempo_map: list[tuple[int, float, int]] = field(
        init=False, repr=False, default_factory=list
    )

    def __post_init__(self) -> None:
        if self.ticks_per_quarter <= 0:
            raise ValueError(
                f"ticks per quarter note must be positive, got {self.ticks_per_quarter}"
            )
        for index, events in enumerate(self.tracks):
            events.sort(key=attrgetter("tick"))
            for event in events:
                event.track = index
            _link_note_pairs(events)
        self._build_tempo_map()
        for event in chain.from_iterable(self.tracks):
            event.seconds = self.seconds_at(event.tick)

    def _build_tempo_map(self) -> None:
        self._tempo_map = [(0, 0.0, DEFAULT_TEMPO)]
        self._tempo_ticks = [0]
        tempos = sorted(
            (e for e in chain.from_iterable(self.tracks) if e._is_tempo()),
            key=attrgetter("tick"),
        )
        for event in tempos:
            seconds = self.seconds_at(event.tick)
            self._tempo_map.append((event.tick, seconds, event._tempo_usec()))
            self._tempo_ticks.append(event.tick)

    def seconds_at(self, tick: int) -> float:
        """Convert an absolute tick position into seconds."""
        index = max(bisect_right(self._tempo_ticks, tick) - 1, 0)
        start, seconds, usec = self._tempo_map[index]
        return seconds + (tick - start) * usec / 1_000_000 / self.ticks_per_quarter

    def merged(self) -> list[MidiEvent]:
        """All events of all tracks in one time-ordered list."""
        return sorted(chain.from_iterable(self.tracks), key=attrgetter("tick"))

    def duration_seconds(self) -> float:
        return max((e.seconds for e in chain.from_iterable(self.tracks)), default=0.0)

    def delta_events(self, track: int) -> list[tuple[int, tuple[int, ...]]]:
        """The events of a track as (delta ticks, message bytes) pairs."""
        pairs = []
        previous = 0
        for event in self.tracks[track]:
            pairs.append((event.tick - previous, event.data))
            previous = event.tick
        return pairs


def parse_score(data: bytes, filename: str = "") -> Score:
    """Parse Standard MIDI file bytes into a Score."""
    try:
        midi = mido.MidiFile(file=io.BytesIO(bytes(data)))
    except (OSError, EOFError, ValueError, KeyError, IndexError, TypeError) as exc:
        where = f" from {filename}" if filename else ""
        raise MidiFormatError(f"cannot read MIDI data{where}: {exc}") from exc
    tracks = []
    for index, track in enumerate(midi.tracks):
        tick = 0
        events = []
        for message in track:
            tick += message.time
            events.append(MidiEvent(tick, tuple(message.bytes()), index))
        tracks.append(events)
    return Score(tracks, midi.ticks_per_beat, filename)


def read_score(source: Union[str, os.PathLike, BinaryIO]) -> Score:
    """Read a Score from a path or a binary file object."""
    if hasattr(source, "read"):
        data = source.read()
        name = getattr(source, "name", "")
        return parse_score(data, name if isinstance(name, str) else "")
    path = os.fspath(source)
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_score(data, str(path))