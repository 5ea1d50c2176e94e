"""Chord identification for simultaneous note attacks in MIDI files."""

from __future__ import annotations

import argparse
import sys
import warnings
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from smftools.score import Score, read_score

MIN_PITCH_CLASSES = 3
DRUM_CHANNEL = 0x09

_ROOT_NAMES = ("C", "C#", "D", "E-", "E", "F", "F#", "G", "A-", "A", "B-", "B")

# Checked in this order; the first matching prototype names the chord.
_PROTOTYPES: tuple[tuple[str, tuple[int, ...]], ...] = (
    ("major", (1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0)),
    ("minor", (1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0)),
    ("diminished", (1, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0)),
    # Symmetric: any of its notes could be named as the root.
    ("augmented", (1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0)),
    ("dominant seventh", (1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0)),
    ("minor seventh", (1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 0)),
    ("major seventh", (1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 1)),
    ("minor-major seventh", (1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1)),
    ("half diminished seventh", (1, 0, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0)),
    ("fully diminished seventh", (1, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 0)),
)


def match_prototype(data: Sequence[int], prototype: Sequence[int]) -> int | None:
    """Pitch class (0 = C .. 11 = B) at which data matches the prototype.

    Each pitch-class count in data must equal 1 where the prototype is set
    and 0 elsewhere.  Returns None when there is no match or when either
    sequence does not hold exactly twelve entries.
    """
    counts = list(data)
    if len(counts) != 12 or len(prototype) != 12:
        return None
    pattern = [1 if value else 0 for value in prototype]
    for root in range(12):
        if counts[root:] + counts[:root] == pattern:
            return root
    return None


@dataclass
class Sonority:
    """Notes attacked together, with their time span and chord label."""

    qstamp: float = 0.0
    qdur: float = 0.0
    pitches: list[int] = field(default_factory=list)
    pcs: list[int] = field(default_factory=lambda: [0] * 12)
    root: str = ""
    quality: str = ""

    def add_note(self, pitch: int) -> None:
        if pitch < 0:
            raise ValueError(f"pitch must not be negative, got {pitch}")
        self.pitches.append(pitch)
        self.pcs[pitch % 12] += 1

    def pitch_class_count(self) -> int:
        """Number of distinct pitch classes present."""
        return sum(1 for count in self.pcs if count)

    def identify(self) -> None:
        """Set root and quality from the first matching chord prototype."""
        for quality, prototype in _PROTOTYPES:
            match = match_prototype(self.pcs, prototype)
            if match is not None:
                self.root = _ROOT_NAMES[match]
                self.quality = quality
                return


def chord_sequence(score: Score) -> list[Sonority]:
    """Identified sonorities of three or more pitch classes, in time order."""
    tpq = score.ticks_per_quarter
    events = score.merged()
    chords: list[Sonority] = []
    current = Sonority()
    for event in events:
        if not event.is_note_on() or event.channel() == DRUM_CHANNEL:
            continue
        qstamp = event.tick / tpq
        if qstamp == current.qstamp:
            current.add_note(event.key())
        elif qstamp > current.qstamp:
            if current.pitch_class_count() >= MIN_PITCH_CLASSES:
                chords.append(current)
            current = Sonority(qstamp=qstamp)
            current.add_note(event.key())
        else:
            warnings.warn(f"Causality violation at qstamp {qstamp:g}")
    if current.pitch_class_count() >= MIN_PITCH_CLASSES:
        chords.append(current)

    end = events[-1].tick / tpq if events else 0.0
    for chord, following in zip(chords, chords[1:]):
        chord.qdur = following.qstamp - chord.qstamp
    if chords:
        chords[-1].qdur = end - chords[-1].qstamp
    for chord in chords:
        chord.identify()
    return chords


def format_chords(chords: Iterable[Sonority]) -> str:
    """One line per chord: time, duration, pitch-class bits, root and quality."""
    lines = []
    for chord in chords:
        bits = "".join("1" if count else "0" for count in chord.pcs)
        lines.append(
            f"{chord.qstamp:g}\t{chord.qdur:g}:\t{bits}:\t{chord.root}\t{chord.quality}\n"
        )
    return "".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="midi2chords", description="Identify chord sequences in a MIDI file."
    )
    parser.add_argument("midifile")
    parser.add_argument(
        "-s", "--sustained", action="store_true", help="consider sustained sonorities"
    )
    args = parser.parse_args(argv)
    try:
        score = read_score(args.midifile)
    except (OSError, ValueError) as exc:
        print(f"Syntax error in file: {args.midifile} ({exc})", file=sys.stderr)
        return 1
    sys.stdout.write(format_chords(chord_sequence(score)))
    return 0