"""Note tables in a plain-text column layout for analysis toolboxes."""

from __future__ import annotations

import argparse
import sys

from smftools.score import Score, read_score

_RULE = "%" * 63


def note_rows(score: Score) -> list[tuple]:
    """One row per note-on, in time order, with the eight table columns."""
    tpq = score.ticks_per_quarter
    return [
        (
            event.tick / tpq,
            event.tick_duration() / tpq,
            event.channel() + 1,
            event.key(),
            event.velocity(),
            event.seconds,
            event.duration_seconds(),
            event.track + 1,
        )
        for event in score.merged()
        if event.is_note_on()
    ]


def format_legend(score: Score) -> str:
    lines = [
        _RULE,
        "%% DATA LEGEND                                               %%",
        _RULE,
        f"%%Filename: {score.filename}",
        f"%%Ticks per quarter note: {score.ticks_per_quarter}",
        "%%",
        "%% Meaning of columns:",
        "%%(1) note start in beats (quarter notes).",
        "%%(2) note duration in beats (quarter notes).",
        "%%(3) MIDI channel (indexed from 1).",
        "%%(4) MIDI pitch (60 = C4)",
        "%%(5) MIDI velocity (60 = C4)",
        "%%(6) note start in seconds.",
        "%%(7) note duration in seconds.",
        "%%(8) MIDI file track.",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def _number(value) -> str:
    return format(value, "g")


def format_table(score: Score) -> str:
    """The legend followed by one tab-separated line per note."""
    rows = "".join(
        "\t".join(_number(value) for value in row) + "\n" for row in note_rows(score)
    )
    return format_legend(score) + rows


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="mid2mtb", description="Convert a MIDI file into a note table."
    )
    parser.add_argument("midifile")
    parser.add_argument(
        "--debug", action="store_true", help="debug mode to find errors in input file"
    )
    parser.add_argument(
        "--max",
        type=int,
        default=100000,
        help="maximum number of notes expected in input",
    )
    args = parser.parse_args(argv)
    try:
        score = read_score(args.midifile)
    except (OSError, ValueError) as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_table(score))
    return 0