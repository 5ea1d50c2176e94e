"""Base64 export of Standard MIDI files."""

from __future__ import annotations

import argparse
import base64
import struct
import sys

from smftools.score import Score, read_score

_END_OF_TRACK = b"\x00\xff\x2f\x00"


def encode_base64(data: bytes, width: int = 0) -> str:
    """Base64 text of the bytes, wrapped every width characters if width > 0."""
    text = base64.b64encode(bytes(data)).decode("ascii")
    if width <= 0:
        return text
    return "\n".join(text[start:start + width] for start in range(0, len(text), width))


def _vlv(value: int) -> bytes:
    out = [value & 0x7F]
    value >>= 7
    while value:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(out))


def _event_bytes(data: tuple[int, ...]) -> bytes:
    if data and data[0] == 0xF0:
        return b"\xf0" + _vlv(len(data) - 1) + bytes(data[1:])
    return bytes(data)


def _smf_bytes(score: Score) -> bytes:
    """Serialize a Score as a Standard MIDI file."""
    fmt = 0 if len(score.tracks) == 1 else 1
    chunks = [
        b"MThd"
        + struct.pack(">IHHH", 6, fmt, len(score.tracks), score.ticks_per_quarter)
    ]
    for index, events in enumerate(score.tracks):
        body = b"".join(
            _vlv(delta) + _event_bytes(data) for delta, data in score.delta_events(index)
        )
        if not events or tuple(events[-1].data[:2]) != (0xFF, 0x2F):
            body += _END_OF_TRACK
        chunks.append(b"MTrk" + struct.pack(">I", len(body)) + body)
    return b"".join(chunks)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="midi2base64", description="Print a MIDI file as base64 text."
    )
    parser.add_argument("midifile")
    parser.add_argument(
        "-w", "--width", type=int, default=0, help="line-wrap length for base-64 output"
    )
    args = parser.parse_args(argv)
    try:
        score = read_score(args.midifile)
    except (OSError, ValueError) as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(encode_base64(_smf_bytes(score), args.width) + "\n")
    return 0