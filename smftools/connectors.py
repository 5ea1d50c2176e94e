"""Lines that connect consecutive notes of a track in a piano roll."""

from __future__ import annotations

from collections.abc import Sequence

from smftools.rolloptions import RollOptions, base12_to_base7
from smftools.score import MidiEvent, Score

DRUM_CHANNEL = 9
_DASH_WIDTH = 2.25


def _num(value: float) -> str:
    return format(value, ".6g")


def _display_pitch(event: MidiEvent, options: RollOptions) -> int:
    pitch = event.key()
    if event.channel() == DRUM_CHANNEL:
        pitch = options.percussion_map[pitch]
    if options.diatonic:
        pitch = base12_to_base7(pitch)
    return pitch


def _track_has_notes(events: Sequence[MidiEvent], drums: bool) -> bool:
    return any(
        event.is_note_on() and (drums or event.channel() != DRUM_CHANNEL)
        for event in events
    )


def line_to_next_note(events: Sequence[MidiEvent], index: int,
                      options: RollOptions) -> str:
    """A path from the end of a note to the next note starting after it.

    Returns an empty string when there is no following note or the rest
    between the two is longer than the allowed maximum.
    """
    event = events[index]
    p1 = _display_pitch(event, options)
    endtime = event.seconds + event.duration_seconds()
    following = next(
        (e for e in events[index + 1:] if e.is_note_on() and e.seconds >= endtime),
        None,
    )
    if following is None:
        return ""
    p2 = _display_pitch(following, options)
    nextstart = following.seconds
    difference = nextstart - endtime
    if difference > options.max_rest:
        return ""

    ax, ay = endtime, p1 + 0.5
    bx, by = nextstart, p2 + 0.5
    cx, cy = nextstart, p1 + 0.5

    radius = min(options.radius, abs(cx - ax), abs(by - cy))
    rx = radius / options.aspect_ratio
    ry = radius

    if options.radius_lines and options.radius > 0:
        ex, ey = cx - rx, cy
        if ay < by:
            sweep, dy = 1, cy + ry
        else:
            sweep, dy = 0, cy - ry
        path = (
            f" M{_num(ax)} {_num(ay)}"
            f" L{_num(ex)} {_num(ey)}"
            f" A{_num(rx)} {_num(ry)} 0 0 {sweep} {_num(cx)} {_num(dy)}"
            f" L{_num(bx)} {_num(by)}"
        )
    elif options.curve and difference > 0.0:
        path = (
            f" M{_num(ax)},{_num(ay)}"
            f" Q{_num(cx)},{_num(cy)}"
            f" {_num(bx)} {_num(by)}"
        )
    elif difference > 0.0:
        path = (
            f" M{_num(ax)} {_num(ay)}"
            f" L{_num(cx)} {_num(cy)}"
            f" L{_num(bx)} {_num(by)}"
        )
    else:
        path = f" M{_num(cx)} {_num(cy)} L{_num(bx)} {_num(by)}"

    return (
        '\t\t\t<path  vector-effect="non-scaling-stroke"'
        ' stroke-linejoin="round"'
        f' d="{path}" />\n'
    )


def draw_lines(score: Score, hues: Sequence[float], options: RollOptions) -> str:
    """Connecting-line groups for every track with notes, last track first."""
    parts = []
    for index in range(len(score.tracks) - 1, -1, -1):
        events = score.tracks[index]
        if not _track_has_notes(events, options.drums):
            continue
        color = options.staff_color if options.bw else f"hsl({hues[index]:f}, 100%, 75%)"
        head = (
            f'\t\t<g class="note-lines track-{index}"'
            f' fill="none" stroke="{color}"'
        )
        if options.dashed:
            head += (
                f' stroke-dasharray="{_num(_DASH_WIDTH)}"'
                ' vector-effect="non-scaling-stroke"'
            )
        head += f' stroke-width="{_num(options.line_thickness)}">\n'
        parts.append(head)
        parts.extend(
            line_to_next_note(events, position, options)
            for position, event in enumerate(events)
            if event.is_note_on()
        )
        parts.append("\t\t</g>\n")
    return "".join(parts)