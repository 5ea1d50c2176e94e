"""Staff lines and barlines behind a piano roll."""

from __future__ import annotations

from smftools.rolloptions import RollOptions

_TREBLE_CHROMATIC = (64.5, 67.5, 71.5, 74.5, 77.5)
_BASS_CHROMATIC = (43.5, 47.5, 50.5, 53.5, 57.5)
_TREBLE_DIATONIC = (37.5, 39.5, 41.5, 43.5, 45.5)
_BASS_DIATONIC = (25.5, 27.5, 29.5, 31.5, 33.5)
_CLEF_OFFSET = -4.65
_BAR_COLOR = "#cccccc"


def _num(value: float) -> str:
    return format(value, ".6g")


def staff_positions(diatonic: bool = False) -> list[float]:
    """Vertical positions of the treble then bass staff lines."""
    if diatonic:
        return [*_TREBLE_DIATONIC, *_BASS_DIATONIC]
    return [*_TREBLE_CHROMATIC, *_BASS_CHROMATIC]


def draw_staves(options: RollOptions, total_duration: float) -> str:
    """A group of grand-staff lines spanning the piece, with optional barlines."""
    positions = staff_positions(options.diatonic)
    unscale = options.unscale
    parts = [
        '\t<g class="staff-lines"'
        f' stroke-width="{_num(options.staff_thickness)}"'
        f' stroke="{options.staff_color}">\n'
    ]
    start = _CLEF_OFFSET * unscale if options.clefs else 0.0
    endx = total_duration + options.end_space
    for pos in positions:
        parts.append(
            '\t\t<path vector-effect="non-scaling-stroke"'
            f' d="M{_num(start)} {_num(pos)} L{_num(endx)} {_num(pos)}" />\n'
        )
    top = max(positions)
    bottom = min(positions)
    thickness = 0.5 * unscale
    if options.final_barline:
        inner = endx - thickness
        parts.append(
            f'\t\t<path stroke="{_BAR_COLOR}" fill="{_BAR_COLOR}"'
            f' d="M{_num(endx)},{_num(bottom)}'
            f" L{_num(endx)},{_num(top)}"
            f" L{_num(inner)},{_num(top)}"
            f" L{_num(inner)},{_num(bottom)}"
            ' z"/>\n'
        )
        thin = endx - thickness - thickness / 2.0
        parts.append(
            f'\t\t<path stroke="{options.staff_color}" fill="{options.staff_color}"'
            f' d="M{_num(thin)},{_num(bottom)} L{_num(thin)},{_num(top)}"/>\n'
        )
    elif options.double_barline:
        for xpos in (endx - thickness, endx):
            parts.append(
                '\t\t<path vector-effect="non-scaling-stroke"'
                f' d="M{_num(xpos)},{_num(bottom)} L{_num(xpos)},{_num(top)}"/>\n'
            )
    if options.brace:
        parts.append(
            '\t\t<path vector-effect="non-scaling-stroke"'
            f' d="M{_num(start)},{_num(bottom)} L{_num(start)},{_num(top)} z"/>\n'
        )
    parts.append("\t</g>\n")
    return "".join(parts)