from smftools.rolloptions import RollOptions
from smftools.staff import draw_staves, staff_positions


def test_staff_positions_chromatic_and_diatonic():
    chromatic = staff_positions(False)
    assert chromatic == [64.5, 67.5, 71.5, 74.5, 77.5, 43.5, 47.5, 50.5, 53.5, 57.5]
    diatonic = staff_positions(True)
    assert diatonic == [37.5, 39.5, 41.5, 43.5, 45.5, 25.5, 27.5, 29.5, 31.5, 33.5]


def test_plain_staves_have_ten_lines():
    svg = draw_staves(RollOptions(), 12.0)
    assert svg.count("<path") == 10
    assert "M0 64.5 L12 64.5" in svg
    assert "M0 43.5 L12 43.5" in svg
    assert svg.startswith('\t<g class="staff-lines" stroke-width="0.5" stroke="#555555">\n')
    assert svg.endswith("\t</g>\n")


def test_end_space_extends_lines():
    svg = draw_staves(RollOptions(end_space=3.0), 12.0)
    assert "L15 77.5" in svg


def test_final_barline_adds_two_paths():
    plain = draw_staves(RollOptions(), 10.0)
    final = draw_staves(RollOptions(final_barline=True), 10.0)
    assert final.count("<path") == plain.count("<path") + 2
    assert 'stroke="#cccccc" fill="#cccccc"' in final
    assert "M10,43.5 L10,77.5" in final


def test_double_barline_adds_two_lines():
    svg = draw_staves(RollOptions(double_barline=True), 10.0)
    assert svg.count("<path") == 12
    assert "M10,43.5 L10,77.5" in svg


def test_final_barline_takes_precedence_over_double():
    both = draw_staves(RollOptions(final_barline=True, double_barline=True), 10.0)
    final = draw_staves(RollOptions(final_barline=True), 10.0)
    assert both == final


def test_clefs_shift_start_and_brace_adds_line():
    options = RollOptions(clefs=True, brace=True)
    svg = draw_staves(options, 8.0)
    start = format(-4.65 * options.unscale, ".6g")
    assert f"M{start} 64.5 L8 64.5" in svg
    assert f"M{start},43.5 L{start},77.5 z" in svg
    assert svg.count("<path") == 11


def test_diatonic_staff_uses_diatonic_positions():
    svg = draw_staves(RollOptions(diatonic=True), 5.0)
    assert "M0 37.5 L5 37.5" in svg
    assert "64.5" not in svg