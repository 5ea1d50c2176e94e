import re

import pytest

from smftools.svgcurves import draw_curved_inner, draw_curved_outer

PREFIX = '\t\t\t\t<path vector-effect="non-scaling-stroke" d="'


def _flags(text):
    return [int(f) for f in re.findall(r" A \S+ \S+ 0 0 (\d) ", text)]


def _radii(text):
    return re.findall(r" A (\S+) (\S+) 0 0 ", text)


@pytest.mark.parametrize("draw", [draw_curved_inner, draw_curved_outer])
@pytest.mark.parametrize("variant", range(5))
def test_structure(draw, variant):
    out = draw(5.0, 60.0, 10.0, 1.0, variant)
    assert out.startswith(PREFIX + " M ")
    assert out.endswith(' z"/>\n')
    assert len(_flags(out)) == 4


def test_inner_and_outer_base_are_complementary():
    inner = _flags(draw_curved_inner(0, 0, 10, 1))
    outer = _flags(draw_curved_outer(0, 0, 10, 1))
    assert [1 - f for f in inner] == outer


@pytest.mark.parametrize("variant", range(1, 5))
def test_variants_flip_one_corner(variant):
    base_outer = _flags(draw_curved_outer(0, 0, 10, 1, 0))
    base_inner = _flags(draw_curved_inner(0, 0, 10, 1, 0))
    inner = _flags(draw_curved_inner(0, 0, 10, 1, variant))
    outer = _flags(draw_curved_outer(0, 0, 10, 1, variant))
    diff_inner = [i for i, (a, b) in enumerate(zip(inner, base_outer)) if a != b]
    diff_outer = [i for i, (a, b) in enumerate(zip(outer, base_inner)) if a != b]
    assert diff_inner == [variant - 1]
    assert diff_outer == [variant - 1]


def test_radius_capped_by_width():
    wide = _radii(draw_curved_inner(0, 0, 30, 1))
    assert all(rx == "2" for rx, _ in wide)
    narrow = _radii(draw_curved_inner(0, 0, 3, 1))
    assert all(float(rx) == pytest.approx(1.0) for rx, _ in narrow)


def test_vertical_radius_is_quarter_height():
    for _, ry in _radii(draw_curved_outer(0, 0, 30, 4)):
        assert float(ry) == pytest.approx(1.0)


def test_start_and_end_at_same_point():
    out = draw_curved_inner(7, 40, 12, 2)
    d = out[len(PREFIX):-len(' z"/>\n')].split()
    assert (d[1], d[2]) == (d[-2], d[-1])


@pytest.mark.parametrize("draw", [draw_curved_inner, draw_curved_outer])
def test_unknown_variant(draw):
    with pytest.raises(ValueError):
        draw(0, 0, 1, 1, 5)