"""SVG note outlines with curved corner cut-outs or bulges."""

from __future__ import annotations

_PATH_OPEN = '\t\t\t\t<path vector-effect="non-scaling-stroke" d="'
_PATH_CLOSE = '"/>\n'
_BEVEL = 2.0

# Sweep flags for the four corner arcs, per variant.
_INNER_FLAGS = {
    0: (1, 1, 1, 1),
    1: (1, 0, 0, 0),
    2: (0, 1, 0, 0),
    3: (0, 0, 1, 0),
    4: (0, 0, 0, 1),
}
_OUTER_FLAGS = {
    0: (0, 0, 0, 0),
    1: (0, 1, 1, 1),
    2: (1, 0, 1, 1),
    3: (1, 1, 0, 1),
    4: (1, 1, 1, 0),
}


def _num(value: float) -> str:
    return format(value, ".6g")


def _pt(x: float, y: float) -> str:
    return f"{_num(x)} {_num(y)}"


def _corner_path(x: float, y: float, width: float, height: float, flags) -> str:
    h, w = height, width
    x2, y2 = x + w, y + h
    d = _BEVEL if _BEVEL <= w / 3 else w / 3
    radii = f"{_num(d)} {_num(h / 4)}"
    low, high = y + h / 4.0, y + h * 3.0 / 4.0
    f1, f2, f3, f4 = flags
    body = (
        f" M {_pt(x, low)}"
        f" L {_pt(x, high)}"
        f" A {radii} 0 0 {f1} {_pt(x + d, y2)}"
        f" L {_pt(x2 - d, y2)}"
        f" A {radii} 0 0 {f2} {_pt(x2, high)}"
        f" L {_pt(x2, high)}"
        f" L {_pt(x2, low)}"
        f" A {radii} 0 0 {f3} {_pt(x2 - d, y)}"
        f" L {_pt(x2 - d, y)}"
        f" L {_pt(x + d, y)}"
        f" A {radii} 0 0 {f4} {_pt(x, low)}"
        " z"
    )
    return _PATH_OPEN + body + _PATH_CLOSE


def _flags(table: dict, variant: int, kind: str):
    try:
        return table[variant]
    except (KeyError, TypeError):
        raise ValueError(f"unknown {kind} variant: {variant!r}") from None


def draw_curved_inner(x: float, y: float, width: float, height: float,
                      variant: int = 0) -> str:
    """Box with curved corners; variant 0 curves all, 1-4 flip one corner."""
    return _corner_path(x, y, width, height, _flags(_INNER_FLAGS, variant, "curved-inner"))


def draw_curved_outer(x: float, y: float, width: float, height: float,
                      variant: int = 0) -> str:
    """Box with outward corners; variant 0 for all, 1-4 flip one corner."""
    return _corner_path(x, y, width, height, _flags(_OUTER_FLAGS, variant, "curved-outer"))