import base64

import pytest

from smftools.b64 import encode_base64, main
from smftools.score import parse_score


def _vlq(value):
    out = [value & 0x7F]
    value >>= 7
    while value:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(out))


def _track(*events):
    body = b"".join(_vlq(d) + bytes(m) for d, m in events) + b"\x00\xff\x2f\x00"
    return b"MTrk" + len(body).to_bytes(4, "big") + body


def _smf(tpq, *tracks):
    fmt = 0 if len(tracks) == 1 else 1
    return (
        b"MThd"
        + (6).to_bytes(4, "big")
        + fmt.to_bytes(2, "big")
        + len(tracks).to_bytes(2, "big")
        + tpq.to_bytes(2, "big")
        + b"".join(tracks)
    )


DATA = _smf(
    120,
    _track((0, (0x90, 60, 90)), (120, (0x80, 60, 0))),
    _track((60, (0x91, 67, 70)), (200, (0x81, 67, 0))),
)


def test_known_value():
    assert encode_base64(b"MThd") == "TVRoZA=="


def test_unwrapped_round_trip():
    text = encode_base64(DATA)
    assert "\n" not in text
    assert base64.b64decode(text) == DATA


@pytest.mark.parametrize("width", [1, 4, 16, 76])
def test_wrapped_lines(width):
    text = encode_base64(DATA, width)
    lines = text.split("\n")
    assert all(len(line) == width for line in lines[:-1])
    assert 0 < len(lines[-1]) <= width
    assert base64.b64decode("".join(lines)) == DATA


def test_negative_width_does_not_wrap():
    assert encode_base64(DATA, -3) == encode_base64(DATA)


def _notes(score):
    return [(e.tick, e.data) for e in score.merged() if not e.is_meta()]


def test_main_round_trips_file(tmp_path, capsys):
    path = tmp_path / "song.mid"
    path.write_bytes(DATA)
    assert main([str(path)]) == 0
    decoded = base64.b64decode(capsys.readouterr().out.strip())
    assert decoded.startswith(b"MThd")
    assert _notes(parse_score(decoded)) == _notes(parse_score(DATA))


def test_main_wraps_output(tmp_path, capsys):
    path = tmp_path / "song.mid"
    path.write_bytes(DATA)
    assert main(["-w", "20", str(path)]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 20 for line in lines)


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "none.mid")]) == 1