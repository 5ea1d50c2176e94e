import mido
import pytest

from smftools.chords import (
    Sonority,
    chord_sequence,
    format_chords,
    main,
    match_prototype,
)
from smftools.score import MidiEvent, Score

CHORDS = [
    (0, (60, 64, 67)),
    (100, (60, 65, 69)),
    (200, (60, 64, 67)),
    (300, (59, 62, 65, 67)),
    (400, (60, 64, 67)),
]

EXPECTED = (
    "0\t1:\t100010010000:\tC\tmajor\n"
    "1\t1:\t100001000100:\tF\tmajor\n"
    "2\t1:\t100010010000:\tC\tmajor\n"
    "3\t1:\t001001010001:\tG\tdominant seventh\n"
    "4\t1:\t100010010000:\tC\tmajor\n"
)


def _score(chords=CHORDS, channel=0, length=100):
    events = []
    for tick, keys in chords:
        events.extend(MidiEvent(tick, (0x90 | channel, key, 60)) for key in keys)
        events.extend(
            MidiEvent(tick + length, (0x90 | channel, key, 0)) for key in keys
        )
    end = max(tick for tick, _ in chords) + length
    events.append(MidiEvent(end, (0xFF, 0x2F, 0x00)))
    return Score([events], 100)


def _write_midi(path):
    midi = mido.MidiFile(ticks_per_beat=100)
    track = mido.MidiTrack()
    midi.tracks.append(track)
    for _, keys in CHORDS:
        for key in keys:
            track.append(mido.Message("note_on", note=key, velocity=60, time=0))
        for index, key in enumerate(keys):
            track.append(
                mido.Message("note_on", note=key, velocity=0, time=100 if index == 0 else 0)
            )
    track.append(mido.MetaMessage("end_of_track", time=0))
    midi.save(str(path))


def test_worked_example_output():
    assert format_chords(chord_sequence(_score())) == EXPECTED


def test_sequence_roots_and_qualities():
    chords = chord_sequence(_score())
    assert [(c.root, c.quality) for c in chords] == [
        ("C", "major"),
        ("F", "major"),
        ("C", "major"),
        ("G", "dominant seventh"),
        ("C", "major"),
    ]


def test_durations_fill_time_to_next_chord():
    chords = chord_sequence(_score())
    for chord, following in zip(chords, chords[1:]):
        assert chord.qstamp + chord.qdur == following.qstamp


def test_match_prototype_returns_root():
    c_major = [1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0]
    assert match_prototype(c_major, c_major) == 0
    g_seventh = [0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 0, 1]
    dominant = [1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0]
    assert match_prototype(g_seventh, dominant) == 7


def test_match_prototype_rejects_wrong_sizes_and_mismatch():
    major = [1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0]
    assert match_prototype([1, 0, 1], major) is None
    assert match_prototype(major, major[:11]) is None
    assert match_prototype([1] * 12, major) is None


def test_doubled_pitch_class_is_not_matched():
    sonority = Sonority()
    for pitch in (60, 72, 64, 67):
        sonority.add_note(pitch)
    sonority.identify()
    assert sonority.root == ""
    assert sonority.quality == ""


def test_add_note_and_count():
    sonority = Sonority()
    for pitch in (60, 72, 64):
        sonority.add_note(pitch)
    assert sonority.pitches == [60, 72, 64]
    assert sonority.pcs[0] == 2
    assert sonority.pitch_class_count() == 2


def test_add_note_rejects_negative_pitch():
    with pytest.raises(ValueError):
        Sonority().add_note(-1)


def test_minor_chord_identified():
    sonority = Sonority()
    for pitch in (57, 60, 64):
        sonority.add_note(pitch)
    sonority.identify()
    assert (sonority.root, sonority.quality) == ("A", "minor")


def test_drum_channel_ignored():
    assert chord_sequence(_score(channel=9)) == []


def test_two_note_sonorities_dropped():
    chords = chord_sequence(_score(chords=[(0, (60, 64)), (100, (60, 64, 67))]))
    assert len(chords) == 1
    assert chords[0].qstamp == 1.0


def test_main_prints_chords(tmp_path, capsys):
    path = tmp_path / "chordtest.mid"
    _write_midi(path)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.mid")]) == 1