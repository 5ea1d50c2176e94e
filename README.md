# smftools

Small command-line tools for working with Standard MIDI files: dump notes
as a table, encode a file as base64, print a binasc-style text listing and
name the chords in a piece. The package also holds helpers that produce
pieces of SVG for piano-roll pictures (staff lines, clefs, note connectors
and curved note outlines).

## Installation

```
pip install .
```

## Commands

### mid2mtb

Prints every note of a MIDI file as one tab-separated row, preceded by a
comment legend. The columns are start (beats), duration (beats), channel
(from 1), key number, velocity, start (seconds), duration (seconds) and
track (from 1).

```
mid2mtb song.mid
```

### midi2base64

Reads the MIDI file, writes it out again as a Standard MIDI file (format 0
for a single track, format 1 otherwise, with an end-of-track message added
where a track lacks one) and prints those bytes as base64. `-w`/`--width`
wraps the output at the given line length (0, the default, means no
wrapping).

```
midi2base64 -w 76 song.mid
```

### midi2binasc

Prints a text listing of the file: header chunk, then each track with its
byte count and one line per event (variable-length delta time, then the
message bytes). Note messages show their data bytes in decimal, all other
messages in hexadecimal.

```
midi2binasc song.mid
```

From Python, `smftools.binasc.convert(score, type0=True)` joins all
tracks into a single track first.

### midi2chords

Finds every moment where notes with three or more pitch classes start
together (drum channel ignored) and names the chord where it is a known
triad or seventh chord. Each line shows the start and duration in quarter
notes, the twelve pitch classes present and the root and quality.

```
midi2chords song.mid
```

```
0	1:	100010010000:	C	major
1	1:	100001000100:	F	major
2	1:	100010010000:	C	major
3	1:	001001010001:	G	dominant seventh
4	1:	100010010000:	C	major
```

## Library use

```python
from smftools.score import read_score
from smftools.chords import chord_sequence, format_chords

score = read_score("song.mid")
print(format_chords(chord_sequence(score)), end="")
```

- `smftools.score`: `read_score` / `parse_score` load a file into a
  `Score` of `MidiEvent`s with absolute ticks, linked note pairs and
  times in seconds from the tempo map.
- `smftools.rolloptions`: `RollOptions` holds piano-roll drawing
  settings; `parse_shapes`, `parse_percussion_map`, `base12_to_base7`
  and `double_class` are small helpers for them.
- `smftools.staff`: `draw_staves` draws grand-staff lines with optional
  final or double barline and brace line.
- `smftools.clefs`: `draw_clefs` and `draw_brace` draw the clef glyphs
  and the grand-staff brace.
- `smftools.connectors`: `draw_lines` and `line_to_next_note` draw
  straight, curved or rounded lines between consecutive notes of a track.
- `smftools.svgcurves`: `draw_curved_inner` and `draw_curved_outer` draw
  note outlines with curved corners.

## What is not included

There is no command that renders a complete piano-roll SVG file, and no
functions for drawing the note boxes themselves (rectangles, diamonds,
ovals, triangles and the like) or for laying out a whole image. The SVG
helpers above return fragments to be placed inside an image built by the
caller.