"""Sounding pitches of a chord shape.

Converts each note of a shape to a MIDI number and an equal-tempered
frequency, for an audio player to render.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banjo_shapes.models import NoteFrequency
from banjo_shapes.pitch_class import A4_FREQUENCY, midi_to_frequency, note_to_midi, parse_note_with_octave
from banjo_shapes.strings import resolve_active_strings

if TYPE_CHECKING:
    from banjo_shapes.models import Shape, Tuning


def get_shape_frequencies(shape: Shape, tuning: Tuning, a4: float = A4_FREQUENCY) -> list[NoteFrequency]:
    """Frequencies of a shape's notes, lowest string first.

    Parameters
    ----------
    shape : Shape
        The chord shape.
    tuning : Tuning
        The tuning the shape was generated for.
    a4 : float
        Reference pitch of A4 in Hz.

    Returns
    -------
    list[NoteFrequency]
        One entry per note whose open string has a parsable name.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> from banjo_shapes.shapes import generate_chord_shapes
    >>> tuning = get_tuning("Open G")
    >>> shape = generate_chord_shapes("G", "MAJOR", tuning)[0]
    >>> [f.midi for f in get_shape_frequencies(shape, tuning)]
    [50, 55, 59]
    """
    active = resolve_active_strings(tuning)

    frequencies: list[NoteFrequency] = []
    for note in shape.notes:
        parsed = parse_note_with_octave(active.primary_notes[note.local_string_index])
        if parsed is None:
            continue
        open_note, octave = parsed
        midi = note_to_midi(open_note, octave) + note.fret
        frequencies.append(
            NoteFrequency(
                frequency=midi_to_frequency(midi, a4),
                note=note.note,
                degree=note.degree,
                string_index=note.string_index,
                midi=midi,
            )
        )
    return frequencies
