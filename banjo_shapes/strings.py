"""Active-string resolution.

Chord shapes are fingered on the main strings only; the short 5th
string of a 5-string banjo is a drone and never takes part.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banjo_shapes.models import ActiveStrings
from banjo_shapes.pitch_class import note_to_pc, parse_note_with_octave

if TYPE_CHECKING:
    from banjo_shapes.models import Tuning


def string_pitch_class(open_note: str) -> int:
    """Pitch class of an open string name such as "g", "D" or "C#3".

    Raises
    ------
    ValueError
        If the string name is not a note.
    """
    parsed = parse_note_with_octave(open_note)
    if parsed is None:
        msg = f"Unknown string note: {open_note}"
        raise ValueError(msg)
    return note_to_pc(parsed[0])


def resolve_active_strings(tuning: Tuning) -> ActiveStrings:
    """Determine which strings of a tuning are used for chord shapes.

    A 5-string tuning whose drone is string index 0 uses strings 1-4.
    Any other tuning, including one whose drone flag does not match its
    string count, uses every string.

    Parameters
    ----------
    tuning : Tuning
        The tuning to resolve.

    Returns
    -------
    ActiveStrings
        Active open notes, pitch classes and tuning indices, lowest first.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> active = resolve_active_strings(get_tuning("Open G"))
    >>> active.primary_indices
    (1, 2, 3, 4)
    >>> active.primary_pitches
    (2, 7, 11, 2)
    """
    if tuning.drone_index == 0 and tuning.string_count == 5:
        indices = tuple(range(1, 5))
        drone_index: int | None = 0
    else:
        indices = tuple(range(tuning.string_count))
        drone_index = None

    notes = tuple(tuning.strings[i] for i in indices)
    return ActiveStrings(
        primary_notes=notes,
        primary_pitches=tuple(string_pitch_class(n) for n in notes),
        primary_indices=indices,
        drone_index=drone_index,
    )
