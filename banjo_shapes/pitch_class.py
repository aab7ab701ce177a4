"""Pitch class operations for banjo strings and chord tones.

This module provides pitch class (0-11) arithmetic, note-name
normalization and the octave/frequency helpers used to turn fretted
notes into sounding pitches.
"""

from __future__ import annotations

import re

# Sharp spellings, indexed by pitch class (C=0)
CHROMATIC_SCALE: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Preferred display spelling for the internal sharp names
DISPLAY_NOTE: dict[str, str] = {
    "G#": "Ab",
    "A#": "Bb",
}

SOLFEGE: dict[str, str] = {
    "C": "Do",
    "D": "Re",
    "E": "Mi",
    "F": "Fa",
    "G": "Sol",
    "A": "La",
    "B": "Si",
}

# The 12 selectable keys: (root, display name)
ROOT_KEYS: tuple[tuple[str, str], ...] = (
    ("C", "C"),
    ("C#", "C#/Db"),
    ("D", "D"),
    ("D#", "D#/Eb"),
    ("E", "E"),
    ("F", "F"),
    ("F#", "F#/Gb"),
    ("G", "G"),
    ("G#", "G#/Ab"),
    ("A", "A"),
    ("A#", "A#/Bb"),
    ("B", "B"),
)

# Lowercase string names sound an octave up (the banjo's short 5th string)
HIGH_OCTAVE = 4
DEFAULT_OCTAVE = 3

A4_FREQUENCY = 440.0
A4_MIDI = 69

NOTE_WITH_OCTAVE_RE = re.compile(r"^([A-Ga-g][#b]?)(\d)?$")


def normalize_note(note: str) -> str:
    """Normalize a note name to its canonical sharp spelling.

    Folds case, accepts unicode accidentals and maps flats and
    enharmonics (E#, Cb, ...) onto :data:`CHROMATIC_SCALE`.

    Parameters
    ----------
    note : str
        Note name (e.g., "bb", "F#", "E♭", "d").

    Returns
    -------
    str
        Canonical note name (e.g., "A#", "F#", "D#", "D").

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> normalize_note("bb")
    'A#'
    >>> normalize_note("f#")
    'F#'
    >>> normalize_note("E♭")
    'D#'
    """
    text = note.strip().replace("♯", "#").replace("♭", "b")
    if text:
        text = text[0].upper() + text[1:].lower()
    if text in NOTE_TO_PC:
        return CHROMATIC_SCALE[NOTE_TO_PC[text]]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name in any case (e.g., "C", "f#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("f#")
    6
    >>> note_to_pc("Bb")
    10
    """
    return CHROMATIC_SCALE.index(normalize_note(note))


def pc_to_note(pitch_class: int) -> str:
    """Return the sharp spelling of a pitch class (wraps mod 12)."""
    return CHROMATIC_SCALE[pitch_class % 12]


def note_at_fret(open_note: str, fret: int) -> str:
    """Return the note sounding at ``fret`` on a string tuned to ``open_note``.

    Examples
    --------
    >>> note_at_fret("D", 3)
    'F'
    >>> note_at_fret("g", 5)
    'C'
    """
    return pc_to_note(note_to_pc(open_note) + fret)


def interval_between(lower: int, upper: int) -> int:
    """Semitones from pitch class ``lower`` up to ``upper`` (0-11)."""
    return (upper - lower + 12) % 12


def display_note(note: str) -> str:
    """Convert an internal sharp name to its preferred display spelling.

    Examples
    --------
    >>> display_note("A#")
    'Bb'
    >>> display_note("C#")
    'C#'
    """
    return DISPLAY_NOTE.get(note, note)


def to_solfege(note: str) -> str:
    """Convert a note name to fixed-do solfege, keeping the accidental.

    Examples
    --------
    >>> to_solfege("G")
    'Sol'
    >>> to_solfege("Bb")
    'Sib'
    """
    base = note[:1].upper()
    return SOLFEGE.get(base, base) + note[1:]


def parse_note_with_octave(note: str) -> tuple[str, int] | None:
    """Split a string name into canonical note and octave.

    Banjo tunings write the high short string in lowercase ("g"), so a
    lowercase name without an explicit octave sits in octave 4 and any
    other name defaults to octave 3.

    Parameters
    ----------
    note : str
        Note with optional octave digit (e.g., "G4", "C#3", "g", "D").

    Returns
    -------
    tuple[str, int] | None
        (canonical note, octave), or None if the text is not a note.

    Examples
    --------
    >>> parse_note_with_octave("g")
    ('G', 4)
    >>> parse_note_with_octave("D")
    ('D', 3)
    >>> parse_note_with_octave("C#5")
    ('C#', 5)
    """
    match = NOTE_WITH_OCTAVE_RE.match(note)
    if not match:
        return None

    name, digit = match.group(1), match.group(2)
    if digit is not None:
        octave = int(digit)
    elif name == name.lower():
        octave = HIGH_OCTAVE
    else:
        octave = DEFAULT_OCTAVE
    return normalize_note(name), octave


def note_to_midi(note: str, octave: int) -> int:
    """MIDI note number of ``note`` in ``octave`` (C4 = 60)."""
    return (octave + 1) * 12 + note_to_pc(note)


def midi_to_frequency(midi: int, a4: float = A4_FREQUENCY) -> float:
    """Equal-tempered frequency in Hz of a MIDI note number.

    Examples
    --------
    >>> midi_to_frequency(69)
    440.0
    """
    return a4 * 2 ** ((midi - A4_MIDI) / 12)
