"""Data models for banjo-shapes.

This module provides the immutable records passed between the pitch
model, the shape search engine and the presentation layer that draws
or plays the results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

VoicingMode = Literal["full", "partial"]
ShapeTag = Literal["triangle", "rectangle", "diamond"]


@dataclass(frozen=True)
class Tuning:
    """A banjo tuning.

    Parameters
    ----------
    name : str
        Display name (e.g., "Open G").
    strings : tuple[str, ...]
        Open-string pitch names, index 0 first ("string 5" on a
        5-string banjo). Lowercase names sound in the high octave.
    drone_index : int | None
        Index of the short drone string, or None for 4-string banjos.
    drone_start_fret : int | None
        Fret where the drone string meets the neck.
    family : str
        Tuning family used for grouping (e.g., "g-family").
    description : str
        Short description.
    capo_positions : tuple[tuple[int, str], ...]
        (capo fret, resulting key) notes.

    Examples
    --------
    >>> tuning = Tuning(name="Open G", strings=("g", "D", "G", "B", "d"), drone_index=0)
    >>> tuning.string_count
    5
    """

    name: str
    strings: tuple[str, ...]
    drone_index: int | None = None
    drone_start_fret: int | None = None
    family: str = ""
    description: str = ""
    capo_positions: tuple[tuple[int, str], ...] = ()

    @property
    def string_count(self) -> int:
        """Number of strings on the instrument."""
        return len(self.strings)


@dataclass(frozen=True)
class ChordQuality:
    """A chord quality definition.

    Parameters
    ----------
    key : str
        Table key (e.g., "MAJOR", "DOM7").
    name : str
        Display name (e.g., "Dominant 7th").
    symbol : str
        Suffix used in chord names (e.g., "7", "m").
    intervals : tuple[int, ...]
        Semitone offsets from the root, ascending, starting at 0.
    degrees : tuple[str, ...]
        Scale-degree labels parallel to ``intervals``.
    """

    key: str
    name: str
    symbol: str
    intervals: tuple[int, ...]
    degrees: tuple[str, ...]

    @property
    def is_triad(self) -> bool:
        return len(self.intervals) <= 3


@dataclass(frozen=True)
class ChordName:
    """A root note plus a chord quality key.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "G", "Bb").
    quality : str
        Key into the chord quality table (e.g., "MAJOR", "MIN7").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> ChordName(root="G", quality="DOM7").to_symbol()
    'G7'
    """

    root: str
    quality: str
    bass: str | None = None

    def to_symbol(self) -> str:
        """Convert to pychord notation string.

        Returns
        -------
        str
            Chord symbol (e.g., "Gm7", "C/E").
        """
        from banjo_shapes.converter import key_to_pychord_quality

        result = f"{self.root}{key_to_pychord_quality(self.quality)}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        return self.to_symbol()


@dataclass(frozen=True)
class ChordTone:
    """A fret on one string that sounds a chord tone.

    Parameters
    ----------
    fret : int
        Fret number (0 = open).
    pitch_class : int
        Sounding pitch class (0-11).
    interval : int
        Semitones above the chord root.
    interval_index : int
        Index of ``interval`` in the chord quality.
    degree : str
        Scale-degree label (e.g., "1", "♭3").
    note : str
        Sharp spelling of the sounding note.
    """

    fret: int
    pitch_class: int
    interval: int
    interval_index: int
    degree: str
    note: str


@dataclass(frozen=True)
class ActiveStrings:
    """The strings a tuning uses for chord shapes.

    Parameters
    ----------
    primary_notes : tuple[str, ...]
        Open-string names of the active strings, lowest first.
    primary_pitches : tuple[int, ...]
        Open pitch classes parallel to ``primary_notes``.
    primary_indices : tuple[int, ...]
        Tuning string index of each active string.
    drone_index : int | None
        Tuning index of the excluded drone string, if any.
    """

    primary_notes: tuple[str, ...]
    primary_pitches: tuple[int, ...]
    primary_indices: tuple[int, ...]
    drone_index: int | None = None

    @property
    def string_count(self) -> int:
        return len(self.primary_indices)


@dataclass(frozen=True)
class InversionCategory:
    """An inversion classification and how to draw it.

    Parameters
    ----------
    key : str
        Short key ("root", "first", "second", "third").
    name : str
        Display name (e.g., "Root Form", "1st Inversion").
    bass_intervals : frozenset[int]
        Bass intervals (semitones above the root) in this category.
    shape : ShapeTag
        Marker drawn on the fretboard.
    color : str
        Hex display color.
    alias : str | None
        Movable-shape name (e.g., "F Shape"), if any.
    """

    key: str
    name: str
    bass_intervals: frozenset[int]
    shape: ShapeTag
    color: str
    alias: str | None = None


@dataclass(frozen=True)
class ShapeNote:
    """One fretted or open note inside a shape.

    Parameters
    ----------
    string_index : int
        Index into ``Tuning.strings``.
    local_string_index : int
        Index into the active strings.
    fret : int
        Fret number (0 = open).
    pitch_class : int
        Sounding pitch class.
    interval : int
        Semitones above the chord root.
    interval_index : int
        Index of ``interval`` in the chord quality.
    degree : str
        Scale-degree label.
    note : str
        Sharp spelling of the sounding note.
    """

    string_index: int
    local_string_index: int
    fret: int
    pitch_class: int
    interval: int
    interval_index: int
    degree: str
    note: str


@dataclass(frozen=True)
class Shape:
    """A chord shape on adjacent active strings.

    Parameters
    ----------
    notes : tuple[ShapeNote, ...]
        One note per string, lowest string first.
    lowest_fret : int
        Lowest fretted fret, or 0 when every note is open.
    highest_fret : int
        Highest fret in the shape.
    start_string : int
        First active-string index covered.
    end_string : int
        Last active-string index covered.
    classification : InversionCategory
        Inversion of the shape.
    bass_interval : int
        Interval of the lowest-string note.
    bass_degree : str
        Scale degree of the lowest-string note.
    root_note : str
        Requested root note.
    root_pitch : int
        Pitch class of the root.
    quality : ChordQuality
        Chord quality realized by the shape.
    position : int
        1-based ordinal after sorting along the neck.
    is_partial : bool
        True for two-note double stops.
    parent_classification : str | None
        Classification name of the full shape a double stop came from.
    """

    notes: tuple[ShapeNote, ...]
    lowest_fret: int
    highest_fret: int
    start_string: int
    end_string: int
    classification: InversionCategory
    bass_interval: int
    bass_degree: str
    root_note: str
    root_pitch: int
    quality: ChordQuality
    position: int = 0
    is_partial: bool = False
    parent_classification: str | None = None

    @property
    def frets(self) -> tuple[int, ...]:
        return tuple(n.fret for n in self.notes)

    @property
    def degrees(self) -> tuple[str, ...]:
        return tuple(n.degree for n in self.notes)

    @property
    def pitch_classes(self) -> frozenset[int]:
        return frozenset(n.pitch_class for n in self.notes)

    @property
    def span(self) -> int:
        """Fret distance between the lowest and highest fretted notes."""
        fretted = [f for f in self.frets if f > 0]
        return max(fretted) - min(fretted) if fretted else 0

    @property
    def relative_position(self) -> str:
        """Ordinal label such as "1st Position"."""
        from banjo_shapes.inversions import ordinal_position

        return ordinal_position(self.position)


@dataclass(frozen=True)
class Connector:
    """Two shapes separated by exactly the tuning interval.

    Parameters
    ----------
    from_shape : Shape
        Lower shape.
    to_shape : Shape
        Higher shape.
    from_index : int
        Index of ``from_shape`` in the input list.
    to_index : int
        Index of ``to_shape`` in the input list.
    fret_distance : int
        Difference between the shapes' lowest frets.
    tuning_interval : int
        Interval between the two lowest active strings.
    """

    from_shape: Shape
    to_shape: Shape
    from_index: int
    to_index: int
    fret_distance: int
    tuning_interval: int


@dataclass(frozen=True)
class MovableShapeInfo:
    """A shape described as a named shape moved up the neck."""

    alias: str
    offset: int
    description: str


@dataclass(frozen=True)
class VoicingPosition:
    """One string of a chord-diagram voicing.

    Parameters
    ----------
    string_num : int
        Banjo string number (1 = highest-pitched main string).
    fret : int | None
        Fret played, or None when muted.
    note : str | None
        Sounding note, or None when muted.
    degree : str | None
        Scale-degree label, or None when muted.
    is_root : bool
        True when the note is the chord root.
    finger : int | None
        Fretting finger 1-4, or None for open and muted strings.
    """

    string_num: int
    fret: int | None
    note: str | None = None
    degree: str | None = None
    is_root: bool = False
    finger: int | None = None

    @property
    def muted(self) -> bool:
        return self.fret is None


@dataclass(frozen=True)
class Barre:
    """A single finger holding several strings at one fret."""

    fret: int
    from_string: int
    to_string: int


@dataclass(frozen=True)
class ChordVoicing:
    """The best chord-diagram voicing for a chord.

    Parameters
    ----------
    positions : tuple[VoicingPosition, ...]
        One entry per active string, lowest string first.
    base_fret : int
        First fret shown in the diagram.
    barre : Barre | None
        Barre, if one was detected.
    chord_notes : tuple[str, ...]
        Display names of the chord tones.
    num_strings : int
        Number of strings in the diagram.
    """

    positions: tuple[VoicingPosition, ...]
    base_fret: int
    barre: Barre | None
    chord_notes: tuple[str, ...]
    num_strings: int

    @property
    def sounding(self) -> tuple[VoicingPosition, ...]:
        return tuple(p for p in self.positions if not p.muted)


@dataclass(frozen=True)
class NoteFrequency:
    """Sounding pitch of one note of a shape."""

    frequency: float
    note: str
    degree: str
    string_index: int
    midi: int


@dataclass(frozen=True)
class TestResult:
    """Outcome of one validation case."""

    __test__ = False

    test_id: str
    description: str
    passed: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of a validation run."""

    results: tuple[TestResult, ...]

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def total(self) -> int:
        return len(self.results)
