"""Chord quality definitions.

The table unites the four chord families used for inversion shapes
(Major, Dominant 7th, Major 7th, Minor 7th) with the extra types offered
by the chord-diagram view.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from banjo_shapes.models import ChordQuality
from banjo_shapes.pitch_class import pc_to_note, display_note, note_to_pc

if TYPE_CHECKING:
    from collections.abc import Mapping


def _quality(key: str, name: str, symbol: str, intervals: list[int], degrees: list[str]) -> ChordQuality:
    return ChordQuality(
        key=key,
        name=name,
        symbol=symbol,
        intervals=tuple(intervals),
        degrees=tuple(degrees),
    )


CHORD_QUALITIES: Mapping[str, ChordQuality] = MappingProxyType(
    {
        "MAJOR": _quality("MAJOR", "Major", "", [0, 4, 7], ["1", "3", "5"]),
        "MINOR": _quality("MINOR", "Minor", "m", [0, 3, 7], ["1", "♭3", "5"]),
        "MIN7": _quality("MIN7", "Minor 7th", "m7", [0, 3, 7, 10], ["1", "♭3", "5", "♭7"]),
        "SIXTH": _quality("SIXTH", "Sixth", "6", [0, 4, 7, 9], ["1", "3", "5", "6"]),
        "DOM7": _quality("DOM7", "Dominant 7th", "7", [0, 4, 7, 10], ["1", "3", "5", "♭7"]),
        "MAJ7": _quality("MAJ7", "Major 7th", "maj7", [0, 4, 7, 11], ["1", "3", "5", "7"]),
        "DIM": _quality("DIM", "Diminished", "dim", [0, 3, 6], ["1", "♭3", "♭5"]),
        "SUS4": _quality("SUS4", "Sus4", "sus4", [0, 5, 7], ["1", "4", "5"]),
        "AUG": _quality("AUG", "Augmented", "aug", [0, 4, 8], ["1", "3", "#5"]),
    }
)

# Alternate keys accepted by resolve_quality
QUALITY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "major": "MAJOR",
        "minor": "MINOR",
        "m7": "MIN7",
        "min7": "MIN7",
        "6": "SIXTH",
        "7": "DOM7",
        "dom7": "DOM7",
        "maj7": "MAJ7",
        "dim": "DIM",
        "sus4": "SUS4",
        "aug": "AUG",
    }
)

# Display grouping for quality pickers
CHORD_QUALITY_GROUPS: tuple[tuple[str, ...], ...] = (
    ("MAJOR", "MINOR", "MIN7"),
    ("SIXTH", "DOM7", "MAJ7"),
    ("DIM",),
    ("SUS4",),
    ("AUG",),
)

# The four families inversion shapes are taught with
INVERSION_FAMILIES: tuple[str, ...] = ("MAJOR", "DOM7", "MAJ7", "MIN7")


def resolve_quality(
    key: str,
    qualities: Mapping[str, ChordQuality] = CHORD_QUALITIES,
) -> ChordQuality | None:
    """Look up a chord quality by key or alias.

    Parameters
    ----------
    key : str
        Table key ("DOM7"), alias ("7", "dom7") or any casing of a key.
    qualities : Mapping[str, ChordQuality]
        Quality table to search.

    Returns
    -------
    ChordQuality | None
        The quality, or None if the key is unknown.

    Examples
    --------
    >>> resolve_quality("7").name
    'Dominant 7th'
    >>> resolve_quality("minor").key
    'MINOR'
    >>> resolve_quality("nope") is None
    True
    """
    if key in qualities:
        return qualities[key]
    if key in QUALITY_ALIASES and QUALITY_ALIASES[key] in qualities:
        return qualities[QUALITY_ALIASES[key]]
    return qualities.get(key.upper())


def chord_pitch_classes(
    root_note: str,
    quality_key: str,
    qualities: Mapping[str, ChordQuality] = CHORD_QUALITIES,
) -> list[int]:
    """Pitch classes of a chord, in interval order.

    Returns an empty list for an unknown root or quality.

    Examples
    --------
    >>> chord_pitch_classes("G", "MAJOR")
    [7, 11, 2]
    >>> chord_pitch_classes("H", "MAJOR")
    []
    """
    quality = resolve_quality(quality_key, qualities)
    if quality is None:
        return []
    try:
        root_pitch = note_to_pc(root_note)
    except ValueError:
        return []
    return [(root_pitch + interval) % 12 for interval in quality.intervals]


def chord_notes(
    root_note: str,
    quality_key: str,
    qualities: Mapping[str, ChordQuality] = CHORD_QUALITIES,
) -> list[str]:
    """Display names of a chord's notes.

    Examples
    --------
    >>> chord_notes("A#", "MAJOR")
    ['Bb', 'D', 'F']
    """
    return [display_note(pc_to_note(pc)) for pc in chord_pitch_classes(root_note, quality_key, qualities)]
