"""Banjo chord shape library.

This library finds playable chord shapes for any banjo tuning, classifies
them by inversion, and links shapes that repeat up the neck.

Examples
--------
>>> from banjo_shapes import generate_chord_shapes, get_tuning

>>> # Every G major shape in Open G, lowest on the neck first
>>> shapes = generate_chord_shapes("G", "MAJOR", get_tuning("Open G"))
>>> shapes[0].relative_position
'1st Position'
>>> shapes[0].classification.name
'2nd Inversion'

>>> # The "5-fret rule"
>>> from banjo_shapes import calculate_tuning_interval
>>> calculate_tuning_interval(get_tuning("Open G"))
5

>>> # A single chord-diagram voicing
>>> from banjo_shapes import find_chord_voicing
>>> voicing = find_chord_voicing(get_tuning("Plectrum C"), "C", "MAJOR")
>>> [p.fret for p in voicing.positions]
[0, 0, 1, 2]
"""

from banjo_shapes.connectors import (
    calculate_tuning_interval,
    find_shape_connectors,
    get_movable_shape_info,
)
from banjo_shapes.converter import from_pychord, parse_chord_symbol
from banjo_shapes.frequencies import get_shape_frequencies
from banjo_shapes.inversions import (
    INVERSION_CATEGORIES,
    classify_bass,
    filter_shapes_by_inversion,
)
from banjo_shapes.models import (
    ActiveStrings,
    Barre,
    ChordName,
    ChordQuality,
    ChordVoicing,
    Connector,
    InversionCategory,
    MovableShapeInfo,
    NoteFrequency,
    Shape,
    ShapeNote,
    Tuning,
    VoicingPosition,
)
from banjo_shapes.qualities import CHORD_QUALITIES, resolve_quality
from banjo_shapes.shapes import (
    find_shapes,
    generate_chord_shapes,
    generate_chord_shapes_for_symbol,
    to_partial_shapes,
)
from banjo_shapes.strings import resolve_active_strings
from banjo_shapes.tunings import TUNINGS, get_tuning
from banjo_shapes.voicing import find_chord_voicing

__all__ = [
    "CHORD_QUALITIES",
    "INVERSION_CATEGORIES",
    "TUNINGS",
    "ActiveStrings",
    "Barre",
    "ChordName",
    "ChordQuality",
    "ChordVoicing",
    "Connector",
    "InversionCategory",
    "MovableShapeInfo",
    "NoteFrequency",
    "Shape",
    "ShapeNote",
    "Tuning",
    "VoicingPosition",
    "calculate_tuning_interval",
    "classify_bass",
    "filter_shapes_by_inversion",
    "find_chord_voicing",
    "find_shape_connectors",
    "find_shapes",
    "from_pychord",
    "generate_chord_shapes",
    "generate_chord_shapes_for_symbol",
    "get_movable_shape_info",
    "get_shape_frequencies",
    "get_tuning",
    "parse_chord_symbol",
    "resolve_active_strings",
    "resolve_quality",
    "to_partial_shapes",
]
