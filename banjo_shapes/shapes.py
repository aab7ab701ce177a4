"""Chord shape search and partial voicings.

This module enumerates every chord shape a tuning offers for a root and
chord quality, classifies each one by inversion, and numbers them by
position along the neck.

Examples
--------
>>> from banjo_shapes.tunings import get_tuning
>>> shapes = generate_chord_shapes("G", "MAJOR", get_tuning("Open G"))
>>> shapes[0].frets, shapes[0].classification.name
((0, 0, 0), '2nd Inversion')
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from banjo_shapes.converter import parse_chord_symbol
from banjo_shapes.inversions import INVERSION_CATEGORIES, classify_bass
from banjo_shapes.models import ChordTone, Shape, ShapeNote
from banjo_shapes.pitch_class import note_to_pc, pc_to_note
from banjo_shapes.qualities import CHORD_QUALITIES, resolve_quality
from banjo_shapes.strings import resolve_active_strings

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from banjo_shapes.models import (
        ActiveStrings,
        ChordQuality,
        InversionCategory,
        Tuning,
        VoicingMode,
    )

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRET = 15
MAX_REACH = 5
MIN_SHAPE_STRINGS = 3
# Four-note chords may drop one tone
MIN_SEVENTH_TONES = 3
THIRD_INTERVALS = frozenset({3, 4})


def find_chord_tones(
    active: ActiveStrings,
    root_pitch: int,
    quality: ChordQuality,
    max_fret: int,
) -> tuple[tuple[ChordTone, ...], ...]:
    """Find every fret on each active string that sounds a chord tone.

    Parameters
    ----------
    active : ActiveStrings
        The strings to scan.
    root_pitch : int
        Pitch class of the chord root.
    quality : ChordQuality
        The chord quality.
    max_fret : int
        Highest fret to scan (inclusive).

    Returns
    -------
    tuple[tuple[ChordTone, ...], ...]
        Chord tones per active string, in fret order.
    """
    chord_pitches = [(root_pitch + interval) % 12 for interval in quality.intervals]

    per_string: list[tuple[ChordTone, ...]] = []
    for open_pitch in active.primary_pitches:
        tones: list[ChordTone] = []
        for fret in range(max_fret + 1):
            pitch = (open_pitch + fret) % 12
            if pitch not in chord_pitches:
                continue
            index = chord_pitches.index(pitch)
            tones.append(
                ChordTone(
                    fret=fret,
                    pitch_class=pitch,
                    interval=quality.intervals[index],
                    interval_index=index,
                    degree=quality.degrees[index],
                    note=pc_to_note(pitch),
                )
            )
        per_string.append(tuple(tones))
    return tuple(per_string)


def iter_tone_combinations(
    string_tones: Sequence[Sequence[ChordTone]],
    start: int,
    end: int,
    max_reach: int,
) -> Iterator[tuple[ChordTone, ...]]:
    """Yield every choice of one chord tone per string in ``start..end``.

    Depth-first, in string then fret order. A branch is cut as soon as
    the span of its fretted notes exceeds ``max_reach``; open strings
    never widen the span.

    Parameters
    ----------
    string_tones : Sequence[Sequence[ChordTone]]
        Chord tones per active string.
    start : int
        First string index (inclusive).
    end : int
        Last string index (inclusive).
    max_reach : int
        Maximum fret span among fretted notes.

    Yields
    ------
    tuple[ChordTone, ...]
        One tone per string, lowest string first.
    """

    def recurse(
        index: int,
        combo: tuple[ChordTone, ...],
        low: int | None,
        high: int,
    ) -> Iterator[tuple[ChordTone, ...]]:
        if index > end:
            yield combo
            return

        for tone in string_tones[index]:
            if tone.fret > 0:
                new_low = tone.fret if low is None else min(low, tone.fret)
                new_high = max(high, tone.fret)
            else:
                new_low, new_high = low, high

            reach = new_high - new_low if new_low is not None else 0
            if reach <= max_reach:
                yield from recurse(index + 1, (*combo, tone), new_low, new_high)

    yield from recurse(start, (), None, 0)


def _lowest_fretted(frets: Sequence[int]) -> int:
    fretted = [f for f in frets if f > 0]
    return min(fretted) if fretted else 0


def _shape_notes(
    tones: Sequence[ChordTone],
    start: int,
    active: ActiveStrings,
) -> tuple[ShapeNote, ...]:
    return tuple(
        ShapeNote(
            string_index=active.primary_indices[start + offset],
            local_string_index=start + offset,
            fret=tone.fret,
            pitch_class=tone.pitch_class,
            interval=tone.interval,
            interval_index=tone.interval_index,
            degree=tone.degree,
            note=tone.note,
        )
        for offset, tone in enumerate(tones)
    )


def number_shapes(shapes: list[Shape]) -> list[Shape]:
    """Sort shapes along the neck and assign 1-based positions.

    Shapes are ordered by lowest fretted fret, then by starting string.
    The sort is stable, so equal shapes keep their search order.
    """
    ordered = sorted(shapes, key=lambda s: (s.lowest_fret, s.start_string))
    return [replace(shape, position=i) for i, shape in enumerate(ordered, start=1)]


def find_shapes(
    root_note: str,
    quality: ChordQuality,
    tuning: Tuning,
    max_fret: int = DEFAULT_MAX_FRET,
    *,
    max_reach: int = MAX_REACH,
    categories: Sequence[InversionCategory] = INVERSION_CATEGORIES,
) -> list[Shape]:
    """Find all full chord shapes on adjacent active strings.

    Every contiguous run of at least three active strings (or all of
    them, when fewer exist) is searched. A combination is kept when it
    sounds every tone of a triad, or at least three tones of a
    four-note chord, and its bass note has an inversion.

    Parameters
    ----------
    root_note : str
        Root note name (e.g., "F", "C#", "bb").
    quality : ChordQuality
        The chord quality.
    tuning : Tuning
        The tuning.
    max_fret : int
        Highest fret a shape may use.
    max_reach : int
        Maximum fret span among fretted notes.
    categories : Sequence[InversionCategory]
        Inversion categories used for classification.

    Returns
    -------
    list[Shape]
        Shapes sorted by position, numbered from 1. Empty when the root
        note is not recognized.
    """
    try:
        root_pitch = note_to_pc(root_note)
    except ValueError:
        logger.debug("Unknown root note %r, no shapes", root_note)
        return []

    active = resolve_active_strings(tuning)
    num_strings = active.string_count
    min_strings = min(MIN_SHAPE_STRINGS, num_strings)
    string_tones = find_chord_tones(active, root_pitch, quality, max_fret)

    chord_pitches = {(root_pitch + interval) % 12 for interval in quality.intervals}
    min_required = len(chord_pitches) if quality.is_triad else MIN_SEVENTH_TONES

    shapes: list[Shape] = []
    candidates = 0
    for start in range(num_strings):
        for end in range(start + min_strings - 1, num_strings):
            for combo in iter_tone_combinations(string_tones, start, end, max_reach):
                candidates += 1
                covered = {t.pitch_class for t in combo} & chord_pitches
                if len(covered) < min_required:
                    continue

                bass = combo[0]
                classification = classify_bass(bass.interval, categories)
                if classification is None:
                    continue

                frets = [t.fret for t in combo]
                highest_fret = max(frets)
                if highest_fret > max_fret:
                    continue

                shapes.append(
                    Shape(
                        notes=_shape_notes(combo, start, active),
                        lowest_fret=_lowest_fretted(frets),
                        highest_fret=highest_fret,
                        start_string=start,
                        end_string=end,
                        classification=classification,
                        bass_interval=bass.interval,
                        bass_degree=bass.degree,
                        root_note=root_note,
                        root_pitch=root_pitch,
                        quality=quality,
                    )
                )

    logger.debug(
        "%s %s in %s: %d candidates, %d shapes",
        root_note,
        quality.key,
        tuning.name,
        candidates,
        len(shapes),
    )
    return number_shapes(shapes)


def to_partial_shapes(
    full_shapes: Sequence[Shape],
    categories: Sequence[InversionCategory] = INVERSION_CATEGORIES,
) -> list[Shape]:
    """Break full shapes into adjacent-string double stops.

    A pair is kept only if it contains the root or the third. Pairs that
    repeat the same strings and frets are kept once.

    Parameters
    ----------
    full_shapes : Sequence[Shape]
        Full shapes, usually from :func:`find_shapes`.
    categories : Sequence[InversionCategory]
        Inversion categories used for classification.

    Returns
    -------
    list[Shape]
        Two-note shapes sorted by position and numbered from 1.
    """
    partials: list[Shape] = []
    seen: set[tuple[int, int, int, int]] = set()

    for shape in full_shapes:
        for lower, upper in zip(shape.notes, shape.notes[1:]):
            pair = (lower, upper)
            if not any(n.interval == 0 or n.interval in THIRD_INTERVALS for n in pair):
                continue

            key = (lower.string_index, lower.fret, upper.string_index, upper.fret)
            if key in seen:
                continue
            seen.add(key)

            classification = classify_bass(lower.interval, categories)
            if classification is None:
                continue

            frets = [lower.fret, upper.fret]
            partials.append(
                Shape(
                    notes=pair,
                    lowest_fret=_lowest_fretted(frets),
                    highest_fret=max(frets),
                    start_string=lower.local_string_index,
                    end_string=upper.local_string_index,
                    classification=classification,
                    bass_interval=lower.interval,
                    bass_degree=lower.degree,
                    root_note=shape.root_note,
                    root_pitch=shape.root_pitch,
                    quality=shape.quality,
                    is_partial=True,
                    parent_classification=shape.classification.name,
                )
            )

    return number_shapes(partials)


def generate_chord_shapes(
    root_note: str,
    quality_key: str,
    tuning: Tuning,
    voicing_mode: VoicingMode = "full",
    max_fret: int = DEFAULT_MAX_FRET,
    *,
    max_reach: int = MAX_REACH,
    qualities: Mapping[str, ChordQuality] = CHORD_QUALITIES,
    categories: Sequence[InversionCategory] = INVERSION_CATEGORIES,
) -> list[Shape]:
    """Generate chord shapes for a root, quality key and tuning.

    Parameters
    ----------
    root_note : str
        Root note name (e.g., "G", "Bb").
    quality_key : str
        Chord quality key or alias (e.g., "MAJOR", "DOM7", "m7").
    tuning : Tuning
        The tuning.
    voicing_mode : VoicingMode
        "full" for chord shapes, "partial" for double stops.
    max_fret : int
        Highest fret to search.
    max_reach : int
        Maximum fret span among fretted notes.
    qualities : Mapping[str, ChordQuality]
        Chord quality table.
    categories : Sequence[InversionCategory]
        Inversion categories used for classification.

    Returns
    -------
    list[Shape]
        Numbered shapes; empty for an unknown root or quality.
    """
    quality = resolve_quality(quality_key, qualities)
    if quality is None:
        logger.debug("Unknown chord quality %r, no shapes", quality_key)
        return []

    full_shapes = find_shapes(
        root_note,
        quality,
        tuning,
        max_fret,
        max_reach=max_reach,
        categories=categories,
    )
    if voicing_mode == "partial":
        return to_partial_shapes(full_shapes, categories)
    return full_shapes


def generate_chord_shapes_for_symbol(
    chord_str: str,
    tuning: Tuning,
    voicing_mode: VoicingMode = "full",
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[Shape]:
    """Generate chord shapes from a chord symbol such as "G7" or "Bbm".

    Slash basses are ignored; the bass of each shape is whatever chord
    tone lands on its lowest string.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> shapes = generate_chord_shapes_for_symbol("G7", get_tuning("Open G"))
    >>> shapes[0].quality.key
    'DOM7'
    """
    chord = parse_chord_symbol(chord_str)
    if chord is None:
        logger.debug("Unparsable chord symbol %r, no shapes", chord_str)
        return []
    return generate_chord_shapes(chord.root, chord.quality, tuning, voicing_mode, max_fret)
