"""Single best voicing for chord diagrams.

Unlike the shape search, a diagram voicing may mute strings and is
chosen by score: low on the neck, compact, with many open and sounding
strings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from banjo_shapes.models import Barre, ChordVoicing, VoicingPosition
from banjo_shapes.pitch_class import note_to_pc
from banjo_shapes.qualities import CHORD_QUALITIES, chord_notes, resolve_quality
from banjo_shapes.shapes import find_chord_tones
from banjo_shapes.strings import resolve_active_strings

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from banjo_shapes.models import ChordQuality, ChordTone, Tuning

logger = logging.getLogger(__name__)

VOICING_MAX_FRET = 12
VOICING_MAX_REACH = 4
MAX_FINGERS = 4
# Widest string-number spread one finger can barre
MAX_BARRE_STRING_SPAN = 3
# Diagrams start at the nut unless the chord sits above this fret
NUT_POSITION_MAX_FRET = 4

Voicing = tuple["ChordTone | None", ...]


def _iter_voicings(
    string_tones: Sequence[Sequence[ChordTone]],
    chord_size: int,
    max_reach: int,
    max_fingers: int,
) -> Iterator[Voicing]:
    """Yield every voicing that sounds all chord tones within the hand limits.

    Each string is muted (None) or plays one of its chord tones; muting
    is tried first, then frets in ascending order.
    """
    num_strings = len(string_tones)

    def explore(index: int, current: Voicing, used: frozenset[int]) -> Iterator[Voicing]:
        fretted = [t.fret for t in current if t is not None and t.fret > 0]
        if len(fretted) > max_fingers:
            return
        if len(fretted) > 1 and max(fretted) - min(fretted) > max_reach:
            return

        if index == num_strings:
            if len(used) == chord_size:
                yield current
            return

        yield from explore(index + 1, (*current, None), used)
        for tone in string_tones[index]:
            yield from explore(index + 1, (*current, tone), used | {tone.pitch_class})

    yield from explore(0, (), frozenset())


def score_voicing(voicing: Voicing) -> int:
    """Score a voicing; lower is better.

    Low positions and tight spans dominate, then open strings and the
    number of sounding strings.
    """
    sounding = [t for t in voicing if t is not None]
    fretted = [t.fret for t in sounding if t.fret > 0]
    min_fret = min(fretted) if fretted else 0
    span = max(fretted) - min_fret if fretted else 0
    open_count = sum(1 for t in sounding if t.fret == 0)
    return min_fret * 100 + span * 50 - open_count * 30 - len(sounding) * 10


def assign_fingers(positions: Sequence[VoicingPosition], max_fingers: int = MAX_FINGERS) -> dict[int, int]:
    """Assign fretting fingers.

    Fretted positions are taken lowest fret first and, at the same fret,
    highest string number first; they get fingers 1, 2, 3, 4 in that
    order (any extra position reuses the last finger).

    Returns
    -------
    dict[int, int]
        Finger per string number.
    """
    fretted = sorted(
        (p for p in positions if p.fret),
        key=lambda p: (p.fret, -p.string_num),
    )
    return {p.string_num: min(i + 1, max_fingers) for i, p in enumerate(fretted)}


def detect_barre(positions: Sequence[VoicingPosition]) -> Barre | None:
    """Find the lowest fret held on two or more nearby strings.

    Returns
    -------
    Barre | None
        The first qualifying fret group, or None.
    """
    groups: dict[int, list[int]] = {}
    for p in positions:
        if p.fret:
            groups.setdefault(p.fret, []).append(p.string_num)

    for fret in sorted(groups):
        string_nums = groups[fret]
        if len(string_nums) < 2:
            continue
        low, high = min(string_nums), max(string_nums)
        if high - low <= MAX_BARRE_STRING_SPAN:
            return Barre(fret=fret, from_string=low, to_string=high)
    return None


def _positions(
    voicing: Voicing,
    quality: ChordQuality,
    root_pitch: int,
    max_fingers: int,
) -> tuple[VoicingPosition, ...]:
    num_strings = len(voicing)
    bare = [
        VoicingPosition(string_num=num_strings - i, fret=None)
        if tone is None
        else VoicingPosition(
            string_num=num_strings - i,
            fret=tone.fret,
            note=tone.note,
            degree=quality.degrees[tone.interval_index],
            is_root=tone.pitch_class == root_pitch,
        )
        for i, tone in enumerate(voicing)
    ]
    fingers = assign_fingers(bare, max_fingers)
    return tuple(
        VoicingPosition(
            string_num=p.string_num,
            fret=p.fret,
            note=p.note,
            degree=p.degree,
            is_root=p.is_root,
            finger=fingers.get(p.string_num),
        )
        for p in bare
    )


def find_chord_voicing(
    tuning: Tuning,
    root_note: str,
    quality_key: str,
    max_fret: int = VOICING_MAX_FRET,
    *,
    max_reach: int = VOICING_MAX_REACH,
    max_fingers: int = MAX_FINGERS,
    qualities: Mapping[str, ChordQuality] = CHORD_QUALITIES,
) -> ChordVoicing | None:
    """Find the best chord-diagram voicing on the main strings.

    Parameters
    ----------
    tuning : Tuning
        The tuning; a 5-string drone is left out.
    root_note : str
        Root note name (e.g., "C", "Eb").
    quality_key : str
        Chord quality key or alias (e.g., "MAJOR", "m7").
    max_fret : int
        Highest fret to consider.
    max_reach : int
        Maximum fret span among fretted notes.
    max_fingers : int
        Maximum number of fretted notes.
    qualities : Mapping[str, ChordQuality]
        Chord quality table.

    Returns
    -------
    ChordVoicing | None
        The lowest-scoring voicing (earliest found on ties), or None if
        the chord is unknown or cannot be played.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> voicing = find_chord_voicing(get_tuning("Open G"), "G", "MAJOR")
    >>> [p.fret for p in voicing.positions]
    [0, 0, 0, 0]
    """
    quality = resolve_quality(quality_key, qualities)
    if quality is None:
        logger.debug("Unknown chord quality %r, no voicing", quality_key)
        return None
    try:
        root_pitch = note_to_pc(root_note)
    except ValueError:
        logger.debug("Unknown root note %r, no voicing", root_note)
        return None

    active = resolve_active_strings(tuning)
    string_tones = find_chord_tones(active, root_pitch, quality, max_fret)
    chord_size = len({(root_pitch + interval) % 12 for interval in quality.intervals})

    best: Voicing | None = None
    best_score = 0
    count = 0
    for voicing in _iter_voicings(string_tones, chord_size, max_reach, max_fingers):
        count += 1
        score = score_voicing(voicing)
        if best is None or score < best_score:
            best, best_score = voicing, score

    logger.debug("%s %s in %s: %d playable voicings", root_note, quality.key, tuning.name, count)
    if best is None:
        return None

    positions = _positions(best, quality, root_pitch, max_fingers)
    fretted = [p.fret for p in positions if p.fret]
    min_fret = min(fretted) if fretted else 1

    return ChordVoicing(
        positions=positions,
        base_fret=min_fret if min_fret > NUT_POSITION_MAX_FRET else 1,
        barre=detect_barre(positions),
        chord_notes=tuple(chord_notes(root_note, quality.key, qualities)),
        num_strings=active.string_count,
    )
