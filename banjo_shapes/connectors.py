"""Shape connectors and movable-shape descriptions.

On a banjo the same chord shape recurs a fixed number of frets up the
neck, set by the interval between the two lowest main strings (five
frets in Open G). Connectors link shapes that far apart so a player can
slide from one to the next.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banjo_shapes.models import Connector, MovableShapeInfo
from banjo_shapes.pitch_class import interval_between
from banjo_shapes.strings import resolve_active_strings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from banjo_shapes.models import Shape, Tuning


def calculate_tuning_interval(tuning: Tuning) -> int:
    """Semitones from the lowest active string up to the next one.

    Parameters
    ----------
    tuning : Tuning
        The tuning.

    Returns
    -------
    int
        Interval in semitones (0-11), or 0 with fewer than two active
        strings.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> calculate_tuning_interval(get_tuning("Open G"))
    5
    >>> calculate_tuning_interval(get_tuning("Double C"))
    7
    """
    pitches = resolve_active_strings(tuning).primary_pitches
    if len(pitches) < 2:
        return 0
    return interval_between(pitches[0], pitches[1])


def find_shape_connectors(shapes: Sequence[Shape], tuning: Tuning) -> list[Connector]:
    """Find pairs of shapes exactly one tuning interval apart.

    Parameters
    ----------
    shapes : Sequence[Shape]
        Shapes, usually sorted by position.
    tuning : Tuning
        The tuning the shapes were generated for.

    Returns
    -------
    list[Connector]
        One connector per ordered pair (i < j) whose lowest frets differ
        by exactly the tuning interval.
    """
    tuning_interval = calculate_tuning_interval(tuning)
    connectors: list[Connector] = []

    for i, current in enumerate(shapes):
        for j in range(i + 1, len(shapes)):
            following = shapes[j]
            fret_distance = following.lowest_fret - current.lowest_fret
            if fret_distance == tuning_interval and fret_distance > 0:
                connectors.append(
                    Connector(
                        from_shape=current,
                        to_shape=following,
                        from_index=i,
                        to_index=j,
                        fret_distance=fret_distance,
                        tuning_interval=tuning_interval,
                    )
                )

    return connectors


def get_movable_shape_info(shape: Shape) -> MovableShapeInfo | None:
    """Describe a shape as a named movable shape plus a fret offset.

    Returns None when the shape's inversion has no named shape.

    Examples
    --------
    >>> from banjo_shapes.tunings import get_tuning
    >>> from banjo_shapes.shapes import generate_chord_shapes
    >>> shapes = generate_chord_shapes("G", "MAJOR", get_tuning("Open G"))
    >>> get_movable_shape_info(shapes[0]).description
    'Barre Shape'
    """
    alias = shape.classification.alias
    if not alias:
        return None

    offset = shape.lowest_fret
    if offset == 0:
        return MovableShapeInfo(alias=alias, offset=0, description=alias)

    unit = "Fret" if offset == 1 else "Frets"
    return MovableShapeInfo(alias=alias, offset=offset, description=f"{alias} + {offset} {unit}")
