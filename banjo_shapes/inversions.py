"""Inversion classification.

A shape's inversion depends only on the interval of the chord tone on
its lowest string, whatever the chord quality.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banjo_shapes.models import InversionCategory

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from banjo_shapes.models import Shape

ROOT_FORM = InversionCategory(
    key="root",
    name="Root Form",
    bass_intervals=frozenset({0}),
    shape="triangle",
    color="#3366cc",
    alias="F Shape",
)
FIRST_INVERSION = InversionCategory(
    key="first",
    name="1st Inversion",
    bass_intervals=frozenset({3, 4}),
    shape="triangle",
    color="#cc3333",
    alias="D Shape",
)
SECOND_INVERSION = InversionCategory(
    key="second",
    name="2nd Inversion",
    bass_intervals=frozenset({7}),
    shape="rectangle",
    color="#cc9900",
    alias="Barre Shape",
)
THIRD_INVERSION = InversionCategory(
    key="third",
    name="3rd Inversion",
    bass_intervals=frozenset({10, 11}),
    shape="diamond",
    color="#339933",
)

INVERSION_CATEGORIES: tuple[InversionCategory, ...] = (
    ROOT_FORM,
    FIRST_INVERSION,
    SECOND_INVERSION,
    THIRD_INVERSION,
)


def classify_bass(
    bass_interval: int,
    categories: Sequence[InversionCategory] = INVERSION_CATEGORIES,
) -> InversionCategory | None:
    """Classify a shape by the interval of its bass note.

    Parameters
    ----------
    bass_interval : int
        Semitones from the chord root to the lowest-string note.
    categories : Sequence[InversionCategory]
        Categories to match against, first match wins.

    Returns
    -------
    InversionCategory | None
        The inversion, or None when the interval fits no category and
        the shape must be discarded.

    Examples
    --------
    >>> classify_bass(0).name
    'Root Form'
    >>> classify_bass(11).name
    '3rd Inversion'
    >>> classify_bass(1) is None
    True
    """
    for category in categories:
        if bass_interval in category.bass_intervals:
            return category
    return None


def ordinal_position(n: int) -> str:
    """Ordinal position label.

    Examples
    --------
    >>> ordinal_position(1)
    '1st Position'
    >>> ordinal_position(12)
    '12th Position'
    >>> ordinal_position(22)
    '22nd Position'
    """
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix} Position"


def filter_shapes_by_inversion(shapes: list[Shape], inversion_names: Iterable[str] | None) -> list[Shape]:
    """Keep shapes whose classification name is listed.

    An empty or missing list keeps every shape.
    """
    names = set(inversion_names or ())
    if not names:
        return shapes
    return [s for s in shapes if s.classification.name in names]
