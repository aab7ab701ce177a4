"""Banjo tuning reference data.

Strings are listed from the 5th (short drone) string to the 1st string;
lowercase names sound in the high octave. 4-string tunings have no drone.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from banjo_shapes.models import Tuning

if TYPE_CHECKING:
    from collections.abc import Mapping

# Fret where the short 5th string meets the neck
DRONE_START_FRET = 6


def _five_string(
    name: str,
    strings: str,
    family: str,
    description: str,
    capo: dict[int, str],
) -> Tuning:
    return Tuning(
        name=name,
        strings=tuple(strings.split()),
        drone_index=0,
        drone_start_fret=DRONE_START_FRET,
        family=family,
        description=description,
        capo_positions=tuple(capo.items()),
    )


def _four_string(name: str, strings: str, description: str, capo: dict[int, str]) -> Tuning:
    return Tuning(
        name=name,
        strings=tuple(strings.split()),
        family="other-family",
        description=description,
        capo_positions=tuple(capo.items()),
    )


_TUNINGS: list[Tuning] = [
    # C-based
    _five_string("Minstrel Tuning", "f C F A c", "c-family", "Historical", {0: "Not commonly capoed"}),
    _five_string("Naomi Weiss", "g C G A d", "c-family", "Song-Specific", {2: "Key of D"}),
    _five_string("Little Birdie", "e C G A d", "c-family", "Appalachian", {2: "Key of F# (uncommon)"}),
    _five_string("Hook-and-Line", "g C G c d", "c-family", "Open C Variant", {2: "Key of D", 5: "Key of F"}),
    _five_string("Cackling Hen", "g C G c e", "c-family", "Open C Major", {0: "Key of C", 2: "Key of D"}),
    _five_string("Darling Cora", "g C G c c", "c-family", "Drone Heavy (Triple C)", {2: "Key of D", 5: "Key of F"}),
    _five_string("Double C", "g C G c d", "c-family", "Old-Time Standard", {2: "Key of D", 5: "Key of F"}),
    _five_string("Standard C", "g C G B d", "c-family", "C Tuning for Old-Time", {2: "Key of D", 5: "Key of F"}),
    # D-based
    _five_string("Moonshiner", "g D G A d", "d-family", "Modal/Dark", {2: "Key of A", 5: "Key of C"}),
    _five_string("German War", "g D G A f#", "d-family", "Historical", {2: "Key of A (modal)"}),
    _five_string("Reuben", "g D F# A f#", "d-family", "Song-Specific", {2: "Key of A (modal)"}),
    _five_string("F Tuning", "f D G c d", "d-family", "Cumberland Gap", {2: "Key of G", 5: "Key of Bb"}),
    _five_string("East Virginia", "f F G c d", "d-family", "George Gibson Style", {2: "Key of G", 5: "Key of Bb"}),
    # G-based
    _five_string("Standard (F)", "f C F A c", "g-family", "Historical Reference", {2: "Key of G", 5: "Key of Bb"}),
    _five_string(
        "Open G", "g D G B d", "g-family", "Bluegrass Standard", {2: "Key of A", 5: "Key of C", 7: "Key of D"}
    ),
    _five_string("Open G (Low G)", "G D G B d", "g-family", "Open G with Low 5th", {2: "Key of A", 5: "Key of C"}),
    _five_string("Open A", "a E A C# e", "g-family", "High Tension", {2: "Key of B", 5: "Key of D"}),
    _five_string("G Variant", "g D G A d", "g-family", "Modal G", {2: "Key of A", 5: "Key of C"}),
    _five_string("G Modal (Sawmill)", "g D G c d", "g-family", "Mountain/Modal", {2: "Key of A", 5: "Key of C"}),
    _five_string(
        "Open D", "a D F# A d", "g-family", "Blues/Folk (Graveyard)", {2: "Key of E", 3: "Key of F", 5: "Key of G"}
    ),
    _five_string("D Modal", "a D G A d", "g-family", "Celtic/Medieval", {2: "Key of E (modal)", 5: "Key of G (modal)"}),
    _five_string("D Tuning (Reno)", "a D G B e", "g-family", "Don Reno Style", {2: "Key of E", 5: "Key of G"}),
    # 4-string
    _four_string("Plectrum C", "C G B d", "4-String Plectrum", {0: "Key of C"}),
    _four_string("Tenor (Standard)", "C G d a", "4-String Tenor CGDA", {0: "Key of C/G"}),
]

TUNINGS: Mapping[str, Tuning] = MappingProxyType({t.name: t for t in _TUNINGS})


def get_tuning(name: str) -> Tuning:
    """Look up a tuning by name.

    Parameters
    ----------
    name : str
        Tuning name (e.g., "Open G").

    Returns
    -------
    Tuning
        The tuning.

    Raises
    ------
    ValueError
        If no tuning has this name.

    Examples
    --------
    >>> get_tuning("Open G").strings
    ('g', 'D', 'G', 'B', 'd')
    """
    if name in TUNINGS:
        return TUNINGS[name]
    msg = f"Unknown tuning: {name}"
    raise ValueError(msg)


def tunings_by_family(family: str) -> list[Tuning]:
    """All tunings in a family, in reference order."""
    return [t for t in _TUNINGS if t.family == family]
