"""Chord symbol conversion.

This module maps pychord's chord symbols (e.g., "Gm7") onto the keys of
the chord quality table (e.g., G + "MIN7") and back.
"""

from banjo_shapes.models import ChordName


def _normalize_bass(bass: str | None) -> str | None:
    """Normalize bass note, converting empty strings to None."""
    return bass if bass else None


# Mapping from pychord quality names to chord quality keys
PYCHORD_TO_QUALITY_KEY: dict[str, str] = {
    "": "MAJOR",
    "maj": "MAJOR",
    "m": "MINOR",
    "min": "MINOR",
    "m7": "MIN7",
    "min7": "MIN7",
    "6": "SIXTH",
    "7": "DOM7",
    "maj7": "MAJ7",
    "M7": "MAJ7",
    "dim": "DIM",
    "sus4": "SUS4",
    "sus": "SUS4",
    "aug": "AUG",
    "+": "AUG",
}

# Reverse mapping from chord quality keys to pychord quality
QUALITY_KEY_TO_PYCHORD: dict[str, str] = {
    "MAJOR": "",
    "MINOR": "m",
    "MIN7": "m7",
    "SIXTH": "6",
    "DOM7": "7",
    "MAJ7": "maj7",
    "DIM": "dim",
    "SUS4": "sus4",
    "AUG": "aug",
}


def pychord_quality_to_key(pychord_quality: str) -> str:
    """Convert a pychord quality string to a chord quality key.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "maj7", "").

    Returns
    -------
    str
        The chord quality key (e.g., "MIN7", "MAJ7", "MAJOR").

    Raises
    ------
    ValueError
        If the quality has no banjo shape definition.

    Examples
    --------
    >>> pychord_quality_to_key("m7")
    'MIN7'
    >>> pychord_quality_to_key("")
    'MAJOR'
    """
    if pychord_quality in PYCHORD_TO_QUALITY_KEY:
        return PYCHORD_TO_QUALITY_KEY[pychord_quality]
    msg = f"Unsupported pychord quality: {pychord_quality}"
    raise ValueError(msg)


def key_to_pychord_quality(quality_key: str) -> str:
    """Convert a chord quality key to a pychord quality string.

    Raises
    ------
    ValueError
        If the key is not in the chord quality table.

    Examples
    --------
    >>> key_to_pychord_quality("DOM7")
    '7'
    >>> key_to_pychord_quality("MAJOR")
    ''
    """
    if quality_key in QUALITY_KEY_TO_PYCHORD:
        return QUALITY_KEY_TO_PYCHORD[quality_key]
    msg = f"Unknown chord quality key: {quality_key}"
    raise ValueError(msg)


def from_pychord(chord_str: str) -> ChordName:
    """Parse a chord symbol into a root and quality key.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim/A").

    Returns
    -------
    ChordName
        Root, quality key and optional bass.

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol or the quality is unsupported.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> chord.root, chord.quality
    ('G', 'MIN7')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    quality_key = pychord_quality_to_key(str(pc.quality))

    return ChordName(
        root=pc.root,
        quality=quality_key,
        bass=_normalize_bass(pc.on),
    )


def parse_chord_symbol(chord_str: str) -> ChordName | None:
    """Parse a chord symbol, returning None when it cannot be used.

    Examples
    --------
    >>> parse_chord_symbol("D7").quality
    'DOM7'
    >>> parse_chord_symbol("Hello") is None
    True
    """
    try:
        return from_pychord(chord_str)
    except ValueError:
        return None
