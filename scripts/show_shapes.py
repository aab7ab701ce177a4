#!/usr/bin/env python
"""Print the chord shapes of a banjo tuning.

Usage:
    python scripts/show_shapes.py "Open G" G MAJOR
    python scripts/show_shapes.py "Open G" G MAJOR --partial
    python scripts/show_shapes.py "Plectrum C" C major --voicing
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from banjo_shapes import (
    TUNINGS,
    calculate_tuning_interval,
    filter_shapes_by_inversion,
    find_chord_voicing,
    find_shape_connectors,
    generate_chord_shapes,
    get_movable_shape_info,
    get_tuning,
)


def print_shapes(args: argparse.Namespace) -> int:
    """Print the shape table and connectors; return the exit code."""
    tuning = get_tuning(args.tuning)
    mode = "partial" if args.partial else "full"
    shapes = generate_chord_shapes(args.root, args.quality, tuning, mode, args.max_fret)
    shapes = filter_shapes_by_inversion(shapes, args.inversion)

    if not shapes:
        print(f"No shapes for {args.root} {args.quality} in {tuning.name}")
        return 1

    print(f"{args.root} {shapes[0].quality.name} in {tuning.name} ({' '.join(tuning.strings)})")
    for shape in shapes:
        frets = "-".join(str(f) for f in shape.frets)
        degrees = " ".join(shape.degrees)
        info = get_movable_shape_info(shape)
        movable = f"  [{info.description}]" if info else ""
        print(
            f"  {shape.relative_position:14s} {shape.classification.name:14s} "
            f"strings {shape.start_string}-{shape.end_string}  frets {frets:12s} {degrees}{movable}"
        )

    interval = calculate_tuning_interval(tuning)
    connectors = find_shape_connectors(shapes, tuning)
    print(f"\n{len(connectors)} connectors ({interval}-fret rule)")
    for connector in connectors:
        print(f"  {connector.from_shape.relative_position} -> {connector.to_shape.relative_position}")
    return 0


def print_voicing(args: argparse.Namespace) -> int:
    """Print the best chord-diagram voicing; return the exit code."""
    tuning = get_tuning(args.tuning)
    voicing = find_chord_voicing(tuning, args.root, args.quality)
    if voicing is None:
        print(f"No voicing for {args.root} {args.quality} in {tuning.name}")
        return 1

    print(f"{args.root} {args.quality} in {tuning.name}: {' '.join(voicing.chord_notes)}")
    for p in voicing.positions:
        if p.muted:
            print(f"  string {p.string_num}: x")
            continue
        finger = f" (finger {p.finger})" if p.finger else ""
        root = " root" if p.is_root else ""
        print(f"  string {p.string_num}: fret {p.fret} {p.note} [{p.degree}]{finger}{root}")
    if voicing.barre:
        b = voicing.barre
        print(f"  barre at fret {b.fret}, strings {b.from_string}-{b.to_string}")
    return 0


def main() -> None:
    """Run the shape printer."""
    parser = argparse.ArgumentParser(description="Show banjo chord shapes for a tuning")
    parser.add_argument("tuning", choices=sorted(TUNINGS), metavar="TUNING", help="Tuning name")
    parser.add_argument("root", help="Root note (e.g., G, Bb)")
    parser.add_argument("quality", help="Chord quality key (e.g., MAJOR, DOM7, m7)")
    parser.add_argument(
        "--partial",
        action="store_true",
        help="Show double stops instead of full shapes",
    )
    parser.add_argument(
        "--voicing",
        action="store_true",
        help="Show the single best chord-diagram voicing",
    )
    parser.add_argument(
        "--max-fret",
        type=int,
        default=15,
        help="Highest fret to search",
    )
    parser.add_argument(
        "--inversion",
        action="append",
        help="Only show this inversion (e.g., 'Root Form'); repeatable",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    sys.exit(print_voicing(args) if args.voicing else print_shapes(args))


if __name__ == "__main__":
    main()
