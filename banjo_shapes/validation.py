"""Declarative validation cases for shape generation.

Each case names a tuning, chord and the classification it must produce.
:func:`run_tests` checks them all and reports failures as data rather
than raising, so a UI or CLI can show the outcome directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from banjo_shapes.connectors import calculate_tuning_interval, get_movable_shape_info
from banjo_shapes.models import TestResult, ValidationReport
from banjo_shapes.shapes import generate_chord_shapes
from banjo_shapes.tunings import TUNINGS

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from banjo_shapes.models import Tuning, VoicingMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpectedClassification:
    """A classification that at least one shape must have."""

    shape_name: str
    expected_color: str | None = None
    bass_interval: int | None = None


@dataclass(frozen=True)
class ShapeTestCase:
    """Expectations for one shape-generation query.

    Parameters
    ----------
    test_id : str
        Case identifier (e.g., "TC_001").
    description : str
        What the case checks.
    tuning_id : str
        Tuning name.
    root_note : str
        Chord root.
    chord_quality : str
        Chord quality key.
    voicing_mode : VoicingMode
        "full" or "partial".
    has_shapes : bool | None
        Require at least one shape.
    min_shapes : int | None
        Minimum number of shapes.
    all_two_notes : bool
        Require every shape to have exactly two notes.
    classification : ExpectedClassification | None
        Classification some shape must have.
    movable_alias : str | None
        Movable alias expected for the first Root Form shape.
    """

    __test__ = False

    test_id: str
    description: str
    tuning_id: str
    root_note: str
    chord_quality: str
    voicing_mode: VoicingMode = "full"
    has_shapes: bool | None = None
    min_shapes: int | None = None
    all_two_notes: bool = False
    classification: ExpectedClassification | None = None
    movable_alias: str | None = None


@dataclass(frozen=True)
class ConnectorTestCase:
    """Expected tuning interval for a tuning."""

    __test__ = False

    test_id: str
    description: str
    tuning_id: str
    tuning_interval: int


TEST_CASES: tuple[ShapeTestCase, ...] = (
    ShapeTestCase(
        test_id="TC_001",
        description="Verify F Major Root Form Logic in Standard G",
        tuning_id="Open G",
        root_note="F",
        chord_quality="MAJOR",
        classification=ExpectedClassification("Root Form", "#3366cc", 0),
        movable_alias="F Shape",
    ),
    ShapeTestCase(
        test_id="TC_002",
        description="Verify G Major Root Form in Standard G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="MAJOR",
        classification=ExpectedClassification("Root Form", "#3366cc", 0),
    ),
    ShapeTestCase(
        test_id="TC_003",
        description="Verify 1st Inversion (3rd in bass) for G Major in Open G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="MAJOR",
        classification=ExpectedClassification("1st Inversion", "#cc3333", 4),
    ),
    ShapeTestCase(
        test_id="TC_004",
        description="Verify 2nd Inversion (5th in bass) for G Major in Open G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="MAJOR",
        classification=ExpectedClassification("2nd Inversion", "#cc9900", 7),
    ),
    ShapeTestCase(
        test_id="TC_005",
        description="Verify 3rd Inversion (7th in bass) for G7 in Open G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="DOM7",
        classification=ExpectedClassification("3rd Inversion", "#339933", 10),
    ),
    ShapeTestCase(
        test_id="TC_006",
        description="Verify Double Stop generation from G Major in Open G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="MAJOR",
        voicing_mode="partial",
        min_shapes=1,
        all_two_notes=True,
    ),
    ShapeTestCase(
        test_id="TC_007",
        description="Verify chord shapes for 4-string Plectrum C tuning",
        tuning_id="Plectrum C",
        root_note="C",
        chord_quality="MAJOR",
        has_shapes=True,
        classification=ExpectedClassification("Root Form", "#3366cc", 0),
    ),
    ShapeTestCase(
        test_id="TC_008",
        description="Verify Minor 7th shapes in Open G",
        tuning_id="Open G",
        root_note="A",
        chord_quality="MIN7",
        has_shapes=True,
    ),
    ShapeTestCase(
        test_id="TC_009",
        description="Verify Major 7th shapes in Open G",
        tuning_id="Open G",
        root_note="G",
        chord_quality="MAJ7",
        has_shapes=True,
    ),
)

CONNECTOR_TEST_CASES: tuple[ConnectorTestCase, ...] = (
    ConnectorTestCase(
        test_id="TC_CONN_01",
        description="Verify 5-Fret Rule in Open G",
        tuning_id="Open G",
        tuning_interval=5,
    ),
    ConnectorTestCase(
        test_id="TC_CONN_02",
        description="Verify tuning interval calculation for Double C",
        tuning_id="Double C",
        tuning_interval=7,
    ),
)


def _check_shapes(tc: ShapeTestCase, tuning: Tuning) -> list[str]:
    shapes = generate_chord_shapes(tc.root_note, tc.chord_quality, tuning, tc.voicing_mode)

    if tc.has_shapes and not shapes:
        return ["Expected shapes but none were generated"]

    if tc.min_shapes is not None and len(shapes) < tc.min_shapes:
        return [f"Expected at least {tc.min_shapes} shapes, got {len(shapes)}"]

    if tc.all_two_notes:
        invalid = [s for s in shapes if len(s.notes) != 2]
        if invalid:
            return [f"{len(invalid)} shapes don't have exactly 2 notes"]

    if tc.classification is not None:
        exp = tc.classification
        match = next((s for s in shapes if s.classification.name == exp.shape_name), None)
        if match is None:
            found = ", ".join(dict.fromkeys(s.classification.name for s in shapes))
            return [f'No shape with classification "{exp.shape_name}" found. Found: {found}']
        if exp.expected_color and match.classification.color != exp.expected_color:
            return [f"Expected color {exp.expected_color}, got {match.classification.color}"]
        if exp.bass_interval is not None and match.bass_interval != exp.bass_interval:
            return [f"Expected bass interval {exp.bass_interval}, got {match.bass_interval}"]

    if tc.movable_alias is not None:
        root_forms = [s for s in shapes if s.classification.name == "Root Form"]
        info = get_movable_shape_info(root_forms[0]) if root_forms else None
        if info is not None and info.alias != tc.movable_alias:
            return [f'Expected alias "{tc.movable_alias}", got "{info.alias}"']

    return []


def run_single_test(tc: ShapeTestCase, tunings: Mapping[str, Tuning] = TUNINGS) -> TestResult:
    """Run one shape-generation case."""
    tuning = tunings.get(tc.tuning_id)
    if tuning is None:
        errors = [f'Tuning "{tc.tuning_id}" not found']
    else:
        errors = _check_shapes(tc, tuning)
    return TestResult(
        test_id=tc.test_id,
        description=tc.description,
        passed=not errors,
        errors=tuple(errors),
    )


def run_connector_test(tc: ConnectorTestCase, tunings: Mapping[str, Tuning] = TUNINGS) -> TestResult:
    """Run one tuning-interval case."""
    tuning = tunings.get(tc.tuning_id)
    errors: list[str] = []
    if tuning is None:
        errors.append(f'Tuning "{tc.tuning_id}" not found')
    else:
        interval = calculate_tuning_interval(tuning)
        if interval != tc.tuning_interval:
            errors.append(f"Expected tuning interval {tc.tuning_interval}, got {interval}")
    return TestResult(
        test_id=tc.test_id,
        description=tc.description,
        passed=not errors,
        errors=tuple(errors),
    )


def run_tests(
    shape_cases: Sequence[ShapeTestCase] = TEST_CASES,
    connector_cases: Sequence[ConnectorTestCase] = CONNECTOR_TEST_CASES,
    tunings: Mapping[str, Tuning] = TUNINGS,
) -> ValidationReport:
    """Run every validation case.

    Returns
    -------
    ValidationReport
        Results in case order, shape cases first.
    """
    results = [run_single_test(tc, tunings) for tc in shape_cases]
    results.extend(run_connector_test(tc, tunings) for tc in connector_cases)

    report = ValidationReport(results=tuple(results))
    for result in report.results:
        if not result.passed:
            logger.debug("%s failed: %s", result.test_id, "; ".join(result.errors))
    return report
