"""Tests for the built-in validation cases."""

import pytest

from banjo_shapes.validation import (
    CONNECTOR_TEST_CASES,
    TEST_CASES,
    ConnectorTestCase,
    ExpectedClassification,
    ShapeTestCase,
    run_connector_test,
    run_single_test,
    run_tests,
)


class TestBuiltInCases:
    def test_all_pass(self):
        report = run_tests()
        failures = {r.test_id: r.errors for r in report.results if not r.passed}
        assert failures == {}
        assert report.total == 11
        assert report.passed == 11
        assert report.failed == 0

    def test_result_order(self):
        report = run_tests()
        expected = [tc.test_id for tc in TEST_CASES] + [tc.test_id for tc in CONNECTOR_TEST_CASES]
        assert [r.test_id for r in report.results] == expected

    @pytest.mark.parametrize("tc", TEST_CASES, ids=lambda tc: tc.test_id)
    def test_shape_case(self, tc):
        result = run_single_test(tc)
        assert result.passed, result.errors
        assert result.description == tc.description


class TestFailureReporting:
    """Failures are returned as data, not raised."""

    def test_missing_classification(self):
        tc = ShapeTestCase(
            test_id="X1",
            description="No major chord has a seventh in the bass",
            tuning_id="Plectrum C",
            root_note="C",
            chord_quality="MAJOR",
            classification=ExpectedClassification("3rd Inversion"),
        )
        result = run_single_test(tc)
        assert not result.passed
        assert len(result.errors) == 1
        assert result.errors[0].startswith('No shape with classification "3rd Inversion" found. Found: ')
        assert "Root Form" in result.errors[0]

    def test_wrong_bass_interval(self):
        tc = ShapeTestCase(
            test_id="X2",
            description="G major has a major third",
            tuning_id="Open G",
            root_note="G",
            chord_quality="MAJOR",
            classification=ExpectedClassification("1st Inversion", bass_interval=3),
        )
        assert run_single_test(tc).errors == ("Expected bass interval 3, got 4",)

    def test_wrong_alias(self):
        tc = ShapeTestCase(
            test_id="X3",
            description="Root form alias",
            tuning_id="Open G",
            root_note="F",
            chord_quality="MAJOR",
            movable_alias="D Shape",
        )
        assert run_single_test(tc).errors == ('Expected alias "D Shape", got "F Shape"',)

    def test_no_shapes(self):
        tc = ShapeTestCase(
            test_id="X4",
            description="Unknown quality",
            tuning_id="Open G",
            root_note="G",
            chord_quality="NINTH",
            has_shapes=True,
        )
        assert run_single_test(tc).errors == ("Expected shapes but none were generated",)

    def test_min_shapes(self):
        tc = ShapeTestCase(
            test_id="X5",
            description="Too many required",
            tuning_id="Open G",
            root_note="G",
            chord_quality="MAJOR",
            min_shapes=10_000,
        )
        (error,) = run_single_test(tc).errors
        assert error.startswith("Expected at least 10000 shapes, got ")

    def test_full_shapes_are_not_two_notes(self):
        tc = ShapeTestCase(
            test_id="X6",
            description="Full shapes have three or more notes",
            tuning_id="Open G",
            root_note="G",
            chord_quality="MAJOR",
            all_two_notes=True,
        )
        (error,) = run_single_test(tc).errors
        assert error.endswith("shapes don't have exactly 2 notes")

    def test_missing_tuning(self):
        tc = ShapeTestCase(
            test_id="X7",
            description="Missing tuning",
            tuning_id="Nope",
            root_note="G",
            chord_quality="MAJOR",
        )
        result = run_single_test(tc)
        assert not result.passed
        assert result.errors == ('Tuning "Nope" not found',)

    def test_connector_interval_mismatch(self):
        tc = ConnectorTestCase(
            test_id="X8",
            description="Open G is not a fifth apart",
            tuning_id="Open G",
            tuning_interval=7,
        )
        assert run_connector_test(tc).errors == ("Expected tuning interval 7, got 5",)

    def test_connector_missing_tuning(self):
        tc = ConnectorTestCase(test_id="X9", description="Missing", tuning_id="Nope", tuning_interval=5)
        assert run_connector_test(tc).errors == ('Tuning "Nope" not found',)

    def test_report_counts(self):
        bad = ConnectorTestCase(test_id="X10", description="Bad", tuning_id="Open G", tuning_interval=0)
        report = run_tests(shape_cases=TEST_CASES[:2], connector_cases=[bad])
        assert report.total == 3
        assert report.passed == 2
        assert report.failed == 1
