"""Tests for the chord shape search and partial voicings."""

import pytest

from banjo_shapes import (
    CHORD_QUALITIES,
    Tuning,
    find_shapes,
    generate_chord_shapes,
    generate_chord_shapes_for_symbol,
    get_tuning,
    resolve_active_strings,
    to_partial_shapes,
)
from banjo_shapes.pitch_class import CHROMATIC_SCALE, note_to_pc
from banjo_shapes.shapes import find_chord_tones, iter_tone_combinations


@pytest.fixture
def open_g() -> Tuning:
    return get_tuning("Open G")


@pytest.fixture
def g_major_shapes(open_g: Tuning):
    return generate_chord_shapes("G", "MAJOR", open_g)


def _chord_pcs(root: str, key: str) -> set[int]:
    root_pc = note_to_pc(root)
    return {(root_pc + i) % 12 for i in CHORD_QUALITIES[key].intervals}


class TestFindChordTones:
    """Per-string chord tone scan."""

    def test_open_g_g_major_on_d_string(self, open_g: Tuning) -> None:
        active = resolve_active_strings(open_g)
        tones = find_chord_tones(active, 7, CHORD_QUALITIES["MAJOR"], 12)
        d_string = tones[0]
        assert [t.fret for t in d_string] == [0, 5, 9, 12]
        assert [t.degree for t in d_string] == ["5", "1", "3", "5"]
        assert [t.interval for t in d_string] == [7, 0, 4, 7]
        assert [t.note for t in d_string] == ["D", "G", "B", "D"]

    def test_one_entry_per_active_string(self, open_g: Tuning) -> None:
        active = resolve_active_strings(open_g)
        tones = find_chord_tones(active, 0, CHORD_QUALITIES["DOM7"], 15)
        assert len(tones) == 4
        for string_tones in tones:
            assert all(0 <= t.fret <= 15 for t in string_tones)


class TestToneCombinations:
    def test_reach_prunes_wide_combinations(self, open_g: Tuning) -> None:
        active = resolve_active_strings(open_g)
        tones = find_chord_tones(active, 7, CHORD_QUALITIES["MAJOR"], 15)
        for combo in iter_tone_combinations(tones, 0, 2, 2):
            fretted = [t.fret for t in combo if t.fret > 0]
            if fretted:
                assert max(fretted) - min(fretted) <= 2

    def test_open_strings_do_not_count_toward_reach(self, open_g: Tuning) -> None:
        active = resolve_active_strings(open_g)
        tones = find_chord_tones(active, 7, CHORD_QUALITIES["MAJOR"], 15)
        combos = list(iter_tone_combinations(tones, 0, 2, 0))
        assert tuple(t.fret for t in combos[0]) == (0, 0, 0)
        assert any(tuple(t.fret for t in c) == (0, 0, 8) for c in combos)

    def test_depth_first_order(self, open_g: Tuning) -> None:
        active = resolve_active_strings(open_g)
        tones = find_chord_tones(active, 7, CHORD_QUALITIES["MAJOR"], 15)
        frets = [tuple(t.fret for t in c) for c in iter_tone_combinations(tones, 0, 2, 5)]
        assert frets[:3] == [(0, 0, 0), (0, 0, 3), (0, 0, 8)]


class TestScenarios:
    """Known shapes in Open G."""

    def test_f_major_root_form(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes("F", "MAJOR", open_g)
        roots = [s for s in shapes if s.classification.name == "Root Form"]
        assert roots
        assert all(s.bass_interval == 0 for s in roots)
        match = [s for s in roots if s.frets == (3, 2, 1, 3)]
        assert len(match) == 1
        assert match[0].degrees == ("1", "3", "5", "1")
        assert match[0].lowest_fret == 1
        assert match[0].highest_fret == 3

    def test_g_major_inversions(self, g_major_shapes) -> None:
        by_name = {}
        for shape in g_major_shapes:
            by_name.setdefault(shape.classification.name, shape)
        assert by_name["Root Form"].bass_interval == 0
        assert by_name["1st Inversion"].bass_interval == 4
        assert by_name["2nd Inversion"].bass_interval == 7
        assert "3rd Inversion" not in by_name

    def test_g_major_known_frets(self, g_major_shapes) -> None:
        frets = {s.frets: s.classification.name for s in g_major_shapes}
        assert frets[(0, 0, 0, 0)] == "2nd Inversion"
        assert frets[(5, 4, 3, 5)] == "Root Form"
        assert frets[(9, 7, 8, 9)] == "1st Inversion"

    def test_g7_third_inversion(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes("G", "DOM7", open_g)
        thirds = [s for s in shapes if s.classification.name == "3rd Inversion"]
        assert thirds
        assert all(s.bass_interval == 10 for s in thirds)
        assert any(s.frets == (3, 0, 0, 0) for s in thirds)

    def test_maj7_third_inversion_uses_major_seventh(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes("G", "MAJ7", open_g)
        thirds = [s for s in shapes if s.classification.name == "3rd Inversion"]
        assert thirds
        assert all(s.bass_interval == 11 for s in thirds)

    def test_first_shape_is_open(self, g_major_shapes) -> None:
        first = g_major_shapes[0]
        assert first.frets == (0, 0, 0)
        assert first.lowest_fret == 0
        assert first.relative_position == "1st Position"
        assert first.bass_degree == "5"
        assert [n.string_index for n in first.notes] == [1, 2, 3]

    def test_four_string_tuning(self) -> None:
        shapes = generate_chord_shapes("C", "MAJOR", get_tuning("Plectrum C"))
        assert shapes
        assert any(s.classification.name == "Root Form" for s in shapes)
        assert all(s.notes[0].string_index == s.start_string for s in shapes)


class TestShapeProperties:
    """Invariants that hold for every shape."""

    @pytest.mark.parametrize("root", CHROMATIC_SCALE)
    @pytest.mark.parametrize("key", ["MAJOR", "MINOR"])
    def test_triads_cover_every_tone(self, open_g: Tuning, root: str, key: str) -> None:
        chord = _chord_pcs(root, key)
        shapes = generate_chord_shapes(root, key, open_g)
        assert shapes
        for shape in shapes:
            assert shape.pitch_classes == chord

    @pytest.mark.parametrize("key", ["DOM7", "MAJ7", "MIN7"])
    def test_seventh_chords_cover_three_tones(self, open_g: Tuning, key: str) -> None:
        chord = _chord_pcs("D", key)
        shapes = generate_chord_shapes("D", key, open_g)
        assert shapes
        for shape in shapes:
            assert shape.pitch_classes <= chord
            assert len(shape.pitch_classes) >= 3

    @pytest.mark.parametrize("root", ["C", "F#", "A"])
    def test_span_within_reach(self, open_g: Tuning, root: str) -> None:
        for shape in generate_chord_shapes(root, "DOM7", open_g):
            assert shape.span <= 5

    def test_custom_reach(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes("C", "MAJOR", open_g, max_reach=2)
        assert shapes
        assert all(s.span <= 2 for s in shapes)

    def test_lowest_fret_ignores_open_strings(self, g_major_shapes) -> None:
        for shape in g_major_shapes:
            fretted = [f for f in shape.frets if f > 0]
            assert shape.lowest_fret == (min(fretted) if fretted else 0)
            assert shape.highest_fret == max(shape.frets)

    def test_max_fret_ceiling(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes("G", "MAJOR", open_g, max_fret=7)
        assert shapes
        assert all(s.highest_fret <= 7 for s in shapes)

    def test_adjacent_strings(self, g_major_shapes) -> None:
        for shape in g_major_shapes:
            locals_ = [n.local_string_index for n in shape.notes]
            assert locals_ == list(range(shape.start_string, shape.end_string + 1))
            assert len(shape.notes) >= 3

    def test_positions_follow_neck_order(self, g_major_shapes) -> None:
        assert [s.position for s in g_major_shapes] == list(range(1, len(g_major_shapes) + 1))
        keys = [(s.lowest_fret, s.start_string) for s in g_major_shapes]
        assert keys == sorted(keys)

    def test_no_duplicate_shapes(self, g_major_shapes) -> None:
        keys = [tuple((n.string_index, n.fret) for n in s.notes) for s in g_major_shapes]
        assert len(keys) == len(set(keys))

    def test_deterministic(self, open_g: Tuning) -> None:
        first = generate_chord_shapes("A", "MIN7", open_g)
        second = generate_chord_shapes("A", "MIN7", open_g)
        assert first == second


class TestEmptyResults:
    def test_unknown_root(self, open_g: Tuning) -> None:
        assert generate_chord_shapes("H", "MAJOR", open_g) == []

    def test_unknown_quality(self, open_g: Tuning) -> None:
        assert generate_chord_shapes("G", "NINTH", open_g) == []

    def test_unclassifiable_bass_is_dropped(self, open_g: Tuning) -> None:
        # A sixth or sus4 in the bass has no inversion
        for shape in generate_chord_shapes("C", "SIXTH", open_g):
            assert shape.bass_interval != 9
        for shape in generate_chord_shapes("C", "SUS4", open_g):
            assert shape.bass_interval == 0 or shape.bass_interval == 7

    def test_tuning_with_two_strings(self) -> None:
        tuning = Tuning(name="Duo", strings=("G", "D"))
        shapes = generate_chord_shapes("G", "MAJOR", tuning)
        # two strings can never sound a full triad
        assert shapes == []


class TestAliasesAndSymbols:
    def test_quality_alias(self, open_g: Tuning) -> None:
        assert generate_chord_shapes("G", "7", open_g) == generate_chord_shapes("G", "DOM7", open_g)

    def test_find_shapes_with_quality(self, open_g: Tuning) -> None:
        shapes = find_shapes("G", CHORD_QUALITIES["MAJOR"], open_g)
        assert shapes == generate_chord_shapes("G", "MAJOR", open_g)

    def test_chord_symbol(self, open_g: Tuning) -> None:
        shapes = generate_chord_shapes_for_symbol("Am7", open_g)
        assert shapes == generate_chord_shapes("A", "MIN7", open_g)

    def test_bad_symbol(self, open_g: Tuning) -> None:
        assert generate_chord_shapes_for_symbol("Hello", open_g) == []


class TestPartialShapes:
    """Double stops."""

    def test_g_major_double_stops(self, open_g: Tuning) -> None:
        partials = generate_chord_shapes("G", "MAJOR", open_g, "partial")
        assert len(partials) >= 1
        for shape in partials:
            assert len(shape.notes) == 2
            assert shape.is_partial
            assert shape.parent_classification is not None
            assert any(n.interval in (0, 3, 4) for n in shape.notes)
            assert shape.end_string == shape.start_string + 1

    def test_deduplicated(self, g_major_shapes) -> None:
        partials = to_partial_shapes(g_major_shapes)
        keys = [tuple((n.string_index, n.fret) for n in s.notes) for s in partials]
        assert len(keys) == len(set(keys))

    def test_numbered_independently(self, g_major_shapes) -> None:
        partials = to_partial_shapes(g_major_shapes)
        assert [s.position for s in partials] == list(range(1, len(partials) + 1))
        keys = [(s.lowest_fret, s.start_string) for s in partials]
        assert keys == sorted(keys)

    def test_classified_by_lower_note(self, g_major_shapes) -> None:
        partials = to_partial_shapes(g_major_shapes)
        open_pair = partials[0]
        # D (the fifth) under G on the two lowest main strings
        assert open_pair.frets == (0, 0)
        assert open_pair.classification.name == "2nd Inversion"
        assert open_pair.parent_classification == "2nd Inversion"

    def test_fifth_only_pair_is_dropped(self) -> None:
        # D-D unison pair carries neither root nor third
        tuning = Tuning(name="Unison", strings=("D", "D", "G"))
        shapes = generate_chord_shapes("G", "MAJOR", tuning)
        partials = to_partial_shapes(shapes)
        for shape in partials:
            assert {n.interval for n in shape.notes} != {7}

    def test_empty_input(self) -> None:
        assert to_partial_shapes([]) == []
