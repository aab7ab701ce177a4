"""Tests for the tuning dataset and active-string resolution."""

import pytest

from banjo_shapes import Tuning, get_tuning, resolve_active_strings
from banjo_shapes.strings import string_pitch_class
from banjo_shapes.tunings import DRONE_START_FRET, TUNINGS, tunings_by_family


class TestTuningData:
    """Static dataset checks."""

    def test_tuning_count(self) -> None:
        assert len(TUNINGS) == 24

    @pytest.mark.parametrize("name", sorted(TUNINGS))
    def test_every_string_resolves(self, name: str) -> None:
        tuning = TUNINGS[name]
        assert tuning.name == name
        assert tuning.string_count in (4, 5)
        for note in tuning.strings:
            assert 0 <= string_pitch_class(note) <= 11

    @pytest.mark.parametrize("name", sorted(TUNINGS))
    def test_drone_only_on_five_string(self, name: str) -> None:
        tuning = TUNINGS[name]
        if tuning.string_count == 5:
            assert tuning.drone_index == 0
            assert tuning.drone_start_fret == DRONE_START_FRET
        else:
            assert tuning.drone_index is None

    def test_open_g(self) -> None:
        tuning = get_tuning("Open G")
        assert tuning.strings == ("g", "D", "G", "B", "d")
        assert (5, "Key of C") in tuning.capo_positions

    def test_unknown_tuning_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown tuning"):
            get_tuning("Open Q")

    def test_families(self) -> None:
        names = [t.name for t in tunings_by_family("other-family")]
        assert names == ["Plectrum C", "Tenor (Standard)"]
        assert len(tunings_by_family("c-family")) == 8


class TestStringPitchClass:
    def test_names(self) -> None:
        assert string_pitch_class("g") == 7
        assert string_pitch_class("f#") == 6
        assert string_pitch_class("C#3") == 1

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown string note"):
            string_pitch_class("x")


class TestResolveActiveStrings:
    """Drone exclusion rules."""

    def test_five_string_drops_drone(self) -> None:
        active = resolve_active_strings(get_tuning("Open G"))
        assert active.primary_indices == (1, 2, 3, 4)
        assert active.primary_notes == ("D", "G", "B", "d")
        assert active.primary_pitches == (2, 7, 11, 2)
        assert active.drone_index == 0
        assert active.string_count == 4

    def test_four_string_uses_all(self) -> None:
        active = resolve_active_strings(get_tuning("Plectrum C"))
        assert active.primary_indices == (0, 1, 2, 3)
        assert active.primary_pitches == (0, 7, 11, 2)
        assert active.drone_index is None

    def test_inconsistent_drone_flag_means_no_drone(self) -> None:
        tuning = Tuning(name="Odd", strings=("C", "G", "d", "a"), drone_index=0)
        active = resolve_active_strings(tuning)
        assert active.primary_indices == (0, 1, 2, 3)
        assert active.drone_index is None

    def test_five_string_without_drone(self) -> None:
        tuning = Tuning(name="Five", strings=("G", "D", "G", "B", "d"))
        assert resolve_active_strings(tuning).string_count == 5
