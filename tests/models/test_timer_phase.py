"""Tests for the Phase, SettingSelection and AppTab enums."""

from __future__ import annotations

import pytest

from tomato_cli.models.timer.phase import AppTab, Phase, SettingSelection


class TestPhase:
    @pytest.mark.parametrize(
        ("phase", "name", "color"),
        [
            (Phase.FOCUS, "FOCUS SESSION", "red"),
            (Phase.SHORT_BREAK, "SHORT BREAK", "green"),
            (Phase.LONG_BREAK, "LONG BREAK", "blue"),
        ],
    )
    def test_display_name_and_color(self, phase, name, color) -> None:
        assert phase.display_name == name
        assert phase.color == color


class TestSettingSelection:
    def test_values_name_config_fields(self) -> None:
        assert [s.value for s in SettingSelection] == [
            "focus_minutes",
            "short_break_minutes",
            "long_break_minutes",
        ]

    def test_next_cycles_through_all(self) -> None:
        selection = SettingSelection.FOCUS_TIME
        for _ in range(3):
            selection = selection.next()
        assert selection is SettingSelection.FOCUS_TIME

    def test_prev_is_inverse_of_next(self) -> None:
        for selection in SettingSelection:
            assert selection.next().prev() is selection

    def test_prev_wraps_from_first(self) -> None:
        assert SettingSelection.FOCUS_TIME.prev() is SettingSelection.LONG_BREAK_TIME

    def test_phase_mapping(self) -> None:
        assert SettingSelection.FOCUS_TIME.phase is Phase.FOCUS
        assert SettingSelection.SHORT_BREAK_TIME.phase is Phase.SHORT_BREAK
        assert SettingSelection.LONG_BREAK_TIME.phase is Phase.LONG_BREAK

    def test_labels(self) -> None:
        assert SettingSelection.SHORT_BREAK_TIME.label == "Short Break Duration"


class TestAppTab:
    def test_toggle(self) -> None:
        assert AppTab.TIMER.toggle() is AppTab.SETTINGS
        assert AppTab.SETTINGS.toggle() is AppTab.TIMER
