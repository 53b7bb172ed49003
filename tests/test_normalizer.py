"""Unit tests for parameter normalization."""

import math

import pytest

from app.services.normalizer import (
    STRENGTH_FORMULAS,
    normalize_parameters,
    preservation_strength,
    resolve_changes,
    resolve_intensity,
    resolve_mode,
)

INTENSITIES = [i / 20 for i in range(21)]


def test_staging_strength_stays_within_bounds_and_never_increases():
    strengths = [preservation_strength("staging", i) for i in INTENSITIES]

    assert all(0.55 <= s <= 0.75 for s in strengths)
    assert all(a >= b for a, b in zip(strengths, strengths[1:]))


def test_remodel_strength_stays_within_bounds_and_never_increases():
    strengths = [preservation_strength("remodel", i) for i in INTENSITIES]

    assert all(0.08 <= s <= 0.30 for s in strengths)
    assert all(a >= b for a, b in zip(strengths, strengths[1:]))


def test_out_of_range_intensity_is_clamped_not_rejected():
    assert resolve_intensity(-3) == 0.0
    assert resolve_intensity(7.5) == 1.0
    assert preservation_strength("remodel", 7.5) == pytest.approx(0.08)
    assert preservation_strength("staging", -1) == pytest.approx(0.75)


@pytest.mark.parametrize("value", [None, math.nan, math.inf, "abc"])
def test_missing_or_invalid_intensity_uses_default(value):
    assert resolve_intensity(value) == 0.5


@pytest.mark.parametrize("mode,expected", [
    ("staging", "staging"),
    (" Staging ", "staging"),
    ("remodel", "remodel"),
    (None, "remodel"),
    ("paint-only", "remodel"),
])
def test_mode_resolution(mode, expected):
    assert resolve_mode(mode) == expected


def test_scenario_staging_industrial():
    params = normalize_parameters(style="industrial", mode="staging", intensity=0.5)

    assert params.style == "industrial"
    assert params.mode == "staging"
    assert params.preservation_strength == pytest.approx(0.65)


def test_scenario_luxury_full_intensity_remodel():
    params = normalize_parameters(
        style="luxury", mode="remodel", intensity=1.0, changes=["island", "walls"]
    )

    assert params.preservation_strength == pytest.approx(0.08)
    assert params.changes == ["island", "walls"]


def test_unknown_style_falls_back_to_modern_minimalist():
    assert normalize_parameters(style="baroque").style == "modern minimalist"
    assert normalize_parameters(style=None).style == "modern minimalist"


def test_unknown_changes_are_dropped_preserving_order():
    assert resolve_changes(["lighting", "hot tub", "island", "lighting"]) == ["lighting", "island"]


def test_blank_material_keys_become_absent():
    params = normalize_parameters(mode="remodel", cabinet_color="Navy", countertop_material="  ")

    assert params.cabinet_color == "navy"
    assert params.countertop_material is None
    assert params.wall_color is None


def test_staging_ignores_changes_and_materials():
    params = normalize_parameters(
        mode="staging", changes=["island"], cabinet_color="navy", wall_color="sage"
    )

    assert params.changes == []
    assert params.cabinet_color is None
    assert params.wall_color is None


def test_defaults_when_nothing_supplied():
    params = normalize_parameters()

    assert params.mode == "remodel"
    assert params.intensity == 0.5
    assert params.preservation_strength == pytest.approx(0.19)


def test_strength_formulas_are_read_only():
    with pytest.raises(TypeError):
        STRENGTH_FORMULAS["staging"] = (1.0, 0.0, 0.0, 1.0)
