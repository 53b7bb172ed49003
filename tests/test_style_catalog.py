"""Unit tests for the style and material tables."""

import pytest

from app.services.style_catalog import (
    CABINET_COLORS,
    CABINET_FALLBACK,
    CHANGES,
    DEFAULT_STYLE,
    REMODEL_STYLES,
    STAGING_STYLES,
    build_options_catalog,
    lookup,
    resolve_material,
    resolve_style,
)


def test_style_tables_share_the_same_keys():
    assert set(REMODEL_STYLES) == set(STAGING_STYLES)
    assert len(REMODEL_STYLES) == 8
    assert len(CHANGES) == 8


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        REMODEL_STYLES["gothic"] = "dark"


def test_lookup_falls_back_instead_of_raising():
    assert lookup(STAGING_STYLES, "nope", DEFAULT_STYLE) == STAGING_STYLES[DEFAULT_STYLE]
    assert lookup(STAGING_STYLES, " Luxury ", DEFAULT_STYLE) == STAGING_STYLES["luxury"]


def test_resolve_style():
    assert resolve_style("Rustic Farmhouse") == "rustic farmhouse"
    assert resolve_style("") == DEFAULT_STYLE


def test_resolve_material():
    assert resolve_material(CABINET_COLORS, None, CABINET_FALLBACK) is None
    assert resolve_material(CABINET_COLORS, "", CABINET_FALLBACK) is None
    assert resolve_material(CABINET_COLORS, "teal", CABINET_FALLBACK) == CABINET_FALLBACK
    assert resolve_material(CABINET_COLORS, "navy", CABINET_FALLBACK) == CABINET_COLORS["navy"]


def test_options_catalog_lists_every_option():
    catalog = build_options_catalog()

    assert [s.id for s in catalog.styles] == list(REMODEL_STYLES)
    assert {m.id for m in catalog.modes} == {"remodel", "staging"}
    assert catalog.default_style == DEFAULT_STYLE
    assert next(s for s in catalog.styles if s.id == "luxury").name == "Luxury"
