"""Unit tests for menu matching."""
import logging

import pytest
from pydantic import ValidationError

from voice_order.core.config import Settings
from voice_order.services.menu.base import VoiceMenuMapping
from voice_order.services.menu.matcher import (
    MatchPolicy,
    match_menu_item,
    match_menu_items,
    similarity,
)
from voice_order.services.ordering.models import ParsedOrderItem


def _item(name: str) -> ParsedOrderItem:
    return ParsedOrderItem(raw_name=name, quantity=1)


class TestSimilarity:
    """Test edit-distance similarity."""

    def test_misspelling(self):
        """Test two missing letters out of ten."""
        assert similarity("capucino", "cappuccino") == pytest.approx(0.8)

    @pytest.mark.parametrize(
        "a,b",
        [("capucino", "cappuccino"), ("rösti", "röschti"), ("kaffee", "tee"), ("", "bier")],
    )
    def test_symmetric(self, a, b):
        """Test similarity does not depend on argument order."""
        assert similarity(a, b) == similarity(b, a)

    def test_bounds(self):
        """Test identical, disjoint and empty strings."""
        assert similarity("kaffee", "kaffee") == 1.0
        assert similarity("abc", "") == 0.0
        assert similarity("", "") == 1.0
        assert 0.0 <= similarity("widget", "gipfeli") <= 1.0


class TestMenuMatcher:
    """Test catalog matching."""

    def test_exact_spoken_name(self, food_catalog):
        """Test an exact spoken name matches with full confidence."""
        item = match_menu_item(_item("Kafi"), food_catalog)

        assert item.matched is True
        assert item.confidence == 1.0
        assert item.canonical_name == "kaffee"
        assert item.raw_name == "Kafi"

    def test_alias(self, food_catalog):
        """Test an alias matches with alias confidence."""
        item = match_menu_item(_item("schale"), food_catalog)

        assert item.matched is True
        assert item.confidence == 0.9
        assert item.canonical_name == "kaffee"

    def test_fuzzy_misspelling(self, food_catalog):
        """Test a misspelled name is matched approximately."""
        item = match_menu_item(_item("capucino"), food_catalog)

        assert item.matched is True
        assert item.canonical_name == "cappuccino"
        assert item.confidence == pytest.approx(0.8)

    def test_unrelated_name_unmatched(self, food_catalog):
        """Test a non-food name stays unmatched."""
        item = match_menu_item(_item("widget"), food_catalog)

        assert item.matched is False
        assert item.confidence == 0
        assert item.canonical_name is None

    def test_exact_beats_earlier_fuzzy(self):
        """Test an exact match later in the catalog wins over a fuzzy one."""
        catalog = [
            VoiceMenuMapping(canonical_id="a", spoken_names=["kaffeee"]),
            VoiceMenuMapping(canonical_id="b", spoken_names=["kaffee"]),
        ]
        item = match_menu_item(_item("kaffee"), catalog)

        assert item.canonical_name == "kaffee"
        assert item.confidence == 1.0

    def test_alias_beats_fuzzy(self):
        """Test an alias match wins over a closer fuzzy match."""
        catalog = [
            VoiceMenuMapping(canonical_id="a", spoken_names=["capu"]),
            VoiceMenuMapping(canonical_id="b", spoken_names=["cappuccino"], aliases=["cappu"]),
        ]
        item = match_menu_item(_item("cappu"), catalog)

        assert item.canonical_name == "cappuccino"
        assert item.confidence == 0.9

    def test_tie_keeps_first_entry(self):
        """Test equal fuzzy scores resolve to the earlier catalog entry."""
        catalog = [
            VoiceMenuMapping(canonical_id="a", spoken_names=["cappuccino"]),
            VoiceMenuMapping(canonical_id="b", spoken_names=["cappuccine"]),
        ]
        item = match_menu_item(_item("cappuccina"), catalog)

        assert item.canonical_name == "cappuccino"
        assert item.confidence == pytest.approx(0.9)

    def test_best_spoken_name_per_entry(self):
        """Test any spoken name can match, canonical name is the first one."""
        catalog = [VoiceMenuMapping(canonical_id="croissant", spoken_names=["croissant", "gipfeli"])]
        item = match_menu_item(_item("gipfel"), catalog)

        assert item.matched is True
        assert item.canonical_name == "croissant"

    def test_threshold_is_strict(self):
        """Test a score equal to the threshold is rejected."""
        catalog = [VoiceMenuMapping(canonical_id="tea", spoken_names=["tea"])]

        assert match_menu_item(_item("teas"), catalog).matched is True
        strict = MatchPolicy(fuzzy_threshold=0.75)
        assert match_menu_item(_item("teas"), catalog, strict).matched is False

    def test_malformed_entry_skipped(self, caplog):
        """Test entries without spoken names are skipped with a warning."""
        catalog = [VoiceMenuMapping(canonical_id="broken", spoken_names=[], aliases=["nothing"])]
        caplog.set_level(logging.WARNING)

        item = match_menu_item(_item("nothing"), catalog)

        assert item.matched is False
        assert "broken" in caplog.text

    def test_empty_name_unmatched(self, food_catalog):
        """Test an empty raw name never matches."""
        assert match_menu_item(_item(""), food_catalog).matched is False

    def test_rematch_resets_previous_match(self, food_catalog):
        """Test re-matching against a new catalog drops stale results."""
        matched = match_menu_items([_item("kafi")], food_catalog)[0]
        rematched = match_menu_items([matched], [])[0]

        assert matched.matched is True
        assert rematched.matched is False
        assert rematched.canonical_name is None

    def test_confidence_bounds(self, food_catalog):
        """Test confidence stays in [0, 1] and is zero exactly when unmatched."""
        names = ["kafi", "schale", "capucino", "widget", "röschti", "croissants", "", "bier"]
        for item in match_menu_items([_item(name) for name in names], food_catalog):
            assert 0 <= item.confidence <= 1
            assert (item.matched is False) == (item.confidence == 0)

    def test_custom_policy(self, food_catalog):
        """Test confidence values come from the policy."""
        policy = MatchPolicy(alias_confidence=0.85)
        assert match_menu_item(_item("cappu"), food_catalog, policy).confidence == 0.85

    def test_policy_from_settings(self):
        """Test the policy reads tunable values from settings."""
        settings = Settings(fuzzy_match_threshold=0.5, alias_match_confidence=0.8)
        policy = MatchPolicy.from_settings(settings)

        assert policy.fuzzy_threshold == 0.5
        assert policy.alias_confidence == 0.8
        assert policy.exact_confidence == 1.0

    def test_unmatched_item_invariant(self):
        """Test unmatched items cannot carry a confidence."""
        with pytest.raises(ValidationError):
            ParsedOrderItem(raw_name="kaffee", confidence=0.5)
        with pytest.raises(ValidationError):
            ParsedOrderItem(raw_name="kaffee", quantity=0)
