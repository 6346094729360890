"""Tests for multilingual name resolution."""

import pytest

from geodoc.projection.names import (
    NAME_ALIASES,
    language_slot,
    resolve_names,
    resolve_primary_name,
)


class TestResolveNames:
    """Test resolve_names function."""

    def test_default_and_configured_languages(self):
        """Test the default name and matching language variants are selected."""
        names = {"name": "München", "name:en": "Munich", "name:it": "Monaco di Baviera"}

        resolved = resolve_names(names, ["en", "fr"])

        assert resolved == {"default": "München", "en": "Munich"}

    def test_unconfigured_languages_are_ignored(self):
        """Test variants for languages not configured are dropped."""
        resolved = resolve_names({"name:ru": "Москва"}, ["en"])
        assert resolved == {}

    def test_output_follows_configured_order(self):
        """Test language keys follow the configured order after default."""
        names = {"name:fr": "Genève", "name": "Genève", "name:de": "Genf"}

        resolved = resolve_names(names, ["de", "fr"])

        assert list(resolved) == ["default", "de", "fr"]

    def test_duplicate_languages(self):
        """Test repeated language codes produce one entry."""
        resolved = resolve_names({"name:en": "Vienna"}, ["en", "en", "en"])
        assert resolved == {"en": "Vienna"}

    @pytest.mark.parametrize("names", [None, {}])
    def test_empty_input(self, names):
        """Test None and empty mappings resolve to nothing."""
        assert resolve_names(names, ["en", "de"]) == {}

    def test_aliases_are_not_resolved_for_tiers(self):
        """Test alias slots only apply to the primary name."""
        resolved = resolve_names({"alt_name": "Big Apple", "old_name": "New Amsterdam"}, ["en"])
        assert resolved == {}

    def test_language_slot(self):
        """Test the slot naming scheme."""
        assert language_slot("pt-BR") == "name:pt-BR"


class TestResolvePrimaryName:
    """Test resolve_primary_name function."""

    def test_berlin_example(self):
        """Test the documented Berlin example."""
        names = {"name": "Berlin", "name:fr": "Berlin", "alt_name": "Berlin Stadt"}

        resolved = resolve_primary_name(names, ["fr", "en"])

        assert resolved == {"default": "Berlin", "fr": "Berlin", "alt": "Berlin Stadt"}

    def test_all_alias_slots(self):
        """Test every alias slot maps onto its fixed key."""
        names = {
            "alt_name": "A",
            "int_name": "I",
            "loc_name": "L",
            "old_name": "O",
            "reg_name": "R",
            "addr:housename": "H",
        }

        resolved = resolve_primary_name(names, [])

        assert resolved == {"alt": "A", "int": "I", "loc": "L", "old": "O", "reg": "R", "housename": "H"}

    def test_aliases_independent_of_languages(self):
        """Test aliases appear even when no language is configured."""
        assert resolve_primary_name({"int_name": "Roma"}, []) == {"int": "Roma"}

    def test_alias_table(self):
        """Test the alias table keys are unique."""
        keys = [key for _, key in NAME_ALIASES]
        assert len(keys) == len(set(keys)) == 6

    @pytest.mark.parametrize("names", [None, {}])
    def test_empty_input(self, names):
        """Test None and empty mappings resolve to nothing."""
        assert resolve_primary_name(names, ["en"]) == {}

    def test_does_not_mutate_input(self):
        """Test the input mapping is left untouched."""
        names = {"name": "Paris", "alt_name": "Lutèce"}
        resolve_primary_name(names, ["fr"])
        assert names == {"name": "Paris", "alt_name": "Lutèce"}
