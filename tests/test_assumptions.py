"""Tests for the assumptions configuration."""

import dataclasses

import pytest

from savings_calculator.config.assumptions import (
    DEFAULT_ASSUMPTIONS,
    AssumptionsError,
    get_assumptions,
    load_assumptions,
)


class TestDefaultAssumptions:
    """Tests for the compiled-in table."""

    def test_default_values(self):
        """Test the published default unit economics."""
        a = get_assumptions()

        assert a.storage.cost_per_sqm == 12
        assert a.storage.merchant_overhead_multiplier == 1.25
        assert a.handling_in.labor_cost_per_minute == 0.5
        assert a.handling_in.merchant_time_per_item == 2
        assert a.handling_in.roots_time_per_item == 1
        assert a.handling_in.roots_efficiency_multiplier == 0.85
        assert a.handling_out.merchant_time_per_order == 5
        assert a.handling_out.roots_time_per_order == 3
        assert a.delivery.merchant_cost_per_order == 2.2
        assert a.delivery.roots_cost_per_order == 2.0
        assert a.overhead.merchant_overhead_rate == 0.2
        assert a.overhead.roots_overhead == 0

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ASSUMPTIONS.storage.cost_per_sqm = 99

    def test_to_dict_sections(self):
        data = DEFAULT_ASSUMPTIONS.to_dict()
        assert list(data) == ["storage", "handling_in", "handling_out", "delivery", "overhead"]
        assert data["delivery"] == {"merchant_cost_per_order": 2.2, "roots_cost_per_order": 2.0}


class TestMergedWith:
    """Tests for overlaying overrides."""

    def test_partial_override(self):
        updated = DEFAULT_ASSUMPTIONS.merged_with({"delivery": {"roots_cost_per_order": 1.5}})

        assert updated.delivery.roots_cost_per_order == 1.5
        assert updated.delivery.merchant_cost_per_order == 2.2
        assert updated.storage == DEFAULT_ASSUMPTIONS.storage
        # Original untouched
        assert DEFAULT_ASSUMPTIONS.delivery.roots_cost_per_order == 2.0

    def test_empty_section_is_ignored(self):
        assert DEFAULT_ASSUMPTIONS.merged_with({"storage": None}) == DEFAULT_ASSUMPTIONS

    def test_unknown_section(self):
        with pytest.raises(AssumptionsError, match="Unknown assumptions section"):
            DEFAULT_ASSUMPTIONS.merged_with({"insurance": {"rate": 1}})

    def test_unknown_field(self):
        with pytest.raises(AssumptionsError, match="Unknown field"):
            DEFAULT_ASSUMPTIONS.merged_with({"storage": {"cost_per_acre": 1}})

    @pytest.mark.parametrize("value", ["12", None, True, float("nan"), float("inf")])
    def test_non_numeric_value(self, value):
        with pytest.raises(AssumptionsError, match="finite number"):
            DEFAULT_ASSUMPTIONS.merged_with({"storage": {"cost_per_sqm": value}})

    def test_section_must_be_mapping(self):
        with pytest.raises(AssumptionsError):
            DEFAULT_ASSUMPTIONS.merged_with({"storage": [1, 2]})

    def test_assumptions_error_is_value_error(self):
        assert issubclass(AssumptionsError, ValueError)


class TestLoadAssumptions:
    """Tests for loading assumptions from YAML."""

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "assumptions.yaml"
        path.write_text(
            "storage:\n"
            "  cost_per_sqm: 15\n"
            "overhead:\n"
            "  merchant_overhead_rate: 0.3\n",
            encoding="utf-8",
        )

        assumptions = load_assumptions(path)

        assert assumptions.storage.cost_per_sqm == 15
        assert assumptions.storage.merchant_overhead_multiplier == 1.25
        assert assumptions.overhead.merchant_overhead_rate == 0.3
        assert assumptions.handling_in == DEFAULT_ASSUMPTIONS.handling_in

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_assumptions(path) == DEFAULT_ASSUMPTIONS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_assumptions(tmp_path / "missing.yaml")

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(AssumptionsError):
            load_assumptions(path)

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("delivery:\n  roots_cost_per_order: cheap\n", encoding="utf-8")

        with pytest.raises(AssumptionsError):
            load_assumptions(path)

    def test_project_file_matches_defaults(self):
        """The shipped config/assumptions.yaml mirrors the compiled-in table."""
        assert load_assumptions() == DEFAULT_ASSUMPTIONS
