"""Tests for the savings calculator engine."""

import pytest
from dataclasses import replace

from savings_calculator.config.assumptions import DEFAULT_ASSUMPTIONS
from savings_calculator.cost.calculator import (
    MerchantInput,
    SavingsCalculator,
    ServiceSavings,
    compute_savings,
)
from savings_calculator.cost.packages import PACKAGES, PackageType, ServiceType, resolve_package


class TestPackages:
    """Tests for the package catalogue."""

    def test_fulfillment_includes_every_service(self):
        """Fulfillment covers all four services in order."""
        assert PackageType.FULFILLMENT.services == (
            ServiceType.STORAGE,
            ServiceType.HANDLING_IN,
            ServiceType.HANDLING_OUT,
            ServiceType.DELIVERY,
        )

    def test_store_pack_excludes_delivery(self):
        services = PackageType.STORE_PACK.services
        assert ServiceType.DELIVERY not in services
        assert services == (ServiceType.STORAGE, ServiceType.HANDLING_IN, ServiceType.HANDLING_OUT)

    def test_sort_pack_excludes_storage(self):
        services = PackageType.SORT_PACK.services
        assert ServiceType.STORAGE not in services
        assert services == (ServiceType.HANDLING_IN, ServiceType.HANDLING_OUT, ServiceType.DELIVERY)

    def test_labels(self):
        """Test display labels."""
        assert PackageType.STORE_PACK.label == "Store & Pack Package"
        assert PackageType.STORE_PACK.short_label == "Store & Pack"
        assert ServiceType.HANDLING_OUT.label == "Handling Out"
        assert PACKAGES[PackageType.SORT_PACK].description == "Sorting, packaging and delivery"

    def test_resolve_package_from_string(self):
        assert resolve_package("sort-pack") is PackageType.SORT_PACK
        assert resolve_package(PackageType.FULFILLMENT) is PackageType.FULFILLMENT

    def test_resolve_unknown_package(self):
        with pytest.raises(ValueError):
            resolve_package("premium")


class TestComputeSavings:
    """Tests for compute_savings."""

    def test_reference_scenario_service_costs(self, fulfillment_result):
        """500 sqm / 1000 orders / 2 items on the fulfillment package."""
        merchant = fulfillment_result.merchant
        roots = fulfillment_result.alternate

        assert merchant.storage == pytest.approx(7500)
        assert roots.storage == pytest.approx(6000)
        assert merchant.handling_in == pytest.approx(2000)
        assert roots.handling_in == pytest.approx(850)
        assert merchant.handling_out == pytest.approx(2500)
        assert roots.handling_out == pytest.approx(1275)
        assert merchant.delivery == pytest.approx(2200)
        assert roots.delivery == pytest.approx(2000)

    def test_reference_scenario_totals(self, fulfillment_result):
        """Overhead, totals and savings for the reference scenario."""
        assert fulfillment_result.merchant.subtotal == pytest.approx(14200)
        assert fulfillment_result.merchant.overhead == pytest.approx(2840)
        assert fulfillment_result.merchant.total == pytest.approx(17040)
        assert fulfillment_result.alternate.subtotal == pytest.approx(10125)
        assert fulfillment_result.alternate.overhead == 0
        assert fulfillment_result.alternate.total == pytest.approx(10125)

        assert fulfillment_result.savings.monthly == pytest.approx(6915)
        assert fulfillment_result.savings.yearly == pytest.approx(82980)
        assert fulfillment_result.savings.percentage == pytest.approx(40.58, abs=0.01)

    @pytest.mark.parametrize("package", list(PackageType))
    def test_total_is_subtotal_plus_overhead(self, sample_input, package):
        result = compute_savings(sample_input, package, DEFAULT_ASSUMPTIONS)

        for party in (result.merchant, result.alternate):
            included = sum(party.cost_of(service) for service in package.services)
            assert party.total == pytest.approx(included + party.overhead)

    @pytest.mark.parametrize("package", list(PackageType))
    def test_yearly_is_twelve_times_monthly(self, sample_input, package):
        result = compute_savings(sample_input, package, DEFAULT_ASSUMPTIONS)

        assert result.savings.monthly == result.merchant.total - result.alternate.total
        assert result.savings.yearly == result.savings.monthly * 12

    def test_excluded_services_cost_nothing(self, sample_input):
        """Services outside the package are zero on both sides."""
        store_pack = compute_savings(sample_input, PackageType.STORE_PACK, DEFAULT_ASSUMPTIONS)
        sort_pack = compute_savings(sample_input, PackageType.SORT_PACK, DEFAULT_ASSUMPTIONS)

        assert store_pack.merchant.delivery == 0
        assert store_pack.alternate.delivery == 0
        assert sort_pack.merchant.storage == 0
        assert sort_pack.alternate.storage == 0

    def test_exclusion_does_not_change_included_costs(self, sample_input, fulfillment_result):
        """Switching packages only changes which services are summed."""
        for package in (PackageType.STORE_PACK, PackageType.SORT_PACK):
            result = compute_savings(sample_input, package, DEFAULT_ASSUMPTIONS)
            for service in package.services:
                assert result.merchant.cost_of(service) == fulfillment_result.merchant.cost_of(service)
                assert result.alternate.cost_of(service) == fulfillment_result.alternate.cost_of(service)

    def test_store_pack_totals(self, sample_input):
        result = compute_savings(sample_input, PackageType.STORE_PACK, DEFAULT_ASSUMPTIONS)

        # (7500 + 2000 + 2500) * 1.2 vs 6000 + 850 + 1275
        assert result.merchant.total == pytest.approx(14400)
        assert result.alternate.total == pytest.approx(8125)
        assert result.savings.monthly == pytest.approx(6275)

    def test_package_accepts_string(self, sample_input, fulfillment_result):
        result = compute_savings(sample_input, "fulfillment", DEFAULT_ASSUMPTIONS)
        assert result.package is PackageType.FULFILLMENT
        assert result.merchant.total == fulfillment_result.merchant.total

    def test_all_zero_input(self):
        """Zero input yields zero costs and 0% savings without error."""
        result = compute_savings(MerchantInput(), PackageType.FULFILLMENT, DEFAULT_ASSUMPTIONS)

        assert result.merchant.total == 0
        assert result.alternate.total == 0
        assert result.savings.monthly == 0
        assert result.savings.yearly == 0
        assert result.savings.percentage == 0

    def test_percentage_zero_when_merchant_total_zero(self):
        """Roots overhead alone produces negative savings but no division error."""
        assumptions = replace(
            DEFAULT_ASSUMPTIONS,
            overhead=replace(DEFAULT_ASSUMPTIONS.overhead, roots_overhead=100),
        )
        result = compute_savings(MerchantInput(), PackageType.FULFILLMENT, assumptions)

        assert result.merchant.total == 0
        assert result.alternate.total == 100
        assert result.savings.monthly == -100
        assert result.savings.percentage == 0

    @pytest.mark.parametrize("package", [PackageType.FULFILLMENT, PackageType.SORT_PACK])
    def test_more_orders_never_lower_outbound_costs(self, package):
        """Handling-out and delivery costs are monotonic in orders per month."""
        previous = None
        for orders in (0, 10, 250, 1000, 5000):
            merchant_input = MerchantInput(500, orders, 2)
            result = compute_savings(merchant_input, package, DEFAULT_ASSUMPTIONS)
            if previous is not None:
                for service in (ServiceType.HANDLING_OUT, ServiceType.DELIVERY):
                    assert result.merchant.cost_of(service) >= previous.merchant.cost_of(service)
                    assert result.alternate.cost_of(service) >= previous.alternate.cost_of(service)
            previous = result

    def test_injected_assumptions_are_used(self, sample_input):
        """The table passed in, not the defaults, drives the result."""
        assumptions = DEFAULT_ASSUMPTIONS.merged_with({
            "storage": {"cost_per_sqm": 20},
            "overhead": {"roots_overhead": 500},
        })
        result = compute_savings(sample_input, PackageType.FULFILLMENT, assumptions)

        assert result.merchant.storage == pytest.approx(500 * 20 * 1.25)
        assert result.alternate.storage == pytest.approx(500 * 20)
        assert result.alternate.overhead == 500
        assert result.alternate.total == pytest.approx(10000 + 850 + 1275 + 2000 + 500)

    def test_negative_input_is_not_rejected(self):
        result = compute_savings(MerchantInput(-10, 0, 0), PackageType.STORE_PACK, DEFAULT_ASSUMPTIONS)
        assert result.merchant.storage == pytest.approx(-150)

    def test_service_savings_in_package_order(self, fulfillment_result):
        lines = fulfillment_result.service_savings()

        assert [line.service for line in lines] == list(PackageType.FULFILLMENT.services)
        storage = lines[0]
        assert storage.savings == pytest.approx(1500)
        assert storage.savings_pct == pytest.approx(20.0)
        assert lines[3].savings_pct == pytest.approx(200 / 2200 * 100)

    def test_service_savings_zero_guard(self):
        line = ServiceSavings(ServiceType.STORAGE, merchant_cost=0, alternate_cost=0)
        assert line.savings_pct == 0

    def test_to_dict(self, fulfillment_result):
        """Test converting a result to dictionary."""
        data = fulfillment_result.to_dict()

        assert data["package"] == "fulfillment"
        assert data["merchant_cost"]["total"] == 17040
        assert data["roots_cost"]["handling_in"] == 850
        assert data["savings"] == {"monthly": 6915, "yearly": 82980, "percentage": 40.6}
        assert len(data["services"]) == 4


class TestSavingsCalculator:
    """Tests for SavingsCalculator class."""

    def test_defaults_to_builtin_assumptions(self):
        assert SavingsCalculator().assumptions == DEFAULT_ASSUMPTIONS

    def test_calculate_matches_function(self, calculator, sample_input, fulfillment_result):
        result = calculator.calculate(sample_input)
        assert result.savings.monthly == fulfillment_result.savings.monthly

    def test_compare_packages(self, calculator, sample_input):
        results = calculator.compare_packages(sample_input)

        assert list(results) == list(PackageType)
        assert results[PackageType.STORE_PACK].package is PackageType.STORE_PACK

    def test_get_package_summary(self, calculator, sample_input):
        rows = calculator.get_package_summary(calculator.compare_packages(sample_input))

        assert len(rows) == 3
        fulfillment = rows[0]
        assert fulfillment["package"] == "fulfillment"
        assert fulfillment["label"] == "Fulfillment Package"
        assert fulfillment["merchant_total"] == 17040
        assert fulfillment["roots_total"] == 10125
        assert fulfillment["savings_pct"] == 40.6

    def test_generate_timeline(self, calculator, fulfillment_result):
        timeline = calculator.generate_timeline(fulfillment_result)

        assert len(timeline) == 12
        assert timeline[0] == {"month": 1, "monthly_savings": 6915, "cumulative_savings": 6915}
        assert timeline[-1]["cumulative_savings"] == pytest.approx(82980)

    def test_generate_timeline_custom_length(self, calculator, fulfillment_result):
        assert len(calculator.generate_timeline(fulfillment_result, months=3)) == 3
