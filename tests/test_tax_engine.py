"""
Unit Tests for the Company Tax Engine

Covers input parsing, dispatch by entity type and the static company profiles.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import dataclasses
from unittest.mock import MagicMock

import pytest
from decimal import Decimal

from company_tax.tax import (
    COMPANY_PROFILES,
    EntityType,
    InvalidEntityType,
    InvalidProfitValue,
    calculate_tax,
    calculate_tax_liability,
    get_company_profile,
    list_entity_types,
    parse_profit,
)
from company_tax.tax import engine
from company_tax.tax.tax_models import TaxRequest


class TestCalculateTax:
    """Reference figures for each entity type."""

    def test_sdn_bhd_band_limit(self):
        assert calculate_tax(EntityType.SDN_BHD, 500000) == 85000

    def test_sdn_bhd_above_band_limit(self):
        assert calculate_tax(EntityType.SDN_BHD, 600000) == 109000

    def test_berhad_flat_rate(self):
        assert calculate_tax(EntityType.BERHAD, 1000000) == 240000

    def test_enterprise_first_band(self):
        assert calculate_tax(EntityType.ENTERPRISE, 5000) == 0

    def test_enterprise_second_band(self):
        assert calculate_tax(EntityType.ENTERPRISE, 20000) == 150

    @pytest.mark.parametrize("entity_type", list(EntityType))
    @pytest.mark.parametrize("profit", [0, -1, "-0.01", Decimal("-1000000")])
    def test_no_tax_on_nil_profit_or_loss(self, entity_type, profit):
        assert calculate_tax(entity_type, profit) == 0

    def test_result_is_whole_ringgit_decimal(self):
        tax = calculate_tax(EntityType.ENTERPRISE, Decimal("123456.78"))

        assert isinstance(tax, Decimal)
        assert tax == tax.to_integral_value()

    def test_string_entity_keys(self):
        assert calculate_tax("SdnBhd", 600000) == 109000
        assert calculate_tax("sdn bhd", 600000) == 109000
        assert calculate_tax("Sdn. Bhd.", 600000) == 109000
        assert calculate_tax("BHD", 1000000) == 240000
        assert calculate_tax(" enterprise ", 20000) == 150

    def test_profit_in_sen(self):
        """100,000,000 sen = RM1,000,000"""
        assert calculate_tax(EntityType.BERHAD, 100000000, in_sen=True) == 240000

    def test_repeated_calls_match(self):
        first = calculate_tax(EntityType.ENTERPRISE, "345678.90")
        second = calculate_tax(EntityType.ENTERPRISE, "345678.90")
        assert first == second


class TestLargeProfits:
    """Figures wider than the default 28-digit decimal context stay exact."""

    @pytest.mark.parametrize("profit", ["1e30", 1e30, Decimal("1E+30"), 10 ** 30])
    def test_berhad_at_1e30(self, profit):
        assert calculate_tax(EntityType.BERHAD, profit) == Decimal("240000000000000000000000000000")

    def test_sdn_bhd_at_1e30(self):
        """85,000 + (10^30 - 500,000) * 24%"""
        assert calculate_tax(EntityType.SDN_BHD, "1e30") == Decimal("239999999999999999999999965000")

    def test_enterprise_at_1e30(self):
        """113,900 up to RM500,000 + (10^30 - 500,000) * 28%"""
        assert calculate_tax(EntityType.ENTERPRISE, "1e30") == Decimal("279999999999999999999999973900")

    def test_many_significant_digits(self):
        """33 significant digits: nothing is rounded before the final ringgit."""
        liability = calculate_tax_liability(
            EntityType.BERHAD, "1234567890123456789012345678901.50"
        )

        assert liability.tax_before_rounding == Decimal("296296293629629629362962962936.36")
        assert liability.tax_owed == Decimal("296296293629629629362962962936")
        assert liability.effective_rate == Decimal("0.2400")

    def test_large_profit_in_sen(self):
        """1,234,...,234 sen = RM12,345,...,012.34; 24% = ...362.9616"""
        tax = calculate_tax(EntityType.BERHAD, 1234567890123456789012345678901234, in_sen=True)

        assert tax == Decimal("2962962936296296293629629629363")


class TestCalculateTaxLiability:

    def test_matches_calculate_tax(self):
        liability = calculate_tax_liability("Enterprise", 250000)

        assert liability.tax_owed == calculate_tax("Enterprise", 250000)
        assert liability.entity_type is EntityType.ENTERPRISE
        assert liability.profit == Decimal("250000")

    def test_breakdown_sums_to_unrounded_tax(self):
        liability = calculate_tax_liability(EntityType.SDN_BHD, "612345.67")

        assert sum(liability.breakdown.values()) == liability.tax_before_rounding

    def test_loss_keeps_signed_profit(self):
        liability = calculate_tax_liability(EntityType.BERHAD, "-5000")

        assert liability.profit == Decimal("-5000")
        assert liability.chargeable_profit == 0
        assert liability.tax_owed == 0


class TestInvalidInput:
    """Caller-input errors are raised before any calculation."""

    @pytest.mark.parametrize("entity_type", ["LLP", "", "Sdn", None, 3, "Berhad Sdn"])
    def test_unknown_entity_type(self, entity_type):
        with pytest.raises(InvalidEntityType):
            calculate_tax(entity_type, 1000)

    def test_entity_type_checked_before_profit(self):
        with pytest.raises(InvalidEntityType):
            calculate_tax("LLP", "not a number")

    @pytest.mark.parametrize("profit", [
        "abc",
        "",
        "RM",
        None,
        True,
        float("nan"),
        float("inf"),
        float("-inf"),
        "NaN",
        Decimal("Infinity"),
        object(),
    ])
    def test_invalid_profit(self, profit):
        with pytest.raises(InvalidProfitValue):
            calculate_tax(EntityType.SDN_BHD, profit)

    def test_fractional_sen_rejected(self):
        with pytest.raises(InvalidProfitValue, match="whole numbers"):
            calculate_tax(EntityType.SDN_BHD, "12.5", in_sen=True)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            calculate_tax("LLP", 1)
        with pytest.raises(ValueError):
            calculate_tax(EntityType.BERHAD, "abc")

    @pytest.mark.parametrize("call,message", [
        (lambda: calculate_tax("LLP", 1000), "Rejected tax request"),
        (lambda: calculate_tax(EntityType.BERHAD, "abc"), "Rejected tax request"),
        (lambda: parse_profit("abc"), "Rejected profit value"),
        (lambda: get_company_profile("Koperasi"), "Rejected entity type"),
    ])
    def test_rejection_logged_once(self, monkeypatch, call, message):
        mock_logger = MagicMock()
        monkeypatch.setattr(engine, "logger", mock_logger)

        with pytest.raises(ValueError):
            call()

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0].startswith(message)


class TestTaxRequest:

    def test_from_inputs(self):
        request = TaxRequest.from_inputs("sdn bhd", "RM 1,234.56")

        assert request.entity_type is EntityType.SDN_BHD
        assert request.profit == Decimal("1234.56")

    def test_from_inputs_in_sen(self):
        request = TaxRequest.from_inputs(EntityType.ENTERPRISE, 123456, in_sen=True)

        assert request.entity_type is EntityType.ENTERPRISE
        assert request.profit == Decimal("1234.56")

    def test_direct_construction_validates(self):
        request = TaxRequest(entity_type="Bhd", profit="1,000")

        assert request.entity_type is EntityType.BERHAD
        assert request.profit == Decimal("1000")


class TestParseProfit:

    @pytest.mark.parametrize("value,expected", [
        (1000, Decimal("1000")),
        (Decimal("1234.56"), Decimal("1234.56")),
        (0.1, Decimal("0.1")),
        ("1234.56", Decimal("1234.56")),
        ("1,234,567.89", Decimal("1234567.89")),
        ("RM 1,234.56", Decimal("1234.56")),
        ("rm500", Decimal("500")),
        ("  -2500.00 ", Decimal("-2500.00")),
    ])
    def test_accepted_formats(self, value, expected):
        assert parse_profit(value) == expected

    def test_sen_conversion(self):
        assert parse_profit(123456, in_sen=True) == Decimal("1234.56")
        assert parse_profit("-150", in_sen=True) == Decimal("-1.50")


class TestCompanyProfiles:
    """Static configuration of the entity types."""

    def test_all_entity_types_have_profiles(self):
        assert list_entity_types() == [
            EntityType.SDN_BHD,
            EntityType.ENTERPRISE,
            EntityType.BERHAD,
        ]
        assert set(COMPANY_PROFILES) == set(EntityType)

    def test_sdn_bhd_profile(self):
        profile = get_company_profile("SdnBhd")

        assert profile.display_name == "Sdn Bhd"
        assert profile.accounting_standard == "MPERS"
        assert profile.accounting_standard_full_name == "Malaysian Private Entities Reporting Standard"
        assert "17%" in profile.tax_description

    def test_berhad_profile(self):
        profile = get_company_profile(EntityType.BERHAD)

        assert profile.accounting_standard == "MFRS"
        assert profile.accounting_standard_full_name == "Malaysian Financial Reporting Standards"
        assert profile.tax_description == "Flat 24%"

    def test_profile_calculates_tax(self):
        assert get_company_profile(EntityType.SDN_BHD).calculate_tax(600000) == 109000
        assert get_company_profile(EntityType.ENTERPRISE).calculate_tax(20000) == 150

    def test_profiles_are_read_only(self):
        with pytest.raises(TypeError):
            COMPANY_PROFILES[EntityType.BERHAD] = None

    def test_profile_fields_are_frozen(self):
        profile = get_company_profile(EntityType.BERHAD)
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.tax_description = "Flat 0%"

    def test_unknown_profile(self):
        with pytest.raises(InvalidEntityType):
            get_company_profile("Koperasi")
