"""
Unit Tests for Entity Comparison Tables

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from decimal import Decimal

from company_tax.tax import EntityType, InvalidEntityType, InvalidProfitValue
from company_tax.tax.comparison import (
    COMPARISON_COLUMNS,
    SCHEDULE_COLUMNS,
    compare_entity_types,
    tax_schedule,
)


class TestCompareEntityTypes:

    @pytest.fixture
    def table(self):
        return compare_entity_types(Decimal("600000"))

    def test_one_row_per_entity_type(self, table):
        assert list(table.columns) == COMPARISON_COLUMNS
        assert table["entity_type"].tolist() == ["SdnBhd", "Enterprise", "Berhad"]

    def test_tax_owed(self, table):
        """
        At RM600,000:
        - Sdn Bhd: 85,000 + 24,000 = 109,000
        - Enterprise: 113,900 up to RM500,000 + 100,000 * 28% = 141,900
        - Berhad: 600,000 * 24% = 144,000
        """
        assert table["tax_owed"].tolist() == [
            Decimal("109000"),
            Decimal("141900"),
            Decimal("144000"),
        ]

    def test_profile_columns(self, table):
        berhad = table[table["entity_type"] == "Berhad"].iloc[0]

        assert berhad["display_name"] == "Berhad"
        assert berhad["accounting_standard"] == "MFRS"
        assert berhad["effective_rate"] == Decimal("0.24")
        assert berhad["profit"] == Decimal("600000")

    def test_amounts_stay_decimal(self, table):
        assert all(isinstance(value, Decimal) for value in table["tax_owed"])

    def test_loss(self):
        table = compare_entity_types("-1000")
        assert table["tax_owed"].tolist() == [0, 0, 0]

    def test_invalid_profit(self):
        with pytest.raises(InvalidProfitValue):
            compare_entity_types("n/a")


class TestTaxSchedule:

    def test_schedule_rows_follow_input_order(self):
        table = tax_schedule(EntityType.SDN_BHD, [0, 500000, 600000])

        assert list(table.columns) == SCHEDULE_COLUMNS
        assert table["profit"].tolist() == [0, 500000, 600000]
        assert table["tax_owed"].tolist() == [0, 85000, 109000]

    def test_marginal_tax(self):
        table = tax_schedule("Enterprise", ["5000", "20000", "35000"])

        assert table["marginal_tax"].tolist() == [0, 150, 450]

    def test_marginal_tax_on_large_profits(self):
        table = tax_schedule(EntityType.BERHAD, ["1e30", "1234567890123456789012345678901.50"])

        assert table["tax_owed"].tolist() == [
            Decimal("240000000000000000000000000000"),
            Decimal("296296293629629629362962962936"),
        ]
        assert table["marginal_tax"].tolist() == [0, Decimal("56296293629629629362962962936")]

    def test_empty_schedule(self):
        table = tax_schedule(EntityType.BERHAD, [])

        assert table.empty
        assert list(table.columns) == SCHEDULE_COLUMNS

    def test_unknown_entity_type_rejected_up_front(self):
        with pytest.raises(InvalidEntityType):
            tax_schedule("Koperasi", [])

    def test_invalid_profit_in_schedule(self):
        with pytest.raises(InvalidProfitValue):
            tax_schedule(EntityType.BERHAD, [1000, "oops"])
