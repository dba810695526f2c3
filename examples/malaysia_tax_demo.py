"""
Malaysian Company Tax - Usage Example

Demonstrates the tax engine on sample profit figures: a full liability
report for one entity type and a comparison across all entity types.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal

from company_tax.tax import EntityType, calculate_tax_liability, get_company_profile
from company_tax.tax.comparison import compare_entity_types, tax_schedule


def main():
    """Demonstrate tax engine usage."""

    print("=" * 70)
    print("Malaysian Company Tax - Demo")
    print("=" * 70)
    print()

    profit = Decimal("250000.00")
    entity_type = EntityType.ENTERPRISE
    profile = get_company_profile(entity_type)

    liability = calculate_tax_liability(entity_type, profit)

    print(f"Entity type: {profile.display_name}")
    print(f"Accounting standard: {profile.accounting_standard} ({profile.accounting_standard_full_name})")
    print(f"Jurisdiction: {liability.jurisdiction}")
    print()

    print("=" * 70)
    print("BREAKDOWN BY BAND")
    print("=" * 70)
    for band, amount in liability.breakdown.items():
        print(f"  {band:<30} RM{amount:>12,.2f}")

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"Net Profit:          RM{liability.profit:>12,.2f}")
    print(f"Chargeable Profit:   RM{liability.chargeable_profit:>12,.2f}")
    print(f"Tax Before Rounding: RM{liability.tax_before_rounding:>12,.2f}")
    print(f"Effective Rate:      {liability.effective_rate * 100:>14.2f}%")
    print(f"Tax Owed:            RM{liability.tax_owed:>12,.0f}")
    print()

    print("=" * 70)
    print("ASSUMPTIONS")
    print("=" * 70)
    for assumption in liability.assumptions:
        print(f"  • {assumption}")

    print()
    print("=" * 70)
    print(f"ENTITY COMPARISON AT RM{profit:,.2f}")
    print("=" * 70)
    print(compare_entity_types(profit).to_string(index=False))

    print()
    print("=" * 70)
    print("SDN BHD SCHEDULE")
    print("=" * 70)
    profits = [Decimal(p) for p in ("0", "100000", "500000", "600000", "1000000")]
    print(tax_schedule(EntityType.SDN_BHD, profits).to_string(index=False))

    print()
    print("=" * 70)


if __name__ == "__main__":
    main()
