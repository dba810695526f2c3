"""
Berhad Tax Calculator (public listed company)

Flat 24% corporate rate on all chargeable profit, no tiers.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal

from company_tax.tax.tax_models import EntityType, TaxBracket
from company_tax.tax.calculators.base import ProgressiveBracketCalculator, register_calculator


@register_calculator(EntityType.BERHAD)
class BerhadTaxCalculator(ProgressiveBracketCalculator):
    """Tax calculator for Berhad companies (single unbounded band)."""

    CORPORATE_TAX_RATE = Decimal("0.24")  # 24%

    BRACKETS = (
        TaxBracket(width=None, rate=CORPORATE_TAX_RATE),
    )

    def get_entity_name(self) -> str:
        return "Berhad"

    def get_entity_type(self) -> EntityType:
        return EntityType.BERHAD
