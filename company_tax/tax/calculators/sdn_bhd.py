"""
Sdn Bhd Tax Calculator (private limited company)

Implements the two-tier corporate rate for private limited companies:
- 17% on the first RM500,000 of chargeable profit
- 24% on the remainder
- Losses and nil profit pay no tax

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal

from company_tax.tax.tax_models import EntityType, TaxBracket
from company_tax.tax.calculators.base import ProgressiveBracketCalculator, register_calculator


@register_calculator(EntityType.SDN_BHD)
class SdnBhdTaxCalculator(ProgressiveBracketCalculator):
    """
    Tax calculator for Sdn Bhd companies.

    Key Rules:
    - Preferential 17% rate on the first RM500,000
    - Standard 24% corporate rate above that
    """

    PREFERENTIAL_BAND_LIMIT = Decimal("500000")
    PREFERENTIAL_RATE = Decimal("0.17")  # 17%
    STANDARD_RATE = Decimal("0.24")  # 24%

    BRACKETS = (
        TaxBracket(width=PREFERENTIAL_BAND_LIMIT, rate=PREFERENTIAL_RATE),
        TaxBracket(width=None, rate=STANDARD_RATE),
    )

    def get_entity_name(self) -> str:
        return "Sdn Bhd"

    def get_entity_type(self) -> EntityType:
        return EntityType.SDN_BHD
