"""
Enterprise Tax Calculator (sole proprietorship / partnership)

Business profit of an enterprise is assessed on the owner at personal
income tax rates, using a progressive marginal schedule:

    First   RM5,000     0%
    Next    RM15,000    1%
    Next    RM15,000    3%
    Next    RM15,000    6%
    Next    RM20,000   11%
    Next    RM30,000   19%
    Next    RM150,000  25%
    Next    RM150,000  26%
    Remainder          28%

Only the slice of profit inside each band is taxed at that band's rate.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal

from company_tax.tax.tax_models import EntityType, TaxBracket
from company_tax.tax.calculators.base import ProgressiveBracketCalculator, register_calculator


@register_calculator(EntityType.ENTERPRISE)
class EnterpriseTaxCalculator(ProgressiveBracketCalculator):
    """
    Tax calculator for enterprises (personal income tax schedule).

    Key Rules:
    - First RM5,000 is taxed at 0%
    - Top marginal rate of 28% above RM400,000
    """

    BRACKETS = (
        TaxBracket(width=Decimal("5000"), rate=Decimal("0")),
        TaxBracket(width=Decimal("15000"), rate=Decimal("0.01")),
        TaxBracket(width=Decimal("15000"), rate=Decimal("0.03")),
        TaxBracket(width=Decimal("15000"), rate=Decimal("0.06")),
        TaxBracket(width=Decimal("20000"), rate=Decimal("0.11")),
        TaxBracket(width=Decimal("30000"), rate=Decimal("0.19")),
        TaxBracket(width=Decimal("150000"), rate=Decimal("0.25")),
        TaxBracket(width=Decimal("150000"), rate=Decimal("0.26")),
        TaxBracket(width=None, rate=Decimal("0.28")),
    )

    def get_entity_name(self) -> str:
        return "Enterprise"

    def get_entity_type(self) -> EntityType:
        return EntityType.ENTERPRISE
