"""
Tax Module

Statutory tax payable by Malaysian legal entities on net profit.

Features:
- Sdn Bhd two-tier corporate rate
- Enterprise progressive personal rates
- Berhad flat corporate rate
- Per-band breakdown and entity comparison tables

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .tax_models import (
    EntityType,
    InvalidEntityType,
    InvalidProfitValue,
    TaxBracket,
    TaxLiability,
)
from .engine import (
    COMPANY_PROFILES,
    CompanyProfile,
    calculate_tax,
    calculate_tax_liability,
    get_company_profile,
    list_entity_types,
    parse_profit,
)

__all__ = [
    "EntityType",
    "InvalidEntityType",
    "InvalidProfitValue",
    "TaxBracket",
    "TaxLiability",
    "COMPANY_PROFILES",
    "CompanyProfile",
    "calculate_tax",
    "calculate_tax_liability",
    "get_company_profile",
    "list_entity_types",
    "parse_profit",
]
