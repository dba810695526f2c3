"""
Tax Calculator System

Provides entity-specific tax calculation implementations.
Importing this package registers every calculator.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .base import (
    TaxCalculator,
    ProgressiveBracketCalculator,
    get_calculator,
    list_available_entity_types,
    register_calculator,
)
from .sdn_bhd import SdnBhdTaxCalculator
from .enterprise import EnterpriseTaxCalculator
from .berhad import BerhadTaxCalculator

__all__ = [
    "TaxCalculator",
    "ProgressiveBracketCalculator",
    "SdnBhdTaxCalculator",
    "EnterpriseTaxCalculator",
    "BerhadTaxCalculator",
    "get_calculator",
    "list_available_entity_types",
    "register_calculator",
]
