"""
Company Tax Engine

Entry point for tax calculations. It:
1. Validates the entity-type selector and profit figure
2. Dispatches to the registered calculator for that entity type
3. Returns the rounded tax (or the full TaxLiability report)

Also exposes the static company profiles (accounting standard, rate
summary) that callers show next to the computed tax.

All functions are pure: no I/O beyond logging and no shared mutable state.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Iterator, List, Mapping

from company_tax.tax.calculators import get_calculator
from company_tax.tax.company_types_config import COMPANY_TYPES
from company_tax.tax.tax_models import (
    EntityType,
    InvalidEntityType,
    InvalidProfitValue,
    ProfitInput,
    TaxLiability,
    TaxRequest,
)
from company_tax.utils.logging_config import setup_logger

logger = setup_logger(__name__)


@contextmanager
def _rejected_input(what: str) -> Iterator[None]:
    """Log caller-input errors at WARNING and re-raise them unchanged."""
    try:
        yield
    except (InvalidEntityType, InvalidProfitValue) as e:
        logger.warning(f"Rejected {what}: {e}")
        raise


@dataclass(frozen=True)
class CompanyProfile:
    """Static description of one entity type plus its calculation rule."""

    entity_type: EntityType
    display_name: str
    accounting_standard: str
    accounting_standard_full_name: str
    tax_description: str

    def calculate_tax(self, profit) -> Decimal:
        return calculate_tax(self.entity_type, profit)


def _build_profiles() -> Mapping[EntityType, CompanyProfile]:
    profiles = {}
    for entity_type in EntityType:
        config = COMPANY_TYPES[entity_type.value]
        profiles[entity_type] = CompanyProfile(entity_type=entity_type, **config)
    return MappingProxyType(profiles)


# Built once at import; read-only for the life of the process
COMPANY_PROFILES = _build_profiles()


def get_company_profile(entity_type) -> CompanyProfile:
    """
    Look up the static profile of an entity type.

    Raises:
        InvalidEntityType: If the selector is not a supported entity type
    """
    with _rejected_input("entity type"):
        return COMPANY_PROFILES[EntityType.normalize(entity_type)]


def list_entity_types() -> List[EntityType]:
    """All supported entity types, in declaration order."""
    return list(COMPANY_PROFILES.keys())


def parse_profit(value, in_sen: bool = False) -> Decimal:
    """
    Parse a profit figure into ringgit.

    Args:
        value: Decimal, int, float or string such as "RM 1,234.56"
        in_sen: Treat value as a whole number of sen

    Returns:
        Profit as Decimal ringgit

    Raises:
        InvalidProfitValue: If the value is non-numeric or non-finite
    """
    with _rejected_input("profit value"):
        return ProfitInput.parse(value, in_sen=in_sen).profit


def calculate_tax(entity_type, profit, in_sen: bool = False) -> Decimal:
    """
    Calculate tax payable in whole ringgit.

    Args:
        entity_type: EntityType or key (e.g., "SdnBhd")
        profit: Net profit (negative = loss)
        in_sen: Treat profit as a whole number of sen

    Returns:
        Non-negative tax rounded to whole ringgit

    Raises:
        InvalidEntityType: If the selector is not a supported entity type
        InvalidProfitValue: If the profit is non-numeric or non-finite
    """
    return calculate_tax_liability(entity_type, profit, in_sen=in_sen).tax_owed


def calculate_tax_liability(entity_type, profit, in_sen: bool = False) -> TaxLiability:
    """
    Calculate tax payable with a per-band breakdown.

    Args:
        entity_type: EntityType or key (e.g., "Enterprise")
        profit: Net profit (negative = loss)
        in_sen: Treat profit as a whole number of sen

    Returns:
        TaxLiability for the entity type

    Raises:
        InvalidEntityType: If the selector is not a supported entity type
        InvalidProfitValue: If the profit is non-numeric or non-finite
    """
    with _rejected_input("tax request"):
        request = TaxRequest.from_inputs(entity_type, profit, in_sen=in_sen)
    calculator = get_calculator(request.entity_type)
    return calculator.calculate_tax_liability(request.profit)

