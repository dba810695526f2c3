"""
Abstract Base Class for Tax Calculators

Defines the interface that all entity-specific tax calculators must implement.
Each calculator takes a profit figure and produces a TaxLiability result.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Type

from company_tax.tax.company_types_config import COMPANY_TYPES
from company_tax.tax.tax_models import (
    EntityType,
    InvalidEntityType,
    ProfitInput,
    TaxBracket,
    TaxLiability,
    exact_context,
)
from company_tax.utils.logging_config import setup_logger

logger = setup_logger(__name__)


class TaxCalculator(ABC):
    """
    Abstract base class for entity-specific tax calculators.

    Each subclass implements the tax rules for one legal entity type.
    Calculators hold no state, so one instance can serve any number of callers.
    """

    JURISDICTION = "Malaysia (MY)"

    # Final tax is rounded to whole ringgit, exact halves away from zero
    ROUNDING = ROUND_HALF_UP
    EFFECTIVE_RATE_PLACES = Decimal("0.0001")

    @abstractmethod
    def calculate_tax_liability(self, profit) -> TaxLiability:
        """
        Calculate tax payable on a net profit figure.

        Args:
            profit: Net profit in ringgit (negative = loss)

        Returns:
            TaxLiability object with tax owed and breakdown
        """
        pass

    @abstractmethod
    def get_entity_name(self) -> str:
        """
        Return the human-readable name of this entity type.

        Returns:
            Entity name (e.g., "Sdn Bhd")
        """
        pass

    @abstractmethod
    def get_entity_type(self) -> EntityType:
        """Return the entity type this calculator implements."""
        pass

    def get_entity_code(self) -> str:
        """
        Return the configuration key for this entity type.

        Returns:
            Entity code (e.g., "SdnBhd")
        """
        return self.get_entity_type().value

    def calculate_tax(self, profit) -> Decimal:
        """Tax payable in whole ringgit."""
        return self.calculate_tax_liability(profit).tax_owed

    def chargeable_profit(self, profit: Decimal) -> Decimal:
        """Losses are not taxed, so chargeable profit never drops below zero."""
        return max(Decimal(0), profit)

    def round_tax(self, amount: Decimal) -> Decimal:
        with exact_context(amount):
            return amount.quantize(Decimal("1"), rounding=self.ROUNDING)

    def build_liability(
        self,
        profit: Decimal,
        breakdown: Dict[str, Decimal],
        assumptions: List[str],
    ) -> TaxLiability:
        """
        Assemble a TaxLiability from per-band contributions.

        Args:
            profit: Parsed profit (may be negative)
            breakdown: Band label -> tax contributed, in band order
            assumptions: Human-readable rate assumptions

        Returns:
            TaxLiability with rounded tax and effective rate
        """
        chargeable = self.chargeable_profit(profit)
        tax_before_rounding = sum(breakdown.values(), start=Decimal(0))
        tax_owed = self.round_tax(tax_before_rounding)

        if chargeable > 0:
            effective_rate = (tax_owed / chargeable).quantize(self.EFFECTIVE_RATE_PLACES)
        else:
            effective_rate = Decimal(0)

        notes = None
        if profit <= 0:
            notes = "No tax payable: profit is zero or a loss"

        profile = COMPANY_TYPES[self.get_entity_code()]

        return TaxLiability(
            jurisdiction=self.JURISDICTION,
            entity_type=self.get_entity_type(),
            profit=profit,
            chargeable_profit=chargeable,
            tax_before_rounding=tax_before_rounding,
            tax_owed=tax_owed,
            effective_rate=effective_rate,
            breakdown=breakdown,
            accounting_standard=profile["accounting_standard"],
            notes=notes,
            assumptions=assumptions,
            calculation_date=date.today(),
            calculator_version=f"1.0-{self.get_entity_code().upper()}",
        )


class ProgressiveBracketCalculator(TaxCalculator):
    """
    Calculator driven by an ordered marginal rate schedule.

    Subclasses set BRACKETS, ascending. Each band taxes the lesser of the
    remaining profit and its width; the walk stops once nothing remains.
    Only the last band may be unbounded.
    """

    BRACKETS: tuple = ()

    def calculate_tax_liability(self, profit) -> TaxLiability:
        profit = ProfitInput.parse(profit).profit

        with exact_context(profit):
            breakdown = self.calculate_band_taxes(self.chargeable_profit(profit))
            liability = self.build_liability(profit, breakdown, self.get_assumptions())

            logger.debug(
                f"{self.get_entity_code()}: profit RM{profit:,.2f} -> "
                f"tax RM{liability.tax_owed:,.0f} over {len(breakdown)} band(s)"
            )
        return liability

    def calculate_band_taxes(self, chargeable: Decimal) -> Dict[str, Decimal]:
        """
        Walk the schedule and return the tax contributed by each band reached.

        Args:
            chargeable: Non-negative chargeable profit

        Returns:
            Ordered mapping of band label to tax for that band
        """
        remaining = chargeable
        breakdown: Dict[str, Decimal] = {}

        for index, bracket in enumerate(self.BRACKETS):
            if remaining <= 0:
                break

            if bracket.is_unbounded():
                breakdown[self.band_label(index, bracket)] = remaining * bracket.rate
                break

            taxable_in_band = min(remaining, bracket.width)
            breakdown[self.band_label(index, bracket)] = taxable_in_band * bracket.rate
            remaining -= bracket.width

        return breakdown

    def band_label(self, index: int, bracket: TaxBracket) -> str:
        rate_pct = f"{(bracket.rate * 100).normalize():f}"

        if bracket.is_unbounded():
            scope = "all" if index == 0 else "remainder"
            return f"{scope}_at_{rate_pct}pct"

        width = f"{bracket.width.normalize():f}"
        scope = "first" if index == 0 else "next"
        return f"{scope}_{width}_at_{rate_pct}pct"

    def get_assumptions(self) -> List[str]:
        """One line per band, e.g. 'Next RM15,000 at 1%'."""
        assumptions = []
        for index, bracket in enumerate(self.BRACKETS):
            rate_pct = f"{(bracket.rate * 100).normalize():f}%"
            if bracket.is_unbounded():
                scope = "All profit" if index == 0 else "Remainder"
                assumptions.append(f"{scope} at {rate_pct}")
            else:
                scope = "First" if index == 0 else "Next"
                assumptions.append(f"{scope} RM{bracket.width:,.0f} at {rate_pct}")
        return assumptions


# Registry of available calculators
_CALCULATOR_REGISTRY: Dict[EntityType, Type[TaxCalculator]] = {}


def register_calculator(entity_type):
    """
    Decorator to register a tax calculator class.

    Usage:
        @register_calculator(EntityType.BERHAD)
        class BerhadTaxCalculator(TaxCalculator):
            ...
    """
    key = EntityType.normalize(entity_type)

    def decorator(cls: Type[TaxCalculator]):
        _CALCULATOR_REGISTRY[key] = cls
        return cls
    return decorator


def get_calculator(entity_type) -> TaxCalculator:
    """
    Factory method to get a tax calculator instance.

    Args:
        entity_type: EntityType or key (e.g., "SdnBhd", "sdn bhd")

    Returns:
        Instance of the appropriate TaxCalculator subclass

    Raises:
        InvalidEntityType: If the entity type is not supported
    """
    key = EntityType.normalize(entity_type)

    if key not in _CALCULATOR_REGISTRY:
        available = ", ".join(list_available_entity_types())
        raise InvalidEntityType(
            f"Tax calculator for '{entity_type}' not found. "
            f"Available: {available}"
        )

    calculator_class = _CALCULATOR_REGISTRY[key]
    return calculator_class()


def list_available_entity_types() -> List[str]:
    """
    Get list of all registered entity types.

    Returns:
        Sorted entity codes (e.g., ["Berhad", "Enterprise", "SdnBhd"])
    """
    return sorted(key.value for key in _CALCULATOR_REGISTRY)

