"""
Tax Data Models

Defines the core data structures for the company tax engine:
- EntityType: The fixed set of Malaysian legal entity types
- TaxBracket: One band of a marginal rate schedule
- TaxLiability: Calculated tax payable with breakdown
- ProfitInput / TaxRequest: Validated input at the engine boundary

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation, getcontext, localcontext
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ValidationError, field_validator


# Digits beyond the operand kept free for rates and the effective-rate quotient
EXACT_HEADROOM = 10


def exact_context(amount: Decimal):
    """
    Decimal context wide enough for exact band arithmetic on amount.

    Never narrower than the current context. Use as
    ``with exact_context(profit): ...``.
    """
    context = getcontext().copy()
    digits = amount.adjusted() - min(amount.as_tuple().exponent, 0) + 1
    context.prec = max(context.prec, digits + EXACT_HEADROOM)
    return localcontext(context)


# Custom exceptions
class InvalidEntityType(ValueError):
    """Raised when an entity-type selector is not one of the supported types."""
    pass


class InvalidProfitValue(ValueError):
    """Raised when a profit value is non-numeric or non-finite."""
    pass


class EntityType(str, Enum):
    """Malaysian legal entity types supported by the engine."""

    SDN_BHD = "SdnBhd"
    ENTERPRISE = "Enterprise"
    BERHAD = "Berhad"

    @classmethod
    def normalize(cls, value) -> 'EntityType':
        """Normalize an entity type from various formats.

        Raises:
            InvalidEntityType: If the value cannot be mapped.
        """
        if isinstance(value, cls):
            return value

        if not isinstance(value, str):
            raise InvalidEntityType(f"Unknown entity type: {value!r}")

        type_map = {
            "SDNBHD": cls.SDN_BHD,
            "SENDIRIANBERHAD": cls.SDN_BHD,
            "ENTERPRISE": cls.ENTERPRISE,
            "BERHAD": cls.BERHAD,
            "BHD": cls.BERHAD,
        }

        clean_value = value.strip().upper()
        for separator in (" ", "-", "_", "."):
            clean_value = clean_value.replace(separator, "")

        result = type_map.get(clean_value)

        if result is None:
            available = ", ".join(member.value for member in cls)
            raise InvalidEntityType(
                f"Unknown entity type: '{value}'. Available: {available}"
            )

        return result


@dataclass(frozen=True)
class TaxBracket:
    """
    One band of a marginal rate schedule.

    Only the part of profit falling inside the band is taxed at `rate`.
    A width of None marks the unbounded top band.
    """

    width: Optional[Decimal]
    rate: Decimal

    def is_unbounded(self) -> bool:
        return self.width is None


@dataclass
class TaxLiability:
    """
    Calculated tax payable for one entity type and profit figure.

    This is the output of the entity-specific Tax Calculators.
    `breakdown` keeps band order; its values sum to `tax_before_rounding`.
    """

    jurisdiction: str
    entity_type: EntityType
    profit: Decimal
    chargeable_profit: Decimal
    tax_before_rounding: Decimal
    tax_owed: Decimal
    effective_rate: Decimal
    breakdown: Dict[str, Decimal]

    accounting_standard: Optional[str] = None
    notes: Optional[str] = None
    assumptions: List[str] = field(default_factory=list)
    calculation_date: Optional[date] = None
    calculator_version: str = "1.0"


class ProfitInput(BaseModel):
    """Profit figure in ringgit, parsed from the formats callers send."""

    profit: Decimal

    @field_validator('profit', mode='before')
    @classmethod
    def parse_decimal(cls, v):
        """Parse strings like 'RM 1,234.56'; floats go through str() to keep their printed value."""
        if v is None or isinstance(v, bool):
            raise ValueError(f'Profit must be a number, got {v!r}')

        if isinstance(v, str):
            v = v.strip()
            if v.upper().startswith('RM'):
                v = v[2:].strip()
            v = v.replace(',', '')
            if not v:
                raise ValueError('Profit is empty')
        elif isinstance(v, float):
            v = str(v)

        try:
            return Decimal(v)
        except (InvalidOperation, TypeError, ValueError):
            raise ValueError(f'Profit is not numeric: {v!r}')

    @field_validator('profit')
    @classmethod
    def finite_value(cls, v):
        if not v.is_finite():
            raise ValueError(f'Profit must be finite, got {v}')
        return v

    @classmethod
    def parse(cls, profit, in_sen: bool = False) -> 'ProfitInput':
        """
        Validate a raw profit value.

        Args:
            profit: Decimal, int, float or numeric string
            in_sen: Treat the value as a whole number of sen (1/100 ringgit)

        Raises:
            InvalidProfitValue: If the value is non-numeric or non-finite
        """
        try:
            parsed = cls(profit=profit)
        except ValidationError as e:
            message = e.errors()[0]['msg']
            raise InvalidProfitValue(f"Invalid profit value {profit!r}: {message}") from e

        if in_sen:
            if parsed.profit != parsed.profit.to_integral_value():
                raise InvalidProfitValue(
                    f"Invalid profit value {profit!r}: sen amounts must be whole numbers"
                )
            with exact_context(parsed.profit):
                ringgit = parsed.profit.scaleb(-2)
            parsed = parsed.model_copy(update={'profit': ringgit})

        return parsed


class TaxRequest(ProfitInput):
    """Validated entity type and profit for a single calculation."""

    entity_type: EntityType

    @field_validator('entity_type', mode='before')
    @classmethod
    def normalize_entity_type(cls, v):
        return EntityType.normalize(v)

    @classmethod
    def from_inputs(cls, entity_type, profit, in_sen: bool = False) -> 'TaxRequest':
        """
        Validate an entity type and profit pair.

        The entity type is checked first so an unknown selector is reported
        even when the profit is also invalid.

        Raises:
            InvalidEntityType: If the selector is not a supported entity type
            InvalidProfitValue: If the profit is non-numeric or non-finite
        """
        entity = EntityType.normalize(entity_type)
        amount = ProfitInput.parse(profit, in_sen=in_sen).profit
        # Both fields are validated above
        return cls.model_construct(entity_type=entity, profit=amount)
