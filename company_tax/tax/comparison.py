"""
Entity Comparison Tables

Tabular views over the tax engine for choosing an entity type:
- compare_entity_types: all entity types at one profit figure
- tax_schedule: one entity type across a range of profit figures

Amounts stay as Decimal in object columns so nothing is lost to float.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import Iterable

import pandas as pd

from company_tax.tax.engine import (
    calculate_tax_liability,
    get_company_profile,
    list_entity_types,
    parse_profit,
)
from company_tax.tax.tax_models import exact_context
from company_tax.utils.logging_config import setup_logger, get_perf_logger, log_dataframe_info

logger = setup_logger(__name__)

COMPARISON_COLUMNS = [
    "entity_type",
    "display_name",
    "accounting_standard",
    "tax_description",
    "profit",
    "tax_owed",
    "effective_rate",
]

SCHEDULE_COLUMNS = ["profit", "tax_owed", "effective_rate", "marginal_tax"]


def compare_entity_types(profit) -> pd.DataFrame:
    """
    Tax payable by every entity type on the same profit.

    Args:
        profit: Net profit (any format accepted by parse_profit)

    Returns:
        DataFrame with one row per entity type, in declaration order
    """
    amount = parse_profit(profit)

    with get_perf_logger(logger, "compare_entity_types", threshold_ms=500):
        rows = []
        for entity_type in list_entity_types():
            profile = get_company_profile(entity_type)
            liability = calculate_tax_liability(entity_type, amount)
            rows.append({
                "entity_type": entity_type.value,
                "display_name": profile.display_name,
                "accounting_standard": profile.accounting_standard,
                "tax_description": profile.tax_description,
                "profit": liability.profit,
                "tax_owed": liability.tax_owed,
                "effective_rate": liability.effective_rate,
            })

        df = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)

    log_dataframe_info(logger, df, "Entity comparison")
    return df


def tax_schedule(entity_type, profits: Iterable) -> pd.DataFrame:
    """
    Tax payable by one entity type at each profit figure.

    Args:
        entity_type: EntityType or key
        profits: Profit figures, kept in the order given

    Returns:
        DataFrame with profit, tax_owed, effective_rate and marginal_tax
        (increase in tax over the previous row, 0 for the first row)
    """
    entity = get_company_profile(entity_type).entity_type

    with get_perf_logger(logger, "tax_schedule", threshold_ms=500):
        rows = []
        previous_tax = None
        for raw_profit in profits:
            liability = calculate_tax_liability(entity, raw_profit)

            if previous_tax is None:
                marginal_tax = Decimal(0)
            else:
                with exact_context(max(liability.tax_owed, previous_tax)):
                    marginal_tax = liability.tax_owed - previous_tax
            previous_tax = liability.tax_owed

            rows.append({
                "profit": liability.profit,
                "tax_owed": liability.tax_owed,
                "effective_rate": liability.effective_rate,
                "marginal_tax": marginal_tax,
            })

        df = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)

    log_dataframe_info(logger, df, f"Tax schedule ({entity.value})")
    return df
