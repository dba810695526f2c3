"""
Company Types Configuration

Static descriptive attributes of each supported legal entity type.
Rates and band widths live on the calculators, not here.

Format:
{
    "EntityKey": {
        "display_name": str,
        "accounting_standard": str,          # short code, e.g. "MFRS"
        "accounting_standard_full_name": str,
        "tax_description": str,              # human-readable rate summary
    }
}

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

MPERS_FULL_NAME = "Malaysian Private Entities Reporting Standard"
MFRS_FULL_NAME = "Malaysian Financial Reporting Standards"

COMPANY_TYPES = {
    # Private limited company
    "SdnBhd": {
        "display_name": "Sdn Bhd",
        "accounting_standard": "MPERS",
        "accounting_standard_full_name": MPERS_FULL_NAME,
        "tax_description": "17% on first RM500,000, 24% on the remainder",
    },

    # Sole proprietorship / partnership, taxed at personal rates
    "Enterprise": {
        "display_name": "Enterprise",
        "accounting_standard": "MPERS",
        "accounting_standard_full_name": MPERS_FULL_NAME,
        "tax_description": "Progressive personal income tax rates, 0% to 28%",
    },

    # Public listed company
    "Berhad": {
        "display_name": "Berhad",
        "accounting_standard": "MFRS",
        "accounting_standard_full_name": MFRS_FULL_NAME,
        "tax_description": "Flat 24%",
    },
}
