"""
Company Tax Package

Tax calculations for Malaysian company financial statements.

Modules:
- tax: Tax calculation engine and entity comparison tables
- utils: Logging configuration

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax', 'utils']
