"""
Utility functions for tweenloop
"""

from .numeric import (
    parse_float,
    to_number,
    coerce_or_zero,
)

__all__ = [
    'parse_float',
    'to_number',
    'coerce_or_zero',
]
