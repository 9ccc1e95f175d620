"""Utility functions for stroke rasterization.

Numeric helpers:
    trunc_div: Integer division truncating towards zero.
    trunc: Float to int truncating towards zero.
"""

from .numeric import trunc, trunc_div

__all__ = ['trunc_div', 'trunc']
