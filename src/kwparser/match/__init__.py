"""
Matching module for kwparser.

Filters product names by parsed keywords.
"""

from .products import match_products, is_match

__all__ = [
    "match_products",
    "is_match",
]
