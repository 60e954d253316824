"""
kwparser - parser for positive and negative keyword input (e.g. +foo,-bar,+baz).
"""

from .classify import classify, Parser, Prefixes, Keywords
from .match import match_products

__all__ = [
    "classify",
    "Parser",
    "Prefixes",
    "Keywords",
    "match_products",
]
