"""
Classification module for kwparser.

Handles splitting keyword input into positive, negative and other buckets.
"""

from .parser import classify, Parser, Prefixes, Keywords, DELIMITER

__all__ = [
    "classify",
    "Parser",
    "Prefixes",
    "Keywords",
    "DELIMITER",
]
