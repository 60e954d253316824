"""
Product matching for kwparser.

Filters candidate product names against parsed keywords using
case-insensitive substring matching.
"""

from typing import List, Sequence

from ..models import Keywords


def is_match(product: str, keywords: Keywords) -> bool:
    """
    Check a single product against keywords.

    A product matches when at least one positive keyword occurs in it and
    no negative keyword does. Comparison is case-insensitive.

    Args:
        product: Product name
        keywords: Parsed keywords

    Returns:
        True if the product matches
    """
    product_lower = product.lower()

    if not any(k.lower() in product_lower for k in keywords.positive):
        return False

    return not any(k.lower() in product_lower for k in keywords.negative)


def match_products(products: Sequence[str], keywords: Keywords) -> List[str]:
    """
    Find products that match the provided positive and negative keywords.

    An empty positive bucket matches nothing.

    Args:
        products: Candidate product names
        keywords: Parsed keywords

    Returns:
        Matching products in their original order
    """
    return [product for product in products if is_match(product, keywords)]
