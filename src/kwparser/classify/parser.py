"""
Keyword parser for kwparser.

Splits comma-delimited input (e.g. "+foo,-bar,+baz") into positive,
negative and unmarked keywords based on configurable prefixes.
"""

from typing import Dict, List, Optional, Sequence

from ..models import Prefixes, Keywords
from ..match.products import match_products


DELIMITER = ","


class Parser:
    """
    Parses a keyword input string.

    The parser keeps its own copy of the input and a retain-prefix flag.
    Prefixes are stripped from emitted keywords unless
    should_retain_prefix(True) was called.
    """

    def __init__(self, text: str, prefixes: Optional[Prefixes] = None):
        """
        Initialize parser.

        Args:
            text: Comma-delimited keyword string
            prefixes: Keyword prefixes (default: "+" and "-")
        """
        self.text = str(text)
        self.prefixes = prefixes if prefixes is not None else Prefixes()
        self._retain_prefix = False

    @property
    def retain_prefix(self) -> bool:
        return self._retain_prefix

    def should_retain_prefix(self, flag: bool) -> bool:
        """
        Set whether prefixes are kept on emitted keywords.

        Args:
            flag: True keeps the raw token, False strips the prefix

        Returns:
            The flag that was stored
        """
        self._retain_prefix = bool(flag)
        return self._retain_prefix

    def _parse_with_prefix(self, tokens: List[str], prefix: str) -> Dict[int, str]:
        # Maps token position -> emitted keyword
        matched = {}
        for idx, token in enumerate(tokens):
            if not token.startswith(prefix):
                continue
            if self._retain_prefix:
                matched[idx] = token
            else:
                # Every occurrence is removed, not only the leading one
                matched[idx] = token.replace(prefix, "")
        return matched

    def parse(self) -> Keywords:
        """
        Parse the input into positive, negative and other keywords.

        A token matching both prefixes is emitted into both buckets.
        Tokens matching neither prefix go to `other` unchanged.

        Returns:
            Keywords with buckets in input order
        """
        tokens = self.text.split(DELIMITER)

        positive = self._parse_with_prefix(tokens, self.prefixes.positive)
        negative = self._parse_with_prefix(tokens, self.prefixes.negative)

        other = [
            token
            for idx, token in enumerate(tokens)
            if idx not in positive and idx not in negative
        ]

        return Keywords(
            positive=list(positive.values()),
            negative=list(negative.values()),
            other=other,
        )

    def match_products(
        self,
        products: Sequence[str],
        keywords: Optional[Keywords] = None,
    ) -> List[str]:
        """
        Find products matching positive keywords and no negative keyword.

        Args:
            products: Candidate product names
            keywords: Parsed keywords (default: parse this parser's input)

        Returns:
            Matching products in their original order
        """
        if keywords is None:
            keywords = self.parse()
        return match_products(products, keywords)


def classify(
    text: str,
    prefixes: Optional[Prefixes] = None,
    retain_prefix: bool = False,
) -> Keywords:
    """
    Classify a comma-delimited keyword string.

    Args:
        text: Comma-delimited keyword string
        prefixes: Keyword prefixes (default: "+" and "-")
        retain_prefix: Keep prefixes on emitted keywords

    Returns:
        Keywords with positive, negative and other buckets
    """
    parser = Parser(text, prefixes)
    parser.should_retain_prefix(retain_prefix)
    return parser.parse()
