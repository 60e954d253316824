"""
Data models for kwparser.
"""

from typing import Dict, List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Prefixes:
    """Positive and negative keyword prefixes."""
    positive: str = "+"
    negative: str = "-"


@dataclass
class Keywords:
    """Result of parsing an input string."""
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)
    other: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "positive": list(self.positive),
            "negative": list(self.negative),
            "other": list(self.other),
        }
