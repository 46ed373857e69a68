"""
Decision procedure for the pq-system.

Scanner turns a raw string into per-region hyphen counts; TheoremChecker
decides axiom and theorem membership from those counts.
"""

from .models import (
    HyphenCounts,
    Region,
    ScanState,
    TheoremCheckResult,
    Token,
)
from .scanner import PQScanner
from .theorem_checker import TheoremChecker

__all__ = [
    "PQScanner",
    "TheoremChecker",
    "Region",
    "Token",
    "HyphenCounts",
    "ScanState",
    "TheoremCheckResult",
]
