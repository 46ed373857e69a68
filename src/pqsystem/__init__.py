"""
Public API for the pqsystem package.
"""

from .classifier import classify, classify_all
from .models import (
    ClassificationResult,
    HyphenCountsModel,
)
from .render import render_table

__all__ = [
    "classify",
    "classify_all",
    "render_table",
    "ClassificationResult",
    "HyphenCountsModel",
]
