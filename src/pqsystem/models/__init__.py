from .results import (
    ClassificationResult,
    HyphenCountsModel,
)

__all__ = [
    "ClassificationResult",
    "HyphenCountsModel",
]
