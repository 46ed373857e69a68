"""
pq-system Classifier — decision procedure for candidate theorems.

Given an arbitrary string, decides:

1. Validity: every character is in the alphabet {p, P, q, Q, -}.
2. Axiom membership: the string matches the schema xp-qx-.
3. Theorem membership: the string is derivable from an axiom under the
   single rule of production xpyqz → xpy-qz-.

CRITICAL DESIGN PRINCIPLES
--------------------------

1. Classification is TOTAL.
   Every finite string produces a ClassificationResult. Nothing is raised
   for bad input; invalidity is reported as ``valid = False``.

2. Classification is PURE.
   Each call owns its own ScanState. No state is shared between inputs, so
   batches may be classified in any order or in parallel.

3. Invalid strings are never axioms or theorems.
   The counts of an invalid scan are not reported and not used.
"""

from __future__ import annotations

from typing import Iterable

from .logging import logger
from .decision.scanner import PQScanner
from .decision.theorem_checker import TheoremChecker
from .models.results import ClassificationResult, HyphenCountsModel


class PQClassifier:
    """
    Classifier wiring the scanner and the theorem checker.

    Flow:
    1. Scan the input into per-region hyphen counts
    2. Derive axiom/theorem verdicts from the counts
    3. Package the verdicts into an immutable ClassificationResult
    """

    def __init__(self):
        self.scanner = PQScanner()
        self.theorem_checker = TheoremChecker()

    @classmethod
    def classify(cls, text: str) -> ClassificationResult:
        """Classify ``text`` with a fresh classifier instance."""
        return cls().classify_one(text)

    def classify_one(self, text: str) -> ClassificationResult:
        state = self.scanner.scan(text)
        verdict = self.theorem_checker.check(state)

        counts = None
        if state.valid:
            counts = HyphenCountsModel(
                before_marker=state.counts.before_marker,
                between=state.counts.between,
                after_marker=state.counts.after_marker,
            )

        return ClassificationResult(
            input=text,
            valid=state.valid,
            is_axiom=verdict.is_axiom,
            is_theorem=verdict.is_theorem,
            counts=counts,
            explanation=verdict.explanation,
        )

    def classify_many(self, texts: Iterable[str]) -> list[ClassificationResult]:
        """
        Classify every string independently, preserving input order.
        """
        results = [self.classify_one(text) for text in texts]
        logger.info(
            f"Classified {len(results)} inputs: "
            f"{sum(r.valid for r in results)} valid, "
            f"{sum(r.is_axiom for r in results)} axioms, "
            f"{sum(r.is_theorem for r in results)} theorems"
        )
        return results


def classify(text: str) -> ClassificationResult:
    """
    Classify a single pq-system candidate string.

    Args:
        text: Any string, including the empty string

    Returns:
        ClassificationResult with validity, axiom and theorem verdicts
    """
    return PQClassifier.classify(text)


def classify_all(texts: Iterable[str]) -> list[ClassificationResult]:
    """Classify a batch of strings, one result per input in input order."""
    return PQClassifier().classify_many(texts)
