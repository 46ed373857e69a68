"""
Axiom and theorem membership for scanned pq-system strings.

AXIOM SCHEMA
------------

    xp-qx-    whenever x is composed of hyphens only
              (and both occurrences of x stand for the same string)

RULE OF PRODUCTION
------------------

    Suppose x, y and z all stand for strings of hyphens only.
    If 'xpyqz' is a theorem, then 'xpy-qz-' is a theorem.

Both are decided from hyphen counts alone:

- Axiom:   before + 1 == after
- Theorem: before + between == after with after > 0  (or the string is an axiom)

Each rule application adds one hyphen between the markers and one after the
q in lockstep, which is why the theorem condition reduces to a sum.

NOTE: the axiom condition does not look at the between count. This is the
literal behaviour of the decision procedure and is kept as is; see
DESIGN.md for the discussion.
"""

from __future__ import annotations

from ..logging import logger

from .models import ScanState, TheoremCheckResult


class TheoremChecker:
    """
    Derive axiom/theorem verdicts from a finished ScanState.

    An invalid scan never yields an axiom or a theorem, whatever counts it
    accumulated before it stopped.
    """

    def is_axiom(self, state: ScanState) -> bool:
        counts = state.counts
        return state.valid and counts.before_marker + 1 == counts.after_marker

    def is_theorem(self, state: ScanState) -> bool:
        # all axioms are theorems
        if self.is_axiom(state):
            return True

        # every derivation starts from an axiom, so at least one hyphen follows the q
        counts = state.counts
        return (
            state.valid
            and counts.after_marker > 0
            and counts.before_marker + counts.between == counts.after_marker
        )

    def check(self, state: ScanState) -> TheoremCheckResult:
        """
        Check a scanned string against the axiom schema and production rule.

        Args:
            state: ScanState returned by PQScanner.scan

        Returns:
            TheoremCheckResult with both verdicts and an explanation
        """
        if not state.valid:
            return TheoremCheckResult(
                is_axiom=False,
                is_theorem=False,
                explanation="Not a well-formed string: contains a character outside {p, q, -}",
            )

        before, between, after = state.counts.as_tuple()

        if self.is_axiom(state):
            logger.debug(f"TheoremChecker: axiom ({before} + 1 == {after})")
            return TheoremCheckResult(
                is_axiom=True,
                is_theorem=True,
                explanation=f"Axiom: {before} + 1 == {after}",
            )

        if self.is_theorem(state):
            logger.debug(f"TheoremChecker: theorem ({before} + {between} == {after})")
            return TheoremCheckResult(
                is_axiom=False,
                is_theorem=True,
                explanation=f"Theorem: {before} + {between} == {after}",
            )

        if after == 0:
            explanation = "Not a theorem: no hyphens after the q"
        else:
            explanation = f"Not a theorem: {before} + {between} != {after}"
        return TheoremCheckResult(
            is_axiom=False,
            is_theorem=False,
            explanation=explanation,
        )
