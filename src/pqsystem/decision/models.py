"""
Data models for the pq-system decision procedure.

The pq-system (Gödel, Escher, Bach, ch. 2) has three symbols: ``p``, ``q``
and the hyphen. A string is split by its markers into three regions and the
decision procedure only ever looks at the hyphen count of each region.
"""

from dataclasses import dataclass, field
from enum import Enum


class Region(Enum):
    """
    Segment of the input currently being scanned.

    Scanning starts at BEFORE_MARKER. A 'p' moves to BETWEEN, a 'q' moves to
    AFTER_MARKER.
    """
    BEFORE_MARKER = "before_marker"  # left of the p
    BETWEEN = "between"              # between the p and the q
    AFTER_MARKER = "after_marker"    # right of the q


class Token(Enum):
    """
    Token recognised by the scanner for the character at the current place.

    DONE and UNKNOWN are not characters of the alphabet. They tell the
    scanner it cannot keep going.
    """
    P = "p"
    Q = "q"
    HYPHEN = "-"
    DONE = "done"        # end of input reached
    UNKNOWN = "unknown"  # character outside the alphabet


@dataclass
class HyphenCounts:
    """Hyphen count per region."""
    before_marker: int = 0
    between: int = 0
    after_marker: int = 0

    def __post_init__(self):
        """Validate counts are non-negative."""
        for name in ("before_marker", "between", "after_marker"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Hyphen count '{name}' must be >= 0, got {value}")

    def increment(self, region: Region) -> None:
        """Count one hyphen in ``region``."""
        if region is Region.BEFORE_MARKER:
            self.before_marker += 1
        elif region is Region.BETWEEN:
            self.between += 1
        else:
            self.after_marker += 1

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.before_marker, self.between, self.after_marker)


@dataclass
class ScanState:
    """
    In-progress state of a single classification pass.

    Created fresh for every input and owned by exactly one scan.

    INVARIANT: counts are only meaningful when ``valid`` is True. An invalid
    scan stops at the first unknown character, so its counts describe a
    prefix of the input only.
    """
    input: str
    place: int = 0
    region: Region = Region.BEFORE_MARKER
    counts: HyphenCounts = field(default_factory=HyphenCounts)
    valid: bool = False

    def at_end(self) -> bool:
        return self.place >= len(self.input)


@dataclass
class TheoremCheckResult:
    """
    Verdicts derived from a finished ScanState.

    Every axiom is a theorem, so ``is_axiom`` implies ``is_theorem``.
    """
    is_axiom: bool
    is_theorem: bool
    explanation: str = ""
