"""
Public models for pq-system classification results.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HyphenCountsModel(BaseModel):
    """
    Hyphen count per region of a well-formed string.
    """

    model_config = ConfigDict(frozen=True)

    before_marker: int = Field(ge=0, description="Hyphens left of the p.")
    between: int = Field(ge=0, description="Hyphens between the p and the q.")
    after_marker: int = Field(ge=0, description="Hyphens right of the q.")


class ClassificationResult(BaseModel):
    """
    Classification of one input string.

    Produced once per input and independent of every other input.
    """

    model_config = ConfigDict(frozen=True)

    input: str = Field(description="Original input text, unmodified.")
    valid: bool = Field(description="Whether every character is in the alphabet {p, P, q, Q, -}.")
    is_axiom: bool = Field(description="Whether the string matches the axiom schema.")
    is_theorem: bool = Field(description="Whether the string is derivable under the production rule.")
    counts: Optional[HyphenCountsModel] = Field(
        default=None,
        description="Per-region hyphen counts. Present only for valid strings.",
    )
    explanation: str = Field(
        default="",
        description="Human-readable reason for the verdict.",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "ClassificationResult":
        if not self.valid:
            if self.is_axiom or self.is_theorem:
                raise ValueError("An invalid string can be neither an axiom nor a theorem")
            if self.counts is not None:
                raise ValueError("Hyphen counts are only reported for valid strings")
        if self.is_axiom and not self.is_theorem:
            raise ValueError("Every axiom is a theorem")
        return self
