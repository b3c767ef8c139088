"""Core immutable data structures used throughout wordbayes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Result:
    """A single category and its log-score for a classified word sequence."""

    category: str
    score: float

    def __str__(self) -> str:
        return f"category={self.category} score={self.score}"


@dataclass(frozen=True)
class Prediction:
    """Classification result normalised into posterior probabilities."""

    category: str | None
    confidence: float
    scores: Mapping[str, float]


@dataclass(frozen=True)
class TrainingExample:
    """Pre-tokenised labelled example."""

    category: str
    words: tuple[str, ...]


__all__ = [
    "Result",
    "Prediction",
    "TrainingExample",
]
