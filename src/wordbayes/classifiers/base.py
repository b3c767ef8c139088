"""Classifier protocol definitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..types import Prediction, Result


@runtime_checkable
class Classifier(Protocol):
    """Common interface shared by the classifier and its wrappers."""

    name: str

    def train(self, category: str, words: Iterable[str]) -> None:
        """Incrementally train the classifier with a single example."""

    def classify(self, words: Iterable[str]) -> list[Result]:
        """Return every trained category ranked by descending log-score."""

    def predict(self, words: Iterable[str]) -> Prediction:
        """Return the best category and the posterior distribution."""

    def clear(self) -> None:
        """Forget everything learned so far."""

    def is_trained(self) -> bool:
        """Return True when the classifier has seen at least one example."""


__all__ = ["Classifier"]
