"""Thread-safe wrapper for classifiers shared between threads."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..types import Prediction, Result
from .base import Classifier
from .naive_bayes import validate_example


class SynchronizedClassifier:
    """Serialises every call to the wrapped classifier through one lock."""

    def __init__(self, classifier: Classifier) -> None:
        self._classifier = classifier
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._classifier.name

    def train(self, category: str, words: Iterable[str]) -> None:
        tokens = _snapshot(words)
        with self._lock:
            self._classifier.train(category, tokens)

    def train_many(self, examples: Iterable[tuple[str, Iterable[str]]]) -> int:
        """Train a batch of ``(category, words)`` pairs without interleaving.

        The whole batch is validated first, so a rejected example leaves the
        wrapped classifier untouched.
        """

        batch = [validate_example(category, words) for category, words in examples]
        with self._lock:
            for category, words in batch:
                self._classifier.train(category, words)
        return len(batch)

    def classify(self, words: Iterable[str]) -> list[Result]:
        tokens = _snapshot(words)
        with self._lock:
            return self._classifier.classify(tokens)

    def predict(self, words: Iterable[str]) -> Prediction:
        tokens = _snapshot(words)
        with self._lock:
            return self._classifier.predict(tokens)

    def clear(self) -> None:
        with self._lock:
            self._classifier.clear()

    def is_trained(self) -> bool:
        with self._lock:
            return self._classifier.is_trained()

    def unwrap(self) -> Classifier:
        """Return the wrapped classifier; callers must not use it concurrently."""

        return self._classifier


def _snapshot(words: Iterable[str]) -> Iterable[str]:
    # Strings and None pass through so the wrapped classifier rejects them.
    if words is None or isinstance(words, str):
        return words
    return tuple(words)


__all__ = ["SynchronizedClassifier"]
