"""Sample data from the Naive Bayes chapter of Manning et al., *Introduction
to Information Retrieval* (http://nlp.stanford.edu/IR-book/pdf/13bayes.pdf)."""

from __future__ import annotations

from collections.abc import Iterable

from .classifiers.naive_bayes import NaiveBayesClassifier
from .types import TrainingExample

TEXTBOOK_EXAMPLES: tuple[TrainingExample, ...] = (
    TrainingExample("yes", ("Chinese", "Beijing", "Chinese")),
    TrainingExample("yes", ("Chinese", "Chinese", "Shanghai")),
    TrainingExample("yes", ("Chinese", "Monaco")),
    TrainingExample("no", ("Tokyo", "Japan", "Chinese")),
)
TEXTBOOK_QUERY: tuple[str, ...] = ("Chinese", "Chinese", "Chinese", "Tokyo", "Japan")
PROBE_WORDS: tuple[str, ...] = ("Chinese", "Tokyo", "Japan")


def build_classifier(
    examples: Iterable[TrainingExample] = TEXTBOOK_EXAMPLES,
    *,
    freeze_denominators: bool = True,
) -> NaiveBayesClassifier:
    """Return a fresh classifier trained on ``examples`` in order."""

    classifier = NaiveBayesClassifier(freeze_denominators=freeze_denominators)
    for example in examples:
        classifier.train(example.category, example.words)
    return classifier


__all__ = [
    "PROBE_WORDS",
    "TEXTBOOK_EXAMPLES",
    "TEXTBOOK_QUERY",
    "build_classifier",
]
