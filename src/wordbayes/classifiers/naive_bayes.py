"""Multinomial Naive Bayes over pre-tokenised word sequences."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np
from scipy.special import logsumexp

from ..types import Prediction, Result

LOGGER = logging.getLogger(__name__)


class UnknownCategoryError(KeyError):
    """Raised when a category is queried before it was ever trained."""

    def __init__(self, category: str) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Category '{self.category}' has not been trained."


class InvalidCategoryError(ValueError):
    """Raised when a training label is empty or not a string."""


class NaiveBayesClassifier:
    """Laplace-smoothed multinomial Naive Bayes with incremental training.

    Every ``train`` call contributes one example to the category prior and
    its words to the per-category counts. Scores are natural-log posteriors
    up to a shared constant, so they are only meaningful for ranking.

    The smoothing denominator of a category is ``|V| + N_c`` where ``|V|`` is
    the vocabulary size and ``N_c`` the number of words trained for the
    category. ``train`` caches it using the vocabulary size at that moment.
    By default scoring divides by that cached value, which is never refreshed
    when later training grows the vocabulary. With
    ``freeze_denominators=False`` the current vocabulary size is used instead.
    """

    def __init__(
        self,
        name: str = "naive_bayes",
        *,
        freeze_denominators: bool = True,
    ) -> None:
        self.name = name
        self.freeze_denominators = freeze_denominators
        self._vocabulary: set[str] = set()
        self._word_count: dict[str, dict[str, int]] = {}
        self._category_count: dict[str, int] = {}
        self._denominator: dict[str, int] = {}
        self._word_total: dict[str, int] = {}

    def train(self, category: str, words: Iterable[str]) -> None:
        label, tokens = validate_example(category, words)

        self._category_count[label] = self._category_count.get(label, 0) + 1
        counter = self._word_count.setdefault(label, {})
        for word in tokens:
            self._vocabulary.add(word)
            counter[word] = counter.get(word, 0) + 1
        total = self._word_total.get(label, 0) + len(tokens)
        self._word_total[label] = total
        self._denominator[label] = len(self._vocabulary) + total
        LOGGER.debug(
            "Trained '%s' with %s word(s); vocabulary=%s denominator=%s",
            label,
            len(tokens),
            len(self._vocabulary),
            self._denominator[label],
        )

    def clear(self) -> None:
        self._vocabulary.clear()
        self._word_count.clear()
        self._category_count.clear()
        self._denominator.clear()
        self._word_total.clear()
        LOGGER.debug("Classifier '%s' cleared", self.name)

    def classify(self, words: Iterable[str]) -> list[Result]:
        tokens = _validate_words(words)
        results = [Result(category, self.score(category, tokens)) for category in self._category_count]
        # Stable sort: tied scores keep first-trained order.
        results.sort(key=lambda result: result.score, reverse=True)
        LOGGER.debug("Classified %s word(s) against %s categories", len(tokens), len(results))
        return results

    def predict(self, words: Iterable[str]) -> Prediction:
        ranking = self.classify(words)
        if not ranking:
            return Prediction(category=None, confidence=0.0, scores={})

        log_scores = np.array([result.score for result in ranking], dtype=float)
        posteriors = np.exp(log_scores - logsumexp(log_scores))
        scores = {result.category: float(posteriors[idx]) for idx, result in enumerate(ranking)}
        best = ranking[0]
        return Prediction(category=best.category, confidence=scores[best.category], scores=scores)

    def word_probability(self, category: str, word: str) -> float:
        """Return the add-one smoothed probability of ``word`` given ``category``."""

        denominator = self.denominator(category)
        count = self._word_count.get(category, {}).get(word, 0)
        return (count + 1) / denominator

    def score(self, category: str, words: Iterable[str]) -> float:
        """Return the natural-log score of ``words`` under ``category``."""

        examples = self.example_count(category)
        score = math.log(examples / self.total_examples)
        for word in _validate_words(words):
            score += math.log(self.word_probability(category, word))
        return score

    def is_trained(self) -> bool:
        return bool(self._category_count)

    @property
    def categories(self) -> list[str]:
        """Trained categories in first-trained order."""

        return list(self._category_count)

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._vocabulary)

    @property
    def vocabulary_size(self) -> int:
        return len(self._vocabulary)

    @property
    def total_examples(self) -> int:
        return sum(self._category_count.values())

    def example_count(self, category: str) -> int:
        try:
            return self._category_count[category]
        except KeyError as exc:
            raise UnknownCategoryError(category) from exc

    def word_counts(self, category: str) -> dict[str, int]:
        try:
            return dict(self._word_count[category])
        except KeyError as exc:
            raise UnknownCategoryError(category) from exc

    def cached_denominator(self, category: str) -> int:
        """Denominator as computed by the latest ``train`` call for ``category``."""

        try:
            return self._denominator[category]
        except KeyError as exc:
            raise UnknownCategoryError(category) from exc

    def denominator(self, category: str) -> int:
        """Denominator used for scoring, honouring ``freeze_denominators``."""

        cached = self.cached_denominator(category)
        if self.freeze_denominators:
            return cached
        return len(self._vocabulary) + self._word_total[category]


def validate_example(category: object, words: Iterable[str]) -> tuple[str, tuple[str, ...]]:
    """Check a training example and return it with ``words`` materialised."""

    return _validate_category(category), _validate_words(words)


def _validate_category(category: object) -> str:
    if not isinstance(category, str):
        raise InvalidCategoryError(f"category must be a string, got {type(category).__name__}")
    if not category.strip():
        raise InvalidCategoryError("category cannot be empty")
    return category


def _validate_words(words: Iterable[str]) -> tuple[str, ...]:
    if words is None:
        raise TypeError("words must be an iterable of strings, not None")
    if isinstance(words, str):
        raise TypeError("words must be an iterable of strings, not a single string")
    tokens = tuple(words)
    for idx, word in enumerate(tokens):
        if not isinstance(word, str):
            raise TypeError(f"words[{idx}] must be a string, got {type(word).__name__}")
    return tokens


__all__ = [
    "InvalidCategoryError",
    "NaiveBayesClassifier",
    "UnknownCategoryError",
    "validate_example",
]
