from __future__ import annotations

import pytest

from wordbayes.classifiers import NaiveBayesClassifier
from wordbayes.demo import TEXTBOOK_EXAMPLES, build_classifier


@pytest.fixture
def textbook_classifier() -> NaiveBayesClassifier:
    """Classifier trained on the four textbook documents, default smoothing."""

    return build_classifier(TEXTBOOK_EXAMPLES)


@pytest.fixture
def current_textbook_classifier() -> NaiveBayesClassifier:
    """Same data, scored with the vocabulary size after all training."""

    return build_classifier(TEXTBOOK_EXAMPLES, freeze_denominators=False)
