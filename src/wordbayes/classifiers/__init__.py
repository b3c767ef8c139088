"""Classifier implementations and infrastructure."""

from .base import Classifier
from .naive_bayes import (
    InvalidCategoryError,
    NaiveBayesClassifier,
    UnknownCategoryError,
    validate_example,
)
from .synchronized import SynchronizedClassifier

__all__ = [
    "Classifier",
    "InvalidCategoryError",
    "NaiveBayesClassifier",
    "SynchronizedClassifier",
    "UnknownCategoryError",
    "validate_example",
]
