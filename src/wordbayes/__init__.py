"""wordbayes package initialisation."""

from importlib import metadata


def _discover_version() -> str:
    """Return the installed package version, falling back to dev marker."""
    try:
        return metadata.version("wordbayes")
    except metadata.PackageNotFoundError:  # pragma: no cover - occurs in source checkouts
        return "0.0.0"


__version__ = _discover_version()

from .classifiers import (  # noqa: E402
    Classifier,
    InvalidCategoryError,
    NaiveBayesClassifier,
    SynchronizedClassifier,
    UnknownCategoryError,
)
from .types import Prediction, Result, TrainingExample  # noqa: E402

__all__ = [
    "Classifier",
    "InvalidCategoryError",
    "NaiveBayesClassifier",
    "Prediction",
    "Result",
    "SynchronizedClassifier",
    "TrainingExample",
    "UnknownCategoryError",
    "__version__",
]
