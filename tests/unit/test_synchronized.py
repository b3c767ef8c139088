from __future__ import annotations

import threading

import pytest

from wordbayes.classifiers import (
    Classifier,
    InvalidCategoryError,
    NaiveBayesClassifier,
    SynchronizedClassifier,
)


def test_wrapper_satisfies_protocol() -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier(name="shared"))

    assert isinstance(wrapped, Classifier)
    assert isinstance(wrapped.unwrap(), Classifier)
    assert wrapped.name == "shared"


def test_wrapper_delegates_to_inner_classifier() -> None:
    inner = NaiveBayesClassifier()
    wrapped = SynchronizedClassifier(inner)

    wrapped.train("a", ["x", "x"])
    wrapped.train("b", iter(["y"]))

    assert wrapped.is_trained() is True
    assert wrapped.classify(["x"]) == inner.classify(["x"])
    assert wrapped.predict(["x"]).category == "a"

    wrapped.clear()
    assert inner.is_trained() is False


def test_wrapper_still_rejects_bare_strings() -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier())

    with pytest.raises(TypeError):
        wrapped.train("a", "xyz")
    with pytest.raises(TypeError):
        wrapped.train_many([("a", "xyz")])


def test_train_many_returns_batch_size() -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier())

    trained = wrapped.train_many([("a", ["x"]), ("b", ("y", "z")), ("a", [])])

    assert trained == 3
    inner = wrapped.unwrap()
    assert isinstance(inner, NaiveBayesClassifier)
    assert inner.example_count("a") == 2


@pytest.mark.parametrize(
    "rejected, error",
    [
        (("", ["y"]), InvalidCategoryError),
        (("b", ["y", 7]), TypeError),
    ],
)
def test_train_many_rejects_whole_batch(rejected: tuple[object, object], error: type) -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier())

    with pytest.raises(error):
        wrapped.train_many([("a", ["x"]), rejected, ("c", ["z"])])  # type: ignore[list-item]

    assert wrapped.is_trained() is False
    inner = wrapped.unwrap()
    assert isinstance(inner, NaiveBayesClassifier)
    assert inner.vocabulary_size == 0


def test_train_many_keeps_existing_state_on_rejection() -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier())
    wrapped.train("a", ["x"])

    with pytest.raises(InvalidCategoryError):
        wrapped.train_many([("a", ["y"]), (None, ["z"])])  # type: ignore[list-item]

    inner = wrapped.unwrap()
    assert isinstance(inner, NaiveBayesClassifier)
    assert inner.example_count("a") == 1
    assert inner.word_counts("a") == {"x": 1}


def test_concurrent_training_conserves_counts() -> None:
    wrapped = SynchronizedClassifier(NaiveBayesClassifier())
    workers = 8
    rounds = 200
    start = threading.Barrier(workers)

    def _worker(index: int) -> None:
        category = "even" if index % 2 == 0 else "odd"
        start.wait()
        for round_no in range(rounds):
            wrapped.train(category, ["shared", f"w{index}-{round_no % 5}"])
            wrapped.classify(["shared"])

    threads = [threading.Thread(target=_worker, args=(idx,)) for idx in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    inner = wrapped.unwrap()
    assert isinstance(inner, NaiveBayesClassifier)
    assert inner.total_examples == workers * rounds
    assert inner.word_counts("even")["shared"] == (workers // 2) * rounds
    assert sum(inner.word_counts("odd").values()) == 2 * (workers // 2) * rounds
    assert inner.vocabulary_size == 1 + workers * 5
