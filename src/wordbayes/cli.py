"""wordbayes command-line interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .classifiers import NaiveBayesClassifier
from .config import Config, ConfigError, LoggingConfig, load_config, resolve_config_path
from .demo import PROBE_WORDS, TEXTBOOK_EXAMPLES, TEXTBOOK_QUERY, build_classifier
from .logging import configure_logging

app = typer.Typer(help="Multinomial Naive Bayes classifier utilities.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None
    current_denominators: bool = False


@app.callback()
def _wordbayes(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to config (env WORDBAYES_CONFIG or ~/.config/wordbayes/config.yaml).",
        ),
    ] = None,
    current_denominators: Annotated[
        bool,
        typer.Option(
            "--current-denominators",
            help="Score with the current vocabulary size instead of training-time denominators.",
        ),
    ] = False,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved, current_denominators=current_denominators)


@app.command()
def demo(ctx: typer.Context) -> None:
    """Train the textbook example and print probabilities, scores and ranking."""

    state = _state(ctx)
    configure_logging(LoggingConfig())
    classifier = build_classifier(TEXTBOOK_EXAMPLES, freeze_denominators=not state.current_denominators)

    typer.echo("Word probabilities:")
    for category in classifier.categories:
        for word in PROBE_WORDS:
            probability = classifier.word_probability(category, word)
            typer.echo(f"  P({word}|{category}) = {probability}")
    typer.echo(f"Query: {' '.join(TEXTBOOK_QUERY)}")
    typer.echo("Scores:")
    for category in classifier.categories:
        typer.echo(f"  {category}: {classifier.score(category, TEXTBOOK_QUERY)}")
    typer.echo("Ranking:")
    for result in classifier.classify(TEXTBOOK_QUERY):
        typer.echo(f"  {result}")


@app.command()
def classify(
    ctx: typer.Context,
    words: Annotated[list[str], typer.Argument(..., help="Pre-tokenised words to classify.")],
) -> None:
    """Train on the configured examples and rank categories for WORDS."""

    state = _state(ctx)
    config = _load_environment(state)
    classifier = _trained_classifier(config, state)
    if not classifier.is_trained():
        typer.secho("No training examples configured.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo("Ranking:")
    for result in classifier.classify(words):
        typer.echo(f"  {result}")
    prediction = classifier.predict(words)
    typer.echo("Prediction:")
    typer.echo(f"  category: {prediction.category}")
    typer.echo(f"  confidence: {prediction.confidence:.4f}")


@app.command()
def status(ctx: typer.Context) -> None:
    """Display configuration and training data summary."""

    state = _state(ctx)
    config = _load_environment(state)
    classifier = _trained_classifier(config, state)
    typer.echo("→ wordbayes Status")
    typer.echo(f"Version: {__version__}")
    typer.echo(f"Config path: {resolve_config_path(state.config_path)}")
    typer.echo(f"Freeze denominators: {classifier.freeze_denominators}")
    typer.echo(f"Training examples: {classifier.total_examples}")
    typer.echo(f"Vocabulary size: {classifier.vocabulary_size}")
    typer.echo("Categories:")
    for category in classifier.categories:
        typer.echo(f"  - {category}: {classifier.example_count(category)} example(s)")


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _load_environment(state: CLIState) -> Config:
    config = _load_config(state.config_path)
    try:
        configure_logging(config.logging)
    except ConfigError as exc:
        _config_failure(exc)
    return config


def _load_config(path: Path | None) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        _config_failure(exc)


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


def _trained_classifier(config: Config, state: CLIState) -> NaiveBayesClassifier:
    freeze = config.classifier.freeze_denominators and not state.current_denominators
    classifier = build_classifier(config.training, freeze_denominators=freeze)
    LOGGER.info(
        "Trained %s example(s) across %s categories.",
        classifier.total_examples,
        len(classifier.categories),
    )
    return classifier


def main() -> None:  # pragma: no cover - delegated to Typer
    app()


__all__ = ["app", "main"]
