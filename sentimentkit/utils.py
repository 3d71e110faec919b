"""Shared data types and helpers for the sentiment pipeline."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TypeVar

T = TypeVar("T")


class SentimentLabel(Enum):
    """Sentiment classes, ordered as they appear in reports."""

    POSITIVE = 0
    NEGATIVE = 1
    NEUTRAL = 2
    UNKNOWN = 3

    def __str__(self) -> str:
        return sentiment_to_string(self)


_ALIASES = {
    "positive": SentimentLabel.POSITIVE,
    "pos": SentimentLabel.POSITIVE,
    "negative": SentimentLabel.NEGATIVE,
    "neg": SentimentLabel.NEGATIVE,
    "neutral": SentimentLabel.NEUTRAL,
    "neu": SentimentLabel.NEUTRAL,
}

_NAMES = {
    SentimentLabel.POSITIVE: "positive",
    SentimentLabel.NEGATIVE: "negative",
    SentimentLabel.NEUTRAL: "neutral",
    SentimentLabel.UNKNOWN: "unknown",
}


def string_to_sentiment(sentiment: str) -> SentimentLabel:
    """Map a label string (case-insensitive) to a SentimentLabel."""
    return _ALIASES.get(sentiment.lower(), SentimentLabel.UNKNOWN)


def sentiment_to_string(label: SentimentLabel) -> str:
    """Return the lower-case name of a label."""
    return _NAMES.get(label, "unknown")


@dataclass
class TextData:
    """A piece of text with its sentiment label."""

    text: str
    label: SentimentLabel


@dataclass
class FeatureVector:
    """A numeric feature vector with its sentiment label."""

    features: list[float] = field(default_factory=list)
    label: SentimentLabel = SentimentLabel.UNKNOWN


@dataclass
class EvaluationMetrics:
    """Classifier performance figures, each between 0 and 1."""

    accuracy: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0


def train_validation_split(
    data: Sequence[T], train_ratio: float = 0.8
) -> tuple[list[T], list[T]]:
    """Shuffle a copy of ``data`` and split it into training and validation parts."""
    if train_ratio <= 0.0 or train_ratio >= 1.0:
        raise ValueError("Train ratio must be between 0 and 1")

    train_size = int(len(data) * train_ratio)
    shuffled = list(data)
    random.Random().shuffle(shuffled)
    return shuffled[:train_size], shuffled[train_size:]