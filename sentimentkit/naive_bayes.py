"""Multinomial Naive Bayes classifiers."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections import Counter
from typing import Sequence

from .utils import FeatureVector, SentimentLabel

logger = logging.getLogger(__name__)


class ModelNotTrainedError(RuntimeError):
    """Raised when a prediction is requested from an untrained model."""


def _safe_log(numerator: float, denominator: float) -> float:
    if numerator <= 0.0:
        return -math.inf
    return math.log(numerator / denominator)


class Model(ABC):
    """Interface shared by sentiment classification models."""

    @abstractmethod
    def train(self, training_data: Sequence[FeatureVector]) -> None:
        """Fit the model to labelled feature vectors."""

    @abstractmethod
    def predict(self, features: Sequence[float]) -> SentimentLabel:
        """Return the predicted label for a feature vector."""

    @property
    @abstractmethod
    def is_trained(self) -> bool:
        """Whether the model has been trained."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable model name."""


class NaiveBayes(Model):
    """Multinomial Naive Bayes over SentimentLabel classes with Laplace smoothing."""

    def __init__(self, alpha: float = 1.0) -> None:
        self.alpha = alpha
        self._trained = False
        self._feature_count = 0
        self._class_priors: dict[SentimentLabel, float] = {}
        self._log_likelihoods: dict[SentimentLabel, list[float]] = {}
        self._class_totals: dict[SentimentLabel, float] = {}

    def train(self, training_data: Sequence[FeatureVector]) -> None:
        """Estimate class priors and smoothed per-feature log likelihoods.

        Raises ValueError if there is no training data or an example has more
        features than the first one.
        """
        if not training_data:
            raise ValueError("Training data is empty")

        feature_count = len(training_data[0].features)
        class_counts: Counter[SentimentLabel] = Counter()
        sums: dict[SentimentLabel, list[float]] = {}
        totals: dict[SentimentLabel, float] = {}

        for example in training_data:
            if len(example.features) > feature_count:
                raise ValueError(
                    f"Feature vector size mismatch. Expected {feature_count}, "
                    f"got {len(example.features)}"
                )
            class_counts[example.label] += 1
            class_sums = sums.setdefault(example.label, [0.0] * feature_count)
            totals.setdefault(example.label, 0.0)
            for index, value in enumerate(example.features):
                class_sums[index] += value
                totals[example.label] += value

        total_examples = len(training_data)
        self._feature_count = feature_count
        self._class_priors = {
            label: count / total_examples for label, count in class_counts.items()
        }
        self._class_totals = totals
        self._log_likelihoods = {
            label: [
                _safe_log(value + self.alpha, totals[label] + self.alpha * feature_count)
                for value in class_sums
            ]
            for label, class_sums in sums.items()
        }
        logger.info(
            "Trained Naive Bayes with %d examples and %d features",
            total_examples,
            feature_count,
        )
        self._trained = True

    def predict(self, features: Sequence[float]) -> SentimentLabel:
        """Return the most probable label for ``features``."""
        if not self._trained:
            raise ModelNotTrainedError("Model not trained")
        if len(features) != self._feature_count:
            raise ValueError(
                f"Feature vector size mismatch. Expected {self._feature_count}, "
                f"got {len(features)}"
            )

        best_label = SentimentLabel.UNKNOWN
        best_log_prob = -math.inf
        for label, prior in self._class_priors.items():
            likelihoods = self._log_likelihoods[label]
            log_prob = math.log(prior)
            for value, log_likelihood in zip(features, likelihoods):
                if value > 0:
                    log_prob += value * log_likelihood
            if log_prob > best_log_prob:
                best_log_prob = log_prob
                best_label = label
        return best_label

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def name(self) -> str:
        return "Naive Bayes"


class NaiveBayesClassifier:
    """Multinomial Naive Bayes over string class labels with sparse likelihoods."""

    def __init__(self, alpha: float = 1.0) -> None:
        if alpha <= 0:
            logger.warning(
                "Laplace smoothing factor alpha must be positive. Setting to 1.0."
            )
            alpha = 1.0
        self.alpha = alpha
        self._vocabulary_size = 0
        self._total_docs_trained = 0
        self._classes: list[str] = []
        self._class_priors: dict[str, float] = {}
        self._total_words_in_class: dict[str, float] = {}
        self._log_likelihoods: dict[str, dict[int, float]] = {}
        self._default_log_likelihood: dict[str, float] = {}

    def train(
        self,
        features: Sequence[Sequence[float]],
        labels: Sequence[str],
        vocab_size: int,
    ) -> None:
        """Fit the classifier to word-count vectors and their labels.

        Raises ValueError on empty or mismatched input or a zero vocabulary size.
        """
        if not features or len(features) != len(labels):
            raise ValueError("Invalid training data size")
        if vocab_size == 0:
            raise ValueError("Vocabulary size cannot be zero")

        total_docs = len(features)
        class_counts = Counter(labels)
        classes = sorted(class_counts)

        totals = {cls: 0.0 for cls in classes}
        word_counts: dict[str, dict[int, float]] = {cls: {} for cls in classes}
        for vector, label in zip(features, labels):
            counts = word_counts[label]
            for word_index, count in enumerate(vector):
                if count > 0:
                    counts[word_index] = counts.get(word_index, 0.0) + count
                    totals[label] += count

        denominators = {cls: totals[cls] + self.alpha * vocab_size for cls in classes}

        self._vocabulary_size = vocab_size
        self._total_docs_trained = total_docs
        self._classes = classes
        self._class_priors = {
            cls: math.log(class_counts[cls] / total_docs) for cls in classes
        }
        self._total_words_in_class = totals
        self._default_log_likelihood = {
            cls: math.log(self.alpha / denominators[cls]) for cls in classes
        }
        self._log_likelihoods = {
            cls: {
                word_index: math.log((count + self.alpha) / denominators[cls])
                for word_index, count in counts.items()
            }
            for cls, counts in word_counts.items()
        }

    def predict(self, feature_vec: Sequence[float]) -> str:
        """Return the most probable class label for a word-count vector."""
        if not self._classes:
            raise ModelNotTrainedError("Model has not been trained")
        if len(feature_vec) != self._vocabulary_size:
            raise ValueError(
                "Feature vector size mismatch with vocabulary size during prediction"
            )

        best_class = ""
        best_log_prob = -math.inf
        for cls in self._classes:
            likelihoods = self._log_likelihoods.get(cls, {})
            default = self._default_log_likelihood[cls]
            log_prob = self._class_priors[cls]
            for word_index, count in enumerate(feature_vec):
                if count > 0:
                    log_prob += count * likelihoods.get(word_index, default)
            if log_prob > best_log_prob:
                best_log_prob = log_prob
                best_class = cls

        return best_class or self._classes[0]

    @property
    def classes(self) -> list[str]:
        """The class labels seen in training, sorted."""
        return list(self._classes)