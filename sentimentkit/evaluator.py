"""Measuring classifier performance on labelled feature vectors."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .naive_bayes import Model
from .utils import EvaluationMetrics, FeatureVector, SentimentLabel, sentiment_to_string

ConfusionMatrix = dict[SentimentLabel, dict[SentimentLabel, int]]

_COLUMN_WIDTH = 10


class Evaluator:
    """Runs a trained model over validation data and computes macro-averaged metrics."""

    def __init__(self, model: Model) -> None:
        self._model = model
        self._metrics = EvaluationMetrics()
        self._confusion: ConfusionMatrix = {}

    def evaluate(self, validation_data: Sequence[FeatureVector]) -> EvaluationMetrics:
        """Predict every example and compute accuracy, precision, recall and F1.

        Precision and recall are macro-averaged over the true labels present.
        Raises ValueError if ``validation_data`` is empty.
        """
        if not validation_data:
            raise ValueError("Validation data is empty")

        confusion: ConfusionMatrix = {example.label: {} for example in validation_data}
        for example in validation_data:
            predicted = self._model.predict(example.features)
            row = confusion[example.label]
            row[predicted] = row.get(predicted, 0) + 1
        self._confusion = confusion

        labels = list(confusion)
        precisions = [self._precision(label) for label in labels]
        recalls = [self._recall(label) for label in labels]
        precision = sum(precisions) / len(labels) if labels else 0.0
        recall = sum(recalls) / len(labels) if labels else 0.0

        self._metrics = EvaluationMetrics(
            accuracy=self._accuracy(),
            precision=precision,
            recall=recall,
            f1_score=_f1(precision, recall),
        )
        return self._metrics

    @property
    def confusion_matrix(self) -> ConfusionMatrix:
        """Counts indexed by true label, then predicted label."""
        return {label: dict(row) for label, row in self._confusion.items()}

    @property
    def metrics(self) -> EvaluationMetrics:
        """Metrics from the last evaluation."""
        return self._metrics

    def format_results(self) -> str:
        """Render the metrics and confusion matrix as a text report."""
        metrics = self._metrics
        lines = [
            "",
            f"--- Evaluation Results for {self._model.name} ---",
            f"Accuracy:  {metrics.accuracy * 100:.4f}%",
            f"Precision: {metrics.precision * 100:.4f}%",
            f"Recall:    {metrics.recall * 100:.4f}%",
            f"F1 Score:  {metrics.f1_score * 100:.4f}%",
            "",
            "Confusion Matrix:",
            "-----------------",
        ]

        labels = sorted(self._confusion, key=lambda label: label.value)
        header = f"{'Actual' + chr(92) + 'Pred':>{_COLUMN_WIDTH}}" + "".join(
            f"{sentiment_to_string(label):>{_COLUMN_WIDTH}}" for label in labels
        )
        lines.append(header)
        for true_label in labels:
            row = self._confusion.get(true_label, {})
            lines.append(
                f"{sentiment_to_string(true_label):>{_COLUMN_WIDTH}}"
                + "".join(
                    f"{row.get(predicted, 0):>{_COLUMN_WIDTH}}" for predicted in labels
                )
            )
        return "\n".join(lines) + "\n\n"

    def print_results(self, file: TextIO | None = None) -> None:
        """Write the report to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format_results())

    def _precision(self, label: SentimentLabel) -> float:
        true_positives = 0
        false_positives = 0
        for true_label, row in self._confusion.items():
            count = row.get(label, 0)
            if true_label is label:
                true_positives += count
            else:
                false_positives += count
        predicted = true_positives + false_positives
        return true_positives / predicted if predicted else 0.0

    def _recall(self, label: SentimentLabel) -> float:
        row = self._confusion.get(label, {})
        total = sum(row.values())
        return row.get(label, 0) / total if total else 0.0

    def _accuracy(self) -> float:
        correct = sum(row.get(label, 0) for label, row in self._confusion.items())
        total = sum(sum(row.values()) for row in self._confusion.values())
        return correct / total if total else 0.0


def _f1(precision: float, recall: float) -> float:
    if precision + recall > 0.0:
        return 2.0 * precision * recall / (precision + recall)
    return 0.0