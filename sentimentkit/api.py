"""High-level interface to the whole sentiment analysis pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .data_loader import DataLoader, StrPath
from .evaluator import ConfusionMatrix, Evaluator
from .feature_extractor import FeatureExtractor, FeatureMethod
from .naive_bayes import ModelNotTrainedError, NaiveBayes
from .preprocessor import Preprocessor
from .utils import EvaluationMetrics, FeatureVector, SentimentLabel, TextData

logger = logging.getLogger(__name__)


@dataclass
class SentimentConfig:
    """Options for feature extraction, the model and training."""

    use_stop_words: bool = True
    feature_method: FeatureMethod = FeatureMethod.BAG_OF_WORDS
    min_word_frequency: int = 2
    max_vocabulary_size: int = 5000
    naive_bayes_alpha: float = 1.0
    train_ratio: float = 0.8


class SentimentAnalyzer:
    """Loads data, trains a Naive Bayes model, evaluates it and predicts."""

    def __init__(self, config: SentimentConfig | None = None) -> None:
        self.config = config if config is not None else SentimentConfig()
        self._data_loader = DataLoader()
        self._preprocessor = Preprocessor(self.config.use_stop_words)
        self._feature_extractor = FeatureExtractor(
            self._preprocessor, self.config.feature_method
        )
        self._model = NaiveBayes(self.config.naive_bayes_alpha)
        self._evaluator: Evaluator | None = None
        self._train_data: list[TextData] = []
        self._valid_data: list[TextData] = []
        self._train_features: list[FeatureVector] = []
        self._valid_features: list[FeatureVector] = []
        self._metrics = EvaluationMetrics()
        self._trained = False

    def load_training_data(
        self,
        file_path: StrPath,
        has_header: bool = True,
        text_column: int = 0,
        label_column: int = 1,
    ) -> None:
        """Load a CSV file and split it into training and validation sets.

        Raises DataLoadError if the file cannot be used.
        """
        self._data_loader.load_from_csv(file_path, has_header, text_column, label_column)
        self._train_data, self._valid_data = self._data_loader.split_train_validation(
            self.config.train_ratio
        )
        logger.info("Loaded %d examples", len(self._data_loader.data))
        logger.info(
            "Split into %d training and %d validation examples",
            len(self._train_data),
            len(self._valid_data),
        )

    def train(self) -> None:
        """Build the vocabulary and train the model on the loaded training set.

        Raises ValueError if no training data has been loaded.
        """
        if not self._train_data:
            raise ValueError("No training data loaded")

        self._trained = False
        self._feature_extractor.build_vocabulary(
            self._train_data,
            self.config.min_word_frequency,
            self.config.max_vocabulary_size,
        )
        self._train_features = self._feature_extractor.batch_transform(self._train_data)
        self._valid_features = self._feature_extractor.batch_transform(self._valid_data)
        self._model.train(self._train_features)
        self._trained = True

    def evaluate(self) -> EvaluationMetrics:
        """Evaluate the trained model on the validation set."""
        if not self._trained:
            raise ModelNotTrainedError("Model not trained")
        if self._evaluator is None:
            self._evaluator = Evaluator(self._model)
        self._metrics = self._evaluator.evaluate(self._valid_features)
        return self._metrics

    def predict(self, text: str) -> SentimentLabel:
        """Predict the sentiment of ``text``."""
        if not self._trained:
            raise ModelNotTrainedError("Model not trained")
        return self._model.predict(self._feature_extractor.extract_features(text))

    def predict_with_confidence(self, text: str) -> dict[SentimentLabel, float]:
        """Return a score per label: 1.0 for the predicted label, 0.0 for the rest."""
        predicted = self.predict(text)
        return {
            label: 1.0 if label is predicted else 0.0
            for label in (
                SentimentLabel.POSITIVE,
                SentimentLabel.NEGATIVE,
                SentimentLabel.NEUTRAL,
            )
        }

    @property
    def metrics(self) -> EvaluationMetrics:
        """Metrics from the last evaluation."""
        return self._metrics

    @property
    def confusion_matrix(self) -> ConfusionMatrix:
        """Confusion matrix from the last evaluation, empty before any."""
        if self._evaluator is None:
            return {}
        return self._evaluator.confusion_matrix