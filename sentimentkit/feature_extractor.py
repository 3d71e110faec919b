"""Turning text into numeric feature vectors (bag of words or TF-IDF)."""

from __future__ import annotations

import logging
import math
from collections import Counter
from enum import Enum
from typing import Iterable

from .preprocessor import Preprocessor
from .utils import FeatureVector, TextData

logger = logging.getLogger(__name__)


class FeatureMethod(Enum):
    """How token counts are turned into feature values."""

    BAG_OF_WORDS = "bag_of_words"
    TF_IDF = "tf_idf"


class FeatureExtractor:
    """Builds a vocabulary from training text and maps text onto it."""

    def __init__(
        self,
        preprocessor: Preprocessor,
        method: FeatureMethod = FeatureMethod.BAG_OF_WORDS,
    ) -> None:
        self._preprocessor = preprocessor
        self._method = method
        self._vocabulary: dict[str, int] = {}
        self._document_frequencies: list[float] = []
        self._document_count = 0

    def build_vocabulary(
        self,
        text_data: Iterable[TextData],
        min_frequency: int = 2,
        max_vocab_size: int = 5000,
    ) -> None:
        """Build the word-to-index mapping from training examples.

        Words occurring fewer than ``min_frequency`` times are dropped; the rest
        are indexed by descending frequency and cut to ``max_vocab_size``
        (0 means no limit).
        """
        word_frequencies: Counter[str] = Counter()
        document_occurrences: Counter[str] = Counter()
        document_count = 0

        for example in text_data:
            document_count += 1
            tokens = self._preprocessor.preprocess(example.text)
            word_frequencies.update(tokens)
            document_occurrences.update(set(tokens))

        kept = [
            (word, count)
            for word, count in word_frequencies.items()
            if count >= min_frequency
        ]
        kept.sort(key=lambda item: item[1], reverse=True)
        if max_vocab_size > 0:
            kept = kept[:max_vocab_size]

        self._document_count = document_count
        self._vocabulary = {word: index for index, (word, _) in enumerate(kept)}
        self._document_frequencies = [
            float(document_occurrences[word]) for word in self._vocabulary
        ]
        logger.info("Vocabulary built with %d words", len(self._vocabulary))

    def extract_features(self, text: str) -> list[float]:
        """Return the feature vector of ``text`` over the current vocabulary."""
        features = [0.0] * len(self._vocabulary)
        for token in self._preprocessor.preprocess(text):
            index = self._vocabulary.get(token)
            if index is not None:
                features[index] += 1.0

        if self._method is FeatureMethod.TF_IDF:
            features = [
                self._tf_idf(value, index) if value > 0 else value
                for index, value in enumerate(features)
            ]
        return features

    def transform(self, text_data: TextData) -> FeatureVector:
        """Convert one labelled text into a labelled feature vector."""
        return FeatureVector(self.extract_features(text_data.text), text_data.label)

    def batch_transform(self, text_data_batch: Iterable[TextData]) -> list[FeatureVector]:
        """Convert many labelled texts, keeping their order."""
        return [self.transform(example) for example in text_data_batch]

    @property
    def vocabulary_size(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._vocabulary)

    @property
    def vocabulary(self) -> dict[str, int]:
        """A copy of the word-to-index mapping."""
        return dict(self._vocabulary)

    @property
    def method(self) -> FeatureMethod:
        """The feature extraction method in use."""
        return self._method

    def _tf_idf(self, term_frequency: float, word_index: int) -> float:
        if self._document_count == 0 or word_index >= len(self._document_frequencies):
            return 0.0
        document_frequency = self._document_frequencies[word_index]
        if document_frequency == 0.0:
            return 0.0
        return term_frequency * math.log(self._document_count / document_frequency)