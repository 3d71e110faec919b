"""Sentiment classification of text with bag-of-words or TF-IDF features and Naive Bayes."""

__version__ = "0.1.0"