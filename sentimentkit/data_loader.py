"""Loading labelled text data from CSV files."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterator, Union

from .utils import SentimentLabel, TextData, string_to_sentiment, train_validation_split

logger = logging.getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


class DataLoadError(Exception):
    """Raised when a data file cannot be read or yields no usable rows."""


def _split_csv_line(line: str) -> list[str]:
    """Split a line on commas, joining double-quoted fields that contain commas."""
    parts = line.split(",")
    # A trailing delimiter does not produce an empty final field.
    if parts and parts[-1] == "":
        parts.pop()

    fields: list[str] = []
    pieces: Iterator[str] = iter(parts)
    for token in pieces:
        if token.startswith('"'):
            token = token[1:]
            if not token.endswith('"'):
                for more in pieces:
                    token += "," + more
                    if more.endswith('"'):
                        break
            if token.endswith('"'):
                token = token[:-1]
        fields.append(token)
    return fields


class DataLoader:
    """Holds labelled text examples read from a CSV file."""

    def __init__(self) -> None:
        self._data: list[TextData] = []

    def load_from_csv(
        self,
        file_path: StrPath,
        has_header: bool = True,
        text_column: int = 0,
        label_column: int = 1,
    ) -> None:
        """Read examples from ``file_path``, replacing any loaded before.

        Rows with too few columns or an unrecognised label are skipped.
        Raises DataLoadError if the file cannot be opened or no row is usable.
        """
        if text_column < 0 or label_column < 0:
            raise ValueError("Column indices must not be negative")

        try:
            handle = open(file_path, encoding="utf-8")
        except OSError as exc:
            raise DataLoadError(f"Could not open file {file_path}") from exc

        self._data = []
        needed = max(text_column, label_column) + 1
        with handle:
            if has_header:
                handle.readline()
            for raw_line in handle:
                line = raw_line.rstrip("\n")
                fields = _split_csv_line(line)
                if len(fields) < needed:
                    logger.warning("Line doesn't have enough columns: %s", line)
                    continue
                label = string_to_sentiment(fields[label_column])
                if label is not SentimentLabel.UNKNOWN:
                    self._data.append(TextData(fields[text_column], label))

        if not self._data:
            raise DataLoadError(f"No valid data loaded from file {file_path}")

    @property
    def data(self) -> list[TextData]:
        """The loaded examples."""
        return list(self._data)

    def split_train_validation(
        self, train_ratio: float = 0.8
    ) -> tuple[list[TextData], list[TextData]]:
        """Shuffle the loaded examples and split them into training and validation sets."""
        return train_validation_split(self._data, train_ratio)