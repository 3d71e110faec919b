"""Command-line entry point: train, evaluate and optionally query a sentiment model."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Sequence, TextIO

from .data_loader import DataLoader, DataLoadError, StrPath
from .evaluator import Evaluator
from .feature_extractor import FeatureExtractor, FeatureMethod
from .naive_bayes import Model, NaiveBayes
from .preprocessor import Preprocessor
from .utils import sentiment_to_string

DEFAULT_DATA_FILE = "data/sample_data.csv"

_SAMPLE_ROWS = (
    ("I love this product, it's amazing!", "positive"),
    ("This is the worst experience ever.", "negative"),
    ("The service was okay, nothing special.", "neutral"),
    ("I'm extremely happy with my purchase.", "positive"),
    ("The quality was disappointing, I expected better.", "negative"),
    ("It works as expected, no problems so far.", "neutral"),
    ("I absolutely hate how this performs.", "negative"),
    ("Best decision I ever made, highly recommend!", "positive"),
    ("The price is reasonable for what you get.", "neutral"),
    ("Complete waste of money, avoid at all costs.", "negative"),
    ("I'm satisfied with this product.", "positive"),
    ("Not impressed but not terrible either.", "neutral"),
    ("The customer service was excellent.", "positive"),
    ("I regret buying this, total garbage.", "negative"),
    ("It's fine, does the job adequately.", "neutral"),
    ("I can't believe how good this is!", "positive"),
    ("Very disappointed with the result.", "negative"),
    ("Average performance, nothing to write home about.", "neutral"),
    ("This exceeded all my expectations!", "positive"),
    ("Terrible design, confusing interface.", "negative"),
)

_RULE = "=" * 52


def _print_header() -> None:
    print(_RULE)
    print(f"{'Sentiment Analysis Pipeline':^52}")
    print(_RULE)


def _print_usage(program_name: str) -> None:
    print(f"Usage: {program_name} [options]")
    print("Options:")
    print("  --file FILE      Path to training data CSV file")
    print("  --interactive    Enable interactive mode for inference")
    print("  --help           Display this help message")


def parse_args(argv: Sequence[str]) -> dict[str, str]:
    """Parse command-line options into a dict with keys help, interactive and file.

    Flags map to ``"true"``; unknown ``--`` options are reported on stderr and ignored.
    """
    options: dict[str, str] = {}
    args = iter(argv)
    for arg in args:
        if arg == "--help":
            options["help"] = "true"
        elif arg == "--interactive":
            options["interactive"] = "true"
        elif arg == "--file":
            value = next(args, None)
            if value is None:
                print(f"Unknown option: {arg}", file=sys.stderr)
            else:
                options["file"] = value
        elif arg.startswith("--"):
            print(f"Unknown option: {arg}", file=sys.stderr)
    return options


def create_sample_data_file(file_path: StrPath = DEFAULT_DATA_FILE) -> Path:
    """Write a small labelled CSV data set to ``file_path`` and return its path.

    Raises OSError if the file cannot be written.
    """
    path = Path(file_path)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("text,sentiment\n")
        for text, label in _SAMPLE_ROWS:
            handle.write(f'"{text}",{label}\n')
    return path


def run_interactive_mode(
    feature_extractor: FeatureExtractor,
    model: Model,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> None:
    """Read lines and print the predicted sentiment of each until exit, quit or end of input."""
    source = input_stream if input_stream is not None else sys.stdin
    out = output_stream if output_stream is not None else sys.stdout

    out.write("\n--- Interactive Mode ---\n")
    out.write("Enter text to analyze sentiment (type 'exit' to quit):\n")
    while True:
        out.write("\n> ")
        out.flush()
        line = source.readline()
        if not line:
            break
        text = line.rstrip("\r\n")
        if text in ("exit", "quit"):
            break
        if not text:
            continue
        prediction = model.predict(feature_extractor.extract_features(text))
        out.write(f"Sentiment: {sentiment_to_string(prediction)}\n")


def _data_file_readable(path: str) -> bool:
    try:
        with open(path, encoding="utf-8"):
            return True
    except OSError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the full pipeline; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    _print_header()
    options = parse_args(argv)
    if "help" in options:
        _print_usage(Path(sys.argv[0]).name or "sentimentkit")
        return 0

    start = time.perf_counter()

    file_path = options.get("file", DEFAULT_DATA_FILE)
    if not _data_file_readable(file_path):
        print(f"File not found: {file_path}")
        try:
            file_path = str(create_sample_data_file())
        except OSError:
            print("Error: Could not create sample data file", file=sys.stderr)
            return 1
        print(f"Created sample data file: {file_path}")

    print("\n--- Step 1: Loading Data ---")
    data_loader = DataLoader()
    try:
        data_loader.load_from_csv(file_path)
    except DataLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Error: Failed to load data from {file_path}", file=sys.stderr)
        return 1
    print(f"Loaded {len(data_loader.data)} examples from {file_path}")

    train_data, valid_data = data_loader.split_train_validation(0.8)
    print(
        f"Split data into {len(train_data)} training examples and "
        f"{len(valid_data)} validation examples"
    )

    print("\n--- Step 2: Preprocessing and Feature Extraction ---")
    preprocessor = Preprocessor(True)
    feature_extractor = FeatureExtractor(preprocessor, FeatureMethod.BAG_OF_WORDS)
    feature_extractor.build_vocabulary(train_data, 2, 5000)
    train_features = feature_extractor.batch_transform(train_data)
    valid_features = feature_extractor.batch_transform(valid_data)
    print(
        f"Extracted features with vocabulary size: {feature_extractor.vocabulary_size}"
    )

    print("\n--- Step 3: Model Training ---")
    model = NaiveBayes(1.0)
    try:
        model.train(train_features)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Error: Failed to train model", file=sys.stderr)
        return 1

    print("\n--- Step 4: Evaluation ---")
    evaluator = Evaluator(model)
    try:
        evaluator.evaluate(valid_features)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    evaluator.print_results(sys.stdout)

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"Total execution time: {elapsed_ms / 1000.0:.4f} seconds")

    if "interactive" in options:
        run_interactive_mode(feature_extractor, model, sys.stdin, sys.stdout)
    else:
        print("\nRun with --interactive flag to test the model with custom input")

    return 0


if __name__ == "__main__":
    sys.exit(main())