# sentimentkit

A small sentiment analysis pipeline. It loads labelled text from CSV, cleans and tokenizes it, builds a bag-of-words or TF-IDF vocabulary, trains a multinomial Naive Bayes classifier and reports accuracy, macro-averaged precision and recall, F1 and a confusion matrix.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
sentimentkit --file data/reviews.csv
sentimentkit --file data/reviews.csv --interactive
sentimentkit --help
```

Without `--file` the command reads `data/sample_data.csv`. The CSV file needs a header row, the text in the first column and the label in the second. Labels are `positive`/`pos`, `negative`/`neg` or `neutral`/`neu`, in any case; rows with any other label, or with too few columns, are skipped. Fields may be wrapped in double quotes to hold commas; there is no support for escaped quotes inside a field.

If the data file cannot be opened, a sample data set of 20 labelled sentences is written to `data/sample_data.csv` and used instead. The `data` directory must already exist for this to work; otherwise the command reports that it could not create the file and exits with status 1.

The data is shuffled and split 80/20 into training and validation sets. Stop words are removed, the vocabulary keeps words seen at least twice (at most 5000 words), and bag-of-words features are used. The model is trained on the training part and evaluated on the validation part; the report and the total run time are printed. With `--interactive` you can then type sentences and see their predicted sentiment. Type `exit` or `quit`, or end the input, to leave.

Unknown options starting with `--` are reported on standard error and ignored.

## Library use

```python
from sentimentkit.api import SentimentAnalyzer, SentimentConfig
from sentimentkit.feature_extractor import FeatureMethod

config = SentimentConfig(feature_method=FeatureMethod.TF_IDF, min_word_frequency=1)
analyzer = SentimentAnalyzer(config)
analyzer.load_training_data("data/reviews.csv")
analyzer.train()

metrics = analyzer.evaluate()
print(metrics.accuracy, metrics.f1_score)
print(analyzer.confusion_matrix)

print(analyzer.predict("I love this product"))
print(analyzer.predict_with_confidence("Terrible design"))
```

`SentimentConfig` holds `use_stop_words`, `feature_method`, `min_word_frequency`, `max_vocabulary_size`, `naive_bayes_alpha` and `train_ratio`. `predict_with_confidence` gives 1.0 to the predicted label and 0.0 to the other two; it does not report real probabilities.

Errors are raised as exceptions:

- `sentimentkit.data_loader.DataLoadError` when a data file cannot be opened or yields no usable rows.
- `sentimentkit.naive_bayes.ModelNotTrainedError` when predicting or evaluating before training.
- `ValueError` for empty training or validation data, a train ratio outside (0, 1), or a feature vector of the wrong length.

Progress messages (vocabulary size, training summary, load counts) go through the standard `logging` module.

You can also use the pieces on their own:

- `sentimentkit.utils` has `SentimentLabel`, `TextData`, `FeatureVector`, `EvaluationMetrics`, `string_to_sentiment`, `sentiment_to_string` and `train_validation_split`.
- `sentimentkit.preprocessor.Preprocessor` lowercases text, replaces punctuation with spaces and removes English stop words; `add_stop_words` extends the list.
- `sentimentkit.data_loader.DataLoader` reads labelled CSV files and splits them into training and validation sets.
- `sentimentkit.feature_extractor.FeatureExtractor` builds a vocabulary and turns text into bag-of-words or TF-IDF feature vectors.
- `sentimentkit.naive_bayes.NaiveBayes` is the classifier used by the pipeline; `NaiveBayesClassifier` is a variant that works on plain count vectors with string class labels.
- `sentimentkit.evaluator.Evaluator` scores a trained model on validation data; `format_results` returns the report as text and `print_results` writes it.

## Limitations

Trained models cannot be saved to or loaded from disk; each run trains afresh. The split into training and validation sets is random and not seeded, so results vary from run to run.