import math

import pytest

from sentimentkit.feature_extractor import FeatureExtractor, FeatureMethod
from sentimentkit.preprocessor import Preprocessor
from sentimentkit.utils import FeatureVector, SentimentLabel, TextData


@pytest.fixture
def plain_preprocessor():
    return Preprocessor(use_stop_words=False)


def _docs(*texts):
    return [TextData(text, SentimentLabel.POSITIVE) for text in texts]


def test_default_method_is_bag_of_words(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    assert extractor.method is FeatureMethod.BAG_OF_WORDS


def test_min_frequency_filters_rare_words(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("good good bad", "good rare"), min_frequency=2)
    assert set(extractor.vocabulary) == {"good"}
    assert extractor.vocabulary_size == 1


def test_most_frequent_word_gets_first_index(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(
        _docs("alpha beta beta gamma gamma gamma"), min_frequency=1
    )
    vocab = extractor.vocabulary
    assert vocab["gamma"] == 0
    assert vocab["beta"] == 1
    assert vocab["alpha"] == 2


def test_max_vocab_size_truncates(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(
        _docs("alpha beta beta gamma gamma gamma"), min_frequency=1, max_vocab_size=2
    )
    assert set(extractor.vocabulary) == {"gamma", "beta"}


def test_zero_max_vocab_size_means_unlimited(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(
        _docs("alpha beta gamma delta"), min_frequency=1, max_vocab_size=0
    )
    assert extractor.vocabulary_size == 4


def test_vocabulary_indices_are_dense(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("one two three", "two three four"), min_frequency=1)
    assert sorted(extractor.vocabulary.values()) == list(range(extractor.vocabulary_size))


def test_vocabulary_is_a_copy(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("word word"), min_frequency=1)
    extractor.vocabulary["intruder"] = 99
    assert "intruder" not in extractor.vocabulary


def test_bag_of_words_counts_tokens(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("good bad", "good bad"), min_frequency=1)
    vocab = extractor.vocabulary
    features = extractor.extract_features("Good, good! bad unknown")
    assert len(features) == extractor.vocabulary_size
    assert features[vocab["good"]] == 2.0
    assert features[vocab["bad"]] == 1.0


def test_unknown_words_give_zero_vector(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("good bad", "good bad"), min_frequency=1)
    assert extractor.extract_features("nothing familiar") == [0.0, 0.0]


def test_empty_vocabulary_gives_empty_features(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    assert extractor.extract_features("anything at all") == []


def test_stop_words_are_not_in_vocabulary():
    extractor = FeatureExtractor(Preprocessor(use_stop_words=True))
    extractor.build_vocabulary(_docs("the movie", "the movie"), min_frequency=1)
    assert set(extractor.vocabulary) == {"movie"}


def test_tf_idf_zero_for_word_in_every_document(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor, FeatureMethod.TF_IDF)
    extractor.build_vocabulary(_docs("common rare", "common"), min_frequency=1)
    vocab = extractor.vocabulary
    features = extractor.extract_features("common common")
    assert features[vocab["common"]] == 0.0


def test_tf_idf_for_word_in_half_the_documents(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor, FeatureMethod.TF_IDF)
    extractor.build_vocabulary(_docs("common rare", "common"), min_frequency=1)
    vocab = extractor.vocabulary
    once = extractor.extract_features("rare")[vocab["rare"]]
    twice = extractor.extract_features("rare rare")[vocab["rare"]]
    assert once == pytest.approx(math.log(2))
    assert twice == pytest.approx(2 * once)


def test_transform_keeps_label(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("nice nice"), min_frequency=1)
    result = extractor.transform(TextData("nice", SentimentLabel.NEGATIVE))
    assert result == FeatureVector([1.0], SentimentLabel.NEGATIVE)


def test_batch_transform_preserves_order(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("nice nice"), min_frequency=1)
    batch = [
        TextData("nice", SentimentLabel.POSITIVE),
        TextData("meh", SentimentLabel.NEUTRAL),
    ]
    results = extractor.batch_transform(batch)
    assert [r.label for r in results] == [SentimentLabel.POSITIVE, SentimentLabel.NEUTRAL]
    assert [r.features for r in results] == [[1.0], [0.0]]


def test_rebuilding_replaces_vocabulary(plain_preprocessor):
    extractor = FeatureExtractor(plain_preprocessor)
    extractor.build_vocabulary(_docs("first first"), min_frequency=1)
    extractor.build_vocabulary(_docs("second second"), min_frequency=1)
    assert set(extractor.vocabulary) == {"second"}