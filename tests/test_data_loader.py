import pytest

from sentimentkit.data_loader import DataLoader, DataLoadError
from sentimentkit.utils import SentimentLabel, TextData


def _write(tmp_path, content, name="data.csv"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_loads_rows_and_skips_header(tmp_path):
    path = _write(
        tmp_path,
        "text,sentiment\n"
        "great stuff,positive\n"
        "awful stuff,negative\n"
        "plain stuff,neutral\n",
    )
    loader = DataLoader()
    loader.load_from_csv(path)
    assert loader.data == [
        TextData("great stuff", SentimentLabel.POSITIVE),
        TextData("awful stuff", SentimentLabel.NEGATIVE),
        TextData("plain stuff", SentimentLabel.NEUTRAL),
    ]


def test_quoted_field_with_commas(tmp_path):
    path = _write(
        tmp_path,
        'text,sentiment\n"I love this product, it\'s amazing!",positive\n',
    )
    loader = DataLoader()
    loader.load_from_csv(path)
    assert loader.data == [
        TextData("I love this product, it's amazing!", SentimentLabel.POSITIVE)
    ]


def test_quoted_field_with_several_commas(tmp_path):
    path = _write(tmp_path, '"a, b, c",neg\n')
    loader = DataLoader()
    loader.load_from_csv(path, has_header=False)
    assert loader.data == [TextData("a, b, c", SentimentLabel.NEGATIVE)]


def test_without_header_reads_first_line(tmp_path):
    path = _write(tmp_path, "fine day,pos\nbad day,neg\n")
    loader = DataLoader()
    loader.load_from_csv(path, has_header=False)
    assert [item.label for item in loader.data] == [
        SentimentLabel.POSITIVE,
        SentimentLabel.NEGATIVE,
    ]


def test_custom_columns(tmp_path):
    path = _write(tmp_path, "label,id,text\npositive,1,nice one\n")
    loader = DataLoader()
    loader.load_from_csv(path, has_header=True, text_column=2, label_column=0)
    assert loader.data == [TextData("nice one", SentimentLabel.POSITIVE)]


def test_skips_unknown_labels_and_short_lines(tmp_path):
    path = _write(
        tmp_path,
        "text,sentiment\n"
        "something,maybe\n"
        "lonely field\n"
        "\n"
        "good,positive\n",
    )
    loader = DataLoader()
    loader.load_from_csv(path)
    assert loader.data == [TextData("good", SentimentLabel.POSITIVE)]


def test_reload_replaces_previous_data(tmp_path):
    first = _write(tmp_path, "a,positive\nb,negative\n", "first.csv")
    second = _write(tmp_path, "c,neutral\n", "second.csv")
    loader = DataLoader()
    loader.load_from_csv(first, has_header=False)
    loader.load_from_csv(second, has_header=False)
    assert loader.data == [TextData("c", SentimentLabel.NEUTRAL)]


def test_missing_file_raises(tmp_path):
    loader = DataLoader()
    with pytest.raises(DataLoadError):
        loader.load_from_csv(tmp_path / "missing.csv")
    assert loader.data == []


def test_no_valid_rows_raises(tmp_path):
    path = _write(tmp_path, "text,sentiment\nx,unknown\ny,whatever\n")
    loader = DataLoader()
    with pytest.raises(DataLoadError):
        loader.load_from_csv(path)
    assert loader.data == []


def test_negative_column_rejected(tmp_path):
    path = _write(tmp_path, "a,positive\n")
    with pytest.raises(ValueError):
        DataLoader().load_from_csv(path, has_header=False, text_column=-1)


def test_data_is_a_copy(tmp_path):
    path = _write(tmp_path, "a,positive\n")
    loader = DataLoader()
    loader.load_from_csv(path, has_header=False)
    loader.data.clear()
    assert len(loader.data) == 1


def test_split_train_validation_partitions_data(tmp_path):
    rows = "".join(f"text {i},positive\n" for i in range(10))
    path = _write(tmp_path, rows)
    loader = DataLoader()
    loader.load_from_csv(path, has_header=False)
    train, valid = loader.split_train_validation(0.8)
    assert len(train) + len(valid) == len(loader.data)
    assert sorted(item.text for item in train + valid) == sorted(
        item.text for item in loader.data
    )


def test_split_train_validation_rejects_bad_ratio(tmp_path):
    path = _write(tmp_path, "a,positive\n")
    loader = DataLoader()
    loader.load_from_csv(path, has_header=False)
    with pytest.raises(ValueError):
        loader.split_train_validation(1.0)