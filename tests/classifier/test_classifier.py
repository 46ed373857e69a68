import pytest

from pqsystem import classify, classify_all
from pqsystem.classifier import PQClassifier


@pytest.mark.parametrize(
    "text, valid, is_axiom, is_theorem",
    [
        ("-p-q--", True, True, True),
        ("-p-q---", True, False, False),
        ("pq-", True, True, True),
        ("xyz", False, False, False),
        ("p-q--", True, False, False),
        ("", True, False, False),
        ("pq", True, False, False),
        ("--pq", True, False, False),
        ("-P-Q--", True, True, True),
        ("--p--q----", True, False, True),
    ],
)
def test_classify_concrete_cases(text, valid, is_axiom, is_theorem):
    result = classify(text)
    assert result.input == text
    assert result.valid is valid
    assert result.is_axiom is is_axiom
    assert result.is_theorem is is_theorem


@pytest.mark.parametrize("text", ["abc", "xyz", "1234", " ", "r", "ü", "\t\n"])
def test_strings_outside_alphabet_are_invalid(text):
    result = classify(text)
    assert result.valid is False
    assert result.is_axiom is False
    assert result.is_theorem is False
    assert result.counts is None


def test_invalid_character_after_axiom_prefix_invalidates_everything():
    result = classify("-p-q--!")
    assert result.valid is False
    assert result.is_axiom is False
    assert result.is_theorem is False


def test_valid_result_reports_counts():
    result = classify("-p--q---")
    assert result.counts is not None
    assert (result.counts.before_marker, result.counts.between, result.counts.after_marker) == (1, 2, 3)
    assert result.is_theorem is True
    assert result.explanation.startswith("Theorem")


def test_classify_all_preserves_order_and_independence():
    texts = ["xyz", "pq-", "-p-q---", "pq-"]
    results = classify_all(texts)
    assert [r.input for r in results] == texts
    assert [r.is_axiom for r in results] == [False, True, False, True]
    assert results[1] == results[3]


def test_classify_all_empty_batch():
    assert classify_all([]) == []


def test_classifier_instance_is_reusable():
    classifier = PQClassifier()
    first = classifier.classify_one("-p-q--")
    classifier.classify_one("---p---q")
    again = classifier.classify_one("-p-q--")
    assert first == again
