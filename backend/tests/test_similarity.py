import pytest

from services.similarity import (
    array_similarity,
    edit_similarity,
    jaccard,
    normalize_text,
    text_similarity,
)


def test_normalize_text():
    assert normalize_text("  Senior   Python-Developer!! ") == "senior pythondeveloper"
    assert normalize_text(None) == ""


def test_text_similarity_identical_after_normalization():
    assert text_similarity("Senior Python Developer", "senior, python developer!") == 1.0


def test_text_similarity_empty():
    assert text_similarity("", "Python Developer") == 0.0
    assert text_similarity("Python Developer", None) == 0.0
    assert text_similarity("!!!", "???") == 0.0


def test_text_similarity_related_titles():
    score = text_similarity("Senior Python Developer", "Python Developer")
    # Jaccard 2/3, edit 1 - 7/23
    expected = 0.7 * (2 / 3) + 0.3 * (1 - 7 / 23)
    assert score == pytest.approx(expected)


def test_text_similarity_unrelated_titles():
    score = text_similarity("Python Developer", "Marketing Manager")
    assert 0.0 <= score < 0.3


def test_short_tokens_ignored_by_jaccard():
    # "qa" and "ui" are too short to count as shared words
    score = text_similarity("qa ui tester", "qa ui designer")
    assert score < 0.3 + 1e-9


def test_jaccard_and_edit_helpers():
    assert jaccard({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
    assert jaccard(set(), set()) == 0.0
    assert edit_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


class TestArraySimilarity:
    def test_both_empty(self):
        assert array_similarity([], []) == 1.0
        assert array_similarity(None, None) == 1.0

    def test_one_empty(self):
        assert array_similarity(["Python"], []) == 0.0
        assert array_similarity([], ["Python"]) == 0.0

    def test_normalized_jaccard(self):
        score = array_similarity(["Python", "Django"], ["python", "Flask", "django!"])
        assert score == pytest.approx(2 / 3)

    def test_identical(self):
        assert array_similarity(["Python", "SQL"], ["sql", "PYTHON"]) == 1.0

    def test_weighted_intersection(self):
        a = ["Python", "Docker", "AWS"]
        b = ["Python", "Kubernetes"]
        # union of 4, intersection {python} weighted 2.0
        assert array_similarity(a, b, weights={"Python": 2.0}) == pytest.approx(0.5)

    def test_weighted_capped_at_one(self):
        assert array_similarity(["Python"], ["Python", "Go"], weights={"python": 5.0}) == 1.0
