"""Lexical similarity for short job-posting fields.

Text similarity (title, department, industry) blends word-set Jaccard with
a normalized Levenshtein score. Array similarity (skills) is Jaccard over
normalized element sets, optionally weighted by per-skill importance.
"""

import re

from rapidfuzz.distance import Levenshtein

_PUNCT_RE = re.compile(r"[^\w\s]")
_WS_RE = re.compile(r"\s+")

# Blend of word overlap vs character edit similarity
W_JACCARD = 0.7
W_EDIT = 0.3

# Tokens of this length or shorter are ignored by the word-set Jaccard
MIN_TOKEN_LEN = 2


def normalize_text(text: str | None) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    if not text:
        return ""
    text = _PUNCT_RE.sub("", text.lower())
    return _WS_RE.sub(" ", text).strip()


def _word_set(normalized: str) -> set[str]:
    return {w for w in normalized.split(" ") if len(w) > MIN_TOKEN_LEN}


def jaccard(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def edit_similarity(a: str, b: str) -> float:
    """1 - levenshtein(a, b) / max(len(a), len(b))."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return 1.0 - Levenshtein.distance(a, b) / longest


def text_similarity(text_a: str | None, text_b: str | None) -> float:
    """Similarity of two short texts in [0, 1]; 0 if either side is empty."""
    a = normalize_text(text_a)
    b = normalize_text(text_b)
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    score = W_JACCARD * jaccard(_word_set(a), _word_set(b)) + W_EDIT * edit_similarity(a, b)
    return min(1.0, max(0.0, score))


def _normalize_items(items: list[str] | None) -> set[str]:
    normalized = (normalize_text(item) for item in items or [] if isinstance(item, str))
    return {item for item in normalized if item}


def array_similarity(
    items_a: list[str] | None,
    items_b: list[str] | None,
    weights: dict[str, float] | None = None,
) -> float:
    """Jaccard similarity of two string collections.

    Both empty counts as a perfect match, exactly one empty as no match.
    With ``weights`` (keyed by normalized item, default weight 1.0) the
    intersection contributes its summed weight instead of its size.
    """
    a = _normalize_items(items_a)
    b = _normalize_items(items_b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    union = a | b
    shared = a & b
    if weights:
        normalized_weights = {normalize_text(k): v for k, v in weights.items()}
        shared_weight = sum(normalized_weights.get(item, 1.0) for item in shared)
        return min(1.0, max(0.0, shared_weight / len(union)))
    return len(shared) / len(union)
