"""Vector similarity."""

from __future__ import annotations

from collections.abc import Sequence

from langchain_community.utils.math import cosine_similarity as cosine_similarity_matrix


def cosine_scores(query: Sequence[float], candidates: Sequence[Sequence[float]]) -> list[float]:
    """Score every candidate against *query* in one matrix call.

    A candidate scores ``0.0`` when it differs in length from the query
    (e.g. a chunk stored without an embedding) or when either vector has
    zero norm.
    """
    scores = [0.0] * len(candidates)
    if not any(query):
        return scores

    scorable = [i for i, vec in enumerate(candidates) if len(vec) == len(query) and any(vec)]
    if not scorable:
        return scores

    matrix = cosine_similarity_matrix([list(query)], [list(candidates[i]) for i in scorable])
    for i, score in zip(scorable, matrix[0]):
        scores[i] = float(score)
    return scores


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``dot(a, b) / (|a| * |b|)``, or ``0.0`` where undefined."""
    return cosine_scores(a, [b])[0]
