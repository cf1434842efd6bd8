"""
Domain models and value objects.

Contains fundamental domain entities like Point, ShareSet, EvaluationResult.
"""

from src.core.domain.evaluation import EvaluationKind, EvaluationResult
from src.core.domain.point import Point, points_from_pairs, sort_by_position
from src.core.domain.share_set import ShareEntry, ShareSet, ShareSetKeys

__all__ = [
    # Point model
    "Point",
    "points_from_pairs",
    "sort_by_position",
    # Evaluation result
    "EvaluationKind",
    "EvaluationResult",
    # Share set models
    "ShareSet",
    "ShareSetKeys",
    "ShareEntry",
]
