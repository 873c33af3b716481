"""
Growth Scoring Engine - Aggregation.

============================================================
PURPOSE
============================================================
Dimension Aggregator and Overall Score Blender.

1. A dimension's component list -> one 0-100 score
   round_half_up(sum(score) / sum(max) * 100), 0 when sum(max) == 0
2. Five floor-adjusted dimension scores -> one 0-100 overall
   round_half_up(sum(score[d] * weight[d]))

============================================================
ROUNDING
============================================================
Always floor(x + 0.5). Python's round() rounds half to even
(round(72.5) == 72), which would shift scores on ties.

============================================================
"""

import math
from fractions import Fraction
from typing import Iterable, Mapping, Optional, Union

from .config import DimensionWeights
from .types import ComponentScore, Dimension, DimensionScore


def round_half_up(value: Union[float, Fraction]) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(Fraction(value) + Fraction(1, 2))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Clamp a score into [low, high] and return it as an int."""
    return int(max(low, min(high, value)))


# ============================================================
# DIMENSION AGGREGATOR
# ============================================================


def aggregate_components(components: Iterable[ComponentScore]) -> int:
    """
    Normalize a component list into a 0-100 dimension score.

    Dimension-agnostic: the same routine for every dimension.

    Args:
        components: Point-scale component scores

    Returns:
        Integer score in [0, 100]; 0 for an empty list or a
        list whose ceilings sum to zero
    """
    components = list(components)
    total_max = sum(c.max for c in components)
    if total_max <= 0:
        return 0
    total_score = sum(c.score for c in components)
    return clamp_score(round_half_up(Fraction(total_score) / Fraction(total_max) * 100))


def aggregate_dimension(dimension_score: DimensionScore) -> int:
    """Aggregate a DimensionScore's components."""
    return aggregate_components(dimension_score.components)


def build_dimension_score(
    dimension: Dimension,
    components: Iterable[ComponentScore],
    weights: Optional[DimensionWeights] = None,
) -> DimensionScore:
    """Wrap a component list with its dimension weight."""
    weights = weights or DimensionWeights()
    return DimensionScore(
        dimension=dimension,
        weight=weights.weight_for(dimension),
        components=tuple(components),
    )


# ============================================================
# OVERALL SCORE BLENDER
# ============================================================


def blend_overall(
    adjusted_scores: Mapping[Union[Dimension, str], int],
    weights: Optional[DimensionWeights] = None,
) -> int:
    """
    Blend floor-adjusted dimension scores into the overall score.

    Consumes only finished dimension scores. A dimension missing
    from the mapping contributes 0.

    Args:
        adjusted_scores: Dimension (or its value) -> 0-100 score
        weights: Blend weights, validated at construction

    Returns:
        Integer overall score in [0, 100]
    """
    weights = weights or DimensionWeights()
    # Weights as exact decimals.
    total = Fraction(0)
    for dimension in Dimension.all_dimensions():
        score = adjusted_scores.get(dimension, adjusted_scores.get(dimension.value, 0))
        total += clamp_score(score) * Fraction(str(weights.weight_for(dimension)))
    return clamp_score(round_half_up(total))
