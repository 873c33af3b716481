"""
Growth Scoring Engine - Type Definitions.

============================================================
PURPOSE
============================================================
Data contracts for the Growth Scoring Engine.

This module defines the enums, dataclasses and exceptions
shared by the component scorers, the dimension aggregator,
the floor engine and the overall blender.

============================================================
DESIGN PRINCIPLES
============================================================
- All types are immutable
- Enums for discrete values (dimensions, score bands)
- Every value is created fresh per invocation
- Clear separation between raw evidence and final output

============================================================
DIMENSIONS
============================================================
The engine scores exactly five marketing dimensions:

1. WEBSITE   - Website & conversion
2. CONTENT   - Content depth & velocity
3. SEO       - SEO & visibility
4. BRAND     - Brand & positioning
5. AUTHORITY - Authority & trust

Each dimension produces an integer score in [0, 100].

============================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# ============================================================
# ENUMS
# ============================================================


class Dimension(str, Enum):
    """
    The five marketing dimensions scored by the engine.

    Values are the short keys used on the Scorecard.
    """

    WEBSITE = "website"
    CONTENT = "content"
    SEO = "seo"
    BRAND = "brand"
    AUTHORITY = "authority"

    @classmethod
    def all_dimensions(cls) -> List["Dimension"]:
        """Return all dimensions in evaluation order."""
        return [cls.WEBSITE, cls.CONTENT, cls.SEO, cls.BRAND, cls.AUTHORITY]

    @property
    def rubric_name(self) -> str:
        """Long rubric name used in breakdowns and reports."""
        return {
            "website": "websiteAndConversion",
            "content": "contentDepthAndVelocity",
            "seo": "seoAndVisibility",
            "brand": "brandAndPositioning",
            "authority": "authorityAndTrust",
        }[self.value]


class ScoreBand(str, Enum):
    """
    Qualitative band for a 0-100 score.

    - EARLY: 0-29, significant issues
    - DEVELOPING: 30-59, mixed performance
    - STRONG: 60-79, generally good with some gaps
    - LEADING: 80-100, best-in-class
    """

    EARLY = "early"
    DEVELOPING = "developing"
    STRONG = "strong"
    LEADING = "leading"

    @classmethod
    def from_score(cls, score: int) -> "ScoreBand":
        """
        Classify a 0-100 score into its band.

        Args:
            score: Dimension or overall score

        Returns:
            Matching ScoreBand
        """
        if score >= 80:
            return cls.LEADING
        elif score >= 60:
            return cls.STRONG
        elif score >= 30:
            return cls.DEVELOPING
        else:
            return cls.EARLY

    @property
    def label(self) -> str:
        return self.name.capitalize()


# ============================================================
# RUBRIC EVIDENCE
# ============================================================


@dataclass(frozen=True)
class ComponentScore:
    """
    A single named sub-signal within a dimension.

    Invariant: 0 <= score <= max.
    """

    name: str
    score: float
    max: float

    def __post_init__(self) -> None:
        if self.max < 0:
            raise ValueError(f"Component {self.name} has negative max: {self.max}")
        if self.score < 0 or self.score > self.max:
            raise ValueError(
                f"Component {self.name} score {self.score} outside [0, {self.max}]"
            )

    @property
    def is_maxed(self) -> bool:
        return self.score == self.max

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "score": self.score, "max": self.max}


@dataclass(frozen=True)
class DimensionScore:
    """
    One dimension's raw evidence before normalization.

    The weight is the dimension's share of the overall score.
    """

    dimension: "Dimension"
    weight: float
    components: Tuple[ComponentScore, ...] = ()

    @property
    def name(self) -> str:
        return self.dimension.rubric_name

    @property
    def total_points(self) -> float:
        return sum(c.score for c in self.components)

    @property
    def max_points(self) -> float:
        return sum(c.max for c in self.components)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "weight": self.weight,
            "components": [c.to_dict() for c in self.components],
        }


@dataclass(frozen=True)
class FloorApplication:
    """Record of a floor rule that fired for a dimension."""

    rule_name: str
    dimension: Dimension
    minimum: int
    raw_score: int
    adjusted_score: int

    @property
    def raised(self) -> bool:
        """True if this floor actually lifted the score."""
        return self.adjusted_score > self.raw_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule_name,
            "dimension": self.dimension.value,
            "minimum": self.minimum,
            "raw": self.raw_score,
            "adjusted": self.adjusted_score,
        }


# ============================================================
# OUTPUT DATA CONTRACTS
# ============================================================


@dataclass(frozen=True)
class Scorecard:
    """
    Final output of the Growth Scoring Engine.

    ============================================================
    OUTPUT GUARANTEES
    ============================================================
    - overall: always an integer in [0, 100]
    - each dimension: an integer in [0, 100], or None when
      the dimension was not evaluated
    - evaluated_dimensions: the only signal separating
      "scored zero" from "not attempted"
    ============================================================
    """

    overall: int
    website: Optional[int] = None
    content: Optional[int] = None
    seo: Optional[int] = None
    brand: Optional[int] = None
    authority: Optional[int] = None
    evaluated_dimensions: Tuple[str, ...] = ()

    def get(self, dimension: Dimension) -> Optional[int]:
        """Return the score for a dimension (None if not evaluated)."""
        return getattr(self, dimension.value)

    def is_evaluated(self, dimension: Dimension) -> bool:
        return dimension.value in self.evaluated_dimensions

    @property
    def band(self) -> ScoreBand:
        return ScoreBand.from_score(self.overall)

    @property
    def dimension_scores(self) -> Dict[str, int]:
        """Scores of the evaluated dimensions, keyed by dimension."""
        return {
            d.value: self.get(d)
            for d in Dimension.all_dimensions()
            if self.get(d) is not None
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the report layer (camelCase marker key)."""
        result: Dict[str, Any] = {"overall": self.overall}
        for dimension in Dimension.all_dimensions():
            value = self.get(dimension)
            if value is not None:
                result[dimension.value] = value
        result["evaluatedDimensions"] = list(self.evaluated_dimensions)
        return result


@dataclass(frozen=True)
class DimensionBreakdown:
    """Per-dimension explanation: evidence, raw score and floors."""

    dimension_score: DimensionScore
    raw_score: int
    adjusted_score: int
    floors_applied: Tuple[FloorApplication, ...] = ()

    @property
    def dimension(self) -> Dimension:
        return self.dimension_score.dimension

    @property
    def weight(self) -> float:
        return self.dimension_score.weight

    @property
    def components(self) -> Tuple[ComponentScore, ...]:
        return self.dimension_score.components

    @property
    def floor_raised(self) -> bool:
        return self.adjusted_score > self.raw_score

    @property
    def band(self) -> ScoreBand:
        return ScoreBand.from_score(self.adjusted_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            **self.dimension_score.to_dict(),
            "raw_score": self.raw_score,
            "adjusted_score": self.adjusted_score,
            "floors_applied": [f.to_dict() for f in self.floors_applied],
        }


@dataclass(frozen=True)
class ScoringBreakdown:
    """Full explanation of one scoring run."""

    scorecard: Scorecard
    dimensions: Tuple[DimensionBreakdown, ...] = field(default_factory=tuple)
    engine_version: str = ""

    def for_dimension(self, dimension: Dimension) -> DimensionBreakdown:
        for breakdown in self.dimensions:
            if breakdown.dimension == dimension:
                return breakdown
        raise KeyError(dimension.value)

    @property
    def raw_scores(self) -> Dict[str, int]:
        return {b.dimension.value: b.raw_score for b in self.dimensions}

    @property
    def adjusted_scores(self) -> Dict[str, int]:
        return {b.dimension.value: b.adjusted_score for b in self.dimensions}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scorecard": self.scorecard.to_dict(),
            "dimensions": [b.to_dict() for b in self.dimensions],
            "engine_version": self.engine_version,
        }


# ============================================================
# ERROR TYPES
# ============================================================


class GrowthScoringError(Exception):
    """Base exception for growth scoring errors."""

    def __init__(self, message: str, dimension: Optional[Dimension] = None) -> None:
        super().__init__(message)
        self.dimension = dimension


class ConfigurationError(GrowthScoringError):
    """Raised when scoring configuration is invalid (e.g. weights)."""
    pass


class FloorTableError(GrowthScoringError):
    """
    Raised when a floor table is internally inconsistent.

    A rule requiring strictly more evidence than another rule
    for the same dimension must not assert a lower minimum.
    """
    pass


class FeatureValidationError(GrowthScoringError):
    """
    Raised by strict normalization when the input payload
    violates the Feature Bundle contract.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])
