"""
Growth Scoring Engine - Main Orchestrator.

============================================================
PURPOSE
============================================================
The GrowthScoringEngine is the main entry point for scoring.

It orchestrates, per call:
1. Input normalization (mapping -> FeatureBundle)
2. Component scoring for every dimension
3. Dimension aggregation (components -> 0-100)
4. Floor application (never lowers a score)
5. Overall blending (fixed weights)
6. Scorecard packaging with the evaluated-dimensions marker

============================================================
DESIGN PRINCIPLES
============================================================
- Single responsibility: orchestration only
- Deterministic and stateless per call
- Never raises on degraded input
- Reports through an injected observer, never logs itself

============================================================
USAGE
============================================================
    from growth_scoring import GrowthScoringEngine, FeatureBundle

    engine = GrowthScoringEngine()

    scorecard = engine.score(features)
    print(f"Overall: {scorecard.overall}/100 ({scorecard.band.label})")

    breakdown = engine.explain(features)
    print(format_scorecard_summary(breakdown))

============================================================
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .aggregation import aggregate_dimension, blend_overall, build_dimension_score
from .config import ScoringConfig
from .features import DataCoverage, FeatureBundle
from .floors import FloorEngine, evaluate_evidence
from .normalization import normalize_features
from .observers import LoggingObserver, NullObserver, ScoringObserver
from .scorers import build_scorers
from .types import (
    ConfigurationError,
    Dimension,
    DimensionBreakdown,
    Scorecard,
    ScoringBreakdown,
)


logger = logging.getLogger(__name__)

FeatureInput = Optional[Union[FeatureBundle, Mapping[str, Any]]]


class GrowthScoringEngine:
    """
    Main orchestrator for the Growth Scoring Engine.

    ============================================================
    RESPONSIBILITIES
    ============================================================
    1. Validate configuration once at construction
    2. Build one scorer per dimension and the floor engine
    3. Run the single-pass pipeline per call
    4. Report intermediate results to the observer

    ============================================================
    STATE
    ============================================================
    None between calls. Concurrent callers can share an engine.

    ============================================================
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        observer: Optional[ScoringObserver] = None,
        floor_engine: Optional[FloorEngine] = None,
    ):
        """
        Initialize the Growth Scoring Engine.

        Args:
            config: Rubric, weight and floor configuration.
                    Uses defaults if not provided.
            observer: Observability sink. Defaults to NullObserver.
            floor_engine: Custom floor engine (e.g. a custom table).

        Raises:
            ConfigurationError: If the configuration is invalid
            FloorTableError: If the floor table is inconsistent
        """
        self.config = config or ScoringConfig()
        errors = self.config.validate()
        if errors:
            raise ConfigurationError("Invalid scoring configuration: " + "; ".join(errors))

        self.observer = observer or NullObserver()
        self._scorers = build_scorers(self.config)
        self._floors = floor_engine or FloorEngine(self.config.floors)

    @classmethod
    def from_env(cls) -> "GrowthScoringEngine":
        """
        Create an engine configured from the environment.

        Attaches a LoggingObserver when GAP_SCORING_LOG_COMPONENTS
        is set. GAP_SCORING_LOG_LEVEL is the observer's threshold;
        logger levels and handlers are left to the application.
        """
        config = ScoringConfig.from_env()
        observer: ScoringObserver = NullObserver()
        if config.log_components:
            observer = LoggingObserver(
                logging.getLogger("growth_scoring"),
                level=logging.getLevelName(config.log_level),
            )
        logger.debug(f"Growth scoring engine {config.engine_version} configured from environment")
        return cls(config=config, observer=observer)

    @property
    def floor_engine(self) -> FloorEngine:
        return self._floors

    def score(
        self,
        features: FeatureInput = None,
        coverage: Optional[DataCoverage] = None,
    ) -> Scorecard:
        """
        Score a site.

        Args:
            features: FeatureBundle, raw payload mapping, or None
            coverage: What extraction collected. None = everything.

        Returns:
            Scorecard with overall and per-dimension scores
        """
        return self.explain(features, coverage).scorecard

    def explain(
        self,
        features: FeatureInput = None,
        coverage: Optional[DataCoverage] = None,
    ) -> ScoringBreakdown:
        """
        Score a site and return the full explanation.

        Args:
            features: FeatureBundle, raw payload mapping, or None
            coverage: What extraction collected. None = everything.

        Returns:
            ScoringBreakdown with components, raw and adjusted
            scores, floor applications and the Scorecard
        """
        bundle = self._coerce(features)
        weights = self.config.weights
        evidence = evaluate_evidence(bundle)

        # --------------------------------------------------
        # Step 1: Components, aggregation and floors
        # --------------------------------------------------
        breakdowns: List[DimensionBreakdown] = []
        adjusted: Dict[Dimension, int] = {}

        for dimension, scorer in self._scorers.items():
            dimension_score = build_dimension_score(
                dimension, scorer.score_components(bundle), weights
            )
            raw_score = aggregate_dimension(dimension_score)
            self.observer.on_components(dimension, dimension_score.components, raw_score)

            adjusted_score, fired = self._floors.apply_dimension(
                dimension, raw_score, bundle, evidence
            )
            for application in fired:
                self.observer.on_floor_applied(application)

            adjusted[dimension] = adjusted_score
            breakdowns.append(DimensionBreakdown(
                dimension_score=dimension_score,
                raw_score=raw_score,
                adjusted_score=adjusted_score,
                floors_applied=fired,
            ))

        # --------------------------------------------------
        # Step 2: Blend adjusted scores
        # --------------------------------------------------
        overall = blend_overall(adjusted, weights)

        # --------------------------------------------------
        # Step 3: Package
        # --------------------------------------------------
        evaluated = evaluated_dimensions(coverage)
        scorecard = Scorecard(
            overall=overall,
            evaluated_dimensions=tuple(d.value for d in evaluated),
            **{d.value: adjusted[d] for d in evaluated},
        )
        self.observer.on_scorecard(scorecard)

        return ScoringBreakdown(
            scorecard=scorecard,
            dimensions=tuple(breakdowns),
            engine_version=self.config.engine_version,
        )

    @staticmethod
    def _coerce(features: FeatureInput) -> FeatureBundle:
        if isinstance(features, FeatureBundle):
            return features
        return normalize_features(features)

    def get_config(self) -> ScoringConfig:
        """Return the current engine configuration."""
        return self.config


def evaluated_dimensions(coverage: Optional[DataCoverage] = None) -> Tuple[Dimension, ...]:
    """
    Decide which dimensions count as evaluated.

    Without coverage information every dimension is evaluated.
    Brand and authority are always evaluated.
    """
    if coverage is None:
        return tuple(Dimension.all_dimensions())

    evaluated = []
    if coverage.site_crawled:
        evaluated.append(Dimension.WEBSITE)
    if coverage.blog_detected or coverage.case_studies_detected or coverage.site_crawled:
        evaluated.append(Dimension.CONTENT)
    if coverage.lighthouse_available or coverage.meta_tags_parsed:
        evaluated.append(Dimension.SEO)
    evaluated.append(Dimension.BRAND)
    evaluated.append(Dimension.AUTHORITY)
    return tuple(evaluated)


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================


def compute_scores(
    features: FeatureInput = None,
    config: Optional[ScoringConfig] = None,
    observer: Optional[ScoringObserver] = None,
    coverage: Optional[DataCoverage] = None,
) -> Scorecard:
    """
    Convenience function to score a site in one call.

    Creates a temporary engine. For repeated scoring, prefer a
    persistent GrowthScoringEngine instance.

    Args:
        features: FeatureBundle, raw payload mapping, or None
        config: Optional engine configuration
        observer: Optional observability sink
        coverage: Optional extraction coverage

    Returns:
        Scorecard
    """
    engine = GrowthScoringEngine(config=config, observer=observer)
    return engine.score(features, coverage)


def explain_scores(
    features: FeatureInput = None,
    config: Optional[ScoringConfig] = None,
    observer: Optional[ScoringObserver] = None,
    coverage: Optional[DataCoverage] = None,
) -> ScoringBreakdown:
    """Convenience function returning the full ScoringBreakdown."""
    engine = GrowthScoringEngine(config=config, observer=observer)
    return engine.explain(features, coverage)


def format_scorecard_summary(result: Union[Scorecard, ScoringBreakdown]) -> str:
    """
    Format a human-readable scorecard summary.

    Useful for logging and reports. A ScoringBreakdown adds raw
    scores and floors per dimension.

    Args:
        result: Scorecard or ScoringBreakdown

    Returns:
        Formatted summary string
    """
    breakdown = result if isinstance(result, ScoringBreakdown) else None
    scorecard = breakdown.scorecard if breakdown else result

    lines = [
        "=" * 50,
        "GROWTH SCORECARD",
        "=" * 50,
        f"Overall: {scorecard.overall}/100 ({scorecard.band.label})",
        "",
    ]

    for dimension in Dimension.all_dimensions():
        value = scorecard.get(dimension)
        if value is None:
            lines.append(f"  {dimension.rubric_name}: not evaluated")
            continue
        line = f"  {dimension.rubric_name}: {value}/100"
        if breakdown:
            detail = breakdown.for_dimension(dimension)
            if detail.floor_raised:
                rules = ", ".join(f.rule_name for f in detail.floors_applied)
                line += f" (raw {detail.raw_score}, floor: {rules})"
        lines.append(line)

    lines.append("=" * 50)
    return "\n".join(lines)
