"""
Growth Scoring Engine - Package.

============================================================
PURPOSE
============================================================
The Growth Scoring Engine turns sparse, heterogeneous website
and marketing signals into comparable 0-100 scores across five
marketing dimensions plus one blended overall score.

============================================================
WHAT IT IS
============================================================
- A deterministic, weighted, multi-component rubric
- A pure, single-pass numeric transform
- Safe to call concurrently (no shared state)

============================================================
WHAT IT IS NOT
============================================================
- NOT a crawler or signal extractor
- NOT an AI / narrative generator
- NOT a persistence or caching layer

============================================================
FIVE DIMENSIONS
============================================================
1. WEBSITE:   Website & conversion        (weight 0.25)
2. CONTENT:   Content depth & velocity    (weight 0.25)
3. SEO:       SEO & visibility            (weight 0.25)
4. BRAND:     Brand & positioning         (weight 0.15)
5. AUTHORITY: Authority & trust           (weight 0.10)

============================================================
PIPELINE
============================================================
FeatureBundle
  -> Component Scorers   (named point-scale components)
  -> Dimension Aggregator (sum / max * 100)
  -> Floor Engine        (minimums for compound evidence)
  -> Overall Blender     (fixed weights)
  -> Scorecard

Bands:
- EARLY (0-29)
- DEVELOPING (30-59)
- STRONG (60-79)
- LEADING (80-100)

============================================================
USAGE
============================================================
    from growth_scoring import (
        compute_scores,
        normalize_features,
        coverage_from_data_availability,
    )

    features = normalize_features(
        extractor_payload,
        content_inventory=inventory,
        trust_signals=trust,
    )
    coverage = coverage_from_data_availability(availability)

    scorecard = compute_scores(features, coverage=coverage)
    print(scorecard.to_dict())

============================================================
"""

from .types import (
    # Enums
    Dimension,
    ScoreBand,
    # Evidence and output
    ComponentScore,
    DimensionScore,
    FloorApplication,
    Scorecard,
    DimensionBreakdown,
    ScoringBreakdown,
    # Errors
    GrowthScoringError,
    ConfigurationError,
    FloorTableError,
    FeatureValidationError,
)

from .features import (
    FeatureBundle,
    UxSignals,
    NavigationSignals,
    ConversionSignals,
    ContentSignals,
    SeoSignals,
    TechnicalSignals,
    BrandingSignals,
    AuthoritySignals,
    SocialSignals,
    PositioningSignals,
    DataCoverage,
)

from .config import (
    WebsiteRubricConfig,
    ContentRubricConfig,
    SeoRubricConfig,
    BrandRubricConfig,
    AuthorityRubricConfig,
    DimensionWeights,
    FloorConfig,
    ScoringConfig,
    get_default_config,
)

from .scorers import (
    BaseComponentScorer,
    WebsiteComponentScorer,
    ContentComponentScorer,
    SeoComponentScorer,
    BrandComponentScorer,
    AuthorityComponentScorer,
    build_scorers,
    step_score,
)

from .aggregation import (
    aggregate_components,
    blend_overall,
    round_half_up,
)

from .floors import (
    EVIDENCE_PREDICATES,
    DEFAULT_FLOOR_RULES,
    SOCIAL_FIRST_CONTENT_FLOOR,
    FloorRule,
    FloorEngine,
    build_floor_table,
    validate_floor_table,
)

from .normalization import (
    normalize_features,
    validate_features,
    coverage_from_data_availability,
)

from .observers import (
    ScoringObserver,
    NullObserver,
    LoggingObserver,
    RecordingObserver,
)

from .engine import (
    GrowthScoringEngine,
    compute_scores,
    explain_scores,
    evaluated_dimensions,
    format_scorecard_summary,
)


__all__ = [
    # Types
    "Dimension",
    "ScoreBand",
    "ComponentScore",
    "DimensionScore",
    "FloorApplication",
    "Scorecard",
    "DimensionBreakdown",
    "ScoringBreakdown",
    "GrowthScoringError",
    "ConfigurationError",
    "FloorTableError",
    "FeatureValidationError",
    # Features
    "FeatureBundle",
    "UxSignals",
    "NavigationSignals",
    "ConversionSignals",
    "ContentSignals",
    "SeoSignals",
    "TechnicalSignals",
    "BrandingSignals",
    "AuthoritySignals",
    "SocialSignals",
    "PositioningSignals",
    "DataCoverage",
    # Config
    "WebsiteRubricConfig",
    "ContentRubricConfig",
    "SeoRubricConfig",
    "BrandRubricConfig",
    "AuthorityRubricConfig",
    "DimensionWeights",
    "FloorConfig",
    "ScoringConfig",
    "get_default_config",
    # Scorers
    "BaseComponentScorer",
    "WebsiteComponentScorer",
    "ContentComponentScorer",
    "SeoComponentScorer",
    "BrandComponentScorer",
    "AuthorityComponentScorer",
    "build_scorers",
    "step_score",
    # Aggregation
    "aggregate_components",
    "blend_overall",
    "round_half_up",
    # Floors
    "EVIDENCE_PREDICATES",
    "DEFAULT_FLOOR_RULES",
    "SOCIAL_FIRST_CONTENT_FLOOR",
    "FloorRule",
    "FloorEngine",
    "build_floor_table",
    "validate_floor_table",
    # Normalization
    "normalize_features",
    "validate_features",
    "coverage_from_data_availability",
    # Observers
    "ScoringObserver",
    "NullObserver",
    "LoggingObserver",
    "RecordingObserver",
    # Engine
    "GrowthScoringEngine",
    "compute_scores",
    "explain_scores",
    "evaluated_dimensions",
    "format_scorecard_summary",
]

__version__ = "1.0.0"
