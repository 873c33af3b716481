"""
Growth Scoring Engine - Floor Engine.

============================================================
PURPOSE
============================================================
Minimum-score guarantees for dimensions when strong compound
evidence is present.

Independently capped components cannot reward co-occurrence:
a site with a large case-study library, a logo strip and press
badges can still under-score. Floors correct for that.

============================================================
MODEL
============================================================
- EVIDENCE_PREDICATES: named boolean functions over the
  Feature Bundle
- FloorRule: (name, dimension, evidence names, minimum)
- A rule fires when ALL its evidence predicates hold
- adjusted = max(raw, minimum of every firing rule)

============================================================
INVARIANTS
============================================================
- Floors only raise: adjusted >= raw
- No rank inversion: a rule whose evidence is a strict
  superset of another rule's (same dimension) must not assert
  a lower minimum. Checked once when the engine is built.
- Floors never touch the overall score

============================================================
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

from .config import FloorConfig
from .features import FeatureBundle
from .types import Dimension, FloorApplication, FloorTableError


logger = logging.getLogger(__name__)

EvidencePredicate = Callable[[FeatureBundle], bool]


# ============================================================
# EVIDENCE PREDICATES
# ============================================================


def _substantial_blog(f: FeatureBundle) -> bool:
    return f.content.has_blog and f.content.blog_post_count >= 40


def _case_study_library(f: FeatureBundle) -> bool:
    return f.content.case_study_count >= 15


def _resources_hub(f: FeatureBundle) -> bool:
    return f.content.has_resources_hub


def _no_blog(f: FeatureBundle) -> bool:
    return not f.content.has_blog


def _instagram_presence(f: FeatureBundle) -> bool:
    return f.social.has_instagram


def _strong_customer_logos(f: FeatureBundle) -> bool:
    return f.authority.customer_logo_count >= 20 or f.authority.has_customer_logo_strip


def _strong_case_studies(f: FeatureBundle) -> bool:
    return f.content.case_study_count >= 10 or f.content.has_case_studies_section


def _credibility_badges(f: FeatureBundle) -> bool:
    return f.authority.credibility_marker_count > 0


def _strong_testimonials(f: FeatureBundle) -> bool:
    return f.authority.testimonial_count >= 5


def _global_category_leader_tier(f: FeatureBundle) -> bool:
    return f.positioning.brand_tier.strip().lower() == "global_category_leader"


def _enterprise_tier(f: FeatureBundle) -> bool:
    return f.positioning.brand_tier.strip().lower() == "enterprise"


EVIDENCE_PREDICATES: Dict[str, EvidencePredicate] = {
    "substantial_blog": _substantial_blog,
    "case_study_library": _case_study_library,
    "resources_hub": _resources_hub,
    "no_blog": _no_blog,
    "instagram_presence": _instagram_presence,
    "strong_customer_logos": _strong_customer_logos,
    "strong_case_studies": _strong_case_studies,
    "credibility_badges": _credibility_badges,
    "strong_testimonials": _strong_testimonials,
    "global_category_leader_tier": _global_category_leader_tier,
    "enterprise_tier": _enterprise_tier,
}


def evaluate_evidence(features: FeatureBundle) -> Dict[str, bool]:
    """Evaluate every registered predicate once."""
    return {name: bool(predicate(features)) for name, predicate in EVIDENCE_PREDICATES.items()}


# ============================================================
# FLOOR RULES
# ============================================================


@dataclass(frozen=True)
class FloorRule:
    """
    A declarative minimum-score guarantee.

    Evidence names refer to EVIDENCE_PREDICATES.
    """

    name: str
    dimension: Dimension
    minimum: int
    evidence: FrozenSet[str]
    description: str = ""
    carve_out: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.minimum <= 100:
            raise FloorTableError(
                f"Floor {self.name} minimum {self.minimum} outside [0, 100]",
                dimension=self.dimension,
            )
        if not self.evidence:
            raise FloorTableError(f"Floor {self.name} has no evidence", dimension=self.dimension)
        unknown = sorted(e for e in self.evidence if e not in EVIDENCE_PREDICATES)
        if unknown:
            raise FloorTableError(
                f"Floor {self.name} references unknown evidence: {', '.join(unknown)}",
                dimension=self.dimension,
            )

    def matches(self, evidence: Mapping[str, bool]) -> bool:
        return all(evidence.get(name, False) for name in self.evidence)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "dimension": self.dimension.value,
            "minimum": self.minimum,
            "evidence": sorted(self.evidence),
            "description": self.description,
            "carve_out": self.carve_out,
        }


def _rule(name, dimension, minimum, evidence, description="", carve_out=False) -> FloorRule:
    return FloorRule(
        name=name,
        dimension=dimension,
        minimum=minimum,
        evidence=frozenset(evidence),
        description=description,
        carve_out=carve_out,
    )


# Consumer and local businesses (gyms, salons, venues) often skip a
# blog and publish on Instagram instead. Kept as its own rule so it
# can be audited or switched off without touching the blog rubric.
SOCIAL_FIRST_CONTENT_FLOOR = _rule(
    "social_first_content",
    Dimension.CONTENT,
    40,
    ["no_blog", "instagram_presence"],
    "No blog but an active Instagram presence",
    carve_out=True,
)


CONTENT_FLOOR_RULES: Tuple[FloorRule, ...] = (
    _rule(
        "content_substantial_blog", Dimension.CONTENT, 70,
        ["substantial_blog"],
        "Blog with 40+ posts",
    ),
    _rule(
        "content_case_study_library", Dimension.CONTENT, 75,
        ["case_study_library"],
        "15+ case studies",
    ),
    _rule(
        "content_resources_hub", Dimension.CONTENT, 75,
        ["resources_hub"],
        "Resources hub",
    ),
    _rule(
        "content_blog_and_resources", Dimension.CONTENT, 80,
        ["substantial_blog", "resources_hub"],
        "Blog with 40+ posts and a resources hub",
    ),
)


AUTHORITY_FLOOR_RULES: Tuple[FloorRule, ...] = (
    _rule(
        "authority_logos_and_case_studies", Dimension.AUTHORITY, 70,
        ["strong_customer_logos", "strong_case_studies"],
        "20+ logos or a logo strip, with 10+ case studies or a case-study section",
    ),
    _rule(
        "authority_logos_case_studies_badges", Dimension.AUTHORITY, 80,
        ["strong_customer_logos", "strong_case_studies", "credibility_badges"],
        "Logos and case studies plus awards, press or review badges",
    ),
    _rule(
        "authority_all_trust_signals", Dimension.AUTHORITY, 80,
        ["strong_customer_logos", "strong_case_studies", "credibility_badges", "strong_testimonials"],
        "Logos, case studies, badges and 5+ testimonials",
    ),
)


BRAND_TIER_FLOOR_RULES: Tuple[FloorRule, ...] = (
    _rule("leader_website", Dimension.WEBSITE, 70, ["global_category_leader_tier"], "Global category leader"),
    _rule("leader_content", Dimension.CONTENT, 70, ["global_category_leader_tier"], "Global category leader"),
    _rule("leader_seo", Dimension.SEO, 60, ["global_category_leader_tier"], "Global category leader"),
    _rule("leader_brand", Dimension.BRAND, 90, ["global_category_leader_tier"], "Global category leader"),
    _rule("leader_authority", Dimension.AUTHORITY, 70, ["global_category_leader_tier"], "Global category leader"),
    _rule("enterprise_content", Dimension.CONTENT, 60, ["enterprise_tier"], "Enterprise brand"),
    _rule("enterprise_brand", Dimension.BRAND, 75, ["enterprise_tier"], "Enterprise brand"),
)


DEFAULT_FLOOR_RULES: Tuple[FloorRule, ...] = (
    CONTENT_FLOOR_RULES
    + (SOCIAL_FIRST_CONTENT_FLOOR,)
    + AUTHORITY_FLOOR_RULES
    + BRAND_TIER_FLOOR_RULES
)


def build_floor_table(config: Optional[FloorConfig] = None) -> Tuple[FloorRule, ...]:
    """
    Build the active floor table for a configuration.

    Args:
        config: Floor settings (carve-out toggle and minimum)

    Returns:
        Tuple of FloorRule, empty when floors are disabled
    """
    config = config or FloorConfig()
    if not config.enabled:
        return ()

    rules: List[FloorRule] = list(CONTENT_FLOOR_RULES)
    if config.include_social_first_content_floor:
        carve_out = SOCIAL_FIRST_CONTENT_FLOOR
        if config.social_first_content_minimum != carve_out.minimum:
            carve_out = _rule(
                carve_out.name,
                carve_out.dimension,
                config.social_first_content_minimum,
                carve_out.evidence,
                carve_out.description,
                carve_out=True,
            )
        rules.append(carve_out)
    rules.extend(AUTHORITY_FLOOR_RULES)
    rules.extend(BRAND_TIER_FLOOR_RULES)
    return tuple(rules)


def find_rank_inversions(rules: Tuple[FloorRule, ...]) -> List[str]:
    """
    List every pair of same-dimension rules where the rule with
    strictly more evidence asserts a lower minimum.
    """
    problems = []
    for stronger in rules:
        for weaker in rules:
            if stronger.dimension != weaker.dimension:
                continue
            if stronger.evidence > weaker.evidence and stronger.minimum < weaker.minimum:
                problems.append(
                    f"{stronger.name} ({stronger.minimum}) requires more evidence than "
                    f"{weaker.name} ({weaker.minimum}) but asserts a lower minimum"
                )
    return problems


def validate_floor_table(rules: Tuple[FloorRule, ...]) -> None:
    """
    Raise FloorTableError if the table is inconsistent.

    Raises:
        FloorTableError: duplicate rule names or rank inversion
    """
    names = [r.name for r in rules]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise FloorTableError(f"Duplicate floor rule names: {', '.join(duplicates)}")

    problems = find_rank_inversions(rules)
    if problems:
        raise FloorTableError("Floor table rank inversion: " + "; ".join(problems))


# ============================================================
# FLOOR ENGINE
# ============================================================


class FloorEngine:
    """
    Applies the declarative floor table to raw dimension scores.

    The table is validated once, at construction.
    """

    def __init__(
        self,
        config: Optional[FloorConfig] = None,
        rules: Optional[Tuple[FloorRule, ...]] = None,
    ):
        self.config = config or FloorConfig()
        self.rules = tuple(rules) if rules is not None else build_floor_table(self.config)
        validate_floor_table(self.rules)
        logger.debug(f"Floor engine ready with {len(self.rules)} rules")

    def rules_for(self, dimension: Dimension) -> Tuple[FloorRule, ...]:
        return tuple(r for r in self.rules if r.dimension == dimension)

    def apply_dimension(
        self,
        dimension: Dimension,
        raw_score: int,
        features: FeatureBundle,
        evidence: Optional[Mapping[str, bool]] = None,
    ) -> Tuple[int, Tuple[FloorApplication, ...]]:
        """
        Apply every matching floor for one dimension.

        Args:
            dimension: Dimension being adjusted
            raw_score: Aggregated rubric score
            features: Feature Bundle the predicates read
            evidence: Pre-evaluated predicates (optional)

        Returns:
            (adjusted score, floors that fired)
        """
        if evidence is None:
            evidence = evaluate_evidence(features)

        fired = [r for r in self.rules_for(dimension) if r.matches(evidence)]
        adjusted = max([raw_score] + [r.minimum for r in fired])

        applications = tuple(
            FloorApplication(
                rule_name=r.name,
                dimension=dimension,
                minimum=r.minimum,
                raw_score=raw_score,
                adjusted_score=adjusted,
            )
            for r in fired
        )
        return adjusted, applications

    def apply(
        self,
        raw_scores: Mapping[Dimension, int],
        features: FeatureBundle,
    ) -> Tuple[Dict[Dimension, int], Tuple[FloorApplication, ...]]:
        """
        Apply floors to every dimension.

        Args:
            raw_scores: Dimension -> raw rubric score
            features: Feature Bundle the predicates read

        Returns:
            (dimension -> adjusted score, all floor applications)
        """
        evidence = evaluate_evidence(features)
        adjusted: Dict[Dimension, int] = {}
        applications: List[FloorApplication] = []
        for dimension, raw in raw_scores.items():
            adjusted[dimension], fired = self.apply_dimension(dimension, raw, features, evidence)
            applications.extend(fired)
        return adjusted, tuple(applications)
