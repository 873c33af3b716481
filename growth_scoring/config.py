"""
Growth Scoring Engine - Configuration.

============================================================
PURPOSE
============================================================
Defines all configuration dataclasses, point ceilings and
step thresholds for the Growth Scoring Engine.

============================================================
DESIGN PRINCIPLES
============================================================
- Immutable configurations
- Rubric constants are product behavior: they are preserved
  exactly and are never read from the environment
- Only runtime switches (logging, carve-out toggle) come
  from the environment

============================================================
STEP TABLES
============================================================
A step table is a tuple of (threshold, points) pairs sorted
by descending threshold. A value scores the points of the
first pair whose threshold it reaches (>=), and 0 below the
last threshold. Tables are monotonic by construction.

============================================================
"""

import logging
import os
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, List, Tuple

from dotenv import load_dotenv

from .types import ConfigurationError, Dimension


logger = logging.getLogger(__name__)

StepTable = Tuple[Tuple[int, int], ...]


def validate_step_table(name: str, table: StepTable, ceiling: float) -> List[str]:
    """Check a step table is descending, non-negative and within its ceiling."""
    errors = []
    previous_threshold = None
    previous_points = None
    for threshold, points in table:
        if points < 0 or points > ceiling:
            errors.append(f"{name}: points {points} outside [0, {ceiling}]")
        if previous_threshold is not None and threshold >= previous_threshold:
            errors.append(f"{name}: thresholds must be strictly descending")
        if previous_points is not None and points > previous_points:
            errors.append(f"{name}: points must not increase as thresholds fall")
        previous_threshold, previous_points = threshold, points
    return errors


# ============================================================
# WEBSITE & CONVERSION
# ============================================================


@dataclass(frozen=True)
class WebsiteRubricConfig:
    """
    Rubric for the Website & Conversion dimension.

    Reads hero/CTA signals, the number of top-level navigation
    items, the measured page performance and the conversion
    pages found on the site.
    """

    hero_clarity_max: int = 5
    hero_headline_points: int = 2
    hero_subheadline_points: int = 2
    hero_cta_points: int = 1

    navigation_clarity_max: int = 5
    navigation_clarity_steps: StepTable = ((5, 5), (3, 3), (1, 1))

    primary_cta_visibility_max: int = 5
    cta_visibility_steps: StepTable = ((3, 3), (1, 1))

    mobile_experience_max: int = 5
    mobile_experience_steps: StepTable = ((80, 5), (60, 3), (40, 1))

    conversion_flow_max: int = 5
    pricing_page_points: int = 2
    services_page_points: int = 1
    contact_page_points: int = 1
    form_cta_points: int = 1
    form_cta_keywords: Tuple[str, ...] = ("form", "submit", "apply")

    def validate(self) -> List[str]:
        return (
            validate_step_table("navigation_clarity_steps", self.navigation_clarity_steps, self.navigation_clarity_max)
            + validate_step_table("cta_visibility_steps", self.cta_visibility_steps, self.primary_cta_visibility_max)
            + validate_step_table("mobile_experience_steps", self.mobile_experience_steps, self.mobile_experience_max)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hero_clarity_max": self.hero_clarity_max,
            "navigation_clarity_steps": [list(s) for s in self.navigation_clarity_steps],
            "cta_visibility_steps": [list(s) for s in self.cta_visibility_steps],
            "mobile_experience_steps": [list(s) for s in self.mobile_experience_steps],
            "conversion_flow_max": self.conversion_flow_max,
            "form_cta_keywords": list(self.form_cta_keywords),
        }


# ============================================================
# CONTENT DEPTH & VELOCITY
# ============================================================


@dataclass(frozen=True)
class ContentRubricConfig:
    """
    Rubric for the Content Depth & Velocity dimension.

    ============================================================
    THRESHOLD NOTES
    ============================================================
    blog_post_steps keeps the 50 and 40 rungs at the same
    points, and the 5 and 1 rungs at the same points. Those
    duplicate rungs are historical and kept as-is.
    ============================================================
    """

    blog_detected_points: int = 3
    case_studies_detected_points: int = 3

    blog_post_count_max: int = 4
    blog_post_steps: StepTable = ((50, 4), (40, 4), (20, 3), (10, 2), (5, 1), (1, 1))

    blog_recency_max: int = 4
    volume_high_points: int = 4
    volume_medium_points: int = 2
    volume_low_with_posts_points: int = 1

    resources_hub_points: int = 3

    case_study_count_max: int = 3
    case_study_steps: StepTable = ((15, 3), (10, 2), (5, 1), (1, 1))

    about_depth_max: int = 3
    about_depth_steps: StepTable = ((1001, 3), (501, 2), (1, 1))


    content_variety_max: float = 5
    variety_blog: float = 1
    variety_case_studies: float = 1
    variety_resources_hub: float = 1
    variety_docs: float = 0.5
    variety_faq: float = 0.5
    themes_per_point: int = 2

    def validate(self) -> List[str]:
        return (
            validate_step_table("blog_post_steps", self.blog_post_steps, self.blog_post_count_max)
            + validate_step_table("case_study_steps", self.case_study_steps, self.case_study_count_max)
            + validate_step_table("about_depth_steps", self.about_depth_steps, self.about_depth_max)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blog_post_steps": [list(s) for s in self.blog_post_steps],
            "case_study_steps": [list(s) for s in self.case_study_steps],
            "about_depth_steps": [list(s) for s in self.about_depth_steps],
            "content_variety_max": self.content_variety_max,
        }


# ============================================================
# SEO & VISIBILITY
# ============================================================


@dataclass(frozen=True)
class SeoRubricConfig:
    """Rubric for the SEO & Visibility dimension."""

    lighthouse_max: int = 10

    heading_structure_max: int = 5
    single_h1_points: int = 5
    multiple_h1_points: int = 2

    internal_linking_max: int = 5
    internal_link_steps: StepTable = ((50, 5), (30, 4), (20, 3), (10, 2), (1, 1))

    meta_tags_max: int = 3
    local_seo_max: int = 2
    local_focus_keywords: Tuple[str, ...] = ("local", "neighborhood", "city")

    def validate(self) -> List[str]:
        return validate_step_table(
            "internal_link_steps", self.internal_link_steps, self.internal_linking_max
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lighthouse_max": self.lighthouse_max,
            "internal_link_steps": [list(s) for s in self.internal_link_steps],
            "local_focus_keywords": list(self.local_focus_keywords),
        }


# ============================================================
# BRAND & POSITIONING
# ============================================================


@dataclass(frozen=True)
class BrandRubricConfig:
    """Rubric for the Brand & Positioning dimension."""

    logo_presence_max: int = 2
    structured_nav_points: int = 2

    navigation_variety_max: int = 3
    navigation_variety_steps: StepTable = ((5, 3), (3, 2), (1, 1))

    visual_identity_max: int = 3
    hero_visual_points: int = 2
    product_illustration_points: int = 1

    def validate(self) -> List[str]:
        return validate_step_table(
            "navigation_variety_steps", self.navigation_variety_steps, self.navigation_variety_max
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "navigation_variety_steps": [list(s) for s in self.navigation_variety_steps],
            "visual_identity_max": self.visual_identity_max,
        }


# ============================================================
# AUTHORITY & TRUST
# ============================================================


@dataclass(frozen=True)
class AuthorityRubricConfig:
    """
    Rubric for the Authority & Trust dimension.

    Social presence is weighted by platform:
    LinkedIn 3, Facebook 2, Instagram 2.

    caseStudyDepth keeps the 15 and 10 rungs at the same
    points, like the testimonial ladder.
    """

    testimonials_max: int = 3
    testimonial_steps: StepTable = ((8, 3), (5, 3), (3, 2), (1, 1))

    case_study_depth_max: int = 3
    case_study_depth_steps: StepTable = ((15, 3), (10, 3), (5, 2), (1, 1))

    third_party_trust_max: int = 3

    logo_strip_points: int = 2
    trusted_by_points: int = 2
    named_stories_points: int = 2

    social_presence_max: int = 7
    linkedin_points: int = 3
    facebook_points: int = 2
    instagram_points: int = 2

    brand_authority_max: int = 2

    baseline_trust_points: int = 1
    basic_structure_min_pages: int = 3

    def validate(self) -> List[str]:
        errors = (
            validate_step_table("testimonial_steps", self.testimonial_steps, self.testimonials_max)
            + validate_step_table("case_study_depth_steps", self.case_study_depth_steps, self.case_study_depth_max)
        )
        social_total = self.linkedin_points + self.facebook_points + self.instagram_points
        if social_total > self.social_presence_max:
            errors.append("social platform points exceed social_presence_max")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "testimonial_steps": [list(s) for s in self.testimonial_steps],
            "case_study_depth_steps": [list(s) for s in self.case_study_depth_steps],
            "social_presence_max": self.social_presence_max,
            "basic_structure_min_pages": self.basic_structure_min_pages,
        }


# ============================================================
# DIMENSION WEIGHTS
# ============================================================


@dataclass(frozen=True)
class DimensionWeights:
    """
    Fixed blend weights for the overall score.

    Checked once at construction: the five weights must sum to
    exactly 1.0 (compared as exact decimals, not floats).
    """

    website: float = 0.25
    content: float = 0.25
    seo: float = 0.25
    brand: float = 0.15
    authority: float = 0.10

    def __post_init__(self) -> None:
        for dimension in Dimension.all_dimensions():
            if self.weight_for(dimension) < 0:
                raise ConfigurationError(
                    f"Negative weight for {dimension.value}", dimension=dimension
                )
        total = sum(Fraction(str(self.weight_for(d))) for d in Dimension.all_dimensions())
        if total != 1:
            raise ConfigurationError(f"Dimension weights must sum to 1.0, got {float(total)}")

    def weight_for(self, dimension: Dimension) -> float:
        return getattr(self, dimension.value)

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(self.weight_for(d) for d in Dimension.all_dimensions())

    def to_dict(self) -> Dict[str, Any]:
        return {d.value: self.weight_for(d) for d in Dimension.all_dimensions()}


# ============================================================
# FLOORS
# ============================================================


@dataclass(frozen=True)
class FloorConfig:
    """
    Floor engine settings.

    The social-first content carve-out can be switched off on
    its own without touching the rest of the floor table.
    """

    enabled: bool = True
    include_social_first_content_floor: bool = True
    social_first_content_minimum: int = 40

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "include_social_first_content_floor": self.include_social_first_content_floor,
            "social_first_content_minimum": self.social_first_content_minimum,
        }


# ============================================================
# MASTER CONFIGURATION
# ============================================================


@dataclass(frozen=True)
class ScoringConfig:
    """
    Master configuration for the Growth Scoring Engine.

    Aggregates all rubric configs, weights and engine settings.
    """

    website: WebsiteRubricConfig = field(default_factory=WebsiteRubricConfig)
    content: ContentRubricConfig = field(default_factory=ContentRubricConfig)
    seo: SeoRubricConfig = field(default_factory=SeoRubricConfig)
    brand: BrandRubricConfig = field(default_factory=BrandRubricConfig)
    authority: AuthorityRubricConfig = field(default_factory=AuthorityRubricConfig)
    weights: DimensionWeights = field(default_factory=DimensionWeights)
    floors: FloorConfig = field(default_factory=FloorConfig)

    # Engine settings
    engine_version: str = "1.0.0"

    # Logging
    log_components: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """
        Load runtime switches from environment variables.

        Reads a .env file if present. Rubric constants are not
        configurable from the environment.
        """
        load_dotenv()
        config = cls(
            floors=FloorConfig(
                include_social_first_content_floor=_env_flag("GAP_SCORING_SOCIAL_FIRST_FLOOR", True),
            ),
            log_components=_env_flag("GAP_SCORING_LOG_COMPONENTS", False),
            log_level=os.getenv("GAP_SCORING_LOG_LEVEL", "INFO").upper(),
        )
        logger.debug(
            f"Loaded scoring config from environment: "
            f"social_first_floor={config.floors.include_social_first_content_floor}, "
            f"log_components={config.log_components}, log_level={config.log_level}"
        )
        return config

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors."""
        errors = []
        errors.extend(self.website.validate())
        errors.extend(self.content.validate())
        errors.extend(self.seo.validate())
        errors.extend(self.brand.validate())
        errors.extend(self.authority.validate())
        if not 0 <= self.floors.social_first_content_minimum <= 100:
            errors.append("social_first_content_minimum must be within [0, 100]")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "website": self.website.to_dict(),
            "content": self.content.to_dict(),
            "seo": self.seo.to_dict(),
            "brand": self.brand.to_dict(),
            "authority": self.authority.to_dict(),
            "weights": self.weights.to_dict(),
            "floors": self.floors.to_dict(),
            "engine_version": self.engine_version,
            "log_components": self.log_components,
            "log_level": self.log_level,
        }


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# DEFAULT CONFIGURATION
# ============================================================


def get_default_config() -> ScoringConfig:
    """Return the default Growth Scoring Engine configuration."""
    return ScoringConfig()
