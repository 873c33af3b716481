"""
Growth Scoring Engine - Component Scorers.

============================================================
PURPOSE
============================================================
One scorer per dimension. Each scorer reads a fixed slice of
the Feature Bundle and emits a fixed-shape list of named
point-scale components, each with an explicit ceiling.

============================================================
DESIGN PRINCIPLES
============================================================
- Pure functions: same input = same output
- No logging, no I/O, never reads another dimension's score
- Never raises on a valid FeatureBundle
- Always returns every component, even for an empty bundle

============================================================
SCORING PATTERN
============================================================
For each count signal:
    walk the step table top-down
    first threshold reached -> its points
    nothing reached        -> 0

For each flag signal:
    True -> fixed points, False -> 0

Every component is clamped into [0, max].

============================================================
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Dict, List, Optional, Tuple, Type

from .aggregation import round_half_up
from .config import (
    AuthorityRubricConfig,
    BrandRubricConfig,
    ContentRubricConfig,
    ScoringConfig,
    SeoRubricConfig,
    StepTable,
    WebsiteRubricConfig,
)
from .features import ConversionSignals, FeatureBundle
from .types import ComponentScore, Dimension


def step_score(value: float, table: StepTable) -> int:
    """
    Map a value onto a monotonic step table.

    Args:
        value: Count or measurement (negative values score 0)
        table: (threshold, points) pairs, descending thresholds

    Returns:
        Points for the first threshold reached, else 0
    """
    for threshold, points in table:
        if value >= threshold:
            return points
    return 0


# ============================================================
# BASE SCORER
# ============================================================


class BaseComponentScorer(ABC):
    """
    Abstract base class for component scorers.

    Subclasses declare their dimension and implement
    score_components().
    """

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """Return the dimension this scorer handles."""
        pass

    @abstractmethod
    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        """Score the dimension's components from the Feature Bundle."""
        pass

    @staticmethod
    def _component(name: str, score: float, maximum: float) -> ComponentScore:
        """Build a component, clamping the score into [0, maximum]."""
        return ComponentScore(name=name, score=max(0, min(maximum, score)), max=maximum)

    @staticmethod
    def _flag(value: bool, points: int) -> int:
        return points if value else 0


# ============================================================
# WEBSITE & CONVERSION
# ============================================================


class WebsiteComponentScorer(BaseComponentScorer):
    """
    Score Website & Conversion from UX and conversion signals.

    ============================================================
    COMPONENTS
    ============================================================
    heroClarity, navigationClarity, primaryCtaVisibility,
    mobileExperience, conversionFlowPresent

    mobileExperience is inferred from the measured page
    performance. An unmeasured page (score 0) scores 0.
    ============================================================
    """

    def __init__(self, config: Optional[WebsiteRubricConfig] = None):
        self.config = config or WebsiteRubricConfig()

    @property
    def dimension(self) -> Dimension:
        return Dimension.WEBSITE

    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        cfg = self.config
        ux = features.ux
        conv = features.conversions
        pages = features.content

        hero = (
            self._flag(ux.hero_headline_text_length > 0, cfg.hero_headline_points)
            + self._flag(ux.hero_has_subheadline, cfg.hero_subheadline_points)
            + self._flag(ux.hero_cta_present, cfg.hero_cta_points)
        )

        if ux.hero_cta_present:
            visibility = cfg.primary_cta_visibility_max
        else:
            cta_count = max(ux.primary_cta_count, conv.cta_button_count)
            visibility = step_score(cta_count, cfg.cta_visibility_steps)

        conversion_flow = (
            self._flag(pages.has_pricing_page, cfg.pricing_page_points)
            + self._flag(pages.has_feature_or_product_pages, cfg.services_page_points)
            + self._flag(ux.has_clear_contact_or_demo_entry, cfg.contact_page_points)
            + self._flag(self._has_form_cta(conv, cfg.form_cta_keywords), cfg.form_cta_points)
        )

        return (
            self._component("heroClarity", hero, cfg.hero_clarity_max),
            self._component(
                "navigationClarity",
                step_score(features.navigation.nav_item_count, cfg.navigation_clarity_steps),
                cfg.navigation_clarity_max,
            ),
            self._component("primaryCtaVisibility", visibility, cfg.primary_cta_visibility_max),
            self._component(
                "mobileExperience",
                step_score(features.technical.lighthouse_performance_score, cfg.mobile_experience_steps),
                cfg.mobile_experience_max,
            ),
            self._component("conversionFlowPresent", conversion_flow, cfg.conversion_flow_max),
        )

    @staticmethod
    def _has_form_cta(conv: ConversionSignals, keywords: Tuple[str, ...]) -> bool:
        if conv.form_count > 0:
            return True
        return any(k in label.lower() for label in conv.cta_labels for k in keywords)


# ============================================================
# CONTENT DEPTH & VELOCITY
# ============================================================


class ContentComponentScorer(BaseComponentScorer):
    """
    Score Content Depth & Velocity from the content inventory.

    Rewards depth, breadth and funnel coverage. A missing blog
    simply scores zero here; the social-first exception lives
    in the floor table, not in this rubric.
    """

    def __init__(self, config: Optional[ContentRubricConfig] = None):
        self.config = config or ContentRubricConfig()

    @property
    def dimension(self) -> Dimension:
        return Dimension.CONTENT

    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        cfg = self.config
        c = features.content

        volume = c.content_volume.strip().lower()
        if volume == "high":
            recency = cfg.volume_high_points
        elif volume == "medium":
            recency = cfg.volume_medium_points
        elif volume == "low" and c.blog_post_count > 0:
            recency = cfg.volume_low_with_posts_points
        else:
            recency = 0

        variety = (
            (cfg.variety_blog if c.has_blog else 0)
            + (cfg.variety_case_studies if c.has_case_studies_section else 0)
            + (cfg.variety_resources_hub if c.has_resources_hub else 0)
            + (cfg.variety_docs if c.has_docs_or_guides else 0)
            + (cfg.variety_faq if c.has_faq else 0)
            + max(0, c.content_theme_count) // cfg.themes_per_point
            + min(3, max(0, c.strong_funnel_stage_count))
        )

        return (
            self._component(
                "blogDetected",
                self._flag(c.has_blog, cfg.blog_detected_points),
                cfg.blog_detected_points,
            ),
            self._component(
                "caseStudiesDetected",
                self._flag(c.has_case_studies_section, cfg.case_studies_detected_points),
                cfg.case_studies_detected_points,
            ),
            self._component(
                "blogPostCount",
                step_score(c.blog_post_count, cfg.blog_post_steps),
                cfg.blog_post_count_max,
            ),
            self._component("blogRecency", recency, cfg.blog_recency_max),
            self._component(
                "resourcesHub",
                self._flag(c.has_resources_hub, cfg.resources_hub_points),
                cfg.resources_hub_points,
            ),
            self._component(
                "caseStudyCount",
                step_score(c.case_study_count, cfg.case_study_steps),
                cfg.case_study_count_max,
            ),
            self._component(
                "aboutDepth",
                step_score(c.about_text_length, cfg.about_depth_steps),
                cfg.about_depth_max,
            ),
            self._component("contentVariety", variety, cfg.content_variety_max),
        )


# ============================================================
# SEO & VISIBILITY
# ============================================================


class SeoComponentScorer(BaseComponentScorer):
    """
    Score SEO & Visibility from on-page and technical signals.

    Heading structure is not a positive-evidence count: one H1
    is healthy, several H1s score lower than exactly one.
    """

    def __init__(self, config: Optional[SeoRubricConfig] = None):
        self.config = config or SeoRubricConfig()

    @property
    def dimension(self) -> Dimension:
        return Dimension.SEO

    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        cfg = self.config
        seo = features.seo
        tech = features.technical
        positioning = features.positioning

        performance = max(0, min(100, tech.lighthouse_performance_score))
        lighthouse = round_half_up(Fraction(performance * cfg.lighthouse_max, 100))

        if seo.h1_count == 1:
            heading = cfg.single_h1_points
        elif seo.h1_count > 1:
            heading = cfg.multiple_h1_points
        else:
            heading = 0

        focus = positioning.geographic_focus.lower()
        local = (
            self._flag(len(positioning.local_search_phrases) > 0, 1)
            + self._flag(any(k in focus for k in cfg.local_focus_keywords), 1)
        )

        return (
            self._component("lighthousePerformanceScore", lighthouse, cfg.lighthouse_max),
            self._component("headingStructureHealth", heading, cfg.heading_structure_max),
            self._component(
                "internalLinkingPresence",
                step_score(seo.internal_link_count, cfg.internal_link_steps),
                cfg.internal_linking_max,
            ),
            self._component(
                "metaTagsPresent",
                self._flag(seo.has_meta_title and seo.has_meta_description, cfg.meta_tags_max),
                cfg.meta_tags_max,
            ),
            self._component("localSeoSignals", local, cfg.local_seo_max),
        )


# ============================================================
# BRAND & POSITIONING
# ============================================================


class BrandComponentScorer(BaseComponentScorer):
    """Score Brand & Positioning from visual identity and site structure."""

    def __init__(self, config: Optional[BrandRubricConfig] = None):
        self.config = config or BrandRubricConfig()

    @property
    def dimension(self) -> Dimension:
        return Dimension.BRAND

    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        cfg = self.config
        b = features.branding

        has_logo = b.has_logo_in_header or b.has_logo_in_footer
        visual_identity = (
            self._flag(has_logo, 1)
            + self._flag(b.has_consistent_brand_colors, 1)
            + self._flag(b.has_consistent_typography, 1)
        )

        return (
            self._component(
                "logoPresence",
                self._flag(b.has_logo_in_header, 1) + self._flag(b.has_logo_in_footer, 1),
                cfg.logo_presence_max,
            ),
            self._component(
                "navigationStructure",
                self._flag(b.has_structured_nav, cfg.structured_nav_points),
                cfg.structured_nav_points,
            ),
            self._component(
                "navigationVariety",
                step_score(features.navigation.section_flag_count, cfg.navigation_variety_steps),
                cfg.navigation_variety_max,
            ),
            self._component("visualIdentity", visual_identity, cfg.visual_identity_max),
            self._component(
                "heroVisual",
                self._flag(b.has_hero_illustration_or_visual, cfg.hero_visual_points),
                cfg.hero_visual_points,
            ),
            self._component(
                "productIllustrations",
                self._flag(b.has_distinct_product_illustrations, cfg.product_illustration_points),
                cfg.product_illustration_points,
            ),
        )


# ============================================================
# AUTHORITY & TRUST
# ============================================================


class AuthorityComponentScorer(BaseComponentScorer):
    """
    Score Authority & Trust from social proof and platform presence.

    ============================================================
    THIRD-PARTY TRUST
    ============================================================
    3 points: 20+ logos or 2+ credibility markers
    3 points: 10+ logos, any marker, 3+ awards or review counts
    2 points: 5+ logos or 2+ awards
    1 point:  any logo or award

    ============================================================
    BASELINE TRUST
    ============================================================
    1 point for a site with basic structure (a home page plus
    an about page or enough crawled pages) or any trust signal
    at all, case studies and social profiles included.
    ============================================================
    """

    def __init__(self, config: Optional[AuthorityRubricConfig] = None):
        self.config = config or AuthorityRubricConfig()

    @property
    def dimension(self) -> Dimension:
        return Dimension.AUTHORITY

    def score_components(self, features: FeatureBundle) -> Tuple[ComponentScore, ...]:
        cfg = self.config
        a = features.authority
        social = features.social
        pages = features.content
        markers = a.credibility_marker_count

        social_presence = (
            self._flag(social.has_linkedin, cfg.linkedin_points)
            + self._flag(social.has_facebook, cfg.facebook_points)
            + self._flag(social.has_instagram, cfg.instagram_points)
        )

        has_basic_structure = pages.has_home_page and (
            pages.has_about_page or pages.crawled_page_count >= cfg.basic_structure_min_pages
        )
        has_any_trust_signal = any([
            a.testimonial_count > 0,
            pages.case_study_count > 0,
            a.customer_logo_count > 0,
            a.award_count > 0,
            a.has_review_counts,
            a.has_customer_logo_strip,
            a.has_trusted_by_section,
            a.has_google_business_profile,
            markers > 0,
            social.has_any_presence,
        ])

        return (
            self._component(
                "testimonialsPresent",
                step_score(a.testimonial_count, cfg.testimonial_steps),
                cfg.testimonials_max,
            ),
            self._component(
                "caseStudyDepth",
                step_score(pages.case_study_count, cfg.case_study_depth_steps),
                cfg.case_study_depth_max,
            ),
            self._component(
                "thirdPartyTrust",
                self._third_party_trust(
                    a.customer_logo_count, a.award_count, markers, a.has_review_counts
                ),
                cfg.third_party_trust_max,
            ),
            self._component(
                "customerLogoStrip",
                self._flag(a.has_customer_logo_strip, cfg.logo_strip_points),
                cfg.logo_strip_points,
            ),
            self._component(
                "trustedBySection",
                self._flag(a.has_trusted_by_section, cfg.trusted_by_points),
                cfg.trusted_by_points,
            ),
            self._component("socialPresenceSignal", social_presence, cfg.social_presence_max),
            self._component(
                "brandAuthoritySignal",
                self._flag(social.has_linkedin, 1) + self._flag(a.has_google_business_profile, 1),
                cfg.brand_authority_max,
            ),
            self._component(
                "namedCustomerStories",
                self._flag(a.has_named_customer_stories, cfg.named_stories_points),
                cfg.named_stories_points,
            ),
            self._component(
                "baselineTrust",
                self._flag(has_basic_structure or has_any_trust_signal, cfg.baseline_trust_points),
                cfg.baseline_trust_points,
            ),
        )

    @staticmethod
    def _third_party_trust(logos: int, awards: int, markers: int, has_review_counts: bool) -> int:
        if logos >= 20 or markers >= 2:
            return 3
        if logos >= 10 or markers >= 1 or awards >= 3 or has_review_counts:
            return 3
        if logos >= 5 or awards >= 2:
            return 2
        if logos >= 1 or awards >= 1:
            return 1
        return 0


# ============================================================
# REGISTRY
# ============================================================


SCORER_CLASSES: Dict[Dimension, Type[BaseComponentScorer]] = {
    Dimension.WEBSITE: WebsiteComponentScorer,
    Dimension.CONTENT: ContentComponentScorer,
    Dimension.SEO: SeoComponentScorer,
    Dimension.BRAND: BrandComponentScorer,
    Dimension.AUTHORITY: AuthorityComponentScorer,
}


def build_scorers(config: Optional[ScoringConfig] = None) -> Dict[Dimension, BaseComponentScorer]:
    """Create one configured scorer per dimension, in evaluation order."""
    config = config or ScoringConfig()
    return {
        dimension: SCORER_CLASSES[dimension](getattr(config, dimension.value))
        for dimension in Dimension.all_dimensions()
    }


def score_components(
    dimension: Dimension,
    features: FeatureBundle,
    config: Optional[ScoringConfig] = None,
) -> Tuple[ComponentScore, ...]:
    """Convenience: score one dimension's components with a fresh scorer."""
    return build_scorers(config)[dimension].score_components(features)


def component_names(dimension: Dimension) -> List[str]:
    """Component names a dimension always emits, in order."""
    return [c.name for c in score_components(dimension, FeatureBundle())]
