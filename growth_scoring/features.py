"""
Growth Scoring Engine - Feature Bundle.

============================================================
PURPOSE
============================================================
The canonical, immutable snapshot of observable website and
marketing signals for one site, grouped by domain.

This is the ONLY input shape the component scorers see.
Raw extractor payloads and legacy enrichment objects are
collapsed into it by growth_scoring.normalization.

============================================================
FIELD CONTRACT
============================================================
Every leaf is a bool, a non-negative int, a short string or
a tuple of strings. Nothing is ever None: absent data is the
zero / False / empty value.

============================================================
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Tuple


# ============================================================
# SIGNAL GROUPS
# ============================================================


@dataclass(frozen=True)
class UxSignals:
    """Hero and call-to-action signals."""

    primary_cta_count: int = 0
    hero_cta_present: bool = False
    hero_headline_text_length: int = 0
    hero_has_subheadline: bool = False
    has_clear_contact_or_demo_entry: bool = False


@dataclass(frozen=True)
class NavigationSignals:
    """Top-level navigation labels and section flags."""

    nav_item_labels: Tuple[str, ...] = ()
    has_product_nav: bool = False
    has_solutions_nav: bool = False
    has_resources_nav: bool = False
    has_pricing_nav: bool = False
    has_blog_nav: bool = False
    has_docs_nav: bool = False

    @property
    def nav_item_count(self) -> int:
        return len(self.nav_item_labels)

    @property
    def section_flag_count(self) -> int:
        return sum([
            self.has_product_nav,
            self.has_solutions_nav,
            self.has_resources_nav,
            self.has_pricing_nav,
            self.has_blog_nav,
            self.has_docs_nav,
        ])


@dataclass(frozen=True)
class ConversionSignals:
    """Lead capture and conversion entry points."""

    cta_button_count: int = 0
    form_count: int = 0
    cta_labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContentSignals:
    """Content inventory: blog, case studies, resources, site pages."""

    has_blog: bool = False
    blog_post_count: int = 0
    has_case_studies_section: bool = False
    case_study_count: int = 0
    has_resources_hub: bool = False
    has_docs_or_guides: bool = False
    has_home_page: bool = False
    has_pricing_page: bool = False
    has_about_page: bool = False
    has_feature_or_product_pages: bool = False
    has_faq: bool = False
    crawled_page_count: int = 0
    content_volume: str = ""             # "", "low", "medium", "high"
    about_text_length: int = 0
    content_theme_count: int = 0
    strong_funnel_stage_count: int = 0   # 0-3 (top / middle / bottom)


@dataclass(frozen=True)
class SeoSignals:
    """On-page SEO signals."""

    has_meta_title: bool = False
    has_meta_description: bool = False
    h1_count: int = 0
    internal_link_count: int = 0


@dataclass(frozen=True)
class TechnicalSignals:
    """Technical health signals. A performance score of 0 means not measured."""

    lighthouse_performance_score: int = 0


@dataclass(frozen=True)
class BrandingSignals:
    """Visual identity signals."""

    has_logo_in_header: bool = False
    has_logo_in_footer: bool = False
    has_structured_nav: bool = False
    has_consistent_brand_colors: bool = False
    has_consistent_typography: bool = False
    has_hero_illustration_or_visual: bool = False
    has_distinct_product_illustrations: bool = False


@dataclass(frozen=True)
class AuthoritySignals:
    """Social proof and credibility markers."""

    testimonial_count: int = 0
    customer_logo_count: int = 0
    award_count: int = 0
    has_customer_logo_strip: bool = False
    has_trusted_by_section: bool = False
    has_awards_or_badges: bool = False
    has_press_logos: bool = False
    has_g2_or_review_badges: bool = False
    has_review_counts: bool = False
    has_named_customer_stories: bool = False
    has_google_business_profile: bool = False

    @property
    def credibility_marker_count(self) -> int:
        return sum([
            self.has_awards_or_badges,
            self.has_press_logos,
            self.has_g2_or_review_badges,
        ])


@dataclass(frozen=True)
class SocialSignals:
    """Social platform presence."""

    has_linkedin: bool = False
    has_facebook: bool = False
    has_instagram: bool = False

    @property
    def has_any_presence(self) -> bool:
        return self.has_linkedin or self.has_facebook or self.has_instagram


@dataclass(frozen=True)
class PositioningSignals:
    """Positioning context: geography, local search language, brand tier."""

    geographic_focus: str = ""
    local_search_phrases: Tuple[str, ...] = ()
    brand_tier: str = ""


# ============================================================
# FEATURE BUNDLE
# ============================================================


@dataclass(frozen=True)
class FeatureBundle:
    """
    Complete canonical input for one site.

    An all-default bundle is valid and scores zero everywhere.
    """

    url: str = ""
    ux: UxSignals = field(default_factory=UxSignals)
    navigation: NavigationSignals = field(default_factory=NavigationSignals)
    conversions: ConversionSignals = field(default_factory=ConversionSignals)
    content: ContentSignals = field(default_factory=ContentSignals)
    seo: SeoSignals = field(default_factory=SeoSignals)
    technical: TechnicalSignals = field(default_factory=TechnicalSignals)
    branding: BrandingSignals = field(default_factory=BrandingSignals)
    authority: AuthoritySignals = field(default_factory=AuthoritySignals)
    social: SocialSignals = field(default_factory=SocialSignals)
    positioning: PositioningSignals = field(default_factory=PositioningSignals)

    @classmethod
    def empty(cls, url: str = "") -> "FeatureBundle":
        return cls(url=url)

    def to_dict(self) -> Dict[str, Any]:
        return _as_dict(self)


@dataclass(frozen=True)
class DataCoverage:
    """
    What the upstream extraction actually managed to collect.

    Drives the evaluated-dimensions marker list. When no coverage
    is supplied the engine treats every dimension as evaluated.
    """

    site_crawled: bool = False
    blog_detected: bool = False
    case_studies_detected: bool = False
    lighthouse_available: bool = False
    meta_tags_parsed: bool = False


def _as_dict(value: Any) -> Any:
    if is_dataclass(value):
        return {f.name: _as_dict(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return list(value)
    return value
