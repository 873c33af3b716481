"""
Growth Scoring Engine - Input Normalization.

============================================================
PURPOSE
============================================================
Boundary adapter between the extraction layer and the engine.

Collapses the raw extractor payload plus any legacy enrichment
objects into ONE canonical FeatureBundle. The scorers never see
anything else.

============================================================
INPUTS
============================================================
- payload: raw extractor output (camelCase or snake_case)
- content_inventory: blogPostsFound, caseStudiesFound, ...
- data_availability: siteCrawl, technicalSeo, contentInventory
- positioning_analysis: geographicFocus, localSearchLanguage
- trust_signals: testimonials_visible, logos_visible, ...
- technical_seo: lighthousePerformanceScore, hasMultipleH1, ...
- site_element_context: crawled pages (about text, nav items)

============================================================
RESOLUTION
============================================================
Every canonical field is resolved by one first-present chain:
    primary field -> legacy field(s) -> zero value

Lenient mode (default): ill-typed or negative values count
as absent. Strict mode: they are reported as errors.

============================================================
"""

import logging
from typing import Annotated, Any, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .aggregation import round_half_up
from .features import (
    AuthoritySignals,
    BrandingSignals,
    ContentSignals,
    ConversionSignals,
    DataCoverage,
    FeatureBundle,
    NavigationSignals,
    PositioningSignals,
    SeoSignals,
    SocialSignals,
    TechnicalSignals,
    UxSignals,
)
from .types import FeatureValidationError


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound="PayloadSchema")

CONTENT_VOLUMES = ("low", "medium", "high")
CONTACT_URL_MARKERS = ("contact", "get-started", "book", "schedule")
PRODUCT_PAGE_TYPES = ("services", "product", "features")

# Rejects inf and nan as well as negatives.
PerformanceScore = Annotated[float, Field(ge=0, allow_inf_nan=False)]


# ============================================================
# BASE SCHEMA
# ============================================================


class PayloadSchema(BaseModel):
    """
    Base for every inbound schema.

    All fields are Optional: None means "not supplied". A wrap
    validator turns a bad value into None unless validation
    runs with context {"strict": True}.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _degrade_invalid(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            if info.context and info.context.get("strict"):
                raise
            return None


# ============================================================
# EXTRACTOR PAYLOAD SCHEMAS
# ============================================================


class UxSchema(PayloadSchema):
    primary_cta_count: Optional[NonNegativeInt] = None
    hero_cta_present: Optional[bool] = None
    hero_headline_text_length: Optional[NonNegativeInt] = None
    hero_has_subheadline: Optional[bool] = None
    has_clear_contact_or_demo_entry: Optional[bool] = None


class NavigationSchema(PayloadSchema):
    nav_item_labels: Optional[List[str]] = None
    has_product_nav: Optional[bool] = None
    has_solutions_nav: Optional[bool] = None
    has_resources_nav: Optional[bool] = None
    has_pricing_nav: Optional[bool] = None
    has_blog_nav: Optional[bool] = None
    has_docs_nav: Optional[bool] = None


class ConversionSchema(PayloadSchema):
    cta_button_count: Optional[NonNegativeInt] = None
    form_count: Optional[NonNegativeInt] = None
    cta_labels: Optional[List[str]] = None


class ContentSchema(PayloadSchema):
    has_blog: Optional[bool] = None
    blog_post_count: Optional[NonNegativeInt] = None
    has_case_studies_section: Optional[bool] = None
    case_study_count: Optional[NonNegativeInt] = None
    has_resources_hub: Optional[bool] = None
    has_docs_or_guides: Optional[bool] = None
    has_pricing_page: Optional[bool] = None
    has_about_page: Optional[bool] = None
    has_feature_or_product_pages: Optional[bool] = None
    has_home_page: Optional[bool] = None
    crawled_page_count: Optional[NonNegativeInt] = None
    has_faq: Optional[bool] = None
    content_volume: Optional[str] = None
    about_text_length: Optional[NonNegativeInt] = None
    content_theme_count: Optional[NonNegativeInt] = None
    strong_funnel_stage_count: Optional[NonNegativeInt] = None


class SeoSchema(PayloadSchema):
    has_meta_title: Optional[bool] = None
    has_meta_description: Optional[bool] = None
    h1_count: Optional[NonNegativeInt] = None
    internal_link_count: Optional[NonNegativeInt] = None


class TechnicalSchema(PayloadSchema):
    lighthouse_performance_score: Optional[PerformanceScore] = None


class BrandingSchema(PayloadSchema):
    has_logo_in_header: Optional[bool] = None
    has_logo_in_footer: Optional[bool] = None
    has_structured_nav: Optional[bool] = None
    has_consistent_brand_colors: Optional[bool] = None
    has_consistent_typography: Optional[bool] = None
    has_hero_illustration_or_visual: Optional[bool] = None
    has_distinct_product_illustrations: Optional[bool] = None


class AuthoritySchema(PayloadSchema):
    testimonial_count: Optional[NonNegativeInt] = None
    customer_logo_count: Optional[NonNegativeInt] = None
    award_count: Optional[NonNegativeInt] = None
    has_customer_logo_strip: Optional[bool] = None
    has_trusted_by_section: Optional[bool] = None
    has_awards_or_badges: Optional[bool] = None
    has_press_logos: Optional[bool] = None
    has_g2_or_review_badges: Optional[bool] = None
    has_review_counts: Optional[bool] = None
    has_named_customer_stories: Optional[bool] = None
    has_google_business_profile: Optional[bool] = None


class SocialSchema(PayloadSchema):
    has_linkedin: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("hasLinkedIn", "hasLinkedin", "has_linkedin"),
    )
    has_facebook: Optional[bool] = None
    has_instagram: Optional[bool] = None
    linkedin_urls: Optional[List[str]] = None
    facebook_urls: Optional[List[str]] = None
    instagram_urls: Optional[List[str]] = None


class PositioningSchema(PayloadSchema):
    geographic_focus: Optional[str] = None
    local_search_phrases: Optional[List[str]] = None
    brand_tier: Optional[str] = None


class FeaturePayload(PayloadSchema):
    """Raw extractor output, one optional group per signal domain."""

    url: Optional[str] = None
    ux: Optional[UxSchema] = None
    navigation: Optional[NavigationSchema] = None
    conversions: Optional[ConversionSchema] = None
    content: Optional[ContentSchema] = None
    seo: Optional[SeoSchema] = None
    technical: Optional[TechnicalSchema] = None
    branding: Optional[BrandingSchema] = None
    authority: Optional[AuthoritySchema] = None
    social: Optional[SocialSchema] = None
    positioning: Optional[PositioningSchema] = None


# ============================================================
# LEGACY ENRICHMENT SCHEMAS
# ============================================================


class FunnelCoverageSchema(PayloadSchema):
    top_of_funnel: Optional[str] = None
    middle_of_funnel: Optional[str] = None
    bottom_of_funnel: Optional[str] = None

    @property
    def strong_stage_count(self) -> int:
        stages = (self.top_of_funnel, self.middle_of_funnel, self.bottom_of_funnel)
        return sum(1 for s in stages if (s or "").lower() == "strong")


class ContentInventorySchema(PayloadSchema):
    blog_posts_found: Optional[NonNegativeInt] = None
    case_studies_found: Optional[NonNegativeInt] = None
    content_volume: Optional[str] = None
    content_themes: Optional[List[str]] = None
    funnel_stage_coverage: Optional[FunnelCoverageSchema] = None
    faq_present: Optional[bool] = None


class SiteCrawlSchema(PayloadSchema):
    successful_urls: Optional[List[str]] = None


class TechnicalSeoAvailabilitySchema(PayloadSchema):
    lighthouse_available: Optional[bool] = None
    meta_tags_parsed: Optional[bool] = None


class ContentAvailabilitySchema(PayloadSchema):
    blog_detected: Optional[bool] = None
    case_studies_detected: Optional[bool] = None
    about_page_detected: Optional[bool] = None
    faq_detected: Optional[bool] = None


class DataAvailabilitySchema(PayloadSchema):
    site_crawl: Optional[SiteCrawlSchema] = None
    technical_seo: Optional[TechnicalSeoAvailabilitySchema] = None
    content_inventory: Optional[ContentAvailabilitySchema] = None


class PositioningAnalysisSchema(PayloadSchema):
    geographic_focus: Optional[str] = None
    local_search_language: Optional[List[str]] = None
    brand_tier: Optional[str] = None


class ProfileLinkSchema(PayloadSchema):
    url: Optional[str] = None


class BrandAuthoritySchema(PayloadSchema):
    linkedin: Optional[ProfileLinkSchema] = None
    gbp: Optional[ProfileLinkSchema] = None


class TrustSignalsSchema(PayloadSchema):
    testimonials_visible: Optional[List[str]] = None
    logos_visible: Optional[List[str]] = None
    awards_visible: Optional[List[str]] = None
    review_counts_visible: Optional[Union[bool, str, List[str]]] = None
    brand_authority: Optional[BrandAuthoritySchema] = None


class TechnicalSeoSchema(PayloadSchema):
    lighthouse_performance_score: Optional[PerformanceScore] = None
    has_multiple_h1: Optional[bool] = None
    internal_link_count: Optional[NonNegativeInt] = None
    meta_tags_present: Optional[bool] = None


class SitePageSchema(PayloadSchema):
    type: Optional[str] = None
    page_url: Optional[str] = None
    nav_items: Optional[List[str]] = None
    headings: Optional[List[str]] = None
    raw_text_sample: Optional[str] = None
    cta_labels: Optional[List[str]] = None


class SiteElementContextSchema(PayloadSchema):
    pages: Optional[List[SitePageSchema]] = None

    def page(self, page_type: str) -> Optional[SitePageSchema]:
        for p in self.pages or []:
            if (p.type or "").lower() == page_type:
                return p
        return None

    @property
    def home(self) -> Optional[SitePageSchema]:
        pages = self.pages or []
        return self.page("home") or (pages[0] if pages else None)

    def has_page(self, *page_types: str) -> Optional[bool]:
        if not self.pages:
            return None
        return any((p.type or "").lower() in page_types for p in self.pages)

    def has_contact_page(self) -> Optional[bool]:
        if not self.pages:
            return None
        return any(
            any(marker in (p.page_url or "").lower() for marker in CONTACT_URL_MARKERS)
            for p in self.pages
        )

    def cta_labels(self) -> Optional[List[str]]:
        """CTA labels across every crawled page, None when nothing was crawled."""
        if not self.pages:
            return None
        return [label for p in self.pages for label in p.cta_labels or []]

    @property
    def page_count(self) -> Optional[int]:
        return len(self.pages) if self.pages else None


# ============================================================
# HELPERS
# ============================================================


def _first(*values: Any, default: Any = None) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return default


def _count(items: Optional[Iterable[Any]]) -> Optional[int]:
    return None if items is None else len(list(items))


def _present(items: Optional[Iterable[Any]]) -> Optional[bool]:
    """True/False for a supplied list, None when the list is absent."""
    return None if items is None else len(list(items)) > 0


def _labels(items: Optional[Iterable[str]]) -> Tuple[str, ...]:
    return tuple(str(i) for i in items or ())


def _format_errors(source: str, exc: ValidationError) -> List[str]:
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        path = f"{source}.{location}" if location else source
        errors.append(f"{path}: {err.get('msg', 'invalid value')}")
    return errors


def _parse(
    schema: Type[SchemaT],
    data: Any,
    source: str,
    strict: bool,
    errors: List[str],
) -> SchemaT:
    """Validate one input object, recording errors in strict mode."""
    if data is None:
        return schema()
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, Mapping):
        if strict:
            errors.append(f"{source}: expected a mapping, got {type(data).__name__}")
        return schema()
    try:
        return schema.model_validate(dict(data), context={"strict": strict})
    except ValidationError as exc:
        errors.extend(_format_errors(source, exc))
        return schema()


# ============================================================
# NORMALIZATION
# ============================================================


def normalize_features(
    payload: Optional[Union[FeatureBundle, Mapping[str, Any]]] = None,
    *,
    content_inventory: Optional[Mapping[str, Any]] = None,
    data_availability: Optional[Mapping[str, Any]] = None,
    positioning_analysis: Optional[Mapping[str, Any]] = None,
    trust_signals: Optional[Mapping[str, Any]] = None,
    technical_seo: Optional[Mapping[str, Any]] = None,
    site_element_context: Optional[Mapping[str, Any]] = None,
    strict: bool = False,
) -> FeatureBundle:
    """
    Build the canonical FeatureBundle from raw inputs.

    Args:
        payload: Raw extractor payload, a FeatureBundle, or None
        content_inventory: Legacy content inventory
        data_availability: Legacy data availability report
        positioning_analysis: Legacy positioning analysis
        trust_signals: Legacy page-extraction trust signals
        technical_seo: Legacy technical SEO metrics
        site_element_context: Legacy crawled page context
        strict: Raise instead of degrading bad values

    Returns:
        FeatureBundle with every absent signal at its zero value

    Raises:
        FeatureValidationError: strict mode only
    """
    has_enrichments = any(
        x is not None
        for x in (
            content_inventory,
            data_availability,
            positioning_analysis,
            trust_signals,
            technical_seo,
            site_element_context,
        )
    )
    if isinstance(payload, FeatureBundle) and not has_enrichments:
        return payload
    if isinstance(payload, FeatureBundle):
        payload = payload.to_dict()

    errors: List[str] = []
    raw = _parse(FeaturePayload, payload, "features", strict, errors)
    inventory = _parse(ContentInventorySchema, content_inventory, "content_inventory", strict, errors)
    availability = _parse(DataAvailabilitySchema, data_availability, "data_availability", strict, errors)
    positioning = _parse(PositioningAnalysisSchema, positioning_analysis, "positioning_analysis", strict, errors)
    trust = _parse(TrustSignalsSchema, trust_signals, "trust_signals", strict, errors)
    tech_seo = _parse(TechnicalSeoSchema, technical_seo, "technical_seo", strict, errors)
    site = _parse(SiteElementContextSchema, site_element_context, "site_element_context", strict, errors)

    if errors:
        if strict:
            raise FeatureValidationError(
                f"Feature payload failed validation with {len(errors)} error(s)", errors
            )
        logger.debug(f"Ignoring {len(errors)} invalid feature value(s)")

    return FeatureBundle(
        url=raw.url or "",
        ux=_resolve_ux(raw, site),
        navigation=_resolve_navigation(raw, site),
        conversions=_resolve_conversions(raw, site),
        content=_resolve_content(raw, inventory, availability, site),
        seo=_resolve_seo(raw, tech_seo, site),
        technical=_resolve_technical(raw, tech_seo),
        branding=_resolve_branding(raw),
        authority=_resolve_authority(raw, trust),
        social=_resolve_social(raw, trust),
        positioning=_resolve_positioning(raw, positioning),
    )


def validate_features(
    payload: Optional[Mapping[str, Any]] = None,
    **enrichments: Any,
) -> List[str]:
    """
    Check inputs against the Feature Bundle contract.

    Returns:
        List of "path: message" errors, empty when valid
    """
    try:
        normalize_features(payload, strict=True, **enrichments)
    except FeatureValidationError as exc:
        return exc.errors
    return []


def coverage_from_data_availability(
    data_availability: Optional[Mapping[str, Any]],
) -> Optional[DataCoverage]:
    """
    Derive DataCoverage from a data availability report.

    Returns:
        DataCoverage, or None when no report was supplied
    """
    if data_availability is None:
        return None
    errors: List[str] = []
    report = _parse(DataAvailabilitySchema, data_availability, "data_availability", False, errors)
    crawl = report.site_crawl or SiteCrawlSchema()
    tech = report.technical_seo or TechnicalSeoAvailabilitySchema()
    content = report.content_inventory or ContentAvailabilitySchema()
    return DataCoverage(
        site_crawled=len(crawl.successful_urls or []) > 0,
        blog_detected=bool(content.blog_detected),
        case_studies_detected=bool(content.case_studies_detected),
        lighthouse_available=bool(tech.lighthouse_available),
        meta_tags_parsed=bool(tech.meta_tags_parsed),
    )


# ============================================================
# FIELD RESOLUTION
# ============================================================


def _resolve_ux(raw: FeaturePayload, site: SiteElementContextSchema) -> UxSignals:
    ux = raw.ux or UxSchema()
    return UxSignals(
        primary_cta_count=_first(ux.primary_cta_count, default=0),
        hero_cta_present=_first(ux.hero_cta_present, default=False),
        hero_headline_text_length=_first(ux.hero_headline_text_length, default=0),
        hero_has_subheadline=_first(ux.hero_has_subheadline, default=False),
        has_clear_contact_or_demo_entry=_first(
            ux.has_clear_contact_or_demo_entry, site.has_contact_page(), default=False
        ),
    )


def _resolve_navigation(raw: FeaturePayload, site: SiteElementContextSchema) -> NavigationSignals:
    nav = raw.navigation or NavigationSchema()
    home = site.home
    return NavigationSignals(
        nav_item_labels=_labels(_first(nav.nav_item_labels, home.nav_items if home else None)),
        has_product_nav=_first(nav.has_product_nav, default=False),
        has_solutions_nav=_first(nav.has_solutions_nav, default=False),
        has_resources_nav=_first(nav.has_resources_nav, default=False),
        has_pricing_nav=_first(nav.has_pricing_nav, default=False),
        has_blog_nav=_first(nav.has_blog_nav, default=False),
        has_docs_nav=_first(nav.has_docs_nav, default=False),
    )


def _resolve_conversions(raw: FeaturePayload, site: SiteElementContextSchema) -> ConversionSignals:
    conv = raw.conversions or ConversionSchema()
    return ConversionSignals(
        cta_button_count=_first(conv.cta_button_count, default=0),
        form_count=_first(conv.form_count, default=0),
        cta_labels=_labels(_first(conv.cta_labels, site.cta_labels())),
    )


def _resolve_content(
    raw: FeaturePayload,
    inventory: ContentInventorySchema,
    availability: DataAvailabilitySchema,
    site: SiteElementContextSchema,
) -> ContentSignals:
    c = raw.content or ContentSchema()
    detected = availability.content_inventory or ContentAvailabilitySchema()
    about = site.page("about")
    funnel = inventory.funnel_stage_coverage

    volume = (_first(c.content_volume, inventory.content_volume, default="") or "").strip().lower()
    if volume not in CONTENT_VOLUMES:
        volume = ""

    strong_stages = _first(
        c.strong_funnel_stage_count,
        funnel.strong_stage_count if funnel else None,
        default=0,
    )

    return ContentSignals(
        has_blog=_first(c.has_blog, detected.blog_detected, default=False),
        blog_post_count=_first(c.blog_post_count, inventory.blog_posts_found, default=0),
        has_case_studies_section=_first(
            c.has_case_studies_section, detected.case_studies_detected, default=False
        ),
        case_study_count=_first(c.case_study_count, inventory.case_studies_found, default=0),
        has_resources_hub=_first(c.has_resources_hub, default=False),
        has_docs_or_guides=_first(c.has_docs_or_guides, default=False),
        has_pricing_page=_first(c.has_pricing_page, site.has_page("pricing"), default=False),
        has_about_page=_first(
            c.has_about_page, site.has_page("about"), detected.about_page_detected, default=False
        ),
        has_feature_or_product_pages=_first(
            c.has_feature_or_product_pages, site.has_page(*PRODUCT_PAGE_TYPES), default=False
        ),
        has_home_page=_first(c.has_home_page, site.has_page("home"), default=False),
        crawled_page_count=_first(c.crawled_page_count, site.page_count, default=0),
        has_faq=_first(c.has_faq, detected.faq_detected, inventory.faq_present, default=False),
        content_volume=volume,
        about_text_length=_first(
            c.about_text_length,
            len(about.raw_text_sample) if about and about.raw_text_sample is not None else None,
            default=0,
        ),
        content_theme_count=_first(c.content_theme_count, _count(inventory.content_themes), default=0),
        strong_funnel_stage_count=min(3, strong_stages),
    )


def _resolve_seo(
    raw: FeaturePayload,
    tech_seo: TechnicalSeoSchema,
    site: SiteElementContextSchema,
) -> SeoSignals:
    seo = raw.seo or SeoSchema()
    home = site.home

    legacy_h1 = None
    if tech_seo.has_multiple_h1:
        legacy_h1 = 2
    elif home is not None and home.headings:
        legacy_h1 = 1

    return SeoSignals(
        has_meta_title=_first(seo.has_meta_title, tech_seo.meta_tags_present, default=False),
        has_meta_description=_first(
            seo.has_meta_description, tech_seo.meta_tags_present, default=False
        ),
        h1_count=_first(seo.h1_count, legacy_h1, default=0),
        internal_link_count=_first(seo.internal_link_count, tech_seo.internal_link_count, default=0),
    )


def _resolve_technical(raw: FeaturePayload, tech_seo: TechnicalSeoSchema) -> TechnicalSignals:
    tech = raw.technical or TechnicalSchema()
    performance = _first(
        tech.lighthouse_performance_score, tech_seo.lighthouse_performance_score, default=0
    )
    return TechnicalSignals(
        lighthouse_performance_score=min(100, round_half_up(performance)),
    )


def _resolve_branding(raw: FeaturePayload) -> BrandingSignals:
    b = raw.branding or BrandingSchema()
    return BrandingSignals(
        has_logo_in_header=_first(b.has_logo_in_header, default=False),
        has_logo_in_footer=_first(b.has_logo_in_footer, default=False),
        has_structured_nav=_first(b.has_structured_nav, default=False),
        has_consistent_brand_colors=_first(b.has_consistent_brand_colors, default=False),
        has_consistent_typography=_first(b.has_consistent_typography, default=False),
        has_hero_illustration_or_visual=_first(b.has_hero_illustration_or_visual, default=False),
        has_distinct_product_illustrations=_first(
            b.has_distinct_product_illustrations, default=False
        ),
    )


def _resolve_authority(raw: FeaturePayload, trust: TrustSignalsSchema) -> AuthoritySignals:
    a = raw.authority or AuthoritySchema()
    brand_authority = trust.brand_authority or BrandAuthoritySchema()
    gbp_url = brand_authority.gbp.url if brand_authority.gbp else None
    review_counts = trust.review_counts_visible
    return AuthoritySignals(
        testimonial_count=_first(a.testimonial_count, _count(trust.testimonials_visible), default=0),
        customer_logo_count=_first(a.customer_logo_count, _count(trust.logos_visible), default=0),
        award_count=_first(a.award_count, _count(trust.awards_visible), default=0),
        has_customer_logo_strip=_first(a.has_customer_logo_strip, default=False),
        has_trusted_by_section=_first(a.has_trusted_by_section, default=False),
        has_awards_or_badges=_first(a.has_awards_or_badges, default=False),
        has_press_logos=_first(a.has_press_logos, default=False),
        has_g2_or_review_badges=_first(a.has_g2_or_review_badges, default=False),
        has_review_counts=_first(
            a.has_review_counts,
            bool(review_counts) if review_counts is not None else None,
            default=False,
        ),
        has_named_customer_stories=_first(a.has_named_customer_stories, default=False),
        has_google_business_profile=_first(
            a.has_google_business_profile, bool(gbp_url) if gbp_url is not None else None, default=False
        ),
    )


def _resolve_social(raw: FeaturePayload, trust: TrustSignalsSchema) -> SocialSignals:
    s = raw.social or SocialSchema()
    brand_authority = trust.brand_authority or BrandAuthoritySchema()
    linkedin_url = brand_authority.linkedin.url if brand_authority.linkedin else None
    return SocialSignals(
        has_linkedin=_first(
            s.has_linkedin,
            _present(s.linkedin_urls),
            bool(linkedin_url) if linkedin_url is not None else None,
            default=False,
        ),
        has_facebook=_first(s.has_facebook, _present(s.facebook_urls), default=False),
        has_instagram=_first(s.has_instagram, _present(s.instagram_urls), default=False),
    )


def _resolve_positioning(
    raw: FeaturePayload,
    analysis: PositioningAnalysisSchema,
) -> PositioningSignals:
    p = raw.positioning or PositioningSchema()
    return PositioningSignals(
        geographic_focus=_first(p.geographic_focus, analysis.geographic_focus, default=""),
        local_search_phrases=_labels(
            _first(p.local_search_phrases, analysis.local_search_language)
        ),
        brand_tier=(_first(p.brand_tier, analysis.brand_tier, default="") or "").strip().lower(),
    )
