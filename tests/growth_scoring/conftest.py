"""
Shared fixtures for the Growth Scoring Engine tests.

Provides reusable Feature Bundles for:
- The all-zero bundle
- One bundle per dimension with every component maxed
- The named scenarios (substantial blog, trust stack, social-first)
"""

import pytest

from growth_scoring import (
    AuthoritySignals,
    BrandingSignals,
    ContentSignals,
    ConversionSignals,
    FeatureBundle,
    NavigationSignals,
    PositioningSignals,
    SeoSignals,
    SocialSignals,
    TechnicalSignals,
    UxSignals,
)


# ============================================================
# BASELINE
# ============================================================


@pytest.fixture
def empty_bundle() -> FeatureBundle:
    """Every signal at its zero value."""
    return FeatureBundle()


# ============================================================
# MAXED DIMENSIONS
# ============================================================


@pytest.fixture
def maxed_website_bundle() -> FeatureBundle:
    """Every Website & Conversion component at its ceiling."""
    return FeatureBundle(
        url="https://example.com",
        ux=UxSignals(
            primary_cta_count=5,
            hero_cta_present=True,
            hero_headline_text_length=42,
            hero_has_subheadline=True,
            has_clear_contact_or_demo_entry=True,
        ),
        navigation=NavigationSignals(
            nav_item_labels=("Product", "Pricing", "Customers", "Blog", "Contact"),
        ),
        conversions=ConversionSignals(
            form_count=2,
            cta_labels=("Book a demo", "Submit application"),
        ),
        content=ContentSignals(has_pricing_page=True, has_feature_or_product_pages=True),
        technical=TechnicalSignals(lighthouse_performance_score=90),
    )


@pytest.fixture
def maxed_content_bundle() -> FeatureBundle:
    """Every Content Depth & Velocity component at its ceiling."""
    return FeatureBundle(
        content=ContentSignals(
            has_blog=True,
            blog_post_count=60,
            has_case_studies_section=True,
            case_study_count=15,
            has_resources_hub=True,
            has_docs_or_guides=True,
            has_pricing_page=True,
            has_about_page=True,
            has_feature_or_product_pages=True,
            content_volume="high",
            about_text_length=1500,
            content_theme_count=4,
        ),
    )


@pytest.fixture
def maxed_seo_bundle() -> FeatureBundle:
    """Every SEO & Visibility component at its ceiling."""
    return FeatureBundle(
        seo=SeoSignals(
            has_meta_title=True,
            has_meta_description=True,
            h1_count=1,
            internal_link_count=50,
        ),
        technical=TechnicalSignals(lighthouse_performance_score=100),
        positioning=PositioningSignals(
            geographic_focus="hyper-local / neighborhood-focused",
            local_search_phrases=("trainers near you",),
        ),
    )


@pytest.fixture
def maxed_brand_bundle() -> FeatureBundle:
    """Every Brand & Positioning component at its ceiling."""
    return FeatureBundle(
        navigation=NavigationSignals(
            has_product_nav=True,
            has_solutions_nav=True,
            has_resources_nav=True,
            has_pricing_nav=True,
            has_blog_nav=True,
            has_docs_nav=True,
        ),
        branding=BrandingSignals(
            has_logo_in_header=True,
            has_logo_in_footer=True,
            has_structured_nav=True,
            has_consistent_brand_colors=True,
            has_consistent_typography=True,
            has_hero_illustration_or_visual=True,
            has_distinct_product_illustrations=True,
        ),
    )


@pytest.fixture
def maxed_authority_bundle() -> FeatureBundle:
    """Every Authority & Trust component at its ceiling."""
    return FeatureBundle(
        authority=AuthoritySignals(
            testimonial_count=8,
            customer_logo_count=20,
            award_count=3,
            has_customer_logo_strip=True,
            has_trusted_by_section=True,
            has_awards_or_badges=True,
            has_press_logos=True,
            has_g2_or_review_badges=True,
            has_review_counts=True,
            has_named_customer_stories=True,
            has_google_business_profile=True,
        ),
        content=ContentSignals(case_study_count=10),
        social=SocialSignals(has_linkedin=True, has_facebook=True, has_instagram=True),
    )


# ============================================================
# SCENARIOS
# ============================================================


@pytest.fixture
def substantial_blog_bundle() -> FeatureBundle:
    """Blog with 60 posts plus a resources hub."""
    return FeatureBundle(
        content=ContentSignals(has_blog=True, blog_post_count=60, has_resources_hub=True),
    )


@pytest.fixture
def trust_stack_bundle() -> FeatureBundle:
    """25 logos in a strip, 12 case studies, awards."""
    return FeatureBundle(
        authority=AuthoritySignals(
            customer_logo_count=25,
            has_customer_logo_strip=True,
            has_awards_or_badges=True,
        ),
        content=ContentSignals(case_study_count=12),
    )


@pytest.fixture
def social_first_bundle() -> FeatureBundle:
    """No blog, Instagram presence, nothing else."""
    return FeatureBundle(
        content=ContentSignals(has_blog=False),
        social=SocialSignals(has_instagram=True),
    )
