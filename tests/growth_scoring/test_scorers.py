"""
Tests for the Component Scorers.

============================================================
PURPOSE
============================================================
Covers:
1. The step-table helper
2. Fixed component shape and ceilings per dimension
3. Individual rubric rules
4. Clamping and degraded inputs

============================================================
"""

from dataclasses import replace

import pytest

from growth_scoring import (
    AuthorityComponentScorer,
    AuthoritySignals,
    BrandComponentScorer,
    ComponentScore,
    ContentComponentScorer,
    ContentSignals,
    ConversionSignals,
    Dimension,
    FeatureBundle,
    SeoComponentScorer,
    SeoSignals,
    TechnicalSignals,
    UxSignals,
    WebsiteComponentScorer,
    aggregate_components,
    build_scorers,
    step_score,
)
from growth_scoring.scorers import component_names, score_components


def _by_name(components):
    return {c.name: c for c in components}


# ============================================================
# STEP HELPER TESTS
# ============================================================


class TestStepScore:
    """Tests for the monotonic step-table helper."""

    TABLE = ((50, 5), (30, 4), (20, 3), (10, 2), (1, 1))

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (1, 1),
        (9, 1),
        (10, 2),
        (29, 3),
        (30, 4),
        (50, 5),
        (5000, 5),
    ])
    def test_thresholds(self, value, expected):
        """Test each rung is reached with >=."""
        assert step_score(value, self.TABLE) == expected

    def test_negative_scores_zero(self):
        """Test negative values never score."""
        assert step_score(-3, self.TABLE) == 0

    def test_empty_table(self):
        """Test an empty table always scores zero."""
        assert step_score(100, ()) == 0


# ============================================================
# SHAPE TESTS
# ============================================================


class TestComponentShape:
    """Tests that every scorer emits a fixed, valid component list."""

    EXPECTED_MAX = {
        Dimension.WEBSITE: 25,
        Dimension.CONTENT: 28,
        Dimension.SEO: 25,
        Dimension.BRAND: 13,
        Dimension.AUTHORITY: 25,
    }

    def test_one_scorer_per_dimension(self):
        """Test the registry covers all five dimensions in order."""
        scorers = build_scorers()
        assert list(scorers) == Dimension.all_dimensions()
        for dimension, scorer in scorers.items():
            assert scorer.dimension == dimension

    @pytest.mark.parametrize("dimension", Dimension.all_dimensions())
    def test_empty_bundle_scores_zero(self, dimension, empty_bundle):
        """Test an empty bundle yields every component at zero."""
        components = build_scorers()[dimension].score_components(empty_bundle)
        assert components
        assert all(c.score == 0 for c in components)

    @pytest.mark.parametrize("dimension", Dimension.all_dimensions())
    def test_point_ceilings(self, dimension, empty_bundle):
        """Test total ceilings match the rubric."""
        components = build_scorers()[dimension].score_components(empty_bundle)
        assert sum(c.max for c in components) == self.EXPECTED_MAX[dimension]

    @pytest.mark.parametrize("dimension", Dimension.all_dimensions())
    def test_component_names_unique(self, dimension, empty_bundle):
        """Test component names are unique within a dimension."""
        names = [c.name for c in build_scorers()[dimension].score_components(empty_bundle)]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("dimension", Dimension.all_dimensions())
    def test_shape_independent_of_input(self, dimension, empty_bundle, maxed_content_bundle):
        """Test the same component names come back for any input."""
        scorer = build_scorers()[dimension]
        empty_names = [c.name for c in scorer.score_components(empty_bundle)]
        full_names = [c.name for c in scorer.score_components(maxed_content_bundle)]
        assert empty_names == full_names

    def test_component_name_listing(self, maxed_content_bundle):
        """Test the module-level helpers match the scorer classes."""
        names = component_names(Dimension.CONTENT)
        assert names[0] == "blogDetected"
        assert names[-1] == "contentVariety"
        components = score_components(Dimension.CONTENT, maxed_content_bundle)
        assert [c.name for c in components] == names

    @pytest.mark.parametrize("fixture_name,dimension", [
        ("maxed_website_bundle", Dimension.WEBSITE),
        ("maxed_content_bundle", Dimension.CONTENT),
        ("maxed_seo_bundle", Dimension.SEO),
        ("maxed_brand_bundle", Dimension.BRAND),
        ("maxed_authority_bundle", Dimension.AUTHORITY),
    ])
    def test_maxed_bundles_max_every_component(self, fixture_name, dimension, request):
        """Test the maxed fixtures really reach every ceiling."""
        bundle = request.getfixturevalue(fixture_name)
        components = build_scorers()[dimension].score_components(bundle)
        assert all(c.is_maxed for c in components), [c for c in components if not c.is_maxed]

    def test_component_score_rejects_out_of_range(self):
        """Test ComponentScore enforces 0 <= score <= max."""
        with pytest.raises(ValueError):
            ComponentScore(name="x", score=4, max=3)
        with pytest.raises(ValueError):
            ComponentScore(name="x", score=-1, max=3)


# ============================================================
# WEBSITE RUBRIC TESTS
# ============================================================


class TestWebsiteScorer:
    """Tests for Website & Conversion rules."""

    def test_component_order(self):
        """Test the website rubric emits its five components in order."""
        assert component_names(Dimension.WEBSITE) == [
            "heroClarity",
            "navigationClarity",
            "primaryCtaVisibility",
            "mobileExperience",
            "conversionFlowPresent",
        ]

    def test_cta_visibility_without_hero_cta(self):
        """Test CTA visibility falls back to the larger CTA count."""
        bundle = FeatureBundle(
            ux=UxSignals(primary_cta_count=1),
            conversions=ConversionSignals(cta_button_count=4),
        )
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["primaryCtaVisibility"].score == 3

    def test_hero_cta_gives_full_visibility(self):
        """Test a hero CTA maxes visibility regardless of counts."""
        bundle = FeatureBundle(ux=UxSignals(hero_cta_present=True))
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["primaryCtaVisibility"].score == 5
        assert scores["heroClarity"].score == 1

    @pytest.mark.parametrize("performance,expected", [
        (0, 0), (39, 0), (40, 1), (59, 1), (60, 3), (79, 3), (80, 5), (100, 5),
    ])
    def test_mobile_experience_from_performance(self, performance, expected):
        """Test mobile experience steps on the measured performance score."""
        bundle = FeatureBundle(technical=TechnicalSignals(lighthouse_performance_score=performance))
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["mobileExperience"].score == expected

    def test_conversion_flow_points(self):
        """Test pricing, services, contact and form CTA points add up."""
        pricing_only = FeatureBundle(content=ContentSignals(has_pricing_page=True))
        scores = _by_name(WebsiteComponentScorer().score_components(pricing_only))
        assert scores["conversionFlowPresent"].score == 2

        bundle = FeatureBundle(
            ux=UxSignals(has_clear_contact_or_demo_entry=True),
            content=ContentSignals(has_pricing_page=True, has_feature_or_product_pages=True),
        )
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["conversionFlowPresent"].score == 4

    @pytest.mark.parametrize("labels,expected", [
        (("Apply now",), 1),
        (("SUBMIT",), 1),
        (("Request form",), 1),
        (("Learn more", "Contact us"), 0),
        ((), 0),
    ])
    def test_form_cta_labels(self, labels, expected):
        """Test form-like CTA labels match case-insensitively."""
        bundle = FeatureBundle(conversions=ConversionSignals(cta_labels=labels))
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["conversionFlowPresent"].score == expected

    def test_form_count_counts_as_form_cta(self):
        """Test a detected form earns the form CTA point without labels."""
        bundle = FeatureBundle(conversions=ConversionSignals(form_count=1))
        scores = _by_name(WebsiteComponentScorer().score_components(bundle))
        assert scores["conversionFlowPresent"].score == 1

    def test_fast_site_with_pricing_page(self):
        """Test performance plus a pricing page scores 7 of 25 points."""
        bundle = FeatureBundle(
            content=ContentSignals(has_pricing_page=True),
            technical=TechnicalSignals(lighthouse_performance_score=90),
        )
        components = WebsiteComponentScorer().score_components(bundle)
        assert sum(c.score for c in components) == 7
        assert aggregate_components(components) == 28


# ============================================================
# CONTENT RUBRIC TESTS
# ============================================================


class TestContentScorer:
    """Tests for Content Depth & Velocity rules."""

    def test_component_order(self):
        """Test the content rubric emits its eight components in order."""
        assert component_names(Dimension.CONTENT) == [
            "blogDetected",
            "caseStudiesDetected",
            "blogPostCount",
            "blogRecency",
            "resourcesHub",
            "caseStudyCount",
            "aboutDepth",
            "contentVariety",
        ]

    def test_site_pages_do_not_score_content(self):
        """Test pricing, about and product pages add no content points."""
        bundle = FeatureBundle(content=ContentSignals(
            has_pricing_page=True,
            has_about_page=True,
            has_feature_or_product_pages=True,
            has_home_page=True,
            crawled_page_count=12,
        ))
        components = ContentComponentScorer().score_components(bundle)
        assert sum(c.score for c in components) == 0

    @pytest.mark.parametrize("posts,expected", [
        (0, 0), (1, 1), (5, 1), (10, 2), (20, 3), (40, 4), (50, 4),
    ])
    def test_blog_post_steps(self, posts, expected):
        """Test blog post count step table."""
        bundle = FeatureBundle(content=ContentSignals(has_blog=True, blog_post_count=posts))
        scores = _by_name(ContentComponentScorer().score_components(bundle))
        assert scores["blogPostCount"].score == expected

    @pytest.mark.parametrize("volume,posts,expected", [
        ("high", 0, 4),
        ("medium", 0, 2),
        ("low", 3, 1),
        ("low", 0, 0),
        ("", 30, 0),
    ])
    def test_blog_recency(self, volume, posts, expected):
        """Test content volume drives recency."""
        bundle = FeatureBundle(content=ContentSignals(content_volume=volume, blog_post_count=posts))
        scores = _by_name(ContentComponentScorer().score_components(bundle))
        assert scores["blogRecency"].score == expected

    @pytest.mark.parametrize("length,expected", [(0, 0), (1, 1), (500, 1), (501, 2), (1000, 2), (1001, 3)])
    def test_about_depth(self, length, expected):
        """Test about page depth thresholds are strict greater-than."""
        bundle = FeatureBundle(content=ContentSignals(about_text_length=length))
        scores = _by_name(ContentComponentScorer().score_components(bundle))
        assert scores["aboutDepth"].score == expected

    def test_variety_half_points(self):
        """Test docs and FAQ earn half points each."""
        bundle = FeatureBundle(content=ContentSignals(has_docs_or_guides=True, has_faq=True))
        scores = _by_name(ContentComponentScorer().score_components(bundle))
        assert scores["contentVariety"].score == 1.0

    def test_variety_capped(self):
        """Test variety never exceeds its ceiling."""
        bundle = FeatureBundle(content=ContentSignals(
            has_blog=True,
            has_case_studies_section=True,
            has_resources_hub=True,
            content_theme_count=12,
            strong_funnel_stage_count=3,
        ))
        scores = _by_name(ContentComponentScorer().score_components(bundle))
        assert scores["contentVariety"].score == 5

    def test_no_blog_scores_zero_in_rubric(self):
        """Test the social-first exception is not part of the rubric."""
        bundle = FeatureBundle(content=ContentSignals(has_blog=False))
        components = ContentComponentScorer().score_components(bundle)
        assert sum(c.score for c in components) == 0


# ============================================================
# SEO RUBRIC TESTS
# ============================================================


class TestSeoScorer:
    """Tests for SEO & Visibility rules."""

    @pytest.mark.parametrize("h1_count,expected", [(0, 0), (1, 5), (2, 2), (7, 2)])
    def test_heading_structure(self, h1_count, expected):
        """Test one H1 is healthier than several."""
        bundle = FeatureBundle(seo=SeoSignals(h1_count=h1_count))
        scores = _by_name(SeoComponentScorer().score_components(bundle))
        assert scores["headingStructureHealth"].score == expected

    @pytest.mark.parametrize("performance,expected", [(0, 0), (44, 4), (45, 5), (84, 8), (85, 9), (100, 10)])
    def test_lighthouse_rounds_half_up(self, performance, expected):
        """Test lighthouse scaling uses round-half-up."""
        bundle = FeatureBundle(technical=TechnicalSignals(lighthouse_performance_score=performance))
        scores = _by_name(SeoComponentScorer().score_components(bundle))
        assert scores["lighthousePerformanceScore"].score == expected

    def test_lighthouse_out_of_range_clamped(self):
        """Test an out-of-range performance score stays within the ceiling."""
        bundle = FeatureBundle(technical=TechnicalSignals(lighthouse_performance_score=250))
        scores = _by_name(SeoComponentScorer().score_components(bundle))
        assert scores["lighthousePerformanceScore"].score == 10

    def test_component_order(self):
        """Test the SEO rubric emits its five components in order."""
        assert component_names(Dimension.SEO) == [
            "lighthousePerformanceScore",
            "headingStructureHealth",
            "internalLinkingPresence",
            "metaTagsPresent",
            "localSeoSignals",
        ]

    @pytest.mark.parametrize("title,description,expected", [
        (True, True, 3),
        (True, False, 0),
        (False, True, 0),
        (False, False, 0),
    ])
    def test_meta_tags_all_or_nothing(self, title, description, expected):
        """Test meta tags score 3 only when title and description are both present."""
        bundle = FeatureBundle(seo=SeoSignals(has_meta_title=title, has_meta_description=description))
        scores = _by_name(SeoComponentScorer().score_components(bundle))
        assert scores["metaTagsPresent"].score == expected
        assert scores["metaTagsPresent"].max == 3

    def test_local_seo_keywords(self):
        """Test geographic focus keywords match case-insensitively."""
        bundle = replace(
            FeatureBundle(),
            positioning=replace(FeatureBundle().positioning, geographic_focus="City-wide"),
        )
        scores = _by_name(SeoComponentScorer().score_components(bundle))
        assert scores["localSeoSignals"].score == 1


# ============================================================
# BRAND RUBRIC TESTS
# ============================================================


class TestBrandScorer:
    """Tests for Brand & Positioning rules."""

    def test_visual_identity_counts_logo_once(self, maxed_brand_bundle):
        """Test a footer-only logo still counts toward visual identity."""
        branding = replace(maxed_brand_bundle.branding, has_logo_in_header=False)
        bundle = replace(maxed_brand_bundle, branding=branding)
        scores = _by_name(BrandComponentScorer().score_components(bundle))
        assert scores["logoPresence"].score == 1
        assert scores["visualIdentity"].score == 3


# ============================================================
# AUTHORITY RUBRIC TESTS
# ============================================================


class TestAuthorityScorer:
    """Tests for Authority & Trust rules."""

    @pytest.mark.parametrize("authority,expected", [
        (AuthoritySignals(), 0),
        (AuthoritySignals(award_count=1), 1),
        (AuthoritySignals(customer_logo_count=5), 2),
        (AuthoritySignals(award_count=2), 2),
        (AuthoritySignals(customer_logo_count=10), 3),
        (AuthoritySignals(has_review_counts=True), 3),
        (AuthoritySignals(has_press_logos=True), 3),
    ])
    def test_third_party_trust(self, authority, expected):
        """Test the compound third-party trust rule."""
        bundle = FeatureBundle(authority=authority)
        scores = _by_name(AuthorityComponentScorer().score_components(bundle))
        assert scores["thirdPartyTrust"].score == expected

    def test_social_platform_weights(self, social_first_bundle):
        """Test Instagram alone earns its platform points and baseline trust."""
        scores = _by_name(AuthorityComponentScorer().score_components(social_first_bundle))
        assert scores["socialPresenceSignal"].score == 2
        assert scores["brandAuthoritySignal"].score == 0
        assert scores["baselineTrust"].score == 1

    def test_component_order(self):
        """Test the authority rubric emits its nine components in order."""
        assert component_names(Dimension.AUTHORITY) == [
            "testimonialsPresent",
            "caseStudyDepth",
            "thirdPartyTrust",
            "customerLogoStrip",
            "trustedBySection",
            "socialPresenceSignal",
            "brandAuthoritySignal",
            "namedCustomerStories",
            "baselineTrust",
        ]

    @pytest.mark.parametrize("case_studies,expected", [
        (0, 0), (1, 1), (4, 1), (5, 2), (9, 2), (10, 3), (15, 3),
    ])
    def test_case_study_depth(self, case_studies, expected):
        """Test case study depth steps, with 10 and 15 at the same points."""
        bundle = FeatureBundle(content=ContentSignals(case_study_count=case_studies))
        scores = _by_name(AuthorityComponentScorer().score_components(bundle))
        assert scores["caseStudyDepth"].score == expected
        assert scores["baselineTrust"].score == (1 if case_studies else 0)

    @pytest.mark.parametrize("content,expected", [
        (ContentSignals(has_home_page=True, has_about_page=True), 1),
        (ContentSignals(has_home_page=True, crawled_page_count=3), 1),
        (ContentSignals(has_home_page=True, crawled_page_count=2), 0),
        (ContentSignals(has_about_page=True, crawled_page_count=10), 0),
    ])
    def test_baseline_trust_from_site_structure(self, content, expected):
        """Test a home page plus an about page or three pages earns baseline trust."""
        bundle = FeatureBundle(content=content)
        scores = _by_name(AuthorityComponentScorer().score_components(bundle))
        assert scores["baselineTrust"].score == expected

    def test_named_stories_alone_earn_no_baseline(self):
        """Test named customer stories are scored on their own, not as baseline trust."""
        bundle = FeatureBundle(authority=AuthoritySignals(has_named_customer_stories=True))
        scores = _by_name(AuthorityComponentScorer().score_components(bundle))
        assert scores["namedCustomerStories"].score == 2
        assert scores["baselineTrust"].score == 0

    def test_huge_counts_stay_in_range(self):
        """Test absurd counts never exceed component ceilings."""
        bundle = FeatureBundle(authority=AuthoritySignals(
            testimonial_count=10 ** 6,
            customer_logo_count=10 ** 6,
            award_count=10 ** 6,
        ))
        for component in AuthorityComponentScorer().score_components(bundle):
            assert 0 <= component.score <= component.max
