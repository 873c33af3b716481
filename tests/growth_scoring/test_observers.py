"""
Tests for scoring observers.
"""

import logging

import pytest

from growth_scoring import (
    Dimension,
    GrowthScoringEngine,
    LoggingObserver,
    NullObserver,
    RecordingObserver,
)


class TestLoggingObserver:
    """Tests for the logging sink."""

    @pytest.fixture
    def package_logger(self):
        return logging.getLogger("growth_scoring")

    def test_components_logged_at_debug(self, caplog, package_logger, substantial_blog_bundle):
        """Test component lists appear at DEBUG level."""
        engine = GrowthScoringEngine(observer=LoggingObserver(package_logger))
        with caplog.at_level(logging.DEBUG, logger="growth_scoring"):
            engine.score(substantial_blog_bundle)
        debug_messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("contentDepthAndVelocity: raw 43/100" in m and "blogDetected=3/3" in m for m in debug_messages)

    def test_floors_and_scorecard_logged_at_info(self, caplog, package_logger, substantial_blog_bundle):
        """Test floors and the scorecard appear at INFO level."""
        engine = GrowthScoringEngine(observer=LoggingObserver(package_logger))
        with caplog.at_level(logging.INFO, logger="growth_scoring"):
            engine.score(substantial_blog_bundle)
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any("content_blog_and_resources" in m and "(was 43, minimum 80)" in m for m in messages)
        assert any(m.startswith("Scorecard: overall 20 (Early)") for m in messages)
        assert not any("raw 43/100" in m for m in messages)

    def test_observer_level_threshold(self, caplog, package_logger, substantial_blog_bundle):
        """Test an INFO observer drops component lines even when the logger allows DEBUG."""
        observer = LoggingObserver(package_logger, level=logging.INFO)
        with caplog.at_level(logging.DEBUG, logger="growth_scoring"):
            GrowthScoringEngine(observer=observer).score(substantial_blog_bundle)
        messages = [r.getMessage() for r in caplog.records]
        assert not any("raw 43/100" in m for m in messages)
        assert any(m.startswith("Scorecard: overall 20") for m in messages)

    def test_label_prefix(self, caplog, package_logger, empty_bundle):
        """Test the optional label prefixes every message."""
        engine = GrowthScoringEngine(observer=LoggingObserver(package_logger, label="acme.example"))
        with caplog.at_level(logging.INFO, logger="growth_scoring"):
            engine.score(empty_bundle)
        assert caplog.records
        assert all(r.getMessage().startswith("[acme.example] ") for r in caplog.records)

    def test_engine_without_observer_is_silent(self, caplog, substantial_blog_bundle):
        """Test the default engine emits no scoring events."""
        engine = GrowthScoringEngine()
        with caplog.at_level(logging.DEBUG, logger="growth_scoring"):
            engine.score(substantial_blog_bundle)
        assert not [r for r in caplog.records if r.name == "growth_scoring"]
        assert not any("Scorecard:" in r.getMessage() for r in caplog.records)


class TestRecordingObserver:
    """Tests for the in-memory sink."""

    def test_records_every_dimension(self, trust_stack_bundle):
        """Test one component event per dimension and one scorecard."""
        observer = RecordingObserver()
        scorecard = GrowthScoringEngine(observer=observer).score(trust_stack_bundle)
        assert set(observer.components) == set(Dimension.all_dimensions())
        assert observer.raw_scores[Dimension.AUTHORITY] == 36
        assert observer.last_scorecard == scorecard
        assert len(observer.scorecards) == 1

    def test_floor_events(self, trust_stack_bundle):
        """Test fired floors are recorded with raw and adjusted scores."""
        observer = RecordingObserver()
        GrowthScoringEngine(observer=observer).score(trust_stack_bundle)
        authority_floors = observer.floors_for(Dimension.AUTHORITY)
        assert {f.rule_name for f in authority_floors} == {
            "authority_logos_and_case_studies",
            "authority_logos_case_studies_badges",
        }
        assert all(f.raw_score == 36 and f.adjusted_score == 80 for f in authority_floors)

    def test_to_dict(self, substantial_blog_bundle):
        """Test the recording serializes with string keys."""
        observer = RecordingObserver()
        GrowthScoringEngine(observer=observer).score(substantial_blog_bundle)
        data = observer.to_dict()
        assert data["raw_scores"]["content"] == 43
        assert len(data["components"]["content"]) == 8
        assert len(data["floors"]) == 3
        assert data["scorecards"][0]["overall"] == 20

    def test_empty_recording(self):
        """Test a fresh observer has nothing recorded."""
        observer = RecordingObserver()
        assert observer.last_scorecard is None
        assert observer.floors_for(Dimension.CONTENT) == []


class TestNullObserver:
    """Tests for the no-op sink."""

    def test_accepts_every_event(self, empty_bundle):
        """Test the null observer can be passed explicitly."""
        scorecard = GrowthScoringEngine(observer=NullObserver()).score(empty_bundle)
        assert scorecard.overall == 0
