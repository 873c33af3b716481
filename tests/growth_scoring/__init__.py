"""
Tests for the Growth Scoring Engine.

This package contains tests for:
- Component scorers and the step helper
- Dimension aggregation and overall blending
- The floor table and floor engine
- Input normalization and validation
- Configuration and observers
- End-to-end engine scenarios
"""
