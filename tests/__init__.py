"""Test suite for the growth-scoring package."""
