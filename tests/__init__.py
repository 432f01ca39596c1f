"""Tests for the relevantwords package."""
