"""Tests for the reference adapters."""
