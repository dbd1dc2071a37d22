"""Unit tests for core reporting logic."""
