"""Fixture manifest and on-disk fixture cache."""
