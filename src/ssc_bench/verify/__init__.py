"""Binding contract verification."""
