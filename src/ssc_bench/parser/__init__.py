"""Adapter and root decoding for the native parser binding."""
