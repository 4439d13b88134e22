"""Benchmark runner and CI artifact writer."""
