"""Measurement and contract-verification harness for the ssc parser."""

__version__ = "0.1.0"
