"""Sawtooth CLI signing support."""

__version__ = "0.1.0"
