"""Learnio media upload service."""

__version__ = "0.1.0"
