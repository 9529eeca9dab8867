"""Medication adherence tracker for a single patient."""

__version__ = "0.1.0"
