"""Blocked (spatial / environmental / random) cross-validation for regression models."""

__version__ = "0.1.0"
