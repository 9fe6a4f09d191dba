"""Dependency graph core for the model-of-interest dashboard view."""

__version__ = "0.1.0"
