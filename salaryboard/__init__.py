"""Salary data aggregation and community trust scoring."""

__version__ = "0.1.0"
