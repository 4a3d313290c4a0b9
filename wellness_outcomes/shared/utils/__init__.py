"""Shared utilities for the Wellness Outcomes platform."""
from .rounding import round1, round_int, safe_mean, safe_percent, safe_ratio

__all__ = ["round1", "round_int", "safe_mean", "safe_percent", "safe_ratio"]
