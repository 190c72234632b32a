"""Closest pair of points by brute force and divide and conquer, with quartile statistics and a timing benchmark."""

__version__ = "0.1.0"
__all__ = ["geometry", "divide", "stats", "bench"]