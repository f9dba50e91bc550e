"""
JSON:API Movie Ratings Service Package.

This package contains the REST API, request validation, response shaping
and database operations for movies, movie ratings and per-user ratings.
"""

__version__ = "1.0.0"
