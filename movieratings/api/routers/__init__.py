"""
API route handlers.
"""

from movieratings.api.routers import movies, movieratings, usermovieratings, system

__all__ = ["movies", "movieratings", "usermovieratings", "system"]
