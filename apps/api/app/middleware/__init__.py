"""Middleware for the CleanPath API."""

from app.middleware.clean_path import CleanPathMiddleware, get_raw_path, get_raw_query

__all__ = [
    "CleanPathMiddleware",
    "get_raw_path",
    "get_raw_query",
]
