"""Vercel serverless function entrypoints.

Vercel serves each module under ``api/`` at ``/api/<name>``.
"""

__all__ = []
