"""
API layer for the bloglist backend.

Exposes HTTP endpoints under /api (login, users, blogs, blog statistics)
plus a /health check.
"""
