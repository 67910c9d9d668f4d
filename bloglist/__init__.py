"""
Bloglist Backend Application root package.

This package contains the FastAPI app entry point (main.py), API routes,
the authorization gate and blog use cases, the corpus statistics, and the
MongoDB infrastructure.
"""
