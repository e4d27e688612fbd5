"""
Users API — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user domain (model, repository contract, errors), request validation,
and the in-memory storage backend.
"""
