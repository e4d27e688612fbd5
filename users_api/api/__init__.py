"""
HTTP layer for the Users API: routers, middleware and exception handlers.
"""
