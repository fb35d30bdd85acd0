"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin: it dispatches commands/queries to the application layer and
translates results to HTTP responses.

Structure:
- routers/system.py: non-versioned system endpoints
- routers/api/v1/: API version 1 endpoints (route registry)
- routers/api/middleware/: trace middleware
"""
