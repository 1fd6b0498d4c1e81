"""FastAPI routes and endpoints.

Endpoints:
- GET /health: Service health status
- GET /ready: Readiness probe (catalog loaded)
- GET /api/terms, /api/terms/{id}, /api/random: Term queries
- GET /api/categories, /api/stats: Catalog overview

Routes are thin: parameters are parsed here and handed to src.engine.
"""
