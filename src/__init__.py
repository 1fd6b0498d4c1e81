"""Glossary-Term-Service: read-only programming glossary API.

Serves a static, categorized catalog of technical terms:
- Term listing with category, difficulty and free-text filters
- Term detail with computed related terms
- Category listing, catalog statistics and random sampling
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
