"""Infrastructure layer: persistence (SQLAlchemy) and cache (Redis)."""
