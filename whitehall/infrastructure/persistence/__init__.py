"""Persistence: database session management, ORM models, and repositories."""
