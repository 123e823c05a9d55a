"""Use cases: orchestration of application services for API endpoints."""

from whitehall.application.use_cases.document_filter import DocumentFilterService

__all__ = ["DocumentFilterService"]
