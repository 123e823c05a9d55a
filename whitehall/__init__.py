"""Whitehall document filter service: faceted search over published editions."""
