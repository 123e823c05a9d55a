"""Infrastructure: persistence, cache, and the external search provider client."""
