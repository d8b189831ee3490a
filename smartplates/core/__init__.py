"""Core infrastructure: configuration, persistence, caching."""
