"""REST API for SmartPlates."""
