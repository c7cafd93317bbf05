"""Infrastructure layer for the report dashboard."""
