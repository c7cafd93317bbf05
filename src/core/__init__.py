"""Configuration and API error types."""
