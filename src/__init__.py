"""Report dashboard service."""
