"""Error types and HTTP error handlers."""
