"""Error types and CLI error handling."""
