"""Two resources claiming the same path."""
