"""Infrastructure adapters: logging, persistence, authorization."""
