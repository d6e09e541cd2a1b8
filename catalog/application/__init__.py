"""Application layer: services composing domain objects."""
