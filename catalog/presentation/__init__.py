"""Presentation layer: HTTP dispatch, resources and error responses."""
