"""Catalog API - REST collections assembled from self-registering resources."""
