"""Shared test fixtures and sample collection packages."""
