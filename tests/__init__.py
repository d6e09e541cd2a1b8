"""Test suite for the catalog API.

Test structure follows the test pyramid:
- unit/: Unit tests - registry, domain and adapters in isolation
- integration/: Integration tests - repositories against a real SQLite database
- api/: API endpoint tests - HTTP endpoints through TestClient
"""
