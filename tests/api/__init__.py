"""API tests package.

End-to-end tests for REST API endpoints using TestClient.
Tests the complete request/response cycle including:
- Collection listing with absolute hrefs
- Request validation
- Authorization
- RFC 9457 error responses

Note:
    API tests replace repository handles with AsyncMocks to test the
    presentation layer in isolation. Use integration tests for persistence.
"""
