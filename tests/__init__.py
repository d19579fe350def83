"""
Tests Package - Unit and integration tests for GradCompass.
===========================================================

Test modules:
- test_search: Facets, suggestions, resolver and filter tests
- test_catalog: Catalog loading and mentor directory tests
- test_journey: Profile store, auth and session tests
- test_advisory: Advisory text tests (mocked Gemini)
- test_cli: CLI smoke tests

Run tests with:
    pytest tests/
    pytest tests/ -v
"""
