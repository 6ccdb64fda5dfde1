"""
Unit Tests for game_search

This package contains unit tests for all library components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=game_search --cov-report=html

    # Run specific test
    pytest tests/test_enumerator.py::TestEnumerateChildren::test_restartable

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
