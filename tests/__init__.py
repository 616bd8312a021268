"""
Test Suite for Localeapp Sync

Test Organization:
- tests/unit/: Tests for individual modules
- tests/integration/: Full pipeline and CLI runs
- tests/fixtures/: Sample locale documents
- tests/mocks/: Mock implementation of the localeapp gem

Running Tests:
    pytest tests/
    pytest --cov=localeapp_sync tests/
    python3 run_tests.py --unit
"""
