#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests are pure unit tests; no database or network is needed:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Shared model builders live in tests/fixtures/engine_fixtures.py.
"""
