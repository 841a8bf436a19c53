"""
Unit Tests

Unit tests run in isolation without external dependencies.
The database session is mocked or the services are overridden.

These tests are fast and can run without Docker or any services running.
"""
