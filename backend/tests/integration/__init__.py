"""
Integration Tests

Integration tests require a running PostgreSQL server reachable with the
POSTGRES_TEST_* credentials. They are skipped when it cannot be reached.

These tests verify that all components work together correctly.
"""
