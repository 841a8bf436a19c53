"""
Study Tracker Test Suite

Test Structure:
    tests/
    ├── conftest.py          # Shared fixtures and test environment
    ├── unit/                # Unit tests (isolated, database mocked)
    │   ├── test_streak_tracking.py   # Streak calculation
    │   ├── test_suggestions.py       # Lagging-subject heuristic
    │   ├── test_dashboard_service.py # Dashboard aggregation
    │   └── test_api_routes.py        # Routes with overridden dependencies
    └── integration/         # Integration tests (require PostgreSQL)
        └── test_study_api.py         # HTTP API against a real database

Running Tests:
    # Run all tests
    pytest -v

    # Run only unit tests (fast, no dependencies)
    pytest backend/tests/unit/ -v

    # Run only integration tests (requires PostgreSQL, see POSTGRES_TEST_*)
    pytest -m integration -v
"""
