# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the settings API:
# - test_models.py: Pydantic model validation and camelCase aliases
# - test_authorization.py: Admin capability check
# - test_config_store.py: Settings store against an in-memory database
# - test_supabase_client.py: Query building and error mapping
# - test_config.py: Environment configuration
# - test_api.py: HTTP endpoints end to end, concurrent requests
#
# Run tests with: pytest
# =============================================================================
