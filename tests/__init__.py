# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the City Infos Gateway:
# - test_recipe_store.py: In-memory store and recipe id parsing
# - test_validators.py: Upstream shape validation and content rules
# - test_upstream_client.py: HTTP client against httpx.MockTransport
# - test_services.py: Info aggregation and recipe services
# - test_api.py: Endpoint tests through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
