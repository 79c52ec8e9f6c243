# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable building blocks:
# - recipe_store.py: In-memory recipe storage
# - upstream_client.py: Async client for city-insights and weather-predictions
# - validators.py: Shape validation for upstream payloads and recipe content
# - result.py: Tagged Result / Failure types
# - utils.py: Shared utilities (error classes, id parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================
