# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the bridge library:
# - test_transforms.py: Behaviour of each transform
# - test_contracts.py: Algebraic laws (identity, associativity, affixes)
# - test_registry.py: Named transform registry
# - test_engine.py: Plan execution on strings and pandas Series
# - test_config.py: Environment-driven settings
#
# Run tests with: pytest
# =============================================================================
