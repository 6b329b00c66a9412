"""
Shared pytest fixtures.
"""

from test_fixtures import (  # noqa: F401
    other_validating_user,
    portuguese_translator,
    translation_cache,
    user,
    validating_user,
)
