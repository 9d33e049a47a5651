# Overview: Role and feature access package.
# Re-exports all public APIs for short imports.

from .categories import Role, Feature
from .definitions import ROLE_FEATURES
from .helpers import (
    parse_role,
    features_for_role,
    has_access,
    validate_role,
)

__all__ = [
    "Role",
    "Feature",
    "ROLE_FEATURES",
    "parse_role",
    "features_for_role",
    "has_access",
    "validate_role",
]
