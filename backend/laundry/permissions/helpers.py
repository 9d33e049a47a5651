# Overview: Utility functions for role lookups and feature checks.

from .categories import Feature, Role
from .definitions import ROLE_FEATURES


def parse_role(value):
    """Return the Role for a stored role string, or None if it is not a known role."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


def features_for_role(role):
    """Sorted feature codes granted to a role (empty for unknown roles)."""
    parsed = parse_role(role)
    if parsed is None:
        return []
    return sorted(feature.value for feature in ROLE_FEATURES[parsed])


def has_access(role, feature):
    """Check whether a role may use a feature."""
    parsed = parse_role(role)
    if parsed is None:
        return False
    return Feature(feature) in ROLE_FEATURES[parsed]


def validate_role(value):
    """Check if a role string is valid."""
    return parse_role(value) is not None
