"""
Role/feature table tests.
"""

import pytest

from laundry.permissions import (
    Feature,
    ROLE_FEATURES,
    Role,
    features_for_role,
    has_access,
    parse_role,
    validate_role,
)


def test_every_role_has_an_entry():
    assert set(ROLE_FEATURES) == set(Role)


def test_admin_has_every_feature():
    assert features_for_role("admin") == sorted(f.value for f in Feature)


@pytest.mark.parametrize("role,feature,allowed", [
    ("kasir", Feature.CUSTOMERS, True),
    ("kasir", Feature.LAUNDRY_ITEMS, True),
    ("kasir", Feature.TRANSACTIONS, True),
    ("kasir", Feature.REPORTS, True),
    ("kasir", Feature.OUTLETS, False),
    ("kasir", Feature.PRODUCTS, False),
    ("kasir", Feature.USERS, False),
    ("owner", Feature.DASHBOARD, True),
    ("owner", Feature.REPORTS, True),
    ("owner", Feature.CUSTOMERS, False),
    ("owner", Feature.LAUNDRY_ITEMS, False),
    ("admin", Feature.USERS, True),
])
def test_has_access(role, feature, allowed):
    assert has_access(role, feature) is allowed


def test_feature_may_be_given_by_value():
    assert has_access("kasir", "laundryItems")
    assert not has_access("owner", "transactions")


def test_petugas_is_kasir():
    assert parse_role("petugas") is Role.KASIR
    assert parse_role("Petugas") is Role.KASIR
    assert has_access("petugas", Feature.LAUNDRY_ITEMS)


@pytest.mark.parametrize("role", [None, "", "manager", "ADMIN "])
def test_unknown_roles_get_nothing(role):
    assert parse_role(role) is None
    assert not validate_role(role)
    assert features_for_role(role) == []
    assert not has_access(role, Feature.DASHBOARD)
