# Overview: Role to feature grants.
# Every Role must appear as a key; the table is checked at import time.

from .categories import Feature, Role


ROLE_FEATURES: dict[Role, frozenset[Feature]] = {
    Role.ADMIN: frozenset(Feature),
    Role.KASIR: frozenset({
        Feature.DASHBOARD,
        Feature.CUSTOMERS,
        Feature.LAUNDRY_ITEMS,
        Feature.TRANSACTIONS,
        Feature.REPORTS,
    }),
    Role.OWNER: frozenset({
        Feature.DASHBOARD,
        Feature.REPORTS,
    }),
}

_missing_roles = set(Role) - set(ROLE_FEATURES)
if _missing_roles:
    raise RuntimeError(f"ROLE_FEATURES has no entry for: {sorted(r.value for r in _missing_roles)}")
