# Overview: Closed sets of roles and gated console features.

from enum import Enum


class Role(str, Enum):
    """Roles a console user can hold."""
    ADMIN = "admin"
    KASIR = "kasir"
    OWNER = "owner"

    @classmethod
    def _missing_(cls, value):
        # "petugas" is the older name for the counter-staff role
        if isinstance(value, str) and value.strip().lower() == "petugas":
            return cls.KASIR
        return None


class Feature(str, Enum):
    """Console areas gated by role."""
    DASHBOARD = "dashboard"
    CUSTOMERS = "customers"
    OUTLETS = "outlets"
    PRODUCTS = "products"
    USERS = "users"
    LAUNDRY_ITEMS = "laundryItems"
    TRANSACTIONS = "transactions"
    REPORTS = "reports"
