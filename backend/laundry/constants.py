# Overview: Storage keys and status vocabularies shared by services and routes.


class Entity:
    """Storage keys for each record collection."""
    USERS = "users"
    CUSTOMERS = "customers"
    OUTLETS = "outlets"
    PRODUCTS = "products"
    LAUNDRY_ITEMS = "laundryItems"
    TRANSACTIONS = "transactions"
    SESSIONS = "sessions"

    ALL = (USERS, CUSTOMERS, OUTLETS, PRODUCTS, LAUNDRY_ITEMS, TRANSACTIONS, SESSIONS)


class ProcessStatus:
    PROSES = "proses"
    SELESAI = "selesai"
    BATAL = "batal"

    ALL = (PROSES, SELESAI, BATAL)


class PaymentStatus:
    BELUM_BAYAR = "belum bayar"
    SUDAH_BAYAR = "sudah bayar"
    REFUND = "refund"

    ALL = (BELUM_BAYAR, SUDAH_BAYAR, REFUND)


class ProductType:
    KILOAN = "kiloan"
    SATUAN = "satuan"

    ALL = (KILOAN, SATUAN)


class LegacyTransactionStatus:
    """Status values carried by multi-item sale transactions."""
    COMPLETED = "completed"
    PROCESSING = "processing"
    CANCELLED = "cancelled"

    ALL = (COMPLETED, PROCESSING, CANCELLED)
