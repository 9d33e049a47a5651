from __future__ import annotations

from ..extensions import db
from laundry.time_utils import to_utc_z


class StorageEntry(db.Model):
    """
    One serialized collection per key.

    The whole collection for an entity (e.g. "laundryItems") is stored as JSON
    text in `value` and rewritten on every mutation. `version_id` is bumped by
    SQLAlchemy on each flush, so a writer that loaded a stale row gets a
    StaleDataError instead of silently clobbering a newer collection.
    """
    __tablename__ = "storage_entries"

    key = db.Column(db.String(120), primary_key=True)
    value = db.Column(db.Text, nullable=False)

    version_id = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return f"<StorageEntry key={self.key!r} version={self.version_id}>"

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "size": len(self.value or ""),
            "version_id": self.version_id,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }
