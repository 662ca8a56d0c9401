"""
Snapshot conversion mixin for SQLAlchemy models
Provides from_snapshot, to_snapshot and apply_snapshot so repositories never
hand ORM rows to the layers above them.
"""

from dataclasses import fields
from datetime import date
from sqlalchemy import inspect
from freshstock.domain.dates import format_date, parse_date


class SnapshotMixin:
    """
    Mixin that maps a model to its immutable domain snapshot

    Subclasses set `snapshot_class` to the frozen dataclass they map to. Date
    columns are exposed to the domain as yyyy-mm-dd strings.
    """

    snapshot_class = None

    @classmethod
    def _column_keys(cls):
        return {c.key for c in inspect(cls).columns}

    @classmethod
    def _to_column_value(cls, key, value):
        column = inspect(cls).columns[key]
        if isinstance(value, str) and column.type.python_type is date:
            return parse_date(value)
        return value

    @classmethod
    def from_snapshot(cls, snapshot):
        """
        Create a model instance from a snapshot

        Args:
            snapshot: Domain snapshot; an id of None lets the database assign one

        Returns:
            Model instance (not added to the session)
        """
        columns = cls._column_keys()
        values = {}
        for field in fields(snapshot):
            if field.name not in columns:
                continue
            value = getattr(snapshot, field.name)
            if field.name == 'id' and value is None:
                continue
            values[field.name] = cls._to_column_value(field.name, value)
        return cls(**values)

    def apply_snapshot(self, snapshot):
        """Copy every non-key field of the snapshot onto this row"""
        columns = self._column_keys()
        for field in fields(snapshot):
            if field.name == 'id' or field.name not in columns:
                continue
            setattr(self, field.name, self._to_column_value(field.name, getattr(snapshot, field.name)))

    def to_snapshot(self):
        values = {}
        for field in fields(self.snapshot_class):
            value = getattr(self, field.name)
            if isinstance(value, date):
                value = format_date(value)
            values[field.name] = value
        return self.snapshot_class(**values)
