"""
Base persistence gateway.

Repositories turn CRUD and aggregate intents into SQLAlchemy statements on the
request-scoped session and hand back frozen snapshots. Driver failures are
classified into the domain error taxonomy here and nowhere else.
"""

from dataclasses import asdict
from typing import List, Optional, Tuple, Type

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from freshstock import db
from freshstock.domain.base import FIELD_TOO_LONG
from freshstock.errors import AlreadyExists, FieldTooLong, ForeignKeyMissing, Internal, NotFound
from freshstock.utils.logger import get_logger

logger = get_logger("freshstock.data.repositories")

DUPLICATE_KEY = "duplicate_key"
FOREIGN_KEY = "foreign_key"
DATA_TOO_LONG = "data_too_long"

# MySQL: duplicate entry, parent row missing, row still referenced, data too long
MYSQL_ERROR_CODES = {1062: DUPLICATE_KEY, 1452: FOREIGN_KEY, 1451: FOREIGN_KEY, 1406: DATA_TOO_LONG}
POSTGRES_SQLSTATES = {"23505": DUPLICATE_KEY, "23503": FOREIGN_KEY, "22001": DATA_TOO_LONG}
SQLITE_MESSAGES = (
    ("UNIQUE constraint failed", DUPLICATE_KEY),
    ("FOREIGN KEY constraint failed", FOREIGN_KEY),
)


def classify_driver_error(error: SQLAlchemyError) -> Optional[str]:
    """
    Classify a driver error raised through SQLAlchemy.

    Args:
        error: The exception raised by the session

    Returns:
        One of DUPLICATE_KEY, FOREIGN_KEY, DATA_TOO_LONG, or None when the
        error is not one the domain knows about
    """
    if not isinstance(error, DBAPIError):
        return None
    orig = error.orig

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in MYSQL_ERROR_CODES:
        return MYSQL_ERROR_CODES[args[0]]

    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in POSTGRES_SQLSTATES:
        return POSTGRES_SQLSTATES[sqlstate]

    text = str(orig)
    for needle, kind in SQLITE_MESSAGES:
        if needle in text:
            return kind
    return None


class SqlRepository:
    """
    CRUD gateway for one model.

    Subclasses configure:
        model: The SQLAlchemy model class
        not_found_message: Template formatted with `id`
        already_exists_message: Template formatted with the snapshot's fields
        foreign_key_message: Message for an unresolved foreign key
        unique_field: Column checked by exists()
        references: (field, model) pairs probed to name the missing referent
    """

    model = None
    not_found_message = "not found"
    already_exists_message = "already exists"
    foreign_key_message = "a column table constraint fails"
    unique_field = None
    references: Tuple[Tuple[str, Type], ...] = ()

    def get_all(self) -> List:
        try:
            rows = db.session.scalars(select(self.model).order_by(self.model.id)).all()
        except SQLAlchemyError as error:
            raise Internal(str(error)) from error
        return [row.to_snapshot() for row in rows]

    def get(self, entity_id):
        try:
            row = db.session.get(self.model, entity_id)
        except SQLAlchemyError as error:
            raise Internal(str(error)) from error
        if row is None:
            raise NotFound(self.not_found_message.format(id=entity_id))
        return row.to_snapshot()

    def exists(self, value) -> bool:
        """Advisory uniqueness check; the storage constraint stays authoritative"""
        column = getattr(self.model, self.unique_field)
        try:
            return bool(db.session.scalar(select(exists().where(column == value))))
        except SQLAlchemyError as error:
            raise Internal(str(error)) from error

    def save(self, snapshot) -> int:
        """
        Insert a snapshot.

        Returns:
            The id assigned by the database (or the caller-supplied key)

        Raises:
            AlreadyExists, ForeignKeyMissing, FieldTooLong, Internal
        """
        row = self.model.from_snapshot(snapshot)
        try:
            db.session.add(row)
            db.session.commit()
            return row.id
        except SQLAlchemyError as error:
            db.session.rollback()
            raise self._translate(error, snapshot) from error

    def update(self, snapshot) -> None:
        try:
            row = db.session.get(self.model, snapshot.id)
        except SQLAlchemyError as error:
            raise Internal(str(error)) from error
        if row is None:
            raise NotFound(self.not_found_message.format(id=snapshot.id))
        try:
            row.apply_snapshot(snapshot)
            db.session.commit()
        except SQLAlchemyError as error:
            db.session.rollback()
            raise self._translate(error, snapshot) from error

    def delete(self, entity_id) -> None:
        try:
            result = db.session.execute(delete(self.model).where(self.model.id == entity_id))
            db.session.commit()
        except SQLAlchemyError as error:
            db.session.rollback()
            raise self._translate(error) from error
        if result.rowcount < 1:
            raise NotFound(self.not_found_message.format(id=entity_id))

    def _aggregate(self, statement, parent_column, parent_id, snapshot_class, not_found_message) -> List:
        """
        Run a pre-aggregated report query.

        Columns of the statement must follow the snapshot's field order. When
        parent_id is given and matches nothing, NotFound is raised.
        """
        if parent_id is not None:
            statement = statement.where(parent_column == parent_id)
        try:
            rows = db.session.execute(statement).all()
        except SQLAlchemyError as error:
            raise Internal(str(error)) from error
        if parent_id is not None and not rows:
            raise NotFound(not_found_message.format(id=parent_id))
        return [snapshot_class(*row) for row in rows]

    def _translate(self, error: SQLAlchemyError, snapshot=None) -> Exception:
        kind = classify_driver_error(error)
        if kind == DUPLICATE_KEY:
            return AlreadyExists(self.already_exists_message.format(**asdict(snapshot)) if snapshot else self.already_exists_message)
        if kind == FOREIGN_KEY:
            return ForeignKeyMissing(self.foreign_key_message, field=self._missing_reference(snapshot))
        if kind == DATA_TOO_LONG:
            return FieldTooLong(FIELD_TOO_LONG)
        logger.error(f"Unclassified storage error on {self.model.__tablename__}: {error}")
        return Internal(str(error))

    def _missing_reference(self, snapshot) -> Optional[str]:
        """Name the first referencing field whose row does not exist"""
        if snapshot is None:
            return None
        for field, model in self.references:
            value = getattr(snapshot, field, None)
            if value is None:
                continue
            try:
                if db.session.get(model, value) is None:
                    return field
            except SQLAlchemyError as error:
                logger.warning(f"Could not probe {model.__tablename__} for {field}={value}: {error}")
                return None
        return None
