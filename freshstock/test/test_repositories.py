"""
Tests for driver error classification and repository error translation
"""
from sqlalchemy.exc import IntegrityError, OperationalError

from freshstock.data.repositories.base import (
    DATA_TOO_LONG,
    DUPLICATE_KEY,
    FOREIGN_KEY,
    classify_driver_error,
)
from freshstock.data.repositories import BuyerRepository, EmployeeRepository, ProductRecordRepository
from freshstock.domain.buyer import Buyer
from freshstock.domain.employee import Employee
from freshstock.domain.product_record import ProductRecord
from freshstock.errors import AlreadyExists, ForeignKeyMissing, Internal
from freshstock.test import factories


class MySQLError(Exception):
    """Shaped like a pymysql error: args[0] is the server error code"""


class PostgresError(Exception):
    def __init__(self, message, pgcode):
        super().__init__(message)
        self.pgcode = pgcode


def wrap(orig):
    return IntegrityError('INSERT ...', {}, orig)


def test_classify_mysql_codes():
    assert classify_driver_error(wrap(MySQLError(1062, "Duplicate entry '1' for key 'cid'"))) == DUPLICATE_KEY
    assert classify_driver_error(wrap(MySQLError(1452, 'Cannot add or update a child row'))) == FOREIGN_KEY
    assert classify_driver_error(wrap(MySQLError(1451, 'Cannot delete or update a parent row'))) == FOREIGN_KEY
    assert classify_driver_error(wrap(MySQLError(1406, 'Data too long for column'))) == DATA_TOO_LONG


def test_classify_postgres_sqlstates():
    assert classify_driver_error(wrap(PostgresError('duplicate key', '23505'))) == DUPLICATE_KEY
    assert classify_driver_error(wrap(PostgresError('violates foreign key', '23503'))) == FOREIGN_KEY
    assert classify_driver_error(wrap(PostgresError('value too long', '22001'))) == DATA_TOO_LONG


def test_classify_sqlite_messages():
    assert classify_driver_error(wrap(Exception('UNIQUE constraint failed: buyers.card_number_id'))) == DUPLICATE_KEY
    assert classify_driver_error(wrap(Exception('FOREIGN KEY constraint failed'))) == FOREIGN_KEY


def test_classify_unknown_errors():
    assert classify_driver_error(OperationalError('SELECT 1', {}, Exception('database is locked'))) is None
    assert classify_driver_error(wrap(MySQLError(2006, 'MySQL server has gone away'))) is None


def test_translate_duplicate_formats_message():
    error = BuyerRepository()._translate(wrap(Exception('UNIQUE constraint failed')), Buyer(None, '001', 'a', 'b'))

    assert isinstance(error, AlreadyExists)
    assert error.message == 'card_number_id already exists'


def test_translate_unknown_error_is_internal(app):
    error = BuyerRepository()._translate(OperationalError('SELECT 1', {}, Exception('disk I/O error')))

    assert isinstance(error, Internal)
    assert error.status_code == 500


def test_save_names_missing_referent(app):
    repository = EmployeeRepository()

    try:
        repository.save(Employee(None, 'E-1', 'Ana', 'Lopez', 5))
    except ForeignKeyMissing as error:
        assert error.field == 'warehouse_id'
    else:
        raise AssertionError("Saving an employee of a missing warehouse should fail")


def test_save_then_get_round_trips_dates(app, seed):
    seed(factories.product())
    repository = ProductRecordRepository()
    new_id = repository.save(ProductRecord(None, '2030-05-06', 1.5, 2.5, 1))

    assert repository.get(new_id).last_update_date == '2030-05-06'
    assert [record.id for record in repository.get_all()] == [new_id]
