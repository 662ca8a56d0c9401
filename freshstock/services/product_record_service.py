from dataclasses import replace

from freshstock.data.repositories import ProductRecordRepository
from freshstock.domain.dates import format_date, parse_date, local_today
from freshstock.domain.product_record import RECORD_DATE_INVALID, RECORD_DATE_PAST, RECORD_PRODUCT_MISSING
from freshstock.errors import DateInvalid, DatePast, ForeignKeyMissing
from freshstock.services.crud_service import CrudService


class ProductRecordService(CrudService):
    """
    Product records are dated price snapshots.

    The date must be today or later (server local date) at the moment of creation; the
    created record is answered as re-read from storage.
    """

    entity_name = "product record"
    referent_errors = {"product_id": (ForeignKeyMissing, RECORD_PRODUCT_MISSING)}

    def __init__(self, repository=None):
        super().__init__(repository or ProductRecordRepository())

    def create(self, snapshot):
        try:
            last_update = parse_date(snapshot.last_update_date)
        except ValueError as error:
            raise DateInvalid(RECORD_DATE_INVALID) from error
        if last_update < local_today():
            raise DatePast(RECORD_DATE_PAST)

        created = super().create(replace(snapshot, last_update_date=format_date(last_update)))
        return self.repository.get(created.id)
