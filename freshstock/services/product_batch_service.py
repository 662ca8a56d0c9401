from dataclasses import replace

from freshstock.data.repositories import ProductBatchRepository
from freshstock.domain.dates import normalize_date
from freshstock.domain.product_batch import (
    BATCH_DATE_INVALID,
    BATCH_EXISTS,
    BATCH_PRODUCT_MISSING,
    BATCH_SECTION_MISSING,
)
from freshstock.errors import DateInvalid, ForeignKeyMissing
from freshstock.services.crud_service import CrudService


class ProductBatchService(CrudService):
    """Product batches are create-only; batch_number is unique"""

    entity_name = "product batch"
    unique_field = "batch_number"
    already_exists_message = BATCH_EXISTS
    referent_errors = {
        "product_id": (ForeignKeyMissing, BATCH_PRODUCT_MISSING),
        "section_id": (ForeignKeyMissing, BATCH_SECTION_MISSING),
    }

    def __init__(self, repository=None):
        super().__init__(repository or ProductBatchRepository())

    def create(self, snapshot):
        try:
            snapshot = replace(
                snapshot,
                due_date=normalize_date(snapshot.due_date),
                manufacturing_date=normalize_date(snapshot.manufacturing_date),
            )
        except ValueError as error:
            raise DateInvalid(BATCH_DATE_INVALID) from error
        return super().create(snapshot)
